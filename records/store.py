"""In-memory record store for students, courses and enrolments.

The store owns three append-only collections and two identity counters.
It trusts callers for field format and e-mail/code uniqueness (see
`records.validators`) and enforces only what it must itself:

- enrolments reference an existing student and course
- a (student, course) pair is enrolled at most once

Lookups are linear scans over small lists. If the data set grows, swap
`_find_student` / `_find_course` for identity-keyed dicts; nothing
outside this module depends on the list layout.
"""
from __future__ import annotations

import logging
import threading

from .exceptions import DuplicateEnrolment, InvariantViolation, RecordNotFound
from .models import Course, CourseRow, Enrolment, EnrolmentRow, Listing, Student, StudentRow

logger = logging.getLogger(__name__)


class RecordStore:
    """Explicitly constructed store; pass the instance to whoever needs it."""

    def __init__(self) -> None:
        self._students: list[Student] = []
        self._courses: list[Course] = []
        self._enrolments: list[Enrolment] = []
        self.next_student_id = 1
        self.next_course_id = 1
        # Mutations are serialised so a store shared across threads keeps its invariants
        self._lock = threading.RLock()

    # Snapshots for callers (validation layer checks uniqueness against these)

    @property
    def students(self) -> tuple[Student, ...]:
        return tuple(self._students)

    @property
    def courses(self) -> tuple[Course, ...]:
        return tuple(self._courses)

    @property
    def enrolments(self) -> tuple[Enrolment, ...]:
        return tuple(self._enrolments)

    # --- creation ---

    def add_student(self, name: str, email: str) -> Student:
        """Create a student with the next identity and return it."""
        with self._lock:
            student = Student(self.next_student_id, name, email)
            self._students.append(student)
            self.next_student_id += 1
        logger.info("Student created: id=%s email=%s", student.id, student.email)
        return student

    def add_course(self, title: str, code: str) -> Course:
        """Create a course with the next identity and return it."""
        with self._lock:
            course = Course(self.next_course_id, title, code)
            self._courses.append(course)
            self.next_course_id += 1
        logger.info("Course created: id=%s code=%s", course.id, course.code)
        return course

    # --- enrolment ---

    def enroll(self, student_id: int, course_id: int) -> tuple[Student, Course]:
        """Enrol a student in a course.

        Checks run in a fixed order: student exists, course exists, pair
        not yet enrolled. The first failing check raises; nothing is
        recorded in that case.
        """
        with self._lock:
            student = self._find_student(student_id)
            if student is None:
                logger.warning("Enrolment rejected: student %s not found", student_id)
                raise RecordNotFound("student", student_id)
            course = self._find_course(course_id)
            if course is None:
                logger.warning("Enrolment rejected: course %s not found", course_id)
                raise RecordNotFound("course", course_id)
            if self.is_enrolled(student_id, course_id):
                logger.warning("Enrolment rejected: student %s already in course %s", student_id, course_id)
                raise DuplicateEnrolment(student_id, course_id)
            self._enrolments.append(Enrolment(student_id, course_id))
        logger.info("Enrolled student %s in course %s", student_id, course_id)
        return student, course

    def is_enrolled(self, student_id: int, course_id: int) -> bool:
        return any(e.key == (student_id, course_id) for e in self._enrolments)

    # --- lookups ---

    def get_student(self, student_id: int) -> Student:
        student = self._find_student(student_id)
        if student is None:
            raise RecordNotFound("student", student_id)
        return student

    def get_course(self, course_id: int) -> Course:
        course = self._find_course(course_id)
        if course is None:
            raise RecordNotFound("course", course_id)
        return course

    def _find_student(self, student_id: int) -> Student | None:
        return next((s for s in self._students if s.id == student_id), None)

    def _find_course(self, course_id: int) -> Course | None:
        return next((c for c in self._courses if c.id == course_id), None)

    def _join_student(self, enrolment: Enrolment) -> Student:
        student = self._find_student(enrolment.student_id)
        if student is None:
            raise InvariantViolation(f"Enrolment {enrolment.key} references missing student {enrolment.student_id}")
        return student

    def _join_course(self, enrolment: Enrolment) -> Course:
        course = self._find_course(enrolment.course_id)
        if course is None:
            raise InvariantViolation(f"Enrolment {enrolment.key} references missing course {enrolment.course_id}")
        return course

    # --- queries ---

    def list_students(self) -> Listing:
        return Listing(
            columns=("ID", "Name", "Email"),
            rows=tuple(self._students),
            empty_message="No students found.",
        )

    def list_courses(self) -> Listing:
        return Listing(
            columns=("ID", "Title", "Code"),
            rows=tuple(self._courses),
            empty_message="No courses found.",
        )

    def list_enrolments(self) -> Listing:
        """Every enrolment as (student name, course title), oldest first."""
        rows = tuple(
            EnrolmentRow(self._join_student(e).name, self._join_course(e).title)
            for e in self._enrolments
        )
        return Listing(columns=("Student", "Course"), rows=rows, empty_message="No enrollments.")

    def courses_for_student(self, student_id: int) -> Listing:
        """Courses a student is enrolled in, in enrolment order.

        Raises `RecordNotFound` for an unknown student; a known student
        with no enrolments yields an empty listing instead.
        """
        student = self.get_student(student_id)
        rows = tuple(
            CourseRow(course.code, course.title)
            for course in (self._join_course(e) for e in self._enrolments if e.student_id == student_id)
        )
        return Listing(
            columns=("Code", "Course Title"),
            rows=rows,
            empty_message=f"No courses found for {student.name}.",
            banner=f"Courses Enrolled by {student.name}:",
        )

    def students_in_course(self, course_id: int) -> Listing:
        """Students enrolled in a course, in enrolment order."""
        course = self.get_course(course_id)
        rows = tuple(
            StudentRow(student.id, student.name)
            for student in (self._join_student(e) for e in self._enrolments if e.course_id == course_id)
        )
        return Listing(
            columns=("ID", "Student Name"),
            rows=rows,
            empty_message=f"No students enrolled in {course.title}.",
            banner=f"Students Registered for {course.title}:",
        )
