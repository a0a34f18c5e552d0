"""Interactive console for managing students, courses and enrolments.

Usage: ``python manage.py rollbook [--no-color]``

The command owns one `RecordStore` for the lifetime of the session and
drives it from a numbered menu. Free-text fields are re-prompted until
their validation pipeline accepts them; the store only ever receives
cleaned values.
"""
from __future__ import annotations

import logging
import sys

from django.conf import settings
from django.core.exceptions import ValidationError
from django.core.management.base import BaseCommand, CommandError
from django.core.management.color import supports_color

from records.exceptions import RecordStoreError
from records.forms import CourseForm, CourseLookupForm, EnrolmentForm, StudentForm, StudentLookupForm
from records.rendering import Renderer
from records.store import RecordStore

logger = logging.getLogger(__name__)

MENU = (
    "1. Create Student\n2. List Students\n3. Create Course\n4. List Courses\n"
    "5. Enroll Student in Course\n6. List Enrollments\n7. Find Courses by Student\n"
    "8. Find Students by Course\n9. Exit"
)
EXIT_CHOICE = 9


class EndOfInput(Exception):
    """Raised when stdin is exhausted mid-session."""


class Command(BaseCommand):
    help = "Run the interactive student/course record console."

    requires_system_checks: list[str] = []
    # Lets tests feed a scripted session through call_command(stdin=...)
    stealth_options = ("stdin",)

    def handle(self, *args, **options):
        self.stdin = options.get("stdin") or sys.stdin
        color = settings.ROLLBOOK.get("COLOR", True) and not options.get("no_color")
        if color and not options.get("force_color"):
            color = supports_color()
        self.renderer = Renderer(color=color)
        self.store = RecordStore()

        actions = {
            1: self.create_student,
            2: lambda: self.out(self.renderer.table(self.store.list_students())),
            3: self.create_course,
            4: lambda: self.out(self.renderer.table(self.store.list_courses())),
            5: self.enroll,
            6: lambda: self.out(self.renderer.table(self.store.list_enrolments())),
            7: self.courses_for_student,
            8: self.students_in_course,
        }

        logger.debug("Console session started")
        try:
            while True:
                self.out("\n" + self.renderer.heading("--- Student-Course Management System ---"))
                self.out(MENU)
                choice = self._parse_choice(self.read("Enter choice: "))
                if choice == EXIT_CHOICE:
                    break
                action = actions.get(choice)
                if action is None:
                    self.out(self.renderer.error("Invalid Choice."))
                    continue
                action()
        except EndOfInput:
            self.out("")
        except KeyboardInterrupt:
            raise CommandError("Interrupted.")
        self.out(self.renderer.heading("Goodbye!"))
        logger.debug("Console session ended")

    # --- I/O helpers ---

    def out(self, text: str) -> None:
        self.stdout.write(text)

    def read(self, prompt: str) -> str:
        self.stdout.write(prompt, ending="")
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            raise EndOfInput
        return line.rstrip("\r\n")

    def ask(self, prompt: str, clean) -> object:
        """Prompt until `clean` accepts the input; show each rejection."""
        while True:
            raw = self.read(prompt)
            try:
                return clean(raw)
            except ValidationError as exc:
                for message in exc.messages:
                    self.out(self.renderer.error(message))

    def ask_field(self, prompt: str, form_class, field: str, **form_kwargs) -> str:
        """Prompt for one form field, re-asking with the form's own errors."""

        def _clean(raw: str) -> str:
            form = form_class({field: raw}, **form_kwargs)
            form.is_valid()
            if field in form.errors:
                raise ValidationError(list(form.errors[field]))
            return form.cleaned_data[field]

        return self.ask(prompt, _clean)

    def ask_id(self, prompt: str, form_class, field: str) -> int:
        def _clean(raw: str) -> int:
            form = form_class({field: raw.strip()})
            form.is_valid()
            if field in form.errors:
                raise ValidationError(f"{prompt.rstrip(': ')} must be a positive whole number.")
            return form.cleaned_data[field]

        return self.ask(prompt, _clean)

    @staticmethod
    def _parse_choice(raw: str) -> int | None:
        try:
            return int(raw.strip())
        except ValueError:
            return None

    # --- menu actions ---

    def create_student(self) -> None:
        limits = settings.ROLLBOOK
        name = self.ask_field(
            f"Enter Name ({limits['NAME_MIN_LENGTH']}-{limits['NAME_MAX_LENGTH']} chars): ",
            StudentForm, "name", store=self.store,
        )
        email = self.ask_field("Enter Email: ", StudentForm, "email", store=self.store)
        student = self.store.add_student(name, email)
        self.out(self.renderer.student_created(student))

    def create_course(self) -> None:
        limits = settings.ROLLBOOK
        title = self.ask_field(
            f"Course Title ({limits['TITLE_MIN_LENGTH']}-{limits['TITLE_MAX_LENGTH']} chars): ",
            CourseForm, "title", store=self.store,
        )
        code = self.ask_field(
            f"Course Code ({limits['CODE_MIN_LENGTH']}-{limits['CODE_MAX_LENGTH']} chars): ",
            CourseForm, "code", store=self.store,
        )
        course = self.store.add_course(title, code)
        self.out(self.renderer.course_created(course))

    def enroll(self) -> None:
        student_id = self.ask_id("Student ID: ", EnrolmentForm, "student_id")
        course_id = self.ask_id("Course ID: ", EnrolmentForm, "course_id")
        try:
            student, course = self.store.enroll(student_id, course_id)
        except RecordStoreError as exc:
            self.out(self.renderer.rejection(exc))
            return
        self.out(self.renderer.enrolled(student, course))

    def courses_for_student(self) -> None:
        student_id = self.ask_id("Student ID: ", StudentLookupForm, "student_id")
        try:
            listing = self.store.courses_for_student(student_id)
        except RecordStoreError as exc:
            self.out(self.renderer.rejection(exc))
            return
        self.out(self.renderer.table(listing))

    def students_in_course(self) -> None:
        course_id = self.ask_id("Course ID: ", CourseLookupForm, "course_id")
        try:
            listing = self.store.students_in_course(course_id)
        except RecordStoreError as exc:
            self.out(self.renderer.rejection(exc))
            return
        self.out(self.renderer.table(listing))
