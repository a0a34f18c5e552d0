"""Record types for students, courses and enrolments.

Nothing here is persisted: the values are frozen dataclasses owned by
`records.store.RecordStore`. Callers only ever see these immutable
values, never the store's internal lists.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Student:
    """A student identified by a store-assigned integer."""

    id: int
    name: str
    email: str


@dataclass(frozen=True)
class Course:
    """A course identified by a store-assigned integer and a unique code."""

    id: int
    title: str
    code: str


@dataclass(frozen=True)
class Enrolment:
    """Link a student to a course.

    Enrolments carry no identity of their own; the (student_id, course_id)
    pair is unique within a store.
    """

    student_id: int
    course_id: int

    @property
    def key(self) -> tuple[int, int]:
        return (self.student_id, self.course_id)


@dataclass(frozen=True)
class EnrolmentRow:
    student_name: str
    course_title: str


@dataclass(frozen=True)
class CourseRow:
    code: str
    title: str


@dataclass(frozen=True)
class StudentRow:
    id: int
    name: str


@dataclass(frozen=True)
class Listing:
    """Result of a listing or join query.

    An empty listing is the "no data" outcome. It is never raised as an
    error; `empty_message` says what to show instead of a table. Per-entity
    queries also set `banner` (e.g. "Courses Enrolled by Ann Lee:").
    """

    columns: tuple[str, ...]
    rows: tuple[Any, ...] = ()
    empty_message: str = ""
    banner: str | None = None

    @property
    def empty(self) -> bool:
        return not self.rows

    def __len__(self) -> int:
        return len(self.rows)

    def __iter__(self):
        return iter(self.rows)
