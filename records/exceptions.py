"""Errors raised by the record store.

`RecordNotFound` and `DuplicateEnrolment` are recoverable: the console
catches them and shows a message. `InvariantViolation` is deliberately
outside `RecordStoreError` so nothing that handles ordinary rejections
swallows it.
"""
from __future__ import annotations


class RecordStoreError(Exception):
    """Base class for rejections the caller is expected to render."""


class RecordNotFound(RecordStoreError):
    """No student or course carries the requested identity."""

    def __init__(self, kind: str, identity: int):
        self.kind = kind
        self.identity = identity
        super().__init__(f"{kind.capitalize()} with ID {identity} not found.")


class DuplicateEnrolment(RecordStoreError):
    def __init__(self, student_id: int, course_id: int):
        self.student_id = student_id
        self.course_id = course_id
        super().__init__(f"Student {student_id} already enrolled in course {course_id}.")


class InvariantViolation(RuntimeError):
    """Store state is corrupt (an enrolment points at a missing record)."""
