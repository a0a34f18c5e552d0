"""Text rendering for store results.

Formats listings as fixed-width tables and composes the console's
confirmation/error messages. Colour comes from Django's `termcolors`
and can be switched off (``--no-color`` or ``ROLLBOOK["COLOR"] = False``).
"""
from __future__ import annotations

from django.utils.termcolors import make_style

from .exceptions import DuplicateEnrolment, RecordNotFound, RecordStoreError
from .models import Course, CourseRow, EnrolmentRow, Listing, Student, StudentRow

# Column layouts (printf style) keyed by the listing's header labels
LAYOUTS: dict[tuple[str, ...], str] = {
    ("ID", "Name", "Email"): "%-5s | %-20s | %-30s",
    ("ID", "Title", "Code"): "%-5s | %-25s | %-10s",
    ("Student", "Course"): "%-20s | %-20s",
    ("Code", "Course Title"): "%-10s | %-25s",
    ("ID", "Student Name"): "%-5s | %-20s",
}


def _plain(text: str) -> str:
    return text


def _cells(row) -> tuple:
    if isinstance(row, Student):
        return (row.id, row.name, row.email)
    if isinstance(row, Course):
        return (row.id, row.title, row.code)
    if isinstance(row, EnrolmentRow):
        return (row.student_name, row.course_title)
    if isinstance(row, CourseRow):
        return (row.code, row.title)
    if isinstance(row, StudentRow):
        return (row.id, row.name)
    raise TypeError(f"Cannot render row of type {type(row).__name__}")


class Renderer:
    """Turn store values into (optionally coloured) text."""

    def __init__(self, color: bool = True):
        self.color = color
        if color:
            self.success = make_style(fg="green")
            self.error = make_style(fg="red")
            self.heading = make_style(fg="cyan")
            self.muted = make_style(fg="black", opts=("bold",))
        else:
            self.success = self.error = self.heading = self.muted = _plain

    # --- tables ---

    def table(self, listing: Listing) -> str:
        """Render a listing, or its empty message when it has no rows.

        Per-entity queries (those with a banner) keep the header
        uncoloured; the banner itself carries the colour.
        """
        if listing.empty:
            return self.error(listing.empty_message)
        layout = LAYOUTS[listing.columns]
        header = layout % listing.columns
        lines = []
        if listing.banner:
            lines.append(self.heading("\n" + listing.banner))
            lines.append(header)
        else:
            lines.append(self.heading(header))
        lines.append(self.muted("-" * len(header)))
        lines.extend(layout % _cells(row) for row in listing.rows)
        return "\n".join(lines)

    # --- messages ---

    def student_created(self, student: Student) -> str:
        return self.success(f"Student: '{student.name}' created (ID: {student.id}).")

    def course_created(self, course: Course) -> str:
        return self.success(f"Course '{course.title}' created (ID: {course.id}).")

    def enrolled(self, student: Student, course: Course) -> str:
        return self.success(f"Enrolled {student.name} in {course.title}.")

    def rejection(self, exc: RecordStoreError) -> str:
        if isinstance(exc, RecordNotFound):
            return self.error(f"Error: {exc.kind.capitalize()} with ID {exc.identity} not found.")
        if isinstance(exc, DuplicateEnrolment):
            return self.error("Error: Student already enrolled.")
        return self.error(f"Error: {exc}")
