from django.apps import AppConfig


class RecordsConfig(AppConfig):
    """App configuration for the in-memory student/course records."""

    name = "records"
    verbose_name = "Student and course records"
