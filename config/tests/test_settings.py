from __future__ import annotations

import io
import logging

from django.conf import settings
from django.core.management import call_command


def test_no_database_configured():
    # Rollbook keeps everything in memory
    assert not settings.DATABASES.get("default", {}).get("NAME")
    assert settings.INSTALLED_APPS == ["records"]


def test_validation_limits_present():
    limits = settings.ROLLBOOK
    for key in ("NAME", "TITLE", "CODE"):
        assert limits[f"{key}_MIN_LENGTH"] <= limits[f"{key}_MAX_LENGTH"]


def test_records_logger_writes_to_stderr():
    handlers = settings.LOGGING["loggers"]["records"]["handlers"]
    assert handlers == ["stderr"]
    assert settings.LOGGING["handlers"]["stderr"]["stream"] == "ext://sys.stderr"
    level = logging.getLogger("records").level
    assert level == logging.getLevelName(settings.ROLLBOOK_LOG_LEVEL)


def test_force_color_styles_console_output(settings):
    settings.ROLLBOOK = {**settings.ROLLBOOK, "COLOR": True}
    stdout = io.StringIO()
    call_command("rollbook", "--force-color", stdin=io.StringIO("9\n"), stdout=stdout)
    assert "\x1b[36m" in stdout.getvalue()


def test_no_color_flag_wins(settings):
    settings.ROLLBOOK = {**settings.ROLLBOOK, "COLOR": True}
    stdout = io.StringIO()
    call_command("rollbook", "--no-color", stdin=io.StringIO("9\n"), stdout=stdout)
    assert "\x1b[" not in stdout.getvalue()
