"""Base Django settings for Rollbook.

Rollbook is a console tool: there is no database, no URL routing and
no templates. Django supplies settings, logging configuration, form
validation and the management-command entry point. Environment-specific
modules (`dev.py`, `test.py`) extend this one.
"""
from pathlib import Path
import os


# Base directory of the project (repository root)
BASE_DIR = Path(__file__).resolve().parent.parent.parent


# Security (a key is required by Django even without sessions or signing)
SECRET_KEY = os.environ.get("DJANGO_SECRET_KEY", "dev-insecure-key-change-me")
DEBUG = False
ALLOWED_HOSTS: list[str] = []


# Applications
INSTALLED_APPS = [
    # Local apps
    "records",
]

# State lives in memory only; nothing is persisted between runs
DATABASES: dict = {}


# Internationalisation (messages are English only)
LANGUAGE_CODE = "en-ca"
USE_I18N = False


# Record validation limits and console defaults
ROLLBOOK = {
    "NAME_MIN_LENGTH": int(os.environ.get("ROLLBOOK_NAME_MIN_LENGTH", 3)),
    "NAME_MAX_LENGTH": int(os.environ.get("ROLLBOOK_NAME_MAX_LENGTH", 20)),
    "TITLE_MIN_LENGTH": int(os.environ.get("ROLLBOOK_TITLE_MIN_LENGTH", 3)),
    "TITLE_MAX_LENGTH": int(os.environ.get("ROLLBOOK_TITLE_MAX_LENGTH", 50)),
    "CODE_MIN_LENGTH": int(os.environ.get("ROLLBOOK_CODE_MIN_LENGTH", 2)),
    "CODE_MAX_LENGTH": int(os.environ.get("ROLLBOOK_CODE_MAX_LENGTH", 10)),
    "COLOR": os.environ.get("ROLLBOOK_COLOR", "1").lower() in ("1", "true"),
}


# Logging: stderr only, quiet by default so the interactive screen stays clean
ROLLBOOK_LOG_LEVEL = os.environ.get("ROLLBOOK_LOG_LEVEL", "WARNING").upper()

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "console": {"format": "%(asctime)s %(levelname)s %(name)s: %(message)s"},
    },
    "handlers": {
        "stderr": {
            "class": "logging.StreamHandler",
            "stream": "ext://sys.stderr",
            "formatter": "console",
        },
    },
    "loggers": {
        "records": {
            "handlers": ["stderr"],
            "level": ROLLBOOK_LOG_LEVEL,
            "propagate": True,
        },
    },
}
