#!/usr/bin/env python
"""
Django management utility for Rollbook.

The interactive console is the `rollbook` command:

    python manage.py rollbook

Settings default to `config.settings.dev`; set DJANGO_SETTINGS_MODULE
to override.
"""
import os
import sys


def main() -> None:
    """Run administrative tasks for the Rollbook project."""
    os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.settings.dev")
    try:
        from django.core.management import execute_from_command_line
    except ImportError as exc:
        # Provide a clear hint if Django is not installed in the environment.
        raise ImportError(
            "Django is not installed or not available on the PYTHONPATH."
        ) from exc
    execute_from_command_line(sys.argv)


if __name__ == "__main__":
    main()
