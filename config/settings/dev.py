"""Development settings for Rollbook.

Extends base settings with developer-friendly defaults.
"""
from .base import *  # noqa


DEBUG = True
