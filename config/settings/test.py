"""Settings used by the pytest suite.

Colour is off so rendered output can be compared as plain text, and
the limits are pinned rather than read from the environment.
"""
from .base import *  # noqa


SECRET_KEY = "test-insecure-key"

ROLLBOOK = {
    "NAME_MIN_LENGTH": 3,
    "NAME_MAX_LENGTH": 20,
    "TITLE_MIN_LENGTH": 3,
    "TITLE_MAX_LENGTH": 50,
    "CODE_MIN_LENGTH": 2,
    "CODE_MAX_LENGTH": 10,
    "COLOR": False,
}
