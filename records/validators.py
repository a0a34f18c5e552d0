"""Input validation pipeline for record fields.

A `Pipeline` is a fixed sequence of named rules. Each rule returns the
(possibly normalised) value or raises Django's `ValidationError` with
the reason, so the first failing rule wins. The store never sees values
that have not passed their field's pipeline.

Rule order for every field: trim, case-normalise, length bounds,
pattern, uniqueness.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Iterable

from django.conf import settings
from django.core.exceptions import ValidationError
from django.core.validators import MaxLengthValidator, MinLengthValidator, RegexValidator

# Compiled with re.ASCII: \w, \d and \s match ASCII only
NAME_PATTERN = r"\A[a-zA-Z\s]+\Z"
EMAIL_PATTERN = r"\A[\w+\-.]+@[a-z\d\-.]+\.[a-z]+\Z"
TITLE_PATTERN = r"\A[a-zA-Z0-9\s]+\Z"
CODE_PATTERN = r"\A[a-zA-Z0-9]+\Z"

@dataclass(frozen=True)
class Rule:
    name: str
    apply: Callable[[str], str]

    def __call__(self, value: str) -> str:
        return self.apply(value)


class Pipeline:
    """Run rules in order; raise on the first failure."""

    def __init__(self, rules: Iterable[Rule]):
        self.rules = tuple(rules)

    def clean(self, value: str) -> str:
        for rule in self.rules:
            value = rule(value)
        return value

    def check(self, value: str) -> tuple[str | None, str | None]:
        """Return (cleaned, None) on success or (None, reason) on failure."""
        try:
            return self.clean(value), None
        except ValidationError as exc:
            return None, " ".join(exc.messages)

    @property
    def rule_names(self) -> tuple[str, ...]:
        return tuple(r.name for r in self.rules)


# --- rule builders ---

def trim() -> Rule:
    return Rule("trim", lambda v: (v or "").strip())


def capitalize_words() -> Rule:
    # "ann   LEE" -> "Ann Lee"
    return Rule("capitalize", lambda v: " ".join(w.capitalize() for w in v.split()))


def upper() -> Rule:
    return Rule("upper", str.upper)


def lower() -> Rule:
    return Rule("lower", str.lower)


def length_between(min_length: int, max_length: int) -> Rule:
    too_short = MinLengthValidator(min_length, message="Minimum length is %(limit_value)s characters.")
    too_long = MaxLengthValidator(max_length, message="Maximum length is %(limit_value)s characters.")

    def _check(value: str) -> str:
        too_short(value)
        too_long(value)
        return value

    return Rule("length", _check)


def matches(pattern: str, message: str, flags: int = 0) -> Rule:
    validator = RegexValidator(regex=pattern, message=message, flags=flags)

    def _check(value: str) -> str:
        validator(value)
        return value

    return Rule("pattern", _check)


def unique_in(records: Callable[[], Iterable[object]], attr: str) -> Rule:
    """Reject a value already held by `attr` of any record.

    `records` is called on every check so the rule sees the store's
    current contents rather than a snapshot from construction time.
    """

    def _check(value: str) -> str:
        if any(getattr(item, attr) == value for item in records()):
            raise ValidationError(f"This {attr} already exists.", code="unique")
        return value

    return Rule("unique", _check)


# --- field pipelines ---

def _limits() -> dict:
    return settings.ROLLBOOK


def student_name_pipeline() -> Pipeline:
    limits = _limits()
    return Pipeline([
        trim(),
        capitalize_words(),
        length_between(limits["NAME_MIN_LENGTH"], limits["NAME_MAX_LENGTH"]),
        matches(NAME_PATTERN, "Invalid name! Only letters/spaces allowed.", flags=re.ASCII),
    ])


def student_email_pipeline(existing: Callable[[], Iterable[object]]) -> Pipeline:
    return Pipeline([
        trim(),
        lower(),
        matches(EMAIL_PATTERN, "Invalid email format!", flags=re.IGNORECASE | re.ASCII),
        unique_in(existing, "email"),
    ])


def course_title_pipeline() -> Pipeline:
    limits = _limits()
    return Pipeline([
        trim(),
        capitalize_words(),
        length_between(limits["TITLE_MIN_LENGTH"], limits["TITLE_MAX_LENGTH"]),
        matches(TITLE_PATTERN, "Invalid characters in title.", flags=re.ASCII),
    ])


def course_code_pipeline(existing: Callable[[], Iterable[object]]) -> Pipeline:
    limits = _limits()
    return Pipeline([
        trim(),
        upper(),
        length_between(limits["CODE_MIN_LENGTH"], limits["CODE_MAX_LENGTH"]),
        matches(CODE_PATTERN, "Code must be alphanumeric, no spaces.", flags=re.ASCII),
        unique_in(existing, "code"),
    ])
