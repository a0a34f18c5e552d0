from __future__ import annotations

import pytest
from django.core.exceptions import ValidationError

from records.models import Course, Student
from records.validators import (
    Pipeline,
    course_code_pipeline,
    course_title_pipeline,
    length_between,
    student_email_pipeline,
    student_name_pipeline,
    trim,
    unique_in,
)


def test_name_is_trimmed_and_capitalised():
    assert student_name_pipeline().clean("  ann   LEE ") == "Ann Lee"


@pytest.mark.parametrize(
    "raw, message",
    [
        ("al", "Minimum length is 3 characters."),
        ("a" * 21, "Maximum length is 20 characters."),
        ("Ann2", "Invalid name! Only letters/spaces allowed."),
        ("   ", "Minimum length is 3 characters."),
    ],
)
def test_name_rejections(raw, message):
    with pytest.raises(ValidationError) as exc:
        student_name_pipeline().clean(raw)
    assert exc.value.messages == [message]


def test_rules_run_in_fixed_order():
    assert student_name_pipeline().rule_names == ("trim", "capitalize", "length", "pattern")
    assert course_code_pipeline(lambda: ()).rule_names == ("trim", "upper", "length", "pattern", "unique")


def test_email_is_lowercased_then_checked_for_uniqueness():
    existing = (Student(1, "Ann Lee", "ann@x.com"),)
    pipeline = student_email_pipeline(lambda: existing)
    assert pipeline.clean(" Bo@X.com ") == "bo@x.com"
    with pytest.raises(ValidationError) as exc:
        pipeline.clean("ANN@x.com")
    assert exc.value.messages == ["This email already exists."]


@pytest.mark.parametrize(
    "raw", ["ann", "ann@", "ann@x", "a b@x.com", "ann@x.c0m", "é@x.com", "a@x\u0663.com"]
)
def test_email_format_rejections(raw):
    value, reason = student_email_pipeline(lambda: ()).check(raw)
    assert value is None
    assert reason == "Invalid email format!"


def test_title_allows_digits_and_spaces():
    assert course_title_pipeline().clean("intro to cs 101") == "Intro To Cs 101"
    _, reason = course_title_pipeline().check("C++ basics")
    assert reason == "Invalid characters in title."


def test_code_is_uppercased_and_unique():
    existing = [Course(1, "Intro CS", "CS1")]
    pipeline = course_code_pipeline(lambda: existing)
    assert pipeline.clean(" cs2 ") == "CS2"
    assert pipeline.check("cs1") == (None, "This code already exists.")
    assert pipeline.check("C") == (None, "Minimum length is 2 characters.")
    assert pipeline.check("CS 1") == (None, "Code must be alphanumeric, no spaces.")


def test_uniqueness_sees_records_added_after_construction():
    records: list[Student] = []
    pipeline = Pipeline([trim(), unique_in(lambda: records, "email")])
    assert pipeline.clean("a@x.com") == "a@x.com"
    records.append(Student(1, "Amy Abel", "a@x.com"))
    with pytest.raises(ValidationError):
        pipeline.clean("a@x.com")


def test_limits_follow_settings(settings):
    settings.ROLLBOOK = {**settings.ROLLBOOK, "NAME_MAX_LENGTH": 5}
    with pytest.raises(ValidationError) as exc:
        student_name_pipeline().clean("Annabel")
    assert exc.value.messages == ["Maximum length is 5 characters."]


def test_length_rule_alone():
    rule = length_between(2, 3)
    assert rule("ab") == "ab"
    with pytest.raises(ValidationError):
        rule("abcd")
