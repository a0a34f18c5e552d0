"""Forms for creating records and looking them up by identity.

Each form is bound to a `RecordStore` so uniqueness checks run against
the store's current students and courses. Field-level cleaning delegates
to the pipelines in `records.validators`.
"""
from __future__ import annotations

from django import forms

from .store import RecordStore
from .validators import (
    course_code_pipeline,
    course_title_pipeline,
    student_email_pipeline,
    student_name_pipeline,
)


class StoreBoundForm(forms.Form):
    """Base form holding the store used for uniqueness checks."""

    def __init__(self, *args, store: RecordStore, **kwargs):
        super().__init__(*args, **kwargs)
        self.store = store


class StudentForm(StoreBoundForm):
    # Trimming and blank input are handled by the pipelines
    name = forms.CharField(required=False, strip=False)
    email = forms.CharField(required=False, strip=False)

    def clean_name(self) -> str:
        return student_name_pipeline().clean(self.cleaned_data["name"])

    def clean_email(self) -> str:
        return student_email_pipeline(lambda: self.store.students).clean(self.cleaned_data["email"])


class CourseForm(StoreBoundForm):
    title = forms.CharField(required=False, strip=False)
    code = forms.CharField(required=False, strip=False)

    def clean_title(self) -> str:
        return course_title_pipeline().clean(self.cleaned_data["title"])

    def clean_code(self) -> str:
        return course_code_pipeline(lambda: self.store.courses).clean(self.cleaned_data["code"])


class EnrolmentForm(forms.Form):
    """Identities only; existence and duplicates are the store's call."""

    student_id = forms.IntegerField(min_value=1)
    course_id = forms.IntegerField(min_value=1)


class StudentLookupForm(forms.Form):
    student_id = forms.IntegerField(min_value=1)


class CourseLookupForm(forms.Form):
    course_id = forms.IntegerField(min_value=1)
