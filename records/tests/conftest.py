from __future__ import annotations

import pytest

from records.store import RecordStore


@pytest.fixture
def store() -> RecordStore:
    return RecordStore()


@pytest.fixture
def seeded(store: RecordStore) -> RecordStore:
    """Ann Lee enrolled in Intro CS; Bo Chen and Data Structures unenrolled."""
    store.add_student("Ann Lee", "ann@x.com")
    store.add_student("Bo Chen", "bo@x.com")
    store.add_course("Intro CS", "CS1")
    store.add_course("Data Structures", "CS2")
    store.enroll(1, 1)
    return store
