# tests/test_task_rules.py

from __future__ import annotations

from datetime import date, datetime, timezone

import pytest

from colorful_tasks.tasks.task_dates import (
    compute_priority,
    format_timestamp,
    parse_due_date,
    parse_timestamp,
)
from colorful_tasks.tasks.task_models import Priority, Task, TaskFilter, ValidationError
from colorful_tasks.tasks.task_validation import validate_due_date, validate_task_text

from .conftest import NOW, TODAY


@pytest.mark.parametrize(
    ("due", "expected"),
    [
        (date(2024, 1, 10), Priority.HIGH),
        (date(2024, 1, 11), Priority.HIGH),
        (date(2024, 1, 12), Priority.MEDIUM),
        (date(2024, 1, 17), Priority.MEDIUM),
        (date(2024, 1, 18), Priority.LOW),
        (date(2024, 1, 1), Priority.HIGH),
    ],
)
def test_compute_priority(due: date, expected: Priority) -> None:
    assert compute_priority(due, TODAY) is expected


def test_compute_priority_ignores_time_of_day() -> None:
    late_evening = datetime(2024, 1, 10, 23, 59)
    assert compute_priority(date(2024, 1, 12), late_evening) is Priority.MEDIUM
    assert compute_priority(datetime(2024, 1, 18, 0, 1), TODAY) is Priority.LOW


def test_parse_due_date() -> None:
    assert parse_due_date("2024-01-10") == TODAY
    assert parse_due_date(" 2024-01-10 ") == TODAY
    assert parse_due_date(datetime(2024, 1, 10, 15, 0)) == TODAY
    assert parse_due_date("") is None
    assert parse_due_date(None) is None
    assert parse_due_date("next tuesday") is None
    assert parse_due_date("20240110") is None
    assert parse_due_date("2024-W02-3") is None
    assert parse_due_date("2024-1-10") is None
    assert parse_due_date("2024-02-30") is None


def test_timestamp_format_matches_stored_shape() -> None:
    assert format_timestamp(NOW) == "2024-01-10T09:30:00.000Z"
    assert parse_timestamp("2024-01-10T09:30:00.000Z") == NOW


def _active(text: str, *, completed: bool = False) -> Task:
    return Task(
        id=1, text=text, due_date=TODAY, created_at=NOW, priority=Priority.HIGH, completed=completed
    )


def test_validate_task_text() -> None:
    tasks = [_active("Buy milk")]

    assert validate_task_text("", tasks).valid is False
    assert validate_task_text("", tasks).error is None
    assert validate_task_text("  a ", tasks).error is ValidationError.TOO_SHORT
    assert validate_task_text("buy MILK", tasks).error is ValidationError.DUPLICATE_ACTIVE
    assert validate_task_text("abc", tasks).valid is True


def test_validate_task_text_ignores_completed_duplicates() -> None:
    assert validate_task_text("Buy milk", [_active("Buy milk", completed=True)]).valid is True


def test_validate_due_date() -> None:
    assert validate_due_date(None, TODAY).error is ValidationError.MISSING
    assert validate_due_date("", TODAY).error is ValidationError.MISSING
    assert validate_due_date("garbage", TODAY).error is ValidationError.MISSING
    assert validate_due_date("2024-01-09", TODAY).error is ValidationError.PAST_DATE
    assert validate_due_date("2024-01-10", TODAY).valid is True
    assert validate_due_date(date(2030, 5, 1), TODAY).valid is True


def test_validation_messages() -> None:
    assert ValidationError.PAST_DATE.message == "Due date cannot be in the past"
    assert ValidationError.DUPLICATE_ACTIVE.message == "This task already exists"


def test_task_filter_parse() -> None:
    assert TaskFilter.parse("Upcoming") is TaskFilter.UPCOMING
    assert TaskFilter.parse(None) is TaskFilter.ALL
    assert TaskFilter.parse("weird") is TaskFilter.ALL


def test_timestamp_naive_is_treated_as_utc() -> None:
    naive = datetime(2024, 1, 10, 9, 30)
    assert format_timestamp(naive) == "2024-01-10T09:30:00.000Z"
    assert parse_timestamp("2024-01-10T09:30:00").tzinfo == timezone.utc
