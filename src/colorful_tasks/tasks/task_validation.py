# src/colorful_tasks/tasks/task_validation.py

from __future__ import annotations

from collections.abc import Iterable
from datetime import date

from .task_dates import parse_due_date
from .task_models import Task, ValidationError, ValidationResult

MIN_TEXT_LENGTH = 3


def is_duplicate_task(text: str, tasks: Iterable[Task]) -> bool:
    """True if an incomplete task already uses this text (case-insensitive)."""
    needle = text.strip().lower()
    return any(not t.completed and t.text.strip().lower() == needle for t in tasks)


def validate_task_text(text: str | None, tasks: Iterable[Task]) -> ValidationResult:
    s = (text or "").strip()

    if not s:
        return ValidationResult.neutral()

    if len(s) < MIN_TEXT_LENGTH:
        return ValidationResult.fail(ValidationError.TOO_SHORT)

    if is_duplicate_task(s, tasks):
        return ValidationResult.fail(ValidationError.DUPLICATE_ACTIVE)

    return ValidationResult.ok()


def validate_due_date(raw: str | date | None, today: date) -> ValidationResult:
    due = parse_due_date(raw)
    if due is None:
        return ValidationResult.fail(ValidationError.MISSING)

    if due < today:
        return ValidationResult.fail(ValidationError.PAST_DATE)

    return ValidationResult.ok()
