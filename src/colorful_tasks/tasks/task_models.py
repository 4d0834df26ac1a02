# src/colorful_tasks/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from enum import StrEnum


class Priority(StrEnum):
    """Urgency bucket derived once from the due date at creation time."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @classmethod
    def from_raw(cls, raw: str | None) -> Priority | None:
        if not raw:
            return None
        try:
            return cls(str(raw).strip().lower())
        except ValueError:
            return None


class TaskFilter(StrEnum):
    """
    Named view predicates applied at read time.

    Unknown values fall back to ALL.
    """

    ALL = "all"
    TODAY = "today"
    UPCOMING = "upcoming"
    COMPLETED = "completed"

    @classmethod
    def parse(cls, raw: str | TaskFilter | None) -> TaskFilter:
        if not raw:
            return cls.ALL
        try:
            return cls(str(raw).strip().lower())
        except ValueError:
            return cls.ALL


class ValidationError(StrEnum):
    TOO_SHORT = "too_short"
    DUPLICATE_ACTIVE = "duplicate_active"
    MISSING = "missing"
    PAST_DATE = "past_date"

    @property
    def message(self) -> str:
        return _VALIDATION_MESSAGES[self]


_VALIDATION_MESSAGES: dict[ValidationError, str] = {
    ValidationError.TOO_SHORT: "Task must be at least 3 characters long",
    ValidationError.DUPLICATE_ACTIVE: "This task already exists",
    ValidationError.MISSING: "Please select a due date",
    ValidationError.PAST_DATE: "Due date cannot be in the past",
}


@dataclass(slots=True)
class Task:
    id: int
    text: str
    due_date: date
    created_at: datetime
    priority: Priority
    completed: bool = False


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """
    Outcome of a single field check.

    - valid=True, error=None: accepted
    - valid=False, error=<kind>: rejected with a message
    - valid=False, error=None: untouched input (not submittable, nothing to show)
    """

    valid: bool
    error: ValidationError | None = None

    @property
    def message(self) -> str:
        return self.error.message if self.error is not None else ""

    @classmethod
    def ok(cls) -> ValidationResult:
        return cls(valid=True)

    @classmethod
    def neutral(cls) -> ValidationResult:
        return cls(valid=False)

    @classmethod
    def fail(cls, error: ValidationError) -> ValidationResult:
        return cls(valid=False, error=error)


@dataclass(frozen=True, slots=True)
class AddTaskResult:
    task: Task | None
    text: ValidationResult
    due_date: ValidationResult

    @property
    def ok(self) -> bool:
        return self.task is not None

    @property
    def errors(self) -> list[ValidationError]:
        return [r.error for r in (self.text, self.due_date) if r.error is not None]


@dataclass(frozen=True, slots=True)
class TaskStats:
    total: int
    completed: int
    pending: int
