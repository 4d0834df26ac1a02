# src/colorful_tasks/tasks/task_dates.py

"""
Calendar helpers.

All comparisons happen at day granularity: callers pass `date` objects,
and any `datetime` is reduced to its date before arithmetic.
"""

from __future__ import annotations

import re
from datetime import date, datetime, timezone

from .task_models import Priority

HIGH_PRIORITY_MAX_DAYS = 1
MEDIUM_PRIORITY_MAX_DAYS = 7

_ISO_DATE_RE = re.compile(r"\d{4}-\d{2}-\d{2}")


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _as_date(value: date | datetime) -> date:
    # datetime is a subclass of date, so check it first.
    if isinstance(value, datetime):
        return value.date()
    return value


def parse_due_date(raw: str | date | None) -> date | None:
    """Parse `YYYY-MM-DD` (or pass a date through). Returns None when absent or unparseable."""
    if raw is None:
        return None
    if isinstance(raw, date):
        return _as_date(raw)

    s = str(raw).strip()
    # date.fromisoformat also takes 20240110 and week dates; only YYYY-MM-DD is accepted.
    if not _ISO_DATE_RE.fullmatch(s):
        return None
    try:
        return date.fromisoformat(s)
    except ValueError:
        return None


def compute_priority(due_date: date | datetime, today: date | datetime) -> Priority:
    diff_days = (_as_date(due_date) - _as_date(today)).days

    if diff_days <= HIGH_PRIORITY_MAX_DAYS:
        return Priority.HIGH
    if diff_days <= MEDIUM_PRIORITY_MAX_DAYS:
        return Priority.MEDIUM
    return Priority.LOW


def format_due_date(d: date) -> str:
    return _as_date(d).isoformat()


def format_timestamp(dt: datetime) -> str:
    """ISO 8601 in UTC with milliseconds and a `Z` suffix, e.g. 2024-01-10T09:30:00.000Z."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    dt = dt.astimezone(timezone.utc)
    return dt.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def parse_timestamp(raw: str) -> datetime:
    dt = datetime.fromisoformat(str(raw).strip())
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt
