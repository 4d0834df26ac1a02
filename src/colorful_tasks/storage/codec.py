# src/colorful_tasks/storage/codec.py

"""
Stored representation of the task collection.

Each task is a JSON object with the fields
  id, text, date (YYYY-MM-DD), completed, createdAt (ISO 8601), priority
These names are what existing saved data uses; do not rename them.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from typing import Any

from ..tasks.task_dates import (
    compute_priority,
    format_due_date,
    format_timestamp,
    parse_due_date,
    parse_timestamp,
)
from ..tasks.task_models import Priority, Task

logger = logging.getLogger(__name__)


def task_to_dict(task: Task) -> dict[str, Any]:
    return {
        "id": int(task.id),
        "text": task.text,
        "date": format_due_date(task.due_date),
        "completed": bool(task.completed),
        "createdAt": format_timestamp(task.created_at),
        "priority": task.priority.value,
    }


def task_from_dict(raw: dict[str, Any]) -> Task:
    """Decode one stored record. Raises ValueError/KeyError/TypeError on malformed input."""
    task_id = int(raw["id"])
    if task_id <= 0:
        raise ValueError(f"task id must be positive, got {task_id}")

    text = str(raw["text"]).strip()
    if not text:
        raise ValueError("task text is empty")

    due_date = parse_due_date(raw["date"])
    if due_date is None:
        raise ValueError(f"bad task date: {raw['date']!r}")

    created_at = parse_timestamp(raw["createdAt"])

    # Priority is fixed at creation; only re-derive when the stored value is unusable.
    priority = Priority.from_raw(raw.get("priority"))
    if priority is None:
        priority = compute_priority(due_date, created_at)

    return Task(
        id=task_id,
        text=text,
        due_date=due_date,
        created_at=created_at,
        priority=priority,
        completed=raw.get("completed") is True,
    )


def encode_tasks(tasks: Sequence[Task]) -> str:
    return json.dumps([task_to_dict(t) for t in tasks], ensure_ascii=False)


def decode_task_list(data: Any) -> list[Task]:
    """Decode an already-parsed payload. Non-list payloads count as "no tasks"."""
    if data is None:
        return []
    if not isinstance(data, list):
        logger.warning("Stored tasks payload is not a list (%s); starting empty.", type(data).__name__)
        return []

    out: list[Task] = []
    seen: set[int] = set()
    for item in data:
        if not isinstance(item, dict):
            logger.warning("Skipping non-object task record: %r", item)
            continue
        try:
            task = task_from_dict(item)
        except (KeyError, TypeError, ValueError):
            logger.warning("Skipping malformed task record: %r", item, exc_info=True)
            continue
        if task.id in seen:
            logger.warning("Skipping task record with duplicate id=%s", task.id)
            continue
        seen.add(task.id)
        out.append(task)
    return out


def decode_tasks(raw: str | bytes | None) -> list[Task]:
    """Decode JSON text. Corrupt or empty input -> []."""
    if not raw:
        return []
    try:
        data = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError):
        logger.warning("Stored tasks are not valid JSON; starting empty.")
        return []
    return decode_task_list(data)
