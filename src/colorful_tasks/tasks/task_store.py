# src/colorful_tasks/tasks/task_store.py

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import replace
from datetime import date, datetime
from typing import TYPE_CHECKING

from .task_dates import compute_priority, parse_due_date, utc_now
from .task_models import (
    AddTaskResult,
    Task,
    TaskFilter,
    TaskStats,
    ValidationResult,
)
from .task_validation import validate_due_date, validate_task_text

if TYPE_CHECKING:
    from ..core.ports import TaskPersistence, TaskRenderer

logger = logging.getLogger(__name__)


class TaskStore:
    """
    In-memory task list backed by an injected persistence collaborator.

    - tasks are loaded once at construction
    - every mutation (add/toggle/delete) saves the full collection before returning
    - the active filter is session-only and never saved
    - storage order is insertion order; the displayed view is a sorted copy
    """

    def __init__(
        self,
        storage: TaskPersistence,
        *,
        renderer: TaskRenderer | None = None,
        today: Callable[[], date] = date.today,
        now: Callable[[], datetime] = utc_now,
    ) -> None:
        self._storage = storage
        self._renderer = renderer
        self._today = today
        self._now = now

        self._tasks: list[Task] = list(storage.load())
        self._next_id = max((t.id for t in self._tasks), default=0) + 1
        self.current_filter = TaskFilter.ALL

        logger.info(
            "TaskStore ready storage=%s total=%s next_id=%s",
            type(storage).__name__,
            len(self._tasks),
            self._next_id,
        )

    def close(self) -> None:
        close = getattr(self._storage, "close", None)
        if callable(close):
            close()

    # ---- read helpers ----

    def __len__(self) -> int:
        return len(self._tasks)

    @property
    def tasks(self) -> tuple[Task, ...]:
        """Snapshot of copies; editing them does not touch the store."""
        return tuple(replace(t) for t in self._tasks)

    @property
    def next_id(self) -> int:
        return self._next_id

    def get_task(self, task_id: int) -> Task | None:
        for t in self._tasks:
            if t.id == task_id:
                return replace(t)
        return None

    def min_due_date(self) -> date:
        """Earliest due date the store will accept right now."""
        return self._today()

    def stats(self) -> TaskStats:
        total = len(self._tasks)
        completed = sum(1 for t in self._tasks if t.completed)
        return TaskStats(total=total, completed=completed, pending=total - completed)

    # ---- validation ----

    def validate_task_text(self, text: str | None) -> ValidationResult:
        return validate_task_text(text, self._tasks)

    def validate_due_date(self, raw: str | date | None) -> ValidationResult:
        return validate_due_date(raw, self._today())

    # ---- mutations ----

    def _persist(self, tasks: list[Task]) -> None:
        """Save `tasks`, then adopt them. A failed save leaves the store untouched."""
        self._storage.save(list(tasks))
        self._tasks = tasks

    def add_task(self, text: str | None, due: str | date | None) -> AddTaskResult:
        due_date = parse_due_date(due)
        text_res = self.validate_task_text(text)
        date_res = self.validate_due_date(due_date)

        if not text_res.valid or not date_res.valid or due_date is None:
            logger.debug(
                "Task rejected text_error=%s date_error=%s", text_res.error, date_res.error
            )
            return AddTaskResult(task=None, text=text_res, due_date=date_res)

        task = Task(
            id=self._next_id,
            text=(text or "").strip(),
            due_date=due_date,
            created_at=self._now(),
            priority=compute_priority(due_date, self._today()),
        )
        self._persist([*self._tasks, task])
        self._next_id += 1

        logger.debug(
            "Task added id=%s due=%s priority=%s", task.id, task.due_date, task.priority.value
        )
        return AddTaskResult(task=replace(task), text=text_res, due_date=date_res)

    def toggle_task(self, task_id: int) -> bool:
        if not any(t.id == task_id for t in self._tasks):
            return False

        self._persist(
            [replace(t, completed=not t.completed) if t.id == task_id else t for t in self._tasks]
        )
        logger.debug("Task toggled id=%s", task_id)
        return True

    def delete_task(self, task_id: int) -> bool:
        """Delete unconditionally; any confirmation prompt belongs to the caller."""
        kept = [t for t in self._tasks if t.id != task_id]
        if len(kept) == len(self._tasks):
            return False

        self._persist(kept)
        logger.debug("Task deleted id=%s", task_id)
        return True

    # ---- view ----

    def set_filter(self, value: TaskFilter | str | None) -> TaskFilter:
        self.current_filter = TaskFilter.parse(value)
        return self.current_filter

    def filtered_tasks(self, task_filter: TaskFilter | str | None = None) -> list[Task]:
        """
        Tasks matching the filter, sorted ascending by due date.

        sorted() is stable, so equal dates keep insertion order.
        The stored list itself is never reordered.
        """
        flt = self.current_filter if task_filter is None else TaskFilter.parse(task_filter)
        today = self._today()

        if flt is TaskFilter.TODAY:
            selected = [t for t in self._tasks if t.due_date == today]
        elif flt is TaskFilter.UPCOMING:
            selected = [t for t in self._tasks if t.due_date > today and not t.completed]
        elif flt is TaskFilter.COMPLETED:
            selected = [t for t in self._tasks if t.completed]
        else:
            selected = list(self._tasks)

        return sorted((replace(t) for t in selected), key=lambda t: t.due_date)

    def render(self) -> str:
        if self._renderer is None:
            raise RuntimeError("TaskStore was constructed without a renderer")
        return self._renderer.render(
            self.filtered_tasks(),
            current_filter=self.current_filter,
            stats=self.stats(),
        )
