# src/colorful_tasks/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

TaskStore depends on Protocols instead of concrete implementations.
This keeps storage/rendering swappable and makes testing easier.
"""

from typing import Protocol, Sequence

from ..tasks.task_models import Task, TaskFilter, TaskStats


class TaskPersistence(Protocol):
    """
    Key-value durability for the whole task collection.

    load() returns [] when nothing is stored or the stored payload is corrupt.
    save() overwrites the entire persisted collection.
    """

    def load(self) -> list[Task]: ...
    def save(self, tasks: Sequence[Task]) -> None: ...


class TaskRenderer(Protocol):
    """Turns the filtered view into display output. Empty view -> placeholder, not an empty list."""

    def render(
            self,
            tasks: Sequence[Task],
            *,
            current_filter: TaskFilter,
            stats: TaskStats,
    ) -> str: ...
