# tests/fakes.py

from __future__ import annotations

import copy
from collections.abc import Sequence
from dataclasses import dataclass, field

from colorful_tasks.tasks.task_models import Task, TaskFilter, TaskStats


class FakeStorage:
    """
    In-memory TaskPersistence for unit tests.

    - save() stores deep copies, so later in-memory mutations don't leak into "disk"
    - counts saves for assertions
    """

    def __init__(self, tasks: list[Task] | None = None) -> None:
        self.saved: list[Task] = copy.deepcopy(tasks or [])
        self.save_calls = 0

    def load(self) -> list[Task]:
        return copy.deepcopy(self.saved)

    def save(self, tasks: Sequence[Task]) -> None:
        self.save_calls += 1
        self.saved = copy.deepcopy(list(tasks))


@dataclass(slots=True)
class RenderCall:
    tasks: list[Task]
    current_filter: TaskFilter
    stats: TaskStats


@dataclass(slots=True)
class FakeRenderer:
    calls: list[RenderCall] = field(default_factory=list)

    def render(
        self,
        tasks: Sequence[Task],
        *,
        current_filter: TaskFilter,
        stats: TaskStats,
    ) -> str:
        self.calls.append(RenderCall(list(tasks), current_filter, stats))
        return f"{current_filter.value}:{len(tasks)}"


class FailingStorage(FakeStorage):
    """FakeStorage whose save() raises once `failing` is set (disk full, quota, ...)."""

    def __init__(self, tasks: list[Task] | None = None) -> None:
        super().__init__(tasks)
        self.failing = False

    def save(self, tasks: Sequence[Task]) -> None:
        if self.failing:
            raise OSError("No space left on device")
        super().save(tasks)
