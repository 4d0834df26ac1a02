# src/colorful_tasks/render/text_renderer.py

from __future__ import annotations

from collections.abc import Sequence

from ..tasks.task_dates import format_due_date
from ..tasks.task_models import Task, TaskFilter, TaskStats

EMPTY_PLACEHOLDER = "No tasks found for this filter."


class TextRenderer:
    """Plain-text list view for the console."""

    def __init__(self, *, show_stats: bool = True) -> None:
        self.show_stats = show_stats

    @staticmethod
    def render_task(task: Task) -> str:
        box = "[x]" if task.completed else "[ ]"
        return (
            f"{task.id:>3}. {box} {task.text}"
            f"  (due {format_due_date(task.due_date)}, {task.priority.value})"
        )

    @staticmethod
    def render_stats(stats: TaskStats) -> str:
        return f"Total: {stats.total} | Completed: {stats.completed} | Pending: {stats.pending}"

    def render(
        self,
        tasks: Sequence[Task],
        *,
        current_filter: TaskFilter,
        stats: TaskStats,
    ) -> str:
        lines = [f"Tasks ({current_filter.value}):"]
        if tasks:
            lines.extend(self.render_task(t) for t in tasks)
        else:
            lines.append(f"  {EMPTY_PLACEHOLDER}")

        if self.show_stats:
            lines.append(self.render_stats(stats))
        return "\n".join(lines)
