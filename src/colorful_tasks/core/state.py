# src/colorful_tasks/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..tasks.task_store import TaskStore


@dataclass
class AppState:
    # Store Settings on the state for easy access in command handlers.
    settings: object

    task_store: TaskStore
    confirm_delete: bool = True
