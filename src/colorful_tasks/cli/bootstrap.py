# src/colorful_tasks/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- picks the persistence backend,
- wires storage + renderer into a TaskStore held by AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.ports import TaskPersistence
from ..core.state import AppState
from ..render.text_renderer import TextRenderer
from ..storage.json_storage import JsonFileStorage
from ..storage.sqlite_storage import SqliteStorage
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.tasks_json_path.parent.mkdir(parents=True, exist_ok=True)
    settings.tasks_db_path.parent.mkdir(parents=True, exist_ok=True)


def create_storage(settings) -> TaskPersistence:
    backend = str(getattr(settings, "storage_backend", "json")).lower()
    key = getattr(settings, "storage_key", "colorfulTasks")

    if backend == "sqlite":
        return SqliteStorage(settings.tasks_db_path, key=key)

    if backend != "json":
        logger.warning("Unknown storage backend %r; using json.", backend)
    return JsonFileStorage(settings.tasks_json_path, key=key)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    store = TaskStore(create_storage(settings), renderer=TextRenderer())
    return AppState(
        settings=settings,
        task_store=store,
        confirm_delete=bool(getattr(settings, "confirm_delete", True)),
    )
