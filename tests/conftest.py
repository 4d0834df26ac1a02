# tests/conftest.py

from __future__ import annotations

from datetime import date, datetime, timezone
from pathlib import Path
from types import SimpleNamespace

import pytest

from colorful_tasks.core.state import AppState
from colorful_tasks.render.text_renderer import TextRenderer
from colorful_tasks.storage.json_storage import JsonFileStorage
from colorful_tasks.tasks.task_store import TaskStore

from .fakes import FakeStorage

TODAY = date(2024, 1, 10)
NOW = datetime(2024, 1, 10, 9, 30, tzinfo=timezone.utc)


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with bootstrap and AppState.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="colorful-tasks-test",
        log_level="DEBUG",
        data_dir=tmp_path,
        storage_backend="json",
        storage_key="colorfulTasks",
        tasks_json_path=tmp_path / "tasks.json",
        tasks_db_path=tmp_path / "tasks.sqlite3",
        confirm_delete=True,
    )


@pytest.fixture()
def storage() -> FakeStorage:
    return FakeStorage()


@pytest.fixture()
def store(storage: FakeStorage) -> TaskStore:
    """TaskStore over in-memory storage with the clock pinned to 2024-01-10."""
    return TaskStore(storage, today=lambda: TODAY, now=lambda: NOW)


@pytest.fixture()
def state(settings: SimpleNamespace) -> AppState:
    """
    AppState wired like bootstrap does, but with a fixed clock.

    NOTE: real JSON file storage here, because commands are expected to persist.
    """
    task_store = TaskStore(
        JsonFileStorage(settings.tasks_json_path),
        renderer=TextRenderer(),
        today=lambda: TODAY,
        now=lambda: NOW,
    )
    return AppState(settings=settings, task_store=task_store, confirm_delete=True)
