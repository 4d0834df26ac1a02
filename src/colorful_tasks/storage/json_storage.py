# src/colorful_tasks/storage/json_storage.py

from __future__ import annotations

import contextlib
import json
import logging
import os
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from ..tasks.task_models import Task
from .codec import decode_task_list, task_to_dict

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "colorfulTasks"


class JsonFileStorage:
    """
    Key-value JSON file, the on-disk analogue of browser local storage.

    The file holds one JSON object; tasks live under `key`.
    Other keys in the same file are preserved on save.
    """

    def __init__(self, path: str | Path, *, key: str = DEFAULT_STORAGE_KEY) -> None:
        self._path = Path(path)
        self._key = key

    @property
    def path(self) -> Path:
        return self._path

    def _read_document(self) -> dict[str, Any]:
        if not self._path.exists():
            return {}
        try:
            data = json.loads(self._path.read_text("utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError):
            logger.warning("Failed to read tasks file %s; treating as empty.", self._path, exc_info=True)
            return {}
        if not isinstance(data, dict):
            logger.warning("Tasks file %s is not a JSON object; treating as empty.", self._path)
            return {}
        return data

    def load(self) -> list[Task]:
        tasks = decode_task_list(self._read_document().get(self._key))
        logger.info("Loaded %d tasks from %s", len(tasks), self._path)
        return tasks

    def save(self, tasks: Sequence[Task]) -> None:
        doc = self._read_document()
        doc[self._key] = [task_to_dict(t) for t in tasks]

        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self._path.with_suffix(self._path.suffix + ".tmp")
        tmp.write_text(json.dumps(doc, ensure_ascii=False, indent=2), "utf-8")
        os.replace(tmp, self._path)
        with contextlib.suppress(OSError):
            os.chmod(self._path, 0o600)
        logger.debug("Saved %d tasks to %s", len(tasks), self._path)
