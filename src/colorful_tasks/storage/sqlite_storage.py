# src/colorful_tasks/storage/sqlite_storage.py

from __future__ import annotations

import contextlib
import logging
import sqlite3
import time
from collections.abc import Sequence
from pathlib import Path

from ..tasks.task_models import Task
from .codec import decode_tasks, encode_tasks
from .json_storage import DEFAULT_STORAGE_KEY

logger = logging.getLogger(__name__)


class SqliteStorage:
    """
    SQLite key-value store for the task collection.

    The whole collection is one JSON value under `key`; every save overwrites it.
    An unreadable database file loads as no tasks; saving into it still raises.

    Thread-safety:
    - each method opens its own SQLite connection
    """

    def __init__(self, db_path: str | Path = "tasks.sqlite3", *, key: str = DEFAULT_STORAGE_KEY) -> None:
        self._db_path = Path(db_path)
        self._db_path.parent.mkdir(parents=True, exist_ok=True)
        self._key = key
        try:
            self._ensure_schema()
        except sqlite3.DatabaseError:
            logger.warning("Tasks DB %s is unreadable; treating as empty.", self._db_path, exc_info=True)
        logger.info("SqliteStorage ready db=%s key=%s", self._db_path, self._key)

    def close(self) -> None:
        """Compatibility hook for shutdown (no persistent connections to close)."""
        return

    # ---- low-level helpers ----

    def _get_conn(self) -> sqlite3.Connection:
        conn = sqlite3.connect(str(self._db_path), timeout=30.0)
        conn.row_factory = sqlite3.Row
        self._configure_conn(conn)
        return conn

    @staticmethod
    def _configure_conn(conn: sqlite3.Connection) -> None:
        with contextlib.suppress(sqlite3.Error):
            conn.execute("PRAGMA journal_mode=WAL")

    def _ensure_schema(self) -> None:
        conn = self._get_conn()
        try:
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS kv (
                    key TEXT PRIMARY KEY,
                    value TEXT NOT NULL,
                    updated_at REAL NOT NULL
                )
                """
            )
            conn.commit()
        finally:
            conn.close()

    # ---- public API ----

    def load(self) -> list[Task]:
        conn = self._get_conn()
        try:
            cur = conn.cursor()
            cur.execute("SELECT value FROM kv WHERE key = ?", (self._key,))
            row = cur.fetchone()
        except sqlite3.DatabaseError:
            logger.warning("Failed to read tasks from %s; treating as empty.", self._db_path, exc_info=True)
            return []
        finally:
            conn.close()

        tasks = decode_tasks(row["value"] if row is not None else None)
        logger.info("Loaded %d tasks from %s", len(tasks), self._db_path)
        return tasks

    def save(self, tasks: Sequence[Task]) -> None:
        payload = encode_tasks(tasks)
        conn = self._get_conn()
        try:
            conn.execute(
                """
                INSERT INTO kv(key, value, updated_at)
                VALUES (?, ?, ?)
                ON CONFLICT(key) DO UPDATE SET
                    value = excluded.value,
                    updated_at = excluded.updated_at
                """,
                (self._key, payload, time.time()),
            )
            conn.commit()
        finally:
            conn.close()
        logger.debug("Saved %d tasks to %s", len(tasks), self._db_path)
