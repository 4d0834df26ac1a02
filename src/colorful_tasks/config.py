# src/colorful_tasks/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app (normal "settings layer").
- Nothing required at import time; every value has a default.
- Legacy module-level constants are exported.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "COLORFUL"

STORAGE_BACKENDS = ("json", "sqlite")


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


load_dotenv(override=False)


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _first_env(*names: str, default: str | None = None) -> str | None:
    for n in names:
        v = os.getenv(n)
        if v is not None and v.strip() != "":
            return v
    return default


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


def _env_choice(name: str, choices: tuple[str, ...], default: str) -> str:
    raw = os.getenv(name)
    if raw is None:
        return default
    v = raw.strip().lower()
    return v if v in choices else default


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str

    # ---- Storage ----
    data_dir: Path
    storage_backend: str
    storage_key: str
    tasks_json_path: Path
    tasks_db_path: Path

    # ---- Console ----
    confirm_delete: bool

    @staticmethod
    def from_env() -> "Settings":
        app_name = _first_env(_k("APP_NAME"), default="colorful-tasks") or "colorful-tasks"
        log_level = _env(_k("LOG_LEVEL"), "INFO")

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/colorful_tasks"))
        storage_backend = _env_choice(_k("STORAGE_BACKEND"), STORAGE_BACKENDS, "json")
        storage_key = (_env(_k("STORAGE_KEY"), "colorfulTasks").strip() or "colorfulTasks")
        tasks_json_path = _env_path(_k("TASKS_JSON_PATH"), data_dir / "tasks.json")
        tasks_db_path = _env_path(_k("TASKS_DB_PATH"), data_dir / "tasks.sqlite3")

        confirm_delete = _env_bool(_k("CONFIRM_DELETE"), True)

        return Settings(
            app_name=app_name,
            log_level=log_level,
            data_dir=data_dir,
            storage_backend=storage_backend,
            storage_key=storage_key,
            tasks_json_path=tasks_json_path,
            tasks_db_path=tasks_db_path,
            confirm_delete=confirm_delete,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS


# --------------------------------------------------------------------------------------
# Backward-compatible exports (legacy module-level constants).
# --------------------------------------------------------------------------------------

APP_NAME = SETTINGS.app_name
LOG_LEVEL = SETTINGS.log_level

DATA_DIR = SETTINGS.data_dir
STORAGE_BACKEND = SETTINGS.storage_backend
STORAGE_KEY = SETTINGS.storage_key
TASKS_JSON_PATH = SETTINGS.tasks_json_path
TASKS_DB_PATH = SETTINGS.tasks_db_path

CONFIRM_DELETE = SETTINGS.confirm_delete
