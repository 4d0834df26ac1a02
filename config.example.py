# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
Use .env (local, gitignored) for per-machine values.

This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "COLORFUL_APP_NAME": "App display name (default: colorful-tasks).",
    "COLORFUL_LOG_LEVEL": "Console logging level (default: INFO). The log file always gets DEBUG.",
    # Storage
    "COLORFUL_DATA_DIR": "Local data directory (default: .local/colorful_tasks).",
    "COLORFUL_STORAGE_BACKEND": "json | sqlite (default: json; unknown values fall back to json).",
    "COLORFUL_STORAGE_KEY": "Key the task list is stored under (default: colorfulTasks).",
    "COLORFUL_TASKS_JSON_PATH": "JSON storage file (default: <data_dir>/tasks.json).",
    "COLORFUL_TASKS_DB_PATH": "SQLite storage file (default: <data_dir>/tasks.sqlite3).",
    # Console
    "COLORFUL_CONFIRM_DELETE": "Ask before /delete (true/false, default: true).",
}
