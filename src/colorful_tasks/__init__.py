"""Persisted task list manager with a console front-end."""

__version__ = "0.1.0"
