# src/colorful_tasks/cli/commands.py

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable
from datetime import timedelta
from typing import cast

from ..core.state import AppState
from ..render.text_renderer import TextRenderer
from ..tasks.task_models import TaskFilter

CommandConfirm = Callable[[str], bool]
CommandHandler2 = Callable[[AppState, list[str]], str]
CommandHandler3 = Callable[[AppState, list[str], CommandConfirm | None], str]
CommandHandler = CommandHandler2 | CommandHandler3

logger = logging.getLogger(__name__)

ADD_USAGE = "Usage: /add <YYYY-MM-DD|today|tomorrow> <task text>"


class CommandRegistry:
    """Simple slash-command registry used by the console connector (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(
        self,
        state: AppState,
        line: str,
        confirm: CommandConfirm | None = None,
    ) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            nparams = len(inspect.signature(handler).parameters)
        except (TypeError, ValueError):
            nparams = 3

        if nparams >= 3:
            h3 = cast(CommandHandler3, handler)
            return h3(state, args, confirm)

        h2 = cast(CommandHandler2, handler)
        return h2(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        lines.append("  /exit - Quit.")
        return "\n".join(lines)


registry = CommandRegistry()


def _parse_id(args: list[str]) -> int | None:
    if not args:
        return None
    try:
        return int(args[0])
    except ValueError:
        return None


def _resolve_date_arg(state: AppState, raw: str) -> str:
    today = state.task_store.min_due_date()
    word = raw.lower()
    if word == "today":
        return today.isoformat()
    if word == "tomorrow":
        return (today + timedelta(days=1)).isoformat()
    return raw


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_list(state: AppState, args: list[str]) -> str:
    return state.task_store.render()


def cmd_stats(state: AppState, args: list[str]) -> str:
    return TextRenderer.render_stats(state.task_store.stats())


def cmd_filter(state: AppState, args: list[str]) -> str:
    """
    /filter              -> show current filter
    /filter <name>       -> set filter and show the list
    """
    store = state.task_store
    if not args:
        names = " | ".join(f.value for f in TaskFilter)
        return f"Current filter: {store.current_filter.value}. Use /filter {names}."

    raw = args[0].lower()
    flt = store.set_filter(raw)
    if flt.value != raw:
        logger.debug("Unknown filter %r, using %s", raw, flt.value)
    return store.render()


def cmd_add(state: AppState, args: list[str]) -> str:
    """
    /add 2024-01-10 Buy milk
    /add tomorrow Call the bank
    """
    if not args:
        return ADD_USAGE

    store = state.task_store
    due_raw = _resolve_date_arg(state, args[0])
    text = " ".join(args[1:])

    result = store.add_task(text, due_raw)
    if result.ok and result.task is not None:
        t = result.task
        return f"Task added: #{t.id} {t.text} (due {t.due_date.isoformat()}, {t.priority.value})."

    messages = [e.message for e in result.errors]
    if not result.text.valid and result.text.error is None:
        # Untouched text: nothing to complain about, just show usage.
        messages.append(ADD_USAGE)
    return "Task not added:\n" + "\n".join(f"  - {m}" for m in messages)


def cmd_toggle(state: AppState, args: list[str]) -> str:
    task_id = _parse_id(args)
    if task_id is None:
        return "Usage: /toggle <id>"

    store = state.task_store
    if not store.toggle_task(task_id):
        return f"No task with id {task_id}."

    task = store.get_task(task_id)
    done = task is not None and task.completed
    return f"Task #{task_id} marked as {'completed' if done else 'not completed'}."


def cmd_delete(
    state: AppState,
    args: list[str],
    confirm: CommandConfirm | None = None,
) -> str:
    """
    /delete <id>  -> asks for confirmation (if enabled and the connector can ask), then deletes
    """
    task_id = _parse_id(args)
    if task_id is None:
        return "Usage: /delete <id>"

    store = state.task_store
    task = store.get_task(task_id)
    if task is None:
        return f"No task with id {task_id}."

    if state.confirm_delete and confirm is not None:
        if not confirm(f"Are you sure you want to delete task #{task_id} '{task.text}'?"):
            return "Delete cancelled."

    store.delete_task(task_id)
    return f"Task #{task_id} deleted."


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("add", cmd_add, help_text="Add a task: /add <YYYY-MM-DD> <text>.")
registry.register("toggle", cmd_toggle, help_text="Toggle completion: /toggle <id>.", aliases=["done"])
registry.register("delete", cmd_delete, help_text="Delete a task: /delete <id>.", aliases=["del", "rm"])
registry.register(
    "filter", cmd_filter, help_text="Show or set filter: /filter all | today | upcoming | completed."
)
registry.register("list", cmd_list, help_text="Show tasks for the current filter.", aliases=["ls"])
registry.register("stats", cmd_stats, help_text="Show task counts.")
