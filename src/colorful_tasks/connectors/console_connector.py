# src/colorful_tasks/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime

from ..cli.commands import registry as command_registry
from ..core.state import AppState

logger = logging.getLogger(__name__)

InputFunc = Callable[[str], str]
OutputFunc = Callable[[str], None]


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def _make_confirm(read: InputFunc, write: OutputFunc) -> Callable[[str], bool]:
    def confirm(question: str) -> bool:
        try:
            answer = read(f"{question} [y/N]: ")
        except (EOFError, KeyboardInterrupt):
            write("")
            return False
        return answer.strip().lower() in ("y", "yes")

    return confirm


def run_console_loop(
    state: AppState,
    *,
    read: InputFunc = input,
    write: OutputFunc = print,
) -> None:
    logger.info("Console connector started (tasks=%s).", len(state.task_store))
    write(f"[{_ts_local()}] [CONSOLE] Use /help for commands. Use /exit to quit.\n")
    write(state.task_store.render())

    confirm = _make_confirm(read, write)

    while True:
        try:
            user_input = read(">>> ").strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            write("")
            break

        if not user_input:
            continue

        if user_input.lower() in ("/exit", "/quit"):
            logger.info("Console exit command received.")
            break

        try:
            cmd_response = command_registry.handle(state, user_input, confirm=confirm)
        except Exception:
            logger.exception("Command handler crashed.")
            cmd_response = "Internal error while handling a command."

        if cmd_response is None:
            cmd_response = "Commands start with '/'. Try /add <YYYY-MM-DD> <text> or /help."

        write(cmd_response)

    logger.info("Console connector finished.")
