# src/taskboard/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime

from ..cli.commands import registry as command_registry
from ..core.state import AppState, require_store

logger = logging.getLogger(__name__)

EXIT_COMMANDS = ("/exit", "/quit")


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def run_console_loop(
    state: AppState,
    *,
    input_fn: Callable[[str], str] = input,
    output: Callable[[str], None] = print,
) -> None:
    """
    Interactive dashboard: every line is a slash command against the shared store.

    Returns on /exit, /quit, EOF or Ctrl+C.
    """
    store = require_store(state)
    app_name = str(getattr(getattr(state, "settings", None), "app_name", "taskboard"))

    logger.info("Console connector started (tasks=%s).", store.count_tasks())
    output(f"[{_ts_local()}] [{app_name}] Type /help for commands, /list to see tasks, /exit to quit.")

    while True:
        try:
            user_input = input_fn(">>> ").strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            output("")
            break

        if not user_input:
            continue

        if user_input.lower() in EXIT_COMMANDS:
            logger.info("Console exit command received.")
            break

        try:
            reply = command_registry.handle(state, user_input)
        except Exception:
            logger.exception("Command handler crashed.")
            reply = "Internal error while handling a command."

        if reply is None:
            reply = "Not a command. Use /help to list available commands."

        output(f"[{_ts_local()}] {reply}")

    logger.info("Console connector finished.")
