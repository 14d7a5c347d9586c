# src/taskdeck/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..cli.commands import add_from_text
from ..cli.commands import registry as command_registry
from ..cli.render import render_board
from ..core.state import AppState

logger = logging.getLogger(__name__)


def run_console_loop(
    state: AppState,
    *,
    read_line: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
) -> None:
    """
    Interactive REPL over the task store.

    - "/command args" goes through the command registry
    - any other non-empty line is submitted as a new task title
    - the board is re-rendered after every store mutation
    """
    logger.info("Console connector started (tasks=%d).", len(state.task_store.tasks()))
    write("[CONSOLE] Type a task title to add it. Use /help for commands. Use /exit to quit.\n")
    write(render_board(state))

    changed = False

    def _on_change(_snapshot) -> None:
        nonlocal changed
        changed = True

    unsubscribe = state.task_store.subscribe(_on_change)

    try:
        while True:
            try:
                user_input = read_line("> ").strip()
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

            changed = False
            try:
                reply = command_registry.handle(state, user_input)
                if reply is None:
                    reply = add_from_text(state, user_input)
            except Exception:
                logger.exception("Command handler crashed.")
                write("Internal error while handling a command.")
                continue

            write(reply)
            if changed:
                write("")
                write(render_board(state))
    finally:
        unsubscribe()

    logger.info("Console connector finished.")
