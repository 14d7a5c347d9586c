# src/taskdeck/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..core.state import AppState, submit_draft
from ..tasks.task_models import EmptyTitleError, TaskFilter
from .render import render_board, render_progress_line

CommandHandler = Callable[[AppState, list[str]], str]

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by connectors (/help, /add, ...)."""

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

    def handle(self, state: AppState, line: str) -> str | None:
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

        return handler(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def add_from_text(state: AppState, text: str) -> str:
    """Put text into the draft buffer and submit it, like pressing Enter."""
    state.draft_title = text
    # Same gate as a disabled "Add" button; a strict store reports the blank title itself.
    if not state.can_submit() and not getattr(state.task_store, "strict", False):
        return "Nothing to add."
    try:
        task = submit_draft(state)
    except EmptyTitleError:
        return "Task title cannot be empty."
    if task is None:
        return "Nothing to add."
    return f"Added #{task.id}: {task.title}"


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_add(state: AppState, args: list[str]) -> str:
    """/add <title...>"""
    return add_from_text(state, " ".join(args))


def cmd_toggle(state: AppState, args: list[str]) -> str:
    if not args:
        return "Usage: /toggle <id>"
    task = state.task_store.toggle(args[0])
    if task is None:
        return f"Task #{args[0]} not found."
    status = "completed" if task.completed else "active"
    return f"Task #{task.id} is now {status}."


def cmd_delete(state: AppState, args: list[str]) -> str:
    if not args:
        return "Usage: /delete <id>"
    if not state.task_store.delete(args[0]):
        return f"Task #{args[0]} not found."
    return f"Deleted task #{args[0]}."


def cmd_filter(state: AppState, args: list[str]) -> str:
    """
    /filter            -> show current filter
    /filter active     -> show only tasks that are not completed
    """
    if not args:
        return f"Current filter: {state.task_filter}. Use /filter all|active|completed."
    try:
        state.task_filter = TaskFilter.parse(args[0])
    except ValueError:
        return "Usage: /filter all|active|completed."
    logger.debug("Filter changed to %s", state.task_filter)
    return render_board(state)


def cmd_list(state: AppState, args: list[str]) -> str:
    return render_board(state)


def cmd_progress(state: AppState, args: list[str]) -> str:
    progress = state.task_store.summary()
    return f"{render_progress_line(progress)} ({progress.percentage}%)"


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("add", cmd_add, help_text="Add a task: /add <title>.")
registry.register("toggle", cmd_toggle, help_text="Toggle completion: /toggle <id>.", aliases=["done"])
registry.register("delete", cmd_delete, help_text="Delete a task: /delete <id>.", aliases=["rm"])
registry.register(
    "filter", cmd_filter, help_text="Show or set the filter: /filter all | active | completed."
)
registry.register("list", cmd_list, help_text="Show the task board.", aliases=["ls"])
registry.register("progress", cmd_progress, help_text="Show completion progress.")
