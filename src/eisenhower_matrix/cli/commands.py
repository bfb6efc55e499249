# src/eisenhower_matrix/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..connectors.console_view import format_board, format_counts
from ..core.errors import ValidationError
from ..core.state import AppState
from ..tasks.quadrants import DEFAULT_QUADRANT, alias, all_quadrants, label, parse_quadrant
from ..tasks.task_api import request_complete, request_create

CommandHandler = Callable[[AppState, list[str]], str]

logger = logging.getLogger(__name__)


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
        for a in aliases:
            self._handlers[a.lower()] = handler

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
        lines.append("Quadrant aliases:")
        for q in all_quadrants():
            lines.append(f"  {alias(q)} = {q.value} ({label(q)})")
        return "\n".join(lines)


registry = CommandRegistry()


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_add(state: AppState, args: list[str]) -> str:
    """
    /add <title...>             -> urgent-important
    /add <quadrant> <title...>  -> given quadrant (full value or alias)
    """
    quadrant = DEFAULT_QUADRANT
    words = list(args)
    if len(words) > 1:
        parsed = parse_quadrant(words[0])
        if parsed is not None:
            quadrant = parsed
            words = words[1:]

    try:
        task = request_create(state, " ".join(words), quadrant)
    except ValidationError as e:
        return f"Cannot add task: {e}."
    return f"Added {task.id} to {label(task.priority)}."


def cmd_done(state: AppState, args: list[str]) -> str:
    if not args:
        return "Usage: /done <task id>."
    task_id = args[0]
    if request_complete(state, task_id):
        return f"Completing {task_id}..."
    return f"No active task with id {task_id}."


def cmd_list(state: AppState, args: list[str]) -> str:
    return format_board(state.task_store.tasks_by_quadrant())


def cmd_counts(state: AppState, args: list[str]) -> str:
    store = state.task_store
    text = f"{format_counts(store.get_counts())}  (total {len(store)})"
    if store.last_save_error is not None:
        text += "\nWarning: last save failed, changes are kept in memory only."
    return text


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("add", cmd_add, help_text="Add a task: /add [quadrant] <title>.", aliases=["a"])
registry.register("done", cmd_done, help_text="Complete a task: /done <id>.", aliases=["d"])
registry.register("list", cmd_list, help_text="Show the board grouped by quadrant.", aliases=["ls"])
registry.register("counts", cmd_counts, help_text="Show task counts per quadrant.")
