# src/eisenhower_matrix/connectors/console_connector.py

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from datetime import datetime

from ..cli.commands import registry as command_registry
from ..core.errors import ValidationError
from ..core.state import AppState
from ..tasks.task_api import request_create

logger = logging.getLogger(__name__)

LineReader = Callable[[str], Awaitable[str]]


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def _print_ts(text: str) -> None:
    print(f"[{_ts_local()}] {text}")


async def _read_stdin(prompt: str) -> str:
    # input() blocks, so it runs in a worker thread; the loop keeps firing removal timers.
    return await asyncio.to_thread(input, prompt)


def handle_line(state: AppState, user_input: str) -> str | None:
    """One console line: slash command, or a bare title added to the default quadrant."""
    try:
        cmd_response = command_registry.handle(state, user_input)
    except Exception:
        logger.exception("Command handler crashed.")
        return "Internal error while handling a command."

    if cmd_response is not None:
        return cmd_response

    try:
        request_create(state, user_input)
    except ValidationError as e:
        return f"Cannot add task: {e}."
    return None


async def run_console_loop(state: AppState, *, read_line: LineReader | None = None) -> None:
    """
    Interactive REPL. Runs on the event loop; returns on /exit or EOF.

    Pending removals are awaited on every way out, cancellation included:
    Ctrl+C under asyncio.run cancels this coroutine rather than raising
    KeyboardInterrupt inside it.
    """
    reader = read_line or _read_stdin
    logger.info("Console connector started.")
    _print_ts("[CONSOLE] Type a task title to add it. Use /help for commands. Use /exit to quit.")

    try:
        while True:
            try:
                user_input = (await reader(">>> ")).strip()
            except EOFError:
                logger.info("Console EOF received, exiting.")
                break

            if not user_input:
                continue

            if user_input.lower() in ("/exit", "/quit"):
                logger.info("Console exit command received.")
                break

            reply = handle_line(state, user_input)
            if reply is not None:
                _print_ts(reply)
    except asyncio.CancelledError:
        logger.info("Console cancelled, finishing pending removals.")
        raise
    finally:
        await state.removals.wait_idle()
        logger.info("Console connector finished.")
