# src/eisenhower_matrix/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState with the console view attached, renders
the stored board and runs the console REPL on an asyncio event loop.
"""

from __future__ import annotations

import asyncio
import logging

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..connectors.console_view import ConsoleView
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


async def _run(settings) -> None:
    view = ConsoleView()
    state = create_initial_state(settings=settings, notifier=view)

    # Initial render: stored tasks are shown once, then counts are published.
    view.render_board(state.task_store.tasks_by_quadrant())
    state.task_store.publish_counts()

    await run_console_loop(state)


def main() -> None:
    settings = get_settings()

    setup_logging(settings)

    logger.info("Starting %s...", settings.app_name)
    try:
        asyncio.run(_run(settings))
    except KeyboardInterrupt:
        logger.info("Interrupted.")
    logger.info("Bye.")


if __name__ == "__main__":
    main()
