# src/eisenhower_matrix/tasks/task_api.py

from __future__ import annotations

import logging

from ..core.state import AppState
from .quadrants import DEFAULT_QUADRANT, Quadrant
from .task_models import Task

logger = logging.getLogger(__name__)


def request_create(
    state: AppState,
    title: str,
    priority: Quadrant | str | None = DEFAULT_QUADRANT,
) -> Task:
    """
    Inbound signal from the UI: create a task.

    ValidationError propagates so the UI can tell the user what was wrong.
    """
    task = state.task_store.create_task(title, priority)
    logger.info("Created task id=%s quadrant=%s", task.id, task.priority.value)
    return task


def request_complete(state: AppState, task_id: str) -> bool:
    """
    Inbound signal from the UI: start the removal transition for task_id.

    Unknown ids and repeated signals are silent no-ops (returns False).
    """
    return state.removals.request_completion(task_id)
