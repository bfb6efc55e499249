# src/eisenhower_matrix/tasks/removal.py

from __future__ import annotations

"""
Removal transition.

Completing a task is a two-step affair:
- right away: mark the task completed and let the view show it as done,
- after a short delay: remove it from the store and let the view detach it.

The delay gives the view time to play its "completed" effect. Once started a
transition always runs to the end; there is no cancel.
"""

import asyncio
import logging
from dataclasses import dataclass

from .task_models import TaskPhase
from .task_store import TaskStore

logger = logging.getLogger(__name__)

DEFAULT_REMOVAL_DELAY_SECONDS = 0.3


@dataclass(slots=True)
class _PendingRemoval:
    task_id: str
    handle: asyncio.TimerHandle
    done: asyncio.Future[None]


class RemovalScheduler:
    """
    Schedules deferred removals on the running event loop.

    State per task id:
    - not tracked           -> active (if the store has it)
    - tracked in _pending   -> completing
    - fired and forgotten   -> removed
    """

    def __init__(self, store: TaskStore, *, delay_seconds: float = DEFAULT_REMOVAL_DELAY_SECONDS) -> None:
        self.store = store
        self.delay_seconds = max(0.0, float(delay_seconds))
        self._pending: dict[str, _PendingRemoval] = {}

    def phase(self, task_id: str) -> TaskPhase:
        if task_id in self._pending:
            return TaskPhase.COMPLETING
        if task_id in self.store:
            return TaskPhase.ACTIVE
        return TaskPhase.REMOVED

    def pending_ids(self) -> list[str]:
        return list(self._pending)

    def request_completion(self, task_id: str) -> bool:
        """
        active -> completing.

        Returns False when the task is unknown or already completing; in both cases
        nothing is scheduled and nothing is notified.
        Must be called from inside a running event loop.
        """
        if task_id in self._pending:
            logger.debug("Completion already in progress id=%s", task_id)
            return False

        if task_id not in self.store:
            logger.debug("Completion requested for unknown id=%s", task_id)
            return False

        loop = asyncio.get_running_loop()
        task = self.store.mark_completed(task_id)
        self.store.notify("on_task_completing", task)

        handle = loop.call_later(self.delay_seconds, self._finish, task_id)
        self._pending[task_id] = _PendingRemoval(task_id=task_id, handle=handle, done=loop.create_future())
        logger.info("Task %s -> completing (removal in %.3fs)", task_id, self.delay_seconds)
        return True

    def _finish(self, task_id: str) -> None:
        """completing -> removed."""
        pending = self._pending.pop(task_id, None)
        try:
            removed = self.store.complete_task(task_id)
            if not removed:
                # Someone removed it through the store in the meantime.
                logger.debug("Deferred removal found nothing id=%s", task_id)
            self.store.notify("on_task_removed", task_id)
            logger.info("Task %s -> removed", task_id)
        finally:
            if pending is not None and not pending.done.done():
                pending.done.set_result(None)

    async def wait_idle(self) -> None:
        """Wait until every transition started so far has reached "removed"."""
        while self._pending:
            await asyncio.gather(*(p.done for p in list(self._pending.values())))
