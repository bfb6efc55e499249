# tasks/task_store.py

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from datetime import UTC, datetime

from ..core.errors import PersistenceError
from ..core.ports import NullNotifier, SnapshotRepo, ViewNotifier
from .quadrants import DEFAULT_QUADRANT, Quadrant, all_quadrants, classify, empty_counts
from .task_models import Task, normalize_title

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(UTC)


def _id_number(task_id: str) -> int:
    try:
        return int(task_id)
    except ValueError:
        return 0


class TaskStore:
    """
    In-memory task collection, the single source of truth.

    Every mutation follows the same order:
      validate -> mutate the list -> save the full snapshot -> notify the view

    Persistence failures are logged and remembered in last_save_error; they never
    undo the in-memory change. Single-threaded: callers run on one event loop.
    """

    def __init__(
        self,
        snapshots: SnapshotRepo,
        notifier: ViewNotifier | None = None,
        *,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._snapshots = snapshots
        self._clock = clock
        self.notifier: ViewNotifier = notifier or NullNotifier()
        self.last_save_error: PersistenceError | None = None

        self._tasks: list[Task] = list(snapshots.load())
        self._last_id = max((_id_number(t.id) for t in self._tasks), default=0)
        logger.info("TaskStore ready tasks=%d", len(self._tasks))

    # ---- low-level helpers ----

    def _next_id(self, created_at: datetime) -> str:
        # Millisecond timestamp, bumped when the clock repeats or steps back.
        candidate = int(created_at.timestamp() * 1000)
        if candidate <= self._last_id:
            candidate = self._last_id + 1
        self._last_id = candidate
        return str(candidate)

    def _index_of(self, task_id: str) -> int | None:
        for i, task in enumerate(self._tasks):
            if task.id == task_id:
                return i
        return None

    def _persist(self) -> None:
        try:
            self._snapshots.save(self._tasks)
        except PersistenceError as e:
            self.last_save_error = e
            logger.warning("Snapshot save failed; keeping in-memory state.", exc_info=True)
        else:
            self.last_save_error = None

    def notify(self, event: str, *args: object) -> None:
        callback = getattr(self.notifier, event)
        try:
            callback(*args)
        except Exception:
            logger.exception("View notifier %s failed", event)

    # ---- mutations ----

    def create_task(self, title: str, priority: Quadrant | str | None = DEFAULT_QUADRANT) -> Task:
        """Validate, append, save, then fire on_task_created and on_counts_changed."""
        clean_title = normalize_title(title)
        quadrant = DEFAULT_QUADRANT if priority is None else classify(priority)

        created_at = self._clock()
        task = Task(
            id=self._next_id(created_at),
            title=clean_title,
            priority=quadrant,
            created_at=created_at,
        )
        self._tasks.append(task)
        logger.debug("Task created id=%s priority=%s", task.id, quadrant.value)

        self._persist()
        self.notify("on_task_created", task)
        self.publish_counts()
        return task

    def mark_completed(self, task_id: str) -> Task | None:
        """Set the completed flag and save; counts are unchanged until removal."""
        task = self.get_task(task_id)
        if task is None:
            return None
        task.completed = True
        self._persist()
        return task

    def complete_task(self, task_id: str) -> bool:
        """
        Remove the task with this id.

        Returns False (and touches nothing) when no such task exists, so duplicate
        completion signals are harmless.
        """
        index = self._index_of(task_id)
        if index is None:
            logger.debug("complete_task: no task id=%s", task_id)
            return False

        task = self._tasks.pop(index)
        logger.debug("Task removed id=%s priority=%s", task.id, task.priority.value)

        self._persist()
        self.publish_counts()
        return True

    def publish_counts(self) -> None:
        self.notify("on_counts_changed", self.get_counts())

    # ---- queries ----

    def get_counts(self) -> dict[Quadrant, int]:
        counts = empty_counts()
        for task in self._tasks:
            counts[task.priority] += 1
        return counts

    def get_task(self, task_id: str) -> Task | None:
        index = self._index_of(task_id)
        return None if index is None else self._tasks[index]

    def list_tasks(self, quadrant: Quadrant | None = None) -> list[Task]:
        if quadrant is None:
            return list(self._tasks)
        return [t for t in self._tasks if t.priority == quadrant]

    def tasks_by_quadrant(self) -> dict[Quadrant, list[Task]]:
        grouped: dict[Quadrant, list[Task]] = {q: [] for q in all_quadrants()}
        for task in self._tasks:
            grouped[task.priority].append(task)
        return grouped

    def __len__(self) -> int:
        return len(self._tasks)

    def __contains__(self, task_id: object) -> bool:
        return isinstance(task_id, str) and self._index_of(task_id) is not None

    def __iter__(self) -> Iterator[Task]:
        return iter(list(self._tasks))
