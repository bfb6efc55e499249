# src/eisenhower_matrix/storage/snapshot.py

from __future__ import annotations

import json
import logging
from collections.abc import Sequence

from ..core.errors import PersistenceError, ValidationError
from ..core.ports import KeyValueBackend
from ..tasks.task_models import Task

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "eisenhower-tasks"


class TaskSnapshotStore:
    """
    Persistence adapter: the whole task collection as one JSON array under one key.

    load() never raises: a missing, unreadable or corrupt snapshot yields an empty
    collection so the app can keep going. save() rewrites the full array and
    raises PersistenceError on failure; the caller decides what to do with it.
    """

    def __init__(self, backend: KeyValueBackend, key: str = DEFAULT_STORAGE_KEY) -> None:
        self.backend = backend
        self.key = key

    def load(self) -> list[Task]:
        try:
            raw = self.backend.get_item(self.key)
        except (PersistenceError, OSError):
            logger.warning("Snapshot key=%s could not be read; starting empty.", self.key, exc_info=True)
            return []
        if raw is None:
            return []

        try:
            data = json.loads(raw)
        except (ValueError, RecursionError):
            # RecursionError: valid but absurdly deep nesting.
            logger.warning("Snapshot key=%s is not valid JSON; starting empty.", self.key)
            return []
        if not isinstance(data, list):
            logger.warning("Snapshot key=%s is not a JSON array; starting empty.", self.key)
            return []

        tasks: list[Task] = []
        seen: set[str] = set()
        for index, record in enumerate(data):
            try:
                task = Task.from_record(record)
            except ValidationError as e:
                logger.warning("Skipping snapshot record #%d: %s", index, e)
                continue
            if task.id in seen:
                logger.warning("Skipping snapshot record #%d: duplicate id %s", index, task.id)
                continue
            seen.add(task.id)
            tasks.append(task)

        logger.debug("Snapshot loaded key=%s tasks=%d", self.key, len(tasks))
        return tasks

    def save(self, tasks: Sequence[Task]) -> None:
        try:
            payload = json.dumps([t.to_record() for t in tasks], ensure_ascii=False)
        except (TypeError, ValueError) as e:
            raise PersistenceError(f"cannot serialize snapshot: {e}") from e
        try:
            self.backend.set_item(self.key, payload)
        except OSError as e:
            raise PersistenceError(f"cannot write snapshot key={self.key}: {e}") from e
        logger.debug("Snapshot saved key=%s tasks=%d", self.key, len(tasks))
