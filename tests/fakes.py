# tests/fakes.py

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta

from eisenhower_matrix.storage.backends import MemoryBackend
from eisenhower_matrix.tasks.quadrants import Quadrant
from eisenhower_matrix.tasks.task_models import Task


@dataclass(slots=True)
class RecordingNotifier:
    """
    Fake ViewNotifier.

    - Captures every callback for assertions
    - Never renders anything
    """

    created: list[Task] = field(default_factory=list)
    counts: list[dict[Quadrant, int]] = field(default_factory=list)
    completing: list[str] = field(default_factory=list)
    removed: list[str] = field(default_factory=list)

    def on_task_created(self, task: Task) -> None:
        self.created.append(task)

    def on_counts_changed(self, counts: Mapping[Quadrant, int]) -> None:
        self.counts.append(dict(counts))

    def on_task_completing(self, task: Task) -> None:
        self.completing.append(task.id)

    def on_task_removed(self, task_id: str) -> None:
        self.removed.append(task_id)


class ExplodingNotifier(RecordingNotifier):
    def on_task_created(self, task: Task) -> None:
        raise RuntimeError("view is broken")


class FailingBackend(MemoryBackend):
    """MemoryBackend whose writes fail on demand (disk full, storage disabled...)."""

    def __init__(self) -> None:
        super().__init__()
        self.fail_writes = False
        self.write_attempts = 0

    def set_item(self, key: str, value: str) -> None:
        self.write_attempts += 1
        if self.fail_writes:
            raise OSError("No space left on device")
        super().set_item(key, value)


class StepClock:
    """Deterministic clock: every call advances by `step`."""

    def __init__(self, start: datetime | None = None, step: timedelta = timedelta(seconds=1)) -> None:
        self.now = start or datetime(2024, 5, 1, 9, 0, tzinfo=UTC)
        self.step = step

    def __call__(self) -> datetime:
        current = self.now
        self.now = self.now + self.step
        return current
