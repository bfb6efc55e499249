# src/eisenhower_matrix/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The core depends on Protocols instead of concrete implementations.
This keeps the view and the storage backend swappable and makes testing easier.
"""

from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..tasks.quadrants import Quadrant
    from ..tasks.task_models import Task


class ViewNotifier(Protocol):
    """
    View-side port: how the core tells the UI what changed.

    The view decides how to render; it never mutates the store directly.
    - on_task_created: fired exactly once per successful create
    - on_counts_changed: fired after every mutation that changes the collection size
    - on_task_completing: completion requested, apply the "completed" look now
    - on_task_removed: deferred removal done, detach the element (it may already be gone)
    """

    def on_task_created(self, task: Task) -> None: ...
    def on_counts_changed(self, counts: Mapping[Quadrant, int]) -> None: ...
    def on_task_completing(self, task: Task) -> None: ...
    def on_task_removed(self, task_id: str) -> None: ...


class KeyValueBackend(Protocol):
    """Local-storage style string store: one value per key, whole value rewritten on set."""

    def get_item(self, key: str) -> str | None: ...
    def set_item(self, key: str, value: str) -> None: ...


class SnapshotRepo(Protocol):
    def load(self) -> list[Task]: ...
    def save(self, tasks: Sequence[Task]) -> None: ...


class NullNotifier:
    """Notifier that ignores everything (headless use, scripts)."""

    def on_task_created(self, task: Task) -> None:
        return

    def on_counts_changed(self, counts: Mapping[Quadrant, int]) -> None:
        return

    def on_task_completing(self, task: Task) -> None:
        return

    def on_task_removed(self, task_id: str) -> None:
        return
