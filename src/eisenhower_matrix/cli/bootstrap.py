# src/eisenhower_matrix/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- wires storage backend -> snapshot adapter -> task store -> removal scheduler.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.ports import KeyValueBackend, ViewNotifier
from ..core.state import AppState
from ..storage.backends import FileBackend
from ..storage.snapshot import TaskSnapshotStore
from ..tasks.removal import RemovalScheduler
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.storage_path.parent.mkdir(parents=True, exist_ok=True)


def create_initial_state(
    *,
    settings=None,
    notifier: ViewNotifier | None = None,
    backend: KeyValueBackend | None = None,
) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings (and the backend) injectable makes the app easier to test and
    avoids hidden global config reads. If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    if backend is None:
        _ensure_local_dirs(settings)
        backend = FileBackend(settings.storage_path, quota_bytes=settings.storage_quota_bytes or None)

    snapshots = TaskSnapshotStore(backend, key=settings.storage_key)
    store = TaskStore(snapshots, notifier)
    removals = RemovalScheduler(store, delay_seconds=settings.removal_delay_ms / 1000.0)

    logger.info("State ready: %d tasks under key=%s", len(store), settings.storage_key)
    return AppState(settings=settings, task_store=store, removals=removals)
