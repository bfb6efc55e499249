# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from eisenhower_matrix.cli.bootstrap import create_initial_state
from eisenhower_matrix.core.state import AppState
from eisenhower_matrix.storage.backends import MemoryBackend
from eisenhower_matrix.storage.snapshot import TaskSnapshotStore
from eisenhower_matrix.tasks.task_store import TaskStore

from .fakes import RecordingNotifier, StepClock


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with bootstrap and the store.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="eisenhower-test",
        log_level="DEBUG",
        data_dir=tmp_path / "data",
        storage_path=tmp_path / "data" / "storage.json",
        storage_key="eisenhower-tasks",
        storage_quota_bytes=0,
        # Short delay so removal tests stay fast.
        removal_delay_ms=10,
    )


@pytest.fixture()
def backend() -> MemoryBackend:
    return MemoryBackend()


@pytest.fixture()
def snapshots(backend: MemoryBackend) -> TaskSnapshotStore:
    return TaskSnapshotStore(backend)


@pytest.fixture()
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture()
def store(snapshots: TaskSnapshotStore, notifier: RecordingNotifier) -> TaskStore:
    return TaskStore(snapshots, notifier, clock=StepClock())


@pytest.fixture()
def state(settings: SimpleNamespace, backend: MemoryBackend, notifier: RecordingNotifier) -> AppState:
    """AppState wired like the real app, but on in-memory storage."""
    return create_initial_state(settings=settings, notifier=notifier, backend=backend)
