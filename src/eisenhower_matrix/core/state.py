# src/eisenhower_matrix/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..tasks.removal import RemovalScheduler
from ..tasks.task_store import TaskStore


@dataclass
class AppState:
    # Settings object (config.Settings or a test stand-in).
    settings: object

    task_store: TaskStore
    removals: RemovalScheduler
