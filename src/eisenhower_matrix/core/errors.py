# src/eisenhower_matrix/core/errors.py

from __future__ import annotations


class ValidationError(ValueError):
    """Invalid input on task creation (empty title, unknown quadrant). Nothing was mutated."""


class PersistenceError(RuntimeError):
    """
    Storage read/write failure.

    Raised by the snapshot adapter; the TaskStore catches it, logs it and keeps
    its in-memory collection authoritative for the rest of the session.
    """
