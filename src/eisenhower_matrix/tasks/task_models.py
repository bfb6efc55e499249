# tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime
from enum import StrEnum
from typing import Any

from ..core.errors import ValidationError
from .quadrants import Quadrant, classify


class TaskPhase(StrEnum):
    """
    Removal transition phase.

    active -> completing -> removed. A task in "completing" is still in the
    collection (and counted) until the deferred removal fires.
    """

    ACTIVE = "active"
    COMPLETING = "completing"
    REMOVED = "removed"


def normalize_title(raw: Any) -> str:
    """Trim surrounding whitespace; reject non-strings and blank titles."""
    if not isinstance(raw, str):
        raise ValidationError("title must be a string")
    title = raw.strip()
    if not title:
        raise ValidationError("title must not be empty")
    return title


def parse_timestamp(raw: Any) -> datetime:
    """Parse an ISO 8601 timestamp (browser-style trailing 'Z' included) into an aware UTC datetime."""
    if not isinstance(raw, str) or not raw.strip():
        raise ValidationError("createdAt must be an ISO 8601 string")
    text = raw.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        dt = datetime.fromisoformat(text)
    except ValueError:
        raise ValidationError(f"createdAt is not a valid timestamp: {raw!r}") from None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    return dt


@dataclass(slots=True)
class Task:
    id: str
    title: str
    priority: Quadrant
    created_at: datetime
    completed: bool = False

    def to_record(self) -> dict[str, Any]:
        """Snapshot record (field names match the persisted layout)."""
        return {
            "id": self.id,
            "title": self.title,
            "priority": self.priority.value,
            "createdAt": self.created_at.isoformat(),
            "completed": self.completed,
        }

    @classmethod
    def from_record(cls, raw: Any) -> Task:
        """Build a Task from a snapshot record; raises ValidationError on anything malformed."""
        if not isinstance(raw, dict):
            raise ValidationError("task record must be an object")

        task_id = raw.get("id")
        if isinstance(task_id, int) and not isinstance(task_id, bool):
            task_id = str(task_id)
        if not isinstance(task_id, str) or not task_id:
            raise ValidationError("task record has no id")

        completed = raw.get("completed", False)
        if not isinstance(completed, bool):
            raise ValidationError("completed must be a boolean")

        return cls(
            id=task_id,
            title=normalize_title(raw.get("title")),
            priority=classify(raw.get("priority")),
            created_at=parse_timestamp(raw.get("createdAt")),
            completed=completed,
        )
