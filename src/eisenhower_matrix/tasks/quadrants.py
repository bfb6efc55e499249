# src/eisenhower_matrix/tasks/quadrants.py

from __future__ import annotations

"""
Quadrant classifier.

Fixed lookup table shared by the store (counting) and the views (placement,
icons, labels). Nothing else in the app is allowed to spell out quadrant
values by hand.
"""

from dataclasses import dataclass
from enum import StrEnum

from ..core.errors import ValidationError


class Quadrant(StrEnum):
    URGENT_IMPORTANT = "urgent-important"
    IMPORTANT_NOT_URGENT = "important-not-urgent"
    NOT_IMPORTANT_URGENT = "not-important-urgent"
    NOT_IMPORTANT_NOT_URGENT = "not-important-not-urgent"


DEFAULT_QUADRANT: Quadrant = Quadrant.URGENT_IMPORTANT


@dataclass(slots=True, frozen=True)
class QuadrantInfo:
    quadrant: Quadrant
    icon: str
    label: str
    alias: str


# Display order: the matrix is read left-to-right, top-to-bottom.
_TABLE: tuple[QuadrantInfo, ...] = (
    QuadrantInfo(Quadrant.URGENT_IMPORTANT, "🔥", "Urgent & important", "ui"),
    QuadrantInfo(Quadrant.IMPORTANT_NOT_URGENT, "📌", "Important, not urgent", "inu"),
    QuadrantInfo(Quadrant.NOT_IMPORTANT_URGENT, "⏰", "Urgent, not important", "niu"),
    QuadrantInfo(Quadrant.NOT_IMPORTANT_NOT_URGENT, "🧠", "Neither urgent nor important", "nini"),
)

_BY_QUADRANT: dict[Quadrant, QuadrantInfo] = {info.quadrant: info for info in _TABLE}
_BY_ALIAS: dict[str, Quadrant] = {info.alias: info.quadrant for info in _TABLE}


def classify(value: Quadrant | str) -> Quadrant:
    """
    Map a priority value to its quadrant.

    Accepts a Quadrant member or its exact string value. Anything else raises
    ValidationError: there is no fallback bucket.
    """
    if isinstance(value, Quadrant):
        return value
    if not isinstance(value, str):
        raise ValidationError(f"priority must be a string, got {type(value).__name__}")
    try:
        return Quadrant(value)
    except ValueError:
        raise ValidationError(f"unknown priority: {value!r}") from None


def parse_quadrant(token: str) -> Quadrant | None:
    """Lenient parser for user input: full value or short alias. None if unrecognized."""
    key = token.strip().lower()
    if key in _BY_ALIAS:
        return _BY_ALIAS[key]
    try:
        return Quadrant(key)
    except ValueError:
        return None


def all_quadrants() -> tuple[Quadrant, ...]:
    return tuple(info.quadrant for info in _TABLE)


def empty_counts() -> dict[Quadrant, int]:
    return {q: 0 for q in all_quadrants()}


def icon(quadrant: Quadrant) -> str:
    return _BY_QUADRANT[quadrant].icon


def label(quadrant: Quadrant) -> str:
    return _BY_QUADRANT[quadrant].label


def alias(quadrant: Quadrant) -> str:
    return _BY_QUADRANT[quadrant].alias
