# src/eisenhower_matrix/connectors/console_view.py

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, Sequence
from datetime import datetime

from ..tasks.quadrants import Quadrant, all_quadrants, icon, label
from ..tasks.task_models import Task

logger = logging.getLogger(__name__)

Printer = Callable[[str], None]


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def format_task(task: Task) -> str:
    mark = "x" if task.completed else " "
    return f"[{mark}] {icon(task.priority)} {task.id} {task.title}"


def format_counts(counts: Mapping[Quadrant, int]) -> str:
    return "  ".join(f"{icon(q)} {counts.get(q, 0)}" for q in all_quadrants())


def format_board(grouped: Mapping[Quadrant, Sequence[Task]]) -> str:
    lines: list[str] = []
    for q in all_quadrants():
        tasks = grouped.get(q, [])
        lines.append(f"{icon(q)} {label(q)} ({len(tasks)})")
        if not tasks:
            lines.append("    (empty)")
        for task in tasks:
            lines.append(f"    {format_task(task)}")
    return "\n".join(lines)


class ConsoleView:
    """
    Terminal rendering of the matrix (implements the ViewNotifier port).

    Keeps a map of rendered task lines, the console equivalent of the card
    elements a browser view would hold. Detaching an element that is already
    gone is allowed.
    """

    def __init__(self, printer: Printer | None = None) -> None:
        self._print: Printer = printer or (lambda text: print(f"[{_ts_local()}] {text}"))
        self.elements: dict[str, str] = {}
        self.counts: dict[Quadrant, int] = {q: 0 for q in all_quadrants()}

    def render_board(self, grouped: Mapping[Quadrant, Sequence[Task]]) -> None:
        """Initial render of everything already in the store."""
        self.elements = {t.id: format_task(t) for q in all_quadrants() for t in grouped.get(q, [])}
        self._print(format_board(grouped))

    def on_task_created(self, task: Task) -> None:
        line = format_task(task)
        self.elements[task.id] = line
        self._print(f"+ {line}")

    def on_counts_changed(self, counts: Mapping[Quadrant, int]) -> None:
        self.counts = dict(counts)
        self._print(f"counts: {format_counts(counts)}")

    def on_task_completing(self, task: Task) -> None:
        line = format_task(task)
        if task.id in self.elements:
            self.elements[task.id] = line
        self._print(f"~ {line}")

    def on_task_removed(self, task_id: str) -> None:
        line = self.elements.pop(task_id, None)
        if line is None:
            logger.debug("Task %s had no rendered element; nothing to detach.", task_id)
            return
        self._print(f"- {task_id} removed")
