# tests/test_console.py

from __future__ import annotations

import asyncio
from datetime import UTC, datetime

import pytest

from eisenhower_matrix.cli.bootstrap import create_initial_state
from eisenhower_matrix.connectors.console_connector import handle_line, run_console_loop
from eisenhower_matrix.connectors.console_view import ConsoleView, format_board
from eisenhower_matrix.tasks.quadrants import Quadrant
from eisenhower_matrix.tasks.task_models import Task


def _task(task_id: str = "1", title: str = "Read", quadrant: Quadrant = Quadrant.URGENT_IMPORTANT) -> Task:
    return Task(id=task_id, title=title, priority=quadrant, created_at=datetime(2024, 5, 1, tzinfo=UTC))


def test_view_tracks_elements_and_tolerates_missing_ones() -> None:
    lines: list[str] = []
    view = ConsoleView(printer=lines.append)
    task = _task()

    view.on_task_created(task)
    task.completed = True
    view.on_task_completing(task)
    view.on_task_removed(task.id)
    view.on_task_removed(task.id)

    assert view.elements == {}
    assert lines[0].startswith("+ [ ]")
    assert lines[1].startswith("~ [x]")
    assert lines[2] == f"- {task.id} removed"
    assert len(lines) == 3


def test_view_counts_and_board() -> None:
    lines: list[str] = []
    view = ConsoleView(printer=lines.append)
    counts = {q: 0 for q in Quadrant}
    counts[Quadrant.NOT_IMPORTANT_URGENT] = 2

    view.on_counts_changed(counts)
    view.render_board({Quadrant.URGENT_IMPORTANT: [_task()]})

    assert view.counts[Quadrant.NOT_IMPORTANT_URGENT] == 2
    assert "⏰ 2" in lines[0]
    assert set(view.elements) == {"1"}
    assert lines[1] == format_board({Quadrant.URGENT_IMPORTANT: [_task()]})


def test_bare_line_adds_to_default_quadrant(state) -> None:
    assert handle_line(state, "Pay invoice") is None
    (task,) = state.task_store.list_tasks()
    assert task.priority is Quadrant.URGENT_IMPORTANT


@pytest.mark.asyncio
async def test_console_loop_waits_for_pending_removals(settings, backend) -> None:
    lines: list[str] = []
    state = create_initial_state(settings=settings, notifier=ConsoleView(printer=lines.append), backend=backend)
    task = state.task_store.create_task("Ship it")
    script = iter([f"/done {task.id}", "", "/exit"])

    async def fake_input(prompt: str) -> str:
        return next(script)

    await run_console_loop(state, read_line=fake_input)

    assert len(state.task_store) == 0
    assert lines[-1] == f"- {task.id} removed"


@pytest.mark.asyncio
async def test_console_loop_stops_on_eof(state) -> None:
    async def eof(prompt: str) -> str:
        raise EOFError

    await run_console_loop(state, read_line=eof)


@pytest.mark.asyncio
async def test_cancelled_console_loop_still_finishes_removals(state, backend) -> None:
    task = state.task_store.create_task("Done right before Ctrl+C")
    script = [f"/done {task.id}"]
    waiting = asyncio.Event()

    async def reader(prompt: str) -> str:
        if script:
            return script.pop(0)
        waiting.set()
        await asyncio.Event().wait()
        return ""

    runner = asyncio.create_task(run_console_loop(state, read_line=reader))
    await waiting.wait()
    assert state.removals.pending_ids() == [task.id]

    runner.cancel()
    with pytest.raises(asyncio.CancelledError):
        await runner

    assert state.removals.pending_ids() == []
    assert len(state.task_store) == 0
    assert backend.get_item("eisenhower-tasks") == "[]"
