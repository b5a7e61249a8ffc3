# tests/test_render.py

from __future__ import annotations

from taskboard.core.render import render_counts, render_filter_bar, render_screen, render_task
from taskboard.core.view import ViewState
from taskboard.tasks.task_models import FilterMode, Task, TaskCounts
from taskboard.tasks.task_store import TaskStore


def test_render_task_lines() -> None:
    assert render_task(Task(id=1, title="A")) == "  1. [ ] A"
    assert render_task(Task(id=12, title="B", description="d", completed=True)) == " 12. [x] B - d"


def test_render_counts_matches_footer_format() -> None:
    assert render_counts(TaskCounts(3, 2, 1)) == "Total Tasks: 3 | Active: 2 | Completed: 1"


def test_filter_bar_marks_active_mode() -> None:
    assert render_filter_bar(FilterMode.ACTIVE) == "Filter:  All  [Active]  Completed "


def test_empty_and_filtered_out(store: TaskStore) -> None:
    assert "(no tasks yet)" in render_screen(store, ViewState())

    store.create("A")
    screen = render_screen(store, ViewState(filter_mode=FilterMode.COMPLETED))
    assert "(no tasks match this filter)" in screen


def test_screen_has_edit_panel_and_notice(store: TaskStore) -> None:
    store.create("A")
    v = ViewState(editing_id=1, draft_title="A2", draft_description="x", notice="careful")
    screen = render_screen(store, v, app_name="board")

    lines = screen.splitlines()
    assert lines[0] == "== board (light) =="
    assert "--- Editing task 1 ---" in lines
    assert lines[-1] == "! careful"
