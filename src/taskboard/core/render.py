# src/taskboard/core/render.py

"""
Plain-text rendering of the current store + view.

The whole screen is rebuilt from scratch on every call; nothing is cached
between renders.
"""

from __future__ import annotations

from ..tasks.task_models import FilterMode, Task, TaskCounts
from ..tasks.task_store import TaskStore
from .view import ViewState, visible_tasks

LIGHT_MARK = "light"
DARK_MARK = "dark"


def render_task(task: Task) -> str:
    mark = "[x]" if task.completed else "[ ]"
    line = f"{task.id:>3}. {mark} {task.title}"
    if task.description:
        line += f" - {task.description}"
    return line


def render_filter_bar(active: FilterMode) -> str:
    parts = []
    for mode in FilterMode:
        label = mode.value.capitalize()
        parts.append(f"[{label}]" if mode is active else f" {label} ")
    return "Filter: " + " ".join(parts)


def render_counts(counts: TaskCounts) -> str:
    return f"Total Tasks: {counts.total} | Active: {counts.active} | Completed: {counts.completed}"


def render_edit_panel(view: ViewState) -> list[str]:
    if not view.modal_open:
        return []
    return [
        f"--- Editing task {view.editing_id} ---",
        f"  Title:       {view.draft_title}",
        f"  Description: {view.draft_description}",
        "  /save [title | description] to save, /cancel to discard",
    ]


def render_screen(store: TaskStore, view: ViewState, app_name: str = "taskboard") -> str:
    theme = DARK_MARK if view.dark_mode else LIGHT_MARK
    lines = [f"== {app_name} ({theme}) ==", render_filter_bar(view.filter_mode)]

    tasks = visible_tasks(store, view)
    if tasks:
        lines.extend(render_task(t) for t in tasks)
    elif len(store):
        lines.append("(no tasks match this filter)")
    else:
        lines.append("(no tasks yet)")

    lines.append(render_counts(store.counts()))
    lines.extend(render_edit_panel(view))
    if view.notice:
        lines.append(f"! {view.notice}")
    return "\n".join(lines)
