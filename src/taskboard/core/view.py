# src/taskboard/core/view.py

"""
Explicit view state and the pure update functions that drive it.

Every user intent is a function of (store, view, ...) -> new view:
- the TaskStore is mutated only through its own operations,
- the returned ViewState is a fresh frozen value (never mutated in place),
- ValidationError / NotFoundError are turned into notices here, never re-raised.

Key invariants:
- a failed add/save keeps the draft fields so the user can correct them,
- an edit whose target disappeared is closed silently with a soft notice,
- theme and filter changes never touch the store.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Any

from ..tasks.task_models import FilterMode, NotFoundError, Task, ValidationError
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)

STALE_EDIT_NOTICE = "Task no longer exists."


def _optional_id(raw: Any) -> int | None:
    """Unparsable values mean "no edit in progress"."""
    if raw is None or isinstance(raw, bool):
        return None
    try:
        return int(raw)
    except (TypeError, ValueError):
        return None


@dataclass(frozen=True, slots=True)
class ViewState:
    filter_mode: FilterMode = FilterMode.ALL
    dark_mode: bool = False
    draft_title: str = ""
    draft_description: str = ""
    editing_id: int | None = None
    notice: str | None = None

    @property
    def modal_open(self) -> bool:
        return self.editing_id is not None

    def to_dict(self) -> dict[str, Any]:
        return {
            "filter_mode": self.filter_mode.value,
            "dark_mode": self.dark_mode,
            "draft_title": self.draft_title,
            "draft_description": self.draft_description,
            "editing_id": self.editing_id,
            "notice": self.notice,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ViewState:
        notice = data.get("notice")
        return cls(
            filter_mode=FilterMode.from_config(data.get("filter_mode")),
            dark_mode=bool(data.get("dark_mode", False)),
            draft_title=str(data.get("draft_title", "") or ""),
            draft_description=str(data.get("draft_description", "") or ""),
            editing_id=_optional_id(data.get("editing_id")),
            notice=str(notice) if notice is not None else None,
        )


def initial_view(settings: Any = None) -> ViewState:
    """Initial view from settings (dark_mode / default_filter); defaults when absent."""
    return ViewState(
        filter_mode=FilterMode.from_config(getattr(settings, "default_filter", None)),
        dark_mode=bool(getattr(settings, "dark_mode", False)),
    )


def _closed(view: ViewState, notice: str | None = None) -> ViewState:
    return replace(view, draft_title="", draft_description="", editing_id=None, notice=notice)


def visible_tasks(store: TaskStore, view: ViewState) -> list[Task]:
    return store.filter(view.filter_mode)


def set_draft(
    view: ViewState,
    *,
    title: str | None = None,
    description: str | None = None,
) -> ViewState:
    return replace(
        view,
        draft_title=view.draft_title if title is None else title,
        draft_description=view.draft_description if description is None else description,
    )


def add_task(store: TaskStore, view: ViewState) -> ViewState:
    """Create a task from the draft fields; clear them on success."""
    try:
        task = store.create(view.draft_title, view.draft_description)
    except ValidationError as e:
        logger.info("Add rejected: %s", e)
        return replace(view, notice=str(e))
    logger.info("Task added id=%s", task.id)
    return replace(view, draft_title="", draft_description="", notice=None)


def toggle_task(store: TaskStore, view: ViewState, task_id: int) -> ViewState:
    store.toggle_completion(task_id)
    return replace(view, notice=None)


def delete_task(store: TaskStore, view: ViewState, task_id: int) -> ViewState:
    # An open edit on this id is left alone; save_edit resolves it as stale.
    store.delete(task_id)
    return replace(view, notice=None)


def begin_edit(store: TaskStore, view: ViewState, task_id: int) -> ViewState:
    task = store.get(task_id)
    if task is None:
        logger.info("Edit requested for missing task id=%s", task_id)
        return replace(view, notice=STALE_EDIT_NOTICE)
    return replace(
        view,
        draft_title=task.title,
        draft_description=task.description,
        editing_id=task.id,
        notice=None,
    )


def save_edit(store: TaskStore, view: ViewState) -> ViewState:
    if view.editing_id is None:
        return view
    try:
        store.update(view.editing_id, view.draft_title, view.draft_description)
    except ValidationError as e:
        logger.info("Save rejected id=%s: %s", view.editing_id, e)
        return replace(view, notice=str(e))
    except NotFoundError:
        logger.info("Save dropped: task id=%s no longer exists", view.editing_id)
        return _closed(view, notice=STALE_EDIT_NOTICE)
    return _closed(view)


def cancel_edit(view: ViewState) -> ViewState:
    return _closed(view)


def change_filter(view: ViewState, mode: FilterMode | str) -> ViewState:
    return replace(view, filter_mode=FilterMode.parse(mode), notice=None)


def toggle_theme(view: ViewState) -> ViewState:
    return replace(view, dark_mode=not view.dark_mode)
