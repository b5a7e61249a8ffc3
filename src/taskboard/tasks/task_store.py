# src/taskboard/tasks/task_store.py

from __future__ import annotations

import itertools
import logging
from collections.abc import Iterator
from dataclasses import replace

from .task_models import FilterMode, NotFoundError, Task, TaskCounts, ValidationError

logger = logging.getLogger(__name__)


def _require_title(title: str) -> None:
    if not title or not title.strip():
        raise ValidationError()


class TaskStore:
    """
    In-memory ordered task store.

    - insertion order is the only ordering; edits and toggles never move a task
    - ids come from a strictly increasing counter and are never reused,
      even after the task holding them is deleted
    - nothing is persisted; the store lives as long as the process
    - toggle/delete on an unknown id are no-ops, update on an unknown id raises
    - tasks are frozen; toggle/update store a replaced copy at the same index
    """

    def __init__(self) -> None:
        self._tasks: list[Task] = []
        self._ids = itertools.count(1)
        logger.debug("TaskStore ready (in-memory)")

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(list(self._tasks))

    # ---- low-level helpers ----

    def _index_of(self, task_id: int) -> int | None:
        for i, t in enumerate(self._tasks):
            if t.id == task_id:
                return i
        return None

    # ---- public API ----

    def get(self, task_id: int) -> Task | None:
        idx = self._index_of(task_id)
        return None if idx is None else self._tasks[idx]

    def require(self, task_id: int) -> Task:
        task = self.get(task_id)
        if task is None:
            raise NotFoundError(task_id)
        return task

    def create(self, title: str, description: str = "") -> Task:
        _require_title(title)
        task = Task(id=next(self._ids), title=title, description=description or "")
        self._tasks.append(task)
        logger.debug("Task created id=%s total=%s", task.id, len(self._tasks))
        return task

    def toggle_completion(self, task_id: int) -> None:
        idx = self._index_of(task_id)
        if idx is None:
            logger.debug("toggle_completion: no task id=%s (ignored)", task_id)
            return
        task = replace(self._tasks[idx], completed=not self._tasks[idx].completed)
        self._tasks[idx] = task
        logger.debug("Task toggled id=%s completed=%s", task_id, task.completed)

    def delete(self, task_id: int) -> None:
        idx = self._index_of(task_id)
        if idx is None:
            logger.debug("delete: no task id=%s (ignored)", task_id)
            return
        del self._tasks[idx]
        logger.debug("Task deleted id=%s total=%s", task_id, len(self._tasks))

    def update(self, task_id: int, title: str, description: str = "") -> Task:
        # Validation comes first: an empty title is rejected even for a stale id.
        _require_title(title)
        idx = self._index_of(task_id)
        if idx is None:
            raise NotFoundError(task_id)
        task = replace(self._tasks[idx], title=title, description=description or "")
        self._tasks[idx] = task
        logger.debug("Task updated id=%s", task_id)
        return task

    def filter(self, mode: FilterMode | str = FilterMode.ALL) -> list[Task]:
        fm = FilterMode.parse(mode)
        return [t for t in self._tasks if fm.matches(t)]

    def counts(self) -> TaskCounts:
        completed = sum(1 for t in self._tasks if t.completed)
        total = len(self._tasks)
        return TaskCounts(total=total, active=total - completed, completed=completed)
