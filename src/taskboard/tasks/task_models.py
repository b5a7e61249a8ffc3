# src/taskboard/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class TaskError(Exception):
    """Base class for task store errors."""


class ValidationError(TaskError, ValueError):
    """Raised when a create/update carries an empty or whitespace-only title."""

    def __init__(self, message: str = "Task title cannot be empty.") -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class NotFoundError(TaskError, KeyError):
    """Raised when an update targets an id that is not (or no longer) in the store."""

    def __init__(self, task_id: int) -> None:
        super().__init__(task_id)
        self.task_id = task_id

    def __str__(self) -> str:
        return f"Task not found: {self.task_id}"


class FilterMode(StrEnum):
    """Three-way view selector over the store."""

    ALL = "all"
    ACTIVE = "active"
    COMPLETED = "completed"

    @classmethod
    def parse(cls, raw: str | FilterMode) -> FilterMode:
        """Strict parse; raises ValueError for unknown names."""
        if isinstance(raw, FilterMode):
            return raw
        return cls(str(raw).strip().lower())

    @classmethod
    def from_config(cls, raw: str | None) -> FilterMode:
        if not raw:
            return cls.ALL
        try:
            return cls.parse(raw)
        except ValueError:
            return cls.ALL

    def matches(self, task: Task) -> bool:
        if self is FilterMode.ACTIVE:
            return not task.completed
        if self is FilterMode.COMPLETED:
            return task.completed
        return True


@dataclass(frozen=True, slots=True)
class Task:
    id: int
    title: str
    description: str = ""
    completed: bool = False


@dataclass(frozen=True, slots=True)
class TaskCounts:
    total: int
    active: int
    completed: int
