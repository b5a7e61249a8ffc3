# src/taskboard/core/state.py

from __future__ import annotations

from dataclasses import dataclass, field

from ..tasks.task_store import TaskStore
from .view import ViewState


@dataclass
class AppState:
    # Store Settings on the state for easy access in other modules later.
    settings: object

    task_store: TaskStore
    view: ViewState = field(default_factory=ViewState)

    # Cleared by /exit; connectors stop reading input once it is False.
    running: bool = True
