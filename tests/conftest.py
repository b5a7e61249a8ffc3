# tests/conftest.py

from __future__ import annotations

from types import SimpleNamespace

import pytest

from taskboard.core.state import AppState
from taskboard.core.view import initial_view
from taskboard.tasks.task_store import TaskStore


@pytest.fixture()
def settings() -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the CLI modules.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment.
    """
    return SimpleNamespace(
        app_name="taskboard-test",
        log_level="DEBUG",
        log_dir=None,
        log_to_file=False,
        dark_mode=False,
        default_filter="all",
    )


@pytest.fixture()
def store() -> TaskStore:
    return TaskStore()


@pytest.fixture()
def state(settings: SimpleNamespace, store: TaskStore) -> AppState:
    return AppState(settings=settings, task_store=store, view=initial_view(settings))
