# tests/test_console.py

from __future__ import annotations

from taskboard.cli.bootstrap import create_initial_state
from taskboard.connectors.console_connector import run_console_loop
from taskboard.tasks.task_models import FilterMode

from .fakes import FakeConsole


def test_console_session(state) -> None:
    console = FakeConsole(
        [
            "Buy milk",
            "/add Walk dog | twice",
            "",
            "/toggle 1",
            "/filter active",
            "/exit",
            "/add never reached",
        ]
    )

    run_console_loop(state, read=console.read, write=console.write)

    assert [t.title for t in state.task_store] == ["Buy milk", "Walk dog"]
    assert state.view.filter_mode is FilterMode.ACTIVE
    assert "Total Tasks: 2 | Active: 1 | Completed: 1" in console.out[-2]
    assert console.out[-1] == "Bye."
    assert state.running is False
    assert len(console.prompts) == 6


def test_console_stops_on_eof(state) -> None:
    console = FakeConsole(["/add A"])
    run_console_loop(state, read=console.read, write=console.write)
    assert len(state.task_store) == 1


def test_console_reports_handler_crash(state, monkeypatch) -> None:
    def boom(*_args, **_kwargs):
        raise RuntimeError("boom")

    monkeypatch.setattr("taskboard.cli.commands.render_counts", boom)
    console = FakeConsole(["/stats", "/stats", "/list"])
    run_console_loop(state, read=console.read, write=console.write)

    assert console.out.count("Internal error while handling a command.") == 2
    assert console.out[-1].startswith("== taskboard-test")


def test_bootstrap_uses_settings(settings) -> None:
    settings.dark_mode = True
    settings.default_filter = "completed"
    state = create_initial_state(settings=settings)

    assert len(state.task_store) == 0
    assert state.view.dark_mode is True
    assert state.view.filter_mode is FilterMode.COMPLETED
