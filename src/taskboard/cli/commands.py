# src/taskboard/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..core import view as views
from ..core.render import render_counts, render_screen
from ..core.state import AppState
from ..tasks.task_models import FilterMode

# Handlers get the raw text after the command name, unsplit ("" when absent).
CommandHandler = Callable[[AppState, str], str]

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by connectors (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, state: AppState, line: str) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split(maxsplit=1)
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        arg = parts[1] if len(parts) > 1 else ""

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        return handler(state, arg)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def _split_fields(arg: str) -> tuple[str, str | None]:
    """'Buy milk | 2%' -> ('Buy milk', '2%'); 'Buy milk' -> ('Buy milk', None)."""
    title, sep, description = arg.partition("|")
    if not sep:
        return arg.strip(), None
    return title.strip(), description.strip()


def _parse_id(arg: str) -> int | None:
    parts = arg.split()
    if len(parts) != 1:
        return None
    try:
        return int(parts[0].lstrip("#"))
    except ValueError:
        return None


def _screen(state: AppState) -> str:
    app_name = str(getattr(state.settings, "app_name", "taskboard"))
    return render_screen(state.task_store, state.view, app_name=app_name)


def cmd_help(state: AppState, arg: str) -> str:
    return registry.build_help()


def cmd_list(state: AppState, arg: str) -> str:
    return _screen(state)


def cmd_add(state: AppState, arg: str) -> str:
    """
    /add Buy milk            -> title only
    /add Buy milk | 2%       -> title + description
    """
    if state.view.modal_open:
        return "An edit is in progress. Use /save or /cancel first."
    title, description = _split_fields(arg)
    state.view = views.add_task(
        state.task_store, views.set_draft(state.view, title=title, description=description or "")
    )
    return _screen(state)


def cmd_toggle(state: AppState, arg: str) -> str:
    task_id = _parse_id(arg)
    if task_id is None:
        return "Usage: /toggle <id>"
    state.view = views.toggle_task(state.task_store, state.view, task_id)
    return _screen(state)


def cmd_delete(state: AppState, arg: str) -> str:
    task_id = _parse_id(arg)
    if task_id is None:
        return "Usage: /delete <id>"
    state.view = views.delete_task(state.task_store, state.view, task_id)
    return _screen(state)


def cmd_edit(state: AppState, arg: str) -> str:
    task_id = _parse_id(arg)
    if task_id is None:
        return "Usage: /edit <id>"
    state.view = views.begin_edit(state.task_store, state.view, task_id)
    return _screen(state)


def cmd_save(state: AppState, arg: str) -> str:
    """
    /save                       -> save the preloaded draft as is
    /save New title             -> replace the draft title, keep the draft description
    /save New title | New desc  -> replace both, then save
    """
    if not state.view.modal_open:
        return "Nothing to save. Use /edit <id> first."
    if arg.strip():
        title, description = _split_fields(arg)
        state.view = views.set_draft(state.view, title=title, description=description)
    state.view = views.save_edit(state.task_store, state.view)
    return _screen(state)


def cmd_cancel(state: AppState, arg: str) -> str:
    if not state.view.modal_open:
        return "No edit in progress."
    state.view = views.cancel_edit(state.view)
    return _screen(state)


def cmd_filter(state: AppState, arg: str) -> str:
    """
    /filter                 -> show current filter
    /filter all|active|completed
    """
    parts = arg.split()
    if not parts:
        return f"Current filter: {state.view.filter_mode.value}. Use /filter all|active|completed."
    try:
        mode = FilterMode.parse(parts[0])
    except ValueError:
        return "Usage: /filter all|active|completed"
    state.view = views.change_filter(state.view, mode)
    return _screen(state)


def cmd_theme(state: AppState, arg: str) -> str:
    state.view = views.toggle_theme(state.view)
    logger.debug("Theme switched dark_mode=%s", state.view.dark_mode)
    return _screen(state)


def cmd_stats(state: AppState, arg: str) -> str:
    return render_counts(state.task_store.counts())


def cmd_exit(state: AppState, arg: str) -> str:
    state.running = False
    logger.info("Exit command received.")
    return "Bye."


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("list", cmd_list, help_text="Show the task list.", aliases=["ls"])
registry.register("add", cmd_add, help_text="Add a task: /add <title> [| description].")
registry.register("toggle", cmd_toggle, help_text="Toggle completion: /toggle <id>.", aliases=["done"])
registry.register("delete", cmd_delete, help_text="Delete a task: /delete <id>.", aliases=["rm"])
registry.register("edit", cmd_edit, help_text="Start editing a task: /edit <id>.")
registry.register(
    "save", cmd_save, help_text="Save the edit: /save [title] [| description]."
)
registry.register("cancel", cmd_cancel, help_text="Discard the edit in progress.")
registry.register("filter", cmd_filter, help_text="Change filter: /filter all|active|completed.")
registry.register("theme", cmd_theme, help_text="Toggle dark/light theme.")
registry.register("stats", cmd_stats, help_text="Show task counts.")
registry.register("exit", cmd_exit, help_text="Quit (tasks are discarded).", aliases=["quit"])
