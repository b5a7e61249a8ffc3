# src/taskboard/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, then runs the console REPL in the main thread.
"""

from __future__ import annotations

import logging

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "INFO")).upper()
    file_level = getattr(logging, level_name, logging.INFO)

    log_dir = getattr(settings, "log_dir", ".local/taskboard") if settings.log_to_file else None
    # Console only shows warnings: stdout belongs to the rendered task list.
    setup_logging(log_dir=log_dir, file_level=file_level)

    logger.info("Starting %s...", getattr(settings, "app_name", "taskboard"))

    state = create_initial_state(settings=settings)

    try:
        run_console_loop(state)
    finally:
        counts = state.task_store.counts()
        # Nothing is persisted: tasks are gone once the process ends.
        logger.info("Bye. Discarding %d task(s).", counts.total)


if __name__ == "__main__":
    main()
