# src/taskpad/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, loads stored tasks, runs the console
REPL and saves on the way out.
"""

from __future__ import annotations

import logging

from ..cli.bootstrap import create_initial_state, restore_tasks, save_tasks
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()

    level_name = str(settings.log_level).upper()
    console_level = getattr(logging, level_name, logging.INFO)
    setup_logging(log_dir=settings.data_dir, console_level=console_level)

    logger.info("Starting %s...", settings.app_name)

    state = create_initial_state(settings=settings)

    restore_tasks(state)

    try:
        run_console_loop(state)
    finally:
        if state.persist_enabled:
            try:
                save_tasks(state)
            except Exception:
                logger.exception("Failed to save tasks.")
        logger.info("Bye.")


if __name__ == "__main__":
    main()
