# src/todo_service/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, then serves HTTP in the main thread
until Ctrl+C / SIGTERM.
"""

from __future__ import annotations

import logging
import signal

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.http_connector import run_http_server
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def _handle_sigterm(signum, _frame) -> None:
    logger.info("Signal %s received, shutting down...", signum)
    raise KeyboardInterrupt


def main() -> None:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "INFO")).upper()
    console_level = getattr(logging, level_name, logging.INFO)

    setup_logging(log_dir=settings.log_dir, console_level=console_level)

    logger.info("Starting %s...", settings.app_name)

    # IMPORTANT: reuse same settings object
    state = create_initial_state(settings=settings)

    signal.signal(signal.SIGTERM, _handle_sigterm)

    try:
        run_http_server(state)
    except KeyboardInterrupt:
        logger.info("Interrupted.")
    finally:
        logger.info("Bye. tasks_in_memory=%d (not persisted)", len(state.task_store))


if __name__ == "__main__":
    main()
