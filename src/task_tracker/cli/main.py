# src/task_tracker/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, then either:
- runs the scripted demo against an in-memory store (--demo), or
- starts the console REPL.
"""

from __future__ import annotations

import argparse
import logging

from ..cli.bootstrap import create_initial_state
from ..cli.demo import run_demo
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging
from ..storage.kv_store import InMemoryKeyValueStore
from ..tasks.task_manager import TaskManager

logger = logging.getLogger(__name__)


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="task-tracker", description="Minimal task tracker.")
    parser.add_argument(
        "--demo",
        action="store_true",
        help="run the scripted demo against an in-memory store and exit",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = _parse_args(argv)
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "INFO")).upper()
    console_level = getattr(logging, level_name, logging.INFO)
    setup_logging(log_dir=settings.data_dir, console_level=console_level)

    logger.info("Starting %s...", settings.app_name)

    if args.demo:
        run_demo(TaskManager(InMemoryKeyValueStore()))
        return

    state = create_initial_state(settings=settings)

    if settings.console_enabled:
        run_console_loop(state)
    else:
        logger.info("Console disabled; nothing to do.")

    logger.info("Bye.")


if __name__ == "__main__":
    main()
