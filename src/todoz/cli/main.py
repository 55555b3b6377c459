# src/todoz/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, then runs the console REPL in the main thread.
"""

from __future__ import annotations

import logging

import colorama

from ..cli.bootstrap import create_initial_state
from ..config import Settings, get_settings
from ..core.ports import LineReader
from ..logging_setup import level_from_name, setup_logging
from .console import run_console_loop

logger = logging.getLogger(__name__)


def main(settings: Settings | None = None, read_line: LineReader = input) -> int:
    if settings is None:
        settings = get_settings()

    setup_logging(
        log_file=settings.log_file if settings.log_to_file else None,
        console_level=level_from_name(settings.log_level),
    )
    if settings.color:
        # No-op outside Windows consoles.
        colorama.just_fix_windows_console()

    logger.info("Starting todoz (file=%s)...", settings.todo_file)

    state = create_initial_state(settings=settings, read_line=read_line)
    run_console_loop(state)

    logger.info("Bye.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
