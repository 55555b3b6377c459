# src/todoz/cli/console.py

from __future__ import annotations

import logging

from ..core.state import AppState
from .commands import registry as command_registry
from .render import ERROR, feedback, prompt, render_welcome

logger = logging.getLogger(__name__)


def run_console_loop(state: AppState) -> None:
    """
    Read-dispatch-print until a quit command (or end of input) stops the state.

    End of input and Ctrl+C at the prompt are handled as "quit", so pending
    changes still get saved.
    """
    logger.info("Console started (tasks=%d).", len(state.store))
    print(render_welcome(state.paint))
    for notice in state.notices:
        print(notice)
    print()

    def emit(text: str) -> None:
        print(text, flush=True)

    while state.running:
        try:
            line = state.read_line(prompt(state.paint))
        except EOFError:
            logger.info("Console EOF received, quitting.")
            print()
            line = "quit"
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, quitting.")
            print()
            line = "quit"
        except UnicodeDecodeError:
            logger.warning("Undecodable console input skipped.", exc_info=True)
            print(feedback(state.paint, "Could not read that line (invalid text encoding). Please try again.", ERROR))
            continue

        try:
            response = command_registry.handle(state, line, emit=emit)
        except Exception:
            logger.exception("Command handler crashed.")
            response = feedback(state.paint, "Internal error while handling a command.", ERROR)

        if response is not None:
            print(response)

    logger.info("Console finished.")
