# src/todoz/cli/pomodoro.py

from __future__ import annotations

import logging
import sys
import time
from collections.abc import Callable

from colorama import Fore

from .render import OK, Painter, feedback

logger = logging.getLogger(__name__)

Emitter = Callable[[str], None]


def _clock_color(minutes_left: int) -> str:
    if minutes_left >= 20:
        return Fore.LIGHTGREEN_EX
    if minutes_left >= 10:
        return Fore.LIGHTCYAN_EX
    if minutes_left >= 5:
        return Fore.LIGHTYELLOW_EX
    return Fore.LIGHTRED_EX


def run_pomodoro(
    paint: Painter,
    minutes: int,
    emit: Emitter,
    *,
    redraw: Emitter | None = None,
    clock: Callable[[], float] = time.monotonic,
    sleep: Callable[[float], None] = time.sleep,
    tick_seconds: float = 0.2,
) -> bool:
    """
    Blocking focus timer.

    `emit` prints a full line. `redraw` rewrites the current line in place; when it
    is None (no TTY) the remaining time is emitted once per minute instead.
    Returns False when interrupted with Ctrl+C, True when the time ran out.
    """
    duration = minutes * 60
    emit(feedback(paint, f"Starting a {minutes}-minute focus session. Ctrl+C stops it.", OK))
    logger.info("Pomodoro started minutes=%s", minutes)

    start = clock()
    last_shown: int | None = None
    try:
        while True:
            remaining = duration - int(clock() - start)
            if remaining <= 0:
                break

            mins, secs = divmod(remaining, 60)
            text = paint(f"      {mins:02d}:{secs:02d} remaining", _clock_color(mins))
            if redraw is not None:
                if remaining != last_shown:
                    redraw(text)
                    last_shown = remaining
            elif last_shown is None or last_shown - remaining >= 60:
                emit(text)
                last_shown = remaining
            sleep(tick_seconds)
    except KeyboardInterrupt:
        if redraw is not None:
            emit("")
        logger.info("Pomodoro cancelled.")
        emit(feedback(paint, "Focus session stopped."))
        return False

    if redraw is not None:
        emit("")
    logger.info("Pomodoro finished.")
    emit(feedback(paint, "Time's up! Well done. Take a 5-minute break.", OK))
    return True


def terminal_redraw() -> Emitter | None:
    """Carriage-return redraw for interactive terminals, None otherwise."""
    if not sys.stdout.isatty():
        return None

    def _redraw(line: str) -> None:
        sys.stdout.write("\r\033[2K" + line)
        sys.stdout.flush()

    return _redraw
