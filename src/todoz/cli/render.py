# src/todoz/cli/render.py

"""
Text rendering for the console: task lines, progress bar, feedback, banners.

Every function returns a string; printing is left to the console loop so
command handlers stay easy to test.
"""

from __future__ import annotations

from collections.abc import Iterable

from colorama import Fore, Style

from ..tasks.task_models import Task
from ..tasks.task_store import TaskStore

EMPTY_LIST_MESSAGE = "No tasks in the list."
PROGRESS_CELLS = 20
SUBTLE_LINE = "  " + "─ " * 28


class Painter:
    """Wraps text in colorama styles; a disabled painter returns text untouched."""

    def __init__(self, enabled: bool = True) -> None:
        self.enabled = enabled

    def __call__(self, text: str, *styles: str) -> str:
        if not self.enabled or not styles:
            return text
        return "".join(styles) + text + Style.RESET_ALL


# Feedback kinds: (marker, color).
OK = ("✓", Fore.LIGHTGREEN_EX)
INFO = ("·", Fore.LIGHTBLACK_EX)
WARN = ("!", Fore.LIGHTYELLOW_EX)
ERROR = ("✗", Fore.LIGHTRED_EX)


def feedback(paint: Painter, message: str, kind: tuple[str, str] = INFO) -> str:
    marker, color = kind
    return paint(f"    {marker} {message}", color)


def task_line(paint: Painter, task: Task) -> str:
    if task.completed:
        return "  " + paint(task.render_line(), Fore.LIGHTBLACK_EX)
    return "  " + paint(task.render_line(), Fore.LIGHTWHITE_EX)


def progress_line(paint: Painter, done: int, total: int) -> str:
    pct = int(done * 100 / total) if total else 0
    filled = pct // 5
    bar = paint("●" * filled, Fore.LIGHTGREEN_EX) + paint(
        "○" * (PROGRESS_CELLS - filled), Fore.LIGHTBLACK_EX
    )
    return f"    Progress: {bar} {pct}%"


def render_tasks(paint: Painter, store: TaskStore) -> str:
    if not len(store):
        return feedback(paint, EMPTY_LIST_MESSAGE)

    lines = [
        progress_line(paint, store.completed_count(), len(store)),
        paint(SUBTLE_LINE, Fore.LIGHTBLACK_EX),
    ]
    lines.extend(task_line(paint, t) for t in store.list())
    return "\n".join(lines)


def render_help(paint: Painter, entries: Iterable[tuple[str, str]]) -> str:
    lines = [paint("  Available commands:", Fore.LIGHTWHITE_EX)]
    for usage, help_text in entries:
        lines.append(f"    {paint(f'{usage:<14}', Fore.LIGHTCYAN_EX)}  {paint(help_text, Fore.LIGHTBLACK_EX)}")
    return "\n".join(lines)


def render_welcome(paint: Painter) -> str:
    return "\n".join(
        [
            paint("    ╭────────────────────────────────╮", Fore.LIGHTBLACK_EX),
            paint("    │             todoz              │", Fore.LIGHTCYAN_EX),
            paint("    │    mindful task management     │", Fore.LIGHTWHITE_EX),
            paint("    ╰────────────────────────────────╯", Fore.LIGHTBLACK_EX),
            paint("      Type 'list' to see your tasks or 'help' for commands.", Fore.LIGHTBLACK_EX),
        ]
    )


def render_goodbye(paint: Painter) -> str:
    return feedback(paint, "Goodbye, until next time.", OK)


def prompt(paint: Painter) -> str:
    return paint(">", Fore.LIGHTCYAN_EX) + " "
