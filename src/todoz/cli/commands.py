# src/todoz/cli/commands.py

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable
from typing import cast

from ..core.state import AppState
from ..errors import EmptyInputError, StorageIOError, TodoError, UsageError
from .pomodoro import run_pomodoro, terminal_redraw
from .render import (
    ERROR,
    INFO,
    OK,
    WARN,
    feedback,
    render_goodbye,
    render_help,
    render_tasks,
)

CommandEmitter = Callable[[str], None]
CommandHandler2 = Callable[[AppState, str], str | None]
CommandHandler3 = Callable[[AppState, str, CommandEmitter | None], str | None]
CommandHandler = CommandHandler2 | CommandHandler3

logger = logging.getLogger(__name__)


def split_command(line: str) -> tuple[str, str]:
    """
    "add Buy milk" -> ("add", "Buy milk").

    Splits on the first run of whitespace only; the remainder is kept as one argument.
    """
    parts = line.strip().split(None, 1)
    if not parts:
        return "", ""
    name = parts[0].lower()
    arg = parts[1].strip() if len(parts) > 1 else ""
    return name, arg


class CommandRegistry:
    """Command table used by the console loop (list, add, x, rm, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, tuple[str, str]] = {}
        self._default: str | None = None

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        usage: str | None = None,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = (usage or key, help_text)
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def set_default(self, name: str) -> None:
        """Command run for an empty input line."""
        self._default = name.lower()

    def handle(self, state: AppState, line: str, emit: CommandEmitter | None = None) -> str | None:
        """
        Handle one input line.

        Returns the text to print, or None when there is nothing (left) to print.
        TodoError from a handler is turned into a one-line message.
        """
        name, arg = split_command(line)
        if not name:
            if self._default is None:
                return None
            name = self._default

        handler = self._handlers.get(name)
        if not handler:
            return feedback(
                state.paint, f"Unknown command: '{name}'. Type 'help' to list available commands."
            )

        try:
            nparams = len(inspect.signature(handler).parameters)
        except (TypeError, ValueError):
            nparams = 3

        try:
            if nparams >= 3:
                h3 = cast(CommandHandler3, handler)
                return h3(state, arg, emit)
            h2 = cast(CommandHandler2, handler)
            return h2(state, arg)
        except (EmptyInputError, UsageError) as e:
            return feedback(state.paint, str(e), INFO)
        except TodoError as e:
            logger.info("Command %s failed: %s", name, e)
            return feedback(state.paint, str(e), ERROR)

    def help_entries(self) -> list[tuple[str, str]]:
        return list(self._help.values())


registry = CommandRegistry()


# ---- helpers ----


def _persist(state: AppState) -> str | None:
    """Save the store; returns an error line when the write failed."""
    try:
        state.repo.save(state.store)
    except StorageIOError as e:
        state.dirty = True
        logger.warning("Save failed: %s", e)
        return feedback(state.paint, f"{e} (changes kept in memory)", ERROR)
    state.dirty = False
    return None


def _parse_task_id(arg: str, hint: str) -> int:
    if not arg:
        raise UsageError(hint)
    try:
        return int(arg)
    except ValueError:
        raise UsageError("Please provide a valid task number.") from None


def _after_mutation(state: AppState, message: str, show_list: bool = True) -> str:
    lines = [feedback(state.paint, message, OK)]
    save_error = _persist(state)
    if save_error:
        lines.append(save_error)
    if show_list:
        lines.append(render_tasks(state.paint, state.store))
    return "\n".join(lines)


# ---- handlers ----


def cmd_list(state: AppState, arg: str) -> str:
    return render_tasks(state.paint, state.store)


def cmd_add(state: AppState, arg: str) -> str:
    task = state.store.add(arg)
    return _after_mutation(state, f"Task {task.id} added.")


def cmd_toggle(state: AppState, arg: str) -> str:
    task_id = _parse_task_id(arg, "Which task? Provide the task number, e.g. 'x 1'.")
    task = state.store.toggle(task_id)
    status = "done" if task.completed else "not done"
    return _after_mutation(state, f"Task {task.id} marked {status}.")


def cmd_remove(state: AppState, arg: str) -> str:
    task_id = _parse_task_id(arg, "Which task to remove? Provide the task number, e.g. 'rm 1'.")
    task = state.store.remove(task_id)
    return _after_mutation(state, f"Task {task.id} removed.")


def cmd_remove_all(state: AppState, arg: str) -> str:
    if state.settings.confirm_clear:
        try:
            answer = state.read_line(
                feedback(state.paint, "Remove all tasks? This cannot be undone (y/n): ", WARN)
            )
        except (EOFError, UnicodeDecodeError):
            answer = ""
        if answer.strip().lower() != "y":
            return feedback(state.paint, "No changes made.")

    state.store.remove_all()
    return _after_mutation(state, "All tasks removed.", show_list=False)


def cmd_pomodoro(state: AppState, arg: str, emit: CommandEmitter | None = None) -> str | None:
    out: CommandEmitter = emit or print
    run_pomodoro(state.paint, state.settings.pomodoro_minutes, out, redraw=terminal_redraw())
    return None


def cmd_help(state: AppState, arg: str) -> str:
    return render_help(state.paint, registry.help_entries())


def cmd_quit(state: AppState, arg: str) -> str:
    lines = []
    if state.dirty:
        save_error = _persist(state)
        if save_error:
            lines.append(save_error)
    state.running = False
    logger.info("Quit requested.")
    lines.append(render_goodbye(state.paint))
    return "\n".join(lines)


registry.register("list", cmd_list, help_text="view your tasks")
registry.register("add", cmd_add, help_text="create a new task", usage="add <text>", aliases=["+"])
registry.register("x", cmd_toggle, help_text="toggle task completion", usage="x <id>")
registry.register("rm", cmd_remove, help_text="remove a task", usage="rm <id>")
registry.register("rm-all", cmd_remove_all, help_text="remove all tasks")
registry.register("pom", cmd_pomodoro, help_text="start a focus timer")
registry.register("help", cmd_help, help_text="show this help")
registry.register("quit", cmd_quit, help_text="save and exit", aliases=["exit"])
registry.set_default("list")
