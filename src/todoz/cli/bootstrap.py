# src/todoz/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- wires the JSON file repository and the painter into AppState,
- loads the task list, degrading to an empty one when the file is unusable.
"""

from __future__ import annotations

import logging

from ..config import Settings, get_settings
from ..core.ports import LineReader, TaskRepository
from ..core.state import AppState
from ..errors import CorruptStateError, StorageIOError
from ..tasks.task_file import TaskFile
from ..tasks.task_store import TaskStore
from .render import WARN, Painter, feedback

logger = logging.getLogger(__name__)


def load_store(repo: TaskRepository) -> tuple[TaskStore, str | None]:
    """
    Load tasks; on a corrupt or unreadable file return an empty store plus the reason.

    The bad file is left on disk untouched until the next successful save.
    """
    try:
        return repo.load(), None
    except (CorruptStateError, StorageIOError) as e:
        logger.warning("Unable to load tasks, starting empty: %s", e)
        return TaskStore(), str(e)


def create_initial_state(
    *,
    settings: Settings | None = None,
    repo: TaskRepository | None = None,
    read_line: LineReader = input,
) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings and repo injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()
    if repo is None:
        repo = TaskFile(settings.todo_file)

    paint = Painter(enabled=settings.color)
    store, problem = load_store(repo)

    state = AppState(
        settings=settings,
        store=store,
        repo=repo,
        paint=paint,
        read_line=read_line,
    )
    if problem:
        state.notices.append(feedback(paint, f"Unable to load tasks: {problem}", WARN))
    return state
