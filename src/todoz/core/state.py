# src/todoz/core/state.py

from __future__ import annotations

from dataclasses import dataclass, field

from ..cli.render import Painter
from ..config import Settings
from ..tasks.task_store import TaskStore
from .ports import LineReader, TaskRepository


@dataclass
class AppState:
    """Everything the command handlers touch, owned by the console loop."""

    settings: Settings
    store: TaskStore
    repo: TaskRepository

    paint: Painter = field(default_factory=Painter)
    read_line: LineReader = input

    # False once quit/EOF has been handled.
    running: bool = True
    # True while the in-memory store has changes the repository has not accepted.
    dirty: bool = False
    # Shown once under the welcome banner (e.g. load problems).
    notices: list[str] = field(default_factory=list)
