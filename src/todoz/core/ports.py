# src/todoz/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the command layer.

Commands depend on a Protocol instead of the JSON file adapter,
which keeps storage swappable and makes testing easier.
"""

from collections.abc import Callable
from typing import Protocol

from ..tasks.task_store import TaskStore

# Reads one line after printing a prompt; raises EOFError when input is closed.
LineReader = Callable[[str], str]


class TaskRepository(Protocol):
    """Whole-store load/save."""

    def load(self) -> TaskStore: ...

    def save(self, store: TaskStore) -> None: ...
