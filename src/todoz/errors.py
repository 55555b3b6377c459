# src/todoz/errors.py

"""Error kinds surfaced to the user as one-line messages."""

from __future__ import annotations


class TodoError(Exception):
    """Base class; str(err) is the message shown at the prompt."""


class EmptyInputError(TodoError):
    def __init__(self, message: str = "Please describe your task.") -> None:
        super().__init__(message)


class UsageError(TodoError):
    """A command was given a missing or malformed argument."""


class TaskNotFoundError(TodoError):
    def __init__(self, task_id: int) -> None:
        self.task_id = task_id
        super().__init__(f"Task {task_id} not found.")


class CorruptStateError(TodoError):
    """The todo file exists but cannot be parsed into tasks."""


class StorageIOError(TodoError):
    """Reading or writing the todo file failed at the OS level."""
