# src/todoz/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(slots=True)
class Task:
    id: int
    description: str
    completed: bool = False

    def render_line(self) -> str:
        """Plain display form: "<id> [x]: <description>" (space instead of x when open)."""
        mark = "x" if self.completed else " "
        return f"{self.id} [{mark}]: {self.description}"

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "description": self.description, "completed": self.completed}

    @classmethod
    def from_dict(cls, raw: Any) -> Task:
        """
        Strict decoding of one persisted entry.

        Raises ValueError when a field is missing or has the wrong JSON type.
        bool is a subclass of int in Python, so ids are checked against it explicitly.
        """
        if not isinstance(raw, dict):
            raise ValueError(f"expected an object, got {type(raw).__name__}")

        tid = raw.get("id")
        if not isinstance(tid, int) or isinstance(tid, bool) or tid < 1:
            raise ValueError(f"invalid id: {tid!r}")

        description = raw.get("description")
        if not isinstance(description, str):
            raise ValueError(f"invalid description for task {tid}: {description!r}")

        completed = raw.get("completed")
        if not isinstance(completed, bool):
            raise ValueError(f"invalid completed flag for task {tid}: {completed!r}")

        return cls(id=tid, description=description, completed=completed)
