# src/todoz/tasks/task_store.py

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from typing import Any

from ..errors import EmptyInputError, TaskNotFoundError, UsageError
from .task_models import Task

logger = logging.getLogger(__name__)


class TaskStore:
    """
    In-memory ordered task list.

    Ids come from a monotonic counter: removing a task (or all of them) never
    lowers it, so an id is not handed out twice while the process lives.
    The counter is re-derived from the highest known id when loading.
    """

    def __init__(self, tasks: Iterable[Task] | None = None) -> None:
        self._tasks: list[Task] = list(tasks or [])
        self._next_id = max((t.id for t in self._tasks), default=0) + 1

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(list(self._tasks))

    @property
    def next_id(self) -> int:
        return self._next_id

    # ---- queries ----

    def list(self) -> list[Task]:
        return list(self._tasks)

    def get(self, task_id: int) -> Task:
        return self._tasks[self._index_of(task_id)]

    def completed_count(self) -> int:
        return sum(1 for t in self._tasks if t.completed)

    # ---- mutations ----

    def add(self, description: str) -> Task:
        text = (description or "").strip()
        if not text:
            raise EmptyInputError()
        try:
            text.encode("utf-8")
        except UnicodeEncodeError:
            # Lone surrogates (undecodable terminal bytes) cannot be written to the JSON file.
            raise UsageError("Task description contains characters that cannot be saved.") from None

        task = Task(id=self._next_id, description=text)
        self._next_id += 1
        self._tasks.append(task)
        logger.debug("Task added id=%s", task.id)
        return task

    def toggle(self, task_id: int) -> Task:
        task = self.get(task_id)
        task.completed = not task.completed
        logger.debug("Task toggled id=%s completed=%s", task.id, task.completed)
        return task

    def remove(self, task_id: int) -> Task:
        task = self._tasks.pop(self._index_of(task_id))
        logger.debug("Task removed id=%s", task.id)
        return task

    def remove_all(self) -> int:
        removed = len(self._tasks)
        self._tasks.clear()
        logger.debug("All tasks removed count=%s", removed)
        return removed

    # ---- serialization helpers ----

    def to_records(self) -> list[dict[str, Any]]:
        return [t.to_dict() for t in self._tasks]

    @classmethod
    def from_records(cls, records: Iterable[Any]) -> TaskStore:
        """Build a store from decoded JSON entries; ValueError on a malformed entry or a repeated id."""
        tasks: list[Task] = []
        seen: set[int] = set()
        for raw in records:
            task = Task.from_dict(raw)
            if task.id in seen:
                raise ValueError(f"duplicate task id: {task.id}")
            seen.add(task.id)
            tasks.append(task)
        return cls(tasks)

    def _index_of(self, task_id: int) -> int:
        for i, t in enumerate(self._tasks):
            if t.id == task_id:
                return i
        raise TaskNotFoundError(task_id)
