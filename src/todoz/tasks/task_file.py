# src/todoz/tasks/task_file.py

from __future__ import annotations

import contextlib
import json
import logging
import os
import tempfile
from pathlib import Path

from ..errors import CorruptStateError, StorageIOError
from .task_store import TaskStore

logger = logging.getLogger(__name__)


class TaskFile:
    """
    JSON file persistence for a TaskStore.

    Format: a JSON array of {"id": int, "description": str, "completed": bool}.
    Saves go to a temp file in the same directory and are moved over the
    target with os.replace, so a crash leaves either the old or the new file.
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> TaskStore:
        try:
            raw = self._path.read_text("utf-8")
        except FileNotFoundError:
            logger.info("No todo file at %s, starting empty.", self._path)
            return TaskStore()
        except UnicodeDecodeError as e:
            raise CorruptStateError(f"Failed to parse {self._path.name}: not valid UTF-8 ({e})") from e
        except OSError as e:
            raise StorageIOError(f"Failed to read {self._path}: {e}") from e

        try:
            data = json.loads(raw)
        except (json.JSONDecodeError, RecursionError) as e:
            raise CorruptStateError(f"Failed to parse {self._path.name}: {e}") from e

        if not isinstance(data, list):
            raise CorruptStateError(
                f"Failed to parse {self._path.name}: expected a list of tasks, got {type(data).__name__}"
            )

        try:
            store = TaskStore.from_records(data)
        except ValueError as e:
            raise CorruptStateError(f"Failed to parse {self._path.name}: {e}") from e

        logger.info("Loaded %d tasks from %s", len(store), self._path)
        return store

    def save(self, store: TaskStore) -> None:
        payload = json.dumps(store.to_records(), ensure_ascii=False, indent=2)

        tmp_name: str | None = None
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self._path.name}.", suffix=".tmp", dir=self._path.parent
            )
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(payload)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_name, self._path)
            tmp_name = None
        except (OSError, UnicodeEncodeError) as e:
            raise StorageIOError(f"Failed to write {self._path}: {e}") from e
        finally:
            if tmp_name is not None:
                with contextlib.suppress(OSError):
                    os.unlink(tmp_name)

        logger.debug("Saved %d tasks to %s", len(store), self._path)
