# tests/conftest.py

from __future__ import annotations

from pathlib import Path

import pytest

from todoz.cli.render import Painter
from todoz.config import Settings
from todoz.core.state import AppState
from todoz.tasks.task_file import TaskFile
from todoz.tasks.task_store import TaskStore

from .fakes import ScriptedInput


@pytest.fixture()
def settings(tmp_path: Path) -> Settings:
    """
    Default settings rooted in a tmp dir, with colors off.

    Built directly rather than via Settings.from_env() to keep tests
    independent of the developer's environment and home directory.
    """
    base = Settings.defaults(tmp_path / ".todoz")
    return Settings(
        data_dir=base.data_dir,
        todo_file=base.todo_file,
        log_level=base.log_level,
        log_to_file=False,
        color=False,
        confirm_clear=False,
        pomodoro_minutes=1,
    )


@pytest.fixture()
def repo(settings: Settings) -> TaskFile:
    return TaskFile(settings.todo_file)


@pytest.fixture()
def state(settings: Settings, repo: TaskFile) -> AppState:
    """AppState over a real JSON file in tmp_path (its behaviour is part of what we test)."""
    return AppState(
        settings=settings,
        store=TaskStore(),
        repo=repo,
        paint=Painter(enabled=False),
        read_line=ScriptedInput([]),
    )
