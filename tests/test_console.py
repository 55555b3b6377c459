# tests/test_console.py

from __future__ import annotations

import json
import logging
from dataclasses import replace
from pathlib import Path

import pytest

from todoz.cli.bootstrap import create_initial_state
from todoz.cli.console import run_console_loop
from todoz.cli.main import main
from todoz.config import Settings
from todoz.core.state import AppState

from .fakes import MemoryRepo, ScriptedInput


@pytest.fixture()
def restore_logging():
    """main() reconfigures the root logger; put pytest's handlers back afterwards."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for h in list(root.handlers):
        root.removeHandler(h)
        if h not in handlers:
            h.close()
    for h in handlers:
        root.addHandler(h)
    root.setLevel(level)
    logging.captureWarnings(False)


def test_loop_runs_scenario_and_persists(state: AppState, capsys) -> None:
    reader = ScriptedInput(["add Buy groceries", "add Finish report", "x 1", "rm 2", "list", "quit"])
    state.read_line = reader

    run_console_loop(state)

    out = capsys.readouterr().out
    assert "Task 2 removed." in out
    assert "1 [x]: Buy groceries" in out
    assert "Goodbye" in out
    assert state.running is False
    assert reader.prompts == ["> "] * 6
    assert json.loads(state.settings.todo_file.read_text("utf-8")) == [
        {"id": 1, "description": "Buy groceries", "completed": True}
    ]


def test_end_of_input_behaves_like_quit(state: AppState, capsys) -> None:
    state.read_line = ScriptedInput(["add a"])

    run_console_loop(state)

    assert state.running is False
    assert "Goodbye" in capsys.readouterr().out
    assert len(state.store) == 1


def test_ctrl_c_at_prompt_quits(state: AppState, capsys) -> None:
    def interrupted(prompt: str) -> str:
        raise KeyboardInterrupt

    state.read_line = interrupted
    run_console_loop(state)

    assert state.running is False


def test_crashing_handler_is_reported_and_loop_continues(settings, capsys, monkeypatch) -> None:
    repo = MemoryRepo()
    state = AppState(settings=settings, store=repo.load(), repo=repo, read_line=ScriptedInput(["list", "quit"]))

    def broken(*args, **kwargs):
        raise RuntimeError("boom")

    monkeypatch.setattr("todoz.cli.commands.render_tasks", broken)
    run_console_loop(state)

    out = capsys.readouterr().out
    assert "Internal error while handling a command." in out
    assert "Goodbye" in out


def test_fresh_start_has_empty_list(settings: Settings, capsys) -> None:
    state = create_initial_state(settings=settings, read_line=ScriptedInput(["list"]))
    assert len(state.store) == 0
    assert state.notices == []

    run_console_loop(state)

    assert "No tasks in the list." in capsys.readouterr().out


def test_corrupt_file_falls_back_to_empty_with_warning(settings: Settings, capsys) -> None:
    settings.todo_file.parent.mkdir(parents=True)
    settings.todo_file.write_text("{definitely not json", "utf-8")

    state = create_initial_state(settings=settings, read_line=ScriptedInput(["list"]))
    run_console_loop(state)

    out = capsys.readouterr().out
    assert "Unable to load tasks:" in out
    assert "No tasks in the list." in out
    # Nothing was mutated, so the bad file is still there for inspection.
    assert settings.todo_file.read_text("utf-8") == "{definitely not json"


def test_state_survives_restart(settings: Settings, capsys) -> None:
    first = create_initial_state(settings=settings, read_line=ScriptedInput(["add a", "add b", "rm 2", "quit"]))
    run_console_loop(first)

    second = create_initial_state(settings=settings, read_line=ScriptedInput(["add c", "quit"]))
    run_console_loop(second)

    # ids restart from the highest persisted id.
    assert [(t.id, t.description) for t in second.store] == [(1, "a"), (2, "c")]


def test_main_returns_zero_and_writes_log(tmp_path: Path, capsys, restore_logging) -> None:
    settings = replace(Settings.defaults(tmp_path / ".todoz"), color=False)

    code = main(settings, read_line=ScriptedInput(["add from main", "quit"]))

    assert code == 0
    assert json.loads(settings.todo_file.read_text("utf-8"))[0]["description"] == "from main"
    assert settings.log_file.exists()
    assert "Goodbye" in capsys.readouterr().out


def test_undecodable_input_line_is_skipped(state: AppState, capsys) -> None:
    lines = iter(["add ok", None, "quit"])

    def reader(prompt: str) -> str:
        line = next(lines)
        if line is None:
            raise UnicodeDecodeError("utf-8", b"\xff", 0, 1, "invalid start byte")
        return line

    state.read_line = reader
    run_console_loop(state)

    out = capsys.readouterr().out
    assert "invalid text encoding" in out
    assert "Goodbye" in out
    assert json.loads(state.settings.todo_file.read_text("utf-8")) == [
        {"id": 1, "description": "ok", "completed": False}
    ]


def test_invalid_utf8_file_falls_back_to_empty(settings: Settings, capsys) -> None:
    settings.todo_file.parent.mkdir(parents=True)
    settings.todo_file.write_bytes(b'[{"id": 1, "description": "\xff\xfe", "completed": false}]')

    state = create_initial_state(settings=settings, read_line=ScriptedInput(["list"]))
    run_console_loop(state)

    out = capsys.readouterr().out
    assert "Unable to load tasks:" in out
    assert "No tasks in the list." in out
