# src/todoz/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Defaults need no environment at all: colors on, no confirmation prompts.
- Storage always lives in ~/.todoz/todos.json; env vars only tune logging and console behaviour.
- Tests build Settings directly instead of touching the environment.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

ENV_PREFIX = "TODOZ"

DEFAULT_DIR_NAME = ".todoz"
DEFAULT_FILE_NAME = "todos.json"
LOG_FILE_NAME = "todoz.log"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def default_data_dir() -> Path:
    return Path.home() / DEFAULT_DIR_NAME


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- Storage ----
    data_dir: Path
    todo_file: Path

    # ---- Logging ----
    log_level: str
    log_to_file: bool

    # ---- Console behaviour ----
    color: bool
    confirm_clear: bool
    pomodoro_minutes: int

    @property
    def log_file(self) -> Path:
        return self.data_dir / LOG_FILE_NAME

    @staticmethod
    def defaults(data_dir: Path | None = None) -> "Settings":
        """Settings equivalent to an empty environment, rooted at `data_dir`."""
        data_dir = data_dir or default_data_dir()
        return Settings(
            data_dir=data_dir,
            todo_file=data_dir / DEFAULT_FILE_NAME,
            log_level="ERROR",
            log_to_file=True,
            color=True,
            confirm_clear=False,
            pomodoro_minutes=25,
        )

    @staticmethod
    def from_env() -> "Settings":
        # .env next to where todoz is launched; real environment variables win.
        load_dotenv(find_dotenv(usecwd=True), override=False)

        # The todo file location is fixed to the home directory; only behaviour is configurable.
        data_dir = default_data_dir()
        todo_file = data_dir / DEFAULT_FILE_NAME

        log_level = _env(_k("LOG_LEVEL"), "ERROR").strip().upper() or "ERROR"
        log_to_file = _env_bool(_k("LOG_FILE"), True)

        # https://no-color.org: any non-empty NO_COLOR disables colors unless overridden.
        color = _env_bool(_k("COLOR"), not os.getenv("NO_COLOR"))
        confirm_clear = _env_bool(_k("CONFIRM_CLEAR"), False)

        pomodoro_minutes = _env_int(_k("POMODORO_MINUTES"), 25)
        if pomodoro_minutes <= 0:
            pomodoro_minutes = 25

        return Settings(
            data_dir=data_dir,
            todo_file=todo_file,
            log_level=log_level,
            log_to_file=log_to_file,
            color=color,
            confirm_clear=confirm_clear,
            pomodoro_minutes=pomodoro_minutes,
        )


_SETTINGS: Settings | None = None


def get_settings() -> Settings:
    """Process-wide settings, read from the environment on first use."""
    global _SETTINGS
    if _SETTINGS is None:
        _SETTINGS = Settings.from_env()
    return _SETTINGS
