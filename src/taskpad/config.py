# src/taskpad/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app (normal "settings layer").
- No secrets required at import time.
- Bad numeric values fall back to defaults instead of crashing startup.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

ENV_PREFIX = "TASKPAD"

DEFAULT_REMOTE_URL = "https://jsonplaceholder.typicode.com/todos"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _load_dotenv_if_available() -> None:
    """Load .env locally if python-dotenv is installed. Safe no-op otherwise."""
    try:
        from dotenv import load_dotenv  # type: ignore
    except ImportError:
        return
    load_dotenv(override=False)


_load_dotenv_if_available()


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str

    # ---- Local data paths (ignored by git) ----
    data_dir: Path
    tasks_db_path: Path

    # ---- Store bootstrap ----
    seed_on_first_run: bool

    # ---- Remote collection ----
    remote_url: str
    remote_timeout_seconds: float
    remote_connect_timeout_seconds: float

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "taskpad").strip() or "taskpad"
        log_level = _env(_k("LOG_LEVEL"), "INFO")

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/taskpad"))
        tasks_db_path = _env_path(_k("TASKS_DB_PATH"), data_dir / "todos.sqlite3")

        seed_on_first_run = _env_bool(_k("SEED_ON_FIRST_RUN"), True)

        remote_url = _env(_k("REMOTE_URL"), DEFAULT_REMOTE_URL).strip()
        remote_timeout_seconds = max(0.1, _env_float(_k("REMOTE_TIMEOUT_SECONDS"), 10.0))
        remote_connect_timeout_seconds = max(
            0.1, _env_float(_k("REMOTE_CONNECT_TIMEOUT_SECONDS"), 5.0)
        )

        return Settings(
            app_name=app_name,
            log_level=log_level,
            data_dir=data_dir,
            tasks_db_path=tasks_db_path,
            seed_on_first_run=seed_on_first_run,
            remote_url=remote_url,
            remote_timeout_seconds=remote_timeout_seconds,
            remote_connect_timeout_seconds=remote_connect_timeout_seconds,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
