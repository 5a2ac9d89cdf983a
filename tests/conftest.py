# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from taskpad.cli.bootstrap import create_initial_state
from taskpad.core.session import TaskSession
from taskpad.core.state import AppState
from taskpad.tasks.task_store import TaskStore

from .fakes import FakeNotifier, FakeRemoteSource


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with the bootstrap and core modules.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="taskpad-test",
        log_level="DEBUG",
        data_dir=tmp_path,
        tasks_db_path=tmp_path / "todos.sqlite3",
        seed_on_first_run=False,
        remote_url="",
        remote_timeout_seconds=1.0,
        remote_connect_timeout_seconds=1.0,
    )


@pytest.fixture()
def store(settings: SimpleNamespace) -> TaskStore:
    return TaskStore(settings.tasks_db_path)


@pytest.fixture()
def notifier() -> FakeNotifier:
    return FakeNotifier()


@pytest.fixture()
def remote() -> FakeRemoteSource:
    return FakeRemoteSource()


@pytest.fixture()
def session(store: TaskStore, remote: FakeRemoteSource, notifier: FakeNotifier) -> TaskSession:
    s = TaskSession(store, remote, notifier, import_timeout=1.0)
    s.load()
    return s


@pytest.fixture()
def state(
    settings: SimpleNamespace, remote: FakeRemoteSource, notifier: FakeNotifier
) -> AppState:
    """
    AppState wired through the real composition root with deterministic fakes.

    NOTE: We keep a real SQLite store here because its correctness is part of
    what we want to test.
    """
    return create_initial_state(settings=settings, notifier=notifier, remote_source=remote)
