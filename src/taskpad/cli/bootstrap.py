# src/taskpad/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- opens the store (schema check + optional seeding),
- wires store, remote source and notifier into the session and AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..connectors.console_connector import ConsoleNotifier
from ..core.ports import Notifier, RemoteTaskSource
from ..core.session import TaskSession
from ..core.state import AppState
from ..tasks.remote import HttpRemoteTaskSource
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.tasks_db_path.parent.mkdir(parents=True, exist_ok=True)


def _build_remote_source(settings) -> RemoteTaskSource | None:
    url = (getattr(settings, "remote_url", "") or "").strip()
    if not url:
        logger.info("No remote URL configured; /import is disabled.")
        return None
    return HttpRemoteTaskSource(
        url,
        timeout_seconds=settings.remote_timeout_seconds,
        connect_timeout_seconds=settings.remote_connect_timeout_seconds,
    )


def create_initial_state(
    *,
    settings=None,
    notifier: Notifier | None = None,
    remote_source: RemoteTaskSource | None = None,
) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().

    Raises StorageError if the store cannot be opened or its schema created;
    callers treat that as fatal.
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    task_store = TaskStore(settings.tasks_db_path)
    if getattr(settings, "seed_on_first_run", False):
        task_store.seed_if_empty()

    if remote_source is None:
        remote_source = _build_remote_source(settings)
    if notifier is None:
        notifier = ConsoleNotifier()

    session = TaskSession(
        task_store,
        remote_source,
        notifier,
        import_timeout=getattr(settings, "remote_timeout_seconds", None),
    )
    session.load()

    return AppState(
        settings=settings,
        task_store=task_store,
        remote_source=remote_source,
        notifier=notifier,
        session=session,
    )
