# src/taskpad/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..tasks.task_store import TaskStore
from .ports import Notifier, RemoteTaskSource
from .session import TaskSession


@dataclass
class AppState:
    # Store Settings on the state for easy access in other modules later.
    settings: Any

    task_store: TaskStore
    remote_source: RemoteTaskSource | None
    notifier: Notifier
    session: TaskSession
