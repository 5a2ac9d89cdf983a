# src/taskpad/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The session and the importer depend on Protocols instead of concrete implementations.
This keeps the store and the remote source swappable and makes testing easier.
"""

from collections.abc import Sequence
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..tasks.task_models import RemoteTask, Task


class TaskRepo(Protocol):
    def list_all(self) -> list[Task]: ...
    def list_titles(self) -> list[str]: ...
    def get(self, task_id: int) -> Task | None: ...
    def count_tasks(self) -> int: ...
    def insert(self, title: str, done: bool = False, *, created_at: int | None = None) -> int: ...
    def update_title(self, task_id: int, title: str) -> None: ...
    def toggle_done(self, task_id: int) -> bool: ...
    def delete(self, task_id: int) -> None: ...


class RemoteTaskSource(Protocol):
    """Fetch-and-parse capability for the remote collection (raises RemoteFetchError)."""

    async def fetch(self) -> Sequence[RemoteTask]: ...


class Notifier(Protocol):
    """
    Presentation-side port: how the session shows outcomes to the user.

    The front end decides how to render it (console line, dialog, toast).
    """

    def notify(self, title: str, message: str) -> None: ...
