# src/taskpad/errors.py

"""
Error taxonomy shared by the store, the importer and the session facade.

The store and the importer raise these; the session catches TaskpadError,
turns it into a user-visible notification and resets its status flags.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .tasks.task_models import ImportResult


class TaskpadError(Exception):
    """Base class for every typed failure raised by taskpad."""


class ValidationError(TaskpadError, ValueError):
    """Caller input is malformed (e.g. an empty title)."""


class NotFoundError(TaskpadError, LookupError):
    """The referenced task row does not exist."""

    def __init__(self, task_id: int) -> None:
        super().__init__(f"Task {task_id} not found")
        self.task_id = task_id


class StorageError(TaskpadError):
    """The embedded SQLite store failed (corrupt file, disk full, lock timeout)."""


class RemoteFetchError(TaskpadError):
    """Fetching or parsing the remote collection failed."""


class ImportInterruptedError(TaskpadError):
    """
    An insert failed in the middle of an import run.

    Rows written before the failure stay in the store; `result` reports how many.
    The original error is chained as __cause__.
    """

    def __init__(self, result: ImportResult, message: str = "") -> None:
        super().__init__(
            message or f"Import stopped after {result.inserted_count} inserted item(s)"
        )
        self.result = result
