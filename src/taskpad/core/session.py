# src/taskpad/core/session.py

from __future__ import annotations

import logging
import secrets
from collections.abc import Sequence
from dataclasses import replace

from ..errors import ImportInterruptedError, TaskpadError
from ..tasks.importer import import_from_remote
from ..tasks.search import filter_tasks
from ..tasks.task_models import DeleteRequest, ImportResult, Task
from .ports import Notifier, RemoteTaskSource, TaskRepo

logger = logging.getLogger(__name__)


class TaskSession:
    """
    The one object the front end talks to.

    Holds the in-memory mirror of the store plus the loading/refreshing/syncing
    flags and the current search query.

    Mirror policy:
    - add / edit / import reload everything from the store
    - toggle / delete patch the single affected row in place

    Typed failures (TaskpadError) are logged and handed to the notifier; the
    method then returns a falsy value. Flags are reset on every exit path.
    Callers must not start a mutating call before the previous one finished.
    """

    def __init__(
        self,
        store: TaskRepo,
        remote_source: RemoteTaskSource | None,
        notifier: Notifier,
        *,
        import_timeout: float | None = None,
    ) -> None:
        self._store = store
        self._remote = remote_source
        self._notifier = notifier
        self._import_timeout = import_timeout

        self._mirror: list[Task] = []
        self._pending_deletes: dict[str, DeleteRequest] = {}

        self.loading = True
        self.refreshing = False
        self.syncing = False
        self.search_query = ""

    # ---- read side ----

    @property
    def all_tasks(self) -> list[Task]:
        """Unfiltered mirror, newest first."""
        return list(self._mirror)

    @property
    def tasks(self) -> Sequence[Task]:
        """Mirror passed through the current search query."""
        return filter_tasks(self._mirror, self.search_query)

    def list_all(self) -> list[Task]:
        return self.all_tasks

    def set_search(self, query: str) -> None:
        self.search_query = query or ""

    def search(self, query: str) -> Sequence[Task]:
        self.set_search(query)
        return self.tasks

    def _fail(self, title: str, err: Exception) -> None:
        logger.info("%s: %s", title, err)
        self._notifier.notify(title, str(err))

    # ---- loading ----

    def load(self) -> bool:
        try:
            self._mirror = self._store.list_all()
            return True
        except TaskpadError as e:
            self._fail("Load failed", e)
            return False
        finally:
            self.loading = False
            self.refreshing = False

    def refresh(self) -> bool:
        self.refreshing = True
        return self.load()

    # ---- mutations ----

    def add(self, title: str) -> bool:
        try:
            self._store.insert(title)
        except TaskpadError as e:
            self._fail("Warning", e)
            return False
        return self.load()

    def edit(self, task_id: int, title: str) -> bool:
        try:
            self._store.update_title(task_id, title)
        except TaskpadError as e:
            self._fail("Warning", e)
            return False
        return self.load()

    def toggle_done(self, task_id: int) -> bool | None:
        """Return the new `done` state, or None on failure."""
        try:
            new_done = self._store.toggle_done(task_id)
        except TaskpadError as e:
            self._fail("Update failed", e)
            return None
        self._mirror = [replace(t, done=new_done) if t.id == task_id else t for t in self._mirror]
        return new_done

    def request_delete(self, task_id: int) -> DeleteRequest | None:
        """
        First step of deletion: nothing is removed until confirm_delete(token).
        """
        task = next((t for t in self._mirror if t.id == task_id), None)
        if task is None:
            try:
                task = self._store.get(task_id)
            except TaskpadError as e:
                self._fail("Delete failed", e)
                return None
        if task is None:
            self._notifier.notify("Delete failed", f"Task {task_id} not found")
            return None

        # One pending request per task; a newer /rm supersedes the older token.
        self._pending_deletes = {
            tok: r for tok, r in self._pending_deletes.items() if r.task_id != task.id
        }
        req = DeleteRequest(token=secrets.token_hex(4), task_id=task.id, title=task.title)
        self._pending_deletes[req.token] = req
        return req

    def cancel_delete(self, token: str) -> bool:
        return self._pending_deletes.pop(token, None) is not None

    def confirm_delete(self, token: str) -> bool:
        req = self._pending_deletes.pop(token, None)
        if req is None:
            self._notifier.notify("Delete failed", f"Unknown or expired delete token: {token}")
            return False
        return self.delete(req.task_id)

    def delete(self, task_id: int) -> bool:
        try:
            self._store.delete(task_id)
        except TaskpadError as e:
            self._fail("Delete failed", e)
            return False
        self._mirror = [t for t in self._mirror if t.id != task_id]
        return True

    # ---- remote import ----

    async def import_from_remote(self) -> ImportResult | None:
        if self._remote is None:
            self._notifier.notify("Sync", "No remote source is configured.")
            return None

        self.syncing = True
        try:
            try:
                result = await import_from_remote(
                    self._store, self._remote, timeout=self._import_timeout
                )
            except ImportInterruptedError as e:
                self._fail("Sync error", e)
                self.load()
                return e.result
            except TaskpadError as e:
                self._fail("Sync error", e)
                return None

            if result.inserted_count:
                self._notifier.notify("Sync", f"Added {result.inserted_count} new items.")
            else:
                self._notifier.notify("Sync", "No new items.")
            self.load()
            return result
        finally:
            self.syncing = False
