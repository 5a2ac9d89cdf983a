# src/taskpad/tasks/importer.py

from __future__ import annotations

"""
One-way import of a remote collection into the local store.

Merge rules:
- the baseline is the set of normalized local titles, read once per run
  (edits made while the fetch is in flight are not seen; single-user app, accepted)
- an item is inserted only if its normalized title is non-empty and not yet in the set
- the set grows after each insert, so duplicates inside the payload land once
- all rows of one run share a single created_at timestamp
"""

import asyncio
import logging
from collections.abc import Callable, Sequence

from ..core.ports import RemoteTaskSource, TaskRepo
from ..errors import ImportInterruptedError, RemoteFetchError
from .task_models import ImportResult, RemoteTask, normalize_title
from .task_models import now_ms as _now_ms

logger = logging.getLogger(__name__)


async def _fetch(source: RemoteTaskSource, timeout: float | None) -> Sequence[RemoteTask]:
    if timeout is None:
        return await source.fetch()
    try:
        return await asyncio.wait_for(source.fetch(), timeout=float(timeout))
    except asyncio.TimeoutError as e:
        raise RemoteFetchError(f"Remote fetch timed out after {timeout:.1f}s") from e


async def import_from_remote(
    store: TaskRepo,
    source: RemoteTaskSource,
    *,
    timeout: float | None = None,
    now_ms: Callable[[], int] = _now_ms,
) -> ImportResult:
    """
    Fetch the remote collection and insert the items whose titles are new.

    Raises:
    - RemoteFetchError: fetch failed or timed out; nothing was written
    - ImportInterruptedError: an insert failed; `.result` holds the rows written so far
    - StorageError: the baseline read failed; nothing was written

    Cancelling the awaiting task before the fetch completes writes nothing.
    The insert loop does not yield, so it runs to completion or failure.
    """
    items = await _fetch(source, timeout)

    created_at = now_ms()
    seen = {normalize_title(t) for t in store.list_titles()}

    inserted = 0
    skipped = 0
    for item in items:
        key = normalize_title(item.title)
        if not key or key in seen:
            skipped += 1
            continue

        try:
            store.insert(item.title, item.completed, created_at=created_at)
        except Exception as e:
            result = ImportResult(
                inserted_count=inserted, fetched_count=len(items), skipped_count=skipped
            )
            logger.error(
                "Import interrupted after %d inserts: %s", inserted, e.__class__.__name__
            )
            raise ImportInterruptedError(result) from e

        seen.add(key)
        inserted += 1

    logger.info(
        "Import finished fetched=%d inserted=%d skipped=%d", len(items), inserted, skipped
    )
    return ImportResult(inserted_count=inserted, fetched_count=len(items), skipped_count=skipped)
