# src/taskpad/tasks/task_models.py

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Any


def now_ms() -> int:
    """Current wall-clock time as integer epoch milliseconds."""
    return int(time.time() * 1000)


def normalize_title(title: str | None) -> str:
    """De-duplication key used by the importer: trimmed + lowercased."""
    return (title or "").strip().lower()


@dataclass(slots=True)
class Task:
    id: int
    title: str
    done: bool
    created_at: int  # epoch ms


@dataclass(frozen=True, slots=True)
class RemoteTask:
    """
    One item of the remote collection, already normalized.

    Missing/null/non-string titles become "" and missing/null `completed`
    becomes False, so the importer never has to look at raw JSON.
    """

    title: str
    completed: bool = False

    @classmethod
    def from_json(cls, raw: Any) -> RemoteTask:
        if not isinstance(raw, dict):
            return cls(title="", completed=False)
        title = raw.get("title")
        return cls(
            title=title if isinstance(title, str) else "",
            completed=bool(raw.get("completed")),
        )


@dataclass(frozen=True, slots=True)
class ImportResult:
    inserted_count: int
    fetched_count: int = 0
    skipped_count: int = 0


@dataclass(frozen=True, slots=True)
class DeleteRequest:
    """Pending half of the two-step delete: confirm with `token` to actually delete."""

    token: str
    task_id: int
    title: str
