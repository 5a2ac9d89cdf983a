# src/taskpad/tasks/search.py

from __future__ import annotations

from collections.abc import Sequence

from .task_models import Task


def filter_tasks(tasks: Sequence[Task], query: str | None) -> Sequence[Task]:
    """
    Case-insensitive substring filter over task titles.

    A blank query returns `tasks` itself; otherwise a new list in input order.
    """
    term = (query or "").strip().lower()
    if not term:
        return tasks
    return [t for t in tasks if term in t.title.lower()]
