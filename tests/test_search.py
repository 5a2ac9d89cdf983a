# tests/test_search.py

from __future__ import annotations

from taskpad.tasks.search import filter_tasks
from taskpad.tasks.task_models import Task


def _tasks(*titles: str) -> list[Task]:
    return [Task(id=i, title=t, done=False, created_at=0) for i, t in enumerate(titles, start=1)]


def test_blank_query_returns_input_unchanged() -> None:
    tasks = _tasks("a", "b")
    assert filter_tasks(tasks, "") is tasks
    assert filter_tasks(tasks, "   ") is tasks
    assert filter_tasks([], "") == []


def test_match_is_case_insensitive() -> None:
    tasks = _tasks("Buy Milk", "Walk dog")
    assert [t.title for t in filter_tasks(tasks, "milk")] == ["Buy Milk"]
    assert [t.title for t in filter_tasks(tasks, "  DOG ")] == ["Walk dog"]


def test_filter_preserves_input_order() -> None:
    tasks = _tasks("report draft", "groceries", "final report")
    out = filter_tasks(list(reversed(tasks)), "report")
    assert [t.title for t in out] == ["final report", "report draft"]


def test_no_match_returns_empty_list() -> None:
    assert filter_tasks(_tasks("a"), "zzz") == []
