# tests/test_commands.py

from __future__ import annotations

import re

from taskpad.cli.commands import CommandRegistry, registry

from .fakes import remote_items


def test_command_registry_routes_2_and_3_params(state) -> None:
    reg = CommandRegistry()
    called = {"h2": 0, "h3": 0}

    def h2(state, args):
        called["h2"] += 1
        return "h2"

    def h3(state, args, emit):
        called["h3"] += 1
        if emit is not None:
            emit("note")
        return "h3"

    reg.register("a", h2, "a")
    reg.register("b", h3, "b")

    assert reg.handle(state, "/a x") == "h2"
    assert reg.handle(state, "/b y", emit=lambda _: None) == "h3"
    assert called["h2"] == 1
    assert called["h3"] == 1


def test_command_registry_unknown_and_non_command(state) -> None:
    reg = CommandRegistry()
    assert reg.handle(state, "hello") is None
    assert "Unknown command" in (reg.handle(state, "/nope") or "")


def test_add_list_done_flow(state) -> None:
    out = registry.handle(state, "/add Buy milk")
    assert "Buy milk" in (out or "")

    (task,) = state.session.tasks
    assert "marked done" in (registry.handle(state, f"/done {task.id}") or "")
    assert "[x]" in (registry.handle(state, "/list") or "")
    assert "Usage" in (registry.handle(state, "/done abc") or "")


def test_rm_then_confirm(state) -> None:
    registry.handle(state, "/add Throw away")
    (task,) = state.session.tasks

    prompt = registry.handle(state, f"/rm {task.id}") or ""
    m = re.search(r"/confirm (\w+)", prompt)
    assert m is not None
    assert state.task_store.count_tasks() == 1

    assert registry.handle(state, f"/confirm {m.group(1)}") == "Deleted."
    assert state.task_store.count_tasks() == 0


def test_search_command_and_clear(state) -> None:
    registry.handle(state, "/add Buy Milk")
    registry.handle(state, "/add Walk dog")

    out = registry.handle(state, "/search milk") or ""
    assert "Buy Milk" in out and "Walk dog" not in out

    out = registry.handle(state, "/search") or ""
    assert "Buy Milk" in out and "Walk dog" in out


def test_import_command(state, remote) -> None:
    remote.items = remote_items({"title": "from remote", "completed": True})

    out = registry.handle(state, "/import") or ""

    assert "1 added" in out
    assert [t.title for t in state.session.tasks] == ["from remote"]


def test_add_and_edit_keep_inner_whitespace(state) -> None:
    registry.handle(state, "/add a    b")
    (task,) = state.session.tasks
    assert task.title == "a    b"

    registry.handle(state, f"/edit {task.id}   new   title  ")
    (task,) = state.session.tasks
    assert task.title == "new   title"


def test_search_keeps_inner_whitespace(state) -> None:
    registry.handle(state, "/add Buy  milk")
    registry.handle(state, "/add Buy milk")

    out = registry.handle(state, "/search buy  milk") or ""
    assert "Buy  milk" in out
    assert len(state.session.tasks) == 1
