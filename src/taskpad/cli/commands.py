# src/taskpad/cli/commands.py

from __future__ import annotations

import asyncio
import contextlib
import inspect
import logging
from collections.abc import Callable, Sequence
from datetime import datetime
from typing import cast

from ..core.state import AppState
from ..tasks.task_models import Task

logger = logging.getLogger(__name__)


class CommandArgs(list[str]):
    """Whitespace-split arguments; `text` keeps the raw remainder of the line."""

    def __init__(self, text: str = "") -> None:
        super().__init__(text.split())
        self.text = text.strip()

    def rest(self, skip: int) -> str:
        """Raw text after the first `skip` arguments, inner whitespace untouched."""
        parts = self.text.split(maxsplit=skip)
        return parts[skip] if len(parts) > skip else ""


CommandEmitter = Callable[[str], None]
CommandHandler2 = Callable[[AppState, CommandArgs], str]
CommandHandler3 = Callable[[AppState, CommandArgs, CommandEmitter | None], str]
CommandHandler = CommandHandler2 | CommandHandler3


class CommandRegistry:
    """Simple slash-command registry used by the console (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(
        self,
        state: AppState,
        line: str,
        emit: CommandEmitter | None = None,
    ) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split(maxsplit=1)
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = CommandArgs(parts[1] if len(parts) > 1 else "")

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            nparams = len(inspect.signature(handler).parameters)
        except (TypeError, ValueError):
            nparams = 3

        if nparams >= 3:
            h3 = cast(CommandHandler3, handler)
            return h3(state, args, emit)

        h2 = cast(CommandHandler2, handler)
        return h2(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def _fmt_ts(ms: int) -> str:
    return datetime.fromtimestamp(ms / 1000).astimezone().strftime("%Y-%m-%d %H:%M")


def format_tasks(tasks: Sequence[Task]) -> str:
    if not tasks:
        return "No tasks."
    lines = []
    for t in tasks:
        mark = "x" if t.done else " "
        lines.append(f"[{mark}] #{t.id} {t.title}  ({_fmt_ts(t.created_at)})")
    return "\n".join(lines)


def _parse_id(args: CommandArgs) -> int | None:
    if not args:
        return None
    try:
        return int(args[0].lstrip("#"))
    except ValueError:
        return None


def cmd_help(state: AppState, args: CommandArgs) -> str:
    return registry.build_help()


def cmd_status(state: AppState, args: CommandArgs) -> str:
    s = state.session
    remote = getattr(state.remote_source, "url", None) or "(not configured)"
    return (
        "Status:\n"
        f"  Store: {state.task_store.db_path}\n"
        f"  Tasks: {len(s.all_tasks)} total, {len(s.tasks)} visible\n"
        f"  Search: {s.search_query or '(none)'}\n"
        f"  Remote: {remote}\n"
        f"  Flags: loading={s.loading} refreshing={s.refreshing} syncing={s.syncing}"
    )


def cmd_list(state: AppState, args: CommandArgs) -> str:
    return format_tasks(state.session.tasks)


def cmd_refresh(state: AppState, args: CommandArgs) -> str:
    if not state.session.refresh():
        return "Refresh failed."
    return format_tasks(state.session.tasks)


def cmd_add(state: AppState, args: CommandArgs) -> str:
    """
    /add <title>
    """
    if not state.session.add(args.text):
        return "Task not added."
    return format_tasks(state.session.tasks)


def cmd_edit(state: AppState, args: CommandArgs) -> str:
    """
    /edit <id> <new title>
    """
    task_id = _parse_id(args)
    if task_id is None:
        return "Usage: /edit <id> <new title>"
    if not state.session.edit(task_id, args.rest(1)):
        return "Task not updated."
    return format_tasks(state.session.tasks)


def cmd_done(state: AppState, args: CommandArgs) -> str:
    task_id = _parse_id(args)
    if task_id is None:
        return "Usage: /done <id>"
    new_done = state.session.toggle_done(task_id)
    if new_done is None:
        return "Task not updated."
    return f"Task #{task_id} marked {'done' if new_done else 'not done'}."


def cmd_rm(state: AppState, args: CommandArgs) -> str:
    task_id = _parse_id(args)
    if task_id is None:
        return "Usage: /rm <id>"
    req = state.session.request_delete(task_id)
    if req is None:
        return "Nothing to delete."
    return (
        f'Delete "{req.title}"?\n'
        f"  /confirm {req.token}  - delete it\n"
        f"  /cancel {req.token}   - keep it"
    )


def cmd_confirm(state: AppState, args: CommandArgs) -> str:
    if not args:
        return "Usage: /confirm <token>"
    if not state.session.confirm_delete(args[0]):
        return "Nothing deleted."
    return "Deleted."


def cmd_cancel(state: AppState, args: CommandArgs) -> str:
    if not args:
        return "Usage: /cancel <token>"
    return "Kept." if state.session.cancel_delete(args[0]) else "No pending delete with that token."


def cmd_search(state: AppState, args: CommandArgs) -> str:
    """
    /search <text>  -> filter the list
    /search         -> clear the filter
    """
    return format_tasks(state.session.search(args.text))


def cmd_import(state: AppState, args: CommandArgs, emit: CommandEmitter | None = None) -> str:
    if emit:
        with contextlib.suppress(Exception):
            emit("[SYNC] Fetching remote tasks...")

    logger.debug("Import requested")
    result = asyncio.run(state.session.import_from_remote())
    if result is None:
        return "Import failed."
    return f"Import done: {result.inserted_count} added, {result.skipped_count} skipped."


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("status", cmd_status, help_text="Show store path, counts, search and flags.")
registry.register("list", cmd_list, help_text="Show tasks (filtered by the current search).", aliases=["ls"])
registry.register("refresh", cmd_refresh, help_text="Reload tasks from the store.")
registry.register("add", cmd_add, help_text="Add a task: /add <title>.")
registry.register("edit", cmd_edit, help_text="Rename a task: /edit <id> <title>.")
registry.register("done", cmd_done, help_text="Toggle done: /done <id>.", aliases=["toggle"])
registry.register("rm", cmd_rm, help_text="Ask to delete a task: /rm <id>.", aliases=["del"])
registry.register("confirm", cmd_confirm, help_text="Confirm a delete: /confirm <token>.")
registry.register("cancel", cmd_cancel, help_text="Cancel a delete: /cancel <token>.")
registry.register("search", cmd_search, help_text="Filter by title: /search <text> (empty clears).")
registry.register("import", cmd_import, help_text="Import new tasks from the remote collection.", aliases=["sync"])
