# src/taskpad/cli/commands.py

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable
from typing import cast

from ..core.state import AppState
from ..tasks import task_api
from ..tasks.task_models import ModalKind, Task, TaskFilter

CommandEmitter = Callable[[str], None]
CommandHandler2 = Callable[[AppState, list[str]], str]
CommandHandler3 = Callable[[AppState, list[str], CommandEmitter | None], str]
CommandHandler = CommandHandler2 | CommandHandler3

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by the console connector (/help, /add, ...)."""

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

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

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
        lines.append("Any other line adds a task (or replaces the draft while editing).")
        return "\n".join(lines)


registry = CommandRegistry()


def _resolve(state: AppState, args: list[str]) -> Task | str:
    """Map a 1-based position in the current display list to a task, or an error reply."""
    if not args:
        return "Which task? Pass its number from the list."
    try:
        pos = int(args[0])
    except ValueError:
        return f"Not a task number: {args[0]}"
    visible = task_api.visible_tasks(state)
    if not 1 <= pos <= len(visible):
        return f"No task #{pos} in the current list."
    return visible[pos - 1]


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_list(state: AppState, args: list[str]) -> str:
    # The connector redraws after every command; nothing else to report.
    return ""


def cmd_add(state: AppState, args: list[str]) -> str:
    task = task_api.add_task(state, " ".join(args))
    if task is None:
        return "Task text is empty; nothing added."
    return f"Added: {task.text}"


def cmd_toggle(state: AppState, args: list[str]) -> str:
    task = _resolve(state, args)
    if isinstance(task, str):
        return task
    task_api.toggle_task(state, task.id)
    task_api.select_task(state, task.id)
    return f"{'Completed' if task.completed else 'Reopened'}: {task.text}"


def cmd_select(state: AppState, args: list[str]) -> str:
    task = _resolve(state, args)
    if isinstance(task, str):
        return task
    task_api.select_task(state, task.id)
    return f"Selected: {task.text}"


def cmd_edit(state: AppState, args: list[str]) -> str:
    task = _resolve(state, args)
    if isinstance(task, str):
        return task
    task_api.begin_edit(state, task.id)
    return "Editing. Type the new text, then /save or /cancel."


def cmd_save(state: AppState, args: list[str]) -> str:
    if state.modal.active_modal is not ModalKind.EDIT:
        return "Nothing is being edited."
    if not state.modal.can_save:
        return "Task text cannot be empty."
    if not task_api.save_edit(state):
        return "The task no longer exists; nothing saved."
    return "Saved."


def cmd_cancel(state: AppState, args: list[str]) -> str:
    kind = state.modal.active_modal
    if kind is ModalKind.EDIT:
        task_api.cancel_edit(state)
        return "Edit cancelled."
    if kind is ModalKind.DELETE:
        task_api.cancel_delete(state)
        return "Delete cancelled."
    return "Nothing to cancel."


def cmd_close(state: AppState, args: list[str]) -> str:
    task_api.close_modal(state)
    return ""


def cmd_delete(state: AppState, args: list[str]) -> str:
    task = _resolve(state, args)
    if isinstance(task, str):
        return task
    task_api.request_delete(state, task.id)
    return f"Delete '{task.text}'? /yes to confirm, /no to cancel."


def cmd_confirm(state: AppState, args: list[str]) -> str:
    if not task_api.confirm_delete(state):
        return "Nothing to confirm."
    return "Deleted."


def cmd_deny(state: AppState, args: list[str]) -> str:
    if state.modal.active_modal is not ModalKind.DELETE:
        return "Nothing to cancel."
    task_api.cancel_delete(state)
    return "Delete cancelled."


def cmd_clear(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    if emit is not None:
        for task in state.store.tasks:
            if task.completed:
                emit(f"Removing: {task.text}")
    removed = task_api.clear_completed(state)
    if not removed:
        return "No completed tasks."
    return f"Removed {removed} completed task(s)."


def cmd_filter(state: AppState, args: list[str]) -> str:
    if not args:
        return f"Filter is '{state.view.filter}'. Use /filter all | active | completed."
    raw = args[0].lower()
    if raw not in {f.value for f in TaskFilter}:
        return "Usage: /filter all | active | completed."
    value = task_api.set_filter(state, raw)
    return f"Filter: {value}"


def cmd_search(state: AppState, args: list[str]) -> str:
    text = " ".join(args)
    task_api.set_search(state, text)
    return f"Search: '{text}'" if text else "Search cleared."


def cmd_sort(state: AppState, args: list[str]) -> str:
    newest_first = task_api.toggle_sort_order(state)
    return "Sort: newest first" if newest_first else "Sort: oldest first"


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("list", cmd_list, help_text="Redraw the task list.", aliases=["ls"])
registry.register("add", cmd_add, help_text="Add a task: /add <text>.", aliases=["a"])
registry.register("toggle", cmd_toggle, help_text="Complete/reopen and select task N.", aliases=["t", "done"])
registry.register("select", cmd_select, help_text="Highlight task N.", aliases=["s"])
registry.register("edit", cmd_edit, help_text="Edit task N.", aliases=["e"])
registry.register("save", cmd_save, help_text="Save the edit draft.")
registry.register("cancel", cmd_cancel, help_text="Cancel the open edit/delete dialog.")
registry.register("close", cmd_close, help_text="Close any open dialog.", aliases=["esc"])
registry.register("delete", cmd_delete, help_text="Ask to delete task N.", aliases=["rm", "del"])
registry.register("yes", cmd_confirm, help_text="Confirm the pending delete.", aliases=["y"])
registry.register("no", cmd_deny, help_text="Keep the task pending deletion.", aliases=["n"])
registry.register("clear", cmd_clear, help_text="Remove all completed tasks.")
registry.register("filter", cmd_filter, help_text="Filter: /filter all | active | completed.", aliases=["f"])
registry.register("search", cmd_search, help_text="Search text (empty clears): /search <text>.", aliases=["find"])
registry.register("sort", cmd_sort, help_text="Toggle newest/oldest first.")
