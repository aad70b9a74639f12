# src/taskpad/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..cli.commands import registry as command_registry
from ..core.state import AppState
from ..tasks import task_api
from ..tasks.task_api import RenderModel
from ..tasks.task_models import ModalKind

logger = logging.getLogger(__name__)


def format_board(model: RenderModel, *, title: str = "taskpad") -> str:
    """Render the presentation outputs as plain text."""
    order = "newest first" if model.sort_newest_first else "oldest first"
    search = f", search '{model.search_text}'" if model.search_text else ""
    lines = [f"== {title} == [{model.filter}{search}, {order}]"]

    if not model.tasks:
        lines.append("  (no tasks to show)")
    for pos, task in enumerate(model.tasks, start=1):
        mark = "x" if task.completed else " "
        pointer = ">" if task.id == model.highlighted_task_id else " "
        lines.append(f"{pointer}{pos:>3}. [{mark}] {task.text}")

    footer = f"Active: {model.active_count}"
    if model.has_completed:
        footer += "   (/clear removes completed)"
    lines.append(footer)

    if model.active_modal is ModalKind.EDIT:
        hint = "/save" if model.can_save else "/save disabled: empty text"
        lines.append(f"-- editing: {model.edit_draft_text!r}  ({hint}, /cancel)")
    elif model.active_modal is ModalKind.DELETE and model.pending_delete is not None:
        lines.append(f"-- delete '{model.pending_delete.text}'? (/yes, /no)")

    return "\n".join(lines)


def handle_line(state: AppState, line: str, emit: Callable[[str], None] | None = None) -> str:
    """
    Route one line of console input into the core.

    Commands go through the registry. Plain text becomes the edit draft while
    the edit dialog is open, and a new task otherwise.
    """
    reply = command_registry.handle(state, line, emit=emit)
    if reply is not None:
        return reply

    kind = state.modal.active_modal
    if kind is ModalKind.EDIT:
        task_api.change_draft(state, line)
        return ""
    if kind is ModalKind.DELETE:
        return "Confirm with /yes or keep the task with /no."

    if task_api.add_task(state, line) is None:
        return "Task text is empty; nothing added."
    return ""


def run_console_loop(
    state: AppState,
    *,
    read: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
) -> None:
    logger.info("Console connector started.")
    title = str(getattr(getattr(state, "settings", None), "app_name", "taskpad"))
    write("Type a task to add it. Use /help for commands. Use /exit to quit.\n")
    write(format_board(task_api.render_model(state), title=title))

    while True:
        try:
            line = read("> ").strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            write("")
            break

        if not line:
            continue

        if line.lower() in ("/exit", "/quit"):
            logger.info("Console exit command received.")
            break

        try:
            reply = handle_line(state, line, emit=write)
        except Exception:
            logger.exception("Command handler crashed.")
            reply = "Internal error while handling a command."

        if reply:
            write(reply)
        write(format_board(task_api.render_model(state), title=title))

    logger.info("Console connector finished.")
