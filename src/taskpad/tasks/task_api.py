# src/taskpad/tasks/task_api.py

"""
Presentation-facing intents.

One function per user intent, each taking AppState first. Callers re-derive
the display with render_model() after every intent; the store emits no
notifications of its own.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..core.state import AppState
from .task_models import ModalKind, Task, TaskFilter
from .task_view import active_count, derive_view, has_completed

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RenderModel:
    tasks: tuple[Task, ...]
    active_count: int
    has_completed: bool
    total: int

    filter: TaskFilter
    search_text: str
    sort_newest_first: bool

    active_modal: ModalKind
    edit_draft_text: str
    can_save: bool
    pending_delete: Task | None

    highlighted_task_id: str | None


# ---- tasks ----


def add_task(state: AppState, text: str) -> Task | None:
    return state.store.create(text)


def toggle_task(state: AppState, task_id: str) -> bool:
    return state.store.toggle(task_id)


def select_task(state: AppState, task_id: str) -> bool:
    return state.store.select(task_id)


def clear_completed(state: AppState) -> int:
    removed = state.store.clear_completed()
    if removed:
        logger.info("Cleared %d completed task(s).", removed)
    return removed


# ---- edit modal ----


def begin_edit(state: AppState, task_id: str) -> bool:
    return state.modal.begin_edit(task_id)


def change_draft(state: AppState, text: str) -> None:
    state.modal.change_draft(text)


def save_edit(state: AppState) -> bool:
    return state.modal.save_edit()


def cancel_edit(state: AppState) -> None:
    state.modal.cancel_edit()


# ---- delete modal ----


def request_delete(state: AppState, task_id: str) -> bool:
    return state.modal.request_delete(task_id)


def confirm_delete(state: AppState) -> bool:
    return state.modal.confirm_delete()


def cancel_delete(state: AppState) -> None:
    state.modal.cancel_delete()


def close_modal(state: AppState) -> None:
    state.modal.close()


# ---- view ----


def set_filter(state: AppState, value: TaskFilter | str) -> TaskFilter:
    state.view.filter = value if isinstance(value, TaskFilter) else TaskFilter.parse(value)
    return state.view.filter


def set_search(state: AppState, text: str) -> None:
    state.view.search_text = text


def toggle_sort_order(state: AppState) -> bool:
    state.view.sort_newest_first = not state.view.sort_newest_first
    return state.view.sort_newest_first


def visible_tasks(state: AppState) -> list[Task]:
    return derive_view(state.store.tasks, state.view)


def render_model(state: AppState) -> RenderModel:
    all_tasks = state.store.tasks
    modal = state.modal.state
    pending = (
        state.store.get(modal.pending_delete_id)
        if modal.active_modal is ModalKind.DELETE and modal.pending_delete_id
        else None
    )
    return RenderModel(
        tasks=tuple(derive_view(all_tasks, state.view)),
        active_count=active_count(all_tasks),
        has_completed=has_completed(all_tasks),
        total=len(all_tasks),
        filter=state.view.filter,
        search_text=state.view.search_text,
        sort_newest_first=state.view.sort_newest_first,
        active_modal=modal.active_modal,
        edit_draft_text=modal.edit_draft_text,
        can_save=state.modal.can_save,
        pending_delete=pending,
        highlighted_task_id=state.store.highlighted_task_id,
    )
