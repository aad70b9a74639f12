# tasks/modal_controller.py

from __future__ import annotations

import logging

from .task_models import ModalKind, ModalState
from .task_store import TaskStore

logger = logging.getLogger(__name__)


class ModalController:
    """
    State machine for the two modal workflows.

        none --begin_edit--> edit --save_edit/cancel_edit/close--> none
        none --request_delete--> delete --confirm_delete/cancel_delete/close--> none

    Opening a modal while another one is open closes the previous one first.
    Every way out of a modal goes through ModalState.clear(), so no edit or
    delete field outlives the modal that set it.
    """

    def __init__(self, store: TaskStore, state: ModalState | None = None) -> None:
        self._store = store
        self.state = state if state is not None else ModalState()

    @property
    def active_modal(self) -> ModalKind:
        return self.state.active_modal

    @property
    def is_open(self) -> bool:
        return self.state.active_modal is not ModalKind.NONE

    @property
    def can_save(self) -> bool:
        return self.state.active_modal is ModalKind.EDIT and bool(self.state.edit_draft_text.strip())

    # ---- edit ----

    def begin_edit(self, task_id: str) -> bool:
        task = self._store.get(task_id)
        if task is None:
            return False
        self.close()
        self.state.active_modal = ModalKind.EDIT
        self.state.editing_task_id = task.id
        self.state.edit_draft_text = task.text
        logger.debug("Edit modal opened task_id=%s", task.id)
        return True

    def change_draft(self, text: str) -> None:
        if self.state.active_modal is not ModalKind.EDIT:
            return
        self.state.edit_draft_text = text

    def save_edit(self) -> bool:
        # Empty draft: the save action is disabled and the modal stays open.
        if not self.can_save or self.state.editing_task_id is None:
            return False
        # The task may be gone (e.g. cleared meanwhile); the modal closes either way.
        saved = self._store.update(self.state.editing_task_id, self.state.edit_draft_text)
        self.close()
        return saved

    def cancel_edit(self) -> None:
        if self.state.active_modal is ModalKind.EDIT:
            self.close()

    # ---- delete ----

    def request_delete(self, task_id: str) -> bool:
        if task_id not in self._store:
            return False
        self.close()
        self.state.active_modal = ModalKind.DELETE
        self.state.pending_delete_id = task_id
        logger.debug("Delete modal opened task_id=%s", task_id)
        return True

    def confirm_delete(self) -> bool:
        if self.state.active_modal is not ModalKind.DELETE or self.state.pending_delete_id is None:
            return False
        self._store.delete(self.state.pending_delete_id)
        self.close()
        return True

    def cancel_delete(self) -> None:
        if self.state.active_modal is ModalKind.DELETE:
            self.close()

    # ---- generic ----

    def close(self) -> None:
        """Escape / outside click: same as cancel for whichever modal is open."""
        self.state.clear()
