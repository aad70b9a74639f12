# tasks/task_models.py

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import StrEnum
from typing import Any


class TaskFilter(StrEnum):
    """Status predicate applied to the display list."""

    ALL = "all"
    ACTIVE = "active"
    COMPLETED = "completed"

    @classmethod
    def parse(cls, raw: str | None) -> TaskFilter:
        if not raw:
            return cls.ALL
        try:
            return cls(raw.strip().lower())
        except ValueError:
            return cls.ALL


class ModalKind(StrEnum):
    NONE = "none"
    EDIT = "edit"
    DELETE = "delete"


@dataclass(slots=True)
class Task:
    id: str
    text: str
    completed: bool
    created_at: int  # epoch milliseconds

    def to_record(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "text": self.text,
            "completed": self.completed,
            "createdAt": self.created_at,
        }

    @classmethod
    def from_record(cls, raw: Any) -> Task:
        """
        Build a Task from a persisted record.

        Raises ValueError if the record is not a mapping with a string id,
        non-empty text, a boolean completion flag and an integer timestamp.
        """
        if not isinstance(raw, dict):
            raise ValueError(f"task record must be an object, got {type(raw).__name__}")

        task_id = raw.get("id")
        text = raw.get("text")
        completed = raw.get("completed", False)
        created_at = raw.get("createdAt")

        if not isinstance(task_id, str) or not task_id:
            raise ValueError("task record has no id")
        if not isinstance(text, str) or not text.strip():
            raise ValueError(f"task {task_id} has empty text")
        if not isinstance(completed, bool):
            raise ValueError(f"task {task_id} has non-boolean completed flag")
        # bool is an int subclass; reject it explicitly.
        if isinstance(created_at, bool) or not isinstance(created_at, (int, float)):
            raise ValueError(f"task {task_id} has no createdAt timestamp")
        if isinstance(created_at, float) and not math.isfinite(created_at):
            raise ValueError(f"task {task_id} has a non-finite createdAt")

        return cls(id=task_id, text=text.strip(), completed=completed, created_at=int(created_at))


@dataclass(slots=True)
class ViewState:
    """Ephemeral view settings. Never persisted."""

    filter: TaskFilter = TaskFilter.ALL
    search_text: str = ""
    sort_newest_first: bool = True


@dataclass(slots=True)
class ModalState:
    """
    Ephemeral modal fields.

    editing_task_id / edit_draft_text are meaningful only while active_modal is EDIT,
    pending_delete_id only while it is DELETE. clear() resets all of them together.
    """

    active_modal: ModalKind = ModalKind.NONE
    editing_task_id: str | None = None
    edit_draft_text: str = ""
    pending_delete_id: str | None = None

    def clear(self) -> None:
        self.active_modal = ModalKind.NONE
        self.editing_task_id = None
        self.edit_draft_text = ""
        self.pending_delete_id = None


@dataclass(slots=True)
class Selection:
    highlighted_task_id: str | None = None
