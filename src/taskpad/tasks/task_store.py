# tasks/task_store.py

from __future__ import annotations

import logging
import time
import uuid
from collections.abc import Callable

from ..core.ports import TaskPersistencePort
from .task_models import Selection, Task

logger = logging.getLogger(__name__)


def _now_ms() -> int:
    return int(time.time() * 1000)


def _new_id() -> str:
    return uuid.uuid4().hex


class TaskStore:
    """
    In-memory task collection with write-through persistence.

    - insertion order is the storage order; display order is derived elsewhere
    - every mutation saves the full collection before returning
    - invalid input and unknown ids are silent no-ops
    - removing a task clears the highlight if it pointed at that task
    """

    def __init__(
        self,
        persistence: TaskPersistencePort,
        *,
        selection: Selection | None = None,
        clock: Callable[[], int] = _now_ms,
        id_factory: Callable[[], str] = _new_id,
    ) -> None:
        self._persistence = persistence
        self._clock = clock
        self._id_factory = id_factory
        self.selection = selection if selection is not None else Selection()
        self._tasks: list[Task] = list(persistence.load())
        logger.info("TaskStore ready total=%s", len(self._tasks))

    # ---- low-level helpers ----

    def _index_of(self, task_id: str) -> int | None:
        for i, t in enumerate(self._tasks):
            if t.id == task_id:
                return i
        return None

    def _persist(self) -> None:
        # The in-memory collection stays authoritative if the save fails.
        if not self._persistence.save(self._tasks):
            logger.warning("Tasks not persisted; keeping in-memory state (%d tasks).", len(self._tasks))

    def _fresh_id(self) -> str:
        task_id = self._id_factory()
        while self._index_of(task_id) is not None:
            task_id = self._id_factory()
        return task_id

    # ---- queries ----

    @property
    def tasks(self) -> tuple[Task, ...]:
        return tuple(self._tasks)

    @property
    def highlighted_task_id(self) -> str | None:
        return self.selection.highlighted_task_id

    def get(self, task_id: str) -> Task | None:
        idx = self._index_of(task_id)
        return self._tasks[idx] if idx is not None else None

    def __len__(self) -> int:
        return len(self._tasks)

    def __contains__(self, task_id: object) -> bool:
        return isinstance(task_id, str) and self._index_of(task_id) is not None

    # ---- mutations ----

    def create(self, raw_text: str) -> Task | None:
        text = raw_text.strip()
        if not text:
            return None

        task = Task(id=self._fresh_id(), text=text, completed=False, created_at=self._clock())
        self._tasks.append(task)
        self._persist()
        self.selection.highlighted_task_id = task.id
        logger.debug("Task created id=%s", task.id)
        return task

    def toggle(self, task_id: str) -> bool:
        task = self.get(task_id)
        if task is None:
            return False
        task.completed = not task.completed
        self._persist()
        logger.debug("Task toggled id=%s completed=%s", task_id, task.completed)
        return True

    def update(self, task_id: str, new_text: str) -> bool:
        text = new_text.strip()
        if not text:
            return False
        task = self.get(task_id)
        if task is None:
            return False
        task.text = text
        self._persist()
        logger.debug("Task updated id=%s", task_id)
        return True

    def delete(self, task_id: str) -> bool:
        idx = self._index_of(task_id)
        if idx is None:
            return False
        del self._tasks[idx]
        if self.selection.highlighted_task_id == task_id:
            self.selection.highlighted_task_id = None
        self._persist()
        logger.debug("Task deleted id=%s", task_id)
        return True

    def clear_completed(self) -> int:
        """Remove every completed task. Returns how many were removed."""
        removed_ids = {t.id for t in self._tasks if t.completed}
        self._tasks = [t for t in self._tasks if not t.completed]
        if self.selection.highlighted_task_id in removed_ids:
            self.selection.highlighted_task_id = None
        self._persist()
        logger.debug("Cleared %d completed tasks", len(removed_ids))
        return len(removed_ids)

    def select(self, task_id: str) -> bool:
        if self._index_of(task_id) is None:
            return False
        self.selection.highlighted_task_id = task_id
        return True
