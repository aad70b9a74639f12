# tasks/task_persistence.py

from __future__ import annotations

import json
import logging
import sqlite3
from collections.abc import Sequence

from ..core.ports import KeyValueStorage
from .task_models import Task

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "tasks"


class TaskPersistence:
    """
    Loads/saves the whole task collection to one key-value slot.

    The slot value is a JSON list of task records. Nothing here raises:
    - missing or malformed data loads as an empty collection
    - write failures are logged and reported as False
    """

    def __init__(self, storage: KeyValueStorage, key: str = DEFAULT_STORAGE_KEY) -> None:
        self._storage = storage
        self._key = key

    @property
    def key(self) -> str:
        return self._key

    def load(self) -> list[Task]:
        try:
            raw = self._storage.get(self._key)
        except (OSError, sqlite3.Error):
            logger.exception("Failed to read task slot %r; starting empty.", self._key)
            return []

        if raw is None or not raw.strip():
            return []

        try:
            data = json.loads(raw)
        except ValueError:
            logger.warning("Task slot %r holds malformed JSON; starting empty.", self._key)
            return []

        if not isinstance(data, list):
            logger.warning(
                "Task slot %r holds %s instead of a list; starting empty.",
                self._key,
                type(data).__name__,
            )
            return []

        tasks: list[Task] = []
        seen: set[str] = set()
        try:
            for item in data:
                task = Task.from_record(item)
                if task.id in seen:
                    logger.warning("Duplicate task id %s in slot %r; keeping first.", task.id, self._key)
                    continue
                seen.add(task.id)
                tasks.append(task)
        except ValueError as e:
            logger.warning("Task slot %r holds an invalid record (%s); starting empty.", self._key, e)
            return []

        logger.debug("Loaded %d tasks from slot %r", len(tasks), self._key)
        return tasks

    def save(self, tasks: Sequence[Task]) -> bool:
        payload = json.dumps([t.to_record() for t in tasks], ensure_ascii=False)
        try:
            self._storage.set(self._key, payload)
        except (OSError, sqlite3.Error):
            logger.exception("Failed to save %d tasks to slot %r.", len(tasks), self._key)
            return False
        logger.debug("Saved %d tasks to slot %r", len(tasks), self._key)
        return True
