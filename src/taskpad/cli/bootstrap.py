# src/taskpad/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures the local data directory exists,
- picks the storage backend and wires store/controller/view into AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.ports import KeyValueStorage
from ..core.state import AppState
from ..storage.json_file import JsonFileStorage
from ..storage.memory import MemoryStorage
from ..storage.sqlite_kv import SqliteStorage
from ..tasks.modal_controller import ModalController
from ..tasks.task_models import ViewState
from ..tasks.task_persistence import TaskPersistence
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def create_storage(settings) -> KeyValueStorage:
    backend = getattr(settings, "storage_backend", "json")
    if backend == "memory":
        return MemoryStorage()
    settings.storage_path.parent.mkdir(parents=True, exist_ok=True)
    if backend == "sqlite":
        return SqliteStorage(settings.storage_path)
    return JsonFileStorage(settings.storage_path)


def create_initial_state(*, settings=None, storage: KeyValueStorage | None = None) -> AppState:
    """
    Create AppState from the provided settings.

    settings and storage are injectable for tests; if settings is None,
    falls back to get_settings(), if storage is None, builds the configured backend.
    """
    if settings is None:
        settings = get_settings()

    settings.data_dir.mkdir(parents=True, exist_ok=True)

    if storage is None:
        storage = create_storage(settings)

    persistence = TaskPersistence(storage, key=settings.storage_key)
    store = TaskStore(persistence)

    state = AppState(
        settings=settings,
        store=store,
        modal=ModalController(store),
        view=ViewState(sort_newest_first=settings.sort_newest_first),
    )
    logger.info(
        "State ready backend=%s key=%s tasks=%d",
        getattr(settings, "storage_backend", "?"),
        settings.storage_key,
        len(store),
    )
    return state
