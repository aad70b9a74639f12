# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from taskpad.core.state import AppState
from taskpad.storage.memory import MemoryStorage
from taskpad.tasks.modal_controller import ModalController
from taskpad.tasks.task_persistence import TaskPersistence
from taskpad.tasks.task_store import TaskStore

from .fakes import FakeClock, SequentialIds


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with the bootstrap and connectors.

    We intentionally use a SimpleNamespace rather than the real config,
    to keep unit tests isolated from the environment.
    """
    return SimpleNamespace(
        app_name="taskpad-test",
        log_level="DEBUG",
        data_dir=tmp_path / "data",
        storage_backend="memory",
        storage_path=tmp_path / "data" / "storage.json",
        storage_key="tasks",
        sort_newest_first=True,
        console_enabled=False,
    )


@pytest.fixture()
def storage() -> MemoryStorage:
    return MemoryStorage()


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def store(storage: MemoryStorage, clock: FakeClock) -> TaskStore:
    return TaskStore(TaskPersistence(storage), clock=clock, id_factory=SequentialIds())


@pytest.fixture()
def state(settings: SimpleNamespace, store: TaskStore) -> AppState:
    """
    AppState over the deterministic store fixture.

    Bootstrap wiring itself is covered in test_bootstrap.py.
    """
    return AppState(settings=settings, store=store, modal=ModalController(store))
