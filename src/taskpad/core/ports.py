# src/taskpad/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The task store depends on Protocols instead of concrete implementations.
This keeps storage backends swappable and makes testing easier.
"""

from collections.abc import Sequence
from typing import Protocol

from ..tasks.task_models import Task


class KeyValueStorage(Protocol):
    """
    Durable local key-value slot store (browser localStorage analogue).

    Backends may raise OSError / sqlite3.Error; callers decide how to degrade.
    """

    def get(self, key: str) -> str | None: ...
    def set(self, key: str, value: str) -> None: ...


class TaskPersistencePort(Protocol):
    def load(self) -> list[Task]: ...
    def save(self, tasks: Sequence[Task]) -> bool: ...
