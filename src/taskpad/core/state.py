# src/taskpad/core/state.py

from __future__ import annotations

from dataclasses import dataclass, field

from ..tasks.modal_controller import ModalController
from ..tasks.task_models import ViewState
from ..tasks.task_store import TaskStore


@dataclass
class AppState:
    # Settings are kept on the state for easy access from connectors/commands.
    settings: object

    store: TaskStore
    modal: ModalController

    # Ephemeral; never handed to persistence.
    view: ViewState = field(default_factory=ViewState)
