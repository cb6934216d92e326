# src/taskpad/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..tasks.task_manager import TaskManager
from .ports import Notifier, TaskRepo


@dataclass
class AppState:
    # Settings object (real Settings or a test SimpleNamespace).
    settings: Any

    notifier: Notifier
    manager: TaskManager
    task_store: TaskRepo

    # Cleared when the stored snapshot could not be loaded: saving the
    # in-memory list would overwrite tasks this session never saw.
    persist_enabled: bool = True
