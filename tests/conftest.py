# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from taskpad.core.state import AppState
from taskpad.tasks.task_manager import TaskManager
from taskpad.tasks.task_store import TaskStore

from .fakes import FakeNotifier


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment and any local .env.
    """
    return SimpleNamespace(
        app_name="taskpad-test",
        log_level="DEBUG",
        data_dir=tmp_path / "data",
        tasks_db_path=tmp_path / "data" / "tasks.sqlite3",
        autosave=True,
    )


@pytest.fixture()
def notifier() -> FakeNotifier:
    return FakeNotifier()


@pytest.fixture()
def manager(notifier: FakeNotifier) -> TaskManager:
    return TaskManager(notifier)


@pytest.fixture()
def state(settings: SimpleNamespace, notifier: FakeNotifier, manager: TaskManager) -> AppState:
    """
    AppState wired with a recording notifier.

    The SQLite TaskStore is real: autosave behaviour is part of what we test.
    """
    return AppState(
        settings=settings,
        notifier=notifier,
        manager=manager,
        task_store=TaskStore(settings.tasks_db_path),
    )
