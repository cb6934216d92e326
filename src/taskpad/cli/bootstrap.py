# src/taskpad/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- wires the notifier, task manager and task store into AppState,
- seeds the manager from the stored snapshot.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..connectors.console_connector import ConsoleNotifier
from ..core.ports import Notifier
from ..core.state import AppState
from ..errors import TaskError
from ..tasks.task_manager import TaskManager
from ..tasks.task_models import Fragments, TaskKind
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.tasks_db_path.parent.mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings=None, notifier: Notifier | None = None) -> AppState:
    """
    Create AppState from the provided settings.

    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    notifier = notifier or ConsoleNotifier()
    return AppState(
        settings=settings,
        notifier=notifier,
        manager=TaskManager(notifier),
        task_store=TaskStore(settings.tasks_db_path),
    )


def load_tasks(state: AppState) -> int:
    """
    Replace the manager's contents with the stored snapshot (no notifications).

    Rows whose text no longer builds a valid task are skipped. Returns the number loaded.
    """
    state.manager.clear()
    loaded = 0
    for task in state.task_store.load_tasks():
        if task.kind is TaskKind.TODO:
            fragments = Fragments(before="", after=task.description)
        else:
            fragments = Fragments(before=task.description, after=task.date or "")
        try:
            state.manager.add_task(task.kind, fragments, done=task.done, notify=False)
        except TaskError as e:
            logger.warning("Skipping stored task %r: %s", task.description, e)
            continue
        loaded += 1

    logger.info("Loaded %s tasks", loaded)
    return loaded


def restore_tasks(state: AppState) -> bool:
    """
    Startup load. On failure the session starts empty and saving is switched
    off, so neither autosave nor the exit save can replace the stored snapshot.
    """
    try:
        load_tasks(state)
    except Exception:
        logger.exception("Failed to load stored tasks; starting empty with saving disabled.")
        state.manager.clear()
        state.persist_enabled = False
        return False
    return True


def save_tasks(state: AppState) -> None:
    state.task_store.save_tasks(state.manager.get_tasks())
    logger.info("Saved %s tasks", state.manager.get_task_size())
