# src/taskpad/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The task manager depends on Protocols instead of concrete implementations.
This keeps the console output and the storage backend swappable and makes
testing easier.
"""

from typing import Iterable, Protocol

from ..tasks.task_models import Task


class Notifier(Protocol):
    """
    Output-side port: receives human-readable events after each mutation.

    The connector decides how to present them (console lines, chat messages, ...).
    """

    def show_add_task(self, task: Task, count: int) -> None: ...

    def show_delete_task(self, task: Task, count: int) -> None: ...

    def show_done_task(self, task: Task) -> None: ...

    def show_list_header(self) -> None: ...

    def show_list_line(self, position: int, text: str) -> None: ...


class TaskRepo(Protocol):
    """Snapshot persistence for the ordered task list."""

    def load_tasks(self) -> list[Task]: ...

    def save_tasks(self, tasks: Iterable[Task]) -> None: ...

    def count_tasks(self) -> int: ...
