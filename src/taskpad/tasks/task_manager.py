# src/taskpad/tasks/task_manager.py

from __future__ import annotations

import logging
import re
from dataclasses import replace
from functools import cmp_to_key

from ..core.ports import Notifier
from ..errors import CommandFormatError, IndexOutOfRange, InvalidIndexError
from .date_parser import format_date
from .task_models import Fragments, Task, TaskKind, compare_tasks

logger = logging.getLogger(__name__)

_INDEX_RE = re.compile(r"[+-]?[0-9]+")


def parse_index(raw: str) -> int:
    """
    1-based task number text -> 0-based index.

    ASCII digits with an optional sign only; raises ValueError otherwise
    ("1_0" and non-ASCII digits are rejected even though int() takes them).
    """
    s = raw.strip()
    if not _INDEX_RE.fullmatch(s):
        raise ValueError(f"not a task number: {raw!r}")
    return int(s) - 1


class TaskManager:
    """
    In-memory task list kept in display order.

    Records live in an arena keyed by a stable handle (insertion sequence).
    The ordered view is derived on demand: compare_tasks first, handle second,
    so equal-comparing tasks (e.g. two todos) are all kept, in insertion order.

    Positions (1-based for users, 0-based for get_task) always refer to the
    current ordered view and shift after deletions.

    Not thread-safe: callers serialize access.
    """

    def __init__(self, notifier: Notifier) -> None:
        self._notifier = notifier
        self._tasks: dict[int, Task] = {}
        self._next_handle = 0
        self._task_size = 0

    # ---- ordering ----

    def _ordered_handles(self) -> list[int]:
        def cmp(h1: int, h2: int) -> int:
            c = compare_tasks(self._tasks[h1], self._tasks[h2])
            return c if c else (h1 > h2) - (h1 < h2)

        return sorted(self._tasks, key=cmp_to_key(cmp))

    def _handle_at(self, idx: int) -> int:
        if idx < 0 or idx >= self._task_size:
            raise IndexOutOfRange(f"No task at index {idx} (have {self._task_size}).")
        return self._ordered_handles()[idx]

    # ---- mutations ----

    def add_task(
        self,
        kind: TaskKind,
        fragments: Fragments,
        done: bool = False,
        notify: bool = True,
    ) -> Task:
        """
        Build the task variant for `kind` from command fragments and insert it.

        Todo takes its description from the text after the keyword; deadline /
        event take the description before the clause and the date after it.
        Raises DateFormatError / CommandFormatError without touching the list.
        """
        if kind is TaskKind.TODO:
            task = Task(kind, fragments.after.strip(), done=done)
        else:
            task = Task(kind, fragments.before.strip(), format_date(fragments.after), done=done)

        if not task.description:
            raise CommandFormatError(f"The description of a {kind.value} cannot be empty.")

        self._tasks[self._next_handle] = task
        self._next_handle += 1
        self._task_size += 1
        logger.debug("Task added kind=%s date=%s done=%s size=%s", kind, task.date, done, self._task_size)

        if notify:
            self._notifier.show_add_task(task, self._task_size)
        return task

    def delete_task(self, raw_index: str) -> Task:
        try:
            handle = self._handle_at(parse_index(raw_index))
        except (ValueError, IndexOutOfRange) as e:
            self.list_tasks()
            raise InvalidIndexError("Please enter a valid task number to delete.") from e

        task = self._tasks.pop(handle)
        self._task_size -= 1
        logger.debug("Task deleted handle=%s size=%s", handle, self._task_size)
        self._notifier.show_delete_task(task, self._task_size)
        return task

    def mark_task_as_done(self, raw_index: str) -> Task:
        """
        Mark the task at 1-based `raw_index` as done.

        The full listing is emitted last on success and on failure alike.
        """
        try:
            handle = self._handle_at(parse_index(raw_index))
            task = replace(self._tasks[handle], done=True)
            self._tasks[handle] = task
            logger.debug("Task marked done handle=%s", handle)
            self._notifier.show_done_task(task)
            return task
        except (ValueError, IndexOutOfRange) as e:
            raise InvalidIndexError("Please enter a valid task number to be marked as done!") from e
        finally:
            self.list_tasks()

    def clear(self) -> None:
        self._tasks.clear()
        self._task_size = 0

    # ---- queries ----

    def list_tasks(self) -> None:
        self._notifier.show_list_header()
        for position, task in enumerate(self.get_tasks(), start=1):
            self._notifier.show_list_line(position, str(task))

    def get_tasks(self) -> list[Task]:
        return [self._tasks[h] for h in self._ordered_handles()]

    def get_task_size(self) -> int:
        return self._task_size

    def get_task(self, index: int) -> Task:
        return self._tasks[self._handle_at(index)]
