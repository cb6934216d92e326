# src/taskpad/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import NamedTuple

from ..errors import DateFormatError
from .date_parser import parse_date


class TaskKind(StrEnum):
    """
    Task variant tag.

    Notes:
    - "todo" carries no date and always sorts before dated kinds.
    - "deadline" / "event" carry a canonical date string.
    """

    TODO = "todo"
    DEADLINE = "deadline"
    EVENT = "event"

    @classmethod
    def from_db(cls, raw: str | None) -> TaskKind | None:
        if not raw:
            return None
        try:
            return cls(raw)
        except ValueError:
            return None


class Fragments(NamedTuple):
    """Descriptor text before and after a clause marker."""

    before: str
    after: str


# Dispatch tables (rendering).
_TAGS: dict[TaskKind, str] = {
    TaskKind.TODO: "T",
    TaskKind.DEADLINE: "D",
    TaskKind.EVENT: "E",
}
_DATE_LABELS: dict[TaskKind, str] = {
    TaskKind.DEADLINE: "by",
    TaskKind.EVENT: "at",
}


@dataclass(frozen=True, slots=True)
class Task:
    kind: TaskKind
    description: str
    date: str | None = None
    done: bool = False

    def __str__(self) -> str:
        return render_task(self)


def render_task(task: Task) -> str:
    """Single-line form, e.g. "[D][ ] submit report (by: 02 Dec 2019, 18:00)"."""
    mark = "X" if task.done else " "
    text = f"[{_TAGS[task.kind]}][{mark}] {task.description}"
    label = _DATE_LABELS.get(task.kind)
    if label is not None:
        text += f" ({label}: {task.date})"
    return text


def compare_tasks(a: Task, b: Task) -> int:
    """
    Display order: undated todos first, then dated tasks by ascending date.

    Two todos compare equal. A date that fails to parse makes the pair equal
    instead of raising; placement of such tasks is unspecified.
    """
    a_todo = a.kind is TaskKind.TODO
    b_todo = b.kind is TaskKind.TODO
    if a_todo and b_todo:
        return 0
    if a_todo:
        return -1
    if b_todo:
        return 1
    try:
        a_date = parse_date(a.date)
        b_date = parse_date(b.date)
    except DateFormatError:
        return 0
    return (a_date > b_date) - (a_date < b_date)
