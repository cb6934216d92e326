# src/taskpad/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..core.state import AppState
from ..errors import TaskError
from ..tasks.task_models import TaskKind
from .parser import (
    DEADLINE_CLAUSE,
    DEADLINE_DESCRIPTION_IDX,
    EVENT_CLAUSE,
    EVENT_DESCRIPTION_IDX,
    split_by_clause,
)

CommandHandler = Callable[[AppState, str], str | None]

logger = logging.getLogger(__name__)


def persist_tasks(state: AppState) -> None:
    """Write the current ordered list to the task store when autosave is on."""
    if not state.persist_enabled or not getattr(state.settings, "autosave", False):
        return
    state.task_store.save_tasks(state.manager.get_tasks())


class CommandRegistry:
    """Command-word registry used by connectors (todo, list, done, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._mutating: set[str] = set()
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
        mutates: bool = False,
    ) -> None:
        aliases = aliases or []
        for key in [name, *aliases]:
            key = key.lower()
            self._handlers[key] = handler
            if mutates:
                self._mutating.add(key)
        self._help[name.lower()] = help_text

    def handle(self, state: AppState, line: str) -> str | None:
        """
        Handle a line like "deadline submit report /by 2/12/2019 1800".

        Returns an extra reply string (errors, help, ...) or None when the
        notifier already reported everything.
        """
        parts = line.split()
        if not parts:
            return None

        name = parts[0].lower()
        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: {name}. Use help to list available commands."

        try:
            reply = handler(state, line.strip())
        except TaskError as e:
            logger.info("Command %s rejected: %s", name, e)
            return str(e)

        if name in self._mutating:
            persist_tasks(state)
        return reply

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  {name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def cmd_help(state: AppState, line: str) -> str:
    return registry.build_help()


def cmd_todo(state: AppState, line: str) -> None:
    state.manager.add_task(TaskKind.TODO, split_by_clause(line, "todo"))


def cmd_deadline(state: AppState, line: str) -> None:
    fragments = split_by_clause(line, DEADLINE_CLAUSE, DEADLINE_DESCRIPTION_IDX)
    state.manager.add_task(TaskKind.DEADLINE, fragments)


def cmd_event(state: AppState, line: str) -> None:
    fragments = split_by_clause(line, EVENT_CLAUSE, EVENT_DESCRIPTION_IDX)
    state.manager.add_task(TaskKind.EVENT, fragments)


def cmd_list(state: AppState, line: str) -> None:
    state.manager.list_tasks()


def cmd_done(state: AppState, line: str) -> None:
    state.manager.mark_task_as_done(split_by_clause(line, "done").after)


def cmd_delete(state: AppState, line: str) -> None:
    state.manager.delete_task(split_by_clause(line, "delete").after)


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("todo", cmd_todo, help_text="Add a todo: todo <description>.", mutates=True)
registry.register(
    "deadline",
    cmd_deadline,
    help_text="Add a deadline: deadline <description> /by d/m/yyyy HHMM.",
    mutates=True,
)
registry.register(
    "event",
    cmd_event,
    help_text="Add an event: event <description> /at d/m/yyyy HHMM.",
    mutates=True,
)
registry.register("list", cmd_list, help_text="List tasks in display order.", aliases=["ls"])
registry.register("done", cmd_done, help_text="Mark a task as done: done <number>.", mutates=True)
registry.register(
    "delete", cmd_delete, help_text="Delete a task: delete <number>.", mutates=True
)
