# src/taskpad/connectors/console_connector.py

from __future__ import annotations

import logging
from typing import TextIO

from ..cli.commands import registry as command_registry
from ..core.state import AppState
from ..tasks.task_models import Task

logger = logging.getLogger(__name__)

EXIT_WORDS = ("bye", "exit", "quit")

ADD_TASK = "Got it. I've added this task:"
DELETE_TASK = "Noted. I've removed this task:"
DONE_TASK = "Nice! I've marked this task as done: "
LIST_TASK = "Here are your scheduled tasks!"


def _count_line(count: int) -> str:
    noun = "task" if count == 1 else "tasks"
    return f"Now you have {count} {noun} in the list."


class ConsoleNotifier:
    """Notifier that prints task events as plain console lines."""

    def __init__(self, out: TextIO | None = None) -> None:
        self._out = out

    def _print(self, text: str) -> None:
        print(text, file=self._out, flush=True)

    def show_add_task(self, task: Task, count: int) -> None:
        self._print(ADD_TASK)
        self._print(f"  {task}")
        self._print(_count_line(count))

    def show_delete_task(self, task: Task, count: int) -> None:
        self._print(DELETE_TASK)
        self._print(f"  {task}")
        self._print(_count_line(count))

    def show_done_task(self, task: Task) -> None:
        self._print(DONE_TASK)
        self._print(f"  {task}")

    def show_list_header(self) -> None:
        self._print(LIST_TASK)

    def show_list_line(self, position: int, text: str) -> None:
        self._print(f"{position}. {text}")


def run_console_loop(state: AppState) -> None:
    logger.info("Console connector started (tasks=%s).", state.manager.get_task_size())
    app_name = str(getattr(state.settings, "app_name", "taskpad"))
    print(f"Hello from {app_name}! Type help for commands, bye to quit.\n")

    while True:
        try:
            user_input = input("> ").strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if not user_input:
            continue

        if user_input.lower() in EXIT_WORDS:
            logger.info("Console exit command received.")
            print("Bye. Hope to see you again soon!")
            break

        try:
            reply = command_registry.handle(state, user_input)
        except Exception:
            logger.exception("Command handler crashed.")
            reply = "Internal error while handling a command."

        if reply is not None:
            print(reply)

    logger.info("Console connector finished.")
