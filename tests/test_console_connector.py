# tests/test_console_connector.py

from __future__ import annotations

import io

import pytest

from taskpad.connectors.console_connector import ConsoleNotifier, run_console_loop
from taskpad.tasks.task_models import Task, TaskKind


def test_console_notifier_messages() -> None:
    out = io.StringIO()
    n = ConsoleNotifier(out)
    task = Task(TaskKind.TODO, "read book")

    n.show_add_task(task, 1)
    n.show_done_task(task)
    n.show_list_header()
    n.show_list_line(1, str(task))
    n.show_delete_task(task, 0)

    assert out.getvalue().splitlines() == [
        "Got it. I've added this task:",
        "  [T][ ] read book",
        "Now you have 1 task in the list.",
        "Nice! I've marked this task as done: ",
        "  [T][ ] read book",
        "Here are your scheduled tasks!",
        "1. [T][ ] read book",
        "Noted. I've removed this task:",
        "  [T][ ] read book",
        "Now you have 0 tasks in the list.",
    ]


def test_console_loop_runs_commands_until_bye(state, monkeypatch: pytest.MonkeyPatch, capsys) -> None:
    lines = iter(["todo read book", "", "bogus", "bye", "todo never"])
    monkeypatch.setattr("builtins.input", lambda _prompt="": next(lines))

    run_console_loop(state)

    out = capsys.readouterr().out
    assert "Unknown command: bogus" in out
    assert "Bye." in out
    assert [t.description for t in state.manager.get_tasks()] == ["read book"]


def test_console_loop_exits_on_eof(state, monkeypatch: pytest.MonkeyPatch) -> None:
    def _eof(_prompt=""):
        raise EOFError

    monkeypatch.setattr("builtins.input", _eof)
    run_console_loop(state)
    assert state.manager.get_task_size() == 0
