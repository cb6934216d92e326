# tests/test_bootstrap.py

from __future__ import annotations

from taskpad.cli.bootstrap import create_initial_state, load_tasks, save_tasks
from taskpad.tasks.task_models import Task, TaskKind

from .fakes import FakeNotifier


def test_create_initial_state_wires_store(settings) -> None:
    notifier = FakeNotifier()
    state = create_initial_state(settings=settings, notifier=notifier)

    assert settings.data_dir.is_dir()
    assert state.notifier is notifier
    assert state.manager.get_task_size() == 0
    assert state.task_store.count_tasks() == 0


def test_load_seeds_manager_silently_and_skips_bad_rows(settings) -> None:
    notifier = FakeNotifier()
    state = create_initial_state(settings=settings, notifier=notifier)
    state.task_store.save_tasks(
        [
            Task(TaskKind.DEADLINE, "report", "02 Dec 2019, 18:00", done=True),
            Task(TaskKind.EVENT, "broken", "someday"),
            Task(TaskKind.TODO, "read book"),
        ]
    )

    assert load_tasks(state) == 2

    assert notifier.events == []
    assert [str(t) for t in state.manager.get_tasks()] == [
        "[T][ ] read book",
        "[D][X] report (by: 02 Dec 2019, 18:00)",
    ]


def test_save_then_reload_round_trip(settings) -> None:
    first = create_initial_state(settings=settings, notifier=FakeNotifier())
    first.task_store.save_tasks([Task(TaskKind.TODO, "a"), Task(TaskKind.TODO, "b")])
    load_tasks(first)
    first.manager.mark_task_as_done("2")
    save_tasks(first)

    second = create_initial_state(settings=settings, notifier=FakeNotifier())
    load_tasks(second)

    assert second.manager.get_tasks() == first.manager.get_tasks()
    assert second.manager.get_task(1).done is True
