# tests/test_task_store.py

from __future__ import annotations

import sqlite3
from pathlib import Path

from taskpad.tasks.task_models import Task, TaskKind
from taskpad.tasks.task_store import TaskStore


def test_save_and_load_preserves_order_and_fields(tmp_path: Path) -> None:
    store = TaskStore(tmp_path / "tasks.sqlite3")
    tasks = [
        Task(TaskKind.TODO, "read book", done=True),
        Task(TaskKind.EVENT, "party", "01 Dec 2019, 20:00"),
        Task(TaskKind.DEADLINE, "report", "02 Dec 2019, 18:00"),
    ]

    store.save_tasks(tasks)

    assert store.count_tasks() == 3
    assert store.load_tasks() == tasks


def test_save_replaces_previous_snapshot(tmp_path: Path) -> None:
    store = TaskStore(tmp_path / "tasks.sqlite3")
    store.save_tasks([Task(TaskKind.TODO, "a"), Task(TaskKind.TODO, "b")])
    store.save_tasks([Task(TaskKind.TODO, "c")])

    assert [t.description for t in store.load_tasks()] == ["c"]


def test_unknown_kind_rows_are_skipped(tmp_path: Path) -> None:
    db = tmp_path / "tasks.sqlite3"
    store = TaskStore(db)
    store.save_tasks([Task(TaskKind.TODO, "keep")])

    conn = sqlite3.connect(db)
    conn.execute(
        "INSERT INTO tasks(position, kind, description, date, done) VALUES (2, 'reminder', 'x', NULL, 0)"
    )
    conn.commit()
    conn.close()

    assert [t.description for t in store.load_tasks()] == ["keep"]


def test_migrates_old_schema(tmp_path: Path) -> None:
    db = tmp_path / "tasks.sqlite3"
    conn = sqlite3.connect(db)
    conn.execute(
        "CREATE TABLE tasks (id INTEGER PRIMARY KEY AUTOINCREMENT, kind TEXT NOT NULL, description TEXT NOT NULL)"
    )
    conn.execute("INSERT INTO tasks(kind, description) VALUES ('todo', 'old')")
    conn.commit()
    conn.close()

    store = TaskStore(db)

    assert store.load_tasks() == [Task(TaskKind.TODO, "old")]
