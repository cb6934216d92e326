# src/taskpad/tasks/task_store.py

from __future__ import annotations

import contextlib
import logging
import sqlite3
from collections.abc import Iterable
from pathlib import Path

from .task_models import Task, TaskKind

logger = logging.getLogger(__name__)


class TaskStore:
    """
    SQLite snapshot of the ordered task list.

    The list is small and always saved whole: save_tasks() rewrites every row
    inside one transaction, load_tasks() returns rows in saved position order.

    The schema is migration-safe:
    - create table if missing
    - use PRAGMA table_info to detect missing columns
    - add columns with ALTER TABLE only when needed

    Each method opens its own SQLite connection.
    """

    def __init__(self, db_path: str | Path = "tasks.sqlite3") -> None:
        self._db_path = Path(db_path)
        self._db_path.parent.mkdir(parents=True, exist_ok=True)
        self._ensure_schema()
        logger.info("TaskStore ready db=%s total=%s", self._db_path, self.count_tasks())

    # ---- low-level helpers ----

    def _get_conn(self) -> sqlite3.Connection:
        conn = sqlite3.connect(str(self._db_path), timeout=30.0)
        conn.row_factory = sqlite3.Row
        with contextlib.suppress(sqlite3.DatabaseError):
            conn.execute("PRAGMA journal_mode=WAL")
        return conn

    def _ensure_schema(self) -> None:
        conn = self._get_conn()
        try:
            cur = conn.cursor()
            cur.execute(
                """
                CREATE TABLE IF NOT EXISTS tasks (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    position INTEGER NOT NULL,
                    kind TEXT NOT NULL,
                    description TEXT NOT NULL,
                    date TEXT,
                    done INTEGER NOT NULL DEFAULT 0
                )
                """
            )

            cur.execute("PRAGMA table_info(tasks)")
            cols = {row["name"] for row in cur.fetchall()}

            def add_col(name: str, decl: str) -> None:
                if name in cols:
                    return
                cur.execute(f"ALTER TABLE tasks ADD COLUMN {name} {decl}")
                logger.info("TaskStore migration: added column %s", name)

            add_col("position", "INTEGER NOT NULL DEFAULT 0")
            add_col("date", "TEXT")
            add_col("done", "INTEGER NOT NULL DEFAULT 0")

            cur.execute("CREATE INDEX IF NOT EXISTS idx_tasks_position ON tasks(position)")
            conn.commit()
        finally:
            conn.close()

    # ---- public API ----

    def count_tasks(self) -> int:
        conn = self._get_conn()
        try:
            (n,) = conn.execute("SELECT COUNT(*) FROM tasks").fetchone()
            return int(n)
        finally:
            conn.close()

    def load_tasks(self) -> list[Task]:
        conn = self._get_conn()
        try:
            rows = conn.execute("SELECT * FROM tasks ORDER BY position ASC, id ASC").fetchall()
        finally:
            conn.close()

        out: list[Task] = []
        for row in rows:
            kind = TaskKind.from_db(row["kind"])
            if kind is None:
                logger.warning("Skipping stored task id=%s with unknown kind=%r", row["id"], row["kind"])
                continue
            out.append(
                Task(
                    kind=kind,
                    description=str(row["description"] or ""),
                    date=row["date"],
                    done=bool(row["done"]),
                )
            )
        return out

    def save_tasks(self, tasks: Iterable[Task]) -> None:
        rows = [
            (pos, t.kind.value, t.description, t.date, int(t.done))
            for pos, t in enumerate(tasks, start=1)
        ]
        conn = self._get_conn()
        try:
            with conn:
                conn.execute("DELETE FROM tasks")
                conn.executemany(
                    "INSERT INTO tasks(position, kind, description, date, done) VALUES (?, ?, ?, ?, ?)",
                    rows,
                )
            logger.debug("TaskStore saved %s tasks", len(rows))
        finally:
            conn.close()
