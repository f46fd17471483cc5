# src/taskman/tasks/task_store.py

from __future__ import annotations

import logging
import sqlite3
from datetime import datetime, timezone
from pathlib import Path

from .errors import NotFound, ReadFailed, StorageUnavailable, WriteFailed
from .task_models import Task

logger = logging.getLogger(__name__)

DEFAULT_DIR_NAME = ".taskman"
DEFAULT_DB_NAME = "tasks.db"

# SQLite rowids are signed 64-bit integers.
MIN_ROWID = -(2**63)
MAX_ROWID = 2**63 - 1


def _in_rowid_range(task_id: int) -> bool:
    return MIN_ROWID <= int(task_id) <= MAX_ROWID


def default_db_path() -> Path:
    """Return ~/.taskman/tasks.db, or raise StorageUnavailable if there is no home."""
    try:
        home = Path.home()
    except (RuntimeError, KeyError) as exc:
        raise StorageUnavailable(f"failed to get home directory: {exc}") from exc
    return home / DEFAULT_DIR_NAME / DEFAULT_DB_NAME


class TaskStore:
    """
    SQLite task store.

    One connection per handle:
    - open() creates the directory/file, checks the connection and creates the table
    - close() releases the connection (safe to call when nothing is open)

    Every public operation is a single statement committed on its own, so a
    failure leaves nothing persisted.
    """

    def __init__(self, db_path: str | Path | None = None) -> None:
        self._db_path = Path(db_path).expanduser() if db_path is not None else None
        self._conn: sqlite3.Connection | None = None

    @property
    def db_path(self) -> Path | None:
        return self._db_path

    @property
    def is_open(self) -> bool:
        return self._conn is not None

    def __enter__(self) -> TaskStore:
        self.open()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # ---- lifecycle ----

    def open(self) -> None:
        if self._conn is not None:
            return

        if self._db_path is None:
            self._db_path = default_db_path()

        try:
            self._db_path.parent.mkdir(mode=0o700, parents=True, exist_ok=True)
        except OSError as exc:
            raise StorageUnavailable(
                f"failed to create directory {self._db_path.parent}: {exc}"
            ) from exc

        try:
            conn = sqlite3.connect(str(self._db_path), timeout=30.0)
        except sqlite3.Error as exc:
            raise StorageUnavailable(f"failed to open database {self._db_path}: {exc}") from exc

        try:
            conn.row_factory = sqlite3.Row
            conn.execute("SELECT 1").fetchone()
        except sqlite3.Error as exc:
            conn.close()
            raise StorageUnavailable(f"failed to ping database {self._db_path}: {exc}") from exc

        try:
            self._ensure_schema(conn)
        except sqlite3.Error as exc:
            conn.close()
            raise StorageUnavailable(f"failed to create tasks table: {exc}") from exc

        self._conn = conn
        if logger.isEnabledFor(logging.INFO):
            try:
                total = self.count_tasks()
            except ReadFailed:
                total = -1
            logger.info("TaskStore ready db=%s total=%s", self._db_path, total)

    def close(self) -> None:
        if self._conn is None:
            return
        conn, self._conn = self._conn, None
        conn.close()
        logger.debug("TaskStore closed db=%s", self._db_path)

    # ---- low-level helpers ----

    def _get_conn(self) -> sqlite3.Connection:
        if self._conn is None:
            raise StorageUnavailable("task store is not open")
        return self._conn

    @staticmethod
    def _ensure_schema(conn: sqlite3.Connection) -> None:
        conn.execute(
            """
            CREATE TABLE IF NOT EXISTS tasks (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                title TEXT NOT NULL,
                description TEXT,
                completed BOOLEAN NOT NULL DEFAULT 0,
                created_at DATETIME NOT NULL
            )
            """
        )
        conn.commit()

    @staticmethod
    def _row_to_task(row: sqlite3.Row) -> Task:
        created_at = datetime.fromisoformat(str(row["created_at"]))
        if created_at.tzinfo is None:
            created_at = created_at.replace(tzinfo=timezone.utc)
        return Task(
            id=int(row["id"]),
            title=str(row["title"]),
            description=str(row["description"] or ""),
            completed=bool(row["completed"]),
            created_at=created_at,
        )

    def _execute_write(self, sql: str, params: tuple[object, ...]) -> sqlite3.Cursor:
        conn = self._get_conn()
        try:
            cur = conn.execute(sql, params)
            conn.commit()
        except (sqlite3.Error, UnicodeError) as exc:
            conn.rollback()
            raise WriteFailed(str(exc)) from exc
        return cur

    # ---- public API ----

    def count_tasks(self) -> int:
        conn = self._get_conn()
        try:
            (n,) = conn.execute("SELECT COUNT(*) FROM tasks").fetchone()
        except sqlite3.Error as exc:
            raise ReadFailed(f"failed to count tasks: {exc}") from exc
        return int(n)

    def add_task(self, title: str, description: str = "") -> Task:
        created_at = datetime.now(timezone.utc)
        cur = self._execute_write(
            "INSERT INTO tasks (title, description, completed, created_at) VALUES (?, ?, 0, ?)",
            (title, description, created_at.isoformat()),
        )
        rowid = cur.lastrowid
        if rowid is None:
            raise WriteFailed("SQLite did not return lastrowid for tasks insert")

        task = Task(
            id=int(rowid),
            title=title,
            description=description,
            completed=False,
            created_at=created_at,
        )
        logger.debug("Task added id=%s title=%r", task.id, title)
        return task

    def list_tasks(self) -> list[Task]:
        """Return every task, most recently created first."""
        conn = self._get_conn()
        try:
            cur = conn.execute(
                """
                SELECT id, title, description, completed, created_at
                FROM tasks
                ORDER BY created_at DESC, id DESC
                """
            )
            return [self._row_to_task(r) for r in cur.fetchall()]
        except (sqlite3.Error, ValueError) as exc:
            raise ReadFailed(f"failed to list tasks: {exc}") from exc

    def complete_task(self, task_id: int) -> None:
        """Mark a task completed. Completing a completed task succeeds."""
        if not _in_rowid_range(task_id):
            raise NotFound(task_id)
        cur = self._execute_write(
            "UPDATE tasks SET completed = 1 WHERE id = ?",
            (int(task_id),),
        )
        if cur.rowcount == 0:
            raise NotFound(task_id)
        logger.debug("Task completed id=%s", task_id)

    def delete_task(self, task_id: int) -> None:
        if not _in_rowid_range(task_id):
            raise NotFound(task_id)
        cur = self._execute_write("DELETE FROM tasks WHERE id = ?", (int(task_id),))
        if cur.rowcount == 0:
            raise NotFound(task_id)
        logger.debug("Task deleted id=%s", task_id)
