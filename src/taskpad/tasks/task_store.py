# src/taskpad/tasks/task_store.py

from __future__ import annotations

import contextlib
import logging
import sqlite3
from collections.abc import Iterator
from pathlib import Path

from ..errors import NotFoundError, StorageError, ValidationError
from .task_models import Task, now_ms

logger = logging.getLogger(__name__)

# Inserted by seed_if_empty() on a brand-new store.
SAMPLE_TITLES: tuple[str, ...] = (
    "Learn React Native",
    "Write the project report",
)


class TaskStore:
    """
    SQLite task store.

    The schema is intentionally simple and migration-safe:
    - create table if missing
    - use PRAGMA table_info to detect missing columns
    - add columns with ALTER TABLE only when needed

    Connections:
    - each method opens its own SQLite connection and closes it on every exit path
    - sqlite3.Error never leaks; it is re-raised as StorageError

    Missing ids: update_title/toggle_done raise NotFoundError, delete is a no-op.
    """

    def __init__(self, db_path: str | Path = "todos.sqlite3") -> None:
        self._db_path = Path(db_path)
        self._db_path.parent.mkdir(parents=True, exist_ok=True)
        self.ensure_schema()
        logger.info("TaskStore ready db=%s total=%s", self._db_path, self.count_tasks())

    @property
    def db_path(self) -> Path:
        return self._db_path

    def close(self) -> None:
        """Compatibility hook for shutdown (no persistent connections to close)."""
        return

    # ---- low-level helpers ----

    @contextlib.contextmanager
    def _connect(self) -> Iterator[sqlite3.Connection]:
        conn: sqlite3.Connection | None = None
        try:
            conn = sqlite3.connect(str(self._db_path), timeout=30.0)
            conn.row_factory = sqlite3.Row
            self._configure_conn(conn)
            yield conn
        except sqlite3.Error as e:
            if conn is not None:
                with contextlib.suppress(sqlite3.Error):
                    conn.rollback()
            raise StorageError(f"SQLite failure on {self._db_path}: {e}") from e
        finally:
            if conn is not None:
                conn.close()

    @staticmethod
    def _configure_conn(conn: sqlite3.Connection) -> None:
        with contextlib.suppress(sqlite3.Error):
            conn.execute("PRAGMA journal_mode=WAL")

    @staticmethod
    def _clean_title(title: str | None) -> str:
        clean = (title or "").strip()
        if not clean:
            raise ValidationError("Title must not be empty")
        return clean

    @staticmethod
    def _row_to_task(row: sqlite3.Row) -> Task:
        return Task(
            id=int(row["id"]),
            title=str(row["title"] or ""),
            done=bool(row["done"]),
            created_at=int(row["created_at"] or 0),
        )

    # ---- schema ----

    def ensure_schema(self) -> None:
        """Create the todos table if missing; add columns older files lack."""
        with self._connect() as conn:
            cur = conn.cursor()
            cur.execute(
                """
                CREATE TABLE IF NOT EXISTS todos (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    title TEXT NOT NULL,
                    done INTEGER NOT NULL DEFAULT 0,
                    created_at INTEGER NOT NULL DEFAULT 0
                )
                """
            )

            # Migrations (safe): add missing columns.
            cur.execute("PRAGMA table_info(todos)")
            cols = {row["name"] for row in cur.fetchall()}

            def add_col(name: str, decl: str) -> None:
                if name in cols:
                    return
                cur.execute(f"ALTER TABLE todos ADD COLUMN {name} {decl}")
                logger.info("TaskStore migration: added column %s", name)

            add_col("done", "INTEGER NOT NULL DEFAULT 0")
            add_col("created_at", "INTEGER NOT NULL DEFAULT 0")

            conn.commit()

    def seed_if_empty(self) -> int:
        """
        Insert the sample tasks when the table has no rows.

        Returns the number of rows inserted (0 when the table was not empty).
        """
        with self._connect() as conn:
            cur = conn.cursor()
            cur.execute("SELECT COUNT(*) FROM todos")
            (n,) = cur.fetchone()
            if int(n) > 0:
                logger.info("Todos table already has %s rows; skipping seed.", n)
                return 0

            ts = now_ms()
            cur.executemany(
                "INSERT INTO todos (title, done, created_at) VALUES (?, 0, ?)",
                [(title, ts) for title in SAMPLE_TITLES],
            )
            conn.commit()
        logger.info("Seeded %d sample todos.", len(SAMPLE_TITLES))
        return len(SAMPLE_TITLES)

    # ---- public API ----

    def count_tasks(self) -> int:
        with self._connect() as conn:
            (n,) = conn.execute("SELECT COUNT(*) FROM todos").fetchone()
            return int(n)

    def list_all(self) -> list[Task]:
        """All tasks, most recently created first."""
        with self._connect() as conn:
            rows = conn.execute(
                "SELECT id, title, done, created_at FROM todos ORDER BY id DESC"
            ).fetchall()
            return [self._row_to_task(r) for r in rows]

    def list_titles(self) -> list[str]:
        with self._connect() as conn:
            return [str(r["title"] or "") for r in conn.execute("SELECT title FROM todos")]

    def get(self, task_id: int) -> Task | None:
        with self._connect() as conn:
            row = conn.execute(
                "SELECT id, title, done, created_at FROM todos WHERE id = ?",
                (int(task_id),),
            ).fetchone()
            return self._row_to_task(row) if row else None

    def insert(self, title: str, done: bool = False, *, created_at: int | None = None) -> int:
        clean = self._clean_title(title)
        ts = now_ms() if created_at is None else int(created_at)

        with self._connect() as conn:
            cur = conn.execute(
                "INSERT INTO todos (title, done, created_at) VALUES (?, ?, ?)",
                (clean, 1 if done else 0, ts),
            )
            conn.commit()
            rowid = cur.lastrowid
            if rowid is None:
                raise StorageError("SQLite did not return lastrowid for todos insert")
            task_id = int(rowid)

        logger.debug("Task added id=%s done=%s created_at=%s", task_id, done, ts)
        return task_id

    def update_title(self, task_id: int, title: str) -> None:
        clean = self._clean_title(title)

        with self._connect() as conn:
            cur = conn.execute(
                "UPDATE todos SET title = ? WHERE id = ?",
                (clean, int(task_id)),
            )
            conn.commit()
            if cur.rowcount == 0:
                raise NotFoundError(task_id)

        logger.debug("Task %s title updated", task_id)

    def toggle_done(self, task_id: int) -> bool:
        """Flip `done` and return the new state."""
        with self._connect() as conn:
            cur = conn.execute(
                "UPDATE todos SET done = CASE WHEN done THEN 0 ELSE 1 END WHERE id = ?",
                (int(task_id),),
            )
            if cur.rowcount == 0:
                conn.rollback()
                raise NotFoundError(task_id)
            (new_done,) = conn.execute(
                "SELECT done FROM todos WHERE id = ?", (int(task_id),)
            ).fetchone()
            conn.commit()

        logger.debug("Task %s done=%s", task_id, bool(new_done))
        return bool(new_done)

    def delete(self, task_id: int) -> None:
        with self._connect() as conn:
            cur = conn.execute("DELETE FROM todos WHERE id = ?", (int(task_id),))
            conn.commit()
            if cur.rowcount:
                logger.debug("Task %s deleted", task_id)
