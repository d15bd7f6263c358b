"""Todo repository - SQLite data access layer."""

from __future__ import annotations

import logging
import sqlite3
from contextlib import closing, contextmanager
from pathlib import Path
from typing import Any, Dict, Iterator, List, Union

from ..errors import PersistenceError
from ..models.todo import Todo

logger = logging.getLogger(__name__)

SCHEMA = """
CREATE TABLE IF NOT EXISTS todos (
    id TEXT NOT NULL PRIMARY KEY,
    todo TEXT,
    is_completed BOOLEAN NOT NULL DEFAULT 0
);
"""


def _log_db_error(action: str, details: Dict[str, Any]) -> None:
    summary = {key: type(value).__name__ for key, value in details.items()}
    logger.exception("Database %s failed (types=%s)", action, summary)


def _row_to_todo(row: sqlite3.Row) -> Todo:
    return Todo(
        id=row["id"],
        todo=row["todo"] or "",
        is_completed=bool(row["is_completed"]),
    )


class TodoRepository:
    """Repository for todo rows stored in a SQLite database file.

    Each call opens its own connection, so one instance can be shared by
    requests running on different threads.
    """

    def __init__(self, db_path: Union[str, Path], *, timeout: float = 5.0) -> None:
        self.db_path = Path(db_path)
        self.timeout = timeout

    @contextmanager
    def _connection(self, action: str, **details: Any) -> Iterator[sqlite3.Connection]:
        try:
            with closing(sqlite3.connect(str(self.db_path), timeout=self.timeout)) as conn:
                conn.row_factory = sqlite3.Row
                with conn:
                    yield conn
        except (sqlite3.Error, UnicodeError) as exc:
            _log_db_error(action, details)
            raise PersistenceError(f"Database {action} failed: {exc}") from exc

    def init_schema(self) -> None:
        """Create the todos table if it does not exist yet."""
        try:
            self.db_path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            _log_db_error("init_schema", {"db_path": self.db_path})
            raise PersistenceError(f"Cannot create database directory: {exc}") from exc
        with self._connection("init_schema", db_path=self.db_path) as conn:
            conn.execute(SCHEMA)
        logger.info("Database initialized at %s", self.db_path)

    def ping(self) -> None:
        with self._connection("ping") as conn:
            conn.execute("SELECT 1;").fetchone()

    def exists(self, todo_id: str) -> bool:
        with self._connection("exists", todo_id=todo_id) as conn:
            row = conn.execute(
                "SELECT COUNT(*) FROM todos WHERE id = ?;",
                (todo_id,),
            ).fetchone()
        return row[0] > 0

    def create(self, todo_id: str, text: str) -> Todo:
        with self._connection("create", todo_id=todo_id, todo=text) as conn:
            conn.execute(
                "INSERT INTO todos (id, todo) VALUES (?, ?);",
                (todo_id, text),
            )
        return Todo(id=todo_id, todo=text, is_completed=False)

    def list_all(self) -> List[Todo]:
        with self._connection("list_all") as conn:
            rows = conn.execute(
                "SELECT id, todo, is_completed FROM todos ORDER BY rowid;"
            ).fetchall()
        return [_row_to_todo(row) for row in rows]

    def update_text(self, todo_id: str, text: str) -> None:
        with self._connection("update_text", todo_id=todo_id, todo=text) as conn:
            conn.execute(
                "UPDATE todos SET todo = ? WHERE id = ?;",
                (text, todo_id),
            )

    def mark_completed(self, todo_id: str) -> None:
        with self._connection("mark_completed", todo_id=todo_id) as conn:
            conn.execute(
                "UPDATE todos SET is_completed = 1 WHERE id = ?;",
                (todo_id,),
            )

    def delete(self, todo_id: str) -> None:
        with self._connection("delete", todo_id=todo_id) as conn:
            conn.execute("DELETE FROM todos WHERE id = ?;", (todo_id,))
