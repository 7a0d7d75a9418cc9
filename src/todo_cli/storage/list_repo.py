# src/todo_cli/storage/list_repo.py

from __future__ import annotations

import logging
import sqlite3
import time

from ..errors import DuplicateListError, ListNotFoundError
from .engine import StorageEngine
from .models import TodoList

logger = logging.getLogger(__name__)


class ListRepository:
    """CRUD over `lists`. Names are unique; deleting a list cascades to its tasks."""

    def __init__(self, engine: StorageEngine) -> None:
        self._engine = engine

    def create(self, name: str) -> TodoList:
        if not name or not name.strip():
            raise ValueError("list name is required")

        now = time.time()
        conn = self._engine.connection
        try:
            cur = conn.execute(
                "INSERT INTO lists(name, created_at) VALUES (?, ?)",
                (name, now),
            )
            conn.commit()
        except sqlite3.IntegrityError as exc:
            conn.rollback()
            if "UNIQUE" in str(exc).upper():
                raise DuplicateListError(name) from exc
            raise

        rowid = cur.lastrowid
        if rowid is None:
            raise RuntimeError("SQLite did not return lastrowid for lists insert")
        logger.debug("List created id=%s name=%r", rowid, name)
        return TodoList(id=int(rowid), name=name, created_at=now)

    def find_by_name(self, name: str) -> TodoList | None:
        cur = self._engine.connection.execute(
            "SELECT id, name, created_at FROM lists WHERE name = ?",
            (name,),
        )
        row = cur.fetchone()
        return TodoList.from_row(row) if row else None

    def require(self, name: str) -> TodoList:
        todo_list = self.find_by_name(name)
        if todo_list is None:
            raise ListNotFoundError(name)
        return todo_list

    def delete(self, name: str) -> TodoList:
        todo_list = self.require(name)

        conn = self._engine.connection
        cur = conn.execute("DELETE FROM lists WHERE id = ?", (todo_list.id,))
        conn.commit()
        if cur.rowcount == 0:
            raise ListNotFoundError(name)
        logger.debug("List deleted id=%s name=%r", todo_list.id, name)
        return todo_list
