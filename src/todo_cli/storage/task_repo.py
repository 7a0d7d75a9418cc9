# src/todo_cli/storage/task_repo.py

from __future__ import annotations

import logging
import time

from ..errors import TaskNotFoundError
from .engine import StorageEngine
from .identifier import resolve_identifier
from .list_repo import ListRepository
from .models import Task, TodoList

logger = logging.getLogger(__name__)


class TaskRepository:
    """
    CRUD over `tasks`, always scoped to a list looked up by name.

    Every public method resolves the list first; an unknown list raises
    ListNotFoundError before the tasks table is touched.

    Identifier policy (see identifier.py):
    - mark_done: text matches only consider pending tasks
    - delete_task: text matches consider done and pending tasks
    """

    def __init__(self, engine: StorageEngine, lists: ListRepository) -> None:
        self._engine = engine
        self._lists = lists

    def _list(self, list_name: str) -> TodoList:
        return self._lists.require(list_name)

    def add_task(self, list_name: str, text: str) -> Task:
        todo_list = self._list(list_name)
        if not text or not text.strip():
            raise ValueError("task text is required")

        now = time.time()
        conn = self._engine.connection
        cur = conn.execute(
            "INSERT INTO tasks(list_id, task, done, created_at) VALUES (?, ?, 0, ?)",
            (todo_list.id, text, now),
        )
        conn.commit()
        rowid = cur.lastrowid
        if rowid is None:
            raise RuntimeError("SQLite did not return lastrowid for tasks insert")
        logger.debug("Task added id=%s list=%r", rowid, list_name)
        return Task(id=int(rowid), list_id=todo_list.id, text=text, done=False, created_at=now)

    def list_tasks(self, list_name: str) -> list[Task]:
        todo_list = self._list(list_name)
        cur = self._engine.connection.execute(
            """
            SELECT id, list_id, task, done, created_at
            FROM tasks
            WHERE list_id = ?
            ORDER BY created_at ASC, id ASC
            """,
            (todo_list.id,),
        )
        return [Task.from_row(r) for r in cur.fetchall()]

    def mark_done(self, list_name: str, identifier: str) -> int:
        todo_list = self._list(list_name)
        selector = resolve_identifier(identifier, todo_list.id, pending_only=True)

        conn = self._engine.connection
        cur = conn.execute(f"UPDATE tasks SET done = 1 WHERE {selector.where}", selector.params)
        conn.commit()
        if cur.rowcount == 0:
            raise TaskNotFoundError(list_name, identifier, pending_only=True)
        logger.debug(
            "Task marked done list=%r identifier=%r by_id=%s changed=%s",
            list_name,
            identifier,
            selector.by_id,
            cur.rowcount,
        )
        return cur.rowcount

    def delete_task(self, list_name: str, identifier: str) -> int:
        todo_list = self._list(list_name)
        selector = resolve_identifier(identifier, todo_list.id, pending_only=False)

        conn = self._engine.connection
        cur = conn.execute(f"DELETE FROM tasks WHERE {selector.where}", selector.params)
        conn.commit()
        if cur.rowcount == 0:
            raise TaskNotFoundError(list_name, identifier)
        logger.debug(
            "Task deleted list=%r identifier=%r by_id=%s changed=%s",
            list_name,
            identifier,
            selector.by_id,
            cur.rowcount,
        )
        return cur.rowcount

    def clear_completed(self, list_name: str) -> int:
        todo_list = self._list(list_name)

        conn = self._engine.connection
        cur = conn.execute("DELETE FROM tasks WHERE list_id = ? AND done = 1", (todo_list.id,))
        conn.commit()
        logger.debug("Completed tasks cleared list=%r deleted=%s", list_name, cur.rowcount)
        return cur.rowcount
