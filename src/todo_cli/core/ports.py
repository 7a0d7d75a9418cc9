# src/todo_cli/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the presentation layer.

Command handlers depend on these Protocols instead of the SQLite repositories,
so they can be exercised with any store that honours the same contracts.
"""

from typing import Protocol

from ..storage.models import Task, TodoList


class ListRepo(Protocol):
    def create(self, name: str) -> TodoList: ...
    def find_by_name(self, name: str) -> TodoList | None: ...
    def delete(self, name: str) -> TodoList: ...


class TaskRepo(Protocol):
    def add_task(self, list_name: str, text: str) -> Task: ...
    def list_tasks(self, list_name: str) -> list[Task]: ...

    # Identifier is "#NN" or the literal task text.
    def mark_done(self, list_name: str, identifier: str) -> int: ...
    def delete_task(self, list_name: str, identifier: str) -> int: ...

    def clear_completed(self, list_name: str) -> int: ...
