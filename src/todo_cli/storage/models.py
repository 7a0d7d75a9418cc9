# src/todo_cli/storage/models.py

from __future__ import annotations

import sqlite3
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class TodoList:
    id: int
    name: str
    created_at: float

    @classmethod
    def from_row(cls, row: sqlite3.Row) -> TodoList:
        return cls(
            id=int(row["id"]),
            name=str(row["name"]),
            created_at=float(row["created_at"] or 0.0),
        )


@dataclass(frozen=True, slots=True)
class Task:
    id: int
    list_id: int
    text: str
    done: bool
    created_at: float

    @classmethod
    def from_row(cls, row: sqlite3.Row) -> Task:
        return cls(
            id=int(row["id"]),
            list_id=int(row["list_id"]),
            text=str(row["task"]),
            done=bool(row["done"]),
            created_at=float(row["created_at"] or 0.0),
        )
