# src/todo_cli/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..storage.engine import StorageEngine
from .ports import ListRepo, TaskRepo


@dataclass
class AppState:
    # Store Settings on the state for easy access in command handlers.
    settings: object

    engine: StorageEngine
    lists: ListRepo
    tasks: TaskRepo
