# tests/conftest.py

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path
from types import SimpleNamespace

import pytest

from todo_cli.storage.engine import StorageEngine
from todo_cli.storage.list_repo import ListRepository
from todo_cli.storage.task_repo import TaskRepository


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with bootstrap and the CLI.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests away from the real database file.
    """
    return SimpleNamespace(
        app_name="todo-test",
        log_level="DEBUG",
        log_dir=tmp_path / "logs",
        file_logging=False,
        db_path=tmp_path / "db" / "todos.db",
        confirm_destructive=True,
    )


@pytest.fixture()
def engine(settings: SimpleNamespace) -> Iterator[StorageEngine]:
    eng = StorageEngine(settings.db_path)
    eng.initialize()
    yield eng
    eng.shutdown()


@pytest.fixture()
def lists(engine: StorageEngine) -> ListRepository:
    return ListRepository(engine)


@pytest.fixture()
def tasks(engine: StorageEngine, lists: ListRepository) -> TaskRepository:
    return TaskRepository(engine, lists)
