# tests/test_storage_engine.py

from __future__ import annotations

import sqlite3
from pathlib import Path

import pytest

from todo_cli.errors import StorageError, StorageInitError, StorageShutdownError
from todo_cli.storage.engine import StorageEngine
from todo_cli.storage.list_repo import ListRepository


def test_initialize_creates_directory_and_schema(tmp_path: Path) -> None:
    db = tmp_path / "nested" / "dir" / "todos.db"
    engine = StorageEngine(db)
    engine.initialize()
    try:
        assert db.exists()
        names = {
            row["name"]
            for row in engine.connection.execute("SELECT name FROM sqlite_master WHERE type = 'table'")
        }
        assert {"lists", "tasks"} <= names
        (fk,) = engine.connection.execute("PRAGMA foreign_keys").fetchone()
        assert fk == 1
    finally:
        engine.shutdown()


def test_initialize_is_idempotent_and_keeps_data(tmp_path: Path) -> None:
    db = tmp_path / "todos.db"

    with StorageEngine(db) as first:
        first.initialize()  # already open: no-op
        ListRepository(first).create("work")

    with StorageEngine(db) as second:
        found = ListRepository(second).find_by_name("work")
        assert found is not None
        assert found.name == "work"


def test_initialize_on_corrupted_file_raises_storage_init_error(tmp_path: Path) -> None:
    db = tmp_path / "todos.db"
    db.write_bytes(b"this is definitely not a sqlite database" * 64)

    engine = StorageEngine(db)
    with pytest.raises(StorageInitError) as info:
        engine.initialize()

    assert isinstance(info.value.__cause__, sqlite3.Error)
    assert not engine.is_open


def test_initialize_when_path_is_a_directory_raises(tmp_path: Path) -> None:
    db = tmp_path / "todos.db"
    db.mkdir()

    with pytest.raises(StorageInitError):
        StorageEngine(db).initialize()


def test_connection_after_shutdown_is_refused(tmp_path: Path) -> None:
    engine = StorageEngine(tmp_path / "todos.db")
    engine.initialize()
    engine.shutdown()

    assert not engine.is_open
    with pytest.raises(StorageError):
        _ = engine.connection

    # Nothing left to close.
    engine.shutdown()


class _FailingConnection:
    def close(self) -> None:
        raise sqlite3.OperationalError("disk I/O error")


def test_shutdown_failure_raises_storage_shutdown_error(tmp_path: Path) -> None:
    engine = StorageEngine(tmp_path / "todos.db")
    engine.initialize()
    real = engine.connection
    engine._conn = _FailingConnection()  # type: ignore[assignment]

    try:
        with pytest.raises(StorageShutdownError):
            engine.shutdown()
        assert not engine.is_open
    finally:
        real.close()


def test_interrupt_during_initialize_closes_half_open_connection(tmp_path: Path, monkeypatch) -> None:
    opened: list[sqlite3.Connection] = []
    real_connect = sqlite3.connect

    def _tracking_connect(*args, **kwargs):
        conn = real_connect(*args, **kwargs)
        opened.append(conn)
        return conn

    def _interrupted(conn) -> None:
        raise KeyboardInterrupt

    monkeypatch.setattr(sqlite3, "connect", _tracking_connect)
    monkeypatch.setattr(StorageEngine, "_configure_conn", staticmethod(_interrupted))

    engine = StorageEngine(tmp_path / "todos.db")
    with pytest.raises(KeyboardInterrupt):
        engine.initialize()

    assert not engine.is_open
    assert len(opened) == 1
    with pytest.raises(sqlite3.ProgrammingError):
        opened[0].execute("SELECT 1")
