# src/todo_cli/storage/engine.py

from __future__ import annotations

import contextlib
import logging
import sqlite3
from pathlib import Path

from ..errors import StorageError, StorageInitError, StorageShutdownError

logger = logging.getLogger(__name__)

_SCHEMA = (
    """
    CREATE TABLE IF NOT EXISTS lists (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        name TEXT UNIQUE NOT NULL,
        created_at REAL NOT NULL
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS tasks (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        list_id INTEGER NOT NULL,
        task TEXT NOT NULL,
        done INTEGER NOT NULL DEFAULT 0,
        created_at REAL NOT NULL,
        FOREIGN KEY (list_id) REFERENCES lists (id) ON DELETE CASCADE
    )
    """,
    "CREATE INDEX IF NOT EXISTS idx_tasks_list_created ON tasks(list_id, created_at)",
)


class StorageEngine:
    """
    SQLite storage engine.

    Owns the database file and ONE connection for the lifetime of the process:
    - initialize() creates the directory, opens the connection and the schema (idempotent)
    - shutdown() closes it; afterwards `connection` refuses to hand it out

    Not thread-safe: one command runs its statements sequentially on this connection.
    """

    def __init__(self, db_path: str | Path) -> None:
        self._db_path = Path(db_path)
        self._conn: sqlite3.Connection | None = None

    def __enter__(self) -> StorageEngine:
        self.initialize()
        return self

    def __exit__(self, *exc_info) -> None:
        self.shutdown()

    @property
    def db_path(self) -> Path:
        return self._db_path

    @property
    def is_open(self) -> bool:
        return self._conn is not None

    @property
    def connection(self) -> sqlite3.Connection:
        if self._conn is None:
            raise StorageError(f"Storage is not open: {self._db_path}")
        return self._conn

    # ---- lifecycle ----

    def initialize(self) -> None:
        if self._conn is not None:
            return

        conn: sqlite3.Connection | None = None
        try:
            self._db_path.parent.mkdir(parents=True, exist_ok=True)
            conn = sqlite3.connect(str(self._db_path))
            conn.row_factory = sqlite3.Row
            self._configure_conn(conn)
            cur = conn.cursor()
            for stmt in _SCHEMA:
                cur.execute(stmt)
            conn.commit()
        except (OSError, sqlite3.Error) as exc:
            if conn is not None:
                with contextlib.suppress(sqlite3.Error):
                    conn.close()
            raise StorageInitError(f"Cannot initialize storage at {self._db_path}: {exc}") from exc
        except BaseException:
            # Interrupted mid-open: never leave a half-open handle behind.
            if conn is not None:
                with contextlib.suppress(sqlite3.Error):
                    conn.close()
            raise

        self._conn = conn
        try:
            lists, tasks = self._counts()
        except sqlite3.Error:
            lists, tasks = -1, -1
        logger.info("Storage ready db=%s lists=%s tasks=%s", self._db_path, lists, tasks)

    def shutdown(self) -> None:
        conn, self._conn = self._conn, None
        if conn is None:
            logger.debug("Storage shutdown requested but nothing is open db=%s", self._db_path)
            return
        try:
            conn.close()
        except sqlite3.Error as exc:
            raise StorageShutdownError(f"Cannot close storage at {self._db_path}: {exc}") from exc
        logger.info("Storage closed db=%s", self._db_path)

    # ---- low-level helpers ----

    @staticmethod
    def _configure_conn(conn: sqlite3.Connection) -> None:
        # Cascade deletes only happen with foreign keys on (off by default in SQLite).
        conn.execute("PRAGMA foreign_keys = ON")
        with contextlib.suppress(sqlite3.Error):
            conn.execute("PRAGMA journal_mode=WAL")

    def _counts(self) -> tuple[int, int]:
        cur = self.connection.cursor()
        cur.execute("SELECT COUNT(*) FROM lists")
        (n_lists,) = cur.fetchone()
        cur.execute("SELECT COUNT(*) FROM tasks")
        (n_tasks,) = cur.fetchone()
        return int(n_lists), int(n_tasks)
