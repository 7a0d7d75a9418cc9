# src/todo_cli/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- takes the settings object once,
- constructs and initializes the StorageEngine explicitly (no module-level connection),
- wires the repositories around that engine into AppState,
- releases the engine exactly once on the way out.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState
from ..errors import StorageShutdownError
from ..storage.engine import StorageEngine
from ..storage.list_repo import ListRepository
from ..storage.task_repo import TaskRepository

logger = logging.getLogger(__name__)


def create_initial_state(*, settings=None) -> AppState:
    """
    Open the store described by `settings` and build AppState around it.

    Keeping settings injectable lets tests point at a temporary database.
    If settings is None, falls back to get_settings().
    Raises StorageInitError if the database cannot be opened or created.
    """
    if settings is None:
        settings = get_settings()

    engine = StorageEngine(settings.db_path)
    try:
        engine.initialize()

        lists = ListRepository(engine)
        return AppState(
            settings=settings,
            engine=engine,
            lists=lists,
            tasks=TaskRepository(engine, lists),
        )
    except BaseException:
        # The caller never sees this engine, so it must not stay open (e.g. SIGINT while opening).
        try:
            engine.shutdown()
        except StorageShutdownError:
            logger.debug("Close after failed bootstrap also failed db=%s", settings.db_path, exc_info=True)
        raise


def shutdown_state(state: AppState) -> None:
    """Release the store. Raises StorageShutdownError if the close fails."""
    if not state.engine.is_open:
        return
    logger.debug("Shutting down store db=%s", state.engine.db_path)
    state.engine.shutdown()
