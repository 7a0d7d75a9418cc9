# src/todo_cli/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- The database lives at a fixed path next to the installation unless overridden.
- Nothing here opens the database; the composition root does that.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TODO"

# src/todo_cli/config.py -> project root
PROJECT_ROOT = Path(__file__).resolve().parents[2]
DEFAULT_DB_PATH = PROJECT_ROOT / "database" / "todos.db"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


load_dotenv(override=False)


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    log_dir: Path
    file_logging: bool

    # ---- Storage ----
    db_path: Path

    # ---- CLI behaviour ----
    confirm_destructive: bool

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "todo-cli").strip() or "todo-cli"
        log_level = _env(_k("LOG_LEVEL"), "WARNING").strip() or "WARNING"

        db_path = _env_path(_k("DB_PATH"), DEFAULT_DB_PATH)
        # Logs sit next to the database unless told otherwise.
        log_dir = _env_path(_k("LOG_DIR"), db_path.parent)
        file_logging = _env_bool(_k("FILE_LOGGING"), True)

        confirm_destructive = _env_bool(_k("CONFIRM"), True)

        return Settings(
            app_name=app_name,
            log_level=log_level,
            log_dir=log_dir,
            file_logging=file_logging,
            db_path=db_path,
            confirm_destructive=confirm_destructive,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
