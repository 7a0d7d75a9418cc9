# src/todo_cli/cli/main.py

"""
CLI entrypoint.

One invocation = one action:
- parse arguments,
- open the store (composition root in bootstrap.py),
- run the selected command and print its result,
- release the store exactly once, also when SIGINT/SIGTERM arrives.
"""

from __future__ import annotations

import argparse
import logging
import signal
import sqlite3
import sys
from collections.abc import Sequence

from ..cli.bootstrap import create_initial_state, shutdown_state
from ..config import get_settings
from ..errors import DomainError, StorageError, StorageShutdownError
from ..logging_setup import setup_logging
from .commands import (
    EXIT_FAILURE,
    EXIT_INTERRUPTED,
    EXIT_OK,
    EXIT_STORAGE,
    EXIT_USAGE,
    UsageError,
    exit_code_for,
    friendly_error_message,
    run_command,
    selected_commands,
)

logger = logging.getLogger(__name__)

VERSION = "1.0.0"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="todo",
        description="CLI Todo List Manager with SQLite",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    parser.add_argument("-c", "--create", metavar="LIST_NAME", help="Create a new todo list")
    parser.add_argument("-l", "--list", metavar="LIST_NAME", help="Specify which list to work with")
    parser.add_argument("-a", "--add", metavar="TASK", help="Add a task to the list")
    parser.add_argument("-s", "--show", action="store_true", help="Show all tasks in the list")
    parser.add_argument("-d", "--done", metavar="TASK", help="Mark task as done (by name or #id)")
    parser.add_argument("--delete", metavar="TASK", help="Delete a task (by name or #id)")
    parser.add_argument(
        "--clearAll",
        "--clear-all",
        dest="clear_all",
        action="store_true",
        help="Clear all completed tasks",
    )
    parser.add_argument(
        "--deleteList",
        "--delete-list",
        dest="delete_list",
        action="store_true",
        help="Delete entire list",
    )
    parser.add_argument(
        "-y",
        "--yes",
        action="store_true",
        help="Do not ask for confirmation before destructive actions",
    )
    return parser


def _raise_interrupt(signum, _frame) -> None:
    logger.info("Signal %s received, shutting down...", signum)
    raise KeyboardInterrupt


def _install_signal_handlers() -> dict[int, object]:
    previous: dict[int, object] = {}
    for sig in (signal.SIGINT, signal.SIGTERM):
        try:
            previous[sig] = signal.signal(sig, _raise_interrupt)
        except (ValueError, OSError):
            # Not the main thread, or the platform lacks this signal.
            logger.debug("Cannot install handler for signal %s", sig)
    return previous


def _restore_signal_handlers(previous: dict[int, object]) -> None:
    for sig, handler in previous.items():
        try:
            signal.signal(sig, handler)
        except (ValueError, OSError, TypeError):
            logger.debug("Cannot restore handler for signal %s", sig)


def _ignore_signals() -> None:
    for sig in (signal.SIGINT, signal.SIGTERM):
        try:
            signal.signal(sig, signal.SIG_IGN)
        except (ValueError, OSError):
            logger.debug("Cannot ignore signal %s", sig)


def main(argv: Sequence[str] | None = None, *, settings=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    selected = selected_commands(args)
    if not selected:
        parser.print_help()
        return EXIT_OK
    if len(selected) > 1:
        parser.print_usage(sys.stderr)
        print(f"{parser.prog}: error: only one action per invocation", file=sys.stderr)
        return EXIT_USAGE

    if settings is None:
        settings = get_settings()
    logger.info("Starting %s...", getattr(settings, "app_name", "todo-cli"))

    previous_handlers = _install_signal_handlers()
    state = None
    code = EXIT_OK
    try:
        state = create_initial_state(settings=settings)
        print(run_command(state, args))
    except KeyboardInterrupt:
        print("Interrupted.", file=sys.stderr)
        code = EXIT_INTERRUPTED
    except (DomainError, UsageError, ValueError) as exc:
        logger.debug("Command rejected: %s", exc)
        print(friendly_error_message(exc), file=sys.stderr)
        code = exit_code_for(exc)
    except (StorageError, sqlite3.Error) as exc:
        logger.error("Storage failure: %s", exc)
        print(f"Error: {friendly_error_message(exc)}", file=sys.stderr)
        code = exit_code_for(exc)
    except Exception as exc:
        logger.exception("Unexpected failure")
        print(f"Error: {friendly_error_message(exc)}", file=sys.stderr)
        code = EXIT_FAILURE
    finally:
        # A second Ctrl+C must not cut the close short.
        _ignore_signals()
        try:
            if state is not None:
                shutdown_state(state)
        except StorageShutdownError as exc:
            logger.error("Failed to close the store: %s", exc)
            print(f"Error: {friendly_error_message(exc)}", file=sys.stderr)
            if code == EXIT_OK:
                code = EXIT_STORAGE
        finally:
            _restore_signal_handlers(previous_handlers)

    return code


def run() -> None:
    """Console-script entry: configure logging from settings, then exit with main()'s code."""
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "WARNING")).upper()
    console_level = getattr(logging, level_name, logging.WARNING)
    setup_logging(
        log_dir=getattr(settings, "log_dir", None),
        console_level=console_level,
        file_logging=bool(getattr(settings, "file_logging", True)),
    )

    sys.exit(main(settings=settings))


if __name__ == "__main__":
    run()
