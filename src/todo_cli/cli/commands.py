# src/todo_cli/cli/commands.py

from __future__ import annotations

import argparse
import logging
import sqlite3
from collections.abc import Callable

from ..core.state import AppState
from ..errors import DomainError, ListNotFoundError, StorageError
from ..storage.identifier import format_task_id
from ..storage.models import Task

CommandHandler = Callable[[AppState, argparse.Namespace], str]

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2
EXIT_STORAGE = 3
EXIT_INTERRUPTED = 130

DONE_MARK = "✓"


class UsageError(Exception):
    """The arguments parsed but do not describe a runnable command."""


def ask_confirmation(prompt: str) -> bool:
    try:
        answer = input(f"{prompt} [y/N] ")
    except EOFError:
        return False
    return answer.strip().lower() in {"y", "yes"}


def render_task(task: Task) -> str:
    mark = DONE_MARK if task.done else " "
    return f"  {format_task_id(task.id)} [{mark}] {task.text}"


def friendly_error_message(err: BaseException) -> str:
    if isinstance(err, ListNotFoundError):
        return f"{err}. Create it first with --create {err.name}"
    if isinstance(err, (DomainError, UsageError, ValueError)):
        return str(err)
    if isinstance(err, StorageError):
        return f"Storage error: {err}"
    if isinstance(err, sqlite3.Error):
        return f"Database error: {err}"
    return str(err).strip() or type(err).__name__


def exit_code_for(err: BaseException) -> int:
    if isinstance(err, (DomainError, UsageError, ValueError)):
        return EXIT_FAILURE
    if isinstance(err, (StorageError, sqlite3.Error)):
        return EXIT_STORAGE
    return EXIT_FAILURE


def _require_list(args: argparse.Namespace) -> str:
    if not args.list:
        raise UsageError("Please specify a list name with --list")
    return args.list


def cmd_create(state: AppState, args: argparse.Namespace) -> str:
    todo_list = state.lists.create(args.create)
    return f'List "{todo_list.name}" created successfully!'


def cmd_add(state: AppState, args: argparse.Namespace) -> str:
    list_name = _require_list(args)
    task = state.tasks.add_task(list_name, args.add)
    return f'Task "{task.text}" added to "{list_name}" as {format_task_id(task.id)}!'


def cmd_show(state: AppState, args: argparse.Namespace) -> str:
    list_name = _require_list(args)
    tasks = state.tasks.list_tasks(list_name)
    lines = [f'Tasks from "{list_name}":']
    if not tasks:
        lines.append("  (no tasks)")
    lines.extend(render_task(t) for t in tasks)
    return "\n".join(lines)


def cmd_done(state: AppState, args: argparse.Namespace) -> str:
    list_name = _require_list(args)
    state.tasks.mark_done(list_name, args.done)
    return f'Task "{args.done}" marked as done!'


def cmd_delete(state: AppState, args: argparse.Namespace) -> str:
    list_name = _require_list(args)
    state.tasks.delete_task(list_name, args.delete)
    return f'Task deleted from "{list_name}"!'


def cmd_clear_all(state: AppState, args: argparse.Namespace) -> str:
    list_name = _require_list(args)
    deleted = state.tasks.clear_completed(list_name)
    noun = "task" if deleted == 1 else "tasks"
    return f'Completed tasks cleared from "{list_name}"! ({deleted} {noun} removed)'


def cmd_delete_list(state: AppState, args: argparse.Namespace) -> str:
    """
    Delete a whole list with its tasks.

    Asks first unless --yes was given or confirmation is disabled in settings.
    The list must exist before we bother the user with a prompt.
    """
    list_name = _require_list(args)
    if state.lists.find_by_name(list_name) is None:
        raise ListNotFoundError(list_name)

    must_confirm = bool(getattr(state.settings, "confirm_destructive", True)) and not args.yes
    if must_confirm and not ask_confirmation(
        f'This will delete the entire list "{list_name}" and all its tasks. Continue?'
    ):
        logger.debug("Delete list declined list=%r", list_name)
        return "Cancelled."

    state.lists.delete(list_name)
    return f'List "{list_name}" deleted.'


# option dest -> handler, in the order they appear in --help.
COMMANDS: list[tuple[str, CommandHandler]] = [
    ("create", cmd_create),
    ("add", cmd_add),
    ("show", cmd_show),
    ("done", cmd_done),
    ("delete", cmd_delete),
    ("clear_all", cmd_clear_all),
    ("delete_list", cmd_delete_list),
]


def selected_commands(args: argparse.Namespace) -> list[str]:
    out: list[str] = []
    for dest, _handler in COMMANDS:
        value = getattr(args, dest, None)
        if value is not None and value is not False:
            out.append(dest)
    return out


def run_command(state: AppState, args: argparse.Namespace) -> str:
    selected = selected_commands(args)
    if not selected:
        raise UsageError("No command given")
    handler = dict(COMMANDS)[selected[0]]
    return handler(state, args)
