# src/todo_cli/storage/identifier.py

"""
Task identifier resolution.

A user names a task in one of two ways:
- "#NN"  -> the task's numeric id (leading zeros allowed: "#01" == id 1)
- anything else -> the literal task text, matched verbatim and case-sensitively

The resolver only builds a selection predicate scoped to one list; the
repository runs it.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..errors import InvalidIdentifierError

ID_PREFIX = "#"


@dataclass(frozen=True, slots=True)
class TaskSelector:
    """SQL WHERE fragment (without the keyword) plus its parameters."""

    where: str
    params: tuple[object, ...]
    by_id: bool


def parse_task_id(identifier: str) -> int | None:
    """
    Return the numeric id for a "#NN" identifier, or None for a text identifier.

    Raises InvalidIdentifierError when the "#" suffix is not a plain
    non-negative integer.
    """
    if not identifier.startswith(ID_PREFIX):
        return None
    raw = identifier[len(ID_PREFIX):]
    # str.isdigit() alone accepts superscripts and other non-ASCII digits.
    if not raw or not raw.isascii() or not raw.isdigit():
        raise InvalidIdentifierError(identifier)
    return int(raw)


def resolve_identifier(identifier: str, list_id: int, *, pending_only: bool) -> TaskSelector:
    task_id = parse_task_id(identifier)
    if task_id is not None:
        return TaskSelector(
            where="list_id = ? AND id = ?",
            params=(int(list_id), task_id),
            by_id=True,
        )

    # Text match: target the oldest qualifying row so one call changes one task.
    done_filter = " AND done = 0" if pending_only else ""
    return TaskSelector(
        where=(
            "id = ("
            "SELECT id FROM tasks"
            f" WHERE list_id = ? AND task = ?{done_filter}"
            " ORDER BY created_at ASC, id ASC LIMIT 1"
            ")"
        ),
        params=(int(list_id), identifier),
        by_id=False,
    )


def format_task_id(task_id: int, width: int = 2) -> str:
    return f"{ID_PREFIX}{int(task_id):0{width}d}"
