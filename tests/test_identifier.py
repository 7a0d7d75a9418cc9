# tests/test_identifier.py

from __future__ import annotations

import pytest

from todo_cli.errors import InvalidIdentifierError
from todo_cli.storage.identifier import format_task_id, parse_task_id, resolve_identifier


@pytest.mark.parametrize(
    ("identifier", "expected"),
    [("#3", 3), ("#03", 3), ("#0", 0), ("#120", 120), ("write spec", None), ("3", None), ("", None)],
)
def test_parse_task_id(identifier: str, expected: int | None) -> None:
    assert parse_task_id(identifier) == expected


@pytest.mark.parametrize("identifier", ["#", "#abc", "#1a", "#-1", "# 1", "#1.5", "#²"])
def test_parse_task_id_rejects_non_numeric_suffix(identifier: str) -> None:
    with pytest.raises(InvalidIdentifierError) as info:
        parse_task_id(identifier)
    assert info.value.identifier == identifier


def test_id_selector_is_exact_and_ignores_done_policy() -> None:
    pending = resolve_identifier("#7", 2, pending_only=True)
    anyone = resolve_identifier("#7", 2, pending_only=False)

    assert pending == anyone
    assert pending.by_id is True
    assert pending.where == "list_id = ? AND id = ?"
    assert pending.params == (2, 7)


def test_text_selector_applies_done_filter_only_when_asked() -> None:
    pending = resolve_identifier("write spec", 5, pending_only=True)
    anyone = resolve_identifier("write spec", 5, pending_only=False)

    assert pending.by_id is False
    assert pending.params == (5, "write spec")
    assert "done = 0" in pending.where
    assert "done" not in anyone.where


def test_format_task_id() -> None:
    assert format_task_id(1) == "#01"
    assert format_task_id(12) == "#12"
    assert format_task_id(123) == "#123"
    assert format_task_id(4, width=3) == "#004"
