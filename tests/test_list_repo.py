# tests/test_list_repo.py

from __future__ import annotations

import pytest

from todo_cli.errors import DuplicateListError, ListNotFoundError
from todo_cli.storage.list_repo import ListRepository
from todo_cli.storage.task_repo import TaskRepository


def test_create_and_find_by_name(lists: ListRepository) -> None:
    created = lists.create("groceries")
    assert created.id > 0
    assert created.name == "groceries"

    found = lists.find_by_name("groceries")
    assert found == created


def test_find_by_name_absent_is_none(lists: ListRepository) -> None:
    assert lists.find_by_name("nope") is None


def test_duplicate_create_fails_and_keeps_original(lists: ListRepository) -> None:
    original = lists.create("work")

    with pytest.raises(DuplicateListError) as info:
        lists.create("work")
    assert info.value.name == "work"

    again = lists.find_by_name("work")
    assert again is not None
    assert again.id == original.id
    assert again.created_at == original.created_at

    # The connection is still usable after the rejected insert.
    other = lists.create("home")
    assert other.id != original.id


def test_blank_name_is_rejected(lists: ListRepository) -> None:
    with pytest.raises(ValueError):
        lists.create("")
    with pytest.raises(ValueError):
        lists.create("   ")


def test_names_are_case_sensitive(lists: ListRepository) -> None:
    lists.create("Work")
    lists.create("work")
    assert lists.find_by_name("WORK") is None


def test_delete_missing_list_raises(lists: ListRepository) -> None:
    with pytest.raises(ListNotFoundError) as info:
        lists.delete("ghost")
    assert info.value.name == "ghost"


def test_delete_cascades_to_tasks(lists: ListRepository, tasks: TaskRepository, engine) -> None:
    groceries = lists.create("groceries")
    tasks.add_task("groceries", "milk")
    tasks.add_task("groceries", "bread")
    lists.create("other")
    tasks.add_task("other", "keep me")

    removed = lists.delete("groceries")
    assert removed.id == groceries.id
    assert lists.find_by_name("groceries") is None

    with pytest.raises(ListNotFoundError):
        tasks.list_tasks("groceries")

    (orphans,) = engine.connection.execute(
        "SELECT COUNT(*) FROM tasks WHERE list_id = ?", (groceries.id,)
    ).fetchone()
    assert orphans == 0
    assert [t.text for t in tasks.list_tasks("other")] == ["keep me"]


def test_ids_are_not_reused_after_delete(lists: ListRepository) -> None:
    first = lists.create("a")
    lists.delete("a")
    second = lists.create("a")
    assert second.id > first.id
