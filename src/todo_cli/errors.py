# src/todo_cli/errors.py

"""
Failure taxonomy.

Two families the CLI must tell apart:
- StorageError: infrastructure (cannot open/close the database); fatal for the invocation.
- DomainError: expected outcomes of a user request (duplicate name, unknown list/task, bad id).
"""

from __future__ import annotations


class TodoError(Exception):
    pass


class StorageError(TodoError):
    pass


class StorageInitError(StorageError):
    pass


class StorageShutdownError(StorageError):
    pass


class DomainError(TodoError):
    pass


class DuplicateListError(DomainError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f'List "{name}" already exists')


class ListNotFoundError(DomainError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f'List "{name}" does not exist')


class TaskNotFoundError(DomainError):
    def __init__(self, list_name: str, identifier: str, *, pending_only: bool = False) -> None:
        self.list_name = list_name
        self.identifier = identifier
        self.pending_only = pending_only
        if pending_only:
            msg = f'Task "{identifier}" not found or already completed in list "{list_name}"'
        else:
            msg = f'Task "{identifier}" not found in list "{list_name}"'
        super().__init__(msg)


class InvalidIdentifierError(DomainError):
    def __init__(self, identifier: str) -> None:
        self.identifier = identifier
        super().__init__(f"Invalid task ID format: {identifier}")
