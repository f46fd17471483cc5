# src/taskman/tasks/errors.py

"""
Errors raised by TaskStore.

All of them derive from TaskStoreError so the CLI can report any store
failure with a single except clause.
"""

from __future__ import annotations


class TaskStoreError(Exception):
    """Base class for task store failures."""


class StorageUnavailable(TaskStoreError):
    """The database could not be located, created, opened or checked."""


class WriteFailed(TaskStoreError):
    """An insert, update or delete failed inside the engine."""


class ReadFailed(TaskStoreError):
    """A query or row iteration failed inside the engine."""


class NotFound(TaskStoreError):
    def __init__(self, task_id: int) -> None:
        super().__init__(f"task with ID {task_id} not found")
        self.task_id = task_id
