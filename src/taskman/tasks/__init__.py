# src/taskman/tasks/__init__.py

from __future__ import annotations

from .errors import NotFound, ReadFailed, StorageUnavailable, TaskStoreError, WriteFailed
from .task_models import Task
from .task_store import TaskStore

__all__ = [
    "NotFound",
    "ReadFailed",
    "StorageUnavailable",
    "Task",
    "TaskStore",
    "TaskStoreError",
    "WriteFailed",
]
