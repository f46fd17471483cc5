# src/taskman/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root": it turns settings (plus any
command-line override) into an open TaskStore.
"""

from __future__ import annotations

import logging
from pathlib import Path

from ..config import Settings, get_settings
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def create_task_store(*, settings: Settings | None = None, db_path: Path | None = None) -> TaskStore:
    """
    Build and open a TaskStore.

    db_path wins over settings.tasks_db_path; when both are None the store
    falls back to ~/.taskman/tasks.db. Raises StorageUnavailable on failure.
    """
    if settings is None:
        settings = get_settings()

    path = db_path if db_path is not None else settings.tasks_db_path
    store = TaskStore(path)
    store.open()
    logger.debug("Task store opened at %s", store.db_path)
    return store
