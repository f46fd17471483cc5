# tests/conftest.py

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest
from click.testing import CliRunner

from taskman.config import Settings
from taskman.tasks.task_store import TaskStore


@pytest.fixture()
def db_path(tmp_path: Path) -> Path:
    return tmp_path / "taskman" / "tasks.db"


@pytest.fixture()
def settings(db_path: Path) -> Settings:
    """Settings pointing at a tmp database, independent of the real environment."""
    return Settings(log_level="WARNING", log_dir=None, tasks_db_path=db_path)


@pytest.fixture()
def store(db_path: Path) -> Iterator[TaskStore]:
    """
    An open TaskStore on a fresh tmp file.

    Real SQLite is used on purpose: the SQL is the part worth testing.
    """
    s = TaskStore(db_path)
    s.open()
    try:
        yield s
    finally:
        s.close()


@pytest.fixture()
def runner() -> CliRunner:
    return CliRunner()
