# src/taskman/config.py

"""Settings loaded from environment variables (+ optional .env).

- One Settings object per invocation, built by get_settings().
- Nothing touches the filesystem here; the store resolves and creates paths.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TASKMAN"

load_dotenv(override=False)


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_path(name: str) -> Path | None:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    log_level: str
    log_dir: Path | None

    # None means "~/.taskman/tasks.db", resolved lazily by TaskStore.open().
    tasks_db_path: Path | None

    @staticmethod
    def from_env() -> "Settings":
        log_level = _env(_k("LOG_LEVEL"), "WARNING").strip().upper() or "WARNING"
        log_dir = _env_path(_k("LOG_DIR"))

        tasks_db_path = _env_path(_k("DB_PATH"))
        if tasks_db_path is None:
            data_dir = _env_path(_k("DATA_DIR"))
            if data_dir is not None:
                tasks_db_path = data_dir / "tasks.db"

        return Settings(
            log_level=log_level,
            log_dir=log_dir,
            tasks_db_path=tasks_db_path,
        )


def get_settings() -> Settings:
    return Settings.from_env()
