# src/taskman/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(slots=True)
class Task:
    id: int
    title: str
    description: str
    completed: bool
    created_at: datetime
