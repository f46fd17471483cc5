# src/taskman/cli/commands.py

"""Text rendering for CLI replies. Each helper returns the full reply string."""

from __future__ import annotations

from ..tasks.task_models import Task

SEPARATOR = "─" * 80
EMPTY_LIST_HINT = 'No tasks found. Add one with: taskman add "Your task"'


def _ts_local(task: Task) -> str:
    return task.created_at.astimezone().strftime("%Y-%m-%d %H:%M")


def format_added(task: Task) -> str:
    lines = [
        "✓ Task added successfully!",
        f"  ID: {task.id}",
        f"  Title: {task.title}",
    ]
    if task.description:
        lines.append(f"  Description: {task.description}")
    return "\n".join(lines)


def format_task_list(tasks: list[Task]) -> str:
    if not tasks:
        return EMPTY_LIST_HINT

    lines = ["", "Your Tasks:", SEPARATOR]
    for task in tasks:
        status = "[✓]" if task.completed else "[ ]"
        lines.append(f"{status} ID: {task.id:<3d} | {task.title}")
        if task.description:
            lines.append(f"    Description: {task.description}")
        lines.append(f"    Created: {_ts_local(task)}")
        lines.append(SEPARATOR)
    lines.append("")
    lines.append(f"Total: {len(tasks)} task(s)")
    return "\n".join(lines)


def format_completed(task_id: int) -> str:
    return f"✓ Task {task_id} marked as complete."


def format_deleted(task_id: int) -> str:
    return f"✓ Task {task_id} deleted."
