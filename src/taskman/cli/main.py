# src/taskman/cli/main.py

"""
CLI entrypoint.

Initializes logging, then dispatches one subcommand against a TaskStore
that is opened on first use and closed when the root context closes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

import click

from .. import __version__
from ..config import Settings, get_settings
from ..logging_setup import setup_logging
from ..tasks.errors import StorageUnavailable, TaskStoreError
from ..tasks.task_store import TaskStore
from .bootstrap import create_task_store
from .commands import format_added, format_completed, format_deleted, format_task_list

logger = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


@dataclass(slots=True)
class CliState:
    settings: Settings
    db_path: Path | None = None
    store: TaskStore | None = None


def _get_store(ctx: click.Context) -> TaskStore:
    state = ctx.find_object(CliState)
    if state is None:
        raise click.UsageError("taskman context is missing")  # pragma: no cover

    if state.store is None:
        try:
            store = create_task_store(settings=state.settings, db_path=state.db_path)
        except StorageUnavailable as exc:
            logger.debug("Store initialization failed", exc_info=True)
            click.echo(f"Failed to initialize database: {exc}", err=True)
            ctx.exit(1)
        state.store = store
        ctx.find_root().call_on_close(store.close)
    return state.store


def _fail(ctx: click.Context, action: str, exc: TaskStoreError) -> None:
    logger.debug("%s failed", action, exc_info=True)
    click.echo(f"Error {action}: {exc}", err=True)
    ctx.exit(1)


@click.group(
    help=(
        "TaskMan is a command-line task manager. It lets you add, list, "
        "complete, and delete tasks with SQLite persistence."
    )
)
@click.option(
    "--db",
    "db_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Database file to use (default: ~/.taskman/tasks.db)",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Console log level (default: TASKMAN_LOG_LEVEL or WARNING)",
)
@click.version_option(__version__, prog_name="taskman")
@click.pass_context
def cli(ctx: click.Context, db_path: Path | None, log_level: str | None) -> None:
    settings = get_settings()

    level_name = (log_level or settings.log_level).upper()
    console_level = getattr(logging, level_name, logging.WARNING)
    setup_logging(log_dir=settings.log_dir, console_level=console_level)

    ctx.obj = CliState(settings=settings, db_path=db_path)


@cli.command("add")
@click.argument("title", nargs=-1, required=True)
@click.option("--description", "-d", default="", help="Task description")
@click.pass_context
def add_cmd(ctx: click.Context, title: tuple[str, ...], description: str) -> None:
    """Add a new task with a title and optional description."""
    store = _get_store(ctx)
    try:
        task = store.add_task(" ".join(title), description)
    except TaskStoreError as exc:
        _fail(ctx, "adding task", exc)
        return
    click.echo(format_added(task))


@cli.command("list")
@click.pass_context
def list_cmd(ctx: click.Context) -> None:
    """Display all tasks with their completion status."""
    store = _get_store(ctx)
    try:
        tasks = store.list_tasks()
    except TaskStoreError as exc:
        _fail(ctx, "retrieving tasks", exc)
        return
    click.echo(format_task_list(tasks))


@cli.command("complete")
@click.argument("task_id", type=int)
@click.pass_context
def complete_cmd(ctx: click.Context, task_id: int) -> None:
    """Mark a task as completed by providing its ID."""
    store = _get_store(ctx)
    try:
        store.complete_task(task_id)
    except TaskStoreError as exc:
        _fail(ctx, "completing task", exc)
        return
    click.echo(format_completed(task_id))


@cli.command("delete")
@click.argument("task_id", type=int)
@click.pass_context
def delete_cmd(ctx: click.Context, task_id: int) -> None:
    """Remove a task from the database by providing its ID."""
    store = _get_store(ctx)
    try:
        store.delete_task(task_id)
    except TaskStoreError as exc:
        _fail(ctx, "deleting task", exc)
        return
    click.echo(format_deleted(task_id))


def main() -> None:
    cli(prog_name="taskman")


if __name__ == "__main__":
    main()
