"""Helpers shared by command modules."""

from __future__ import annotations

from studyplan_cli.config import get_config_manager
from studyplan_cli.models import Note, Task
from studyplan_cli.services.app_context import AppContext
from studyplan_cli.utils.exit_codes import ERROR_INVALID_ARGS, ERROR_NOT_FOUND

from .decorators import AppError


def output_format(output: str | None) -> str:
    """Use the --output option if given, else the configured default."""
    return output or get_config_manager().config.output.format


def date_format() -> str:
    return get_config_manager().config.output.date_format


def resolve_task(ctx: AppContext, task_id: str) -> Task:
    """Look up a task by full id or unique prefix.

    Raises:
        AppError: If no task matches (exit 5) or the prefix is ambiguous (exit 2)
    """
    try:
        resolved = ctx.tasks.resolve_task_id(task_id)
    except ValueError as e:
        raise AppError(str(e), exit_code=ERROR_INVALID_ARGS) from e
    task = ctx.tasks.get_task(resolved) if resolved else None
    if task is None:
        raise AppError(f"Task not found: {task_id}", exit_code=ERROR_NOT_FOUND)
    return task


def resolve_note(ctx: AppContext, note_id: str) -> Note:
    """Look up a note by full id or unique prefix."""
    try:
        resolved = ctx.notes.resolve_note_id(note_id)
    except ValueError as e:
        raise AppError(str(e), exit_code=ERROR_INVALID_ARGS) from e
    note = ctx.notes.get_note(resolved) if resolved else None
    if note is None:
        raise AppError(f"Note not found: {note_id}", exit_code=ERROR_NOT_FOUND)
    return note
