"""Note commands - add, list, delete notes attached to tasks."""

import typer

from studyplan_cli.services.app_context import get_app_context
from studyplan_cli.utils.typer_helpers import SuggestingGroup
from studyplan_cli.utils.ui.formatters import (
    format_info,
    format_notes_table,
    format_output,
    format_success,
)

from .decorators import command_wrapper
from .utils import date_format, output_format, resolve_note, resolve_task

app = typer.Typer(cls=SuggestingGroup, help="Note management commands")


@app.command("add")
@command_wrapper
def add_note(
    task_id: str = typer.Argument(..., help="Task ID or unique prefix"),
    title: str = typer.Argument(..., help="Note title"),
    content: str = typer.Option("", "--content", "-c", help="Note body"),
    tags: str = typer.Option("", "--tags", "-t", help="Comma-separated tags"),
    output: str | None = typer.Option(None, "--output", "-o", help="Output format"),
) -> None:
    """Attach a note to a task."""
    ctx = get_app_context()
    task = resolve_task(ctx, task_id)
    note = ctx.notes.create_note(
        {"task_id": task.id, "title": title, "content": content, "tags": tags}
    )

    if format_output(note.to_json_dict(), output_format(output)):
        return
    format_success(f"Note added to '{task.title}': {note.id}")


@app.command("list")
@command_wrapper
def list_notes(
    task_id: str = typer.Argument(..., help="Task ID or unique prefix"),
    output: str | None = typer.Option(None, "--output", "-o", help="Output format"),
) -> None:
    """List the notes of a task."""
    ctx = get_app_context()
    task = resolve_task(ctx, task_id)
    notes = ctx.notes.get_task_notes(task.id)

    if format_output([n.to_json_dict() for n in notes], output_format(output)):
        return
    format_notes_table(notes, date_format())


@app.command("delete")
@command_wrapper
def delete_note(
    note_id: str = typer.Argument(..., help="Note ID or unique prefix"),
    force: bool = typer.Option(False, "--force", "-f", help="Skip confirmation"),
) -> None:
    """Delete a note."""
    ctx = get_app_context()
    note = resolve_note(ctx, note_id)

    if not force and not typer.confirm(f"Delete note '{note.title}'?", default=False):
        format_info("Cancelled")
        raise typer.Exit(0)

    ctx.notes.delete_note(note.id)
    format_success(f"Note deleted: {note.title}")
