"""Data management commands (export, import, clear)."""

import typer
from rich.table import Table

from studyplan_cli.models import SnapshotImportError
from studyplan_cli.services.app_context import get_app_context
from studyplan_cli.services.data_service import read_document
from studyplan_cli.utils.exit_codes import ERROR_INVALID_ARGS, ERROR_NOT_FOUND
from studyplan_cli.utils.typer_helpers import SuggestingGroup
from studyplan_cli.utils.ui.console import get_console
from studyplan_cli.utils.ui.formatters import (
    format_info,
    format_success,
    format_warning,
)

from .decorators import AppError, command_wrapper

app = typer.Typer(cls=SuggestingGroup, help="Data management commands")
console = get_console()


def _count(doc, key: str) -> str:
    value = doc.get(key) if isinstance(doc, dict) else None
    return str(len(value)) if isinstance(value, list) else "?"


@app.command("export")
@command_wrapper
def export_data(
    output: str | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Output file path (default: study-planner-backup-{date}.json)",
    ),
    stdout: bool = typer.Option(False, "--stdout", help="Print the backup instead of writing a file"),
) -> None:
    """
    Export all tasks and notes to a JSON backup file.

    Examples:
        studyplan data export
        studyplan data export --output backup.json
    """
    ctx = get_app_context()

    if stdout:
        print(ctx.data.export_json())
        return

    path = ctx.data.write_export(output)

    table = Table(title="Export Summary", show_header=True)
    table.add_column("Type", style="cyan")
    table.add_column("Count", justify="right", style="green")
    table.add_row("Tasks", str(len(ctx.state.tasks)))
    table.add_row("Notes", str(len(ctx.state.notes)))
    console.print(table)

    format_success(f"Data exported to: {path.absolute()}")


@app.command("import")
@command_wrapper
def import_data(
    file: str = typer.Argument(..., help="Backup file to import"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation prompt"),
) -> None:
    """
    Replace all tasks and notes with the contents of a backup file.

    Examples:
        studyplan data import backup.json
        studyplan data import backup.json --yes
    """
    ctx = get_app_context()

    try:
        doc = read_document(file)
    except FileNotFoundError as e:
        raise AppError(f"File not found: {file}", exit_code=ERROR_NOT_FOUND) from e
    except SnapshotImportError as e:
        raise AppError(f"Error reading backup file: {e}", exit_code=ERROR_INVALID_ARGS) from e

    table = Table(title="Import Preview", show_header=True)
    table.add_column("Type", style="cyan")
    table.add_column("Current", justify="right")
    table.add_column("In file", justify="right", style="yellow")
    table.add_row("Tasks", str(len(ctx.state.tasks)), _count(doc, "tasks"))
    table.add_row("Notes", str(len(ctx.state.notes)), _count(doc, "notes"))
    console.print(table)

    format_warning("Importing replaces all existing tasks and notes")
    if not yes and not typer.confirm("Do you want to import this data?", default=False):
        format_info("Import cancelled")
        raise typer.Exit(0)

    try:
        tasks, notes = ctx.data.import_snapshot(doc)
    except SnapshotImportError as e:
        raise AppError(f"Invalid backup file format: {e}", exit_code=ERROR_INVALID_ARGS) from e

    format_success(f"Imported {len(tasks)} task(s) and {len(notes)} note(s)")
    skipped = len(doc["tasks"]) - len(tasks) + len(doc["notes"]) - len(notes)
    if skipped:
        format_warning(
            f"Skipped {skipped} entr{'y' if skipped == 1 else 'ies'} "
            "without a usable title or task id"
        )


@app.command("clear")
@command_wrapper
def clear_data(
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation prompt"),
) -> None:
    """Delete ALL tasks and notes. This cannot be undone."""
    ctx = get_app_context()

    if not yes:
        format_warning("This deletes all tasks and notes and cannot be undone")
        if not typer.confirm("Are you sure?", default=False):
            format_info("Clear cancelled")
            raise typer.Exit(0)

    ctx.data.clear_all()
    format_success("All data cleared")
