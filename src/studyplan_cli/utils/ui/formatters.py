"""Output formatters for different formats."""

from __future__ import annotations

import json
from datetime import date, datetime
from typing import Any

import yaml
from rich.table import Table
from rich.text import Text

from studyplan_cli.models import Note, Task, TaskStats
from studyplan_cli.services.query_service import is_overdue
from studyplan_cli.utils.id_utils import shorten_id
from studyplan_cli.utils.ui.console import get_console

console = get_console()

PRIORITY_STYLES = {"high": "bold red", "medium": "yellow", "low": "green"}
STATUS_STYLES = {"todo": "white", "in-progress": "cyan", "completed": "green"}


def format_output(data: Any, output_format: str = "table") -> bool:
    """Print data as JSON or YAML.

    Returns:
        True if the data was printed, False if ``output_format`` is a table
        format and the caller should render its own table
    """
    if output_format == "json":
        print(json.dumps(data, indent=2, default=str))
        return True
    if output_format == "yaml":
        print(yaml.dump(data, default_flow_style=False, sort_keys=False))
        return True
    return False


def format_due_date(value: date | datetime | str | None, date_format: str = "%b %d, %Y") -> str:
    """Format a due date for display, e.g. "Jan 05, 2024"."""
    if not value:
        return "-"
    if isinstance(value, str):
        value = date.fromisoformat(value[:10])
    return value.strftime(date_format)


def format_status(status: str) -> Text:
    return Text(status.replace("-", " "), style=STATUS_STYLES.get(status, "white"))


def format_priority(priority: str) -> Text:
    return Text(priority, style=PRIORITY_STYLES.get(priority, "white"))


def format_tasks_table(
    tasks: list[Task],
    note_counts: dict[str, int] | None = None,
    date_format: str = "%b %d, %Y",
) -> None:
    """Render the task list view."""
    if not tasks:
        console.print("[yellow]No tasks found[/yellow]")
        return

    note_counts = note_counts or {}
    now = datetime.now()

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("ID", style="dim", no_wrap=True)
    table.add_column("Title", style="bold")
    table.add_column("Subject", style="cyan")
    table.add_column("Priority")
    table.add_column("Status")
    table.add_column("Due")
    table.add_column("Tags")
    table.add_column("Notes", justify="right")

    for task in tasks:
        due = Text(format_due_date(task.due_date, date_format))
        if is_overdue(task, now):
            due.stylize("bold red")
            due.append(" !")
        table.add_row(
            shorten_id(task.id),
            task.title,
            task.subject or "-",
            format_priority(task.priority),
            format_status(task.status),
            due,
            ", ".join(task.tags) or "-",
            str(note_counts.get(task.id, 0)),
        )

    console.print(table)


def format_task_detail(
    task: Task, notes: list[Note], date_format: str = "%b %d, %Y"
) -> None:
    """Render a single task as key-value pairs followed by its notes."""
    table = Table(show_header=False, box=None)
    table.add_column("Key", style="cyan")
    table.add_column("Value", style="white")

    due = Text(format_due_date(task.due_date, date_format))
    if is_overdue(task):
        due.append(" (overdue)", style="bold red")

    table.add_row("ID", task.id)
    table.add_row("Title", task.title)
    table.add_row("Subject", task.subject or "-")
    table.add_row("Description", task.description or "-")
    table.add_row("Priority", format_priority(task.priority))
    table.add_row("Status", format_status(task.status))
    table.add_row("Due", due)
    table.add_row("Tags", ", ".join(task.tags) or "-")
    table.add_row("Created", format_due_date(task.created_at, date_format))
    table.add_row("Updated", format_due_date(task.updated_at, date_format))
    console.print(table)

    console.print()
    count = len(notes)
    console.print(f"[bold]{count} note{'s' if count != 1 else ''}[/bold]")
    format_notes_table(notes, date_format, show_empty=False)


def format_notes_table(
    notes: list[Note], date_format: str = "%b %d, %Y", show_empty: bool = True
) -> None:
    """Render notes of a task."""
    if not notes:
        if show_empty:
            console.print("[yellow]No notes yet[/yellow]")
        return

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("ID", style="dim", no_wrap=True)
    table.add_column("Title", style="bold")
    table.add_column("Content")
    table.add_column("Tags")
    table.add_column("Created")

    for note in notes:
        table.add_row(
            shorten_id(note.id),
            note.title,
            note.content or "-",
            ", ".join(note.tags) or "-",
            format_due_date(note.created_at, date_format),
        )

    console.print(table)


def format_stats(stats: TaskStats) -> None:
    """Render the stats panel."""
    table = Table(title="Study Progress", show_header=True)
    table.add_column("Metric", style="cyan")
    table.add_column("Count", justify="right", style="green")

    table.add_row("Total", str(stats.total))
    table.add_row("Completed", str(stats.completed))
    table.add_row("In progress", str(stats.in_progress))
    overdue_style = "bold red" if stats.overdue else "green"
    table.add_row("Overdue", Text(str(stats.overdue), style=overdue_style))

    console.print(table)


def format_error(message: str) -> None:
    """Format and display an error message."""
    console.print(f"[bold red]Error:[/bold red] {message}")


def format_success(message: str) -> None:
    """Format and display a success message."""
    console.print(f"[bold green]Success:[/bold green] {message}")


def format_warning(message: str) -> None:
    """Format and display a warning message."""
    console.print(f"[bold yellow]Warning:[/bold yellow] {message}")


def format_info(message: str) -> None:
    """Format and display an info message."""
    console.print(f"[bold blue]Info:[/bold blue] {message}")
