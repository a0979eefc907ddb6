"""Task commands - add, edit, list, show, delete."""

import typer

from studyplan_cli.models import TaskFilters, TaskUpdate
from studyplan_cli.services.app_context import get_app_context
from studyplan_cli.utils.typer_helpers import SuggestingGroup
from studyplan_cli.utils.ui.formatters import (
    format_info,
    format_output,
    format_success,
    format_task_detail,
    format_tasks_table,
)

from .decorators import command_wrapper
from .utils import date_format, output_format, resolve_task

app = typer.Typer(cls=SuggestingGroup, help="Task management commands")


@app.command("add")
@command_wrapper
def add_task(
    title: str = typer.Argument(..., help="Task title"),
    description: str = typer.Option("", "--description", "-d", help="Task description"),
    subject: str = typer.Option("", "--subject", "-s", help="Subject or course"),
    priority: str = typer.Option("medium", "--priority", "-p", help="low, medium or high"),
    status: str = typer.Option("todo", "--status", help="todo, in-progress or completed"),
    due: str | None = typer.Option(None, "--due", help="Due date (YYYY-MM-DD)"),
    tags: str = typer.Option("", "--tags", "-t", help="Comma-separated tags"),
    output: str | None = typer.Option(None, "--output", "-o", help="Output format"),
) -> None:
    """
    Add a new task.

    Examples:
        studyplan task add "Algebra HW" --subject Math --priority high --due 2024-01-10
        studyplan task add "Read chapter 4" --tags "reading, biology"
    """
    ctx = get_app_context()
    task = ctx.tasks.create_task(
        {
            "title": title,
            "description": description,
            "subject": subject,
            "priority": priority,
            "status": status,
            "due_date": due,
            "tags": tags,
        }
    )

    if format_output(task.to_json_dict(), output_format(output)):
        return
    format_success(f"Task created: {task.id}")


@app.command("edit")
@command_wrapper
def edit_task(
    task_id: str = typer.Argument(..., help="Task ID or unique prefix"),
    title: str | None = typer.Option(None, "--title", help="New title"),
    description: str | None = typer.Option(None, "--description", "-d", help="New description"),
    subject: str | None = typer.Option(None, "--subject", "-s", help="New subject"),
    priority: str | None = typer.Option(None, "--priority", "-p", help="low, medium or high"),
    status: str | None = typer.Option(None, "--status", help="todo, in-progress or completed"),
    due: str | None = typer.Option(None, "--due", help="New due date (YYYY-MM-DD)"),
    clear_due: bool = typer.Option(False, "--clear-due", help="Remove the due date"),
    tags: str | None = typer.Option(None, "--tags", "-t", help="Replace tags (comma-separated)"),
    output: str | None = typer.Option(None, "--output", "-o", help="Output format"),
) -> None:
    """Edit a task. Only the options given are changed."""
    ctx = get_app_context()
    task = resolve_task(ctx, task_id)

    fields = {
        "title": title,
        "description": description,
        "subject": subject,
        "priority": priority,
        "status": status,
        "due_date": due,
        "tags": tags,
    }
    changes = {key: value for key, value in fields.items() if value is not None}
    if clear_due:
        changes["due_date"] = None

    if not changes:
        format_info("Nothing to update")
        return

    updated = ctx.tasks.update_task(task.id, TaskUpdate.model_validate(changes))

    if format_output(updated.to_json_dict(), output_format(output)):
        return
    format_success(f"Task updated: {updated.id}")


@app.command("status")
@command_wrapper
def set_status(
    task_id: str = typer.Argument(..., help="Task ID or unique prefix"),
    status: str = typer.Argument(..., help="todo, in-progress or completed"),
) -> None:
    """Change the status of a task."""
    ctx = get_app_context()
    task = resolve_task(ctx, task_id)
    ctx.tasks.update_task(task.id, {"status": status})
    format_success(f"{task.title}: {status}")


@app.command("delete")
@command_wrapper
def delete_task(
    task_id: str = typer.Argument(..., help="Task ID or unique prefix"),
    force: bool = typer.Option(False, "--force", "-f", help="Skip confirmation"),
) -> None:
    """Delete a task and all of its notes."""
    ctx = get_app_context()
    task = resolve_task(ctx, task_id)

    if not force:
        note_count = len(ctx.notes.get_task_notes(task.id))
        confirm = typer.confirm(
            f"Delete '{task.title}' and its {note_count} note(s)?", default=False
        )
        if not confirm:
            format_info("Cancelled")
            raise typer.Exit(0)

    ctx.tasks.delete_task(task.id)
    format_success(f"Task deleted: {task.title}")


@app.command("show")
@command_wrapper
def show_task(
    task_id: str = typer.Argument(..., help="Task ID or unique prefix"),
    output: str | None = typer.Option(None, "--output", "-o", help="Output format"),
) -> None:
    """Show a task with its notes."""
    ctx = get_app_context()
    task = resolve_task(ctx, task_id)
    notes = ctx.notes.get_task_notes(task.id)

    data = {"task": task.to_json_dict(), "notes": [n.to_json_dict() for n in notes]}
    if format_output(data, output_format(output)):
        return
    format_task_detail(task, notes, date_format())


@app.command("list")
@command_wrapper
def list_tasks(
    search: str = typer.Option("", "--search", "-q", help="Search title, description, subject and tags"),
    status: str = typer.Option("all", "--status", help="Filter by status (or 'all')"),
    priority: str = typer.Option("all", "--priority", "-p", help="Filter by priority (or 'all')"),
    output: str | None = typer.Option(None, "--output", "-o", help="Output format"),
) -> None:
    """
    List tasks, dated tasks first by due date, then by priority.

    Examples:
        studyplan task list
        studyplan task list --search algebra --status todo
        studyplan task list --priority high --output json
    """
    ctx = get_app_context()
    filters = TaskFilters(
        search_term=search, status_filter=status, priority_filter=priority
    )
    tasks = ctx.tasks.list_tasks(filters)

    if format_output([t.to_json_dict() for t in tasks], output_format(output)):
        return
    format_tasks_table(tasks, ctx.notes.count_by_task(), date_format())
