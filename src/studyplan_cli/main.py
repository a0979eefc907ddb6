"""Main entry point for the study planner CLI."""

import typer

from studyplan_cli import __version__
from studyplan_cli.commands import (
    config_command,
    data_command,
    note_command,
    stats_command,
    task_command,
)
from studyplan_cli.config import get_config_manager
from studyplan_cli.utils.typer_helpers import SuggestingGroup
from studyplan_cli.utils.ui.console import get_console

app = typer.Typer(
    name="studyplan",
    cls=SuggestingGroup,
    help="Plan study tasks, keep notes and track progress from the terminal",
    no_args_is_help=True,
)

console = get_console()

app.add_typer(task_command.app, name="task", help="Task management commands")
app.add_typer(note_command.app, name="note", help="Notes attached to tasks")
app.add_typer(data_command.app, name="data", help="Data management (export, import, clear)")
app.add_typer(config_command.app, name="config", help="Configuration management")
app.command("stats")(stats_command.stats)


@app.callback()
def main_callback() -> None:
    if not get_config_manager().config.output.color:
        console.no_color = True


@app.command()
def version() -> None:
    """Show version information and data location."""
    console.print(f"[bold]studyplan[/bold] version [cyan]{__version__}[/cyan]")
    console.print(f"[dim]Data directory: {get_config_manager().data_dir}[/dim]")


def main():
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
