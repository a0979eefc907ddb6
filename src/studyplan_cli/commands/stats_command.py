"""Stats command - progress counters for the task list."""

import typer

from studyplan_cli.services.app_context import get_app_context
from studyplan_cli.services.query_service import compute_stats
from studyplan_cli.utils.ui.formatters import format_output, format_stats

from .decorators import command_wrapper
from .utils import output_format


@command_wrapper
def stats(
    output: str | None = typer.Option(None, "--output", "-o", help="Output format"),
) -> None:
    """Show total, completed, in-progress and overdue task counts."""
    ctx = get_app_context()
    result = compute_stats(ctx.state.tasks)

    if format_output(result.to_json_dict(), output_format(output)):
        return
    format_stats(result)
