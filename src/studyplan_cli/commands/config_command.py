"""Configuration management commands."""

from typing import Optional

import typer

from studyplan_cli.config import get_config_manager
from studyplan_cli.utils.exit_codes import ERROR_INVALID_ARGS, ERROR_NOT_FOUND
from studyplan_cli.utils.logger import reset_logger
from studyplan_cli.utils.typer_helpers import SuggestingGroup
from studyplan_cli.utils.ui.console import get_console
from studyplan_cli.utils.ui.formatters import format_info, format_output, format_success

from .decorators import AppError, command_wrapper

app = typer.Typer(cls=SuggestingGroup, help="Configuration management commands")
console = get_console()


@app.command("show")
@command_wrapper
def show_config(
    output: str = typer.Option("yaml", "--output", "-o", help="Output format (json, yaml)"),
) -> None:
    """Show the current configuration."""
    config_manager = get_config_manager()
    data = config_manager.config.model_dump()
    data["storage"]["resolved_data_dir"] = str(config_manager.data_dir)
    format_output(data, "json" if output == "json" else "yaml")


@app.command("get")
@command_wrapper
def get_config(
    key: str = typer.Argument(..., help="Configuration key (e.g., output.format)"),
) -> None:
    """Get a configuration value."""
    value = get_config_manager().get(key)
    if value is None:
        raise AppError(f"Configuration key '{key}' not found", exit_code=ERROR_NOT_FOUND)
    console.print(value)


@app.command("set")
@command_wrapper
def set_config(
    key: str = typer.Argument(..., help="Configuration key (e.g., output.format)"),
    value: str = typer.Argument(..., help="Configuration value"),
) -> None:
    """Set a configuration value."""
    # Try to convert value to appropriate type
    parsed_value: str | bool = value
    if value.lower() in ("true", "false"):
        parsed_value = value.lower() == "true"

    try:
        get_config_manager().set(key, parsed_value)
    except KeyError as e:
        raise AppError(f"Configuration key '{key}' not found", exit_code=ERROR_INVALID_ARGS) from e
    if key.startswith("logging."):
        reset_logger()
    format_success(f"Configuration '{key}' set to '{parsed_value}'")


@app.command("reset")
@command_wrapper
def reset_config(
    key: Optional[str] = typer.Argument(None, help="Configuration key to reset"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Reset configuration to defaults."""
    if not yes:
        target = f"'{key}'" if key else "all settings"
        if not typer.confirm(f"Reset {target} to defaults?", default=False):
            format_info("Reset cancelled")
            raise typer.Exit(0)

    get_config_manager().reset(key)
    if key is None or key.startswith("logging."):
        reset_logger()
    format_success("Configuration reset")
