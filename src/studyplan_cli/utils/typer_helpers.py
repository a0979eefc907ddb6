"""Typer helper utilities."""

from difflib import get_close_matches

import click
import typer
from typer.core import TyperGroup

from studyplan_cli.utils.ui.console import get_console


class SuggestingGroup(TyperGroup):
    """Typer group that suggests full command paths on typos.

    Besides its own commands, a group also offers the commands of its
    subgroups, so ``studyplan lst`` suggests ``studyplan task list`` and
    ``studyplan note list``.
    """

    def command_paths(self) -> list[tuple[str, str]]:
        """Pairs of (name to match, path relative to this group)."""
        paths = []
        for name, command in self.commands.items():
            paths.append((name, name))
            if isinstance(command, click.Group):
                paths.extend((sub, f"{name} {sub}") for sub in command.commands)
        return paths

    def suggest(self, attempted: str) -> list[str]:
        paths = self.command_paths()
        names = list(dict.fromkeys(name for name, _ in paths))
        # Max 3 names, cutoff 0.6 for similarity
        matches = get_close_matches(attempted, names, n=3, cutoff=0.6)
        return [path for match in matches for name, path in paths if name == match]

    def resolve_command(self, ctx, args):
        """Override to provide command suggestions on errors."""
        try:
            return super().resolve_command(ctx, args)
        except click.UsageError as e:
            suggestions = self.suggest(args[0]) if args else []
            if not suggestions:
                raise

            console = get_console()
            console.print(
                f'[red]Error:[/red] unknown command "{args[0]}" for "{ctx.command_path}"'
            )
            console.print()
            if len(suggestions) == 1:
                console.print("[yellow]Did you mean this?[/yellow]")
            else:
                console.print("[yellow]Did you mean one of these?[/yellow]")
            for suggestion in suggestions:
                console.print(f"        {ctx.command_path} {suggestion}")
            console.print()
            console.print(f"Run '{ctx.command_path} --help' for the list of commands.")
            raise typer.Exit(1) from e
