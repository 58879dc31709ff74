"""Top-level ``filament-plugin config`` command.

Shows the resolved settings; ``--show-origin`` adds the layer that
supplied each value.
"""

from __future__ import annotations

import typer
from rich.markup import escape
from rich.table import Table

from filament_plugin_cli.cli.helpers import console, get_config
from filament_plugin_cli.core.config import get_config_home


def config(
    ctx: typer.Context,
    show_origin: bool = typer.Option(
        False,
        "--show-origin",
        help="Show which layer (default, global, project, env) supplied each setting",
    ),
) -> None:
    """Display the resolved filament-plugin configuration."""
    settings = get_config(ctx)

    table = Table(title="filament-plugin configuration", show_lines=False)
    table.add_column("Setting", style="cyan")
    table.add_column("Value")
    if show_origin:
        table.add_column("Origin", style="magenta")

    for name, value in settings.settings().items():
        display = "[dim]unset[/dim]" if value in (None, "") else escape(str(value))
        row = [name, display]
        if show_origin:
            row.append(_format_origin(settings.origin_of(name)))
        table.add_row(*row)

    console.print(table)
    console.print(f"[dim]Project root: {escape(str(settings.project_root))}[/dim]")
    if show_origin:
        console.print(f"[dim]Global config: {escape(str(get_config_home() / 'config.yaml'))}[/dim]")


def _format_origin(origin: str) -> str:
    colors = {
        "env": "green",
        "project": "bright_cyan",
        "global": "blue",
        "default": "dim",
    }
    color = colors.get(origin, "white")
    return f"[{color}]{origin}[/{color}]"


__all__ = ["config"]
