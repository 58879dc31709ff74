"""
filament-plugin - scaffolding tooling for Filament plugin packages.

Usage:
    filament-plugin make FilamentMember
    filament-plugin page Dashboard --plugin FilamentMember
    filament-plugin register FilamentMember
    filament-plugin submit --repo ../filamentphp.com
"""

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from filament_plugin_cli.core.config import ConfigError, load_config

__version__ = "0.1.0"

console = Console()

app = typer.Typer(
    name="filament-plugin",
    help="Scaffold, register and publish Filament plugins inside a Laravel project",
    add_completion=False,
    no_args_is_help=True,
)


@app.callback()
def callback(
    ctx: typer.Context,
    project_root: Optional[Path] = typer.Option(
        None,
        "--project-root",
        help="Host project directory holding composer.json (default: current directory)",
    ),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
):
    """Resolve configuration once and hand it to the invoked command."""
    if debug:
        logging.basicConfig(level=logging.DEBUG)

    try:
        ctx.obj = load_config(project_root)
    except ConfigError as exc:
        console.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise typer.Exit(1)


def _register_commands() -> None:
    from filament_plugin_cli.cli.commands import config, make, page, register, submit

    app.command("make")(make)
    app.command("page")(page)
    app.command("register")(register)
    app.command("submit")(submit)
    app.command("config")(config)


_register_commands()


def main():
    app()


if __name__ == "__main__":
    main()
