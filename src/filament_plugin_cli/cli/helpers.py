"""Shared pieces used by several filament-plugin commands."""

from __future__ import annotations

import typer
from rich.console import Console
from rich.markup import escape

from filament_plugin_cli.cli.ui import select_with_arrows
from filament_plugin_cli.composer import ComposerJsonEditor, ComposerRunner
from filament_plugin_cli.core.config import ConfigError, ToolConfig, load_config
from filament_plugin_cli.core.versions import (
    DEFAULT_FILAMENT_VERSION,
    FILAMENT_VERSION_CHOICES,
    normalize_filament_version,
)
from filament_plugin_cli.plugins import to_slug

console = Console()


def get_config(ctx: typer.Context) -> ToolConfig:
    """Return the configuration built by the root callback.

    Commands invoked directly (tests, embedding) fall back to loading the
    configuration for the current directory.
    """
    root = ctx.find_root()
    if isinstance(root.obj, ToolConfig):
        return root.obj
    try:
        config = load_config()
    except ConfigError as exc:
        console.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise typer.Exit(1)
    root.obj = config
    return config


def resolve_filament_version(option_value: str | None, no_interaction: bool) -> str | None:
    """Resolve the target Filament version from ``--filament`` or a prompt.

    Prints an error and returns None for invalid input, or when the value is
    missing in non-interactive mode.
    """
    if option_value is not None and option_value.strip():
        version = normalize_filament_version(option_value)
        if version is None:
            console.print("[red]Option --filament must be 3, 4, 5, or 4|5.[/red]")
        return version

    if no_interaction:
        console.print("[red]Option --filament is required when using --no-interaction.[/red]")
        return None

    return select_with_arrows(
        FILAMENT_VERSION_CHOICES,
        "Which Filament version will this plugin target?",
        default_key=DEFAULT_FILAMENT_VERSION,
        console=console,
    )


def run_composer_update(config: ToolConfig, package: str) -> bool:
    with console.status("Running composer update"):
        return ComposerRunner(config.project_root).update(package)


def register_plugin_in_composer(config: ToolConfig, composer_name: str, repo_url: str) -> bool:
    """Add the plugin to the host composer.json and run composer update.

    Returns False when the manifest is missing, invalid or cannot be saved.
    A failed ``composer update`` only produces a warning.
    """
    editor = ComposerJsonEditor.for_project(config.project_root)

    if not editor.is_valid():
        console.print("[yellow]composer.json not found or invalid. Skipping registration.[/yellow]")
        return False

    editor.add_path_repository(repo_url)
    editor.add_require(composer_name, "@dev")

    if not editor.save():
        console.print("[yellow]Failed to save composer.json.[/yellow]")
        return False

    console.print()
    if not run_composer_update(config, composer_name):
        console.print(
            f"[yellow]Composer update failed. Run manually: composer update {composer_name}[/yellow]"
        )

    return True


def bracketed(value: object) -> str:
    """Format a path or name as ``[value]``, escaped for Rich markup."""
    return escape(f"[{value}]")


def report_plugin_not_found(config: ToolConfig, plugin_name: str) -> None:
    slug = to_slug(plugin_name)
    console.print(f"[red]Plugin not found: {bracketed(config.packages_dir / slug)}.[/red]")
    console.print("  Use the plugin name in PascalCase (e.g. FilamentTabbedDashboard).")


__all__ = [
    "bracketed",
    "console",
    "get_config",
    "register_plugin_in_composer",
    "report_plugin_not_found",
    "resolve_filament_version",
    "run_composer_update",
]
