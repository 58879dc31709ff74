"""``filament-plugin register`` -- wire an existing local plugin into the host project."""

from __future__ import annotations

import typer

from filament_plugin_cli.cli.helpers import (
    bracketed,
    console,
    get_config,
    register_plugin_in_composer,
    report_plugin_not_found,
)
from filament_plugin_cli.composer import PluginComposerMeta
from filament_plugin_cli.plugins import resolve_plugin_path


def register(
    ctx: typer.Context,
    plugin: str = typer.Argument(..., help="The plugin name in PascalCase (e.g. FilamentTabbedDashboard)"),
) -> None:
    """Add an existing plugin to the project composer.json and run composer update."""
    config = get_config(ctx)

    plugin_path = resolve_plugin_path(plugin, config.packages_dir)
    if plugin_path is None:
        report_plugin_not_found(config, plugin)
        raise typer.Exit(1)

    meta = PluginComposerMeta.from_path(plugin_path)
    if meta is None:
        console.print("[red]Invalid or missing composer.json in plugin directory.[/red]")
        raise typer.Exit(1)

    repo_url = f"{config.packages_path}/{plugin_path.name}"
    if not register_plugin_in_composer(config, meta.composer_name, repo_url):
        raise typer.Exit(1)

    console.print(f"[green]Plugin {bracketed(meta.composer_name)} registered successfully.[/green]")


__all__ = ["register"]
