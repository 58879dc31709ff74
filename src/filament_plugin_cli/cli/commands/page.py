"""``filament-plugin page`` -- add a Filament page to an existing plugin."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from filament_plugin_cli.cli.helpers import (
    bracketed,
    console,
    get_config,
    report_plugin_not_found,
    resolve_filament_version,
)
from filament_plugin_cli.composer import PluginComposerMeta
from filament_plugin_cli.core.naming import kebab, studly
from filament_plugin_cli.core.versions import page_stub_version
from filament_plugin_cli.plugins import PluginPageRegistrar, RegistrationResult, resolve_plugin_path
from filament_plugin_cli.template import StubProcessor, page_stub


def page_paths(plugin_path: Path, page_name: str) -> tuple[Path, Path]:
    """Return ``(class file, blade view)`` for *page_name* inside the plugin."""
    page_slug = kebab(page_name)
    return (
        plugin_path / "src" / "Pages" / f"{page_name}.php",
        plugin_path / "resources" / "views" / "filament" / "pages" / f"{page_slug}.blade.php",
    )


def write_page_files(
    plugin_path: Path,
    meta: PluginComposerMeta,
    page_name: str,
    filament_version: str,
    panel: str | None = None,
) -> tuple[Path, Path, str]:
    """Render the page class and copy its view. Returns both paths and the class FQN."""
    pages_namespace = f"{meta.namespace}\\Pages"
    class_fqn = f"{pages_namespace}\\{page_name}"
    view_name = f"{meta.view_namespace}::filament.pages.{kebab(page_name)}"
    class_file, view_file = page_paths(plugin_path, page_name)
    version = page_stub_version(filament_version)

    replacements = {
        "{{NAMESPACE}}": pages_namespace,
        "{{CLASS_NAME}}": page_name,
        "{{VIEW_NAME}}": view_name,
        "{{PANEL_COMMENT}}": f"Panel: {panel}" if panel else "",
    }
    StubProcessor().process(page_stub("PageClass", version), class_file, replacements)

    view_file.parent.mkdir(parents=True, exist_ok=True)
    view_file.write_text(page_stub("PageView", version).read_text(encoding="utf-8"), encoding="utf-8")
    return class_file, view_file, class_fqn


def _report_registration(result: RegistrationResult) -> None:
    if result is RegistrationResult.DISCOVERS_PAGES:
        console.print("  Plugin uses discoverPages(); page will be discovered automatically.")
    elif result is RegistrationResult.NO_PAGES_ARRAY:
        console.print(
            "[yellow]Plugin file has no ->pages([...]). "
            "Add the page manually to the Plugin register() method.[/yellow]"
        )
    elif result in (RegistrationResult.REGISTERED, RegistrationResult.ALREADY_REGISTERED):
        console.print("[green]Page registered in Plugin.[/green]")
    else:
        console.print("[yellow]Could not register page in Plugin file.[/yellow]")


def page(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="The page class name in PascalCase"),
    plugin: Optional[str] = typer.Option(
        None, "--plugin", help="The plugin name in PascalCase (e.g. FilamentTabbedDashboard)"
    ),
    filament: Optional[str] = typer.Option(None, "--filament", help="Filament version (3, 4, 5, or 4|5)"),
    force: bool = typer.Option(False, "--force", help="Overwrite existing files"),
    register: bool = typer.Option(False, "--register", help="Register the page in the Plugin class"),
    panel: Optional[str] = typer.Option(None, "--panel", help="Panel name (comment only)"),
    no_interaction: bool = typer.Option(False, "--no-interaction", "-n", help="Do not prompt"),
) -> None:
    """Create a Filament page class and view inside an existing plugin."""
    config = get_config(ctx)

    if not plugin or not plugin.strip():
        console.print("[red]Option --plugin is required (e.g. --plugin=FilamentTabbedDashboard).[/red]")
        raise typer.Exit(1)

    plugin_path = resolve_plugin_path(plugin.strip(), config.packages_dir)
    if plugin_path is None:
        report_plugin_not_found(config, plugin.strip())
        raise typer.Exit(1)

    meta = PluginComposerMeta.from_path(plugin_path)
    if meta is None:
        console.print("[red]Invalid composer.json in plugin directory.[/red]")
        raise typer.Exit(1)

    page_name = studly(name)
    if not page_name:
        console.print("[red]Page name cannot be empty.[/red]")
        raise typer.Exit(1)

    filament_version = resolve_filament_version(filament, no_interaction)
    if filament_version is None:
        raise typer.Exit(1)

    if not force:
        for label, existing in zip(("Page class", "View"), page_paths(plugin_path, page_name)):
            if existing.exists():
                console.print(
                    f"[red]{label} already exists: {bracketed(existing)}. Use --force to overwrite.[/red]"
                )
                raise typer.Exit(1)

    class_file, view_file, class_fqn = write_page_files(
        plugin_path, meta, page_name, filament_version, panel
    )

    console.print(f"[green]Filament page {bracketed(class_fqn)} created successfully.[/green]")
    console.print(f"  Class: {class_file}")
    console.print(f"  View:  {view_file}")

    should_register = register or (
        not no_interaction and typer.confirm("Register this page in the Plugin class?", default=False)
    )
    if should_register:
        _report_registration(PluginPageRegistrar(plugin_path).register(class_fqn))


__all__ = ["page", "page_paths", "write_page_files"]
