"""``filament-plugin make`` -- scaffold a new Filament plugin package.

Usage:
    filament-plugin make FilamentMember
    filament-plugin make FilamentMember --path packages --force
    filament-plugin make FilamentMember --no-interaction --filament 4

The command collects package metadata, renders the bundled stubs into
``<path>/<package-slug>/`` and optionally adds the new package to the host
project's composer.json.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Optional

import typer
from rich.markup import escape

from filament_plugin_cli.cli.helpers import (
    bracketed,
    console,
    get_config,
    register_plugin_in_composer,
    resolve_filament_version,
)
from filament_plugin_cli.cli.ui import StepTracker, select_with_arrows
from filament_plugin_cli.core.config import ToolConfig
from filament_plugin_cli.core.naming import is_pascal_case, kebab
from filament_plugin_cli.core.versions import DEFAULT_FILAMENT_VERSION, filament_constraint
from filament_plugin_cli.template import StubProcessor, stub_path

PLUGIN_TYPES = {
    "panel": "panel: for Panel (pages, resources, widgets, tenancy)",
    "standalone": "standalone: for reusable components (form fields, table columns)",
}

METADATA_STUBS = (
    ("gitignore.stub", ".gitignore"),
    ("pint.stub", "pint.json"),
    ("changelog.stub", "CHANGELOG.md"),
    ("license.stub", "LICENSE.md"),
    ("github-contributing.stub", ".github/CONTRIBUTING.md"),
    ("github-funding.stub", ".github/FUNDING.yml"),
    ("github-security.stub", ".github/SECURITY.md"),
)

EMAIL_FALLBACK = "the maintainer (see composer.json or README)"


@dataclass
class PluginData:
    """Answers collected for a new plugin."""

    name: str
    vendor: str
    package_slug: str
    description: str
    author_name: str
    author_email: str
    type: str = "panel"
    filament_version: str = DEFAULT_FILAMENT_VERSION
    with_config: bool = True
    with_views: bool = True
    with_translations: bool = True
    with_migrations: bool = False
    with_install_command: bool = True

    @property
    def vendor_slug(self) -> str:
        return kebab(self.vendor)

    @property
    def namespace(self) -> str:
        return f"{self.vendor}\\{self.name}"

    @property
    def composer_name(self) -> str:
        return f"{self.vendor_slug}/{self.package_slug}"

    @property
    def filament_constraint(self) -> str:
        return filament_constraint(self.filament_version)

    @property
    def is_panel(self) -> bool:
        return self.type == "panel"


def build_replacements(data: PluginData) -> dict[str, str]:
    return {
        "{{NAMESPACE}}": data.namespace,
        "{{NAMESPACE_ESCAPED}}": data.namespace.replace("\\", "\\\\"),
        "{{CLASS_NAME}}": data.name,
        "{{PLUGIN_ID}}": data.package_slug,
        "{{VENDOR_SLUG}}": data.vendor_slug,
        "{{PACKAGE_SLUG}}": data.package_slug,
        "{{COMPOSER_NAME}}": data.composer_name,
        "{{DESCRIPTION}}": data.description,
        "{{AUTHOR_NAME}}": data.author_name,
        "{{AUTHOR_EMAIL}}": data.author_email or EMAIL_FALLBACK,
        "{{CONFIG_KEY}}": data.package_slug,
        "{{FILAMENT_CONSTRAINT}}": data.filament_constraint,
        "{{YEAR}}": str(date.today().year),
    }


def build_sections(data: PluginData) -> dict[str, bool]:
    return {
        "CONFIG": data.with_config,
        "VIEWS": data.with_views,
        "TRANSLATIONS": data.with_translations,
        "MIGRATIONS": data.with_migrations,
        "INSTALL_COMMAND": data.with_install_command,
        "PANEL": data.is_panel,
    }


def plugin_directories(data: PluginData) -> list[str]:
    """Relative directories created for a plugin with the given options."""
    directories = ["src", "src/Support", ".github"]
    if data.with_config:
        directories.append("config")
    if data.with_views:
        directories += ["resources/views/filament/pages", "resources/views/livewire"]
    if data.with_translations:
        directories += ["resources/lang/en", "resources/lang/pt_BR"]
    if data.with_migrations:
        directories.append("database/migrations")
    if data.with_install_command:
        directories.append("src/Console/Commands")
    return directories


def plugin_files(data: PluginData) -> list[tuple[str, str, str]]:
    """``(step label, stub name, relative destination)`` for every rendered file."""
    files = [
        ("Generating composer.json", "composer.stub", "composer.json"),
        (
            "Generating ServiceProvider",
            "service-provider.stub",
            f"src/{data.name}ServiceProvider.php",
        ),
    ]
    if data.is_panel:
        files.append(("Generating Plugin class", "plugin.stub", f"src/{data.name}Plugin.php"))
    if data.with_config:
        files.append(("Generating config file", "config.stub", f"config/{data.package_slug}.php"))
    if data.with_translations:
        files.append(("Generating translation files", "lang-en.stub", "resources/lang/en/default.php"))
        files.append(
            ("Generating translation files", "lang-pt-br.stub", "resources/lang/pt_BR/default.php")
        )
    if data.with_install_command:
        files.append(
            (
                "Generating install command",
                "install-command.stub",
                "src/Console/Commands/InstallCommand.php",
            )
        )
    files.append(("Generating Support/ConfigHelper", "config-helper.stub", "src/Support/ConfigHelper.php"))
    files.append(("Generating README.md", "readme.stub", "README.md"))
    files += [("Generating metadata files", stub, target) for stub, target in METADATA_STUBS]
    return files


def scaffold_plugin(path: Path, data: PluginData, tracker: StepTracker | None = None) -> bool:
    """Create the directory tree and render every stub. Returns False if any stub failed."""
    tracker = tracker or StepTracker(data.composer_name)
    replacements = build_replacements(data)
    sections = build_sections(data)
    processor = StubProcessor()

    def create_directories() -> bool:
        for relative in plugin_directories(data):
            (path / relative).mkdir(parents=True, exist_ok=True)
        return True

    tracker.run("dirs", "Creating directory structure", create_directories)

    failed: set[str] = set()
    for label, stub, target in plugin_files(data):
        tracker.add(label, label)
        if processor.process(stub_path(stub), path / target, replacements, sections):
            if label not in failed:
                tracker.complete(label)
            continue
        console.print(f"[yellow]Stub {bracketed(stub)} not found at {bracketed(stub_path(stub))}.[/yellow]")
        failed.add(label)
        tracker.error(label, f"{stub} missing")

    return not tracker.failed


def _ask(prompt: str, default: str, no_interaction: bool) -> str:
    if no_interaction:
        return default
    return typer.prompt(prompt, default=default, show_default=bool(default))


def _confirm(prompt: str, default: bool, no_interaction: bool) -> bool:
    if no_interaction:
        return default
    return typer.confirm(prompt, default=default)


def collect_plugin_data(
    name: str,
    config: ToolConfig,
    plugin_type: Optional[str],
    filament: Optional[str],
    no_interaction: bool,
) -> PluginData | None:
    vendor = _ask("Vendor namespace (PascalCase)", config.default_vendor, no_interaction).strip()
    if not is_pascal_case(vendor):
        console.print("[red]Vendor namespace must be PascalCase (set default_vendor in filament-plugin.yaml).[/red]")
        return None
    package_slug = _ask("Package slug (kebab-case)", kebab(name), no_interaction)
    description = _ask("Short description", f"A Filament plugin for {name}.", no_interaction)
    author_name = _ask("Author name", config.default_author_name or vendor, no_interaction)
    author_email = _ask("Author email", config.default_author_email, no_interaction)

    if plugin_type is None:
        if no_interaction:
            plugin_type = "panel"
        else:
            console.print()
            console.print("  [bright_black]panel: adds pages, resources, widgets to a Filament panel (generates Plugin class).[/bright_black]")
            console.print("  [bright_black]standalone: reusable components (form fields, columns) for any context (no Plugin class).[/bright_black]")
            plugin_type = select_with_arrows(PLUGIN_TYPES, "Plugin type", default_key="panel", console=console)

    filament_version = resolve_filament_version(filament, no_interaction)
    if filament_version is None:
        return None

    return PluginData(
        name=name,
        vendor=vendor,
        package_slug=package_slug,
        description=description,
        author_name=author_name,
        author_email=author_email,
        type=plugin_type,
        filament_version=filament_version,
        with_config=_confirm("Include config file?", True, no_interaction),
        with_views=_confirm("Include views?", True, no_interaction),
        with_translations=_confirm("Include translations (en + pt_BR)?", True, no_interaction),
        with_migrations=_confirm("Include migrations directory?", False, no_interaction),
        with_install_command=_confirm("Include install command?", True, no_interaction),
    )


def print_next_steps(data: PluginData, registered: bool, base_path: str) -> None:
    console.print()
    console.print("[yellow]Next steps[/yellow]")
    console.print()

    step = 1
    if not registered:
        repository = (
            f'"repositories": [{{ "type": "path", "url": "{base_path}/{data.package_slug}", '
            '"options": { "symlink": true } }]'
        )
        require = f'"require": {{ "{data.composer_name}": "@dev" }}'
        console.print(f"  [cyan]{step}.[/cyan] Add path repository + require to [white]composer.json[/white]:")
        console.print(f"     [bright_black]{escape(repository)}[/bright_black]")
        console.print(f"     [bright_black]{escape(require)}[/bright_black]")
        step += 1
        console.print(f"  [cyan]{step}.[/cyan] composer update {data.composer_name}")
        step += 1

    plugin_class = f"{data.namespace}\\{data.name}Plugin"
    console.print(f"  [cyan]{step}.[/cyan] Register in PanelProvider: {escape(f'->plugins([{plugin_class}::make()])')}")
    if data.with_config:
        step += 1
        console.print(f'  [cyan]{step}.[/cyan] php artisan vendor:publish --tag="{data.package_slug}-config"')
    if data.with_migrations:
        step += 1
        console.print(
            f'  [cyan]{step}.[/cyan] php artisan vendor:publish --tag="{data.package_slug}-migrations" && php artisan migrate'
        )
    step += 1
    console.print(f"  [cyan]{step}.[/cyan] Add @source to panel theme CSS and run: npm run build")
    step += 1
    console.print(f"  [cyan]{step}.[/cyan] php artisan config:clear && php artisan view:clear")

    console.print()
    console.print("[green]Tip: plugin image[/green]")
    console.print("  See README for advice on choosing a screenshot that highlights your plugin.")
    console.print()


def make(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="The plugin name in PascalCase (e.g. FilamentMember)"),
    path: str = typer.Option("packages", "--path", help="Base path for the plugin directory"),
    force: bool = typer.Option(False, "--force", help="Overwrite if the directory already exists"),
    register: Optional[bool] = typer.Option(
        None,
        "--register/--no-register",
        help="Add plugin to project composer.json and run composer update (skips prompt)",
    ),
    plugin_type: Optional[str] = typer.Option(None, "--type", help="Plugin type: panel or standalone"),
    filament: Optional[str] = typer.Option(None, "--filament", help="Filament version (3, 4, 5, or 4|5)"),
    no_interaction: bool = typer.Option(False, "--no-interaction", "-n", help="Accept every default without prompting"),
) -> None:
    """Scaffold a new Filament plugin package."""
    config = get_config(ctx)

    if not is_pascal_case(name):
        console.print("[red]Plugin name must be PascalCase (e.g. FilamentMember).[/red]")
        raise typer.Exit(1)
    if plugin_type is not None and plugin_type not in PLUGIN_TYPES:
        console.print("[red]Option --type must be panel or standalone.[/red]")
        raise typer.Exit(1)

    data = collect_plugin_data(name, config, plugin_type, filament, no_interaction)
    if data is None:
        raise typer.Exit(1)

    plugin_path = config.project_root / path / data.package_slug
    if plugin_path.is_dir() and not force:
        console.print(f"[red]Directory {bracketed(plugin_path)} already exists. Use --force to overwrite.[/red]")
        raise typer.Exit(1)

    tracker = StepTracker(f"Scaffolding {data.composer_name}")
    ok = scaffold_plugin(plugin_path, data, tracker)
    console.print(tracker.render())

    if not ok:
        console.print("[red]Some files could not be generated.[/red]")
        raise typer.Exit(1)

    console.print()
    console.print(f"[green]Plugin {bracketed(data.composer_name)} created at {bracketed(plugin_path)}[/green]")

    registered = False
    if register is not False:
        should_register = register or (
            not no_interaction
            and typer.confirm("Add this plugin to the project's composer.json?", default=True)
        )
        if should_register:
            registered = register_plugin_in_composer(config, data.composer_name, f"{path}/{data.package_slug}")

    print_next_steps(data, registered, path)


__all__ = [
    "PluginData",
    "build_replacements",
    "build_sections",
    "make",
    "plugin_directories",
    "plugin_files",
    "scaffold_plugin",
]
