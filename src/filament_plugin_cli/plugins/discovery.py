"""Locate local Filament plugins under the project's packages directory."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from filament_plugin_cli.core.naming import kebab

logger = logging.getLogger(__name__)

FILAMENT_PACKAGE = "filament/filament"


@dataclass
class DiscoveredPlugin:
    """A package directory whose composer.json requires Filament."""

    path: Path
    name: str
    slug: str
    composer: dict[str, Any] = field(default_factory=dict)

    @property
    def label(self) -> str:
        return f"{self.name} ({self.slug})"


def _requires_filament(data: dict[str, Any]) -> bool:
    for section in ("require", "require-dev"):
        requirements = data.get(section)
        if isinstance(requirements, dict) and FILAMENT_PACKAGE in requirements:
            return True
    return False


def discover_plugins(packages_dir: Path) -> list[DiscoveredPlugin]:
    """Return the Filament plugins directly under *packages_dir*, sorted by directory name."""
    packages_dir = Path(packages_dir)
    if not packages_dir.is_dir():
        return []

    plugins: list[DiscoveredPlugin] = []
    for directory in sorted(p for p in packages_dir.iterdir() if p.is_dir()):
        composer_file = directory / "composer.json"
        if not composer_file.is_file():
            continue

        try:
            data = json.loads(composer_file.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
            logger.debug("Skipping %s: %s", directory, exc)
            continue
        if not isinstance(data, dict) or not _requires_filament(data):
            continue

        plugins.append(
            DiscoveredPlugin(
                path=directory,
                name=str(data.get("name") or directory.name),
                slug=directory.name,
                composer=data,
            )
        )
    return plugins


def to_slug(plugin_name: str) -> str:
    """``FilamentTabbedDashboard`` -> ``filament-tabbed-dashboard``; slugs pass through."""
    return plugin_name if "-" in plugin_name else kebab(plugin_name)


def resolve_plugin_path(plugin_name: str, packages_dir: Path) -> Path | None:
    """Return the plugin directory when it exists and holds a composer.json."""
    path = Path(packages_dir) / to_slug(plugin_name)
    if not path.is_dir() or not (path / "composer.json").is_file():
        return None
    return path


__all__ = [
    "DiscoveredPlugin",
    "FILAMENT_PACKAGE",
    "discover_plugins",
    "resolve_plugin_path",
    "to_slug",
]
