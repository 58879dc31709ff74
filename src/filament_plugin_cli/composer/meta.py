"""Read identity information from a plugin's composer.json."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PluginComposerMeta:
    """Namespace and package name of a local plugin.

    Attributes:
        namespace: First PSR-4 namespace without trailing backslashes.
        composer_name: ``vendor/package`` name.
        view_namespace: Package part of the composer name (Blade view prefix).
    """

    namespace: str
    composer_name: str
    view_namespace: str

    @classmethod
    def from_path(cls, plugin_path: Path) -> "PluginComposerMeta | None":
        """Build from ``<plugin_path>/composer.json``; None when absent or unusable."""
        composer_file = Path(plugin_path) / "composer.json"
        if not composer_file.is_file():
            return None

        try:
            data = json.loads(composer_file.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
            logger.warning("Could not parse %s: %s", composer_file, exc)
            return None
        if not isinstance(data, dict):
            return None

        autoload = data.get("autoload")
        psr4 = autoload.get("psr-4") if isinstance(autoload, dict) else None
        if not isinstance(psr4, dict) or not psr4:
            return None

        namespace = str(next(iter(psr4))).rstrip("\\")
        composer_name = str(data.get("name") or "unknown/unknown")
        view_namespace = composer_name.split("/", 1)[1] if "/" in composer_name else composer_name
        return cls(namespace, composer_name, view_namespace)


__all__ = ["PluginComposerMeta"]
