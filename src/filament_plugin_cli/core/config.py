"""Tool configuration for filament-plugin commands.

Settings are resolved once per CLI invocation and passed explicitly to the
commands that need them. Resolution order (later wins):

1. Built-in defaults
2. User-global ``config.yaml`` (``$FILAMENT_PLUGIN_HOME`` or the platform
   config directory)
3. Project ``filament-plugin.yaml`` in the project root
4. ``FILAMENTPHP_FORK_PATH`` environment variable (fork path only)
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

logger = logging.getLogger(__name__)

PROJECT_CONFIG_FILENAME = "filament-plugin.yaml"
GLOBAL_CONFIG_FILENAME = "config.yaml"
FORK_PATH_ENV = "FILAMENTPHP_FORK_PATH"
HOME_ENV = "FILAMENT_PLUGIN_HOME"

ORIGIN_DEFAULT = "default"
ORIGIN_GLOBAL = "global"
ORIGIN_PROJECT = "project"
ORIGIN_ENV = "env"


class ConfigError(RuntimeError):
    """Raised when a configuration file cannot be parsed."""


@dataclass
class ToolConfig:
    """Resolved settings for one CLI invocation.

    Attributes:
        project_root: Host project directory (where composer.json lives).
        packages_path: Directory of local plugins, relative to project_root.
        filamentphp_fork_path: Default ``--repo`` for the submit wizard.
        default_vendor: Vendor namespace offered when creating plugins.
        default_author_name: Author name written into new composer.json files.
        default_author_email: Author email written into new composer.json files.
        author_*: Pre-fill values for the submit wizard's author profile.
    """

    project_root: Path = field(default_factory=Path.cwd)
    packages_path: str = "packages"
    filamentphp_fork_path: str | None = None
    default_vendor: str = ""
    default_author_name: str = ""
    default_author_email: str = ""
    author_full_name: str | None = None
    author_slug: str | None = None
    author_github_url: str | None = None
    author_twitter: str | None = None
    author_mastodon: str | None = None
    author_sponsor_url: str | None = None
    author_bio: str | None = None
    origins: dict[str, str] = field(default_factory=dict, repr=False, compare=False)

    @property
    def packages_dir(self) -> Path:
        return self.project_root / self.packages_path

    @property
    def author_name(self) -> str:
        """Configured author name, falling back to the vendor."""
        return self.default_author_name or self.default_vendor

    def settings(self) -> dict[str, Any]:
        """Return every user-settable value keyed by its config name."""
        return {name: getattr(self, name) for name in _SETTABLE}

    def origin_of(self, name: str) -> str:
        return self.origins.get(name, ORIGIN_DEFAULT)


_SETTABLE = tuple(
    f.name for f in fields(ToolConfig) if f.name not in ("project_root", "origins")
)


def get_config_home() -> Path:
    """Return the directory holding the user-global ``config.yaml``.

    ``$FILAMENT_PLUGIN_HOME`` takes precedence over the platform default.
    """
    if env_home := os.environ.get(HOME_ENV):
        return Path(env_home)

    from platformdirs import user_config_dir

    return Path(user_config_dir("filament-plugin"))


def _read_yaml_mapping(path: Path) -> dict[str, Any]:
    if not path.exists():
        return {}

    yaml = YAML(typ="safe")
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.load(f)
    except YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a mapping at the top of {path}")
    return data


def _apply(config: ToolConfig, data: dict[str, Any], origin: str, source: Path) -> None:
    for key, value in data.items():
        if key not in _SETTABLE:
            logger.warning("Ignoring unknown setting %r in %s", key, source)
            continue
        if value is None:
            continue
        setattr(config, key, str(value))
        config.origins[key] = origin


def load_config(project_root: Path | None = None) -> ToolConfig:
    """Build the layered configuration for *project_root* (default: cwd)."""
    root = (project_root or Path.cwd()).resolve()
    config = ToolConfig(project_root=root)

    global_file = get_config_home() / GLOBAL_CONFIG_FILENAME
    _apply(config, _read_yaml_mapping(global_file), ORIGIN_GLOBAL, global_file)

    project_file = root / PROJECT_CONFIG_FILENAME
    _apply(config, _read_yaml_mapping(project_file), ORIGIN_PROJECT, project_file)

    if fork_path := os.environ.get(FORK_PATH_ENV):
        config.filamentphp_fork_path = fork_path
        config.origins["filamentphp_fork_path"] = ORIGIN_ENV

    logger.debug("Resolved configuration for %s: %s", root, config.settings())
    return config


__all__ = [
    "ConfigError",
    "FORK_PATH_ENV",
    "HOME_ENV",
    "PROJECT_CONFIG_FILENAME",
    "ToolConfig",
    "get_config_home",
    "load_config",
]
