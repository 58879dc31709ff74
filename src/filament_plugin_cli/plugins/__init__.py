"""Local plugin discovery and source patching."""

from .discovery import DiscoveredPlugin, discover_plugins, resolve_plugin_path, to_slug
from .registrar import PluginPageRegistrar, RegistrationResult

__all__ = [
    "DiscoveredPlugin",
    "PluginPageRegistrar",
    "RegistrationResult",
    "discover_plugins",
    "resolve_plugin_path",
    "to_slug",
]
