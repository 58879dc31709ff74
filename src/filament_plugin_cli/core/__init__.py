"""Core helpers: configuration, naming and Filament version handling."""

from .config import ConfigError, ToolConfig, load_config
from .naming import is_pascal_case, kebab, slugify, split_camel, studly
from .versions import (
    FILAMENT_VERSION_CHOICES,
    filament_constraint,
    normalize_filament_version,
    page_stub_version,
)

__all__ = [
    "ConfigError",
    "FILAMENT_VERSION_CHOICES",
    "ToolConfig",
    "filament_constraint",
    "is_pascal_case",
    "kebab",
    "load_config",
    "normalize_filament_version",
    "page_stub_version",
    "slugify",
    "split_camel",
    "studly",
]
