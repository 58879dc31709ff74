"""Helpers for submitting a plugin to the filamentphp.com directory."""

from .defaults import (
    AuthorDefaults,
    SubmitDefaults,
    resolve_author_defaults,
    submit_defaults_from_composer,
)
from .listing import (
    VALID_CATEGORIES,
    AuthorProfile,
    PluginListing,
    commit_paths,
    parse_categories,
    parse_versions,
)

__all__ = [
    "AuthorDefaults",
    "AuthorProfile",
    "PluginListing",
    "SubmitDefaults",
    "VALID_CATEGORIES",
    "commit_paths",
    "parse_categories",
    "parse_versions",
    "resolve_author_defaults",
    "submit_defaults_from_composer",
]
