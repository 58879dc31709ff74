"""Content files for a filamentphp.com plugin submission.

The site reads two markdown files with YAML frontmatter: an author profile
under ``content/authors/`` and a plugin listing under ``content/plugins/``.
Both are rendered here in the exact layout the site's existing entries use.
"""

from __future__ import annotations

import re
from datetime import date
from io import StringIO
from typing import Any

from pydantic import BaseModel, Field, field_validator
from ruamel.yaml import YAML
from ruamel.yaml.comments import CommentedMap, CommentedSeq
from ruamel.yaml.scalarstring import DoubleQuotedScalarString

VALID_CATEGORIES: tuple[str, ...] = (
    "action",
    "analytics",
    "developer-tool",
    "form-builder",
    "form-editor",
    "form-field",
    "form-layout",
    "icon-set",
    "infolist-entry",
    "kit",
    "panel-authentication",
    "panel-authorization",
    "panel-builder",
    "spatie",
    "table-builder",
    "table-column",
    "theme",
    "widget",
)

BIO_PLACEHOLDER = "Your bio here. Check grammar (e.g. Grammarly)."


def parse_categories(text: str) -> list[str]:
    """Split a comma-separated list, keeping only official categories."""
    entries = [part.strip() for part in text.split(",") if part.strip()]
    return [entry for entry in entries if entry in VALID_CATEGORIES]


def parse_versions(text: str) -> list[int]:
    """Parse ``"4, 5"`` into ``[4, 5]``; non-numeric entries become 0."""
    versions: list[int] = []
    for part in text.split(","):
        digits = re.match(r"\s*([+-]?\d+)", part)
        versions.append(int(digits.group(1)) if digits else 0)
    return versions


def normalize_slug_part(slug_part: str) -> str:
    return re.sub(r"^filament-", "", slug_part, flags=re.IGNORECASE)


def _flow(values: list) -> CommentedSeq:
    sequence = CommentedSeq(values)
    sequence.fa.set_flow_style()
    return sequence


def _frontmatter(fields: dict[str, Any]) -> str:
    """Dump *fields* as a ``---`` delimited YAML block, in insertion order."""
    yaml = YAML()
    yaml.width = 4096
    buffer = StringIO()
    yaml.dump(CommentedMap(fields), buffer)
    return "---\n" + buffer.getvalue() + "---\n"


class PluginListing(BaseModel):
    """Frontmatter of ``content/plugins/<slug>.md``."""

    name: str
    author_slug: str
    slug_part: str
    categories: list[str] = Field(default_factory=list)
    description: str = ""
    docs_url: str = ""
    github_repository: str = ""
    has_dark_theme: bool = False
    has_translations: bool = False
    versions: list[int] = Field(default_factory=lambda: [4, 5])
    publish_date: str = Field(default_factory=lambda: date.today().isoformat())

    @field_validator("categories")
    @classmethod
    def _official_categories_only(cls, value: list[str]) -> list[str]:
        return [category for category in value if category in VALID_CATEGORIES]

    @property
    def slug(self) -> str:
        return f"{self.author_slug}-{normalize_slug_part(self.slug_part)}"

    @property
    def filename(self) -> str:
        return f"{self.slug}.md"

    def render(self) -> str:
        return _frontmatter(
            {
                "name": DoubleQuotedScalarString(self.name),
                "slug": self.slug,
                "categories": _flow(self.categories),
                "description": DoubleQuotedScalarString(self.description),
                "docs_url": DoubleQuotedScalarString(self.docs_url),
                "github_repository": self.github_repository,
                "has_dark_theme": self.has_dark_theme,
                "has_translations": self.has_translations,
                "versions": _flow(self.versions),
                "publish_date": DoubleQuotedScalarString(self.publish_date),
            }
        )


class AuthorProfile(BaseModel):
    """Content of ``content/authors/<slug>.md``."""

    name: str
    slug: str
    github_url: str
    twitter: str = ""
    mastodon: str = ""
    sponsor: str = ""
    bio: str = ""

    def render(self) -> str:
        fields: dict[str, Any] = {"name": self.name, "slug": self.slug, "github_url": self.github_url}
        for key in ("twitter", "mastodon", "sponsor"):
            value = getattr(self, key)
            if value:
                fields[key] = value
        return _frontmatter(fields) + "\n" + (self.bio or BIO_PLACEHOLDER) + "\n"


def commit_paths(author_slug: str, plugin_slug: str, is_new_author: bool) -> list[str]:
    """Repository-relative files the submission commit must contain."""
    plugin_files = [
        f"content/plugins/{plugin_slug}.md",
        f"content/plugins/images/{plugin_slug}.jpg",
    ]
    if not is_new_author:
        return plugin_files
    return [
        f"content/authors/{author_slug}.md",
        f"content/authors/avatars/{author_slug}.jpg",
        *plugin_files,
    ]


__all__ = [
    "AuthorProfile",
    "BIO_PLACEHOLDER",
    "PluginListing",
    "VALID_CATEGORIES",
    "commit_paths",
    "normalize_slug_part",
    "parse_categories",
    "parse_versions",
]
