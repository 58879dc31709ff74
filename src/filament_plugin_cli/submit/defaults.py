"""Pre-fill values for the filamentphp.com submit wizard."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

from filament_plugin_cli.core.config import ToolConfig
from filament_plugin_cli.core.naming import slugify, split_camel

_GITHUB_SOURCE_RE = re.compile(r"github\.com/([^/]+)/([^/]+?)(?:\.git)?/?$")


@dataclass(frozen=True)
class AuthorDefaults:
    full_name: str
    slug: str
    github_url: str


@dataclass(frozen=True)
class SubmitDefaults:
    name: str = ""
    slug_part: str = ""
    description: str = ""
    docs_url: str = ""
    github_repository: str = ""


def resolve_author_defaults(config: ToolConfig) -> AuthorDefaults:
    """Derive the author profile defaults from explicit settings or the author name."""
    vendor = config.default_vendor
    author_name = config.author_name

    full_name = config.author_full_name or split_camel(author_name)
    slug = config.author_slug or slugify(split_camel(author_name))
    github_url = config.author_github_url or "https://github.com/" + slugify(
        vendor or author_name, sep=""
    )
    return AuthorDefaults(full_name=full_name, slug=slug, github_url=github_url)


def submit_defaults_from_composer(composer: dict[str, Any] | None) -> SubmitDefaults:
    """Extract listing defaults from a plugin's composer.json data."""
    if not isinstance(composer, dict):
        return SubmitDefaults()

    description = str(composer.get("description") or "")

    slug_part = ""
    package_name = str(composer.get("name") or "")
    if "/" in package_name:
        slug_part = re.sub(r"^filament-", "", package_name.split("/")[1], flags=re.IGNORECASE)
    name = " ".join(word[:1].upper() + word[1:] for word in slug_part.replace("-", " ").split(" "))

    support = composer.get("support")
    source = support.get("source") if isinstance(support, dict) else None
    source = str(source or composer.get("homepage") or "")

    docs_url = ""
    github_repository = ""
    if match := _GITHUB_SOURCE_RE.search(source):
        user, repo = match.group(1), match.group(2).strip("/")
        github_repository = f"{user}/{repo}"
        docs_url = f"https://raw.githubusercontent.com/{user}/{repo}/main/README.md"

    return SubmitDefaults(
        name=name,
        slug_part=slug_part,
        description=description,
        docs_url=docs_url,
        github_repository=github_repository,
    )


__all__ = [
    "AuthorDefaults",
    "SubmitDefaults",
    "resolve_author_defaults",
    "submit_defaults_from_composer",
]
