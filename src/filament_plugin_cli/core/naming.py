"""Name derivation helpers shared by the scaffolding commands.

Plugin names arrive in PascalCase (``FilamentTabbedDashboard``) and are
turned into directory slugs, composer vendor names and author slugs.
"""

from __future__ import annotations

import re
import unicodedata

__all__ = [
    "is_pascal_case",
    "kebab",
    "slugify",
    "split_camel",
    "studly",
]

_PASCAL_RE = re.compile(r"^[A-Z][a-zA-Z0-9]+$")
_CAMEL_BOUNDARY_RE = re.compile(r"([a-z0-9])([A-Z])")


def is_pascal_case(value: str) -> bool:
    """Return True for names like ``FilamentMember``."""
    return bool(_PASCAL_RE.match(value))


def split_camel(value: str) -> str:
    """Insert a space at each lower-to-upper boundary (``AlessandroNuunes`` -> ``Alessandro Nuunes``)."""
    return re.sub(r"([a-z])([A-Z])", r"\1 \2", value)


def kebab(value: str) -> str:
    """Convert ``FilamentTabbedDashboard`` or ``Some Name`` to ``filament-tabbed-dashboard``."""
    value = _CAMEL_BOUNDARY_RE.sub(r"\1-\2", value.strip())
    value = re.sub(r"[\s_]+", "-", value)
    return re.sub(r"-+", "-", value).strip("-").lower()


def studly(value: str) -> str:
    """Convert ``my-page name`` or ``myPage`` to ``MyPageName`` / ``MyPage``."""
    value = _CAMEL_BOUNDARY_RE.sub(r"\1 \2", value.strip())
    words = re.split(r"[^A-Za-z0-9]+", value)
    return "".join(word[:1].upper() + word[1:] for word in words if word)


def slugify(value: str, sep: str = "-") -> str:
    """Lowercase ASCII slug; non-alphanumeric runs collapse into *sep*."""
    ascii_value = (
        unicodedata.normalize("NFKD", value).encode("ascii", "ignore").decode("ascii")
    )
    slug = re.sub(r"[^a-z0-9]+", sep, ascii_value.lower())
    return slug.strip(sep) if sep else slug
