"""Filament version selection and composer constraint mapping."""

from __future__ import annotations

import re

FILAMENT_VERSION_CHOICES: dict[str, str] = {
    "3": "3",
    "4": "4",
    "5": "5",
    "4|5": "4 | 5 (compatible with both)",
}

DEFAULT_FILAMENT_VERSION = "4|5"

_CONSTRAINTS = {
    "3": "^3.0",
    "4": "^4.0",
    "5": "^5.0",
    "4|5": "^4.0|^5.0",
}


def normalize_filament_version(raw: str | None) -> str | None:
    """Normalize a ``--filament`` value to ``3``, ``4``, ``5`` or ``4|5``.

    Returns None for blank or unrecognised input.
    """
    if raw is None:
        return None
    value = re.sub(r"\s", "", raw.lower())
    if not value:
        return None
    if value in ("3", "4", "5"):
        return value
    if "4" in value and "5" in value:
        return "4|5"
    return None


def filament_constraint(version: str | None) -> str:
    return _CONSTRAINTS.get(version or "", _CONSTRAINTS[DEFAULT_FILAMENT_VERSION])


def page_stub_version(version: str) -> str:
    """Page stubs exist per major version; ``4|5`` uses the v5 layout."""
    return "5" if version == "4|5" else version


__all__ = [
    "DEFAULT_FILAMENT_VERSION",
    "FILAMENT_VERSION_CHOICES",
    "filament_constraint",
    "normalize_filament_version",
    "page_stub_version",
]
