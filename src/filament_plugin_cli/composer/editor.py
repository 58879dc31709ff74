"""Idempotent edits to a project's composer.json.

An editor instance covers a single session: load, apply edits, save once.
Edits only touch ``repositories`` and ``require``; every other key keeps
its value and position.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

DEFAULT_CONSTRAINT = "@dev"


def _has_url(repository: Any, url: str) -> bool:
    return isinstance(repository, dict) and repository.get("url", "") == url


def _next_repository_key(repositories: dict[str, Any]) -> str:
    """Next free numeric key, one past the highest numeric key in use."""
    key = max((int(name) for name in repositories if name.isdigit()), default=-1) + 1
    while str(key) in repositories:
        key += 1
    return str(key)


class ComposerJsonEditor:
    """Load, edit and save a composer.json document."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)
        self._data: dict[str, Any] = {}
        self._loaded = False
        self.load()

    @classmethod
    def for_project(cls, project_root: Path) -> "ComposerJsonEditor":
        return cls(Path(project_root) / "composer.json")

    def load(self) -> bool:
        """Read and parse the file. Returns True when it holds a JSON object."""
        self._data = {}
        self._loaded = False

        if not self.path.is_file():
            logger.debug("composer.json not found at %s", self.path)
            return False

        try:
            decoded = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
            logger.warning("Could not parse %s: %s", self.path, exc)
            return False

        if not isinstance(decoded, dict):
            logger.warning("Top level of %s is not an object", self.path)
            return False

        self._data = decoded
        self._loaded = True
        return True

    def is_valid(self) -> bool:
        return self._loaded

    @property
    def data(self) -> dict[str, Any]:
        return self._data

    def add_path_repository(self, url: str) -> None:
        """Append a symlinked path repository for *url* unless one exists."""
        if not self._loaded:
            return

        repositories = self._data.get("repositories")
        entry = {"type": "path", "url": url, "options": {"symlink": True}}

        # Composer also accepts repositories as an object keyed by name.
        if isinstance(repositories, dict):
            if not any(_has_url(repository, url) for repository in repositories.values()):
                repositories[_next_repository_key(repositories)] = entry
            return

        if not isinstance(repositories, list):
            repositories = []
        if any(_has_url(repository, url) for repository in repositories):
            return

        repositories.append(entry)
        self._data["repositories"] = repositories

    def add_require(self, package: str, constraint: str = DEFAULT_CONSTRAINT) -> None:
        """Require *package* at *constraint* unless it is already required.

        An existing constraint is never overwritten. After an insertion the
        whole ``require`` map is re-sorted by package name.
        """
        if not self._loaded:
            return

        require = self._data.get("require")
        if not isinstance(require, dict):
            require = {}

        if package in require:
            return

        require[package] = constraint
        self._data["require"] = dict(sorted(require.items()))

    def dumps(self) -> str:
        """Serialize the document the way composer formats it."""
        return json.dumps(self._data, indent=4, ensure_ascii=False) + "\n"

    def save(self) -> bool:
        """Write the document back. Returns False on any failure.

        An editor that never loaded successfully refuses to save so that a
        broken or missing file is not replaced with an empty document.
        """
        if not self._loaded:
            logger.warning("Refusing to save %s: it was not loaded successfully", self.path)
            return False

        try:
            encoded = self.dumps()
        except (TypeError, ValueError) as exc:
            logger.warning("Could not serialize %s: %s", self.path, exc)
            return False

        try:
            self.path.write_text(encoded, encoding="utf-8")
        except OSError as exc:
            logger.warning("Could not write %s: %s", self.path, exc)
            return False
        return True


__all__ = ["ComposerJsonEditor", "DEFAULT_CONSTRAINT"]
