"""Location of the stub templates shipped with the package."""

from __future__ import annotations

import importlib.resources
import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)

STUBS_ENV = "FILAMENT_PLUGIN_STUBS"


def get_stubs_root() -> Path:
    """Return the directory holding ``*.stub`` files.

    Resolution order:
    1. ``FILAMENT_PLUGIN_STUBS`` environment variable, when it names a directory
    2. ``importlib.resources.files("filament_plugin_cli") / "stubs"``
    """
    if env_root := os.environ.get(STUBS_ENV):
        candidate = Path(env_root).expanduser()
        if candidate.is_dir():
            return candidate
        logger.warning("%s set to %s, but it is not a directory. Ignoring.", STUBS_ENV, candidate)

    return Path(str(importlib.resources.files("filament_plugin_cli").joinpath("stubs")))


def stub_path(name: str) -> Path:
    """Return the path of stub *name* (e.g. ``"composer.stub"``, ``"page/PageView.Filament5.stub"``)."""
    return get_stubs_root() / name


def page_stub(kind: str, version: str) -> Path:
    """Return the page stub for *kind* (``PageClass``/``PageView``) and Filament *version*.

    Falls back to the Filament 5 stub when no stub exists for *version*.
    """
    candidate = stub_path(f"page/{kind}.Filament{version}.stub")
    if candidate.is_file():
        return candidate
    logger.debug("No %s stub for Filament %s, using Filament 5", kind, version)
    return stub_path(f"page/{kind}.Filament5.stub")


__all__ = ["STUBS_ENV", "get_stubs_root", "page_stub", "stub_path"]
