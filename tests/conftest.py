from __future__ import annotations

from pathlib import Path
from typing import Callable, Iterator

import pytest

from filament_plugin_cli.core.config import FORK_PATH_ENV, HOME_ENV
from filament_plugin_cli.template.stubs import STUBS_ENV
from tests.utils import PLUGIN_CLASS, write_json


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Keep the user's global config and env overrides out of every test."""
    home = tmp_path / "_filament_plugin_home"
    monkeypatch.setenv(HOME_ENV, str(home))
    monkeypatch.delenv(FORK_PATH_ENV, raising=False)
    monkeypatch.delenv(STUBS_ENV, raising=False)
    yield home


@pytest.fixture()
def host_project(tmp_path: Path) -> Path:
    """A Laravel host project with a minimal composer.json."""
    project = tmp_path / "app"
    write_json(
        project / "composer.json",
        {
            "name": "laravel/laravel",
            "type": "project",
            "require": {"php": "^8.2", "laravel/framework": "^11.0"},
            "minimum-stability": "stable",
        },
    )
    return project


@pytest.fixture()
def make_local_plugin(host_project: Path) -> Callable[..., Path]:
    """Factory creating ``packages/<slug>`` plugins inside the host project."""

    def _make(
        slug: str = "filament-member",
        composer_name: str = "acme/filament-member",
        namespace: str = "Acme\\FilamentMember\\",
        plugin_class: str | None = PLUGIN_CLASS,
        requires_filament: bool = True,
    ) -> Path:
        plugin_path = host_project / "packages" / slug
        require = {"php": "^8.2"}
        if requires_filament:
            require["filament/filament"] = "^4.0|^5.0"
        write_json(
            plugin_path / "composer.json",
            {
                "name": composer_name,
                "description": "Member management for Filament",
                "require": require,
                "autoload": {"psr-4": {namespace: "src/"}},
                "support": {"source": f"https://github.com/acme/{slug}"},
            },
        )
        if plugin_class is not None:
            class_name = namespace.rstrip("\\").rsplit("\\", 1)[-1]
            (plugin_path / "src").mkdir(parents=True, exist_ok=True)
            (plugin_path / "src" / f"{class_name}Plugin.php").write_text(plugin_class, encoding="utf-8")
        return plugin_path

    return _make
