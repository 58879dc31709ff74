"""Tests for PluginPageRegistrar and the pages-array line patcher."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

from filament_plugin_cli.plugins import PluginPageRegistrar, RegistrationResult
from filament_plugin_cli.plugins.registrar import insert_page_entry

from tests.utils import PLUGIN_CLASS

FQN = "Acme\\FilamentMember\\Pages\\Dashboard"
ENTRY = "            \\Acme\\FilamentMember\\Pages\\Dashboard::class,\n"


class TestInsertPageEntry:
    def test_closer_on_own_line(self) -> None:
        content = "        $panel\n            ->pages([\n            ]);\n"
        assert insert_page_entry(content, FQN) == (
            "        $panel\n            ->pages([\n" + ENTRY + "            ]);\n"
        )

    def test_existing_entries_are_kept(self) -> None:
        content = "->pages([\n            \\A\\B::class,\n        ])\n"
        updated = insert_page_entry(content, FQN)
        assert updated == "->pages([\n            \\A\\B::class,\n" + ENTRY + "        ])\n"

    def test_last_entry_without_comma_gets_one(self) -> None:
        content = "->pages([\n            \\A\\B::class\n\n        ])\n"
        updated = insert_page_entry(content, FQN)
        assert updated == "->pages([\n            \\A\\B::class,\n\n" + ENTRY + "        ])\n"

    def test_inline_empty_array(self) -> None:
        content = "        $panel->pages([]);\n"
        assert insert_page_entry(content, FQN) == "        $panel->pages([\n" + ENTRY + "        ]);\n"

    def test_inline_array_with_entry_gets_comma(self) -> None:
        content = "$panel->pages([\\A\\B::class]);\n"
        assert insert_page_entry(content, FQN) == "$panel->pages([\\A\\B::class,\n" + ENTRY + "        ]);\n"

    def test_no_closer(self) -> None:
        assert insert_page_entry("->pages([\n    \\A\\B::class,\n", FQN) is None

    def test_no_opener(self) -> None:
        assert insert_page_entry("->widgets([])\n", FQN) is None


class TestPluginPageRegistrar:
    def test_registers_page(self, make_local_plugin: Callable[..., Path]) -> None:
        plugin_path = make_local_plugin()
        registrar = PluginPageRegistrar(plugin_path)

        assert registrar.has_pages_array()
        assert not registrar.uses_discover_pages()
        assert registrar.register(FQN) is RegistrationResult.REGISTERED

        content = (plugin_path / "src" / "FilamentMemberPlugin.php").read_text(encoding="utf-8")
        assert ENTRY in content
        assert content.count("Dashboard::class") == 1

    def test_second_registration_is_noop(self, make_local_plugin: Callable[..., Path]) -> None:
        registrar = PluginPageRegistrar(make_local_plugin())
        registrar.register(FQN)

        result = registrar.register(FQN)
        assert result is RegistrationResult.ALREADY_REGISTERED
        assert result.ok

    def test_discover_pages(self, make_local_plugin: Callable[..., Path]) -> None:
        plugin_class = PLUGIN_CLASS.replace("->pages([\n            ]);", "->discoverPages(in: __DIR__, for: 'X');")
        plugin_path = make_local_plugin(plugin_class=plugin_class)
        before = (plugin_path / "src" / "FilamentMemberPlugin.php").read_text(encoding="utf-8")

        assert PluginPageRegistrar(plugin_path).register(FQN) is RegistrationResult.DISCOVERS_PAGES
        assert (plugin_path / "src" / "FilamentMemberPlugin.php").read_text(encoding="utf-8") == before

    def test_no_pages_array(self, make_local_plugin: Callable[..., Path]) -> None:
        plugin_class = PLUGIN_CLASS.replace("->pages([\n            ]);", ";")
        result = PluginPageRegistrar(make_local_plugin(plugin_class=plugin_class)).register(FQN)
        assert result is RegistrationResult.NO_PAGES_ARRAY
        assert not result.ok

    def test_no_plugin_file(self, make_local_plugin: Callable[..., Path]) -> None:
        registrar = PluginPageRegistrar(make_local_plugin(plugin_class=None))
        assert registrar.find_plugin_file() is None
        assert registrar.register(FQN) is RegistrationResult.NO_PLUGIN_FILE

    def test_no_insertion_point(self, make_local_plugin: Callable[..., Path]) -> None:
        plugin_class = "<?php\n$panel->pages([\n    \\A\\B::class,\n"
        result = PluginPageRegistrar(make_local_plugin(plugin_class=plugin_class)).register(FQN)
        assert result is RegistrationResult.NO_INSERTION_POINT
