"""Tests for ``filament-plugin make``."""

from __future__ import annotations

import json
from datetime import date
from pathlib import Path
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from filament_plugin_cli import app
from filament_plugin_cli.cli.commands.make_plugin import (
    PluginData,
    build_replacements,
    build_sections,
    plugin_directories,
    plugin_files,
)

runner = CliRunner()


@pytest.fixture()
def project(host_project: Path) -> Path:
    (host_project / "filament-plugin.yaml").write_text(
        "default_vendor: Acme\ndefault_author_email: dev@acme.test\n", encoding="utf-8"
    )
    return host_project


def _make(project: Path, *args: str, input: str | None = None):
    return runner.invoke(app, ["--project-root", str(project), "make", *args], input=input)


def _data(**overrides) -> PluginData:
    values = dict(
        name="FilamentMember",
        vendor="Acme",
        package_slug="filament-member",
        description="Members.",
        author_name="Acme",
        author_email="",
    )
    values.update(overrides)
    return PluginData(**values)


class TestPluginData:
    def test_derived_names(self) -> None:
        data = _data(vendor="AcmeCorp")
        assert data.vendor_slug == "acme-corp"
        assert data.namespace == "AcmeCorp\\FilamentMember"
        assert data.composer_name == "acme-corp/filament-member"
        assert data.filament_constraint == "^4.0|^5.0"

    def test_replacements(self) -> None:
        replacements = build_replacements(_data(filament_version="3"))
        assert replacements["{{NAMESPACE_ESCAPED}}"] == "Acme\\\\FilamentMember"
        assert replacements["{{FILAMENT_CONSTRAINT}}"] == "^3.0"
        assert replacements["{{AUTHOR_EMAIL}}"].startswith("the maintainer")
        assert replacements["{{YEAR}}"] == str(date.today().year)

    def test_sections_follow_flags(self) -> None:
        sections = build_sections(_data(type="standalone", with_views=False))
        assert sections["PANEL"] is False
        assert sections["VIEWS"] is False
        assert sections["CONFIG"] is True

    def test_standalone_has_no_plugin_class(self) -> None:
        targets = [target for _, _, target in plugin_files(_data(type="standalone"))]
        assert "src/FilamentMemberPlugin.php" not in targets
        assert "src/FilamentMemberServiceProvider.php" in targets

    def test_directories_follow_flags(self) -> None:
        directories = plugin_directories(_data(with_migrations=True, with_translations=False))
        assert "database/migrations" in directories
        assert "resources/lang/en" not in directories


class TestMakeCommand:
    def test_non_interactive_scaffold(self, project: Path) -> None:
        result = _make(project, "FilamentMember", "--no-interaction", "--filament", "4", "--no-register")

        assert result.exit_code == 0, result.output
        plugin = project / "packages" / "filament-member"
        composer = json.loads((plugin / "composer.json").read_text(encoding="utf-8"))
        assert composer["name"] == "acme/filament-member"
        assert composer["require"]["filament/filament"] == "^4.0"
        assert composer["authors"][0]["email"] == "dev@acme.test"
        assert list(composer["autoload"]["psr-4"]) == ["Acme\\FilamentMember\\"]

        assert (plugin / "src" / "FilamentMemberPlugin.php").is_file()
        assert (plugin / "src" / "FilamentMemberServiceProvider.php").is_file()
        assert (plugin / "config" / "filament-member.php").is_file()
        assert (plugin / "src" / "Console" / "Commands" / "InstallCommand.php").is_file()
        assert (plugin / "resources" / "lang" / "pt_BR" / "default.php").is_file()
        assert (plugin / ".github" / "FUNDING.yml").is_file()
        assert not (plugin / "database" / "migrations").exists()
        assert str(date.today().year) in (plugin / "LICENSE.md").read_text(encoding="utf-8")

        for generated in plugin.rglob("*"):
            if generated.is_file():
                assert "{{" not in generated.read_text(encoding="utf-8"), generated

        # composer.json of the host project is untouched with --no-register
        host = json.loads((project / "composer.json").read_text(encoding="utf-8"))
        assert "repositories" not in host
        assert "Next steps" in result.output

    def test_service_provider_sections(self, project: Path) -> None:
        _make(project, "FilamentMember", "--no-interaction", "--filament", "5", "--no-register")
        provider = (project / "packages" / "filament-member" / "src" / "FilamentMemberServiceProvider.php").read_text(
            encoding="utf-8"
        )
        assert "use Acme\\FilamentMember\\Console\\Commands\\InstallCommand;" in provider
        assert "mergeConfigFrom" in provider
        assert "loadMigrationsFrom" not in provider

    def test_filament_required_without_interaction(self, project: Path) -> None:
        result = _make(project, "FilamentMember", "--no-interaction", "--no-register")
        assert result.exit_code == 1
        assert "--filament is required" in result.output
        assert not (project / "packages").exists()

    def test_invalid_filament_value(self, project: Path) -> None:
        result = _make(project, "FilamentMember", "-n", "--filament", "2", "--no-register")
        assert result.exit_code == 1
        assert not (project / "packages").exists()

    def test_rejects_non_pascal_name(self, project: Path) -> None:
        result = _make(project, "filament-member", "-n", "--filament", "4")
        assert result.exit_code == 1
        assert "PascalCase" in result.output

    def test_requires_vendor(self, host_project: Path) -> None:
        result = _make(host_project, "FilamentMember", "-n", "--filament", "4", "--no-register")
        assert result.exit_code == 1
        assert "Vendor" in result.output

    def test_existing_directory_requires_force(self, project: Path) -> None:
        existing = project / "packages" / "filament-member"
        existing.mkdir(parents=True)
        (existing / "keep.txt").write_text("mine", encoding="utf-8")

        result = _make(project, "FilamentMember", "-n", "--filament", "4", "--no-register")
        assert result.exit_code == 1
        assert "already exists" in result.output

        result = _make(project, "FilamentMember", "-n", "--filament", "4", "--no-register", "--force")
        assert result.exit_code == 0, result.output
        assert (existing / "composer.json").is_file()
        assert (existing / "keep.txt").read_text(encoding="utf-8") == "mine"

    def test_register_updates_host_composer(self, project: Path) -> None:
        with patch("filament_plugin_cli.composer.runner.subprocess.run") as mock_run:
            mock_run.return_value.returncode = 0
            result = _make(project, "FilamentMember", "-n", "--filament", "4|5", "--register")

        assert result.exit_code == 0, result.output
        host = json.loads((project / "composer.json").read_text(encoding="utf-8"))
        assert host["repositories"] == [
            {"type": "path", "url": "packages/filament-member", "options": {"symlink": True}}
        ]
        assert host["require"]["acme/filament-member"] == "@dev"
        assert list(host["require"]) == sorted(host["require"])
        assert mock_run.call_args.args[0][:3] == ["composer", "update", "acme/filament-member"]

    def test_interactive_prompts(self, project: Path) -> None:
        answers = "\n".join(
            [
                "",  # vendor (Acme)
                "member-tools",  # package slug
                "",  # description
                "",  # author name
                "",  # author email
                "y",  # config
                "n",  # views
                "n",  # translations
                "y",  # migrations
                "n",  # install command
                "n",  # register
            ]
        ) + "\n"
        with patch("filament_plugin_cli.cli.commands.make_plugin.select_with_arrows", return_value="standalone"):
            result = _make(project, "FilamentMember", "--filament", "3", input=answers)

        assert result.exit_code == 0, result.output
        plugin = project / "packages" / "member-tools"
        assert (plugin / "database" / "migrations").is_dir()
        assert not (plugin / "src" / "FilamentMemberPlugin.php").exists()
        assert not (plugin / "resources" / "lang").exists()
        assert not (plugin / "src" / "Console").exists()
        composer = json.loads((plugin / "composer.json").read_text(encoding="utf-8"))
        assert composer["name"] == "acme/member-tools"
        assert composer["require"]["filament/filament"] == "^3.0"

    def test_missing_stub_fails(self, project: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        stubs = tmp_path / "custom-stubs"
        stubs.mkdir()
        (stubs / "composer.stub").write_text('{"name": "{{COMPOSER_NAME}}"}\n', encoding="utf-8")
        monkeypatch.setenv("FILAMENT_PLUGIN_STUBS", str(stubs))

        result = _make(project, "FilamentMember", "-n", "--filament", "4", "--no-register")

        assert result.exit_code == 1
        assert (project / "packages" / "filament-member" / "composer.json").is_file()
