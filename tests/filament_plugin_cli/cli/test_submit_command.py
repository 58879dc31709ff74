"""Tests for the ``filament-plugin submit`` wizard."""

from __future__ import annotations

from pathlib import Path
from typing import Callable
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from filament_plugin_cli import app
from filament_plugin_cli.cli.commands.submit import WizardState, resolve_repo_path
from filament_plugin_cli.core.config import ToolConfig

runner = CliRunner()


def _lines(*answers: str) -> str:
    return "\n".join(answers) + "\n"


NEW_AUTHOR = (
    "Ana Lima",  # full name
    "ana",  # author slug
    "https://github.com/ana",  # github url
    "",  # twitter
    "",  # mastodon
    "",  # sponsor
    "Builds things.",  # bio
    "",  # press enter
)


@pytest.fixture()
def fork(tmp_path: Path) -> Path:
    repo = tmp_path / "filamentphp.com"
    repo.mkdir()
    return repo


def _submit(project: Path, fork: Path, answers: str):
    return runner.invoke(
        app, ["--project-root", str(project), "submit", "--repo", str(fork)], input=answers
    )


class TestSubmitWizard:
    def test_manual_entry_new_author(self, host_project: Path, fork: Path) -> None:
        answers = _lines(
            "",  # forked
            "",  # cloned
            "",  # branch (default)
            "",  # press enter
            *NEW_AUTHOR,
            "Member",  # plugin name
            "filament-member",  # slug part
            "panel-builder, nonsense",  # categories
            "Manage members.",  # description
            "",  # docs url
            "ana/member",  # github repository
            "n",  # dark theme
            "y",  # translations
            "",  # versions (4, 5)
            "2026-01-02",  # publish date
            "",  # press enter
        )

        result = _submit(host_project, fork, answers)

        assert result.exit_code == 0, result.output
        assert "No Filament plugins found" in result.output
        assert "git checkout -b add-my-plugin" in result.output
        assert "github_url: https://github.com/ana" in result.output
        assert "Builds things." in result.output
        assert "slug: ana-member" in result.output
        assert "categories: [panel-builder]" in result.output
        assert "has_translations: true" in result.output
        assert "versions: [4, 5]" in result.output
        assert "content/authors/avatars/ana.jpg" in result.output
        assert 'git commit -m "Add plugin: Member"' in result.output
        assert "Quality checklist" in result.output
        assert "Wizard finished" in result.output
        assert list(fork.iterdir()) == []

    def test_selected_plugin_prefills_defaults(
        self, host_project: Path, fork: Path, make_local_plugin: Callable[..., Path]
    ) -> None:
        plugin = make_local_plugin()
        (fork / "content" / "authors").mkdir(parents=True)
        answers = _lines(
            "",  # forked
            "",  # cloned
            "",  # branch (add-filament-member)
            "",  # press enter
            "y",  # author file exists
            "ana",  # author slug
            "",  # plugin name (Member)
            "",  # slug part (member)
            "",  # categories
            "",  # description
            "",  # docs url
            "",  # github repository
            "",  # dark theme
            "",  # translations
            "",  # versions
            "",  # publish date
            "",  # press enter
        )

        with patch(
            "filament_plugin_cli.cli.commands.submit.select_with_arrows", return_value=str(plugin)
        ) as select:
            result = _submit(host_project, fork, answers)

        assert result.exit_code == 0, result.output
        options = select.call_args.args[0]
        assert list(options)[0] == "__none__"
        assert "git checkout -b add-filament-member" in result.output
        assert 'name: "Member"' in result.output
        assert "slug: ana-member" in result.output
        assert "github_repository: acme/filament-member" in result.output
        assert "2 files" in result.output

    def test_manual_choice_skips_prefill(
        self, host_project: Path, fork: Path, make_local_plugin: Callable[..., Path]
    ) -> None:
        make_local_plugin()
        answers = _lines("", "", "", "", *NEW_AUTHOR, "X", "x", "", "", "", "", "", "", "", "", "")

        with patch("filament_plugin_cli.cli.commands.submit.select_with_arrows", return_value="__none__"):
            result = _submit(host_project, fork, answers)

        assert result.exit_code == 0, result.output
        assert "git checkout -b add-my-plugin" in result.output
        assert "slug: ana-x" in result.output

    def test_fork_and_clone_instructions(self, host_project: Path, fork: Path) -> None:
        answers = _lines(
            "n", "",  # not forked, press enter
            "n", "",  # not cloned, press enter
            "", "",
            *NEW_AUTHOR,
            "X", "x", "", "", "", "", "", "", "", "", "",
        )

        result = _submit(host_project, fork, answers)

        assert result.exit_code == 0, result.output
        assert "Click Fork" in result.output
        assert "git clone" in result.output

    def test_refuses_no_interaction(self, host_project: Path, fork: Path) -> None:
        result = runner.invoke(
            app, ["--project-root", str(host_project), "submit", "--repo", str(fork), "--no-interaction"]
        )
        assert result.exit_code == 1
        assert "interactive only" in result.output

    def test_missing_repo(self, host_project: Path, tmp_path: Path) -> None:
        result = runner.invoke(
            app, ["--project-root", str(host_project), "submit", "--repo", str(tmp_path / "missing")]
        )
        assert result.exit_code == 1
        assert "does not exist" in result.output


class TestRepoResolution:
    def test_option_wins(self, tmp_path: Path) -> None:
        config = ToolConfig(filamentphp_fork_path=str(tmp_path / "configured"))
        assert resolve_repo_path(str(tmp_path), config) == tmp_path.resolve()

    def test_configured_fork_path(self, tmp_path: Path) -> None:
        config = ToolConfig(filamentphp_fork_path=str(tmp_path))
        assert resolve_repo_path(None, config) == tmp_path.resolve()

    def test_cwd_fallback(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.chdir(tmp_path)
        assert resolve_repo_path(None, ToolConfig()) == Path.cwd()


def test_default_branch() -> None:
    assert WizardState().default_branch == "add-my-plugin"
    assert WizardState(selected_plugin_slug="filament-member").default_branch == "add-filament-member"
