"""``filament-plugin submit`` -- guide a plugin submission to filamentphp.com.

The wizard never touches the filamentphp.com clone itself. It prints the
content files to create and the git commands to run, pausing between steps.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from typing import Any, Optional

import typer

from filament_plugin_cli.cli.helpers import bracketed, console, get_config
from filament_plugin_cli.cli.ui import press_enter, select_with_arrows
from filament_plugin_cli.core.config import ToolConfig
from filament_plugin_cli.plugins import discover_plugins
from filament_plugin_cli.submit import (
    VALID_CATEGORIES,
    AuthorProfile,
    PluginListing,
    commit_paths,
    parse_categories,
    parse_versions,
    resolve_author_defaults,
    submit_defaults_from_composer,
)

FORK_URL = "https://github.com/filamentphp/filamentphp.com"
MANUAL_ENTRY = "__none__"


@dataclass
class WizardState:
    selected_plugin_slug: str | None = None
    selected_plugin_composer: dict[str, Any] = field(default_factory=dict)
    branch: str = ""
    author_slug: str = ""
    is_new_author: bool = True
    plugin_slug: str = ""
    plugin_name: str = ""

    @property
    def default_branch(self) -> str:
        if self.selected_plugin_slug:
            return f"add-{self.selected_plugin_slug}"
        return "add-my-plugin"


def _literal(text: str = "") -> None:
    console.print(text, markup=False, highlight=False)


def resolve_repo_path(repo: str | None, config: ToolConfig) -> Path:
    """``--repo`` first, then the configured fork path, then the current directory."""
    candidate = repo or config.filamentphp_fork_path
    if candidate:
        return Path(candidate).expanduser().resolve()
    return Path.cwd()


class SubmitWizard:
    """Walk through the filamentphp.com submission steps."""

    def __init__(self, config: ToolConfig, repo_path: Path):
        self.config = config
        self.repo_path = repo_path
        self.state = WizardState()

    def run(self) -> None:
        console.print("[cyan]Plugin Submit Wizard - filamentphp.com[/cyan]")
        _literal(f"Repository path: {self.repo_path}")
        console.print()

        self.step_fork()
        self.step_clone()
        self.step_select_plugin()
        self.step_branch()
        self.step_author()
        self.step_plugin_data()
        self.step_commit_and_push()
        self.step_open_pr()

        console.print()
        console.print("[green]Wizard finished.[/green]")

    def step_fork(self) -> None:
        if typer.confirm(
            "Have you already forked the filamentphp.com repository to your GitHub account?",
            default=True,
        ):
            return
        _literal("You need a fork to submit changes via Pull Request.")
        _literal(f"URL: {FORK_URL}")
        _literal("Click Fork and create the fork in your account.")
        press_enter()

    def step_clone(self) -> None:
        if typer.confirm(
            "Have you already cloned the repository (in this directory or elsewhere)?",
            default=True,
        ):
            return
        _literal("You need your fork's code locally to edit files.")
        _literal("Run (replace YOUR_USERNAME with your GitHub username):")
        _literal("  git clone https://github.com/YOUR_USERNAME/filamentphp.com.git")
        _literal("  cd filamentphp.com")
        press_enter()

    def step_select_plugin(self) -> None:
        plugins = discover_plugins(self.config.packages_dir)
        if not plugins:
            _literal("No Filament plugins found in packages path. You will enter plugin data manually.")
            return

        options = {MANUAL_ENTRY: "(None - I'll enter everything manually)"}
        for plugin in plugins:
            options[str(plugin.path)] = plugin.label

        choice = select_with_arrows(options, "Which plugin do you want to submit?", console=console)
        if choice == MANUAL_ENTRY:
            return

        selected = next((p for p in plugins if str(p.path) == choice), None)
        if selected is None:
            return
        self.state.selected_plugin_slug = selected.slug
        self.state.selected_plugin_composer = selected.composer
        console.print(
            f"[green]Selected: {bracketed(selected.name)}; branch will default to add-{selected.slug}[/green]"
        )

    def step_branch(self) -> None:
        default_branch = self.state.default_branch
        branch = typer.prompt(
            f"Branch name (a new branch will be created with: git checkout -b {default_branch})",
            default=default_branch,
        )
        self.state.branch = branch.strip() or default_branch

        _literal("In your filamentphp.com clone, run:")
        _literal(f"  git checkout -b {self.state.branch}")
        _literal("(A separate branch keeps main clean and makes opening the Pull Request easier.)")
        press_enter()

    def step_author(self) -> None:
        defaults = resolve_author_defaults(self.config)
        has_authors = (self.repo_path / "content" / "authors").is_dir()

        if has_authors and typer.confirm("Do you already have an author file in content/authors/?", default=False):
            self.state.author_slug = typer.prompt(
                "What is your author slug? (e.g. alessandro-nuunes)", default=defaults.slug
            )
            self.state.is_new_author = False
            _literal(
                f"Ensure your avatar is at content/authors/avatars/{self.state.author_slug}.jpg "
                "(square, min 1000x1000 px, JPEG)."
            )
            return

        self.state.is_new_author = True
        _literal("Create your author profile. Values are prefilled from your configuration.")
        console.print()
        profile = AuthorProfile(
            name=typer.prompt("Full name", default=defaults.full_name),
            slug=typer.prompt("Author slug (e.g. alessandro-nuunes)", default=defaults.slug),
            github_url=typer.prompt("GitHub URL (e.g. https://github.com/username)", default=defaults.github_url),
            twitter=typer.prompt("Twitter (optional, leave blank to skip)", default=self.config.author_twitter or ""),
            mastodon=typer.prompt("Mastodon (optional)", default=self.config.author_mastodon or ""),
            sponsor=typer.prompt("Sponsor URL (optional)", default=self.config.author_sponsor_url or ""),
            bio=typer.prompt("Short bio (one or two sentences)", default=self.config.author_bio or ""),
        )

        _literal(f"Create this file in your clone: {self.repo_path / 'content' / 'authors' / (profile.slug + '.md')}")
        _literal(profile.render())
        _literal("This file is required by Contributing to link the plugin to an author.")
        _literal(
            f"Place your avatar at content/authors/avatars/{profile.slug}.jpg (square, min 1000x1000 px, JPEG)."
        )
        self.state.author_slug = profile.slug
        press_enter("When ready, press ENTER to continue")

    def step_plugin_data(self) -> None:
        if not self.state.author_slug:
            self.state.author_slug = typer.prompt("What is your author slug?", default="")
        author_slug = self.state.author_slug

        defaults = submit_defaults_from_composer(self.state.selected_plugin_composer)

        name = typer.prompt('Plugin name (without "Filament", e.g. Member Management)', default=defaults.name)
        slug_part = typer.prompt(
            f"Plugin slug part (e.g. member -> full slug: {author_slug}-member)", default=defaults.slug_part
        )
        _literal("Valid categories: " + ", ".join(VALID_CATEGORIES))
        categories = parse_categories(
            typer.prompt("Categories (comma-separated, e.g. panel-builder, table-builder)", default="")
        )
        description = typer.prompt("Description (one clear sentence)", default=defaults.description)
        docs_url = typer.prompt(
            "docs_url (raw README URL, e.g. https://raw.githubusercontent.com/user/repo/main/README.md)",
            default=defaults.docs_url,
        )
        github_repository = typer.prompt("github_repository (username/repo)", default=defaults.github_repository)
        has_dark_theme = typer.confirm("has_dark_theme?", default=False)
        has_translations = typer.confirm("has_translations?", default=False)
        versions = parse_versions(typer.prompt("Filament versions (comma-separated, e.g. 4, 5)", default="4, 5"))
        publish_date = typer.prompt("publish_date (YYYY-MM-DD)", default=date.today().isoformat())

        listing = PluginListing(
            name=name,
            author_slug=author_slug,
            slug_part=slug_part,
            categories=categories,
            description=description,
            docs_url=docs_url,
            github_repository=github_repository,
            has_dark_theme=has_dark_theme,
            has_translations=has_translations,
            versions=versions,
            publish_date=publish_date,
        )
        self.state.plugin_slug = listing.slug
        self.state.plugin_name = listing.name

        _literal(f"Create this file in your clone: {self.repo_path / 'content' / 'plugins' / listing.filename}")
        _literal(listing.render())
        _literal("This file is what the site uses to list your plugin.")
        _literal(
            f"Add the plugin image at content/plugins/images/{listing.slug}.jpg "
            "(16:9, min 2560x1440 px, JPEG, light theme)."
        )
        press_enter("When the image is in place (or to skip for now), press ENTER to continue")

    def step_commit_and_push(self) -> None:
        paths = commit_paths(self.state.author_slug, self.state.plugin_slug, self.state.is_new_author)
        if self.state.is_new_author:
            file_info = "4 files (author, avatar, plugin, image)"
        else:
            file_info = "2 files (plugin + image, author already exists)"

        _literal(f"You will commit {file_info}.")
        console.print()
        _literal("In your filamentphp.com clone, run these commands in order:")
        console.print()
        _literal(f"  cd {self.repo_path}")
        _literal("  git add " + " ".join(paths))
        _literal("  git status   # optional: check what is staged")
        _literal(f'  git commit -m "Add plugin: {self.state.plugin_name}"')
        _literal(f"  git push -u origin {self.state.branch}")
        console.print()
        _literal("(Push sends your branch to your fork and sets upstream for the PR.)")

    def step_open_pr(self) -> None:
        console.print()
        console.print("[cyan]Open the Pull Request[/cyan]")
        for line in (
            f"1. Open: {FORK_URL}/compare (or \"Compare & pull request\" on your fork).",
            "2. Base: filamentphp/filamentphp.com branch main; compare: your fork, your branch.",
            '3. Important: Enable "Allow edits and access to secrets by maintainers" '
            "(otherwise the team cannot complete the review).",
            "4. Fill in PR title and description clearly.",
            "",
            "After opening the PR, wait for review. See PLUGIN_REVIEW_GUIDELINES.md for common scenarios.",
            "",
            "Quality checklist:",
            "  [ ] Author: file in content/authors/ and avatar in content/authors/avatars/ (1000x1000, square, JPEG).",
            "  [ ] Plugin: file in content/plugins/ and image in content/plugins/images/ "
            "(16:9, >=2560x1440, JPEG, light theme).",
            '  [ ] Plugin name does not include the word "Filament".',
            "  [ ] Categories are from the official list only.",
            "  [ ] docs_url is a raw URL; README images use absolute URLs.",
            "  [ ] Plugin is on GitHub and installable via Packagist or Anystack; public documentation.",
            '  [ ] PR has "Allow edits and access to secrets by maintainers" enabled.',
        ):
            _literal(line)


def submit(
    ctx: typer.Context,
    repo: Optional[str] = typer.Option(
        None, "--repo", help="Path to your filamentphp.com clone (default: current directory)"
    ),
    no_interaction: bool = typer.Option(False, "--no-interaction", "-n", help="Not supported by this command"),
) -> None:
    """Interactive wizard to submit a plugin to filamentphp.com."""
    if no_interaction:
        console.print("[red]This command is interactive only. Run without --no-interaction.[/red]")
        raise typer.Exit(1)

    config = get_config(ctx)
    repo_path = resolve_repo_path(repo, config)
    if not repo_path.is_dir():
        console.print(
            f"[red]Repository path does not exist or is not a directory: {bracketed(repo_path)}[/red]"
        )
        raise typer.Exit(1)

    SubmitWizard(config, repo_path).run()


__all__ = ["SubmitWizard", "WizardState", "resolve_repo_path", "submit"]
