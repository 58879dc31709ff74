"""Terminal widgets for filament-plugin: a step tree and an arrow-key picker."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Mapping, TypeVar

import readchar
import typer
from rich.console import Console
from rich.live import Live
from rich.panel import Panel
from rich.table import Table
from rich.tree import Tree

T = TypeVar("T")

PENDING = "pending"
RUNNING = "running"
DONE = "done"
ERROR = "error"
SKIPPED = "skipped"

_SYMBOLS = {
    DONE: "[green]●[/green]",
    PENDING: "[green dim]○[/green dim]",
    RUNNING: "[cyan]○[/cyan]",
    ERROR: "[red]●[/red]",
    SKIPPED: "[yellow]○[/yellow]",
}


@dataclass
class Step:
    key: str
    label: str
    status: str = PENDING
    detail: str = ""

    def line(self) -> str:
        symbol = _SYMBOLS.get(self.status, " ")
        detail = self.detail.strip()
        if self.status == PENDING:
            text = f"{self.label} ({detail})" if detail else self.label
            return f"{symbol} [bright_black]{text}[/bright_black]"
        suffix = f" [bright_black]({detail})[/bright_black]" if detail else ""
        return f"{symbol} [white]{self.label}[/white]{suffix}"


class StepTracker:
    """Ordered scaffolding steps, rendered as a Rich tree once work is done."""

    def __init__(self, title: str):
        self.title = title
        self.steps: list[Step] = []

    def _find(self, key: str) -> Step | None:
        return next((step for step in self.steps if step.key == key), None)

    def add(self, key: str, label: str) -> None:
        if self._find(key) is None:
            self.steps.append(Step(key, label))

    def _set(self, key: str, status: str, detail: str) -> None:
        step = self._find(key)
        if step is None:
            step = Step(key, key)
            self.steps.append(step)
        step.status = status
        if detail:
            step.detail = detail

    def start(self, key: str, detail: str = "") -> None:
        self._set(key, RUNNING, detail)

    def complete(self, key: str, detail: str = "") -> None:
        self._set(key, DONE, detail)

    def error(self, key: str, detail: str = "") -> None:
        self._set(key, ERROR, detail)

    def skip(self, key: str, detail: str = "") -> None:
        self._set(key, SKIPPED, detail)

    def run(self, key: str, label: str, action: Callable[[], T]) -> T:
        """Run *action* as step *key*. A ``False`` result or an exception marks it failed."""
        self.add(key, label)
        self.start(key)
        try:
            result = action()
        except Exception as exc:
            self.error(key, str(exc))
            raise
        if result is False:
            self.error(key, "failed")
        else:
            self.complete(key)
        return result

    @property
    def failed(self) -> bool:
        return any(step.status == ERROR for step in self.steps)

    def render(self) -> Tree:
        tree = Tree(f"[cyan]{self.title}[/cyan]", guide_style="grey50")
        for step in self.steps:
            tree.add(step.line())
        return tree


_KEYMAP = {
    readchar.key.UP: "up",
    readchar.key.CTRL_P: "up",
    readchar.key.DOWN: "down",
    readchar.key.CTRL_N: "down",
    readchar.key.ENTER: "enter",
    readchar.key.ESC: "escape",
}


def get_key() -> str:
    """Read one keypress and name the navigation keys (``up``, ``down``, ``enter``, ``escape``)."""
    key = readchar.readkey()
    if key == readchar.key.CTRL_C:
        raise KeyboardInterrupt
    return _KEYMAP.get(key, key)


def _selection_panel(options: Mapping[str, str], keys: list[str], index: int, title: str) -> Panel:
    grid = Table.grid(padding=(0, 2))
    grid.add_column(style="cyan", width=3)
    grid.add_column(style="white")
    for position, key in enumerate(keys):
        grid.add_row("▶" if position == index else " ", f"[cyan]{options[key]}[/cyan]")
    grid.add_row("", "")
    grid.add_row("", "[dim]↑/↓ to move, Enter to choose, Esc to cancel[/dim]")
    return Panel(grid, title=f"[bold]{title}[/bold]", border_style="cyan", padding=(1, 2))


def select_with_arrows(
    options: Mapping[str, str],
    prompt_text: str = "Select an option",
    default_key: str | None = None,
    console: Console | None = None,
) -> str:
    """Let the user pick one of *options* (key -> label) and return its key.

    Esc or Ctrl+C prints a notice and exits with status 1.
    """
    console = console or Console()
    keys = list(options)
    index = keys.index(default_key) if default_key in options else 0

    console.print()
    with Live(
        _selection_panel(options, keys, index, prompt_text),
        console=console,
        transient=True,
        auto_refresh=False,
    ) as live:
        while True:
            try:
                key = get_key()
            except KeyboardInterrupt:
                key = "escape"

            if key == "enter":
                return keys[index]
            if key == "escape":
                console.print("\n[yellow]Selection cancelled[/yellow]")
                raise typer.Exit(1)
            if key in ("up", "down"):
                index = (index + (1 if key == "down" else -1)) % len(keys)
                live.update(_selection_panel(options, keys, index, prompt_text), refresh=True)


def press_enter(message: str = "When done, press ENTER to continue") -> None:
    """Pause a wizard step until the user presses Enter."""
    typer.prompt(message, default="", show_default=False)


__all__ = [
    "StepTracker",
    "get_key",
    "press_enter",
    "select_with_arrows",
]
