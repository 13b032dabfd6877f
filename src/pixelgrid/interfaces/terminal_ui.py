"""Rich terminal rendering for the display CLI.

The rendered grid goes to stdout; prompts, tables and diagnostics go to
stderr so the grid output stays machine-readable.
"""

from __future__ import annotations

from typing import Sequence

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich.theme import Theme

from pixelgrid.display.colors import Color
from pixelgrid.display.commands import Command
from pixelgrid.display.grid import Grid

# ---------------------------------------------------------------------------
# Theme
# ---------------------------------------------------------------------------

PIXELGRID_THEME = Theme(
    {
        "pixelgrid.prompt": "bold cyan",
        "pixelgrid.dim": "dim white",
        "pixelgrid.error": "bold red",
    }
)

COLOR_STYLES: dict[Color, str] = {
    Color.RED: "red",
    Color.GREEN: "green",
    Color.CYAN: "cyan",
}


class TerminalUI:
    """Encapsulates all Rich-based rendering for the CLI."""

    def __init__(self, out: Console | None = None, err: Console | None = None) -> None:
        self.out = out or Console(theme=PIXELGRID_THEME, highlight=False)
        self.err = err or Console(theme=PIXELGRID_THEME, highlight=False, stderr=True)

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------

    def print_prompt(self, message: str) -> None:
        self.err.print(f"[pixelgrid.prompt]{message}[/pixelgrid.prompt]")

    # ------------------------------------------------------------------
    # Grid
    # ------------------------------------------------------------------

    def print_grid(self, grid: Grid, symbol: str = "██") -> None:
        """Render the grid as coloured blocks, one line per row."""
        for row in grid.rows():
            line = Text()
            for colour in row:
                line.append(symbol, style=COLOR_STYLES[colour])
            self.out.print(line)

    def print_summary(self, grid: Grid) -> None:
        """Print per-colour cell counts."""
        counts = grid.color_counts()
        table = Table(show_header=False, box=None, padding=(0, 1))
        table.add_column(style="dim", width=8)
        table.add_column(justify="right")
        for colour in Color:
            table.add_row(
                Text(colour.name.lower(), style=COLOR_STYLES[colour]),
                str(counts.get(colour, 0)),
            )
        self.err.print(
            Panel(
                table,
                title=f"[dim]{grid.width}x{grid.height}[/dim]",
                border_style="dim",
                padding=(0, 1),
            )
        )

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def print_commands(self, commands: Sequence[Command]) -> None:
        """List a parsed command queue."""
        if not commands:
            self.out.print("[pixelgrid.dim]No commands.[/pixelgrid.dim]")
            return
        table = Table(title="Commands", border_style="dim", show_header=True, header_style="bold")
        table.add_column("#", justify="right", style="dim")
        table.add_column("Command", style="cyan")
        table.add_column("Description")
        for index, command in enumerate(commands):
            table.add_row(str(index), type(command).__name__, command.describe())
        self.out.print(table)

    # ------------------------------------------------------------------
    # Status
    # ------------------------------------------------------------------

    def print_error(self, kind: str, message: str) -> None:
        """Render a diagnostic naming the violated condition."""
        self.err.print(
            Panel(
                Text(message, style="red"),
                title=f"[bold red]{kind}[/bold red]",
                border_style="red",
                padding=(0, 2),
            )
        )
