"""pixelgrid CLI — Typer-based entry point.

Commands
--------
run         Read size, default colour and commands, then render the display.
parse       Parse a command stream and list the resulting command queue.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Iterator, NoReturn, Optional, TextIO

import typer

from pixelgrid.config.settings import get_settings
from pixelgrid.display.commands import parse_commands
from pixelgrid.display.interpreter import create_display
from pixelgrid.display.io import parse_command_stream, read_session
from pixelgrid.errors import DisplayError
from pixelgrid.interfaces.terminal_ui import TerminalUI

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="pixelgrid",
    help="Command interpreter for a 2D pixel display.",
    add_completion=False,
)

PROMPTS = (
    "Enter the display size (width height):",
    "Enter the default colour (1 - red, 2 - green, 3 - cyan):",
    "Enter the command stream:",
)


def _setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s  %(name)-30s  %(levelname)-7s  %(message)s",
    )


def _prompted_lines(source: TextIO, ui: TerminalUI, prompts: bool) -> Iterator[str]:
    """Yield up to three input lines, printing a prompt before each read."""
    for prompt in PROMPTS:
        if prompts:
            ui.print_prompt(prompt)
        line = source.readline()
        if not line:
            return
        yield line


def _fail(ui: TerminalUI, exc: DisplayError) -> NoReturn:
    logger.warning("%s: %s", exc.kind, exc)
    ui.print_error(exc.kind, str(exc))
    raise typer.Exit(1)


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


@app.command()
def run(
    input_file: Optional[Path] = typer.Option(
        None, "--input", "-i", exists=True, dir_okay=False, readable=True,
        help="Read input from a file instead of stdin.",
    ),
    style: Optional[str] = typer.Option(
        None, "--style", "-s", help="Output style: plain or color.",
    ),
    summary: bool = typer.Option(False, "--summary", help="Print per-colour cell counts."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Read the display description and print the resulting grid."""
    _setup_logging(verbose)
    cfg = get_settings()
    ui = TerminalUI()

    render_style = style or cfg.render_style
    if render_style not in ("plain", "color"):
        typer.echo(f"Unknown style: {render_style}", err=True)
        raise typer.Exit(2)

    try:
        if input_file is not None:
            with input_file.open(encoding="utf-8") as fh:
                session = read_session(
                    _prompted_lines(fh, ui, prompts=False),
                    max_dimension=cfg.max_dimension,
                )
        else:
            interactive = cfg.show_prompts and sys.stdin.isatty()
            session = read_session(
                _prompted_lines(sys.stdin, ui, prompts=interactive),
                max_dimension=cfg.max_dimension,
            )

        interpreter = create_display(session.width, session.height, session.default_color)
        interpreter.run(parse_commands(session.stream))
    except DisplayError as exc:
        _fail(ui, exc)

    grid = interpreter.grid
    if render_style == "color":
        ui.print_grid(grid, symbol=cfg.cell_symbol)
    else:
        typer.echo(grid.render())
    if summary:
        ui.print_summary(grid)


@app.command()
def parse(
    tokens: list[str] = typer.Argument(..., help="Command stream, e.g. 1 2 2 2 3."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Parse a command stream and list the command queue without running it."""
    _setup_logging(verbose)
    ui = TerminalUI()
    try:
        commands = parse_commands(parse_command_stream(" ".join(tokens)))
    except DisplayError as exc:
        _fail(ui, exc)
    ui.print_commands(commands)


def main() -> int:
    """Entry point for the ``pixelgrid`` console script."""
    app()
    return 0
