"""Interpreter that applies a command queue to a grid.

The interpreter owns the cursor and is the only writer of the grid while a
queue is being processed.  Processing is fail-fast: the first invalid
command raises and nothing after it is applied.  Commands applied before
the failure stay applied.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Sequence

from pixelgrid.display.colors import Color
from pixelgrid.display.commands import Command, MoveCursor, SetColor, parse_commands
from pixelgrid.display.grid import Grid
from pixelgrid.errors import CursorOutOfBounds

logger = logging.getLogger(__name__)


@dataclass
class Cursor:
    """Current write position within the grid."""

    x: int = 0
    y: int = 0


class Interpreter:
    """Applies commands in order to a grid it holds exclusively."""

    def __init__(self, grid: Grid) -> None:
        self.grid = grid
        self.cursor = Cursor()
        self.applied = 0

    @property
    def width(self) -> int:
        return self.grid.width

    @property
    def height(self) -> int:
        return self.grid.height

    def apply(self, command: Command) -> None:
        """Apply a single command."""
        if isinstance(command, MoveCursor):
            if not (0 <= command.x < self.width and 0 <= command.y < self.height):
                raise CursorOutOfBounds(command.x, command.y, self.width, self.height)
            self.cursor = Cursor(command.x, command.y)
        elif isinstance(command, SetColor):
            colour = Color.from_code(command.code)
            self.grid.set_color(self.cursor.x, self.cursor.y, colour)
        else:
            raise TypeError(f"Unsupported command: {command!r}")
        self.applied += 1
        logger.debug("Applied %s; cursor at (%d, %d)", command, self.cursor.x, self.cursor.y)

    def run(self, commands: Iterable[Command]) -> Grid:
        """Consume *commands* in order and return the mutated grid."""
        for command in commands:
            self.apply(command)
        logger.debug("Processed %d command(s)", self.applied)
        return self.grid


def create_display(width: int, height: int, default_color: int) -> Interpreter:
    """Build a grid filled with *default_color* and an interpreter over it."""
    return Interpreter(Grid.create(width, height, default_color))


def process_commands(grid: Grid, stream: Sequence[int]) -> Grid:
    """Parse *stream* and apply it to *grid* in one pass."""
    return Interpreter(grid).run(parse_commands(stream))
