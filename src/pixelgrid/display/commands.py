"""Command types and the parser that builds a command queue.

The wire format is a flat sequence of unsigned integers.  Each command
starts with an opcode followed by its operands:

* ``1 x y`` — move the cursor to ``(x, y)``
* ``2 c``   — paint the cell under the cursor with colour ``c``

Parsing preserves input order.  Cursor targets are not bounds-checked here;
that needs the grid and happens in the interpreter.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Union

from pixelgrid.display.colors import Color
from pixelgrid.errors import InvalidCommand, TruncatedInput

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Command variants
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class MoveCursor:
    """Move the cursor to an absolute position."""

    x: int
    y: int

    def describe(self) -> str:
        return f"move cursor to ({self.x}, {self.y})"


@dataclass(frozen=True)
class SetColor:
    """Paint the cell under the cursor."""

    code: int

    def describe(self) -> str:
        name = Color(self.code).name.lower() if Color.is_legal(self.code) else "?"
        return f"set colour {self.code} ({name})"


Command = Union[MoveCursor, SetColor]

MOVE_CURSOR = 1
SET_COLOR = 2

OPCODES: dict[int, tuple[str, int]] = {
    MOVE_CURSOR: ("move_cursor", 2),
    SET_COLOR: ("set_color", 1),
}
"""opcode → (name, operand count)."""


# ---------------------------------------------------------------------------
# Parser
# ---------------------------------------------------------------------------


def parse_commands(stream: Iterable[int], validate_colors: bool = True) -> list[Command]:
    """Convert a flat integer stream into an ordered command queue.

    Raises ``InvalidCommand`` for an unknown opcode, ``TruncatedInput`` when
    the stream ends before an opcode's operands, and (unless
    *validate_colors* is false) ``InvalidColor`` for an illegal colour
    operand.
    """
    values = iter(stream)
    commands: list[Command] = []
    position = 0

    for opcode in values:
        if opcode not in OPCODES:
            raise InvalidCommand(opcode, position)
        _, arity = OPCODES[opcode]

        operands: list[int] = []
        for value in values:
            operands.append(value)
            if len(operands) == arity:
                break
        if len(operands) < arity:
            raise TruncatedInput(opcode, arity, len(operands))

        if opcode == MOVE_CURSOR:
            command: Command = MoveCursor(x=operands[0], y=operands[1])
        else:
            if validate_colors:
                Color.from_code(operands[0])
            command = SetColor(code=operands[0])

        logger.debug("Parsed command #%d: %s", len(commands), command)
        commands.append(command)
        position += 1 + arity

    return commands
