"""Text boundary: turn the three input lines into typed values.

Line 1 holds the display width and height, line 2 the default colour and
line 3 the flattened command stream.  A missing third line means an empty
command stream.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable

from pixelgrid.display.colors import Color
from pixelgrid.errors import InvalidDimensions, MalformedNumericInput

logger = logging.getLogger(__name__)

DEFAULT_MAX_DIMENSION = 1024


@dataclass
class DisplaySession:
    """Everything needed to run the pipeline once."""

    width: int
    height: int
    default_color: Color
    stream: list[int] = field(default_factory=list)


def parse_unsigned(token: str) -> int:
    """Parse a single unsigned decimal integer."""
    text = token.strip()
    if not text.isdigit() or not text.isascii():
        raise MalformedNumericInput(f"Expected an unsigned integer, got {token!r}.", token)
    return int(text)


def parse_dimensions(line: str, max_dimension: int = DEFAULT_MAX_DIMENSION) -> tuple[int, int]:
    """Parse ``"width height"``."""
    parts = line.split()
    if len(parts) != 2:
        raise MalformedNumericInput(
            f"Expected two numbers for the display size, got {len(parts)}."
        )
    width, height = (parse_unsigned(p) for p in parts)
    if width == 0 or height == 0:
        raise InvalidDimensions(width, height)
    if width > max_dimension or height > max_dimension:
        raise InvalidDimensions(width, height, limit=max_dimension)
    return width, height


def parse_default_color(line: str) -> Color:
    """Parse the single default-colour token."""
    parts = line.split()
    if len(parts) != 1:
        raise MalformedNumericInput(
            f"Expected one number for the default colour, got {len(parts)}."
        )
    return Color.from_code(parse_unsigned(parts[0]))


def parse_command_stream(line: str) -> list[int]:
    """Parse the whitespace-separated command stream."""
    return [parse_unsigned(token) for token in line.split()]


def read_session(
    lines: Iterable[str],
    max_dimension: int = DEFAULT_MAX_DIMENSION,
) -> DisplaySession:
    """Read a ``DisplaySession`` from the first three lines of *lines*."""
    it = iter(lines)

    size_line = next(it, None)
    if size_line is None:
        raise MalformedNumericInput("Missing display size line.")
    width, height = parse_dimensions(size_line, max_dimension=max_dimension)

    colour_line = next(it, None)
    if colour_line is None:
        raise MalformedNumericInput("Missing default colour line.")
    default_color = parse_default_color(colour_line)

    stream = parse_command_stream(next(it, ""))

    logger.debug(
        "Read session: %dx%d, default %s, %d stream value(s)",
        width, height, default_color.name, len(stream),
    )
    return DisplaySession(width, height, default_color, stream)
