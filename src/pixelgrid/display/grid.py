"""Pixel grid backed by a numpy array.

Cells are addressed as ``(x, y)`` where ``x`` is the column and ``y`` the
row; the underlying array therefore has shape ``(height, width)``.  Every
cell always holds a legal ``Color`` code.
"""

from __future__ import annotations

import logging
from typing import Iterator, Mapping

import numpy as np

from pixelgrid.display.colors import Color
from pixelgrid.errors import CursorOutOfBounds, InvalidColor, InvalidDimensions

logger = logging.getLogger(__name__)


class Grid:
    """A fixed-size rectangular array of colour codes."""

    def __init__(self, cells: np.ndarray) -> None:
        if cells.ndim != 2:
            raise ValueError(f"Expected a 2D array, got {cells.ndim} dimension(s).")
        height, width = cells.shape
        if width == 0 or height == 0:
            raise InvalidDimensions(width, height)
        for code in np.unique(cells).tolist():
            if not Color.is_legal(code):
                raise InvalidColor(code)
        self._cells = cells.astype(np.uint8, copy=True)

    @classmethod
    def create(cls, width: int, height: int, default_color: int) -> Grid:
        """Build a ``width`` x ``height`` grid with every cell set to *default_color*."""
        if width <= 0 or height <= 0:
            raise InvalidDimensions(width, height)
        colour = Color.from_code(default_color)
        logger.debug("Creating %dx%d grid filled with %s", width, height, colour.name)
        return cls(np.full((height, width), int(colour), dtype=np.uint8))

    # ------------------------------------------------------------------
    # Shape and access
    # ------------------------------------------------------------------

    @property
    def width(self) -> int:
        return int(self._cells.shape[1])

    @property
    def height(self) -> int:
        return int(self._cells.shape[0])

    @property
    def cells(self) -> np.ndarray:
        """Read-only view of the underlying array."""
        view = self._cells.view()
        view.flags.writeable = False
        return view

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get_color(self, x: int, y: int) -> Color:
        if not self.contains(x, y):
            raise CursorOutOfBounds(x, y, self.width, self.height)
        return Color(int(self._cells[y, x]))

    def set_color(self, x: int, y: int, color: int) -> None:
        """Set cell ``(x, y)`` to *color*.

        The interpreter validates before calling, but the grid re-checks so
        that no caller can break the bounds or colour invariant.
        """
        if not self.contains(x, y):
            raise CursorOutOfBounds(x, y, self.width, self.height)
        self._cells[y, x] = int(Color.from_code(color))

    def rows(self) -> Iterator[list[Color]]:
        for row in self._cells:
            yield [Color(int(code)) for code in row]

    def color_counts(self) -> dict[Color, int]:
        """Return a map of colour → number of cells holding it."""
        unique, counts = np.unique(self._cells, return_counts=True)
        return {Color(int(code)): int(n) for code, n in zip(unique, counts)}

    def copy(self) -> Grid:
        return Grid(self._cells)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render(self, symbols: Mapping[Color, str] | None = None) -> str:
        """Render the grid as text, one line per row.

        By default each cell is shown as its numeric code; *symbols* maps
        colours to replacement glyphs.
        """
        if symbols is None:
            return "\n".join(
                " ".join(str(int(code)) for code in row) for row in self._cells
            )
        return "\n".join(
            " ".join(symbols[colour] for colour in row) for row in self.rows()
        )

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return np.array_equal(self._cells, other._cells)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Grid(width={self.width}, height={self.height})"
