"""Shared test fixtures for pixelgrid.

Provides pre-built grids and interpreters so individual test modules stay
focused.
"""

from __future__ import annotations

import pytest

from pixelgrid.display.colors import Color
from pixelgrid.display.grid import Grid
from pixelgrid.display.interpreter import Interpreter

# ---------------------------------------------------------------------------
# Grid fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def red_grid() -> Grid:
    """A 4x4 grid filled with red."""
    return Grid.create(4, 4, Color.RED)


@pytest.fixture()
def wide_grid() -> Grid:
    """A non-square 5x2 grid filled with green."""
    return Grid.create(5, 2, Color.GREEN)


@pytest.fixture()
def interpreter(red_grid: Grid) -> Interpreter:
    return Interpreter(red_grid)
