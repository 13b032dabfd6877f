"""pixelgrid — a command interpreter for a 2D pixel display.

Reads a display size, a default colour, and an integer-encoded command
stream, applies the commands to a grid of colour values, and renders the
result.
"""

from __future__ import annotations

__version__ = "0.1.0"

__all__ = ["__version__"]
