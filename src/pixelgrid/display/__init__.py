"""Display subsystem.

Provides the colour set, the pixel grid, the command parser and the
interpreter that applies parsed commands to a grid.
"""

from __future__ import annotations
