"""The closed set of colours a display cell may hold."""

from __future__ import annotations

from enum import IntEnum

from pixelgrid.errors import InvalidColor


class Color(IntEnum):
    RED = 1
    GREEN = 2
    CYAN = 3

    @classmethod
    def is_legal(cls, code: int) -> bool:
        return code in cls._value2member_map_

    @classmethod
    def from_code(cls, code: int) -> Color:
        """Return the colour for *code*, raising ``InvalidColor`` if illegal."""
        if not cls.is_legal(code):
            raise InvalidColor(code)
        return cls(code)
