"""Error taxonomy for the display pipeline.

Every failure is fatal for the current run.  Library code raises these;
only the CLI boundary catches them and turns them into a diagnostic and a
non-zero exit status.
"""

from __future__ import annotations


class DisplayError(ValueError):
    """Base class for every validation failure in the pipeline."""

    @property
    def kind(self) -> str:
        """Short name of the violated condition, e.g. ``"InvalidColor"``."""
        return type(self).__name__


class InvalidColor(DisplayError):
    """A colour code outside the legal set."""

    def __init__(self, code: int) -> None:
        self.code = code
        super().__init__(f"Invalid colour code {code}; expected 1, 2 or 3.")


class InvalidCommand(DisplayError):
    """An opcode outside the known command set."""

    def __init__(self, opcode: int, position: int) -> None:
        self.opcode = opcode
        self.position = position
        super().__init__(f"Invalid command {opcode} at position {position}.")


class TruncatedInput(DisplayError):
    """The command stream ended before an opcode received its operands."""

    def __init__(self, opcode: int, expected: int, received: int) -> None:
        self.opcode = opcode
        self.expected = expected
        self.received = received
        super().__init__(
            f"Command {opcode} expects {expected} operand(s) but the stream "
            f"ended after {received}."
        )


class CursorOutOfBounds(DisplayError):
    """A cursor move targets a cell outside the display."""

    def __init__(self, x: int, y: int, width: int, height: int) -> None:
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        super().__init__(
            f"Cursor position ({x}, {y}) is outside the {width}x{height} display."
        )


class MalformedNumericInput(DisplayError):
    """A token is not an unsigned integer, or a line has the wrong shape."""

    def __init__(self, message: str, token: str | None = None) -> None:
        self.token = token
        super().__init__(message)


class InvalidDimensions(DisplayError):
    """Display width or height is zero or above the configured maximum."""

    def __init__(self, width: int, height: int, limit: int | None = None) -> None:
        self.width = width
        self.height = height
        self.limit = limit
        if limit is None:
            msg = f"Display dimensions must be positive, got {width}x{height}."
        else:
            msg = f"Display dimensions {width}x{height} exceed the maximum of {limit}."
        super().__init__(msg)
