"""Exceptions raised while reading ``.astappcnt`` text."""

from __future__ import annotations

from scripts.astappcnt.utils import offset_to_line_column


class AstParseError(Exception):
    """Base class for every parse failure.

    ``position`` is the character offset in the source where the problem was
    detected. ``line`` and ``column`` are filled in once the parser attaches
    the source text.
    """

    def __init__(self, message: str, position: int):
        self.message = message
        self.position = position
        self.line: int | None = None
        self.column: int | None = None
        super().__init__(self._render())

    def attach_source(self, text: str) -> "AstParseError":
        self.line, self.column = offset_to_line_column(text, self.position)
        self.args = (self._render(),)
        return self

    def _render(self) -> str:
        rendered = f"{self.message} at position {self.position}"
        if self.line is not None:
            rendered += f" (line {self.line}, column {self.column})"
        return rendered


class UnexpectedToken(AstParseError):
    def __init__(self, expected: str, found: str, position: int):
        self.expected = expected
        self.found = found
        super().__init__(f"Expected '{expected}' but got '{found}'", position)


class UnterminatedString(AstParseError):
    def __init__(self, start_position: int):
        self.start_position = start_position
        super().__init__("Unterminated string", start_position)


class UnterminatedBlock(AstParseError):
    def __init__(self, start_position: int):
        self.start_position = start_position
        super().__init__("Unterminated block", start_position)


class EmptyIdentifier(AstParseError):
    def __init__(self, position: int):
        super().__init__("Expected an identifier", position)


class InvalidNumber(AstParseError):
    """A numeric literal that has no finite int or float value."""

    def __init__(self, text: str, position: int):
        self.text = text
        shown = text if len(text) <= 24 else f"{text[:20]}...({len(text)} chars)"
        super().__init__(f"Invalid number '{shown}'", position)


class UnrecognizedTopLevelToken(AstParseError):
    def __init__(self, token: str, position: int):
        self.token = token
        super().__init__(f"Unrecognized top-level token '{token}'", position)


__all__ = [
    "AstParseError",
    "UnexpectedToken",
    "UnterminatedString",
    "UnterminatedBlock",
    "EmptyIdentifier",
    "InvalidNumber",
    "UnrecognizedTopLevelToken",
]
