"""Character-level reader for ``.astappcnt`` text."""

from __future__ import annotations

import string

from .errors import UnexpectedToken, UnterminatedString

IDENTIFIER_CHARS = frozenset(string.ascii_letters + string.digits + "_-")
WHITESPACE_CHARS = frozenset(" \t\n\r\v\f")
DIGITS = frozenset(string.digits)
OCTAL_DIGITS = frozenset("01234567")
HEX_DIGITS = frozenset(string.hexdigits)

SIMPLE_ESCAPES = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "v": "\v",
    "f": "\f",
    "a": "\a",
    "b": "\b",
}


class AstLexer:
    """Cursor over raw text that recognizes the primitive lexical units.

    A lexer is owned by exactly one parse call; its position is never shared.
    """

    def __init__(self, text: str):
        self.text = text
        self.position = 0

    @property
    def at_end(self) -> bool:
        return self.position >= len(self.text)

    def peek(self, ahead: int = 0) -> str:
        index = self.position + ahead
        if index >= len(self.text):
            return ""
        return self.text[index]

    def skip_trivia(self) -> None:
        while not self.at_end:
            char = self.peek()
            if char in WHITESPACE_CHARS:
                self.position += 1
            elif char == "/" and self.peek(1) == "/":
                newline = self.text.find("\n", self.position)
                self.position = len(self.text) if newline == -1 else newline
            else:
                break

    def expect(self, literal: str) -> None:
        self.skip_trivia()
        if IDENTIFIER_CHARS.issuperset(literal):
            # keywords match whole words, so "TYP" or "TYPES" never pass for "TYPE"
            found = self._identifier_at(self.position)
        else:
            found = self.text[self.position : self.position + len(literal)]
        if found != literal:
            if not found:
                found = self.text[self.position : self.position + len(literal)]
            raise UnexpectedToken(expected=literal, found=found, position=self.position)
        self.position += len(literal)

    def read_identifier(self) -> str:
        identifier = self._identifier_at(self.position)
        self.position += len(identifier)
        return identifier

    def read_quoted_string(self) -> str:
        self.expect('"')
        start = self.position - 1
        buffer: list[str] = []
        while not self.at_end:
            char = self.peek()
            if char == '"':
                self.position += 1
                return "".join(buffer)
            if char == "\\":
                self.position += 1
                if self.at_end:
                    break
                buffer.append(self._read_escape())
            else:
                buffer.append(char)
                self.position += 1
        raise UnterminatedString(start_position=start)

    def read_number(self) -> tuple[str, bool]:
        """Read a numeric literal and return ``(text, is_float)``."""
        start = self.position
        if self.peek() == "-":
            self.position += 1
        if self.peek() not in DIGITS:
            raise UnexpectedToken(expected="digit", found=self.peek(), position=self.position)
        self._consume_digits()
        is_float = False
        if self.peek() == "." and self.peek(1) in DIGITS:
            self.position += 1
            self._consume_digits()
            is_float = True
        return self.text[start : self.position], is_float

    # Helpers -----------------------------------------------------------------
    def _identifier_at(self, index: int) -> str:
        end = index
        while end < len(self.text) and self.text[end] in IDENTIFIER_CHARS:
            end += 1
        return self.text[index:end]

    def _consume_digits(self) -> None:
        while not self.at_end and self.peek() in DIGITS:
            self.position += 1

    def _read_escape(self) -> str:
        char = self.peek()
        if char in SIMPLE_ESCAPES:
            self.position += 1
            return SIMPLE_ESCAPES[char]
        if char in OCTAL_DIGITS:
            digits = self._take(OCTAL_DIGITS, 3)
            return chr(int(digits, 8) & 0xFF)
        if char == "x" and self.peek(1) in HEX_DIGITS:
            self.position += 1
            digits = self._take(HEX_DIGITS, 2)
            return chr(int(digits, 16))
        # \" and \\ land here along with any unknown escape
        self.position += 1
        return char

    def _take(self, allowed: frozenset[str], limit: int) -> str:
        start = self.position
        while self.position - start < limit and not self.at_end and self.peek() in allowed:
            self.position += 1
        return self.text[start : self.position]


__all__ = ["AstLexer", "IDENTIFIER_CHARS", "DIGITS"]
