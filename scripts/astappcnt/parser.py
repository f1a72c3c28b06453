"""Recursive-descent parser turning ``.astappcnt`` text into an ``AstDocument``."""

from __future__ import annotations

import logging
from typing import NotRequired, Optional, TypedDict

from scripts.astappcnt.document import AstDocument, QuestionRecord
from scripts.astappcnt.errors import (
    AstParseError,
    EmptyIdentifier,
    InvalidNumber,
    UnrecognizedTopLevelToken,
    UnterminatedBlock,
)
from scripts.astappcnt.lexer import DIGITS, AstLexer
from scripts.astappcnt.logger import Logger
from scripts.astappcnt.nodes import (
    AstArray,
    AstBareWord,
    AstBool,
    AstNumber,
    AstObject,
    AstString,
    AstValue,
    PropertyMap,
)
from scripts.astappcnt.utils import resolve_config

BLOCK_KEYWORDS = ("APP", "STYLE", "QUESTION")
LOGGER_NAME = "astappcnt.parser"


class ParserConfig(TypedDict):
    enable_logger: NotRequired[bool]
    log_level: NotRequired[int]


class ParserConfigRequired(TypedDict):
    enable_logger: bool
    log_level: int


DEFAULT_CONFIG: ParserConfigRequired = {"enable_logger": True, "log_level": logging.WARNING}


class AstParser:
    """Single-use parser; build a new instance for every text."""

    def __init__(self, text: str, config: Optional[ParserConfig] = None):
        self.config = resolve_config(config or {}, DEFAULT_CONFIG)
        self.logger = Logger(
            config={
                "name": LOGGER_NAME,
                "is_enabled": self.config["enable_logger"],
                "level": self.config["log_level"],
            }
        )
        self.text = text
        self.lexer = AstLexer(text)

    def parse_document(self) -> AstDocument:
        try:
            document = self._parse_document()
        except AstParseError as exc:
            exc.attach_source(self.text)
            self.logger.debug(f"Parse failed: {exc}")
            raise
        self.logger.debug(
            f"Parsed document: app={document.app is not None}, style={document.style is not None}, "
            f"questions={len(document.questions)}"
        )
        return document

    def _parse_document(self) -> AstDocument:
        lexer = self.lexer
        document = AstDocument()
        while True:
            lexer.skip_trivia()
            if lexer.at_end:
                break
            position = lexer.position
            token = lexer.read_identifier()
            if token not in BLOCK_KEYWORDS:
                raise UnrecognizedTopLevelToken(token=token or lexer.peek(), position=position)
            if token == "APP":
                self.logger.debug(f"APP block at position {position}")
                document.app = self._parse_property_block()
            elif token == "STYLE":
                self.logger.debug(f"STYLE block at position {position}")
                document.style = self._parse_property_block()
            else:
                self.logger.debug(f"QUESTION block at position {position}")
                document.add_question(self._parse_question())
        return document

    def _parse_question(self) -> QuestionRecord:
        lexer = self.lexer
        question_id = lexer.read_quoted_string()
        lexer.expect("TYPE")
        question_type = lexer.read_quoted_string()
        properties = self._parse_property_block()
        return QuestionRecord(id=question_id, type=question_type, properties=properties)

    def _parse_property_block(self) -> PropertyMap:
        return self._parse_properties(separators=(";",))

    def _parse_object(self) -> AstObject:
        return AstObject(properties=self._parse_properties(separators=(",", ";")))

    def _parse_properties(self, separators: tuple[str, ...]) -> PropertyMap:
        lexer = self.lexer
        lexer.expect("{")
        start = lexer.position - 1
        properties: PropertyMap = {}
        while True:
            lexer.skip_trivia()
            if lexer.at_end:
                raise UnterminatedBlock(start_position=start)
            if lexer.peek() == "}":
                lexer.position += 1
                return properties
            key = self._read_key()
            lexer.expect(":")
            properties[key] = self._parse_value()
            lexer.skip_trivia()
            if lexer.peek() in separators:
                lexer.position += 1

    def _read_key(self) -> str:
        position = self.lexer.position
        key = self.lexer.read_identifier()
        if not key:
            raise EmptyIdentifier(position=position)
        return key

    def _parse_value(self) -> AstValue:
        lexer = self.lexer
        lexer.skip_trivia()
        char = lexer.peek()
        if char == '"':
            return AstString(value=lexer.read_quoted_string())
        if char == "[":
            return self._parse_array()
        if char == "{":
            return self._parse_object()
        if char in DIGITS or char == "-":
            return self._parse_number()
        if char in ("t", "f"):
            # any identifier in boolean position other than "true" reads as false
            return AstBool(value=lexer.read_identifier() == "true")
        return AstBareWord(value=self._read_key())

    def _parse_array(self) -> AstArray:
        lexer = self.lexer
        lexer.expect("[")
        start = lexer.position - 1
        items: list[AstValue] = []
        while True:
            lexer.skip_trivia()
            if lexer.at_end:
                raise UnterminatedBlock(start_position=start)
            if lexer.peek() == "]":
                lexer.position += 1
                return AstArray(items=items)
            items.append(self._parse_value())
            lexer.skip_trivia()
            if lexer.peek() == ",":
                lexer.position += 1

    def _parse_number(self) -> AstNumber:
        position = self.lexer.position
        text, is_float = self.lexer.read_number()
        try:
            return AstNumber(value=float(text) if is_float else int(text))
        except ValueError as exc:
            # non-finite floats and ints past the digit limit; ValidationError is a ValueError
            raise InvalidNumber(text=text, position=position) from exc


def parse(text: str, config: Optional[ParserConfig] = None) -> AstDocument:
    return AstParser(text, config=config).parse_document()


__all__ = ["AstParser", "ParserConfig", "DEFAULT_CONFIG", "BLOCK_KEYWORDS", "LOGGER_NAME", "parse"]
