"""Serializer rendering an ``AstDocument`` back to canonical ``.astappcnt`` text."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import NotRequired, Optional, TypedDict

from .document import RESERVED_QUESTION_KEYS, AstDocument, QuestionRecord
from .nodes import (
    AstArray,
    AstBareWord,
    AstBool,
    AstNumber,
    AstObject,
    AstString,
    AstValue,
    PropertyMap,
)
from .utils import resolve_config


class SerializerConfig(TypedDict):
    indent_size: NotRequired[int]
    inline_width: NotRequired[int]


class SerializerConfigRequired(TypedDict):
    indent_size: int
    inline_width: int


DEFAULT_CONFIG: SerializerConfigRequired = {"indent_size": 2, "inline_width": 80}


@dataclass
class AstSerializer:
    indent_size: int = DEFAULT_CONFIG["indent_size"]
    inline_width: int = DEFAULT_CONFIG["inline_width"]

    @classmethod
    def from_config(cls, config: Optional[SerializerConfig] = None) -> "AstSerializer":
        resolved = resolve_config(config or {}, DEFAULT_CONFIG)
        return cls(indent_size=resolved["indent_size"], inline_width=resolved["inline_width"])

    def serialize(self, document: AstDocument) -> str:
        blocks: list[str] = []
        if document.app is not None:
            blocks.append("\n".join(self.format_block("APP", document.app)))
        if document.style is not None:
            blocks.append("\n".join(self.format_block("STYLE", document.style)))
        for question in document.questions:
            blocks.append("\n".join(self.format_question(question)))
        return "\n\n".join(blocks) + "\n"

    def format_question(self, question: QuestionRecord) -> list[str]:
        header = f"QUESTION {self._format_string(question.id)} TYPE {self._format_string(question.type)}"
        properties = {key: value for key, value in question.properties.items() if key not in RESERVED_QUESTION_KEYS}
        return self.format_block(header, properties)

    def format_block(self, header: str, properties: PropertyMap) -> list[str]:
        lines = [f"{header} {{"]
        for key, value in properties.items():
            lines.append(f"{self._indent(1)}{key}: {self.format_value(value, level=1)};")
        lines.append("}")
        return lines

    def format_value(self, value: AstValue, level: int = 0) -> str:
        """Render ``value``; ``level`` is the indent of the line it starts on."""
        if isinstance(value, AstArray):
            return self._format_array(value, level)
        if isinstance(value, AstObject):
            return self._format_object(value)
        return self._format_scalar(value)

    def _format_scalar(self, value: AstValue) -> str:
        if isinstance(value, AstString):
            return self._format_string(value.value)
        if isinstance(value, AstBool):
            return "true" if value.value else "false"
        if isinstance(value, AstNumber):
            return self._format_number(value)
        if isinstance(value, AstBareWord):
            return value.value
        raise TypeError(f"Unsupported value node: {type(value).__name__}")

    def _format_array(self, value: AstArray, level: int) -> str:
        if not value.items:
            return "[]"
        items = [self.format_value(item, level + 1) for item in value.items]
        inline = "[" + ", ".join(items) + "]"
        if len(inline) <= self.inline_width:
            return inline

        lines = ["["]
        for item in items:
            lines.append(f"{self._indent(level + 1)}{item},")
        lines.append(f"{self._indent(level)}]")
        return "\n".join(lines)

    def _format_object(self, value: AstObject) -> str:
        if not value.properties:
            return "{}"
        pairs = [f"{key}:{self._format_inline(item)}" for key, item in value.properties.items()]
        return "{" + ", ".join(pairs) + "}"

    def _format_inline(self, value: AstValue) -> str:
        # object members stay on one line, arrays included
        if isinstance(value, AstArray):
            return "[" + ", ".join(self._format_inline(item) for item in value.items) + "]"
        if isinstance(value, AstObject):
            return self._format_object(value)
        return self._format_scalar(value)

    def _format_string(self, text: str) -> str:
        return '"' + text.replace("\\", "\\\\").replace('"', '\\"') + '"'

    def _format_number(self, value: AstNumber) -> str:
        if not value.is_float:
            return str(value.value)
        # shortest round-trip repr, written without an exponent
        text = format(Decimal(repr(value.value)), "f")
        if "." not in text:
            text += ".0"
        return text

    def _indent(self, level: int) -> str:
        return "" if level <= 0 else " " * (self.indent_size * level)


def serialize(document: AstDocument, config: Optional[SerializerConfig] = None) -> str:
    return AstSerializer.from_config(config).serialize(document)


__all__ = ["AstSerializer", "SerializerConfig", "DEFAULT_CONFIG", "serialize"]
