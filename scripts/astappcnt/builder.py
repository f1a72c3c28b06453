"""Builders converting between ``AstDocument`` and plain JSON-style data."""

from __future__ import annotations

from typing import Any, Mapping

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


class AstBuilder:
    """Build documents from the ``{"app", "style", "questions"}`` mapping collaborators exchange."""

    def build(self, data: Mapping[str, Any]) -> AstDocument:
        document = AstDocument(
            app=self._convert_optional_block(data.get("app"), path=["app"]),
            style=self._convert_optional_block(data.get("style"), path=["style"]),
        )
        for idx, question in enumerate(data.get("questions") or []):
            document.add_question(self._convert_question(question, path=["questions", str(idx)]))
        return document

    def _convert_question(self, obj: Any, path: list[str]) -> QuestionRecord:
        if not isinstance(obj, Mapping):
            raise TypeError(f"{'.'.join(path)}: question must be a mapping")
        for key in RESERVED_QUESTION_KEYS:
            if not isinstance(obj.get(key), str):
                raise TypeError(f"{'.'.join(path)}: question '{key}' must be a string")
        properties = {key: value for key, value in obj.items() if key not in RESERVED_QUESTION_KEYS}
        return QuestionRecord(
            id=obj["id"],
            type=obj["type"],
            properties=self._convert_block(properties, path),
        )

    def _convert_optional_block(self, obj: Any, path: list[str]) -> PropertyMap | None:
        if obj is None:
            return None
        if not isinstance(obj, Mapping):
            raise TypeError(f"{'.'.join(path)}: block must be a mapping")
        return self._convert_block(obj, path)

    def _convert_block(self, obj: Mapping[str, Any], path: list[str]) -> PropertyMap:
        return {key: self._convert_value(value, [*path, key]) for key, value in obj.items()}

    def _convert_value(self, value: Any, path: list[str]) -> AstValue:
        if isinstance(value, Mapping):
            return AstObject(properties=self._convert_block(value, path))
        if isinstance(value, (list, tuple)):
            return AstArray(items=[self._convert_value(item, [*path, str(idx)]) for idx, item in enumerate(value)])
        return self._convert_scalar(value, path)

    def _convert_scalar(self, value: Any, path: list[str]) -> AstValue:
        if isinstance(value, (AstString, AstNumber, AstBool, AstArray, AstObject, AstBareWord)):
            return value
        # bool first: it is a subclass of int
        if isinstance(value, bool):
            return AstBool(value=value)
        if isinstance(value, (int, float)):
            return AstNumber(value=value)
        if isinstance(value, str):
            return AstString(value=value)
        raise TypeError(f"{'.'.join(path)}: unsupported value of type {type(value).__name__}")


def document_from_data(data: Mapping[str, Any]) -> AstDocument:
    return AstBuilder().build(data)


def value_to_data(value: AstValue) -> Any:
    """Plain Python view of a value; bare words become ordinary strings."""
    if isinstance(value, AstArray):
        return [value_to_data(item) for item in value.items]
    if isinstance(value, AstObject):
        return properties_to_data(value.properties)
    return value.value


def properties_to_data(properties: PropertyMap) -> dict[str, Any]:
    return {key: value_to_data(value) for key, value in properties.items()}


def document_to_data(document: AstDocument) -> dict[str, Any]:
    return {
        "app": None if document.app is None else properties_to_data(document.app),
        "style": None if document.style is None else properties_to_data(document.style),
        "questions": [
            {"id": question.id, "type": question.type, **properties_to_data(question.properties)}
            for question in document.questions
        ],
    }


__all__ = ["AstBuilder", "document_from_data", "document_to_data", "properties_to_data", "value_to_data"]
