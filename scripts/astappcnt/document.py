"""Document container produced by the parser and consumed by the serializer."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from .nodes import PropertyMap

RESERVED_QUESTION_KEYS = ("id", "type")


class QuestionRecord(BaseModel):
    id: str
    type: str
    properties: PropertyMap = Field(default_factory=dict)

    @field_validator("properties")
    @classmethod
    def _drop_positional_keys(cls, properties: PropertyMap) -> PropertyMap:
        # id and type are carried positionally in the QUESTION header
        return {key: value for key, value in properties.items() if key not in RESERVED_QUESTION_KEYS}


class AstDocument(BaseModel):
    app: PropertyMap | None = None
    style: PropertyMap | None = None
    questions: list[QuestionRecord] = Field(default_factory=list)

    def add_question(self, question: QuestionRecord) -> None:
        self.questions.append(question)

    def question(self, question_id: str) -> QuestionRecord | None:
        for question in self.questions:
            if question.id == question_id:
                return question
        return None


__all__ = ["AstDocument", "QuestionRecord", "RESERVED_QUESTION_KEYS"]
