"""Value nodes for the ``.astappcnt`` intermediate representation."""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field, StringConstraints
from pydantic.types import AllowInfNan, Strict

IDENTIFIER_PATTERN = r"^[A-Za-z0-9_-]+$"

Identifier = Annotated[str, StringConstraints(pattern=IDENTIFIER_PATTERN)]


class AstString(BaseModel):
    kind: Literal["string"] = "string"
    value: str


class AstNumber(BaseModel):
    """Numeric literal; an ``int`` value came from a literal without a decimal point."""

    kind: Literal["number"] = "number"
    value: Union[Annotated[int, Strict()], Annotated[float, Strict(), AllowInfNan(False)]]

    @property
    def is_float(self) -> bool:
        return isinstance(self.value, float)


class AstBool(BaseModel):
    kind: Literal["bool"] = "bool"
    value: bool


class AstArray(BaseModel):
    kind: Literal["array"] = "array"
    items: list["AstValue"] = Field(default_factory=list)


class AstObject(BaseModel):
    kind: Literal["object"] = "object"
    properties: "PropertyMap" = Field(default_factory=dict)


class AstBareWord(BaseModel):
    """Unquoted token kept verbatim because it is not a string, number or boolean."""

    kind: Literal["bare_word"] = "bare_word"
    value: Identifier


AstValue = Annotated[
    Union[AstString, AstNumber, AstBool, AstArray, AstObject, AstBareWord],
    Field(discriminator="kind"),
]

PropertyMap = dict[Identifier, AstValue]

AstArray.model_rebuild()
AstObject.model_rebuild()


__all__ = [
    "IDENTIFIER_PATTERN",
    "Identifier",
    "AstString",
    "AstNumber",
    "AstBool",
    "AstArray",
    "AstObject",
    "AstBareWord",
    "AstValue",
    "PropertyMap",
]
