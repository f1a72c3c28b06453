"""Parser and serializer for the ``.astappcnt`` application form format."""

from .nodes import (
    AstArray,
    AstBareWord,
    AstBool,
    AstNumber,
    AstObject,
    AstString,
    AstValue,
    Identifier,
    PropertyMap,
)
from .document import AstDocument, QuestionRecord
from .errors import (
    AstParseError,
    EmptyIdentifier,
    InvalidNumber,
    UnexpectedToken,
    UnrecognizedTopLevelToken,
    UnterminatedBlock,
    UnterminatedString,
)
from .lexer import AstLexer
from .parser import AstParser, ParserConfig, parse
from .serializer import AstSerializer, SerializerConfig, serialize
from .builder import AstBuilder, document_from_data, document_to_data
from .files import FILE_SUFFIX, parse_file, serialize_to_file

__all__ = [
    "AstArray",
    "AstBareWord",
    "AstBool",
    "AstNumber",
    "AstObject",
    "AstString",
    "AstValue",
    "Identifier",
    "PropertyMap",
    "AstDocument",
    "QuestionRecord",
    "AstParseError",
    "EmptyIdentifier",
    "InvalidNumber",
    "UnexpectedToken",
    "UnrecognizedTopLevelToken",
    "UnterminatedBlock",
    "UnterminatedString",
    "AstLexer",
    "AstParser",
    "ParserConfig",
    "parse",
    "AstSerializer",
    "SerializerConfig",
    "serialize",
    "AstBuilder",
    "document_from_data",
    "document_to_data",
    "FILE_SUFFIX",
    "parse_file",
    "serialize_to_file",
]
