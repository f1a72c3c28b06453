"""Read and write ``.astappcnt`` files."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from .document import AstDocument
from .parser import ParserConfig, parse
from .serializer import SerializerConfig, serialize

FILE_SUFFIX = ".astappcnt"


def parse_file(path: str | Path, config: Optional[ParserConfig] = None) -> AstDocument:
    source = Path(path)
    if not source.is_file():
        raise FileNotFoundError(f"File not found: {source}")
    return parse(source.read_text(encoding="utf-8"), config=config)


def serialize_to_file(
    document: AstDocument, path: str | Path, config: Optional[SerializerConfig] = None
) -> Path:
    destination = Path(path)
    destination.parent.mkdir(parents=True, exist_ok=True)
    destination.write_text(serialize(document, config=config), encoding="utf-8")
    return destination


__all__ = ["FILE_SUFFIX", "parse_file", "serialize_to_file"]
