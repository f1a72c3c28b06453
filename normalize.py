"""CLI for parsing and normalizing .astappcnt application files."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Iterable, Sequence

from scripts.astappcnt import (
    FILE_SUFFIX,
    AstParseError,
    AstSerializer,
    document_to_data,
    parse,
)
from scripts.astappcnt.logger import configure_logging
from scripts.astappcnt.parser import ParserConfig
from scripts.astappcnt.serializer import DEFAULT_CONFIG as SERIALIZER_DEFAULTS

DEFAULT_OUTPUT_DIR = Path("out/")


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description=(
            "Parse .astappcnt application files and write them back in canonical form "
            "(or as JSON with --json)."
        )
    )
    parser.add_argument(
        "input",
        help=f"Path to a {FILE_SUFFIX} file or a directory containing them.",
    )
    parser.add_argument(
        "-o",
        "--output-dir",
        default=str(DEFAULT_OUTPUT_DIR),
        help="Directory where normalized files should be written (defaults to out/).",
    )
    parser.add_argument(
        "--indent-size",
        type=int,
        default=SERIALIZER_DEFAULTS["indent_size"],
        help="Spaces per indentation level (default: 2).",
    )
    parser.add_argument(
        "--inline-width",
        type=int,
        default=SERIALIZER_DEFAULTS["inline_width"],
        help="Longest array rendering kept on a single line (default: 80).",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Write the parsed documents as JSON instead of canonical text.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log parser activity at DEBUG level.",
    )
    return parser.parse_args(argv)


def collect_inputs(path: Path) -> list[Path]:
    if path.is_dir():
        files = sorted(p for p in path.glob(f"*{FILE_SUFFIX}") if p.is_file())
        if not files:
            raise FileNotFoundError(f"No {FILE_SUFFIX} files found in directory: {path}")
        return files
    if path.is_file():
        return [path]
    raise FileNotFoundError(f"Input path does not exist: {path}")


def generate(
    files: Iterable[Path],
    output_dir: Path,
    serializer: AstSerializer,
    as_json: bool = False,
    parser_config: ParserConfig | None = None,
) -> list[Path]:
    output_dir.mkdir(parents=True, exist_ok=True)
    written: list[Path] = []
    for source in files:
        text = source.read_text(encoding="utf-8")
        try:
            document = parse(text, config=parser_config)
        except AstParseError as exc:
            raise RuntimeError(f"Failed to parse {source}") from exc
        if as_json:
            destination = output_dir / f"{source.stem}.json"
            destination.write_text(json.dumps(document_to_data(document), indent=2) + "\n", encoding="utf-8")
        else:
            destination = output_dir / source.name
            destination.write_text(serializer.serialize(document), encoding="utf-8")
        written.append(destination)
        try:
            display_path = destination.relative_to(Path.cwd())
        except ValueError:
            display_path = destination
        print(f"Wrote {display_path}")
    return written


def main(argv: Sequence[str] | None = None) -> None:
    args = parse_args(argv)
    input_path = Path(args.input)
    output_dir = Path(args.output_dir)
    files = collect_inputs(input_path)
    serializer = AstSerializer(indent_size=args.indent_size, inline_width=args.inline_width)
    log_level = logging.DEBUG if args.verbose else logging.WARNING
    configure_logging(log_level)
    parser_config: ParserConfig = {"log_level": log_level}
    generate(files, output_dir, serializer, as_json=args.json, parser_config=parser_config)


if __name__ == "__main__":
    main()
