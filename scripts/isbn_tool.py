#!/usr/bin/env python3
"""Validate, convert and hyphenate ISBNs from the command line.

Subcommands:
- validate     parse each input and report its canonical form
- convert      ISBN-10 -> ISBN-13 and ISBN-13 (978) -> ISBN-10
- hyphenate    split into prefix/group/registrant/publication/check
- info         range table metadata

Usage:
    python3 scripts/isbn_tool.py validate 0-306-40615-2 99999-999-9-X
    python3 scripts/isbn_tool.py convert 9781492067665
    python3 scripts/isbn_tool.py hyphenate 8966261264 --ranges RangeMessage.xml
    python3 scripts/isbn_tool.py info

Structured JSON output goes to stdout; human messages go to stderr. Exit
status is 1 when any input is invalid.
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Any

import orjson

sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))

from isbnkit.config import build_range_table, default_range_table
from isbnkit.errors import IsbnError, RangeTableError
from isbnkit.numeral import Isbn10, convert
from isbnkit.parser import parse
from isbnkit.range_table import RangeTable

log = logging.getLogger("isbn_tool")


def dump_json(obj: Any) -> None:
    sys.stdout.buffer.write(orjson.dumps(obj, option=orjson.OPT_INDENT_2))
    sys.stdout.buffer.write(b"\n")


# ---------------------------------------------------------------------------
# Per-input operations
# ---------------------------------------------------------------------------

def _error_row(text: str, exc: IsbnError) -> dict[str, Any]:
    return {"input": text, "ok": False, "error": type(exc).__name__, "detail": str(exc)}


def validate_isbn(text: str) -> dict[str, Any]:
    try:
        isbn = parse(text)
    except IsbnError as exc:
        return _error_row(text, exc)
    return {
        "input": text,
        "ok": True,
        "isbn": isbn.render(),
        "format": "isbn10" if isinstance(isbn, Isbn10) else "isbn13",
    }


def convert_isbn(text: str) -> dict[str, Any]:
    try:
        isbn = parse(text)
        converted = convert(isbn)
    except IsbnError as exc:
        return _error_row(text, exc)
    return {
        "input": text,
        "ok": True,
        "isbn": isbn.render(),
        "converted": converted.render(),
    }


def hyphenate_isbn(text: str, table: RangeTable) -> dict[str, Any]:
    try:
        isbn = parse(text)
        hyphenated = isbn.hyphenate(table)
        group_name = isbn.registration_group_name(table)
    except IsbnError as exc:
        return _error_row(text, exc)
    return {
        "input": text,
        "ok": True,
        "isbn": isbn.render(),
        "hyphenated": hyphenated,
        "registration_group": group_name,
    }


def describe_table(table: RangeTable) -> dict[str, Any]:
    return {
        "source": table.source,
        "serial_number": table.serial_number,
        "date": table.date,
    }


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Validate, convert and hyphenate ISBN-10/ISBN-13 numbers."
    )
    parser.add_argument(
        "--ranges", type=Path, default=None,
        help="RangeMessage XML (or .json snapshot); default: bundled static table",
    )
    parser.add_argument("--verbose", "-v", action="store_true")
    sub = parser.add_subparsers(dest="command", required=True)
    for name, help_text in (
        ("validate", "Check ISBN checksums"),
        ("convert", "Convert between ISBN-10 and ISBN-13"),
        ("hyphenate", "Hyphenate using the range table"),
    ):
        cmd = sub.add_parser(name, help=help_text)
        cmd.add_argument("isbns", nargs="+", help="ISBN strings (hyphens/spaces allowed)")
    sub.add_parser("info", help="Show range table metadata")
    return parser


def _emit(rows: list[dict[str, Any]]) -> int:
    failed = sum(1 for row in rows if not row["ok"])
    if failed:
        log.info("%d of %d inputs failed", failed, len(rows))
    dump_json(rows)
    return 1 if failed else 0


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(message)s",
        stream=sys.stderr,
    )

    if args.command == "validate":
        return _emit([validate_isbn(text) for text in args.isbns])
    if args.command == "convert":
        return _emit([convert_isbn(text) for text in args.isbns])

    try:
        table = build_range_table(args.ranges) if args.ranges else default_range_table()
    except RangeTableError as exc:
        log.error("Cannot load range table: %s", exc)
        return 1

    if args.command == "info":
        dump_json(describe_table(table))
        return 0
    return _emit([hyphenate_isbn(text, table) for text in args.isbns])


if __name__ == "__main__":
    sys.exit(main())
