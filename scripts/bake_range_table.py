#!/usr/bin/env python3
"""Pre-bake a RangeMessage XML document into ``isbnkit/_baked_ranges.py``.

The generated module backs ``StaticRangeTable``, so the library can
hyphenate without parsing XML at startup. Re-run whenever the bundled
RangeMessage is refreshed.

Usage:
    python3 scripts/bake_range_table.py
    python3 scripts/bake_range_table.py --input RangeMessage.xml --output /tmp/_baked_ranges.py
    python3 scripts/bake_range_table.py --snapshot range_snapshot.json
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))

from isbnkit.config import bundled_range_message_path
from isbnkit.errors import RangeTableError
from isbnkit.io_utils import save_range_snapshot
from isbnkit.range_message import RangeMessage, read_group_records
from isbnkit.range_table import GroupRecord

log = logging.getLogger("bake_range_table")

DEFAULT_OUTPUT = Path(__file__).resolve().parent.parent / "src" / "isbnkit" / "_baked_ranges.py"

_HEADER = '''"""Pre-baked ISBN range table.

Generated by scripts/bake_range_table.py from {source_name}; do not edit.
Rules are (min, max, length): max is exclusive, length 0 marks a reserved
range.
"""
from __future__ import annotations

from isbnkit.range_table import BakedGroup
'''


def _render_groups(name: str, records: tuple[GroupRecord, ...]) -> list[str]:
    lines = [f"{name}: tuple[BakedGroup, ...] = ("]
    for record in records:
        lines.append(f"    ({record.prefix!r}, {record.agency!r}, (")
        for rule in record.rules:
            lines.append(f"        ({rule.min}, {rule.max}, {rule.length or 0}),")
        lines.append("    )),")
    lines.append(")")
    return lines


def render_module(message: RangeMessage, source_name: str = "RangeMessage.xml") -> str:
    """Render the Python source of the baked range module."""
    lines = [
        _HEADER.format(source_name=source_name),
        f"MESSAGE_SOURCE: str | None = {message.source!r}",
        f"MESSAGE_SERIAL_NUMBER: str | None = {message.serial_number!r}",
        f"MESSAGE_DATE: str = {message.date!r}",
        "",
        *_render_groups("EAN_UCC_PREFIXES", message.ean_ucc),
        "",
        *_render_groups("REGISTRATION_GROUPS", message.registration_groups),
    ]
    return "\n".join(lines) + "\n"


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Generate the static range table module from a RangeMessage."
    )
    parser.add_argument(
        "--input", type=Path, default=None,
        help="RangeMessage XML (default: bundled excerpt)",
    )
    parser.add_argument(
        "--output", type=Path, default=DEFAULT_OUTPUT,
        help="Generated module path",
    )
    parser.add_argument(
        "--snapshot", type=Path, default=None,
        help="Also write a JSON snapshot of the parsed message",
    )
    parser.add_argument("--verbose", "-v", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(message)s",
        stream=sys.stderr,
    )

    source = args.input or bundled_range_message_path()
    try:
        message = read_group_records(source.read_bytes())
        # Validate before writing anything.
        message.to_table(strict=True)
    except (OSError, RangeTableError) as exc:
        log.error("Cannot read %s: %s", source, exc)
        return 1

    args.output.parent.mkdir(parents=True, exist_ok=True)
    args.output.write_text(render_module(message, source.name), encoding="utf-8")
    log.info(
        "Wrote %s (%d prefixes, %d registration groups, dated %s)",
        args.output,
        len(message.ean_ucc),
        len(message.registration_groups),
        message.date,
    )

    if args.snapshot is not None:
        save_range_snapshot(message, args.snapshot)
        log.info("Wrote snapshot %s", args.snapshot)
    return 0


if __name__ == "__main__":
    sys.exit(main())
