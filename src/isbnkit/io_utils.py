"""JSON I/O and range-table snapshots.

A snapshot is the parsed RangeMessage (metadata plus group records) as
JSON, so a table can be cached and reloaded without the XML parser::

    {
      "date": "...", "source": "...", "serial_number": "...",
      "ean_ucc": [{"prefix": "978", "agency": "...", "rules": [[0, 6000000, 1], ...]}],
      "registration_groups": [{"prefix": "978-0", ...}]
    }

Rules are ``[min, max, length]`` with max exclusive and length 0 for a
reserved range, matching the baked module.
"""
from __future__ import annotations

from pathlib import Path
from typing import Any

import orjson

from isbnkit.errors import RangeTableError
from isbnkit.range_message import RangeMessage
from isbnkit.range_table import GroupRecord, MappedRangeTable, Rule

SNAPSHOT_SUFFIX = ".json"


def load_json(path: Path) -> Any:
    """Load JSON from a file using orjson."""
    return orjson.loads(path.read_bytes())


def save_json(obj: Any, path: Path, *, pretty: bool = True) -> None:
    """Save an object as JSON using orjson."""
    path.parent.mkdir(parents=True, exist_ok=True)
    opts = orjson.OPT_INDENT_2 | orjson.OPT_SORT_KEYS if pretty else orjson.OPT_SORT_KEYS
    path.write_bytes(orjson.dumps(obj, option=opts))


def _record_to_dict(record: GroupRecord) -> dict[str, Any]:
    return {
        "prefix": record.prefix,
        "agency": record.agency,
        "rules": [[r.min, r.max, r.length or 0] for r in record.rules],
    }


def _record_from_dict(row: dict[str, Any]) -> GroupRecord:
    try:
        return GroupRecord(
            prefix=str(row["prefix"]),
            agency=str(row["agency"]),
            rules=tuple(
                Rule(min=int(lo), max=int(hi), length=int(length) or None)
                for lo, hi, length in row["rules"]
            ),
        )
    except RangeTableError:
        raise
    except (KeyError, TypeError, ValueError) as exc:
        raise RangeTableError("bad_snapshot", f"malformed group: {exc}") from exc


def range_message_to_dict(message: RangeMessage) -> dict[str, Any]:
    return {
        "date": message.date,
        "source": message.source,
        "serial_number": message.serial_number,
        "ean_ucc": [_record_to_dict(r) for r in message.ean_ucc],
        "registration_groups": [_record_to_dict(r) for r in message.registration_groups],
    }


def _records_from_list(payload: dict[str, Any], key: str) -> tuple[GroupRecord, ...]:
    rows = payload.get(key, [])
    if not isinstance(rows, list):
        raise RangeTableError("bad_snapshot", f"{key} is {type(rows).__name__}, not a list")
    return tuple(_record_from_dict(r) for r in rows)


def range_message_from_dict(payload: Any) -> RangeMessage:
    if not isinstance(payload, dict):
        raise RangeTableError(
            "bad_snapshot", f"top level is {type(payload).__name__}, not an object"
        )
    date = payload.get("date")
    if not date:
        raise RangeTableError("no_message_date")
    ean_ucc = _records_from_list(payload, "ean_ucc")
    if not ean_ucc:
        raise RangeTableError("no_ean_ucc_prefix")
    groups = _records_from_list(payload, "registration_groups")
    if not groups:
        raise RangeTableError("no_group")
    return RangeMessage(
        date=str(date),
        source=payload.get("source"),
        serial_number=payload.get("serial_number"),
        ean_ucc=ean_ucc,
        registration_groups=groups,
    )


def save_range_snapshot(message: RangeMessage, path: Path) -> None:
    save_json(range_message_to_dict(message), path)


def load_range_snapshot(path: Path, *, strict: bool = True) -> MappedRangeTable:
    """Build a range table from a JSON snapshot written by ``save_range_snapshot``."""
    try:
        payload = load_json(path)
    except OSError as exc:
        raise RangeTableError("file_error", str(path)) from exc
    except orjson.JSONDecodeError as exc:
        raise RangeTableError("file_error", f"{path}: {exc}") from exc
    return range_message_from_dict(payload).to_table(strict=strict)
