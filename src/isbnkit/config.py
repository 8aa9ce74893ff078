"""Process-wide default range table.

The default is the pre-baked static table. Setting ``ISBNKIT_RANGE_MESSAGE``
to the path of a RangeMessage XML file makes the default load that file
instead (for example a freshly downloaded copy).

The table is built once per process behind a lock; concurrent readers then
share the immutable instance. ``reset_default_range_table()`` discards it so
the next call rebuilds (there is no incremental update).
"""
from __future__ import annotations

import logging
import os
import threading
from importlib import resources
from pathlib import Path

from isbnkit.io_utils import SNAPSHOT_SUFFIX, load_range_snapshot
from isbnkit.range_message import load_range_message
from isbnkit.range_table import RangeTable, StaticRangeTable

logger = logging.getLogger(__name__)

RANGE_MESSAGE_ENV = "ISBNKIT_RANGE_MESSAGE"
BUNDLED_RANGE_MESSAGE = "RangeMessage.xml"

_lock = threading.Lock()
_default_table: RangeTable | None = None


def bundled_range_message_path() -> Path:
    """Path of the RangeMessage excerpt shipped with the package."""
    return Path(str(resources.files("isbnkit") / "data" / BUNDLED_RANGE_MESSAGE))


def range_message_path_from_env() -> Path | None:
    value = os.environ.get(RANGE_MESSAGE_ENV, "").strip()
    return Path(value) if value else None


def build_range_table(path: Path | None = None) -> RangeTable:
    """Load ``path`` (or the env override) if given, else the static table.

    ``.json`` paths are read as snapshots, anything else as RangeMessage XML.
    """
    path = path if path is not None else range_message_path_from_env()
    if path is None:
        logger.debug("Using pre-baked static range table")
        return StaticRangeTable()
    if path.suffix.lower() == SNAPSHOT_SUFFIX:
        logger.debug("Using range snapshot %s", path)
        return load_range_snapshot(path)
    logger.debug("Using range message %s", path)
    return load_range_message(path)


def default_range_table() -> RangeTable:
    """Shared range table, built on first use."""
    global _default_table
    with _lock:
        if _default_table is None:
            _default_table = build_range_table()
        return _default_table


def reset_default_range_table() -> None:
    global _default_table
    with _lock:
        _default_table = None
