"""Hyphenated ISBN rendering.

ISBN-13: prefix-group-registrant-publication-check  (978-1-4920-6766-5)
ISBN-10: group-registrant-publication-check         (89-6626-126-4)
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from isbnkit.range_table import RangeTable
from isbnkit.resolver import SegmentBoundaries, resolve_segments

if TYPE_CHECKING:
    from isbnkit.numeral import Isbn

# 13 digits + 4 hyphens
MAX_HYPHENATED_LENGTH = 17


def hyphenate_with(isbn: Isbn, boundaries: SegmentBoundaries) -> str:
    """Insert hyphens at already-resolved segment boundaries."""
    text = isbn.render()
    parts: list[str] = []
    start = 0
    for position in boundaries.hyphen_positions():
        parts.append(text[start:position])
        start = position
    parts.append(text[start:])
    return "-".join(parts)


def hyphenate(isbn: Isbn, table: RangeTable) -> str:
    """Hyphenate ``isbn`` using the group/registrant ranges in ``table``.

    Raises InvalidGroup or UndefinedRange when the number is not in an
    assigned range.
    """
    return hyphenate_with(isbn, resolve_segments(isbn, table))
