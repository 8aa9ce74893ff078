"""Segment resolution: where the registration group and registrant end.

Identical for both numeral forms; the only difference is the prefix offset
(3 for ISBN-13, 0 for ISBN-10). All offsets below are relative to the first
digit after the prefix.

  1. window = 7 digits after the prefix (zero padded)
  2. first-level lookup (agency prefix, window)          -> g
  3. second-level lookup ((agency, first g digits),
     window starting g digits later)                     -> r
  4. boundaries at g and g + r

Any lookup failure (InvalidGroup / UndefinedRange) aborts resolution; there
is no partial result.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from isbnkit.errors import InvalidGroup
from isbnkit.range_table import Group, RangeTable, Segment

if TYPE_CHECKING:
    from isbnkit.numeral import Isbn


@dataclass(frozen=True, slots=True)
class SegmentBoundaries:
    """Resolved variable-length segments of one numeral.

    Invariants (enforced in __post_init__):
        - 0 < group_end < registrant_end < body_length
    """

    group_length: int       # registration-group digits
    registrant_length: int  # registrant digits
    prefix_offset: int      # 3 for ISBN-13, 0 for ISBN-10
    body_length: int        # digits between the prefix and the check digit
    group_name: str = ""

    def __post_init__(self) -> None:
        if self.group_length < 1 or self.registrant_length < 1:
            raise InvalidGroup(
                "segment lengths must be >= 1, got "
                f"{self.group_length}/{self.registrant_length}"
            )
        if self.registrant_end >= self.body_length:
            raise InvalidGroup(
                f"group {self.group_length} + registrant {self.registrant_length} "
                f"digits leave no publication digits in a {self.body_length}-digit body"
            )

    @property
    def group_end(self) -> int:
        return self.group_length

    @property
    def registrant_end(self) -> int:
        return self.group_length + self.registrant_length

    def hyphen_positions(self) -> tuple[int, ...]:
        """Absolute digit indexes that start a new hyphenated part."""
        offset = self.prefix_offset
        positions = (
            offset + self.group_end,
            offset + self.registrant_end,
            offset + self.body_length,
        )
        return (offset, *positions) if offset else positions


def _registration_segment(isbn: Isbn, table: RangeTable) -> tuple[Segment, int]:
    prefix = isbn.agency_prefix()
    agency = table.lookup_first_level(prefix)
    group_length = agency.resolve(isbn.segment(0))
    segment = table.lookup_second_level(prefix, isbn.group_prefix(group_length))
    return segment, group_length


def registration_group(isbn: Isbn, table: RangeTable) -> Group:
    """Registration group of ``isbn`` with its registrant length."""
    segment, group_length = _registration_segment(isbn, table)
    return segment.group(isbn.segment(group_length))


def resolve_segments(isbn: Isbn, table: RangeTable) -> SegmentBoundaries:
    """Resolve the group and registrant lengths of ``isbn`` against ``table``."""
    segment, group_length = _registration_segment(isbn, table)
    registrant = segment.group(isbn.segment(group_length))
    return SegmentBoundaries(
        group_length=group_length,
        registrant_length=registrant.segment_length,
        prefix_offset=isbn.PREFIX_OFFSET,
        body_length=len(isbn.body),
        group_name=registrant.name,
    )
