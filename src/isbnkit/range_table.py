"""Queryable ISBN range table: prefix-keyed segments of numeric-range rules.

The table has two levels:

  first level     packed 3-digit agency prefix (``0x978``) -> Segment
  second level    (packed agency prefix, packed registration-group element)
                  -> Segment

A Segment is a named list of Rules. Each Rule maps a half-open range
``[min, max)`` over a 7-digit window value to a segment length (1..7) or to
``None`` when the authority marks the range as reserved.

Keys pack decimal digits 4 bits each, so ``"978"`` becomes ``0x978`` and the
registration-group element ``"89"`` becomes ``0x89``.

Providers:
  MappedRangeTable   built from parsed group records (markup loader)
  StaticRangeTable   built from the pre-baked ``_baked_ranges`` module

Both implement ``RangeTable`` and answer queries identically.
Tables are never mutated after construction and are safe to share between
threads.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType, ModuleType
from typing import TypeAlias

from isbnkit.errors import InvalidGroup, RangeTableError, UndefinedRange

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

WINDOW_DIGITS = 7
WINDOW_LIMIT = 10 ** WINDOW_DIGITS
MAX_SEGMENT_LENGTH = 7
AGENCY_PREFIX_DIGITS = 3

# Packed "978": the agency prefix every ISBN-10 is classified under.
AGENCY_PREFIX_978 = 0x978


# ---------------------------------------------------------------------------
# Key encoding
# ---------------------------------------------------------------------------

def pack_digits(digits: Iterable[int]) -> int:
    """Pack decimal digits into an int, 4 bits per digit, most significant first."""
    packed = 0
    for digit in digits:
        packed = (packed << 4) | digit
    return packed


def pack_prefix(text: str, *, max_digits: int = AGENCY_PREFIX_DIGITS) -> int:
    """Pack a prefix string such as ``"978"`` or ``"89"``.

    Raises RangeTableError(invalid_prefix_char) for non-digits and
    RangeTableError(prefix_too_long) past ``max_digits``.
    """
    if not text:
        raise RangeTableError("invalid_prefix_char", repr(text))
    if len(text) > max_digits:
        raise RangeTableError("prefix_too_long", text)
    if not all(c in "0123456789" for c in text):
        raise RangeTableError("invalid_prefix_char", text)
    return pack_digits(int(c) for c in text)


def split_group_prefix(prefix: str) -> tuple[int, int]:
    """Split a registration-group prefix ``"978-89"`` into packed key parts."""
    agency, sep, element = prefix.partition("-")
    if not sep:
        raise RangeTableError("prefix_too_long", prefix)
    if len(agency) != AGENCY_PREFIX_DIGITS:
        raise RangeTableError("invalid_prefix_char", prefix)
    return (
        pack_prefix(agency),
        pack_prefix(element, max_digits=WINDOW_DIGITS),
    )


# ---------------------------------------------------------------------------
# Rules and segments
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Rule:
    """Half-open range ``[min, max)`` of 7-digit values with a segment length.

    ``length`` is None when the range is reserved/undefined.
    """

    min: int
    max: int
    length: int | None

    def __post_init__(self) -> None:
        if not 0 <= self.min < self.max <= WINDOW_LIMIT:
            raise RangeTableError("bad_range", f"[{self.min}, {self.max})")
        if self.length is not None and not 1 <= self.length <= MAX_SEGMENT_LENGTH:
            raise RangeTableError("length_too_large", str(self.length))

    def contains(self, value: int) -> bool:
        return self.min <= value < self.max


@dataclass(frozen=True, slots=True)
class Group:
    """Resolved segment: its name and the length applicable at the queried value."""

    name: str
    segment_length: int


@dataclass(frozen=True, slots=True)
class Segment:
    """Named allocation with its length-determining rules."""

    name: str
    rules: tuple[Rule, ...]

    def rule_for(self, value: int) -> Rule | None:
        """Return the first rule containing ``value`` (linear scan)."""
        for rule in self.rules:
            if rule.contains(value):
                return rule
        return None

    def resolve(self, value: int) -> int:
        """Return the segment length applicable at ``value``.

        Raises InvalidGroup when no rule contains the value and
        UndefinedRange when the containing rule is reserved.
        """
        rule = self.rule_for(value)
        if rule is None:
            raise InvalidGroup(f"{value:07d} is outside every range of {self.name!r}")
        if rule.length is None:
            raise UndefinedRange(
                f"{value:07d} falls in reserved range "
                f"{rule.min:07d}-{rule.max - 1:07d} of {self.name!r}"
            )
        return rule.length

    def group(self, value: int) -> Group:
        return Group(name=self.name, segment_length=self.resolve(value))

    def overlapping_rules(self) -> list[tuple[Rule, Rule]]:
        """Pairs of rules whose ranges intersect (empty for well-formed data)."""
        ordered = sorted(self.rules, key=lambda rule: (rule.min, rule.max))
        overlaps: list[tuple[Rule, Rule]] = []
        for prev, cur in zip(ordered, ordered[1:]):
            if cur.min < prev.max:
                overlaps.append((prev, cur))
        return overlaps


@dataclass(frozen=True, slots=True)
class GroupRecord:
    """One ``EAN.UCC`` or ``Group`` entry as published, before indexing.

    ``prefix`` is ``"978"`` for first-level entries and ``"978-89"`` for
    registration groups.
    """

    prefix: str
    agency: str
    rules: tuple[Rule, ...]


# ---------------------------------------------------------------------------
# Range table capability
# ---------------------------------------------------------------------------

class RangeTable(ABC):
    """Abstract query interface shared by every range table provider."""

    __slots__ = ()

    @property
    @abstractmethod
    def source(self) -> str | None:
        """Publishing authority named in the message, if any."""

    @property
    @abstractmethod
    def serial_number(self) -> str | None:
        """Message serial number, if any."""

    @property
    @abstractmethod
    def date(self) -> str:
        """Message date as published (free text)."""

    @abstractmethod
    def lookup_first_level(self, prefix: int) -> Segment:
        """Return the agency segment for a packed prefix (InvalidGroup if absent)."""

    @abstractmethod
    def lookup_second_level(self, prefix: int, group_element: int) -> Segment:
        """Return the registration-group segment (InvalidGroup if absent)."""


class MappedRangeTable(RangeTable):
    """Dict-backed range table.

    Built once from group records; the mappings are exposed read-only.
    """

    __slots__ = (
        "_ean_ucc_groups",
        "_registration_groups",
        "_date",
        "_source",
        "_serial_number",
    )

    def __init__(
        self,
        ean_ucc_groups: Mapping[int, Segment],
        registration_groups: Mapping[tuple[int, int], Segment],
        *,
        date: str,
        source: str | None = None,
        serial_number: str | None = None,
    ) -> None:
        self._ean_ucc_groups: Mapping[int, Segment] = MappingProxyType(dict(ean_ucc_groups))
        self._registration_groups: Mapping[tuple[int, int], Segment] = MappingProxyType(
            dict(registration_groups)
        )
        self._date = date
        self._source = source
        self._serial_number = serial_number

    @classmethod
    def from_records(
        cls,
        ean_ucc: Iterable[GroupRecord],
        registration_groups: Iterable[GroupRecord],
        *,
        date: str,
        source: str | None = None,
        serial_number: str | None = None,
        strict: bool = True,
    ) -> MappedRangeTable:
        """Index published records by packed key.

        Duplicate packed keys are always rejected (``"0"`` and ``"00"`` pack
        to the same element). With ``strict`` the finished table is also
        checked by ``validate()``.
        """
        first: dict[int, Segment] = {}
        for record in ean_ucc:
            key = pack_prefix(record.prefix)
            if key in first:
                raise RangeTableError("duplicate_group", record.prefix)
            first[key] = Segment(name=record.agency, rules=record.rules)

        second: dict[tuple[int, int], Segment] = {}
        for record in registration_groups:
            pair = split_group_prefix(record.prefix)
            if pair in second:
                raise RangeTableError("duplicate_group", record.prefix)
            second[pair] = Segment(name=record.agency, rules=record.rules)

        table = cls(
            first,
            second,
            date=date,
            source=source,
            serial_number=serial_number,
        )
        if strict:
            table.validate()
        return table

    # -- metadata ---------------------------------------------------------

    @property
    def source(self) -> str | None:
        return self._source

    @property
    def serial_number(self) -> str | None:
        return self._serial_number

    @property
    def date(self) -> str:
        return self._date

    @property
    def ean_ucc_groups(self) -> Mapping[int, Segment]:
        return self._ean_ucc_groups

    @property
    def registration_groups(self) -> Mapping[tuple[int, int], Segment]:
        return self._registration_groups

    # -- queries ----------------------------------------------------------

    def lookup_first_level(self, prefix: int) -> Segment:
        segment = self._ean_ucc_groups.get(prefix)
        if segment is None:
            raise InvalidGroup(f"unknown agency prefix {prefix:X}")
        return segment

    def lookup_second_level(self, prefix: int, group_element: int) -> Segment:
        segment = self._registration_groups.get((prefix, group_element))
        if segment is None:
            raise InvalidGroup(
                f"unknown registration group {prefix:X}-{group_element:X}"
            )
        return segment

    def validate(self) -> None:
        """Reject overlapping rules and registration groups without an agency entry."""
        segments = [*self._ean_ucc_groups.values(), *self._registration_groups.values()]
        for segment in segments:
            overlaps = segment.overlapping_rules()
            if overlaps:
                prev, cur = overlaps[0]
                raise RangeTableError(
                    "overlapping_ranges",
                    f"{segment.name!r}: [{prev.min}, {prev.max}) and [{cur.min}, {cur.max})",
                )
        for prefix, element in self._registration_groups:
            if prefix not in self._ean_ucc_groups:
                raise RangeTableError("orphan_group", f"{prefix:X}-{element:X}")

    def __len__(self) -> int:
        return len(self._ean_ucc_groups) + len(self._registration_groups)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(date={self._date!r}, "
            f"prefixes={len(self._ean_ucc_groups)}, "
            f"groups={len(self._registration_groups)})"
        )


# ---------------------------------------------------------------------------
# Static provider
# ---------------------------------------------------------------------------

BakedRule: TypeAlias = tuple[int, int, int]
BakedGroup: TypeAlias = tuple[str, str, tuple[BakedRule, ...]]


def records_from_baked(groups: Iterable[BakedGroup]) -> list[GroupRecord]:
    """Convert baked ``(prefix, agency, ((min, max, length), ...))`` rows.

    Baked lengths use 0 for reserved ranges.
    """
    return [
        GroupRecord(
            prefix=prefix,
            agency=agency,
            rules=tuple(
                Rule(min=lo, max=hi, length=length or None) for lo, hi, length in rules
            ),
        )
        for prefix, agency, rules in groups
    ]


class StaticRangeTable(MappedRangeTable):
    """Range table backed by the pre-baked ``isbnkit._baked_ranges`` module."""

    __slots__ = ()

    def __init__(self, module: ModuleType | None = None) -> None:
        if module is None:
            from isbnkit import _baked_ranges as module
        baked = MappedRangeTable.from_records(
            records_from_baked(module.EAN_UCC_PREFIXES),
            records_from_baked(module.REGISTRATION_GROUPS),
            date=module.MESSAGE_DATE,
            source=module.MESSAGE_SOURCE,
            serial_number=module.MESSAGE_SERIAL_NUMBER,
            strict=False,
        )
        super().__init__(
            baked.ean_ucc_groups,
            baked.registration_groups,
            date=baked.date,
            source=baked.source,
            serial_number=baked.serial_number,
        )
