"""Typed failures for parsing, classifying and range-table loading.

Every failure is an exception subclass so callers can catch the whole family
(``IsbnError``) or one specific kind. Classification is a pure function of
immutable inputs; nothing here is retryable.

Hierarchy:
  IsbnError            base for all numeral failures (a ValueError)
    InvalidLength      digit count is not 10 / 13 (or buffer overflow)
    InvalidDigit       non-numeral character, misplaced "X"
    DigitTooLarge      digit value out of bounds at construction
    InvalidChecksum    final digit does not match the checksum
    InvalidConversion  ISBN-13 -> ISBN-10 on a non-978 prefix
    InvalidGroup       no matching prefix/range in the range table
    UndefinedRange     range exists but is reserved/unassigned
  RangeTableError      malformed range-table source (build time only)
"""
from __future__ import annotations

from typing import Literal, TypeAlias


class IsbnError(ValueError):
    """Base class for every ISBN validation or classification failure."""


class InvalidLength(IsbnError):
    """The given input is too short or too long to be an ISBN."""


class InvalidDigit(IsbnError):
    """Encountered a character or value that is not a valid ISBN digit."""


class DigitTooLarge(IsbnError):
    """A digit exceeds 9 (or 10 for the ISBN-10 check digit)."""


class InvalidChecksum(IsbnError):
    """The check digit does not match the preceding digits."""


class InvalidConversion(IsbnError):
    """ISBN-13 to ISBN-10 conversion requires the 978 prefix."""


class InvalidGroup(IsbnError):
    """The number does not fall in a currently assigned ISBN range."""


class UndefinedRange(IsbnError):
    """The number falls in a range the authority marks as reserved."""


# Failures a caller may see from parse() / construction.
ParseError: TypeAlias = InvalidLength | InvalidDigit | DigitTooLarge | InvalidChecksum

# Failures a caller may see from hyphenation / group-name lookups.
ClassificationError: TypeAlias = InvalidGroup | UndefinedRange


RangeTableErrorKind: TypeAlias = Literal[
    "no_range_message_tag",
    "no_message_date",
    "no_ean_ucc_prefixes",
    "no_ean_ucc_prefix",
    "no_registration_groups",
    "no_group",
    "missing_tag",
    "prefix_too_long",
    "invalid_prefix_char",
    "bad_length_string",
    "length_too_large",
    "bad_range",
    "no_dash_in_range",
    "overlapping_ranges",
    "orphan_group",
    "duplicate_group",
    "bad_snapshot",
    "file_error",
]


class RangeTableError(ValueError):
    """Raised when a range table source is malformed.

    ``kind`` names the failure so callers can branch without parsing the
    message; ``detail`` carries the offending value where one exists.
    """

    def __init__(self, kind: RangeTableErrorKind, detail: str = "") -> None:
        self.kind: RangeTableErrorKind = kind
        self.detail = detail
        message = kind if not detail else f"{kind}: {detail}"
        super().__init__(message)
