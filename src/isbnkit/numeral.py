"""ISBN-10 and ISBN-13 numerals: checksums, conversion, rendering.

Both forms share one implementation parametrized by ``LENGTH`` and
``PREFIX_OFFSET``: ISBN-13 reserves its first three digits for the GS1
prefix (978/979), ISBN-10 has none and is classified as if prefixed by 978.

Numerals are frozen dataclasses over ``digits``; equality, hashing and
ordering are structural over the digit tuple. The only way to get one is the
validating constructor (or ``isbnkit.parser``), so the final digit always
matches the checksum.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import ClassVar, TypeAlias

from isbnkit import hyphenator, resolver
from isbnkit.errors import (
    DigitTooLarge,
    InvalidChecksum,
    InvalidConversion,
    InvalidDigit,
    InvalidLength,
)
from isbnkit.range_table import AGENCY_PREFIX_978, WINDOW_DIGITS, RangeTable, pack_digits

CHECK_DIGIT_X = 10
ISBN13_PREFIX_978: tuple[int, ...] = (9, 7, 8)


# ---------------------------------------------------------------------------
# Checksums
# ---------------------------------------------------------------------------

def calculate_isbn10_check_digit(digits: Sequence[int]) -> int:
    """Weighted mod-11 check digit over the first nine digits (10 means "X")."""
    total = sum(d * (10 - i) for i, d in enumerate(digits[:9]))
    return (11 - total % 11) % 11


def calculate_isbn13_check_digit(digits: Sequence[int]) -> int:
    """Alternating 1/3 weighted mod-10 check digit over the first twelve digits."""
    total = sum(d * (1 if i % 2 == 0 else 3) for i, d in enumerate(digits[:12]))
    return (10 - total % 10) % 10


# ---------------------------------------------------------------------------
# Shared numeral implementation
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True, order=True)
class _Numeral(ABC):
    digits: tuple[int, ...]

    LENGTH: ClassVar[int] = 0
    PREFIX_OFFSET: ClassVar[int] = 0

    def __init__(self, digits: Iterable[int]) -> None:
        object.__setattr__(self, "digits", tuple(digits))
        self._validate()

    @staticmethod
    @abstractmethod
    def _check_digit(digits: Sequence[int]) -> int:
        """Check digit computed from the leading digits."""

    def _max_digit(self, index: int) -> int:
        return 9

    def _validate(self) -> None:
        digits = self.digits
        if len(digits) != self.LENGTH:
            raise InvalidLength(
                f"{type(self).__name__} needs {self.LENGTH} digits, got {len(digits)}"
            )
        for index, digit in enumerate(digits):
            if not isinstance(digit, int) or isinstance(digit, bool) or digit < 0:
                raise InvalidDigit(f"digit {index} is not a decimal digit: {digit!r}")
            if digit > self._max_digit(index):
                raise DigitTooLarge(f"digit {index} is too large: {digit}")
        expected = self._check_digit(digits)
        if digits[-1] != expected:
            raise InvalidChecksum(
                f"check digit {_render_digit(digits[-1])} does not match "
                f"expected {_render_digit(expected)}"
            )

    # -- rendering --------------------------------------------------------

    def render(self) -> str:
        """Canonical form without separators."""
        return "".join(_render_digit(d) for d in self.digits)

    def __str__(self) -> str:
        return self.render()

    @property
    def check_digit(self) -> int:
        return self.digits[-1]

    @property
    def body(self) -> tuple[int, ...]:
        """Digits after the GS1 prefix and before the check digit."""
        return self.digits[self.PREFIX_OFFSET:-1]

    # -- classification helpers -------------------------------------------

    def agency_prefix(self) -> int:
        """Packed agency prefix used for the first-level table lookup."""
        return pack_digits(self.digits[:self.PREFIX_OFFSET])

    def segment(self, base: int) -> int:
        """7-digit window starting ``base`` digits after the prefix.

        The window runs over every remaining digit, check digit included, and is
        zero padded only past the end of the numeral.
        """
        start = self.PREFIX_OFFSET + base
        window = self.digits[start:start + WINDOW_DIGITS]
        value = 0
        for digit in window:
            # An ISBN-10 "X" check digit reads as 0.
            value = value * 10 + (digit if digit < CHECK_DIGIT_X else 0)
        return value * 10 ** (WINDOW_DIGITS - len(window))

    def group_prefix(self, length: int) -> int:
        """Packed registration-group element: the first ``length`` body digits."""
        return pack_digits(self.body[:length])

    # -- range table operations -------------------------------------------

    def hyphenate(self, table: RangeTable) -> str:
        return hyphenator.hyphenate(self, table)

    def registration_group_name(self, table: RangeTable) -> str:
        """Name of the registration group, e.g. ``"English language"``."""
        return resolver.registration_group(self, table).name

    def agency_name(self, table: RangeTable) -> str:
        return table.lookup_first_level(self.agency_prefix()).name


def _render_digit(digit: int) -> str:
    return "X" if digit == CHECK_DIGIT_X else str(digit)


@dataclass(frozen=True, slots=True, order=True, init=False)
class Isbn10(_Numeral):
    """10-digit ISBN. The check digit may be 10, rendered as "X"."""

    LENGTH: ClassVar[int] = 10
    PREFIX_OFFSET: ClassVar[int] = 0

    @staticmethod
    def _check_digit(digits: Sequence[int]) -> int:
        return calculate_isbn10_check_digit(digits)

    def _max_digit(self, index: int) -> int:
        return CHECK_DIGIT_X if index == self.LENGTH - 1 else 9

    def agency_prefix(self) -> int:
        return AGENCY_PREFIX_978

    def to_isbn13(self) -> Isbn13:
        return convert_10_to_13(self)


@dataclass(frozen=True, slots=True, order=True, init=False)
class Isbn13(_Numeral):
    """13-digit ISBN (EAN-13 with a 978 or 979 prefix)."""

    LENGTH: ClassVar[int] = 13
    PREFIX_OFFSET: ClassVar[int] = 3

    @staticmethod
    def _check_digit(digits: Sequence[int]) -> int:
        return calculate_isbn13_check_digit(digits)

    @classmethod
    def from_isbn10(cls, isbn10: Isbn10) -> Isbn13:
        return convert_10_to_13(isbn10)

    def to_isbn10(self) -> Isbn10:
        return convert_13_to_10(self)


Isbn: TypeAlias = Isbn10 | Isbn13


# ---------------------------------------------------------------------------
# Conversion
# ---------------------------------------------------------------------------

def convert_10_to_13(isbn10: Isbn10) -> Isbn13:
    """Prefix 978 to the first nine digits and recompute the check digit."""
    stem = ISBN13_PREFIX_978 + isbn10.digits[:9]
    return Isbn13(stem + (calculate_isbn13_check_digit(stem),))


def convert_13_to_10(isbn13: Isbn13) -> Isbn10:
    """Drop the 978 prefix and recompute the ISBN-10 check digit.

    Raises InvalidConversion for any other prefix (979 has no ISBN-10 form).
    """
    if isbn13.digits[:3] != ISBN13_PREFIX_978:
        raise InvalidConversion(
            f"{isbn13.render()} has no ISBN-10 form (prefix is not 978)"
        )
    stem = isbn13.digits[3:12]
    return Isbn10(stem + (calculate_isbn10_check_digit(stem),))


def convert(isbn: Isbn) -> Isbn:
    """Convert to the other form: ISBN-10 -> ISBN-13, ISBN-13 -> ISBN-10."""
    if isinstance(isbn, Isbn10):
        return convert_10_to_13(isbn)
    return convert_13_to_10(isbn)
