"""Free-form ISBN string parsing.

Hyphens and spaces are separators and are dropped. ``X`` stands for the
check value 10 and is only legal as the tenth digit of an ISBN-10. Every
other character is an InvalidDigit. The digit buffer holds at most 13
digits.
"""
from __future__ import annotations

from isbnkit.errors import InvalidDigit, InvalidLength, IsbnError
from isbnkit.numeral import CHECK_DIGIT_X, Isbn, Isbn10, Isbn13

MAX_DIGITS = 13
_SEPARATORS = frozenset("- ")


def read_digits(text: str) -> list[int]:
    """Return the digit values of ``text`` with separators removed."""
    digits: list[int] = []
    seen_x = False
    for position, char in enumerate(text):
        if char in _SEPARATORS:
            continue
        if seen_x:
            raise InvalidDigit(f"unexpected {char!r} after 'X' at position {position}")
        if char == "X":
            if len(digits) != Isbn10.LENGTH - 1:
                raise InvalidDigit(f"'X' is only valid as the tenth digit (position {position})")
            digits.append(CHECK_DIGIT_X)
            seen_x = True
            continue
        if char not in "0123456789":
            raise InvalidDigit(f"invalid character {char!r} at position {position}")
        if len(digits) == MAX_DIGITS:
            raise InvalidLength(f"more than {MAX_DIGITS} digits")
        digits.append(ord(char) - ord("0"))
    return digits


def parse(text: str) -> Isbn:
    """Parse an ISBN-10 or ISBN-13, chosen by digit count."""
    digits = read_digits(text)
    if len(digits) == Isbn10.LENGTH:
        return Isbn10(digits)
    if len(digits) == Isbn13.LENGTH:
        return Isbn13(digits)
    raise InvalidLength(f"expected 10 or 13 digits, got {len(digits)}")


def parse_isbn10(text: str) -> Isbn10:
    digits = read_digits(text)
    if len(digits) != Isbn10.LENGTH:
        raise InvalidLength(f"expected 10 digits, got {len(digits)}")
    return Isbn10(digits)


def parse_isbn13(text: str) -> Isbn13:
    digits = read_digits(text)
    if len(digits) != Isbn13.LENGTH:
        raise InvalidLength(f"expected 13 digits, got {len(digits)}")
    return Isbn13(digits)


def is_valid(text: str) -> bool:
    """True if ``text`` parses as a checksum-valid ISBN-10 or ISBN-13."""
    try:
        parse(text)
    except IsbnError:
        return False
    return True
