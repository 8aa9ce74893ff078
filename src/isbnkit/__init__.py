"""ISBN-10/13 validation, conversion and range-table hyphenation."""

from isbnkit.config import (
    RANGE_MESSAGE_ENV,
    build_range_table,
    bundled_range_message_path,
    default_range_table,
    reset_default_range_table,
)
from isbnkit.errors import (
    ClassificationError,
    DigitTooLarge,
    InvalidChecksum,
    InvalidConversion,
    InvalidDigit,
    InvalidGroup,
    InvalidLength,
    IsbnError,
    ParseError,
    RangeTableError,
    UndefinedRange,
)
from isbnkit.hyphenator import hyphenate, hyphenate_with
from isbnkit.numeral import (
    Isbn,
    Isbn10,
    Isbn13,
    calculate_isbn10_check_digit,
    calculate_isbn13_check_digit,
    convert,
    convert_10_to_13,
    convert_13_to_10,
)
from isbnkit.parser import is_valid, parse, parse_isbn10, parse_isbn13
from isbnkit.range_message import (
    RangeMessage,
    load_range_message,
    parse_range_message,
    read_group_records,
)
from isbnkit.range_table import (
    Group,
    GroupRecord,
    MappedRangeTable,
    RangeTable,
    Rule,
    Segment,
    StaticRangeTable,
)
from isbnkit.resolver import SegmentBoundaries, registration_group, resolve_segments

__all__ = [
    "ClassificationError",
    "DigitTooLarge",
    "Group",
    "GroupRecord",
    "InvalidChecksum",
    "InvalidConversion",
    "InvalidDigit",
    "InvalidGroup",
    "InvalidLength",
    "Isbn",
    "Isbn10",
    "Isbn13",
    "IsbnError",
    "MappedRangeTable",
    "ParseError",
    "RANGE_MESSAGE_ENV",
    "RangeMessage",
    "RangeTable",
    "RangeTableError",
    "Rule",
    "Segment",
    "SegmentBoundaries",
    "StaticRangeTable",
    "UndefinedRange",
    "build_range_table",
    "bundled_range_message_path",
    "calculate_isbn10_check_digit",
    "calculate_isbn13_check_digit",
    "convert",
    "convert_10_to_13",
    "convert_13_to_10",
    "default_range_table",
    "hyphenate",
    "hyphenate_with",
    "is_valid",
    "load_range_message",
    "parse",
    "parse_isbn10",
    "parse_isbn13",
    "parse_range_message",
    "read_group_records",
    "registration_group",
    "reset_default_range_table",
    "resolve_segments",
]
