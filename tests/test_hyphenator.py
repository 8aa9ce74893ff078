"""Tests for isbnkit.hyphenator."""
from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

import pytest

from isbnkit.errors import InvalidGroup, UndefinedRange
from isbnkit.hyphenator import MAX_HYPHENATED_LENGTH, hyphenate, hyphenate_with
from isbnkit.parser import parse
from isbnkit.range_table import MappedRangeTable, StaticRangeTable
from isbnkit.resolver import SegmentBoundaries

HYPHENATED = [
    ("9781492067665", "978-1-4920-6766-5"),
    ("1492067660", "1-4920-6766-0"),
    ("8966261264", "89-6626-126-4"),
    ("9780439554930", "978-0-439-55493-0"),
    ("9782070100927", "978-2-07-010092-7"),
    ("9783518188125", "978-3-518-18812-5"),
    ("9784101050454", "978-4-10-105045-4"),
    ("9786269533251", "978-626-95332-5-1"),
    ("9798627974040", "979-8-6279-7404-0"),
    ("9780306406157", "978-0-306-40615-7"),
    ("9783161484100", "978-3-16-148410-0"),
]

# Published ISBN-10s that are already hyphenated correctly.
CANONICAL_ISBN10S = [
    "99921-58-10-7",
    "9971-5-0210-0",
    "960-425-059-0",
    "80-902734-1-6",
    "85-359-0277-5",
    "1-84356-028-3",
    "0-684-84328-5",
    "0-8044-2957-X",
    "0-85131-041-9",
    "0-943396-04-2",
    "0-9752298-0-X",
    "0-306-40615-2",
]


class TestHyphenate:
    @pytest.mark.parametrize(("text", "expected"), HYPHENATED)
    def test_hyphenate(self, text: str, expected: str, static_table: StaticRangeTable) -> None:
        assert parse(text).hyphenate(static_table) == expected

    @pytest.mark.parametrize("text", CANONICAL_ISBN10S)
    def test_published_forms(self, text: str, static_table: StaticRangeTable) -> None:
        assert hyphenate(parse(text), static_table) == text

    @pytest.mark.parametrize(("text", "_"), HYPHENATED)
    def test_hyphens_only_added(self, text: str, _: str, static_table: StaticRangeTable) -> None:
        isbn = parse(text)
        result = isbn.hyphenate(static_table)
        assert result.replace("-", "") == isbn.render()
        assert len(result) <= MAX_HYPHENATED_LENGTH
        assert result.count("-") == (4 if len(isbn.digits) == 13 else 3)

    def test_converted_forms_share_registrant(self, static_table: StaticRangeTable) -> None:
        isbn13 = parse("9781492067665")
        assert isbn13.to_isbn10().hyphenate(static_table) == "1-4920-6766-0"

    @pytest.mark.parametrize(
        "text", ["9786268533252", "9786769533256", "9798311111119", "9790000000001"],
    )
    def test_undefined_range(self, text: str, static_table: StaticRangeTable) -> None:
        with pytest.raises(UndefinedRange):
            parse(text).hyphenate(static_table)

    @pytest.mark.parametrize("text", ["9770000000003", "5000000005"])
    def test_invalid_group(self, text: str, static_table: StaticRangeTable) -> None:
        with pytest.raises(InvalidGroup):
            parse(text).hyphenate(static_table)


class TestHyphenateWith:
    def test_isbn13(self) -> None:
        boundaries = SegmentBoundaries(
            group_length=1, registrant_length=4, prefix_offset=3, body_length=9
        )
        assert hyphenate_with(parse("9781492067665"), boundaries) == "978-1-4920-6766-5"

    def test_isbn10(self) -> None:
        boundaries = SegmentBoundaries(
            group_length=1, registrant_length=7, prefix_offset=0, body_length=9
        )
        assert hyphenate_with(parse("097522980X"), boundaries) == "0-9752298-0-X"


class TestProviders:
    @pytest.mark.parametrize("text", [t for t, _ in HYPHENATED] + CANONICAL_ISBN10S)
    def test_static_and_markup_agree(
        self, text: str, static_table: StaticRangeTable, xml_table: MappedRangeTable
    ) -> None:
        isbn = parse(text)
        assert isbn.hyphenate(static_table) == isbn.hyphenate(xml_table)
        assert isbn.registration_group_name(static_table) == isbn.registration_group_name(xml_table)

    def test_shared_table_across_threads(self, static_table: StaticRangeTable) -> None:
        inputs = [text for text, _ in HYPHENATED] * 20
        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(lambda t: parse(t).hyphenate(static_table), inputs))
        expected = dict(HYPHENATED)
        assert results == [expected[t] for t in inputs]
