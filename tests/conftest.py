"""Shared range-table fixtures."""
from __future__ import annotations

import pytest

from isbnkit.config import bundled_range_message_path, reset_default_range_table
from isbnkit.range_message import load_range_message
from isbnkit.range_table import MappedRangeTable, StaticRangeTable


@pytest.fixture(scope="session")
def static_table() -> StaticRangeTable:
    return StaticRangeTable()


@pytest.fixture(scope="session")
def xml_table() -> MappedRangeTable:
    return load_range_message(bundled_range_message_path())


@pytest.fixture(scope="session")
def bundled_xml() -> bytes:
    return bundled_range_message_path().read_bytes()


@pytest.fixture
def fresh_default_table():
    reset_default_range_table()
    yield
    reset_default_range_table()
