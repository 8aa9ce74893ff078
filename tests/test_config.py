"""Tests for isbnkit.config: default table selection and reset."""
from __future__ import annotations

from pathlib import Path

import pytest

from isbnkit.config import (
    RANGE_MESSAGE_ENV,
    build_range_table,
    bundled_range_message_path,
    default_range_table,
    range_message_path_from_env,
    reset_default_range_table,
)
from isbnkit.errors import RangeTableError
from isbnkit.io_utils import save_range_snapshot
from isbnkit.range_message import read_group_records
from isbnkit.range_table import MappedRangeTable, StaticRangeTable

pytestmark = pytest.mark.usefixtures("fresh_default_table")


class TestEnvironment:
    def test_unset(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv(RANGE_MESSAGE_ENV, raising=False)
        assert range_message_path_from_env() is None

    def test_blank(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(RANGE_MESSAGE_ENV, "  ")
        assert range_message_path_from_env() is None

    def test_set(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        monkeypatch.setenv(RANGE_MESSAGE_ENV, str(tmp_path / "RangeMessage.xml"))
        assert range_message_path_from_env() == tmp_path / "RangeMessage.xml"


class TestBuildRangeTable:
    def test_bundled_path_exists(self) -> None:
        assert bundled_range_message_path().is_file()

    def test_static_by_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv(RANGE_MESSAGE_ENV, raising=False)
        assert isinstance(build_range_table(), StaticRangeTable)

    def test_explicit_xml(self) -> None:
        table = build_range_table(bundled_range_message_path())
        assert type(table) is MappedRangeTable

    def test_snapshot(self, tmp_path: Path, bundled_xml: bytes) -> None:
        path = tmp_path / "ranges.json"
        save_range_snapshot(read_group_records(bundled_xml), path)
        table = build_range_table(path)
        assert type(table) is MappedRangeTable
        assert table.lookup_second_level(0x978, 0x89).name == "Korea, Republic"

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(RangeTableError) as excinfo:
            build_range_table(tmp_path / "missing.xml")
        assert excinfo.value.kind == "file_error"


class TestDefaultRangeTable:
    def test_shared_instance(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv(RANGE_MESSAGE_ENV, raising=False)
        table = default_range_table()
        assert isinstance(table, StaticRangeTable)
        assert default_range_table() is table

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(RANGE_MESSAGE_ENV, str(bundled_range_message_path()))
        assert type(default_range_table()) is MappedRangeTable

    def test_reset_rebuilds(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv(RANGE_MESSAGE_ENV, raising=False)
        first = default_range_table()
        reset_default_range_table()
        second = default_range_table()
        assert second is not first
        assert dict(second.ean_ucc_groups) == dict(first.ean_ucc_groups)

    def test_bad_override_is_not_cached(
        self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path
    ) -> None:
        monkeypatch.setenv(RANGE_MESSAGE_ENV, str(tmp_path / "missing.xml"))
        with pytest.raises(RangeTableError):
            default_range_table()
        monkeypatch.delenv(RANGE_MESSAGE_ENV)
        assert isinstance(default_range_table(), StaticRangeTable)
