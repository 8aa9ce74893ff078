"""Tests for isbnkit.io_utils: JSON helpers and range snapshots."""
from __future__ import annotations

from pathlib import Path

import pytest

from isbnkit.errors import RangeTableError
from isbnkit.io_utils import (
    load_json,
    load_range_snapshot,
    range_message_from_dict,
    range_message_to_dict,
    save_json,
    save_range_snapshot,
)
from isbnkit.range_message import read_group_records
from isbnkit.range_table import StaticRangeTable


def _payload() -> dict:
    return {
        "date": "Tue, 1 Oct 2024 09:00:00 BST",
        "source": None,
        "serial_number": None,
        "ean_ucc": [
            {"prefix": "978", "agency": "International ISBN Agency", "rules": [[0, 10000000, 1]]},
        ],
        "registration_groups": [
            {"prefix": "978-0", "agency": "English language", "rules": [[0, 5000000, 2], [5000000, 10000000, 0]]},
        ],
    }


class TestJson:
    def test_save_and_load(self, tmp_path: Path) -> None:
        path = tmp_path / "nested" / "data.json"
        save_json({"b": 1, "a": [1, 2]}, path)
        assert load_json(path) == {"a": [1, 2], "b": 1}

    def test_compact(self, tmp_path: Path) -> None:
        path = tmp_path / "data.json"
        save_json({"b": 1, "a": 2}, path, pretty=False)
        assert path.read_bytes() == b'{"a":2,"b":1}'


class TestSnapshotDicts:
    def test_reserved_length_is_zero(self, bundled_xml: bytes) -> None:
        payload = range_message_to_dict(read_group_records(bundled_xml))
        (first_978,) = [r for r in payload["ean_ucc"] if r["prefix"] == "978"]
        assert [6600000, 7000000, 0] in first_978["rules"]

    def test_from_dict(self) -> None:
        message = range_message_from_dict(_payload())
        assert message.date == "Tue, 1 Oct 2024 09:00:00 BST"
        assert message.registration_groups[0].rules[1].length is None

    def test_missing_date(self) -> None:
        payload = _payload()
        del payload["date"]
        with pytest.raises(RangeTableError) as excinfo:
            range_message_from_dict(payload)
        assert excinfo.value.kind == "no_message_date"

    def test_no_prefixes(self) -> None:
        payload = _payload()
        payload["ean_ucc"] = []
        with pytest.raises(RangeTableError) as excinfo:
            range_message_from_dict(payload)
        assert excinfo.value.kind == "no_ean_ucc_prefix"

    def test_no_groups(self) -> None:
        payload = _payload()
        del payload["registration_groups"]
        with pytest.raises(RangeTableError) as excinfo:
            range_message_from_dict(payload)
        assert excinfo.value.kind == "no_group"

    @pytest.mark.parametrize("rules", [[[0, 10]], [["a", 10, 1]], None])
    def test_malformed_rules(self, rules: object) -> None:
        payload = _payload()
        payload["registration_groups"][0]["rules"] = rules
        with pytest.raises(RangeTableError) as excinfo:
            range_message_from_dict(payload)
        assert excinfo.value.kind == "bad_snapshot"

    def test_invalid_rule_keeps_its_kind(self) -> None:
        payload = _payload()
        payload["registration_groups"][0]["rules"] = [[0, 10, 9]]
        with pytest.raises(RangeTableError) as excinfo:
            range_message_from_dict(payload)
        assert excinfo.value.kind == "length_too_large"

    @pytest.mark.parametrize("payload", [[], "x", None])
    def test_top_level_not_an_object(self, payload: object) -> None:
        with pytest.raises(RangeTableError) as excinfo:
            range_message_from_dict(payload)
        assert excinfo.value.kind == "bad_snapshot"

    @pytest.mark.parametrize("key", ["ean_ucc", "registration_groups"])
    def test_record_list_not_a_list(self, key: str) -> None:
        payload = _payload()
        payload[key] = 5
        with pytest.raises(RangeTableError) as excinfo:
            range_message_from_dict(payload)
        assert excinfo.value.kind == "bad_snapshot"


class TestSnapshotFiles:
    def test_matches_static_table(
        self, tmp_path: Path, bundled_xml: bytes, static_table: StaticRangeTable
    ) -> None:
        path = tmp_path / "ranges.json"
        save_range_snapshot(read_group_records(bundled_xml), path)
        table = load_range_snapshot(path)
        assert dict(table.ean_ucc_groups) == dict(static_table.ean_ucc_groups)
        assert dict(table.registration_groups) == dict(static_table.registration_groups)
        assert table.serial_number == static_table.serial_number

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(RangeTableError) as excinfo:
            load_range_snapshot(tmp_path / "absent.json")
        assert excinfo.value.kind == "file_error"

    def test_not_json(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(RangeTableError) as excinfo:
            load_range_snapshot(path)
        assert excinfo.value.kind == "file_error"

    def test_array_snapshot(self, tmp_path: Path) -> None:
        path = tmp_path / "array.json"
        path.write_text("[]", encoding="utf-8")
        with pytest.raises(RangeTableError) as excinfo:
            load_range_snapshot(path)
        assert excinfo.value.kind == "bad_snapshot"
