"""
Tests — Record Reader / Writer
===============================
Unit tests for :mod:`src.tm35fin_converter.records`.

Inputs are written to ``tmp_path`` as raw text so the exact file layout
(field order, line separators, JSON shapes) is what gets tested.
"""

from __future__ import annotations

import json
import os
from pathlib import Path

import pandas as pd
import pytest

from src.tm35fin_converter.projection import GeographicCoordinate, PlanarCoordinate
from src.tm35fin_converter.records import (
    read_csv_records,
    read_json_records,
    read_records,
    write_records,
)
from shared.python.exceptions import (
    InvalidArgumentError,
    MalformedInputError,
    OutputWriteError,
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _write(tmp_path: Path, name: str, text: str) -> Path:
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


COORDS = [
    GeographicCoordinate(longitude=24.9384, latitude=60.1699),
    GeographicCoordinate(longitude=25.4651, latitude=65.0121),
]

# 17 significant digits, where a sloppy decimal parser lands one ulp off
FULL_PRECISION = [
    "7144978.5958011355",
    "6973005.2126360275",
    "6672000.0000000019",
]


# ---------------------------------------------------------------------------
# CSV input
# ---------------------------------------------------------------------------


class TestReadCsv:
    def test_field_order_is_y_then_x(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "in.csv", "385800.5,6672000.25\n")
        assert read_csv_records(path) == [PlanarCoordinate(x=6672000.25, y=385800.5)]

    def test_preserves_order(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "in.csv", "1,10\n2,20\n3,30\n")
        records = read_csv_records(path)
        assert [r.x for r in records] == [10.0, 20.0, 30.0]
        assert [r.y for r in records] == [1.0, 2.0, 3.0]

    def test_blank_lines_and_spaces(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "in.csv", "1, 10\n\n2,20\r\n")
        assert len(read_csv_records(path)) == 2

    def test_empty_file(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "in.csv", "")
        assert read_csv_records(path) == []

    def test_non_numeric_value(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "in.csv", "1,10\nabc,20\n")
        with pytest.raises(MalformedInputError) as info:
            read_csv_records(path)
        assert info.value.record == 2

    def test_missing_field(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "in.csv", "1,10\n2\n")
        with pytest.raises(MalformedInputError):
            read_csv_records(path)

    def test_too_many_fields(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "in.csv", "1,10,100\n2,20,200\n")
        with pytest.raises(MalformedInputError):
            read_csv_records(path)

    def test_ragged_rows(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "in.csv", "1,10\n2,20,200\n")
        with pytest.raises(MalformedInputError):
            read_csv_records(path)

    @pytest.mark.parametrize("text", FULL_PRECISION)
    def test_full_precision_values_round_correctly(self, tmp_path: Path, text: str) -> None:
        path = _write(tmp_path, "in.csv", f"{text},{text}\n")
        record = read_csv_records(path)[0]
        assert record.x == float(text)
        assert record.y == float(text)

    def test_csv_and_json_read_identically(self, tmp_path: Path) -> None:
        csv_path = _write(
            tmp_path, "in.csv", "".join(f"385800.0,{t}\n" for t in FULL_PRECISION)
        )
        json_path = _write(
            tmp_path, "in.json",
            "[" + ",".join(f'{{"x": {t}, "y": 385800.0}}' for t in FULL_PRECISION) + "]",
        )
        assert read_csv_records(csv_path) == read_json_records(json_path)


# ---------------------------------------------------------------------------
# JSON input
# ---------------------------------------------------------------------------


class TestReadJson:
    def test_objects(self, tmp_path: Path) -> None:
        path = _write(
            tmp_path, "in.json",
            json.dumps([{"x": 6672000.0, "y": 385800.0}, {"x": 7000000, "y": 500000}]),
        )
        assert read_json_records(path) == [
            PlanarCoordinate(x=6672000.0, y=385800.0),
            PlanarCoordinate(x=7000000.0, y=500000.0),
        ]

    def test_empty_array(self, tmp_path: Path) -> None:
        assert read_json_records(_write(tmp_path, "in.json", "[]")) == []

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "in.json", "[{\"x\": 1,")
        with pytest.raises(MalformedInputError, match="invalid JSON"):
            read_json_records(path)

    def test_not_an_array(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "in.json", "{\"x\": 1, \"y\": 2}")
        with pytest.raises(MalformedInputError, match="array"):
            read_json_records(path)

    @pytest.mark.parametrize(
        "item",
        [
            {"x": "6672000", "y": 385800},
            {"x": 6672000, "y": True},
            {"x": 6672000},
            [6672000, 385800],
        ],
    )
    def test_bad_items(self, tmp_path: Path, item: object) -> None:
        path = _write(tmp_path, "in.json", json.dumps([{"x": 1, "y": 2}, item]))
        with pytest.raises(MalformedInputError) as info:
            read_json_records(path)
        assert info.value.record == 2

    def test_integer_too_large_for_float(self, tmp_path: Path) -> None:
        huge = "1" + "0" * 400
        path = _write(tmp_path, "in.json", f'[{{"x": 7000000, "y": 1}}, {{"x": {huge}, "y": 500000}}]')
        with pytest.raises(MalformedInputError, match="too large") as info:
            read_json_records(path)
        assert info.value.record == 2

    def test_integer_literal_over_digit_limit(self, tmp_path: Path) -> None:
        huge = "1" * 5000
        path = _write(tmp_path, "in.json", f'[{{"x": {huge}, "y": 500000}}]')
        with pytest.raises(MalformedInputError):
            read_json_records(path)


# ---------------------------------------------------------------------------
# Dispatch and output
# ---------------------------------------------------------------------------


class TestDispatch:
    def test_unknown_input_type(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "in.xml", "<x/>")
        with pytest.raises(InvalidArgumentError):
            read_records(path, "xml")

    def test_unknown_output_type(self, tmp_path: Path) -> None:
        with pytest.raises(InvalidArgumentError):
            write_records(tmp_path / "out.xml", COORDS, "xml")

    def test_read_by_type(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "in.csv", "385800,6672000\n")
        assert read_records(path, "csv") == [PlanarCoordinate(x=6672000.0, y=385800.0)]


class TestWrite:
    def test_csv_lines(self, tmp_path: Path) -> None:
        out = tmp_path / "out.csv"
        write_records(out, COORDS, "csv")

        data = out.read_bytes()
        assert data.count(os.linesep.encode()) == 2

        df = pd.read_csv(out, header=None)
        assert df[0].tolist() == pytest.approx([24.9384, 25.4651], abs=1e-12)
        assert df[1].tolist() == pytest.approx([60.1699, 65.0121], abs=1e-12)

    def test_json_objects(self, tmp_path: Path) -> None:
        out = tmp_path / "out.json"
        write_records(out, COORDS, "json")

        with open(out, encoding="utf-8") as fh:
            data = json.load(fh)
        assert data == [
            {"lat": 60.1699, "lng": 24.9384},
            {"lat": 65.0121, "lng": 25.4651},
        ]

    @pytest.mark.parametrize("output_type", ["csv", "json"])
    def test_empty_output(self, tmp_path: Path, output_type: str) -> None:
        out = tmp_path / f"out.{output_type}"
        write_records(out, [], output_type)
        assert out.exists()

    def test_unwritable_path(self, tmp_path: Path) -> None:
        out = tmp_path / "missing_dir" / "out.json"
        with pytest.raises(OutputWriteError):
            write_records(out, COORDS, "json")
