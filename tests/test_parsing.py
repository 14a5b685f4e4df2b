"""Tests for reading sensor records."""

import json
from pathlib import Path

import pytest
from core import Pos
from parsing import SensorParseError, load_readings, parse_reading, parse_readings
from test_utils import EXAMPLE_TEXT


class TestParseReading:
    def test_parses_positions(self) -> None:
        line = "Sensor at x=2, y=18: closest beacon is at x=-2, y=15"
        assert parse_reading(line) == (Pos(2, 18), Pos(-2, 15))

    def test_ignores_surrounding_whitespace(self) -> None:
        line = "  Sensor at x=0, y=0: closest beacon is at x=1, y=1\n"
        assert parse_reading(line) == (Pos(0, 0), Pos(1, 1))

    def test_parses_large_coordinates(self) -> None:
        line = "Sensor at x=3890859, y=2762958: closest beacon is at x=4037927, y=2985317"
        assert parse_reading(line) == (Pos(3890859, 2762958), Pos(4037927, 2985317))

    @pytest.mark.parametrize(
        "line",
        [
            "",
            "Sensor at x=2, y=18",
            "Sensor at x=2, y=18: closest beacon is at x=-2",
            "Sensor at x=a, y=18: closest beacon is at x=-2, y=15",
            "Beacon at x=2, y=18: closest sensor is at x=-2, y=15",
            "Sensor at x=2, y=18: closest beacon is at x=-2, y=15 extra",
        ],
    )
    def test_rejects_malformed_lines(self, line: str) -> None:
        with pytest.raises(SensorParseError):
            parse_reading(line)


class TestParseReadings:
    def test_parses_example(self) -> None:
        readings = parse_readings(EXAMPLE_TEXT)
        assert len(readings) == 14
        assert readings[0] == (Pos(2, 18), Pos(-2, 15))
        assert readings[-1] == (Pos(20, 1), Pos(15, 3))

    def test_skips_blank_lines(self) -> None:
        text = "\nSensor at x=0, y=0: closest beacon is at x=1, y=1\n\n"
        assert parse_readings(text) == [(Pos(0, 0), Pos(1, 1))]

    def test_reports_line_number_of_bad_record(self) -> None:
        text = EXAMPLE_TEXT + "garbage\n"
        with pytest.raises(SensorParseError, match="line 15"):
            parse_readings(text)

    def test_parse_error_is_a_value_error(self) -> None:
        with pytest.raises(ValueError):
            parse_readings("nonsense")


class TestLoadReadings:
    def test_loads_text_file(self, tmp_path: Path) -> None:
        path = tmp_path / "input.txt"
        path.write_text(EXAMPLE_TEXT)
        assert load_readings(path) == parse_readings(EXAMPLE_TEXT)

    def test_loads_json_file(self, tmp_path: Path) -> None:
        path = tmp_path / "input.json"
        path.write_text(
            json.dumps([{"sensor": {"x": 8, "y": 7}, "beacon": {"x": 2, "y": 10}}])
        )
        assert load_readings(path) == [(Pos(8, 7), Pos(2, 10))]

    def test_bad_json_raises_parse_error(self, tmp_path: Path) -> None:
        path = tmp_path / "input.json"
        path.write_text('[{"sensor": {"x": 8}}]')
        with pytest.raises(SensorParseError):
            load_readings(path)

    def test_missing_file_raises_os_error(self, tmp_path: Path) -> None:
        with pytest.raises(OSError):
            load_readings(tmp_path / "nope.txt")

    @pytest.mark.parametrize("x", ['"8"', "8.5", "true"])
    def test_non_integer_json_coordinate_raises_parse_error(
        self, tmp_path: Path, x: str
    ) -> None:
        path = tmp_path / "input.json"
        path.write_text(
            f'[{{"sensor": {{"x": {x}, "y": 7}}, "beacon": {{"x": 2, "y": 10}}}}]'
        )
        with pytest.raises(SensorParseError, match="integers"):
            load_readings(path)

    def test_invalid_json_raises_parse_error(self, tmp_path: Path) -> None:
        path = tmp_path / "input.json"
        path.write_text("[{")
        with pytest.raises(SensorParseError):
            load_readings(path)

    def test_non_utf8_file_raises_parse_error(self, tmp_path: Path) -> None:
        path = tmp_path / "input.txt"
        path.write_bytes(b"\xff\xfe Sensor at x=0")
        with pytest.raises(SensorParseError, match="UTF-8"):
            load_readings(path)

    @pytest.mark.parametrize("text", ["", "\n  \n\n"])
    def test_file_without_records_raises_parse_error(
        self, tmp_path: Path, text: str
    ) -> None:
        path = tmp_path / "input.txt"
        path.write_text(text)
        with pytest.raises(SensorParseError, match="no sensor records"):
            load_readings(path)

    def test_empty_json_list_raises_parse_error(self, tmp_path: Path) -> None:
        path = tmp_path / "input.json"
        path.write_text("[]")
        with pytest.raises(SensorParseError, match="no sensor records"):
            load_readings(path)
