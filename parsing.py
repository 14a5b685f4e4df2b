"""Reading sensor records from text and JSON files."""

from __future__ import annotations
import json
import re
from pathlib import Path

from core import Pos
from sensors import Reading
from serialization import deserialize_readings


_READING_RE = re.compile(
    r"Sensor at x=(-?\d+), y=(-?\d+): closest beacon is at x=(-?\d+), y=(-?\d+)"
)


class SensorParseError(ValueError):
    """A sensor record could not be parsed."""


def parse_reading(line: str) -> Reading:
    """Parse ``Sensor at x=2, y=18: closest beacon is at x=-2, y=15``."""
    match = _READING_RE.fullmatch(line.strip())
    if match is None:
        raise SensorParseError(f"Malformed sensor record: {line.strip()!r}")
    sx, sy, bx, by = (int(g) for g in match.groups())
    return Pos(sx, sy), Pos(bx, by)


def parse_readings(text: str) -> list[Reading]:
    """Parse one record per line, skipping blank lines.

    Raises SensorParseError for the first bad line; nothing is returned for a
    partially valid input.
    """
    readings = []
    for lineno, line in enumerate(text.splitlines(), start=1):
        if not line.strip():
            continue
        try:
            readings.append(parse_reading(line))
        except SensorParseError as e:
            raise SensorParseError(f"line {lineno}: {e}") from e
    return readings


def load_readings(path: str | Path) -> list[Reading]:
    """Load readings from a text file, or from JSON if the name ends in .json.

    Undecodable, malformed or empty files all raise SensorParseError.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise SensorParseError(f"{path}: not a UTF-8 text file ({e})") from e

    if path.suffix == ".json":
        try:
            readings = deserialize_readings(json.loads(text))
        except (KeyError, TypeError, ValueError) as e:
            raise SensorParseError(f"{path}: {e}") from e
    else:
        readings = parse_readings(text)

    if not readings:
        raise SensorParseError(f"{path}: no sensor records")
    return readings
