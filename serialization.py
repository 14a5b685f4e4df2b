"""Serialization and deserialization of readings and scan reports."""

from __future__ import annotations
from typing import Any, Dict, List

from core import Pos
from scanning import ScanReport
from sensors import Reading


# ===== Basic Types =====


def serialize_pos(pos: Pos) -> Dict[str, int]:
    return {"x": pos.x, "y": pos.y}


def deserialize_pos(data: Dict[str, Any]) -> Pos:
    x, y = data["x"], data["y"]
    # bool is a subclass of int, so check the exact type
    if type(x) is not int or type(y) is not int:
        raise TypeError(f"Coordinates must be integers, got x={x!r}, y={y!r}")
    return Pos(x=x, y=y)


# ===== Readings =====


def deserialize_reading(data: Dict[str, Any]) -> Reading:
    return deserialize_pos(data["sensor"]), deserialize_pos(data["beacon"])


def deserialize_readings(data: List[Dict[str, Any]]) -> List[Reading]:
    if not isinstance(data, list):
        raise TypeError(f"Expected a list of readings, got {type(data).__name__}")
    return [deserialize_reading(d) for d in data]


# ===== Reports =====


def serialize_report(report: ScanReport) -> Dict[str, Any]:
    return {
        "row": report.row,
        "row_coverage": report.row_coverage,
        "gap": serialize_pos(report.gap),
        "tuning_frequency": report.tuning_frequency,
    }
