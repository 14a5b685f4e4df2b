"""Brute-force coverage grids for small inputs."""

from __future__ import annotations
from typing import Iterable, Sequence

import numpy as np

from core import Pos
from sensors import Reading, Sensor


def coverage_grid(
    sensors: Iterable[Sensor], xs: range, ys: range
) -> np.typing.NDArray[np.bool_]:
    """Mark every point covered by some sensor, indexed ``[row, col]``.

    Uses the same rule as ``Sensor.coverage_at``, evaluated point by point.
    """
    x, y = np.meshgrid(np.arange(xs.start, xs.stop), np.arange(ys.start, ys.stop))
    covered = np.zeros(x.shape, dtype=bool)
    for sensor in sensors:
        dx = np.abs(x - sensor.pos.x)
        dy = np.abs(y - sensor.pos.y)
        if sensor.radius == 0:
            covered |= (dx == 0) & (dy == 0)
        else:
            covered |= (dy < sensor.radius) & (dx + dy <= sensor.radius)
    return covered


def render_grid(readings: Sequence[Reading], xs: range, ys: range) -> str:
    """Draw sensors (S), beacons (B), covered (#) and uncovered (.) points."""
    sensors = [Sensor.from_reading(s, b) for s, b in readings]
    covered = coverage_grid(sensors, xs, ys)
    cells = np.where(covered, "#", ".")

    def mark(pos: Pos, char: str) -> None:
        if pos.x in xs and pos.y in ys:
            cells[pos.y - ys.start, pos.x - xs.start] = char

    for _, beacon_pos in readings:
        mark(beacon_pos, "B")
    for sensor_pos, _ in readings:
        mark(sensor_pos, "S")
    return "\n".join("".join(row) for row in cells)
