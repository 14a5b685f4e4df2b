"""Sensors and their diamond-shaped coverage."""

from __future__ import annotations
from dataclasses import dataclass

from core import Pos
from intervals import Interval


# A sensor position paired with the nearest beacon it detected
Reading = tuple[Pos, Pos]


@dataclass(frozen=True)
class Sensor:
    pos: Pos
    radius: int

    def __post_init__(self) -> None:
        if self.radius < 0:
            raise ValueError(f"Negative sensor radius: {self.radius}")

    @classmethod
    def from_reading(cls, sensor_pos: Pos, beacon_pos: Pos) -> Sensor:
        return cls(pos=sensor_pos, radius=sensor_pos.manhattan_distance(beacon_pos))

    def coverage_at(self, y: int) -> Interval | None:
        """Return the run of x values this sensor covers on row ``y``.

        A sensor at (5, 5) with radius 4 covers:

          0 1 2 3 4 5 6 7 8 9
        1 . . . . . . . . . .
        2 . . . . # # # . . .
        3 . . . # # # # # . .
        4 . . # # # # # # # .
        5 . # # # # S # # # #
        6 . . # # # # # # # .
        7 . . . # # # # # . .
        8 . . . . # # # . . .
        9 . . . . . . . . . .

        so ``coverage_at(7)`` is [3, 7] and ``coverage_at(1)`` is None.
        Rows at exactly ``radius`` from the sensor report no coverage. A
        radius-zero sensor covers only its own point.
        """
        dy = abs(y - self.pos.y)
        if self.radius == 0:
            return Interval(self.pos.x, self.pos.x) if dy == 0 else None
        if dy >= self.radius:
            return None
        slack = self.radius - dy
        return Interval(self.pos.x - slack, self.pos.x + slack)

    def reach(self) -> Interval:
        """The x-range touched by this sensor's diamond on any row."""
        return Interval(self.pos.x - self.radius, self.pos.x + self.radius)
