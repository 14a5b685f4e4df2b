"""Core lattice types."""

from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class Pos:
    """A point on the integer lattice."""

    x: int
    y: int

    def manhattan_distance(self, other: Pos) -> int:
        return abs(self.x - other.x) + abs(self.y - other.y)

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"
