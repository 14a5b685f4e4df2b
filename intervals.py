"""Closed integer intervals and exact subtraction against a disjoint set."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Sequence


@dataclass(frozen=True)
class Interval:
    """A closed range of integers, ``start <= end``."""

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise ValueError(f"Inverted interval: [{self.start}, {self.end}]")

    def length(self) -> int:
        return self.end - self.start + 1

    def contains(self, x: int) -> bool:
        return self.start <= x <= self.end

    def overlap(self, other: Interval) -> Interval | None:
        start = max(self.start, other.start)
        end = min(self.end, other.end)
        if start > end:
            return None
        return Interval(start, end)

    def __str__(self) -> str:
        return f"[{self.start}, {self.end}]"


# ===== Carve Outcomes =====


@dataclass(frozen=True)
class Untouched:
    piece: Interval

    def remains(self) -> tuple[Interval, ...]:
        return (self.piece,)


@dataclass(frozen=True)
class Removed:
    def remains(self) -> tuple[Interval, ...]:
        return ()


@dataclass(frozen=True)
class ShrunkLeft:
    """The cut covered the piece's left end; ``kept`` is what is left of it."""

    kept: Interval

    def remains(self) -> tuple[Interval, ...]:
        return (self.kept,)


@dataclass(frozen=True)
class ShrunkRight:
    """The cut covered the piece's right end; ``kept`` is what is left of it."""

    kept: Interval

    def remains(self) -> tuple[Interval, ...]:
        return (self.kept,)


@dataclass(frozen=True)
class Split:
    left: Interval
    right: Interval

    def remains(self) -> tuple[Interval, ...]:
        return (self.left, self.right)


CarveOutcome = Untouched | Removed | ShrunkLeft | ShrunkRight | Split


def carve(piece: Interval, cut: Interval) -> CarveOutcome:
    """Remove ``cut`` from ``piece`` and describe what is left.

    piece:   |---------------------|
    cut:           |--------|
    result:  |----|          |-----|   (Split)
    """
    overlap = cut.overlap(piece)
    if overlap is None:
        return Untouched(piece)

    at_start = overlap.start == piece.start
    at_end = overlap.end == piece.end
    if at_start and at_end:
        return Removed()
    elif at_start:
        return ShrunkLeft(Interval(overlap.end + 1, piece.end))
    elif at_end:
        return ShrunkRight(Interval(piece.start, overlap.start - 1))
    else:
        return Split(
            left=Interval(piece.start, overlap.start - 1),
            right=Interval(overlap.end + 1, piece.end),
        )


def subtract(remaining: Sequence[Interval], cut: Interval) -> list[Interval]:
    """Return a fresh remaining set with ``cut`` taken out of every piece.

    ``remaining`` must be pairwise disjoint; so is the result. The right half
    of each split goes after all the original positions, and is never carved
    again in this pass.
    """
    kept: list[Interval] = []
    split_tails: list[Interval] = []
    for piece in remaining:
        outcome = carve(piece, cut)
        if isinstance(outcome, Split):
            kept.append(outcome.left)
            split_tails.append(outcome.right)
        else:
            kept.extend(outcome.remains())
    return kept + split_tails


def total_length(intervals: Iterable[Interval]) -> int:
    return sum(interval.length() for interval in intervals)
