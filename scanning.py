"""Row scanning: coverage counts and the search for the one uncovered point."""

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Iterable, Sequence

from core import Pos
from intervals import Interval, subtract, total_length
from sensors import Reading, Sensor


logger = logging.getLogger(__name__)


DEFAULT_TARGET_ROW = 2_000_000
DEFAULT_SEARCH_LIMIT = 4_000_000
DEFAULT_FREQUENCY = 4_000_000


@dataclass
class ScanConfig:
    """Run-time parameters for both analyses."""

    target_row: int = DEFAULT_TARGET_ROW
    search_limit: int = DEFAULT_SEARCH_LIMIT
    frequency: int = DEFAULT_FREQUENCY
    sort_by_radius: bool = True


class InvariantViolation(RuntimeError):
    """The sensor data does not leave exactly one uncovered point."""


def x_extent(sensors: Iterable[Sensor]) -> Interval:
    """Span from the leftmost to the rightmost reach of any sensor."""
    reaches = [sensor.reach() for sensor in sensors]
    if not reaches:
        raise ValueError("Cannot compute the extent of an empty sensor list")
    return Interval(
        min(r.start for r in reaches),
        max(r.end for r in reaches),
    )


def by_radius(sensors: Iterable[Sensor]) -> list[Sensor]:
    """Largest sensors first, so rows tend to empty out sooner."""
    return sorted(sensors, key=lambda s: s.radius, reverse=True)


def scan_row(
    sensors: Iterable[Sensor], y: int, initial: Iterable[Interval]
) -> list[Interval]:
    """Return the parts of ``initial`` on row ``y`` that no sensor covers."""
    remaining = list(initial)
    for sensor in sensors:
        if not remaining:
            break
        coverage = sensor.coverage_at(y)
        if coverage is not None:
            remaining = subtract(remaining, coverage)
    return remaining


def row_coverage_count(sensors: Sequence[Sensor], row: int) -> int:
    """Count the positions on ``row`` that some sensor covers.

    The count is taken over the extent of all sensors and comes out as
    ``(max - min) - uncovered``, one less than the inclusive point count.
    """
    extent = x_extent(sensors)
    logger.debug("Scanning row %d across %s", row, extent)
    remaining = scan_row(sensors, row, [extent])
    return (extent.end - extent.start) - total_length(remaining)


def find_gap(sensors: Sequence[Sensor], limit: int) -> Pos:
    """Find the single point in the square [0, limit]² that no sensor covers.

    Rows are scanned from 0 upward and the first row with anything left over
    must leave exactly one point.
    """
    if limit < 0:
        raise ValueError(f"Search limit must be non-negative, got {limit}")

    for y in range(limit + 1):
        remaining = scan_row(sensors, y, [Interval(0, limit)])
        if not remaining:
            continue

        if len(remaining) != 1 or remaining[0].length() != 1:
            raise InvariantViolation(
                f"Expected a single uncovered point on row {y}, found "
                + ", ".join(str(r) for r in remaining)
            )
        gap = Pos(remaining[0].start, y)
        logger.info("Found uncovered point at %s", gap)
        return gap

    raise InvariantViolation(f"Every point in [0, {limit}]² is covered")


def tuning_frequency(gap: Pos, frequency: int) -> int:
    return gap.x * frequency + gap.y


@dataclass(frozen=True)
class ScanReport:
    row: int
    row_coverage: int
    gap: Pos
    tuning_frequency: int


def run_scan(readings: Iterable[Reading], config: ScanConfig) -> ScanReport:
    """Build sensors from readings and run both analyses."""
    sensors = [Sensor.from_reading(sensor_pos, beacon_pos) for sensor_pos, beacon_pos in readings]
    if config.sort_by_radius:
        sensors = by_radius(sensors)
    logger.debug("Loaded %d sensors", len(sensors))

    coverage = row_coverage_count(sensors, config.target_row)
    gap = find_gap(sensors, config.search_limit)
    return ScanReport(
        row=config.target_row,
        row_coverage=coverage,
        gap=gap,
        tuning_frequency=tuning_frequency(gap, config.frequency),
    )
