"""Command-line entry point: load sensor readings and run both analyses."""

from __future__ import annotations
import argparse
import json
import logging
import sys

from grid import render_grid
from parsing import SensorParseError, load_readings
from scanning import (
    DEFAULT_FREQUENCY,
    DEFAULT_SEARCH_LIMIT,
    DEFAULT_TARGET_ROW,
    ScanConfig,
    run_scan,
)
from serialization import serialize_report


# Largest square side drawn by --render
MAX_RENDER_LIMIT = 200


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments for the scan configuration."""
    parser = argparse.ArgumentParser(description="Sensor coverage scanner")
    parser.add_argument("input", help="Sensor records, one per line (or a .json file)")
    parser.add_argument(
        "--row",
        type=int,
        default=DEFAULT_TARGET_ROW,
        help=f"Row to count covered positions on (default: {DEFAULT_TARGET_ROW})",
    )
    parser.add_argument(
        "--limit",
        type=int,
        default=DEFAULT_SEARCH_LIMIT,
        help=f"Search the square [0, LIMIT] for the uncovered point (default: {DEFAULT_SEARCH_LIMIT})",
    )
    parser.add_argument(
        "--frequency",
        type=int,
        default=DEFAULT_FREQUENCY,
        help=f"Multiplier for the gap's x coordinate (default: {DEFAULT_FREQUENCY})",
    )
    parser.add_argument(
        "--no-sort",
        action="store_true",
        help="Scan sensors in input order instead of largest radius first",
    )
    parser.add_argument(
        "--json", action="store_true", help="Print the report as JSON"
    )
    parser.add_argument(
        "--render",
        action="store_true",
        help=f"Draw the coverage of [0, LIMIT]² before the report (LIMIT <= {MAX_RENDER_LIMIT})",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )

    args = parser.parse_args(argv)

    if args.limit < 0:
        parser.error("--limit must be non-negative")
    if args.render and args.limit > MAX_RENDER_LIMIT:
        parser.error(f"--render needs --limit of at most {MAX_RENDER_LIMIT}")

    return args


def config_from_args(args: argparse.Namespace) -> ScanConfig:
    return ScanConfig(
        target_row=args.row,
        search_limit=args.limit,
        frequency=args.frequency,
        sort_by_radius=not args.no_sort,
    )


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    try:
        readings = load_readings(args.input)
    except (OSError, SensorParseError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    config = config_from_args(args)
    if args.render:
        square = range(config.search_limit + 1)
        print(render_grid(readings, square, square))
        print()

    report = run_scan(readings, config)
    if args.json:
        print(json.dumps(serialize_report(report)))
    else:
        print(f"Row coverage: {report.row_coverage}")
        print(f"Tuning frequency: {report.tuning_frequency}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
