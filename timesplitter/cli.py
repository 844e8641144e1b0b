#!/usr/bin/env python3
"""Command line front end for the period splitter.

Usage:
    # Defaults from config (10:00-13:00 in 3 periods)
    python -m timesplitter.cli

    # Crossing midnight
    python -m timesplitter.cli --start 22:00 --end 02:00 --count 4

    # Start times only, as JSON
    python -m timesplitter.cli --start 09:00 --end 17:00 --count 8 --mode boundary --json

    # Save a table
    python -m timesplitter.cli --start 09:00 --end 17:00 --count 8 --output shifts.parquet

Environment Variables:
    TIMESPLITTER_CONFIG_PATH: YAML file overriding the packaged configuration
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from timesplitter.period.periodapi import compute_periods, format_periods_display
from timesplitter.period.periodconfig import load_config
from timesplitter.period.periodexport import export_periods
from timesplitter.period.periodnormalize import clamp_period_count
from timesplitter.period.periodsplit import MODES

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    defaults = load_config().get("defaults", {})

    parser = argparse.ArgumentParser(
        prog="timesplitter",
        description="Split a clock-time range into equal periods",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="An end time not after the start time is read as the next day.",
    )

    parser.add_argument(
        "--start", "-s",
        default=defaults.get("start", "10:00"),
        help="Start time in HH:mm (default: %(default)s)",
    )
    parser.add_argument(
        "--end", "-e",
        default=defaults.get("end", "13:00"),
        help="End time in HH:mm (default: %(default)s)",
    )
    # Kept as text; values below 2 or non-numeric are clamped, not rejected
    parser.add_argument(
        "--count", "-n",
        default=str(defaults.get("count", 3)),
        help="Number of periods, at least 2 (default: %(default)s)",
    )
    parser.add_argument(
        "--mode", "-m",
        choices=MODES,
        default=None,
        help="interval: start/end per period, boundary: start only (default: from config)",
    )

    parser.add_argument("--json", action="store_true", help="Print the result as JSON")
    parser.add_argument("--output", "-o", type=Path, help="Write periods to a .parquet or .csv file")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    count = clamp_period_count(args.count)
    logger.debug(f"Using period count {count} for raw input {args.count!r}")
    result = compute_periods(args.start, args.end, count, mode=args.mode)

    if not result["ok"]:
        print(format_periods_display(result), file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(result, indent=2))
    else:
        print(format_periods_display(result))

    if args.output:
        try:
            export_periods(result, args.output)
        except (ValueError, OSError) as e:
            print(f"Error: {e}", file=sys.stderr)
            return 2

    return 0


if __name__ == "__main__":
    sys.exit(main())
