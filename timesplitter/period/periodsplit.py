"""Time Range Splitting
---------------------

Core splitter for dividing a wall-clock time range into equal contiguous
periods.

Supports:
  - Same-day ranges: "10:00" -> "13:00"
  - Ranges crossing midnight: "22:00" -> "02:00"
  - Full-day ranges: start == end is read as a 24-hour span
  - Interval mode: (start, end) pair per period
  - Boundary mode: start instant per period only

Key Design Principles:
  1. End not strictly after start always means "next day" (never an error)
  2. Period size keeps fractional precision; only rendering truncates to minutes
  3. The last period ends exactly at the normalized end
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta

try:
    from dateutil.relativedelta import relativedelta
except ImportError as e:
    raise ImportError("python-dateutil not installed. pip install python-dateutil") from e

from timesplitter.period.periodconfig import get_min_period_count, get_time_format
from timesplitter.period.perioderrors import InvalidCountError
from timesplitter.period.periodnormalize import (
    ClockTime,
    format_clock_time,
    parse_clock_time,
)

logger = logging.getLogger(__name__)

INTERVAL_MODE = "interval"
BOUNDARY_MODE = "boundary"
MODES = (INTERVAL_MODE, BOUNDARY_MODE)

# Nominal day that clock times are anchored to
_BASE_DATE = datetime(2000, 1, 1)


def _anchor(clock: ClockTime) -> datetime:
    """Place a ClockTime on the nominal base day."""
    return _BASE_DATE.replace(hour=clock.hour, minute=clock.minute)


def validate_period_count(count) -> int:
    """
    Check that count is an integer of at least the configured minimum.

    Raises:
        InvalidCountError: For non-integers (bool included), zero, negative
            or below-minimum counts

    Examples:
        >>> validate_period_count(3)
        3

        >>> validate_period_count(1)
        Traceback (most recent call last):
        ...
        InvalidCountError: period count must be at least 2, got 1
    """
    if isinstance(count, bool) or not isinstance(count, int):
        raise InvalidCountError(f"period count must be an integer, got {count!r}")

    minimum = get_min_period_count()
    if count < minimum:
        raise InvalidCountError(f"period count must be at least {minimum}, got {count}")
    return count


def resolve_time_range(start_text: str, end_text: str) -> dict:
    """
    Parse start/end text and apply the midnight wraparound rule.

    Args:
        start_text: Start time, "HH:mm"
        end_text: End time, "HH:mm"

    Returns:
        {
            "start": ClockTime,
            "end": ClockTime,
            "start_ts": datetime,          # on the nominal day
            "end_ts": datetime,            # same day or the day after
            "crosses_midnight": bool,      # True when end was moved a day
            "duration": timedelta,         # always > 0
        }

    Raises:
        ParseError: If either text is not a valid HH:mm time

    Examples:
        >>> r = resolve_time_range("22:00", "02:00")
        >>> r["crosses_midnight"], r["duration"]
        (True, datetime.timedelta(seconds=14400))

        >>> resolve_time_range("10:00", "10:00")["duration"]
        datetime.timedelta(days=1)
    """
    start = parse_clock_time(start_text)
    end = parse_clock_time(end_text)

    start_ts = _anchor(start)
    end_ts = _anchor(end)

    crosses_midnight = not end_ts > start_ts
    if crosses_midnight:
        end_ts = end_ts + relativedelta(days=1)

    return {
        "start": start,
        "end": end,
        "start_ts": start_ts,
        "end_ts": end_ts,
        "crosses_midnight": crosses_midnight,
        "duration": end_ts - start_ts,
    }


def check_mode(mode: str) -> str:
    """Return mode unchanged, or raise ValueError if it is not a known mode."""
    if mode not in MODES:
        raise ValueError(f"Unknown mode: {mode}. Use 'interval' or 'boundary'")
    return mode


def split_resolved_range(
    time_range: dict,
    count: int,
    *,
    mode: str = INTERVAL_MODE,
) -> list[dict]:
    """
    Split an already resolved time range into count periods.

    Args:
        time_range: Result of resolve_time_range()
        count: Number of periods (integer >= 2)
        mode: "interval" or "boundary"

    Returns:
        Period dicts as described in split_time_range()

    Raises:
        InvalidCountError: If count is not an integer >= 2
        ValueError: If mode is unknown
    """
    check_mode(mode)
    count = validate_period_count(count)

    start_ts = time_range["start_ts"]
    end_ts = time_range["end_ts"]
    total_seconds = time_range["duration"].total_seconds()
    time_format = get_time_format()

    # Multiply before dividing so whole-minute boundaries stay exact
    boundaries = [
        start_ts + timedelta(seconds=total_seconds * i / count)
        for i in range(count)
    ]
    boundaries.append(end_ts)

    logger.debug(
        f"Splitting {format_clock_time(start_ts)}-{format_clock_time(end_ts)} "
        f"({total_seconds / 60:g} min) into {count} {mode} periods"
    )

    periods = []
    for i in range(count):
        period = {
            "index": i + 1,
            "start": format_clock_time(boundaries[i], time_format),
            "start_ts": boundaries[i],
        }
        if mode == INTERVAL_MODE:
            period["end"] = format_clock_time(boundaries[i + 1], time_format)
            period["end_ts"] = boundaries[i + 1]
        periods.append(period)

    return periods


def split_time_range(
    start_text: str,
    end_text: str,
    count: int,
    *,
    mode: str = INTERVAL_MODE,
) -> list[dict]:
    """
    Split a time range into count equal contiguous periods.

    Args:
        start_text: Start time, "HH:mm"
        end_text: End time, "HH:mm"; not after start means the next day
        count: Number of periods (integer >= 2)
        mode: "interval" for start/end pairs, "boundary" for starts only

    Returns:
        List of period dicts in chronological order:
        {
            "index": int,          # 1-based
            "start": str,          # "HH:mm"
            "end": str,            # "HH:mm" (interval mode only)
            "start_ts": datetime,
            "end_ts": datetime,    # interval mode only
        }

    Raises:
        ParseError: If start_text or end_text is not HH:mm
        InvalidCountError: If count is not an integer >= 2
        ValueError: If mode is unknown

    Examples:
        >>> [(p["start"], p["end"]) for p in split_time_range("22:00", "02:00", 4)]
        [('22:00', '23:00'), ('23:00', '00:00'), ('00:00', '01:00'), ('01:00', '02:00')]

        >>> [p["start"] for p in split_time_range("10:00", "13:00", 3, mode="boundary")]
        ['10:00', '11:00', '12:00']
    """
    check_mode(mode)
    time_range = resolve_time_range(start_text, end_text)
    return split_resolved_range(time_range, count, mode=mode)


__all__ = [
    "INTERVAL_MODE",
    "BOUNDARY_MODE",
    "MODES",
    "check_mode",
    "validate_period_count",
    "resolve_time_range",
    "split_resolved_range",
    "split_time_range",
]
