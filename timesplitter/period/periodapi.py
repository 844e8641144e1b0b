"""Period splitting API.

Public API for splitting a wall-clock time range into equal periods.
Never raises for bad user input: errors come back in the result dict.
"""

import logging
from typing import Optional

from timesplitter.period.periodconfig import get_message, get_time_format, load_config
from timesplitter.period.perioderrors import InvalidCountError, ParseError, PeriodSplitError
from timesplitter.period.periodnormalize import format_clock_time
from timesplitter.period.periodsplit import (
    BOUNDARY_MODE,
    check_mode,
    resolve_time_range,
    split_resolved_range,
)

logger = logging.getLogger(__name__)

_MESSAGE_KEYS = {
    ParseError.code: "invalid_time_format",
    InvalidCountError.code: "invalid_count",
}


def _error_result(error: PeriodSplitError) -> dict:
    return {
        "ok": False,
        "periods": [],
        "error": error.code,
        "detail": error.message,
    }


def compute_periods(
    start_text: str,
    end_text: str,
    count: int,
    *,
    mode: Optional[str] = None,
) -> dict:
    """
    Split a time range into count equal periods.

    Ranges whose end is not after their start cross midnight; equal start
    and end mean a full 24 hours. The last period always ends exactly at
    the requested end.

    Args:
        start_text: Start time, "HH:mm" (24-hour)
        end_text: End time, "HH:mm" (24-hour)
        count: Number of periods, integer >= 2 (callers clamp raw input
            with clamp_period_count() first)
        mode: "interval" (default) or "boundary"

    Returns:
        On success:
        {
            "ok": True,
            "periods": [{"index": 1, "start": "10:00", "end": "11:00"}, ...],
            "error": None,
            "mode": "interval",
            "start": "10:00",
            "end": "13:00",
            "crosses_midnight": False,
            "period_minutes": 60.0,
        }

        On failure:
        {
            "ok": False,
            "periods": [],
            "error": "invalid time format" | "invalid count",
            "detail": str,   # what exactly was wrong
        }

        In boundary mode each period has "index" and "start" only.

    Raises:
        ValueError: If mode is unknown; checked before any input is parsed

    Examples:
        >>> compute_periods("22:00", "02:00", 4)["periods"]
        [{'index': 1, 'start': '22:00', 'end': '23:00'},
         {'index': 2, 'start': '23:00', 'end': '00:00'},
         {'index': 3, 'start': '00:00', 'end': '01:00'},
         {'index': 4, 'start': '01:00', 'end': '02:00'}]

        >>> compute_periods("10:00", "10:00", 2)["periods"]
        [{'index': 1, 'start': '10:00', 'end': '22:00'},
         {'index': 2, 'start': '22:00', 'end': '10:00'}]

        >>> compute_periods("25:99", "13:00", 3)
        {'ok': False, 'periods': [], 'error': 'invalid time format', 'detail': ...}

        >>> compute_periods("10:00", "13:00", 1)["error"]
        'invalid count'
    """
    if mode is None:
        mode = load_config().get("default_mode", "interval")
    check_mode(mode)

    try:
        time_range = resolve_time_range(start_text, end_text)
        periods = split_resolved_range(time_range, count, mode=mode)
    except PeriodSplitError as e:
        logger.warning(f"Rejected split request ({start_text!r}, {end_text!r}, {count!r}): {e.message}")
        return _error_result(e)

    time_format = get_time_format()
    keys = ("index", "start") if mode == BOUNDARY_MODE else ("index", "start", "end")

    return {
        "ok": True,
        "periods": [{k: p[k] for k in keys} for p in periods],
        "error": None,
        "mode": mode,
        "start": format_clock_time(time_range["start_ts"], time_format),
        "end": format_clock_time(time_range["end_ts"], time_format),
        "crosses_midnight": time_range["crosses_midnight"],
        "period_minutes": time_range["duration"].total_seconds() / 60 / count,
    }


def format_periods_display(result: dict) -> str:
    """
    Format a compute_periods() result for human-readable display.

    Examples:
        >>> print(format_periods_display(compute_periods("10:00", "12:00", 2)))
        Period 1: 10:00 - 11:00
        Period 2: 11:00 - 12:00

        >>> print(format_periods_display(compute_periods("10:00", "12:00", 2, mode="boundary")))
        Chunk 1: 10:00
        Chunk 2: 11:00

        >>> format_periods_display(compute_periods("abc", "12:00", 2))
        'Please enter valid times in HH:mm format'
    """
    if not result:
        return ""

    if not result.get("ok"):
        message_key = _MESSAGE_KEYS.get(result.get("error"))
        if message_key is None:
            return str(result.get("error", ""))
        return get_message(message_key, "display")

    lines = []
    for period in result["periods"]:
        if "end" in period:
            lines.append(f"Period {period['index']}: {period['start']} - {period['end']}")
        else:
            lines.append(f"Chunk {period['index']}: {period['start']}")

    return "\n".join(lines)


__all__ = [
    "compute_periods",
    "format_periods_display",
]
