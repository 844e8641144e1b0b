"""Period module for splitting wall-clock time ranges.

This module divides a start/end clock time range into equal contiguous
periods. An end time that is not after the start time is read as falling
on the next day, so ranges may cross midnight.

Public API:
    compute_periods(start_text, end_text, count, mode=None) -> dict
        Split a range; errors are returned in the result, never raised

    split_time_range(start_text, end_text, count, mode="interval") -> list[dict]
        Strict core splitter; raises ParseError / InvalidCountError

    format_periods_display(result) -> str
        Format a result for human-readable display

    clamp_period_count(value) -> int
        Commit raw count input, snapping it to the minimum of 2

    periods_to_dataframe(result) / export_periods(result, path)
        Tabular output (pandas DataFrame, parquet or CSV)

Examples:
    >>> from timesplitter.period import compute_periods
    >>>
    >>> # Same-day range
    >>> compute_periods("10:00", "13:00", 4)["periods"]
    [{'index': 1, 'start': '10:00', 'end': '10:45'},
     {'index': 2, 'start': '10:45', 'end': '11:30'},
     {'index': 3, 'start': '11:30', 'end': '12:15'},
     {'index': 4, 'start': '12:15', 'end': '13:00'}]
    >>>
    >>> # Crossing midnight
    >>> compute_periods("22:00", "02:00", 2)["periods"]
    [{'index': 1, 'start': '22:00', 'end': '00:00'},
     {'index': 2, 'start': '00:00', 'end': '02:00'}]
    >>>
    >>> # Bad input
    >>> compute_periods("abc", "02:00", 2)["error"]
    'invalid time format'
"""

from timesplitter.period.periodapi import (
    compute_periods,
    format_periods_display,
)
from timesplitter.period.periodsplit import (
    split_time_range,
    resolve_time_range,
    validate_period_count,
)
from timesplitter.period.periodnormalize import (
    ClockTime,
    parse_clock_time,
    format_clock_time,
    parse_count_draft,
    clamp_period_count,
)
from timesplitter.period.perioderrors import (
    PeriodSplitError,
    ParseError,
    InvalidCountError,
)
from timesplitter.period.periodexport import (
    periods_to_dataframe,
    export_periods,
)

__all__ = [
    "compute_periods",
    "format_periods_display",
    "split_time_range",
    "resolve_time_range",
    "validate_period_count",
    "ClockTime",
    "parse_clock_time",
    "format_clock_time",
    "parse_count_draft",
    "clamp_period_count",
    "PeriodSplitError",
    "ParseError",
    "InvalidCountError",
    "periods_to_dataframe",
    "export_periods",
]
