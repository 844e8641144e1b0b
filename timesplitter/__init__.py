"""Time Splitter - divide a clock-time range into equal periods

Public API for splitting a start/end wall-clock range (HH:mm, 24-hour) into
a number of equal contiguous periods, including ranges that cross midnight.

Usage:
    from timesplitter import compute_periods, clamp_period_count

    # Split 10:00-13:00 into three one-hour periods
    result = compute_periods("10:00", "13:00", 3)
    # Returns: {'ok': True, 'periods': [{'index': 1, 'start': '10:00', 'end': '11:00'}, ...], ...}

    # End before start crosses midnight
    result = compute_periods("22:00", "02:00", 4)

    # Clamp raw form input before calling
    count = clamp_period_count("1")  # Returns: 2

Command line:
    python -m timesplitter.cli --start 22:00 --end 02:00 --count 4
"""

__version__ = "0.0.1"

# ============================================================================
# Period Splitting API
# ============================================================================
# Primary interface: timesplitter.period.periodapi
# Implementation: timesplitter.period.periodsplit (strict, raises)

from .period.periodapi import (
    compute_periods,         # Primary API - split a range, errors in result
    format_periods_display,  # Format a result for display
)

from .period.periodsplit import (
    split_time_range,        # Strict splitter, raises on bad input
    resolve_time_range,      # Parse + midnight wraparound
    validate_period_count,   # Check count is an integer >= minimum
)

from .period.periodnormalize import (
    ClockTime,               # Hour/minute wall-clock value
    parse_clock_time,        # Parse "HH:mm" text
    format_clock_time,       # Render "HH:mm" text
    parse_count_draft,       # Read in-progress count input
    clamp_period_count,      # Commit count input, snapping to minimum
)

from .period.perioderrors import (
    PeriodSplitError,
    ParseError,
    InvalidCountError,
)

# ============================================================================
# Tabular Export
# ============================================================================

from .period.periodexport import (
    periods_to_dataframe,    # Result -> pandas DataFrame
    export_periods,          # Result -> .parquet / .csv
)

__all__ = [
    # Version
    "__version__",

    # ========================================================================
    # PRIMARY API - Start here!
    # ========================================================================
    "compute_periods",       # Split a range into equal periods

    # ========================================================================
    # Splitting
    # ========================================================================
    "format_periods_display",
    "split_time_range",
    "resolve_time_range",
    "validate_period_count",

    # ========================================================================
    # Input Normalization
    # ========================================================================
    "ClockTime",
    "parse_clock_time",
    "format_clock_time",
    "parse_count_draft",
    "clamp_period_count",

    # ========================================================================
    # Errors
    # ========================================================================
    "PeriodSplitError",
    "ParseError",
    "InvalidCountError",

    # ========================================================================
    # Tabular Export
    # ========================================================================
    "periods_to_dataframe",
    "export_periods",
]
