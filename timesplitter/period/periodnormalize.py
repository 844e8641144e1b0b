"""Clock Time and Period Count Normalization
-----------------------------------------

Parsing and formatting helpers for HH:mm wall-clock text, plus the
caller-side policy for turning raw period-count input into a usable count.

Examples:
  >>> parse_clock_time("22:00")
  ClockTime(hour=22, minute=0)

  >>> format_clock_time(ClockTime(hour=9, minute=5))
  '09:05'

  >>> clamp_period_count("1")
  2
"""

import logging
import re
import unicodedata
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional

from timesplitter.period.periodconfig import MIN_PERIOD_COUNT_FLOOR, get_min_period_count
from timesplitter.period.perioderrors import ParseError

logger = logging.getLogger(__name__)

# Hour may be written with one digit ("9:30"), minute always with two
_HHMM_PATTERN = re.compile(r"^([0-9]{1,2}):([0-9]{2})$")

# Leading integer, as a number input widget would read it ("3abc" -> 3)
_LEADING_INT_PATTERN = re.compile(r"^[+-]?[0-9]+")


@dataclass(frozen=True)
class ClockTime:
    """A wall-clock time of day with no date or timezone identity."""

    hour: int
    minute: int

    def __str__(self) -> str:
        return format_clock_time(self)

    @property
    def minutes_since_midnight(self) -> int:
        return self.hour * 60 + self.minute


def normalize_time_text(text: str) -> str:
    """
    Normalize raw time text before parsing.

    Transformations:
      - Unicode normalization (NFKC), so full-width digits and colons match
      - Strip surrounding whitespace

    Examples:
        >>> normalize_time_text(" 09:30 ")
        '09:30'

        >>> normalize_time_text("１０：００")
        '10:00'
    """
    if not text:
        return ""
    text = unicodedata.normalize("NFKC", text)
    return text.strip()


def parse_clock_time(text: Any) -> ClockTime:
    """
    Parse "HH:mm" (or "H:mm") text into a ClockTime.

    Args:
        text: Time text as produced by a time input widget

    Returns:
        ClockTime

    Raises:
        ParseError: If text is not a string, does not match HH:mm, or has
            an hour outside 0..23 or a minute outside 0..59

    Examples:
        >>> parse_clock_time("07:45")
        ClockTime(hour=7, minute=45)

        >>> parse_clock_time("25:99")
        Traceback (most recent call last):
        ...
        ParseError: hour must be 0..23, got '25:99'
    """
    if not isinstance(text, str):
        raise ParseError(f"time must be a string in HH:mm format, got {type(text).__name__}")

    text_norm = normalize_time_text(text)
    match = _HHMM_PATTERN.match(text_norm)
    if not match:
        raise ParseError(f"time must be in HH:mm format, got {text!r}")

    hour = int(match.group(1))
    minute = int(match.group(2))

    if not (0 <= hour <= 23):
        raise ParseError(f"hour must be 0..23, got {text!r}")
    if not (0 <= minute <= 59):
        raise ParseError(f"minute must be 0..59, got {text!r}")

    return ClockTime(hour=hour, minute=minute)


def format_clock_time(value, time_format: str = "%H:%M") -> str:
    """
    Render a ClockTime or datetime as 24-hour wall-clock text.

    Seconds and fractions are truncated, never rounded, so a boundary at
    10:44:59.9 renders as "10:44".

    Examples:
        >>> format_clock_time(ClockTime(23, 5))
        '23:05'

        >>> format_clock_time(datetime(2000, 1, 2, 1, 30, 59))
        '01:30'
    """
    if isinstance(value, ClockTime):
        value = datetime(2000, 1, 1, value.hour, value.minute)
    return value.strftime(time_format)


def parse_count_draft(value: Any) -> Optional[int]:
    """
    Read an in-progress period count the way a number input does.

    A blank or non-numeric draft is an uncommitted state, returned as None,
    so a form can show an empty box while the user is typing.

    Examples:
        >>> parse_count_draft("4")
        4

        >>> parse_count_draft("3abc")
        3

        >>> parse_count_draft("") is None
        True
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if value != value or value in (float("inf"), float("-inf")):
            return None
        return int(value)

    text = normalize_time_text(str(value))
    match = _LEADING_INT_PATTERN.match(text)
    if not match:
        return None
    return int(match.group(0))


def clamp_period_count(value: Any, minimum: Optional[int] = None) -> int:
    """
    Commit a raw period count, snapping it to the minimum.

    Blank, non-numeric and too-small values all become the minimum (2 by
    default). Used by callers before invoking the splitter, either on every
    change or when the input is finalized.

    Args:
        value: Raw count (int, str, None, ...)
        minimum: Floor to clamp to (default: min_period_count from config;
            never below 2)

    Returns:
        Integer count >= minimum

    Examples:
        >>> clamp_period_count("5")
        5

        >>> clamp_period_count("0")
        2

        >>> clamp_period_count(None)
        2
    """
    if minimum is None:
        minimum = get_min_period_count()
    minimum = max(minimum, MIN_PERIOD_COUNT_FLOOR)

    count = parse_count_draft(value)
    if count is None or count < minimum:
        logger.debug(f"Clamped period count {value!r} to {minimum}")
        return minimum
    return count


__all__ = [
    "ClockTime",
    "normalize_time_text",
    "parse_clock_time",
    "format_clock_time",
    "parse_count_draft",
    "clamp_period_count",
]
