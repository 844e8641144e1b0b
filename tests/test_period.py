"""Comprehensive tests for the period splitting module.

These tests verify time range splitting across:
- Same-day ranges, even and uneven splits
- Ranges crossing midnight and full-day ranges
- Interval and boundary output modes
- Format and count validation

Run with: pytest tests/test_period.py -v
Coverage: pytest tests/test_period.py --cov=timesplitter.period
"""

import pytest
from datetime import timedelta

from timesplitter.period.periodapi import (
    compute_periods,
    format_periods_display,
)
from timesplitter.period.periodsplit import (
    resolve_time_range,
    split_resolved_range,
    split_time_range,
    validate_period_count,
)
from timesplitter.period.perioderrors import (
    InvalidCountError,
    ParseError,
    PeriodSplitError,
)
from timesplitter.period.periodnormalize import ClockTime


def _pairs(result):
    return [(p["start"], p["end"]) for p in result["periods"]]


# ============================================================================
# Contract Properties
# ============================================================================

class TestSplitProperties:
    """Properties that hold for every valid split"""

    def test_count_first_last_and_contiguity(self, sample_ranges):
        """Exactly count periods, anchored at start and end, with no gaps"""
        for start, end, count in sample_ranges:
            result = compute_periods(start, end, count)
            periods = result["periods"]

            assert result["ok"] is True
            assert len(periods) == count
            assert periods[0]["start"] == start
            assert periods[-1]["end"] == end
            for i in range(count - 1):
                assert periods[i]["end"] == periods[i + 1]["start"]

    def test_indexes_are_one_based(self):
        """Periods are numbered 1..count for display"""
        result = compute_periods("08:00", "12:00", 4)
        assert [p["index"] for p in result["periods"]] == [1, 2, 3, 4]

    def test_timestamps_contiguous_and_exact_end(self, sample_ranges):
        """Core timestamps chain exactly and end on the normalized end"""
        for start, end, count in sample_ranges:
            periods = split_time_range(start, end, count)
            time_range = resolve_time_range(start, end)

            assert periods[0]["start_ts"] == time_range["start_ts"]
            assert periods[-1]["end_ts"] == time_range["end_ts"]
            for i in range(count - 1):
                assert periods[i]["end_ts"] == periods[i + 1]["start_ts"]
                assert periods[i]["start_ts"] < periods[i]["end_ts"]

    def test_idempotent(self):
        """Same input gives the same output every time"""
        first = compute_periods("21:10", "03:25", 5)
        second = compute_periods("21:10", "03:25", 5)
        assert first == second

        assert split_time_range("21:10", "03:25", 5) == split_time_range("21:10", "03:25", 5)


# ============================================================================
# Same-Day Ranges
# ============================================================================

class TestSameDay:
    """Test ranges where end is after start"""

    def test_even_hours(self):
        """10:00-13:00 in 3 gives hourly periods"""
        result = compute_periods("10:00", "13:00", 3)
        assert _pairs(result) == [
            ("10:00", "11:00"),
            ("11:00", "12:00"),
            ("12:00", "13:00"),
        ]
        assert result["crosses_midnight"] is False
        assert result["period_minutes"] == pytest.approx(60.0)

    def test_quarter_hours(self):
        """10:00-13:00 in 4 gives 45-minute periods ending exactly at 13:00"""
        result = compute_periods("10:00", "13:00", 4)
        assert _pairs(result) == [
            ("10:00", "10:45"),
            ("10:45", "11:30"),
            ("11:30", "12:15"),
            ("12:15", "13:00"),
        ]
        assert result["period_minutes"] == pytest.approx(45.0)

    def test_fractional_minutes_truncate(self):
        """Boundaries inside a minute render with seconds dropped"""
        # 10 minutes / 3 = 200s: boundaries at 10:03:20 and 10:06:40
        result = compute_periods("10:00", "10:10", 3)
        assert _pairs(result) == [
            ("10:00", "10:03"),
            ("10:03", "10:06"),
            ("10:06", "10:10"),
        ]

    def test_fractional_precision_kept_internally(self):
        """Period size is not rounded to whole minutes before adding"""
        periods = split_time_range("10:00", "11:00", 7)
        # 3600s / 7 = 514.2857...s
        step = periods[1]["start_ts"] - periods[0]["start_ts"]
        assert step.total_seconds() == pytest.approx(3600 / 7, abs=1e-6)
        assert periods[1]["start"] == "10:08"
        assert periods[-1]["end"] == "11:00"

    def test_one_digit_hour_accepted(self):
        """H:mm input is accepted and rendered as HH:mm"""
        result = compute_periods("9:00", "11:00", 2)
        assert _pairs(result) == [("09:00", "10:00"), ("10:00", "11:00")]


# ============================================================================
# Midnight Wraparound
# ============================================================================

class TestWraparound:
    """Test ranges whose end is not after their start"""

    def test_overnight(self):
        """22:00-02:00 in 4 crosses midnight in hourly steps"""
        result = compute_periods("22:00", "02:00", 4)
        assert result["ok"] is True
        assert _pairs(result) == [
            ("22:00", "23:00"),
            ("23:00", "00:00"),
            ("00:00", "01:00"),
            ("01:00", "02:00"),
        ]
        assert result["crosses_midnight"] is True
        assert result["end"] == "02:00"

    def test_equal_start_end_is_full_day(self):
        """start == end is a 24-hour span"""
        result = compute_periods("10:00", "10:00", 2)
        assert _pairs(result) == [("10:00", "22:00"), ("22:00", "10:00")]
        assert result["crosses_midnight"] is True
        assert result["period_minutes"] == pytest.approx(720.0)

    def test_midnight_to_midnight(self):
        """00:00-00:00 in 3 gives 8-hour periods"""
        result = compute_periods("00:00", "00:00", 3)
        assert _pairs(result) == [
            ("00:00", "08:00"),
            ("08:00", "16:00"),
            ("16:00", "00:00"),
        ]

    def test_two_minutes_across_midnight(self):
        """23:59-00:01 in 2 splits at midnight"""
        result = compute_periods("23:59", "00:01", 2)
        assert _pairs(result) == [("23:59", "00:00"), ("00:00", "00:01")]

    def test_resolve_time_range_moves_end(self):
        """Wrapped end lands on the following day"""
        time_range = resolve_time_range("22:00", "02:00")
        assert time_range["start"] == ClockTime(22, 0)
        assert time_range["end"] == ClockTime(2, 0)
        assert time_range["end_ts"] - time_range["start_ts"] == timedelta(hours=4)
        assert time_range["end_ts"].date() > time_range["start_ts"].date()

    def test_resolve_time_range_same_day(self):
        """End after start stays on the same day"""
        time_range = resolve_time_range("10:00", "10:01")
        assert time_range["crosses_midnight"] is False
        assert time_range["duration"] == timedelta(minutes=1)

    def test_no_drift_over_full_day(self):
        """Many uneven periods still end exactly at the normalized end"""
        periods = split_time_range("00:00", "00:00", 7)
        assert periods[-1]["end_ts"] - periods[0]["start_ts"] == timedelta(days=1)
        assert periods[-1]["end"] == "00:00"


# ============================================================================
# Output Modes
# ============================================================================

class TestModes:
    """Test interval and boundary output"""

    def test_boundary_mode(self):
        """Boundary mode returns the start of each period only"""
        result = compute_periods("10:00", "13:00", 3, mode="boundary")
        assert result["ok"] is True
        assert result["mode"] == "boundary"
        assert result["periods"] == [
            {"index": 1, "start": "10:00"},
            {"index": 2, "start": "11:00"},
            {"index": 3, "start": "12:00"},
        ]

    def test_boundary_mode_overnight(self):
        """Boundary mode wraps past midnight too"""
        periods = split_time_range("22:00", "02:00", 4, mode="boundary")
        assert [p["start"] for p in periods] == ["22:00", "23:00", "00:00", "01:00"]
        assert all("end" not in p for p in periods)

    def test_interval_is_default(self):
        """Default mode comes from config and is interval"""
        result = compute_periods("10:00", "12:00", 2)
        assert result["mode"] == "interval"
        assert all("end" in p for p in result["periods"])

    def test_unknown_mode_raises(self):
        """An unknown mode is a programming error, not a user error"""
        with pytest.raises(ValueError, match="Unknown mode"):
            compute_periods("10:00", "12:00", 2, mode="chunks")

    def test_unknown_mode_checked_before_times(self):
        """Bad mode raises even when the times are also bad"""
        with pytest.raises(ValueError, match="Unknown mode"):
            compute_periods("abc", "12:00", 2, mode="chunks")
        with pytest.raises(ValueError, match="Unknown mode"):
            split_time_range("abc", "12:00", 2, mode="chunks")

    def test_split_resolved_range_matches_split_time_range(self):
        """Splitting a pre-resolved range gives the same periods"""
        time_range = resolve_time_range("22:00", "02:00")
        assert split_resolved_range(time_range, 4) == split_time_range("22:00", "02:00", 4)


# ============================================================================
# Validation
# ============================================================================

class TestFormatErrors:
    """Test unparseable time text"""

    @pytest.mark.parametrize("bad", ["25:99", "abc", "", "24:00", "12:60", "10:5", "10:00:00", "10-00"])
    def test_bad_start_text(self, bad):
        """Bad start text gives a format error and no periods"""
        result = compute_periods(bad, "13:00", 3)
        assert result["ok"] is False
        assert result["error"] == "invalid time format"
        assert result["periods"] == []

    def test_bad_end_text(self):
        """Bad end text gives a format error"""
        result = compute_periods("10:00", "abc", 3)
        assert result["error"] == "invalid time format"

    def test_non_string_time(self):
        """Non-string input is a format error, not a crash"""
        result = compute_periods(None, "13:00", 3)
        assert result["error"] == "invalid time format"

    def test_strict_core_raises(self):
        """split_time_range raises ParseError"""
        with pytest.raises(ParseError):
            split_time_range("25:99", "13:00", 3)

    def test_format_error_wins_over_count_error(self):
        """Times are checked before the count"""
        result = compute_periods("abc", "13:00", 0)
        assert result["error"] == "invalid time format"

    def test_error_result_has_no_stale_fields(self):
        """An error result carries no periods or range info"""
        result = compute_periods("abc", "13:00", 3)
        assert "start" not in result
        assert "crosses_midnight" not in result
        assert result["detail"]


class TestCountErrors:
    """Test defensive rejection of bad counts"""

    @pytest.mark.parametrize("count", [1, 0, -1, -10])
    def test_count_below_two(self, count):
        """Counts below 2 are rejected"""
        result = compute_periods("10:00", "13:00", count)
        assert result["ok"] is False
        assert result["error"] == "invalid count"
        assert result["periods"] == []

    @pytest.mark.parametrize("count", [2.5, 3.0, "3", None, True])
    def test_count_not_integer(self, count):
        """Non-integer counts (bool included) are rejected"""
        result = compute_periods("10:00", "13:00", count)
        assert result["error"] == "invalid count"

    def test_zero_does_not_divide(self):
        """count == 0 fails cleanly in the strict core"""
        with pytest.raises(InvalidCountError):
            split_time_range("10:00", "13:00", 0)

    def test_validate_period_count(self):
        """validate_period_count passes good counts through"""
        assert validate_period_count(2) == 2
        assert validate_period_count(100) == 100
        with pytest.raises(InvalidCountError, match="at least 2"):
            validate_period_count(1)

    def test_errors_share_base_class(self):
        """Both error kinds are PeriodSplitError and ValueError"""
        assert issubclass(ParseError, PeriodSplitError)
        assert issubclass(InvalidCountError, PeriodSplitError)
        assert issubclass(PeriodSplitError, ValueError)
        assert ParseError("x").code == "invalid time format"
        assert InvalidCountError("x").code == "invalid count"


# ============================================================================
# Display
# ============================================================================

class TestDisplay:
    """Test format_periods_display"""

    def test_interval_display(self):
        """Interval results show start - end per period"""
        text = format_periods_display(compute_periods("22:00", "02:00", 2))
        assert text == "Period 1: 22:00 - 00:00\nPeriod 2: 00:00 - 02:00"

    def test_boundary_display(self):
        """Boundary results show the start per chunk"""
        text = format_periods_display(compute_periods("10:00", "13:00", 3, mode="boundary"))
        assert text == "Chunk 1: 10:00\nChunk 2: 11:00\nChunk 3: 12:00"

    def test_format_error_display(self):
        """Format errors show the time-format hint"""
        text = format_periods_display(compute_periods("abc", "13:00", 3))
        assert text == "Please enter valid times in HH:mm format"

    def test_count_error_display(self):
        """Count errors show the count hint"""
        text = format_periods_display(compute_periods("10:00", "13:00", 1))
        assert "at least 2" in text

    def test_empty_result(self):
        """Empty input renders as empty string"""
        assert format_periods_display({}) == ""
        assert format_periods_display(None) == ""
