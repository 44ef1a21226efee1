"""Unit tests for duration parsing.

Tests suffixed durations, clock-style literals, and invalid input.
"""

from datetime import timedelta

import pytest
from fsclean.core.duration import INVALID_DURATION, is_valid_duration, parse_duration


class TestSuffixedDurations:
    """Tests for durations with a unit suffix."""

    def test_days_short(self) -> None:
        """'7d' is seven days."""
        assert parse_duration("7d") == timedelta(days=7)

    def test_hours_short(self) -> None:
        """'12h' is twelve hours."""
        assert parse_duration("12h") == timedelta(hours=12)

    def test_minutes_long(self) -> None:
        """'30minutes' is thirty minutes."""
        assert parse_duration("30minutes") == timedelta(minutes=30)

    def test_fractional_days(self) -> None:
        """'1.5d' is 36 hours."""
        assert parse_duration("1.5d") == timedelta(hours=36)

    @pytest.mark.parametrize(
        ("token", "expected"),
        [
            ("2days", timedelta(days=2)),
            ("3hours", timedelta(hours=3)),
            ("45m", timedelta(minutes=45)),
            ("0.5h", timedelta(minutes=30)),
            ("0d", timedelta(0)),
        ],
    )
    def test_long_and_short_suffixes(self, token: str, expected: timedelta) -> None:
        """Long and short suffixes map to the same units."""
        assert parse_duration(token) == expected

    @pytest.mark.parametrize("token", ["7D", "7Days", "12H", "12HOURS", "30M", "30Minutes"])
    def test_suffix_case_insensitive(self, token: str) -> None:
        """Suffixes are matched regardless of case."""
        assert is_valid_duration(parse_duration(token))

    def test_surrounding_whitespace_ignored(self) -> None:
        """Leading and trailing whitespace is stripped."""
        assert parse_duration("  7d  ") == timedelta(days=7)


class TestClockDurations:
    """Tests for clock-style duration literals."""

    def test_hours_minutes_seconds(self) -> None:
        """'02:30:15' is parsed as hh:mm:ss."""
        assert parse_duration("02:30:15") == timedelta(hours=2, minutes=30, seconds=15)

    def test_days_prefix(self) -> None:
        """'1.02:03:04' carries a day count before the dot."""
        assert parse_duration("1.02:03:04") == timedelta(days=1, hours=2, minutes=3, seconds=4)

    def test_fractional_seconds(self) -> None:
        """A fraction after the seconds is honored."""
        assert parse_duration("00:00:01.5") == timedelta(seconds=1.5)

    def test_hours_minutes_only(self) -> None:
        """'01:30' is parsed as hh:mm."""
        assert parse_duration("01:30") == timedelta(hours=1, minutes=30)

    def test_bare_day_count(self) -> None:
        """A bare integer is a number of days."""
        assert parse_duration("3") == timedelta(days=3)

    @pytest.mark.parametrize("token", ["24:00:00", "00:60:00", "00:00:60"])
    def test_out_of_range_components(self, token: str) -> None:
        """Clock components beyond their range are rejected."""
        assert parse_duration(token) == INVALID_DURATION


class TestInvalidDurations:
    """Tests for input that yields the invalid sentinel."""

    @pytest.mark.parametrize(
        "token",
        ["garbage", "", "   ", "d", "xh", "1.2.3d", "-5d", "-01:00:00", "nand", "infh", "1:2:3:4"],
    )
    def test_invalid_tokens(self, token: str) -> None:
        """Malformed, empty, or negative input returns the sentinel."""
        assert parse_duration(token) == INVALID_DURATION

    def test_very_long_day_count_is_invalid(self) -> None:
        """Digit strings beyond the integer conversion limit are invalid."""
        assert parse_duration("1" * 5000) == INVALID_DURATION

    def test_very_long_clock_day_prefix_is_invalid(self) -> None:
        """A huge day prefix in a clock literal is invalid."""
        assert parse_duration("1" * 5000 + ".01:00:00") == INVALID_DURATION

    def test_overflow_is_invalid(self) -> None:
        """Durations beyond the representable range are invalid."""
        assert parse_duration("1e12d") == INVALID_DURATION

    def test_sentinel_is_not_zero(self) -> None:
        """The sentinel is distinct from a zero duration."""
        assert INVALID_DURATION != timedelta(0)
        assert is_valid_duration(timedelta(0)) is True
        assert is_valid_duration(INVALID_DURATION) is False
