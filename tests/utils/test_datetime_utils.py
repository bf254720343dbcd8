#!/usr/bin/env python3
"""
Tests for datetime utility functions

Tests timestamp parsing, minute arithmetic and human-readable durations.
"""

from datetime import UTC, datetime, timedelta, timezone

import pytest

from pipeline_metrics.utils.datetime_utils import humanize_minutes, minutes_between, parse_api_timestamp


class TestParseApiTimestamp:
    """Tests for parse_api_timestamp function."""

    def test_z_suffix(self):
        """Test 'Z' suffix parses as UTC."""
        assert parse_api_timestamp("2026-02-10T10:00:00Z") == datetime(2026, 2, 10, 10, 0, tzinfo=UTC)

    def test_fractional_seconds(self):
        """Test microseconds are preserved."""
        result = parse_api_timestamp("2026-02-10T10:00:00.123456Z")
        assert result is not None
        assert result.microsecond == 123456

    def test_explicit_offset(self):
        """Test explicit offsets are kept."""
        result = parse_api_timestamp("2026-02-10T10:00:00+02:00")
        assert result is not None
        assert result.utcoffset() == timedelta(hours=2)

    def test_none_and_empty(self):
        """Test missing values return None."""
        assert parse_api_timestamp(None) is None
        assert parse_api_timestamp("") is None

    def test_invalid_format(self):
        """Test invalid strings raise ValueError."""
        with pytest.raises(ValueError, match="Invalid timestamp format"):
            parse_api_timestamp("not-a-date")

    def test_non_string(self):
        """Test non-string input raises ValueError."""
        with pytest.raises(ValueError, match="must be a string"):
            parse_api_timestamp(12345)  # type: ignore[arg-type]


class TestMinutesBetween:
    """Tests for minutes_between function."""

    def test_whole_minutes(self):
        start = datetime(2026, 2, 10, 10, 0, tzinfo=UTC)
        assert minutes_between(start, start + timedelta(hours=2)) == 120

    def test_truncates_partial_minute(self):
        start = datetime(2026, 2, 10, 10, 0, tzinfo=UTC)
        assert minutes_between(start, start + timedelta(minutes=59, seconds=59)) == 59

    def test_negative_truncates_toward_zero(self):
        start = datetime(2026, 2, 10, 10, 0, tzinfo=UTC)
        assert minutes_between(start, start - timedelta(seconds=90)) == -1

    def test_across_timezones(self):
        """Test aware datetimes in different zones compare by instant."""
        start = datetime(2026, 2, 10, 10, 0, tzinfo=UTC)
        end = datetime(2026, 2, 10, 12, 30, tzinfo=timezone(timedelta(hours=2)))
        assert minutes_between(start, end) == 30


class TestHumanizeMinutes:
    """Tests for humanize_minutes function."""

    @pytest.mark.parametrize(
        "minutes,expected",
        [
            (0, "a few seconds"),
            (0.5, "a few seconds"),
            (1, "a minute"),
            (30, "30 minutes"),
            (44, "44 minutes"),
            (45, "an hour"),
            (90, "2 hours"),
            (21 * 60, "21 hours"),
            (22 * 60, "a day"),
            (3 * 1440, "3 days"),
            (26 * 1440, "a month"),
            (60 * 1440, "2 months"),
            (330 * 1440, "a year"),
            (730 * 1440, "2 years"),
        ],
    )
    def test_thresholds(self, minutes, expected):
        assert humanize_minutes(minutes) == expected

    def test_none_is_absent(self):
        """Test absent metrics stay absent."""
        assert humanize_minutes(None) is None

    def test_sign_ignored(self):
        assert humanize_minutes(-30) == "30 minutes"
