#!/usr/bin/env python3
"""
Datetime Utility Functions

Centralized datetime parsing, minute arithmetic and duration rendering shared by
the domain models and the metrics engine.

Handles common patterns:
- ISO-8601 timestamps with 'Z' suffix (raw CodePipeline JSON)
- Whole-minute differences between two timestamps
- Approximate natural-language durations ("2 hours", "a day")
"""

import math
from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class HumanizeThresholds:
    """
    Thresholds for converting a duration into approximate natural language.

    Each value is the exclusive upper bound of a unit before the next larger
    unit is used (e.g. 45 minutes and above renders as "an hour").
    """

    FEW_SECONDS: int = 44
    MINUTES: int = 45
    HOURS: int = 22
    DAYS: int = 26
    MONTHS: int = 11

    DAYS_PER_400_YEARS: int = 146097
    """Gregorian days per 400 years (4800 months)"""

    MONTHS_PER_400_YEARS: int = 4800


humanize_thresholds = HumanizeThresholds()


def parse_api_timestamp(timestamp_str: str | None) -> datetime | None:
    """
    Parse an ISO timestamp with optional 'Z' suffix to a datetime object.

    Args:
        timestamp_str: ISO timestamp string, or None

    Returns:
        datetime object (timezone-aware when the string carries an offset), or None if input is empty

    Raises:
        ValueError: If timestamp format is invalid or cannot be parsed

    Examples:
        >>> parse_api_timestamp("2026-02-10T10:00:00Z")
        datetime.datetime(2026, 2, 10, 10, 0, tzinfo=datetime.timezone.utc)

        >>> parse_api_timestamp(None)
        None
    """
    if not timestamp_str:
        return None

    if not isinstance(timestamp_str, str):
        raise ValueError(f"Timestamp must be a string, got {type(timestamp_str)}")

    try:
        # Replace 'Z' with '+00:00' for ISO format compatibility
        normalized = timestamp_str.replace("Z", "+00:00")
        return datetime.fromisoformat(normalized)
    except (ValueError, AttributeError) as e:
        raise ValueError(f"Invalid timestamp format: {timestamp_str}") from e


def minutes_between(start: datetime, end: datetime) -> int:
    """
    Calculate whole minutes elapsed from start to end.

    Partial minutes are truncated toward zero, so a negative interval of
    90 seconds is -1 minute rather than -2.

    Args:
        start: Interval start
        end: Interval end

    Returns:
        Elapsed whole minutes (negative if end precedes start)

    Examples:
        >>> minutes_between(datetime(2026, 2, 10, 10, 0), datetime(2026, 2, 10, 10, 59, 59))
        59
    """
    return int((end - start).total_seconds() / 60)


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def humanize_minutes(minutes: float | None) -> str | None:
    """
    Render a duration in minutes as approximate natural language.

    Picks the largest sensible unit, e.g. 90 minutes is "2 hours" and
    1500 minutes is "a day". The sign of the duration is ignored.

    Args:
        minutes: Duration in minutes, or None for an absent metric

    Returns:
        Human-readable duration, or None if minutes is None

    Examples:
        >>> humanize_minutes(30)
        '30 minutes'
        >>> humanize_minutes(60 * 24 * 3)
        '3 days'
    """
    if minutes is None:
        return None

    t = humanize_thresholds
    total_seconds = abs(minutes) * 60
    days_exact = total_seconds / 86400
    months_exact = days_exact * t.MONTHS_PER_400_YEARS / t.DAYS_PER_400_YEARS

    seconds = _round_half_up(total_seconds)
    mins = _round_half_up(total_seconds / 60)
    hours = _round_half_up(total_seconds / 3600)
    days = _round_half_up(days_exact)
    months = _round_half_up(months_exact)
    years = _round_half_up(months_exact / 12)

    if seconds <= t.FEW_SECONDS:
        return "a few seconds"
    if mins <= 1:
        return "a minute"
    if mins < t.MINUTES:
        return f"{mins} minutes"
    if hours <= 1:
        return "an hour"
    if hours < t.HOURS:
        return f"{hours} hours"
    if days <= 1:
        return "a day"
    if days < t.DAYS:
        return f"{days} days"
    if months <= 1:
        return "a month"
    if months < t.MONTHS:
        return f"{months} months"
    if years <= 1:
        return "a year"
    return f"{years} years"
