"""Human-readable time strings: relative timestamps, durations, quiz clock."""

from __future__ import annotations

import math
from datetime import datetime, timezone

MINUTE = 60
HOUR = 3600
DAY = 86400
WEEK = 604800


def _to_datetime(value: datetime | str) -> datetime:
    """Parse an ISO-8601 string or datetime into an aware datetime (naive = UTC)."""
    if isinstance(value, str):
        # fromisoformat() only accepts a trailing 'Z' from Python 3.11 on
        if value.endswith("Z"):
            value = value[:-1] + "+00:00"
        value = datetime.fromisoformat(value)
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value


def format_date(value: datetime | str) -> str:
    """Absolute calendar date as M/D/YYYY."""
    dt = _to_datetime(value)
    return f"{dt.month}/{dt.day}/{dt.year}"


def time_ago(timestamp: datetime | str, now: datetime | None = None) -> str:
    """Bucket the time elapsed since timestamp.

    < 1 minute -> 'just now', then whole minutes, hours and days ('5m ago',
    '2h ago', '3d ago'). A week or more falls back to the calendar date.
    Timestamps in the future (clock skew) read as 'just now'.
    """
    then = _to_datetime(timestamp)
    current = _to_datetime(now) if now is not None else datetime.now(tz=timezone.utc)
    seconds = math.floor((current - then).total_seconds())

    if seconds < MINUTE:
        return "just now"
    if seconds < HOUR:
        return f"{seconds // MINUTE}m ago"
    if seconds < DAY:
        return f"{seconds // HOUR}h ago"
    if seconds < WEEK:
        return f"{seconds // DAY}d ago"
    return format_date(then)


def format_duration(minutes: int) -> str:
    """Format a length in minutes: 45 -> '45m', 90 -> '1h 30m', 120 -> '2h'."""
    if minutes < 60:
        return f"{minutes}m"
    hours, mins = divmod(minutes, 60)
    if mins:
        return f"{hours}h {mins}m"
    return f"{hours}h"


def format_clock(seconds: int) -> str:
    """Countdown clock for timed quizzes: 605 -> '10:05'."""
    seconds = max(0, seconds)
    mins, secs = divmod(seconds, 60)
    return f"{mins}:{secs:02d}"
