"""
Date Utilities
==============

Conversions between UNIX seconds, aware datetimes and calendar dates used by
the quote-chart URL builder and the series parser.
"""

from datetime import UTC, date, datetime, timedelta


def to_unix_seconds(dt: datetime) -> int:
    """
    Convert datetime to Unix timestamp in whole seconds.

    Args:
        dt: Datetime object (timezone-aware or naive assumed UTC)

    Returns:
        Unix timestamp in seconds (fraction truncated)
    """
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)

    return int(dt.timestamp())


def unix_seconds_to_date(timestamp: int) -> date:
    """
    Convert Unix timestamp in seconds to the UTC calendar date.

    Time-of-day is dropped, so every bar stamped within the same UTC day maps
    to the same date.
    """
    return datetime.fromtimestamp(timestamp, tz=UTC).date()


def lookback_window(now: datetime, days: int) -> tuple[datetime, datetime]:
    """
    Return ``(now - days, now)``.

    The window is relative to the call instant and is not aligned to any
    calendar boundary.
    """
    return now - timedelta(days=days), now
