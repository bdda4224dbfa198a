"""
Timestamp and duration helpers for Prometheus request parameters and responses.
"""

from datetime import datetime, timedelta

import re

from dateutil.parser import isoparse

RFC3339_PATTERN = re.compile(
    r"\d{4}-\d{2}-\d{2}[Tt ]\d{2}:\d{2}:\d{2}(\.\d+)?([Zz]|[+-]\d{2}:\d{2})"
)


def to_unix_seconds(value: datetime | int | float) -> float:
    """
    Convert a datetime or Unix timestamp to Unix seconds.

    Naive datetimes are interpreted as local time, as datetime.timestamp() does.

    Args:
        value: Datetime, or Unix timestamp in seconds (may be fractional).

    Returns:
        Timestamp in seconds.
    """
    if isinstance(value, datetime):
        return value.timestamp()
    return float(value)


def format_timestamp(value: datetime | int | float) -> str:
    """
    Format a timestamp as the Unix-seconds string Prometheus accepts.

    Args:
        value: Datetime, or Unix timestamp in seconds.

    Returns:
        Timestamp string (e.g. "1704067200" or "1704067200.5").
    """
    return format_seconds(to_unix_seconds(value))


def format_duration(value: timedelta | int | float) -> str:
    """
    Format a duration as float seconds for the step and timeout params.

    Args:
        value: Timedelta, or number of seconds.

    Returns:
        Duration string in seconds (e.g. "15" or "1.5").

    Raises:
        ValueError: If the duration is not positive.
    """
    seconds = value.total_seconds() if isinstance(value, timedelta) else float(value)
    if seconds <= 0:
        raise ValueError(f"Duration must be positive, got {seconds}")
    return format_seconds(seconds)


def format_seconds(seconds: float) -> str:
    """Render seconds without a trailing '.0' for whole values."""
    if seconds.is_integer():
        return str(int(seconds))
    return repr(seconds)


def parse_rfc3339(text: str) -> datetime:
    """
    Parse an RFC3339 timestamp into a datetime with a fixed UTC offset.

    The text must carry a full HH:MM:SS time and an offset; ISO 8601 forms
    outside RFC3339 (basic format, minute precision) are rejected. Fractional
    seconds beyond microsecond precision are truncated.

    Args:
        text: RFC3339 string (e.g. "2017-01-17T15:07:44.723715405+01:00").

    Returns:
        Timezone-aware datetime.

    Raises:
        ValueError: If the string is not an RFC3339 timestamp.
    """
    if not RFC3339_PATTERN.fullmatch(text):
        raise ValueError(f"Not an RFC3339 timestamp: {text!r}")
    return isoparse(text)


def format_rfc3339(value: datetime) -> str:
    """
    Format a timezone-aware datetime as RFC3339.

    Args:
        value: Datetime to format.

    Returns:
        RFC3339 string with offset.
    """
    return value.isoformat()
