"""
Timespan formatting.

Renders the absolute distance between two instants as ``HH:mm:ss.sss``.
Hours are not wrapped at 24, so a 30 hour span reads ``"30:00:00.000"``.
"""

import logging

import pandas as pd

from src.dates.instants import to_instant

logger = logging.getLogger(__name__)

MS_PER_SECOND = 1000
MS_PER_MINUTE = 60 * MS_PER_SECOND
MS_PER_HOUR = 60 * MS_PER_MINUTE


def split_milliseconds(total_ms: int) -> tuple[int, int, int, int]:
    """
    Split a non-negative millisecond count into (hours, minutes, seconds, ms).

    Raises:
        ValueError: If total_ms is negative.
    """
    if total_ms < 0:
        raise ValueError(f"total_ms must be non-negative, got: {total_ms}")

    hours, rest = divmod(total_ms, MS_PER_HOUR)
    minutes, rest = divmod(rest, MS_PER_MINUTE)
    seconds, ms = divmod(rest, MS_PER_SECOND)
    return hours, minutes, seconds, ms


def time_span_to_string(start_date, end_date) -> str:
    """
    Format the timespan between two instants as ``HH:mm:ss.sss``.

    Order does not matter. Sub-millisecond precision is truncated.
    If either instant is invalid the result is an empty string.

    Example:
        >>> start = make_instant(2000, 1, 1, 10, 0, 0)
        >>> time_span_to_string(start, make_instant(2000, 1, 1, 15, 20, 10, 453))
        '05:20:10.453'
    """
    start_ts = to_instant(start_date)
    end_ts = to_instant(end_date)
    if pd.isna(start_ts) or pd.isna(end_ts):
        logger.debug("Timespan requested for invalid instant(s): %r, %r", start_date, end_date)
        return ""

    diff_ms = abs(end_ts - start_ts) // pd.Timedelta(milliseconds=1)
    hours, minutes, seconds, ms = split_milliseconds(int(diff_ms))
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}.{ms:03d}"
