"""
Date and time calculation helpers.

Parsers for RFC 2822 and ISO 8601 strings, a leap-year predicate, a timespan
formatter and the clock-hand angle calculator. Instants are tz-aware UTC
``pandas.Timestamp`` values; ``pd.NaT`` marks an invalid instant.
"""

from src.dates.calendar import is_leap_year
from src.dates.clock import angle_between_clock_hands
from src.dates.parsing import parse_iso8601, parse_rfc2822
from src.dates.timespan import time_span_to_string

__all__ = [
    "parse_rfc2822",
    "parse_iso8601",
    "is_leap_year",
    "time_span_to_string",
    "angle_between_clock_hands",
]
