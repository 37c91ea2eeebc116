"""
Calendar predicates.

Gregorian leap-year rule: a year is a leap year if it is divisible by 4,
except century years, which must also be divisible by 400
(2000 is a leap year, 1900 is not).
"""

import pandas as pd

from src.dates.instants import to_local


def is_leap(year: int) -> bool:
    """Return True if the Gregorian calendar year has 366 days."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def is_leap_year(date) -> bool:
    """
    Return True if the instant falls in a leap year.

    The year is read in the local timezone; month, day and time of day are
    ignored. An invalid instant (``pd.NaT``) is never a leap year.

    Example:
        >>> is_leap_year(make_instant(2000, 2, 1))
        True
        >>> is_leap_year(make_instant(1900, 2, 1))
        False
    """
    local = to_local(date)
    if pd.isna(local):
        return False
    return is_leap(local.year)
