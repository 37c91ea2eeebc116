"""
Instant representation shared by the date helpers.

**Conceptual**: An *instant* is a single point in time. Throughout this package
an instant is a timezone-aware ``pandas.Timestamp`` in UTC. Pandas gives us
nanosecond precision, calendar accessors (``.year``, ``.hour``, ``.minute``,
...) and timezone conversion for free, and it already has a well-known
"invalid timestamp" value: ``pd.NaT``.

**Invalid instants**: Parsers return ``pd.NaT`` for strings that do not name a
real point in time instead of raising. Every helper that accepts an instant
accepts ``pd.NaT`` too and propagates the invalidity (``False``, ``""``,
``nan``) rather than crashing.

**Local frame**: Naive values (no timezone) are interpreted in the configured
local timezone (``DATE_TASKS_LOCAL_TZ``, UTC by default) and then converted
to UTC. ``to_local()`` gives the same instant viewed in that zone.
"""

import numbers
from datetime import datetime

import numpy as np
import pandas as pd

from src.config.settings import get_settings

UTC = "UTC"

# Invalid-instant sentinel returned by the parsers
INVALID_INSTANT = pd.NaT


def local_timezone() -> str:
    """Return the configured local timezone name."""
    return get_settings().dates.local_tz


def instant_from_epoch_ms(ms: float) -> pd.Timestamp:
    """
    Build an instant from milliseconds since the Unix epoch (UTC).

    Example:
        >>> instant_from_epoch_ms(1457136000000)
        Timestamp('2016-03-05 00:00:00+0000', tz='UTC')
    """
    return pd.Timestamp(ms, unit="ms", tz=UTC)


def to_instant(value) -> pd.Timestamp:
    """
    Coerce a timestamp-like value into a UTC instant.

    Accepts ``pd.Timestamp``, ``datetime.datetime``, ``np.datetime64`` and
    plain numbers (milliseconds since the epoch). Naive values are taken to
    be in the local timezone.

    Args:
        value: Anything timestamp-like, or None/NaT.

    Returns:
        A tz-aware UTC ``pd.Timestamp``, or ``pd.NaT`` when value is missing
        or cannot be converted.
    """
    if value is None:
        return INVALID_INSTANT

    if isinstance(value, numbers.Real) and not isinstance(value, (bool, np.bool_)):
        if pd.isna(value):
            return INVALID_INSTANT
        try:
            return instant_from_epoch_ms(value)
        except (OverflowError, ValueError, TypeError):
            return INVALID_INSTANT

    try:
        ts = pd.Timestamp(value)
    except (TypeError, ValueError, OverflowError):
        return INVALID_INSTANT

    if pd.isna(ts):
        return INVALID_INSTANT

    if ts.tzinfo is None:
        # DST gaps shift forward; repeated wall times resolve to the first
        ts = ts.tz_localize(local_timezone(), ambiguous=True, nonexistent="shift_forward")

    return ts.tz_convert(UTC)


def make_instant(
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
    millisecond: int = 0,
    tz: str | None = None,
) -> pd.Timestamp:
    """
    Build an instant from calendar components.

    Args:
        year, month, day: Calendar date; month is 1-based.
        hour, minute, second, millisecond: Wall-clock time.
        tz: Zone the components are expressed in. None means the local
            timezone; pass "UTC" for a UTC construction.

    Returns:
        A tz-aware UTC ``pd.Timestamp``.

    Raises:
        ValueError: If any component is out of range.
    """
    if not 0 <= millisecond <= 999:
        raise ValueError(f"millisecond must be in 0..999, got: {millisecond}")

    wall = datetime(year, month, day, hour, minute, second, millisecond * 1000)
    ts = pd.Timestamp(wall).tz_localize(
        tz or local_timezone(), ambiguous=True, nonexistent="shift_forward"
    )
    return ts.tz_convert(UTC)


def is_valid_instant(value) -> bool:
    """Return True if value converts to a real instant (not None/NaT)."""
    return not pd.isna(to_instant(value))


def to_local(instant) -> pd.Timestamp:
    """View an instant in the local timezone (``pd.NaT`` stays ``pd.NaT``)."""
    ts = to_instant(instant)
    if pd.isna(ts):
        return INVALID_INSTANT
    return ts.tz_convert(local_timezone())


def milliseconds(instant: pd.Timestamp) -> int:
    """Millisecond component (0..999) of a valid instant."""
    return instant.microsecond // 1000
