"""
Parsers for textual date representations.

Two formats are supported:

  - RFC 2822 section 3.3 date-time, as used in email headers
    (``"Tue, 26 Jan 2016 13:48:02 GMT"``).
  - ISO 8601 extended format (``"2016-01-19T16:07:37+00:00"``,
    ``"2016-01-19T08:07:37Z"``).

Both return a UTC instant (see ``src.dates.instants``). A string that does not
name a real point in time, including impossible calendar dates such as
30 February, yields ``pd.NaT``; the parsers never raise for bad input.
"""

import logging
import re
from datetime import timezone
from email.utils import parsedate_to_datetime

import pandas as pd

from src.dates.instants import INVALID_INSTANT, to_instant

logger = logging.getLogger(__name__)

# "GMT+01", "UTC-0530", "GMT+05:30" at the end of the string
_NAMED_OFFSET = re.compile(r"\b(?:GMT|UTC|UT)([+-])(\d{1,2})(?::?(\d{2}))?\s*$", re.IGNORECASE)


def _numeric_zone(text: str) -> str:
    """Rewrite a trailing ``GMT+hh[:mm]`` zone as a numeric ``+hhmm`` offset."""
    match = _NAMED_OFFSET.search(text)
    if match is None:
        return text
    sign, hours, minutes = match.groups()
    return f"{text[:match.start()]}{sign}{int(hours):02d}{minutes or '00'}"


def parse_rfc2822(value: str) -> pd.Timestamp:
    """
    Parse an RFC 2822 date string into a UTC instant.

    Strict RFC 2822 strings go through ``email.utils``; looser calendar
    strings (``"December 17, 1995 03:24:00"``) fall back to pandas. A zone
    written as ``GMT+01`` means ``+01:00`` and ``-0000`` means UTC. Strings
    without a zone are read in the local timezone.

    Args:
        value: Date string, e.g. ``"Tue, 26 Jan 2016 13:48:02 GMT"``.

    Returns:
        UTC ``pd.Timestamp``, or ``pd.NaT`` if value is not a valid date.

    Example:
        >>> parse_rfc2822("Sun, 17 May 1998 03:00:00 GMT+01")
        Timestamp('1998-05-17 02:00:00+0000', tz='UTC')
        >>> parse_rfc2822("not a date")
        NaT
    """
    if not isinstance(value, str) or not value.strip():
        logger.debug("Rejected RFC 2822 input %r", value)
        return INVALID_INSTANT

    text = _numeric_zone(value.strip())

    try:
        parsed = parsedate_to_datetime(text)
    except (TypeError, ValueError, IndexError, OverflowError):
        parsed = None

    if parsed is not None and parsed.tzinfo is None and text.endswith("-0000"):
        # RFC 2822 3.3: -0000 is UTC with no statement about the local zone
        parsed = parsed.replace(tzinfo=timezone.utc)

    if parsed is None:
        try:
            parsed = pd.to_datetime(text, format="mixed", errors="coerce")
        except (TypeError, ValueError, OverflowError):
            parsed = INVALID_INSTANT

    instant = to_instant(parsed)
    if pd.isna(instant):
        logger.debug("Could not parse %r as an RFC 2822 date", value)
    return instant


def parse_iso8601(value: str) -> pd.Timestamp:
    """
    Parse an ISO 8601 date string into a UTC instant.

    The input's offset is honoured and the result is normalised to UTC, so
    ``"2016-01-19T08:07:37Z"`` and ``"2016-01-19T16:07:37+08:00"`` give equal
    instants. Strings without an offset are read in the local timezone.

    Args:
        value: ISO 8601 date string.

    Returns:
        UTC ``pd.Timestamp``, or ``pd.NaT`` if value is not valid ISO 8601.
    """
    if not isinstance(value, str) or not value.strip():
        logger.debug("Rejected ISO 8601 input %r", value)
        return INVALID_INSTANT

    try:
        parsed = pd.to_datetime(value.strip(), format="ISO8601", errors="coerce")
    except (TypeError, ValueError, OverflowError):
        parsed = INVALID_INSTANT

    instant = to_instant(parsed)
    if pd.isna(instant):
        logger.debug("Could not parse %r as an ISO 8601 date", value)
    return instant
