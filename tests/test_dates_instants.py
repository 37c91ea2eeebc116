"""
Tests for src/dates/instants.py
"""

from datetime import datetime, timedelta, timezone

import numpy as np
import pandas as pd
import pytest

from src.config.settings import reset_settings
from src.dates.instants import (
    instant_from_epoch_ms,
    is_valid_instant,
    make_instant,
    milliseconds,
    to_instant,
    to_local,
)


def test_to_instant_naive_datetime_defaults_to_utc():
    """Test that a naive datetime is read as UTC under default settings."""
    result = to_instant(datetime(2016, 1, 19, 8, 7, 37))

    assert result == pd.Timestamp("2016-01-19 08:07:37", tz="UTC")
    assert str(result.tz) == "UTC"


def test_to_instant_naive_datetime_uses_local_timezone(monkeypatch):
    """Test that a naive datetime is read in the configured local timezone."""
    monkeypatch.setenv("DATE_TASKS_LOCAL_TZ", "Asia/Tokyo")
    reset_settings()

    result = to_instant(datetime(2016, 1, 19, 8, 7, 37))

    assert result == pd.Timestamp("2016-01-18 23:07:37", tz="UTC")


def test_to_instant_aware_datetime_is_converted():
    """Test that an aware datetime keeps its absolute moment."""
    plus_eight = timezone(timedelta(hours=8))
    result = to_instant(datetime(2016, 1, 19, 16, 7, 37, tzinfo=plus_eight))

    assert result == pd.Timestamp("2016-01-19 08:07:37", tz="UTC")
    assert result.hour == 8


def test_to_instant_numbers_are_epoch_milliseconds():
    """Test that numbers are treated as milliseconds since the epoch."""
    assert to_instant(0) == pd.Timestamp("1970-01-01", tz="UTC")
    assert to_instant(1457136000000) == pd.Timestamp("2016-03-05", tz="UTC")
    assert to_instant(1500.0) == pd.Timestamp("1970-01-01 00:00:01.500", tz="UTC")


def test_to_instant_numpy_datetime64():
    """Test that numpy datetime64 values are accepted."""
    result = to_instant(np.datetime64("2016-01-19T08:07:37"))

    assert result == pd.Timestamp("2016-01-19 08:07:37", tz="UTC")


@pytest.mark.parametrize("value", [None, pd.NaT, float("nan"), "garbage", object(), 10**30])
def test_to_instant_invalid_values(value):
    """Test that missing or unconvertible values become NaT."""
    assert to_instant(value) is pd.NaT


def test_instant_from_epoch_ms():
    """Test construction from a Date.UTC style millisecond count."""
    result = instant_from_epoch_ms(1457136000000)

    assert result == make_instant(2016, 3, 5, tz="UTC")


def test_make_instant_local_and_utc(monkeypatch):
    """Test that tz=None means local time and tz='UTC' means UTC."""
    monkeypatch.setenv("DATE_TASKS_LOCAL_TZ", "Asia/Tokyo")
    reset_settings()

    local = make_instant(2016, 1, 1, 9, 0, 0)
    utc = make_instant(2016, 1, 1, 9, 0, 0, tz="UTC")

    assert utc - local == pd.Timedelta(hours=9)
    assert str(local.tz) == "UTC"


def test_make_instant_milliseconds():
    """Test that the millisecond component is stored."""
    instant = make_instant(2000, 1, 1, 10, 0, 0, 250)

    assert milliseconds(instant) == 250


@pytest.mark.parametrize(
    "kwargs",
    [
        {"year": 2015, "month": 2, "day": 29},
        {"year": 2016, "month": 13, "day": 1},
        {"year": 2016, "month": 1, "day": 1, "hour": 24},
        {"year": 2016, "month": 1, "day": 1, "millisecond": 1000},
    ],
)
def test_make_instant_out_of_range_raises(kwargs):
    """Test that impossible components are rejected."""
    with pytest.raises(ValueError):
        make_instant(**kwargs)


def test_make_instant_skips_dst_gap(monkeypatch):
    """Test that a wall time inside a DST gap is shifted forward, not rejected."""
    monkeypatch.setenv("DATE_TASKS_LOCAL_TZ", "America/New_York")
    reset_settings()

    # 2016-03-13 02:30 does not exist in New York; clocks jump to 03:00 EDT
    result = make_instant(2016, 3, 13, 2, 30)

    assert result == pd.Timestamp("2016-03-13 07:00", tz="UTC")


def test_to_local(monkeypatch):
    """Test viewing an instant in the local timezone."""
    instant = make_instant(2015, 12, 31, 20, 0, 0, tz="UTC")

    assert to_local(instant).year == 2015

    monkeypatch.setenv("DATE_TASKS_LOCAL_TZ", "Asia/Tokyo")
    reset_settings()

    local = to_local(instant)
    assert local.year == 2016
    assert local.hour == 5
    assert local == instant
    assert to_local(pd.NaT) is pd.NaT


def test_is_valid_instant():
    """Test the validity check on good and bad values."""
    assert is_valid_instant(make_instant(2016, 1, 1))
    assert is_valid_instant(datetime(2016, 1, 1))
    assert not is_valid_instant(pd.NaT)
    assert not is_valid_instant(None)


def test_oversized_epoch_number_propagates_as_invalid():
    """Test that a number too large for any timestamp is treated like NaT downstream."""
    from src.dates.clock import angle_between_clock_hands
    from src.dates.timespan import time_span_to_string

    assert time_span_to_string(10**30, make_instant(2000, 1, 1)) == ""
    assert np.isnan(angle_between_clock_hands(10**30))
