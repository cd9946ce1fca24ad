# tests/test_time.py

import math
import random
from datetime import datetime, timedelta, timezone

import pytest

from moonphase.core import time as mt
from moonphase.core.errors import MoonPhaseError, NaiveDatetimeError


def test_unix_epoch():
    assert mt.julian_date_from_integer_seconds(0) == 2440587.5
    assert mt.julian_date_from_seconds(0.0) == 2440587.5
    assert mt.julian_date_from_datetime(datetime(1970, 1, 1, tzinfo=timezone.utc)) == 2440587.5

def test_known_epochs():
    # J2000.0 civil noon, 2000-01-01 12:00 UTC
    assert mt.julian_date_from_integer_seconds(946728000) == 2451545.0
    # One day before the Unix epoch
    assert mt.julian_date_from_seconds(-86400.0) == 2440586.5

def test_integer_and_float_seconds_agree():
    random.seed(42)
    for _ in range(1000):
        s = random.randint(-10**10, 10**10)
        assert mt.julian_date_from_integer_seconds(s) == mt.julian_date_from_seconds(float(s))

def test_non_finite_seconds_propagate():
    assert math.isnan(mt.julian_date_from_seconds(math.nan))
    assert mt.julian_date_from_seconds(math.inf) == math.inf
    assert mt.julian_date_from_seconds(-math.inf) == -math.inf

@pytest.mark.parametrize("hours", [-11, -5, 0, 3, 5.5, 14])
def test_datetime_offsets_match_timestamp(hours):
    """The same instant written in any fixed offset gives the same JD."""
    utc = datetime(2022, 1, 16, 0, 0, tzinfo=timezone.utc)
    local = utc.astimezone(timezone(timedelta(hours=hours)))
    assert mt.julian_date_from_datetime(local) == mt.julian_date_from_integer_seconds(1642291200)

def test_datetime_microseconds_kept():
    dt = datetime(1970, 1, 1, 0, 0, 0, 250000, tzinfo=timezone.utc)
    assert mt.epoch_seconds_from_datetime(dt) == 0.25
    dt = datetime(1969, 12, 31, 23, 59, 59, 500000, tzinfo=timezone.utc)
    assert mt.epoch_seconds_from_datetime(dt) == -0.5

def test_naive_datetime_rejected():
    with pytest.raises(NaiveDatetimeError):
        mt.julian_date_from_datetime(datetime(2000, 1, 1))
    # also catchable as the generic errors
    with pytest.raises(ValueError):
        mt.julian_date_from_datetime(datetime(2000, 1, 1))
    with pytest.raises(MoonPhaseError):
        mt.epoch_seconds_from_datetime(datetime(2000, 1, 1))

def test_jd_datetime_roundtrip():
    random.seed(42)
    for _ in range(1000):
        jd_in = random.uniform(2400000.5, 2500000.5)
        dt = mt.datetime_from_julian_date(jd_in)
        assert dt.tzinfo is not None
        # 1e-8 days is roughly a millisecond
        assert mt.julian_date_from_datetime(dt) == pytest.approx(jd_in, abs=1e-8)

def test_clock_is_read_once():
    calls = []

    def clock():
        calls.append(1)
        return -86400.0

    assert mt.julian_date_from_clock(clock) == 2440586.5
    assert len(calls) == 1
