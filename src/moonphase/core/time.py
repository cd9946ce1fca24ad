from __future__ import annotations

import logging
import time
from datetime import datetime, timedelta, timezone
from typing import Callable

from .errors import NaiveDatetimeError

logger = logging.getLogger(__name__)

JD_UNIX_EPOCH = 2440587.5  # JD at 1970-01-01 00:00:00 UTC
SECONDS_PER_DAY = 86400.0

_UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_ONE_MICROSECOND = timedelta(microseconds=1)


# ============================================================
# Epoch seconds -> JD
# ============================================================

def julian_date_from_seconds(seconds: float) -> float:
    """
    Unix seconds (may be negative or fractional) -> Julian Date.

    Non-finite input is not rejected; NaN and inf carry through.
    """
    return seconds / SECONDS_PER_DAY + JD_UNIX_EPOCH


def julian_date_from_integer_seconds(seconds: int) -> float:
    """Integer Unix seconds -> Julian Date. Exact below 2**53 seconds."""
    return julian_date_from_seconds(float(seconds))


# ============================================================
# datetime <-> JD
# ============================================================

def epoch_seconds_from_datetime(dt: datetime) -> float:
    """
    Timezone-aware datetime -> Unix seconds at microsecond precision.

    Counts whole microseconds from the epoch first so that whole-second
    datetimes map onto exactly the same float as their integer timestamp.
    """
    if dt.tzinfo is None or dt.utcoffset() is None:
        raise NaiveDatetimeError(f"datetime must be timezone-aware, got {dt!r}")
    micros = (dt - _UNIX_EPOCH) // _ONE_MICROSECOND
    return micros / 1_000_000.0


def julian_date_from_datetime(dt: datetime) -> float:
    jd = julian_date_from_seconds(epoch_seconds_from_datetime(dt))
    logger.debug("datetime %s -> JD %.8f", dt.isoformat(), jd)
    return jd


def datetime_from_julian_date(j_date: float) -> datetime:
    """JD -> timezone-aware datetime in UTC."""
    seconds = (j_date - JD_UNIX_EPOCH) * SECONDS_PER_DAY
    return _UNIX_EPOCH + timedelta(seconds=seconds)


# ============================================================
# Wall clock
# ============================================================

def julian_date_from_clock(clock: Callable[[], float] = time.time) -> float:
    """
    Read a wall clock returning Unix seconds and convert to JD.
    Clocks set before 1970 return negative seconds, which is fine.
    """
    seconds = float(clock())
    jd = julian_date_from_seconds(seconds)
    logger.debug("clock %.6f s -> JD %.8f", seconds, jd)
    return jd
