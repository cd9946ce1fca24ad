from __future__ import annotations

import time
from dataclasses import asdict
from datetime import datetime
from typing import Any, Callable, Dict

from .core.time import (
    julian_date_from_clock,
    julian_date_from_datetime,
    julian_date_from_integer_seconds,
    julian_date_from_seconds,
)
from .core.types import MoonPhase
from .engines.phase import compute, cycle_angles


def from_julian_date(j_date: float) -> MoonPhase:
    return compute(j_date)

def from_epoch_seconds_int(seconds: int) -> MoonPhase:
    return compute(julian_date_from_integer_seconds(seconds))

def from_epoch_seconds_float(seconds: float) -> MoonPhase:
    return compute(julian_date_from_seconds(seconds))

def from_timezone_aware_datetime(dt: datetime) -> MoonPhase:
    """Aware datetime (any zone) -> MoonPhase. Naive datetimes raise NaiveDatetimeError."""
    return compute(julian_date_from_datetime(dt))

def from_system_clock(clock: Callable[[], float] = time.time) -> MoonPhase:
    """MoonPhase for 'now' as reported by `clock` (Unix seconds)."""
    return compute(julian_date_from_clock(clock))

def explain(j_date: float) -> Dict[str, Any]:
    """Intermediate cycle fractions alongside the final result."""
    return {
        "cycles": asdict(cycle_angles(j_date)),
        "result": compute(j_date).to_dict(),
    }

# ============================================================
# Series / event search (numpy)
# ============================================================

def phase_series(j_dates):
    from .engines.series import compute_series
    return compute_series(j_dates)

def phase_changes(start: float, end: float, **kwargs):
    from .diagnostics.events import phase_changes as _phase_changes
    return _phase_changes(start, end, **kwargs)

def zodiac_ingresses(start: float, end: float, **kwargs):
    from .diagnostics.events import zodiac_ingresses as _zodiac_ingresses
    return _zodiac_ingresses(start, end, **kwargs)

def next_phase(j_date: float, target, **kwargs):
    from .diagnostics.events import next_phase as _next_phase
    return _next_phase(j_date, target, **kwargs)
