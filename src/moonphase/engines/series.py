"""
moonphase.engines.series
------------------------
Vectorized phase engine: same arithmetic as engines.phase, over numpy arrays.

Useful for tabulating a span of dates or coarse-sampling before a root search.
Requires numpy (pip install "moonphase[diagnostics]").
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..core.errors import DependencyUnavailableError
from ..core.types import MoonPhase, Phase, Zodiac
from . import specs
from .phase import PHASE_BUCKETS, TAU


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise DependencyUnavailableError('Need numpy. Install: pip install "moonphase[diagnostics]"') from e


@dataclass(frozen=True)
class MoonPhaseSeries:
    """Column-wise MoonPhase values; every field is an array of equal length."""
    j_date: Any
    phase: Any
    age: Any
    fraction: Any
    distance: Any
    latitude: Any
    longitude: Any
    phase_index: Any   # int, 0..7
    zodiac_index: Any  # int, 0..11

    def __len__(self) -> int:
        return int(self.j_date.shape[0])

    def at(self, i: int) -> MoonPhase:
        return MoonPhase(
            j_date=float(self.j_date[i]),
            phase=float(self.phase[i]),
            age=float(self.age[i]),
            fraction=float(self.fraction[i]),
            distance=float(self.distance[i]),
            latitude=float(self.latitude[i]),
            longitude=float(self.longitude[i]),
            phase_name=Phase.from_index(int(self.phase_index[i])),
            zodiac_name=Zodiac.from_index(int(self.zodiac_index[i])),
        )

    def phase_names(self) -> list:
        return [Phase.from_index(int(k)) for k in self.phase_index]

    def zodiac_names(self) -> list:
        return [Zodiac.from_index(int(k)) for k in self.zodiac_index]


def _frac_signed(np, x):
    # np.modf(inf) is 0.0; the scalar engine gives NaN there.
    return np.where(np.isfinite(x), np.modf(x)[0], np.nan)


def _cycle_fraction(np, jd, cycle: specs.CycleSpec):
    return _frac_signed(np, (jd - cycle.offset) / cycle.period)


def _phase_index(np, phase):
    x = phase * PHASE_BUCKETS
    k = np.fmod(np.copysign(np.floor(np.abs(x) + 0.5), x), PHASE_BUCKETS)
    k = np.where(k < 0, k + PHASE_BUCKETS, k)
    return np.where(np.isnan(k), 0, k).astype(np.int64)


def _wrap_deg(np, x):
    y = np.fmod(x, 360.0)
    y = np.where(y < 0, y + 360.0, y)
    return np.where(y >= 360.0, 0.0, y)


_ZODIAC_BOUNDS = tuple(bound for _, bound in specs.ZODIAC_BOUNDS)

# Table slot -> Zodiac enum index; the extra last slot is the wraparound.
_ZODIAC_SLOTS = tuple(
    tuple(Zodiac).index(z) for z in [z for z, _ in specs.ZODIAC_BOUNDS] + [specs.ZODIAC_WRAP]
)


def _zodiac_index(np, longitude):
    # side="right": first bound strictly greater than the longitude.
    # NaN sorts past the end, so it wraps to Pisces like everything >= 348.58.
    k = np.searchsorted(np.asarray(_ZODIAC_BOUNDS), longitude, side="right")
    return np.asarray(_ZODIAC_SLOTS, dtype=np.int64)[k]


def compute_series(j_dates) -> MoonPhaseSeries:
    """Evaluate the phase engine at every Julian Date in `j_dates`."""
    np = _need_numpy()
    jd = np.atleast_1d(np.asarray(j_dates, dtype=float))

    phase = _cycle_fraction(np, jd, specs.SYNODIC)
    distance_phase = _cycle_fraction(np, jd, specs.DISTANCE)
    lat_phase = _cycle_fraction(np, jd, specs.LATITUDE)
    long_phase = _cycle_fraction(np, jd, specs.LONGITUDE)

    tau_d = TAU * distance_phase
    tau_p = 2.0 * TAU * phase
    delta = tau_p - tau_d

    distance = (
        specs.DISTANCE_MEAN
        - specs.DISTANCE_AMP_ANOMALY * np.cos(tau_d)
        - specs.DISTANCE_AMP_EVECTION * np.cos(delta)
        - specs.DISTANCE_AMP_VARIATION * np.cos(tau_p)
    )
    longitude = _wrap_deg(
        np,
        360.0 * long_phase
        + specs.LONGITUDE_AMP_ANOMALY * np.sin(tau_d)
        + specs.LONGITUDE_AMP_EVECTION * np.sin(delta)
        + specs.LONGITUDE_AMP_VARIATION * np.sin(tau_p),
    )

    return MoonPhaseSeries(
        j_date=jd,
        phase=phase,
        age=phase * specs.SYNODIC.period,
        fraction=(1.0 - np.cos(TAU * phase)) / 2.0,
        distance=distance,
        latitude=specs.LATITUDE_AMP * np.sin(TAU * lat_phase),
        longitude=longitude,
        phase_index=_phase_index(np, phase),
        zodiac_index=_zodiac_index(np, longitude),
    )


def julian_date_range(start: float, stop: float, step: float):
    """Evenly spaced Julian Dates in [start, stop)."""
    np = _need_numpy()
    if step <= 0:
        raise ValueError(f"step must be positive, got {step}")
    n = int(np.ceil((stop - start) / step))
    return start + step * np.arange(max(n, 0), dtype=float)
