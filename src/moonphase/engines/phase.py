"""
moonphase.engines.phase
-----------------------
Closed-form lunar phase engine.

Four mean cycles are reduced to signed turn fractions and combined with a
handful of periodic terms (anomaly, evection, variation) to give distance,
latitude and longitude. Accuracy is at the level of a degree or so, which is
plenty for naming the phase and the constellation.
"""

from __future__ import annotations

import math
from math import fmod

from ..core.types import CycleAngles, MoonPhase, Phase
from . import specs
from .specs import CycleSpec
from .zodiac import from_longitude

TAU = 6.283185307179586  # 2*pi

PHASE_BUCKETS = 8


# ------------------------------------------------------------
# Helpers
# ------------------------------------------------------------

def frac_signed(x: float) -> float:
    """
    Fractional part with the sign of x: frac_signed(-0.3) == -0.3.
    This is NOT wrapping to [0,1); the phase bucketing depends on it.
    Non-finite input gives NaN.
    """
    if not math.isfinite(x):
        return math.nan
    return math.modf(x)[0]


def round_half_away(x: float) -> float:
    """Round to nearest, ties away from zero (2.5 -> 3, -2.5 -> -3)."""
    return math.copysign(math.floor(abs(x) + 0.5), x)


def wrap_deg(x_deg: float) -> float:
    """Wrap degrees to [0,360)."""
    y = fmod(x_deg, 360.0)
    if y < 0:
        y += 360.0
    # -1e-20 + 360.0 rounds to 360.0
    if y >= 360.0:
        y = 0.0
    return y


def cycle_fraction(j_date: float, cycle: CycleSpec) -> float:
    """Signed fraction of `cycle` elapsed since its reference epoch."""
    return frac_signed((j_date - cycle.offset) / cycle.period)


def phase_index(phase: float) -> int:
    """Bucket a signed synodic fraction into 0..7 (0 = new, 4 = full)."""
    x = phase * PHASE_BUCKETS
    if math.isnan(x):
        return 0
    k = fmod(round_half_away(x), PHASE_BUCKETS)
    if k < 0:
        k += PHASE_BUCKETS
    return int(k)


# ------------------------------------------------------------
# Engine
# ------------------------------------------------------------

def cycle_angles(j_date: float) -> CycleAngles:
    phase = cycle_fraction(j_date, specs.SYNODIC)
    return CycleAngles(
        j_date=j_date,
        phase=phase,
        distance_phase=cycle_fraction(j_date, specs.DISTANCE),
        lat_phase=cycle_fraction(j_date, specs.LATITUDE),
        long_phase=cycle_fraction(j_date, specs.LONGITUDE),
        phase_index=phase_index(phase),
    )


def compute(j_date: float) -> MoonPhase:
    """Full set of lunar quantities at a Julian Date."""
    ang = cycle_angles(j_date)
    phase = ang.phase

    age = phase * specs.SYNODIC.period
    fraction = (1.0 - math.cos(TAU * phase)) / 2.0

    # Anomaly angle, second harmonic of the synodic angle, and their difference.
    tau_d = TAU * ang.distance_phase
    tau_p = 2.0 * TAU * phase
    delta = tau_p - tau_d

    distance = (
        specs.DISTANCE_MEAN
        - specs.DISTANCE_AMP_ANOMALY * math.cos(tau_d)
        - specs.DISTANCE_AMP_EVECTION * math.cos(delta)
        - specs.DISTANCE_AMP_VARIATION * math.cos(tau_p)
    )

    latitude = specs.LATITUDE_AMP * math.sin(TAU * ang.lat_phase)

    longitude = wrap_deg(
        360.0 * ang.long_phase
        + specs.LONGITUDE_AMP_ANOMALY * math.sin(tau_d)
        + specs.LONGITUDE_AMP_EVECTION * math.sin(delta)
        + specs.LONGITUDE_AMP_VARIATION * math.sin(tau_p)
    )

    return MoonPhase(
        j_date=j_date,
        phase=phase,
        age=age,
        fraction=fraction,
        distance=distance,
        latitude=latitude,
        longitude=longitude,
        phase_name=Phase.from_index(ang.phase_index),
        zodiac_name=from_longitude(longitude),
    )
