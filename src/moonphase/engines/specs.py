from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from ..core.types import Zodiac


@dataclass(frozen=True)
class CycleSpec:
    """A mean lunar cycle: period (days) and a reference epoch (JD) at turn 0."""
    name: str
    period: float
    offset: float


# ============================================================
# CYCLE CONSTANTS
# ============================================================

# Synodic month, referenced to the new moon of 2000-01-06 18:14 UTC.
SYNODIC = CycleSpec(name="synodic", period=29.530588853, offset=2451550.26)

# Anomalistic month (distance oscillation).
DISTANCE = CycleSpec(name="distance", period=27.55454988, offset=2451562.2)

# Draconic month (latitude oscillation).
LATITUDE = CycleSpec(name="latitude", period=27.212220817, offset=2451565.2)

# Sidereal month (longitude).
LONGITUDE = CycleSpec(name="longitude", period=27.321582241, offset=2451555.8)


# ============================================================
# DISTANCE / LATITUDE / LONGITUDE AMPLITUDES
# ============================================================

DISTANCE_MEAN = 60.4        # earth radii
DISTANCE_AMP_ANOMALY = 3.3
DISTANCE_AMP_EVECTION = 0.6
DISTANCE_AMP_VARIATION = 0.5

LATITUDE_AMP = 5.1          # degrees, orbital inclination

LONGITUDE_AMP_ANOMALY = 6.3
LONGITUDE_AMP_EVECTION = 1.3
LONGITUDE_AMP_VARIATION = 0.7


# ============================================================
# ZODIAC TABLE
# ============================================================

# Upper ecliptic-longitude bound (degrees) of each constellation, ascending.
# Unevenly spaced: these are constellation boundaries, not 30 degree signs.
ZODIAC_BOUNDS: Tuple[Tuple[Zodiac, float], ...] = (
    (Zodiac.PISCES, 33.18),
    (Zodiac.ARIES, 51.16),
    (Zodiac.TAURUS, 93.44),
    (Zodiac.GEMINI, 119.48),
    (Zodiac.CANCER, 135.30),
    (Zodiac.LEO, 173.34),
    (Zodiac.VIRGO, 224.17),
    (Zodiac.LIBRA, 242.57),
    (Zodiac.SCORPIO, 271.26),
    (Zodiac.SAGITTARIUS, 302.49),
    (Zodiac.CAPRICORN, 311.72),
    (Zodiac.AQUARIUS, 348.58),
)

# Past the last bound the band wraps around to the first constellation.
ZODIAC_WRAP = Zodiac.PISCES
