from __future__ import annotations
from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Dict


class Phase(Enum):
    """Eight-way bucketing of the synodic cycle, in cycle order."""
    NEW = "new"
    WAXING_CRESCENT = "waxing_crescent"
    FIRST_QUARTER = "first_quarter"
    WAXING_GIBBOUS = "waxing_gibbous"
    FULL = "full"
    WANING_GIBBOUS = "waning_gibbous"
    LAST_QUARTER = "last_quarter"
    WANING_CRESCENT = "waning_crescent"

    @classmethod
    def from_index(cls, index: int) -> "Phase":
        return _PHASES[index]


class Zodiac(Enum):
    """Zodiac constellations, ordered by ascending ecliptic longitude."""
    PISCES = "pisces"
    ARIES = "aries"
    TAURUS = "taurus"
    GEMINI = "gemini"
    CANCER = "cancer"
    LEO = "leo"
    VIRGO = "virgo"
    LIBRA = "libra"
    SCORPIO = "scorpio"
    SAGITTARIUS = "sagittarius"
    CAPRICORN = "capricorn"
    AQUARIUS = "aquarius"

    @classmethod
    def from_index(cls, index: int) -> "Zodiac":
        return _ZODIACS[index]

    @classmethod
    def from_longitude(cls, longitude: float) -> "Zodiac":
        from ..engines.zodiac import from_longitude
        return from_longitude(longitude)


_PHASES = tuple(Phase)
_ZODIACS = tuple(Zodiac)


@dataclass(frozen=True)
class CycleAngles:
    """Signed cycle fractions for one Julian date (turns, in (-1, 1))."""
    j_date: float
    phase: float
    distance_phase: float
    lat_phase: float
    long_phase: float
    phase_index: int


@dataclass(frozen=True)
class MoonPhase:
    j_date: float
    phase: float            # 0 - 1, 0.5 = full
    age: float              # days into the current cycle
    fraction: float         # illuminated fraction of the disk
    distance: float         # earth radii
    latitude: float         # ecliptic, degrees
    longitude: float        # ecliptic, degrees in [0, 360)
    phase_name: Phase
    zodiac_name: Zodiac

    def to_dict(self) -> Dict[str, Any]:
        out = asdict(self)
        out["phase_name"] = self.phase_name.value
        out["zodiac_name"] = self.zodiac_name.value
        return out
