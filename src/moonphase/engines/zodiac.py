from __future__ import annotations

from ..core.types import Zodiac
from .specs import ZODIAC_BOUNDS, ZODIAC_WRAP


def from_longitude(longitude: float) -> Zodiac:
    """
    Constellation containing an ecliptic longitude (degrees).

    First band whose upper bound is strictly above the longitude; anything
    past the table (>= 348.58, >= 360, NaN) wraps to Pisces.
    """
    for zodiac, bound in ZODIAC_BOUNDS:
        if longitude < bound:
            return zodiac
    return ZODIAC_WRAP
