# tests/test_zodiac.py

import math

import pytest

from moonphase.core.types import Zodiac
from moonphase.engines.specs import ZODIAC_BOUNDS
from moonphase.engines.zodiac import from_longitude


def test_table_is_ascending_and_complete():
    bounds = [b for _, b in ZODIAC_BOUNDS]
    assert bounds == sorted(bounds)
    assert [z for z, _ in ZODIAC_BOUNDS] == list(Zodiac)

@pytest.mark.parametrize("zodiac, bound", ZODIAC_BOUNDS)
def test_just_below_each_bound(zodiac, bound):
    assert from_longitude(bound - 0.01) is zodiac

def test_bound_is_exclusive():
    assert from_longitude(33.18) is Zodiac.ARIES
    assert from_longitude(311.72) is Zodiac.AQUARIUS
    assert from_longitude(135.30) is Zodiac.LEO

@pytest.mark.parametrize("lon", [348.58, 350.0, 359.999, 360.0, 720.0])
def test_wraps_to_pisces(lon):
    assert from_longitude(lon) is Zodiac.PISCES

def test_start_of_circle():
    assert from_longitude(0.0) is Zodiac.PISCES
    assert from_longitude(-5.0) is Zodiac.PISCES

def test_nan_falls_back_to_pisces():
    assert from_longitude(math.nan) is Zodiac.PISCES

def test_classmethod_matches_function():
    for lon in range(0, 360, 7):
        assert Zodiac.from_longitude(float(lon)) is from_longitude(float(lon))
