"""moonphase public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

from .api import (
    from_julian_date,
    from_epoch_seconds_int,
    from_epoch_seconds_float,
    from_timezone_aware_datetime,
    from_system_clock,
    explain,
    phase_series,
    phase_changes,
    zodiac_ingresses,
    next_phase,
)
from .core.errors import DependencyUnavailableError, MoonPhaseError, NaiveDatetimeError
from .core.types import MoonPhase, Phase, Zodiac

__all__ = [
    "from_julian_date",
    "from_epoch_seconds_int",
    "from_epoch_seconds_float",
    "from_timezone_aware_datetime",
    "from_system_clock",
    "explain",
    "phase_series",
    "phase_changes",
    "zodiac_ingresses",
    "next_phase",
    "MoonPhase",
    "Phase",
    "Zodiac",
    "MoonPhaseError",
    "NaiveDatetimeError",
    "DependencyUnavailableError",
]
