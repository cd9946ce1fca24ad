from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional, TypeVar

from ..core.types import Phase, Zodiac
from ..engines import specs
from ..engines.phase import compute
from ..engines.series import _need_numpy, compute_series, julian_date_range

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_STEP = 1.0 / 24.0   # one hour, in days
DEFAULT_TOL = 1e-6          # ~0.09 s


@dataclass(frozen=True)
class PhaseEvent:
    j_date: float
    before: Phase
    after: Phase


@dataclass(frozen=True)
class ZodiacEvent:
    j_date: float
    before: Zodiac
    after: Zodiac


def _check_window(start: float, end: float, step: float, tol: float) -> None:
    if not start < end:
        raise ValueError(f"empty window: start={start} end={end}")
    if step <= 0:
        raise ValueError(f"step must be positive, got {step}")
    if tol <= 0:
        raise ValueError(f"tol must be positive, got {tol}")


def _bisect(label: Callable[[float], T], lo: float, hi: float, tol: float) -> float:
    """Narrow [lo, hi] around the first change of label(t); returns hi."""
    left = label(lo)
    while hi - lo > tol:
        mid = 0.5 * (lo + hi)
        if label(mid) == left:
            lo = mid
        else:
            hi = mid
    return hi


def _brackets(idx, jd):
    """(lo, hi) sample pairs across which idx changes."""
    hits = []
    for k in range(1, len(idx)):
        if idx[k] != idx[k - 1]:
            hits.append((float(jd[k - 1]), float(jd[k])))
    return hits


def phase_changes(start: float, end: float, *, step: float = DEFAULT_STEP, tol: float = DEFAULT_TOL) -> List[PhaseEvent]:
    """
    All instants in [start, end) where the named phase changes.

    Coarse hourly sampling finds each bracket; bisection on the scalar
    engine refines it. Each named phase lasts days, so at most one change
    falls in a bracket.
    """
    _check_window(start, end, step, tol)
    jd = _samples(start, end, step)
    s = compute_series(jd)

    def label(t: float) -> Phase:
        return compute(t).phase_name

    out: List[PhaseEvent] = []
    for lo, hi in _brackets(s.phase_index, jd):
        t = _bisect(label, lo, hi, tol)
        before, after = label(lo), label(hi)
        if before is not after:
            out.append(PhaseEvent(j_date=t, before=before, after=after))
    logger.debug("phase_changes [%.5f, %.5f): %d samples, %d events", start, end, len(jd), len(out))
    return out


def zodiac_ingresses(start: float, end: float, *, step: float = DEFAULT_STEP, tol: float = DEFAULT_TOL) -> List[ZodiacEvent]:
    """All instants in [start, end) where the Moon enters another constellation."""
    _check_window(start, end, step, tol)
    jd = _samples(start, end, step)
    s = compute_series(jd)

    def label(t: float) -> Zodiac:
        return compute(t).zodiac_name

    out: List[ZodiacEvent] = []
    for lo, hi in _brackets(s.zodiac_index, jd):
        t = _bisect(label, lo, hi, tol)
        before, after = label(lo), label(hi)
        if before is not after:
            out.append(ZodiacEvent(j_date=t, before=before, after=after))
    logger.debug("zodiac_ingresses [%.5f, %.5f): %d samples, %d events", start, end, len(jd), len(out))
    return out


def next_phase(
    j_date: float,
    target: Phase,
    *,
    horizon: float = 1.5 * specs.SYNODIC.period,
    step: float = DEFAULT_STEP,
    tol: float = DEFAULT_TOL,
) -> Optional[PhaseEvent]:
    """First change into `target` after `j_date`, or None within `horizon` days."""
    for ev in phase_changes(j_date, j_date + horizon, step=step, tol=tol):
        if ev.after is target:
            return ev
    return None


def _samples(start: float, end: float, step: float):
    # Always sample `end` too so a change in the last partial step is bracketed.
    np = _need_numpy()
    jd = julian_date_range(start, end, step)
    return np.append(jd, end)
