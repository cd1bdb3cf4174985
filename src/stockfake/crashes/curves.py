"""
Piecewise crash curves.

Pure functions of (event, sector, elapsed months). The multiplier applied
to a price walks through four phases:

    PANIC     0 <= e < P        1 - d * (e / P)                 linear drop
    BOTTOM    P <= e < P + B    t * (1 + a * sin(2*pi*c*q))     trough swing
    RECOVERY  P + B <= e < T    1 - d * (1 - p)^k               concave rebound
    RECOVERED e >= T            1.0

with d the sector depth, t = 1 - d the trough, q and p the fraction of the
bottom and recovery phases elapsed, k >= 1 the recovery exponent, a the
bottom swing amplitude and c a whole number of swings. Every piece meets
its neighbour at the boundary, so the curve is continuous, and a < 1 keeps
it strictly positive.
"""

import math
from enum import Enum
from typing import Optional

from stockfake.config.settings import SETTINGS
from stockfake.crashes.events import CrashEvent


class CrashPhase(Enum):
    """Phase of a crash at a given elapsed time."""

    INACTIVE = "inactive"  # No crash, or before its start
    PANIC = "panic"
    BOTTOM = "bottom"
    RECOVERY = "recovery"
    RECOVERED = "recovered"


def phase_at(event: CrashEvent, elapsed: float) -> CrashPhase:
    """
    Phase of ``event`` after ``elapsed`` calendar months.

    Examples
    --------
    >>> from stockfake.crashes.events import FINANCIAL_CRISIS_2008
    >>> phase_at(FINANCIAL_CRISIS_2008, 6.0)
    <CrashPhase.BOTTOM: 'bottom'>
    """
    timeline = event.timeline
    if elapsed < 0:
        return CrashPhase.INACTIVE
    if elapsed < timeline.panic_months:
        return CrashPhase.PANIC
    if elapsed < timeline.recovery_start:
        return CrashPhase.BOTTOM
    if elapsed < timeline.total_months:
        return CrashPhase.RECOVERY
    return CrashPhase.RECOVERED


def drawdown_fraction(event: CrashEvent, elapsed: float, shape: Optional[float] = None) -> float:
    """
    Unit drawdown g in [0, 1] ignoring the bottom swing.

    g = 1 at the trough, 0 before the crash and once healed. A sector's
    multiplier outside the bottom phase is 1 - depth * g.

    Parameters
    ----------
    event : CrashEvent
        Event definition
    elapsed : float
        Calendar months since the crash start
    shape : Optional[float]
        Recovery exponent; defaults to the event's
    """
    timeline = event.timeline
    k = event.recovery_shape if shape is None else shape
    phase = phase_at(event, elapsed)

    if phase is CrashPhase.PANIC:
        return elapsed / timeline.panic_months
    if phase is CrashPhase.BOTTOM:
        return 1.0
    if phase is CrashPhase.RECOVERY:
        progress = (elapsed - timeline.recovery_start) / timeline.recovery_months
        return (1.0 - progress) ** k
    return 0.0


def crash_multiplier(event: CrashEvent, sector: str, elapsed: float) -> float:
    """
    Price multiplier for ``sector`` after ``elapsed`` calendar months.

    Returns exactly 1.0 for unaffected sectors, before the start and from
    the end of the recovery onward.

    Examples
    --------
    >>> from stockfake.crashes.events import FINANCIAL_CRISIS_2008
    >>> round(crash_multiplier(FINANCIAL_CRISIS_2008, "Financial", 6.0), 2)
    0.17
    >>> crash_multiplier(FINANCIAL_CRISIS_2008, "Utilities", 6.0)
    1.0
    """
    impact = event.sector_impact(sector)
    if impact is None:
        return 1.0

    phase = phase_at(event, elapsed)
    if phase in (CrashPhase.INACTIVE, CrashPhase.RECOVERED):
        return 1.0

    if phase is CrashPhase.BOTTOM:
        timeline = event.timeline
        trough = 1.0 - impact.depth
        q = (elapsed - timeline.panic_months) / timeline.bottom_months
        swing = SETTINGS.crash.bottom_volatility * math.sin(
            2.0 * math.pi * SETTINGS.crash.bottom_cycles * q
        )
        return trough * (1.0 + swing)

    g = drawdown_fraction(event, elapsed, event.shape_for(impact))
    return 1.0 - impact.depth * g
