"""
Crash analytics: impact paths and catalog summaries.

``impact_path`` samples a crash curve on a calendar-month grid and returns
a DataFrame, which is what the charts and the decade-impact demos plot.
"""

from typing import Optional

import numpy as np
import pandas as pd

from stockfake.crashes.curves import crash_multiplier, phase_at
from stockfake.crashes.events import ALL_CRASH_EVENTS, CrashEvent
from stockfake.timeline.elapsed import DateLike, add_fractional_months, to_datetime


def impact_path(
    event: CrashEvent,
    sector: str,
    start: DateLike,
    horizon_months: Optional[float] = None,
    step_months: float = 1.0,
    base_price: float = 100.0,
) -> pd.DataFrame:
    """
    Sample a sector's crash curve over time.

    Parameters
    ----------
    event : CrashEvent
        Event definition
    sector : str
        Sector tag
    start : DateLike
        Crash start instant
    horizon_months : Optional[float]
        Last month sampled; defaults to the event's total duration
    step_months : float
        Grid spacing in calendar months
    base_price : float
        Price the multiplier is applied to

    Returns
    -------
    pd.DataFrame
        Columns: month, date, phase, multiplier, price

    Examples
    --------
    >>> from stockfake.crashes.events import FINANCIAL_CRISIS_2008
    >>> path = impact_path(FINANCIAL_CRISIS_2008, "Financial", "2008-09-15")
    >>> float(path["price"].iloc[-1])
    100.0
    """
    if step_months <= 0:
        raise ValueError(f"step_months must be > 0, got {step_months}")
    if horizon_months is None:
        horizon_months = event.timeline.total_months
    if horizon_months < 0:
        raise ValueError(f"horizon_months must be >= 0, got {horizon_months}")

    anchor = to_datetime(start)
    n_steps = int(np.floor(horizon_months / step_months + 1e-9))
    months = np.arange(n_steps + 1) * step_months
    if months[-1] < horizon_months:
        months = np.append(months, horizon_months)

    multipliers = np.array([crash_multiplier(event, sector, float(m)) for m in months])

    return pd.DataFrame(
        {
            "month": months,
            "date": [add_fractional_months(anchor, float(m)) for m in months],
            "phase": [phase_at(event, float(m)).value for m in months],
            "multiplier": multipliers,
            "price": base_price * multipliers,
        }
    )


def trough_multiplier(event: CrashEvent, sector: str) -> float:
    """Multiplier at the trough (1.0 for unaffected sectors)."""
    impact = event.sector_impact(sector)
    if impact is None:
        return 1.0
    return 1.0 - impact.depth


def crash_summary() -> dict[str, dict[str, float]]:
    """
    Get summary statistics for all catalog events.

    Returns
    -------
    Dict[str, Dict[str, float]]
        Nested dict: event_id -> {depth_max, panic_months, bottom_months,
        total_months, n_sectors}

    Examples
    --------
    >>> crash_summary()["financial_crisis_2008"]["total_months"]
    78.0
    """
    return {
        e.event_id: {
            "depth_max": e.max_depth,
            "panic_months": e.timeline.panic_months,
            "bottom_months": e.timeline.bottom_months,
            "total_months": e.timeline.total_months,
            "n_sectors": float(len(e.sector_impacts)),
        }
        for e in ALL_CRASH_EVENTS
    }
