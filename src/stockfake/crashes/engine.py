"""
Crash Simulation Engine.

Applies an active crash to stock prices. The active crash lives in a
``SimulationContext`` owned by the caller (a game session, a test), so two
sessions never share crash state and nothing is global.

Trigger/reset contract:
- ``trigger_crash_event`` replaces whatever crash was active (last writer
  wins) and records the activation in the context history.
- ``reset_for_testing`` clears the active crash and the history.

All "now" values are passed in; the engine never reads a clock.
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional, Union

from stockfake.config.settings import SETTINGS
from stockfake.crashes.curves import CrashPhase, crash_multiplier, phase_at
from stockfake.crashes.events import (
    CrashEvent,
    CrashType,
    SeverityLevel,
    get_event_by_id,
)
from stockfake.crashes.market_state import (
    LiquidityImpact,
    MarketSnapshot,
    MarketState,
    calculate_liquidity_impact,
    check_trigger_conditions,
    derive_market_state,
)
from stockfake.timeline.elapsed import DateLike, elapsed_months, to_datetime

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ActiveCrash:
    """
    A crash event pinned to a start instant.

    Attributes
    ----------
    event : CrashEvent
        Catalog or custom definition
    start : datetime
        Trigger instant; fixed for the life of the activation
    """

    event: CrashEvent
    start: datetime

    def elapsed_months(self, as_of: DateLike) -> float:
        """Calendar months from ``start`` to ``as_of`` (negative before start)."""
        return elapsed_months(self.start, as_of)


@dataclass(frozen=True)
class EventRecord:
    """History entry written on every activation."""

    event_id: str
    name: str
    crash_type: CrashType
    severity: SeverityLevel
    activated_at: datetime

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-ready dictionary."""
        return {
            "event_id": self.event_id,
            "name": self.name,
            "type": self.crash_type.value,
            "severity": self.severity.value,
            "activated_at": self.activated_at.isoformat(),
        }


class SimulationContext:
    """
    Caller-owned crash state.

    Examples
    --------
    >>> from datetime import date
    >>> ctx = SimulationContext()
    >>> _ = ctx.trigger_crash_event("financial_crisis_2008", date(2008, 9, 15))
    >>> round(ctx.calculate_stock_price_impact("BAC", "Financial", 100.0, date(2009, 3, 15)), 2)
    17.0
    >>> ctx.calculate_stock_price_impact("XOM", "Utilities", 100.0, date(2009, 3, 15))
    100.0
    """

    def __init__(self) -> None:
        self._active: Optional[ActiveCrash] = None
        self._history: list[EventRecord] = []

    @property
    def active(self) -> Optional[ActiveCrash]:
        """The active crash, or None."""
        return self._active

    # -------------------------------------------------------------------------
    # Trigger / reset
    # -------------------------------------------------------------------------

    def trigger_crash_event(
        self,
        event: Union[str, CrashEvent],
        start: DateLike,
    ) -> ActiveCrash:
        """
        Activate a crash, replacing any active one.

        Parameters
        ----------
        event : str or CrashEvent
            Catalog id or a custom event definition
        start : DateLike
            Crash start instant

        Returns
        -------
        ActiveCrash
            The new activation

        Raises
        ------
        UnknownEventError
            If ``event`` is an id not in the catalog
        """
        definition = get_event_by_id(event) if isinstance(event, str) else event
        start_dt = to_datetime(start)

        if self._active is not None:
            logger.info(
                f"Replacing active crash '{self._active.event.event_id}' "
                f"with '{definition.event_id}'"
            )

        self._active = ActiveCrash(event=definition, start=start_dt)
        self._history.append(
            EventRecord(
                event_id=definition.event_id,
                name=definition.name,
                crash_type=definition.crash_type,
                severity=definition.severity,
                activated_at=start_dt,
            )
        )
        logger.info(f"Crash event '{definition.name}' activated at {start_dt.isoformat()}")
        return self._active

    def reset_for_testing(self) -> None:
        """Clear the active crash and the history. Idempotent."""
        self._active = None
        self._history.clear()
        logger.debug("Simulation context reset")

    def deactivate_crash_event(self, event_id: str) -> bool:
        """
        Clear the active crash if it is ``event_id``.

        Returns
        -------
        bool
            True if a crash was deactivated
        """
        if self._active is None or self._active.event.event_id != event_id:
            return False
        logger.info(f"Crash event '{self._active.event.name}' deactivated")
        self._active = None
        return True

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def elapsed_months(self, as_of: DateLike) -> Optional[float]:
        """Calendar months since the active crash started, or None."""
        if self._active is None:
            return None
        return self._active.elapsed_months(as_of)

    def current_phase(self, as_of: DateLike) -> CrashPhase:
        """Phase of the active crash at ``as_of``."""
        elapsed = self.elapsed_months(as_of)
        if elapsed is None:
            return CrashPhase.INACTIVE
        return phase_at(self._active.event, elapsed)

    def crash_multiplier(self, sector: str, as_of: DateLike) -> float:
        """Multiplier the active crash applies to ``sector`` at ``as_of``."""
        elapsed = self.elapsed_months(as_of)
        if elapsed is None:
            return 1.0
        return crash_multiplier(self._active.event, sector, elapsed)

    def calculate_stock_price_impact(
        self,
        symbol: str,
        sector: str,
        base_price: float,
        as_of: DateLike,
    ) -> float:
        """
        Price of ``symbol`` after the active crash's impact.

        Parameters
        ----------
        symbol : str
            Stock symbol (any; used for logging only)
        sector : str
            Sector tag matched against the event's affected sectors
        base_price : float
            Price before crash impact
        as_of : DateLike
            Query instant

        Returns
        -------
        float
            ``base_price * multiplier``; exactly ``base_price`` when no crash
            applies
        """
        multiplier = self.crash_multiplier(sector, as_of)
        if multiplier == 1.0:
            return base_price
        logger.debug(f"{symbol} ({sector}): crash multiplier {multiplier:.4f}")
        return base_price * multiplier

    def market_state(self, as_of: DateLike) -> MarketState:
        """Market-wide stress at ``as_of``."""
        if self._active is None:
            return derive_market_state(None, None)
        return derive_market_state(self._active.event, self.elapsed_months(as_of))

    def calculate_liquidity_impact(
        self,
        shares: float,
        normal_liquidity: float,
        as_of: DateLike,
    ) -> LiquidityImpact:
        """Liquidity impact of an order under the market state at ``as_of``."""
        return calculate_liquidity_impact(shares, normal_liquidity, self.market_state(as_of))

    def check_trigger_conditions(
        self,
        event: Union[str, CrashEvent],
        snapshot: MarketSnapshot,
        as_of: DateLike,
    ) -> bool:
        """Whether ``event``'s trigger condition holds at ``as_of``."""
        definition = get_event_by_id(event) if isinstance(event, str) else event
        return check_trigger_conditions(definition, snapshot, self.market_state(as_of))

    def event_history(self, limit: Optional[int] = None) -> list[EventRecord]:
        """Most recent activations, oldest first."""
        if limit is None:
            limit = SETTINGS.crash.history_limit
        if limit <= 0:
            return []
        return self._history[-limit:]

    def get_crash_analytics(self, as_of: DateLike) -> dict[str, Any]:
        """
        Flat summary of the context at ``as_of``, ready for JSON.

        Returns
        -------
        Dict[str, Any]
            active_event, phase, elapsed_months, market_state,
            history_count, recent_events
        """
        active_event = None
        if self._active is not None:
            event = self._active.event
            active_event = {
                "id": event.event_id,
                "name": event.name,
                "type": event.crash_type.value,
                "severity": event.severity.value,
                "start": self._active.start.isoformat(),
                "total_months": event.timeline.total_months,
            }

        return {
            "active_event": active_event,
            "phase": self.current_phase(as_of).value,
            "elapsed_months": self.elapsed_months(as_of),
            "market_state": self.market_state(as_of).to_dict(),
            "history_count": len(self._history),
            "recent_events": [r.to_dict() for r in self.event_history(10)],
        }
