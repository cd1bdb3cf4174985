"""
Market stress derived from the active crash.

Volatility, liquidity and sentiment are not accumulated day by day; they
are read off the same unit drawdown curve that drives prices, so a query
at any instant is reproducible without replaying the days before it.

Design: Immutable dataclasses for results, pure functions for calculations.
"""

from dataclasses import dataclass, field
from typing import Any, Optional

from stockfake.config.settings import SETTINGS
from stockfake.crashes.curves import drawdown_fraction
from stockfake.crashes.events import ConditionType, CrashEvent


def _clamp(value: float, low: float = -1.0, high: float = 1.0) -> float:
    return max(low, min(high, value))


@dataclass(frozen=True)
class MarketState:
    """
    Market-wide stress at one instant.

    Attributes
    ----------
    volatility : float
        Volatility multiple of normal (1.0 = calm)
    liquidity : float
        Fraction of normal liquidity available (1.0 = normal)
    sentiment : float
        -1.0 (extreme fear) to 1.0 (extreme greed)
    sector_sentiment : Dict[str, float]
        Per-sector sentiment, only for affected sectors
    """

    volatility: float = 1.0
    liquidity: float = 1.0
    sentiment: float = 0.0
    sector_sentiment: dict[str, float] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-ready dictionary."""
        return {
            "volatility": self.volatility,
            "liquidity": self.liquidity,
            "sentiment": self.sentiment,
            "sector_sentiment": dict(self.sector_sentiment),
        }


# Comparison reference only; derive_market_state returns a new instance.
BASELINE_STATE = MarketState()


@dataclass(frozen=True)
class LiquidityImpact:
    """
    Execution outlook for an order under current liquidity.

    Attributes
    ----------
    executable : bool
        Whether the full order can be filled
    available_shares : int
        Shares that can be filled
    price_impact : float
        Expected price impact (0.01 = 1%)
    reason : Optional[str]
        Why the order cannot be filled, if it cannot
    """

    executable: bool
    available_shares: int
    price_impact: float
    reason: Optional[str] = None


@dataclass(frozen=True)
class MarketSnapshot:
    """
    Observables supplied by the caller for trigger checks.

    Attributes
    ----------
    sector_pe : Dict[str, float]
        Price/earnings ratio by sector
    market_change : Optional[float]
        Market change over the lookback window (-0.25 = -25%)
    """

    sector_pe: dict[str, float] = field(default_factory=dict)
    market_change: Optional[float] = None


def derive_market_state(event: Optional[CrashEvent], elapsed: Optional[float]) -> MarketState:
    """
    Market state for ``event`` after ``elapsed`` calendar months.

    Parameters
    ----------
    event : Optional[CrashEvent]
        Active event, or None when the market is calm
    elapsed : Optional[float]
        Calendar months since the crash start

    Returns
    -------
    MarketState
        Baseline when no crash is in force, otherwise stress scaled by the
        unit drawdown of the event
    """
    if event is None or elapsed is None:
        return MarketState()

    g = drawdown_fraction(event, elapsed)
    if g == 0.0:
        return MarketState()

    damping = SETTINGS.crash.sector_sentiment_damping
    return MarketState(
        volatility=1.0 + (event.volatility_multiplier - 1.0) * g,
        liquidity=1.0 - event.liquidity_reduction * g,
        sentiment=_clamp(event.sentiment_shift * g),
        sector_sentiment={
            s.sector: _clamp(-s.depth * damping * g) for s in event.sector_impacts
        },
    )


def calculate_liquidity_impact(
    shares: float,
    normal_liquidity: float,
    state: MarketState = BASELINE_STATE,
) -> LiquidityImpact:
    """
    Price impact of trading ``shares`` given current liquidity.

    Parameters
    ----------
    shares : float
        Order size
    normal_liquidity : float
        Shares the market absorbs under normal conditions
    state : MarketState
        Current market state

    Returns
    -------
    LiquidityImpact
        Orders above available liquidity are not executable and carry a
        flat impact; otherwise impact grows linearly with order size and
        with how far liquidity has fallen.

    Examples
    --------
    >>> round(calculate_liquidity_impact(100, 1000).price_impact, 6)
    0.002
    """
    if shares < 0:
        raise ValueError(f"shares must be >= 0, got {shares}")
    if normal_liquidity <= 0:
        raise ValueError(f"normal_liquidity must be > 0, got {normal_liquidity}")

    config = SETTINGS.liquidity
    available = normal_liquidity * state.liquidity

    if shares > available:
        return LiquidityImpact(
            executable=False,
            available_shares=int(available),
            price_impact=config.illiquid_price_impact,
            reason="Insufficient liquidity during market stress",
        )

    ratio = shares / available
    return LiquidityImpact(
        executable=True,
        available_shares=int(shares),
        price_impact=ratio * config.max_linear_impact * (2.0 - state.liquidity),
    )


def check_trigger_conditions(
    event: CrashEvent,
    snapshot: MarketSnapshot,
    state: MarketState = BASELINE_STATE,
) -> bool:
    """
    Whether market observables meet ``event``'s trigger condition.

    Returns False for events without a condition and when the snapshot
    lacks the observable the condition needs.
    """
    condition = event.trigger_condition
    if condition is None:
        return False

    if condition.kind is ConditionType.SECTOR_VALUATION:
        pe = snapshot.sector_pe.get(condition.sector)
        return pe is not None and pe > condition.threshold

    if condition.kind is ConditionType.MARKET_DECLINE:
        if snapshot.market_change is None:
            return False
        return snapshot.market_change < -condition.threshold

    if condition.kind is ConditionType.VOLATILITY_SPIKE:
        return state.volatility > condition.threshold

    return False
