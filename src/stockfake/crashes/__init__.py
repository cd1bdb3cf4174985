"""
Market crash simulation.

Provides the crash event catalog, the phase-based impact curves, the
caller-owned simulation context, derived market state and analytics.

Design: catalog events are immutable; the only mutable state is the
active crash held by a ``SimulationContext`` the caller creates.
"""

from .analytics import crash_summary, impact_path, trough_multiplier
from .curves import CrashPhase, crash_multiplier, drawdown_fraction, phase_at
from .engine import ActiveCrash, EventRecord, SimulationContext
from .events import (
    ALL_CRASH_EVENTS,
    BANKING_CRISIS,
    BLACK_MONDAY_1987,
    COVID_CRASH_2020,
    DOT_COM_CRASH_2000,
    ENERGY_CRISIS,
    FINANCIAL_CRISIS_2008,
    FLASH_CRASH_2010,
    GEOPOLITICAL_SHOCK,
    HISTORICAL_CRASHES,
    HYPOTHETICAL_SCENARIOS,
    TECH_BUBBLE_BURST,
    ConditionType,
    CrashEvent,
    CrashTimeline,
    CrashType,
    SectorImpact,
    SeverityLevel,
    TriggerCondition,
    TriggerType,
    UnknownEventError,
    classify_severity,
    create_custom_event,
    find_event,
    get_event_by_id,
    get_events_by_type,
)
from .market_state import (
    BASELINE_STATE,
    LiquidityImpact,
    MarketSnapshot,
    MarketState,
    calculate_liquidity_impact,
    check_trigger_conditions,
    derive_market_state,
)

__all__ = [
    # Catalog
    "CrashEvent",
    "CrashTimeline",
    "SectorImpact",
    "TriggerCondition",
    "CrashType",
    "TriggerType",
    "SeverityLevel",
    "ConditionType",
    "UnknownEventError",
    "BLACK_MONDAY_1987",
    "DOT_COM_CRASH_2000",
    "FINANCIAL_CRISIS_2008",
    "COVID_CRASH_2020",
    "FLASH_CRASH_2010",
    "TECH_BUBBLE_BURST",
    "BANKING_CRISIS",
    "ENERGY_CRISIS",
    "GEOPOLITICAL_SHOCK",
    "HISTORICAL_CRASHES",
    "HYPOTHETICAL_SCENARIOS",
    "ALL_CRASH_EVENTS",
    "classify_severity",
    "create_custom_event",
    "find_event",
    "get_event_by_id",
    "get_events_by_type",
    # Curves
    "CrashPhase",
    "crash_multiplier",
    "drawdown_fraction",
    "phase_at",
    # Engine
    "ActiveCrash",
    "EventRecord",
    "SimulationContext",
    # Market state
    "MarketState",
    "MarketSnapshot",
    "LiquidityImpact",
    "BASELINE_STATE",
    "derive_market_state",
    "calculate_liquidity_impact",
    "check_trigger_conditions",
    # Analytics
    "impact_path",
    "trough_multiplier",
    "crash_summary",
]
