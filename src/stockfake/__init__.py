"""
stockfake: Market crash and cryptocurrency simulation core.

Quick Start
-----------
>>> from datetime import date
>>> from stockfake import SimulationContext, get_crypto_price
>>> ctx = SimulationContext()
>>> _ = ctx.trigger_crash_event("financial_crisis_2008", date(2008, 9, 15))
>>> ctx.calculate_stock_price_impact("JPM", "Financial", 100.0, date(2015, 3, 15))
100.0

Version: 0.1.0
"""

__version__ = "0.1.0"

# =============================================================================
# Crash Simulation
# =============================================================================
from stockfake.crashes.engine import ActiveCrash, EventRecord, SimulationContext
from stockfake.crashes.curves import CrashPhase, crash_multiplier, phase_at
from stockfake.crashes.events import (
    ALL_CRASH_EVENTS,
    CrashEvent,
    UnknownEventError,
    create_custom_event,
    get_event_by_id,
)
from stockfake.crashes.market_state import MarketSnapshot, MarketState
from stockfake.crashes.analytics import crash_summary, impact_path

# =============================================================================
# Cryptocurrency
# =============================================================================
from stockfake.crypto.catalog import CryptoAsset, get_crypto, is_crypto_available
from stockfake.crypto.pricing import (
    CryptoQuote,
    calculate_staking_rewards,
    get_all_crypto_prices,
    get_crypto_price,
    get_crypto_trading_fee,
    is_crypto_trading_open,
)

# =============================================================================
# Time
# =============================================================================
from stockfake.timeline.elapsed import add_months, elapsed_months

# =============================================================================
# Configuration
# =============================================================================
from stockfake.config.settings import SETTINGS

__all__ = [
    # Version
    "__version__",
    # Crashes
    "SimulationContext",
    "ActiveCrash",
    "EventRecord",
    "CrashPhase",
    "CrashEvent",
    "UnknownEventError",
    "ALL_CRASH_EVENTS",
    "create_custom_event",
    "get_event_by_id",
    "crash_multiplier",
    "phase_at",
    "MarketSnapshot",
    "MarketState",
    "crash_summary",
    "impact_path",
    # Crypto
    "CryptoAsset",
    "CryptoQuote",
    "get_crypto",
    "is_crypto_available",
    "get_crypto_price",
    "get_crypto_trading_fee",
    "calculate_staking_rewards",
    "is_crypto_trading_open",
    "get_all_crypto_prices",
    # Time
    "add_months",
    "elapsed_months",
    # Config
    "SETTINGS",
]
