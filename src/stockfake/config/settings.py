"""
Frozen configuration settings for the simulation core.

All configuration is immutable (frozen dataclasses) so that every price the
engines produce is reproducible from (inputs, SETTINGS) alone.
"""

from dataclasses import dataclass


# =============================================================================
# Crash Engine Configuration
# =============================================================================

@dataclass(frozen=True)
class CrashConfig:
    """
    Immutable crash engine configuration.

    Attributes
    ----------
    bottom_volatility : float
        Relative amplitude of the residual swing around the trough
        (0.03 = ±3% of the trough multiplier). Must stay below 1.
    bottom_cycles : int
        Whole number of swings during the bottom phase. Integer so the
        residual is zero at both phase boundaries.
    history_limit : int
        Default number of records returned by event history queries
    sector_sentiment_damping : float
        Fraction of sector depth passed through to sector sentiment
    """

    bottom_volatility: float = 0.03
    bottom_cycles: int = 2
    history_limit: int = 50
    sector_sentiment_damping: float = 0.5


# =============================================================================
# Crypto Pricing Configuration
# =============================================================================

@dataclass(frozen=True)
class CryptoConfig:
    """
    Immutable crypto pricing configuration.

    Attributes
    ----------
    event_decay_days : float
        Days over which a one-time event shock fades back to zero
    halving_decay_days : float
        Days over which a halving step multiplier fades back to zero
    wobble_frequency : float
        Angular frequency (radians per day) of the deterministic wobble
    min_price : float
        Hard floor for any simulated crypto price
    """

    event_decay_days: float = 30.0
    halving_decay_days: float = 365.0
    wobble_frequency: float = 0.37
    min_price: float = 0.00001


# =============================================================================
# Liquidity Configuration
# =============================================================================

@dataclass(frozen=True)
class LiquidityConfig:
    """
    Immutable liquidity impact configuration.

    Attributes
    ----------
    illiquid_price_impact : float
        Flat price impact quoted when an order exceeds available liquidity
    max_linear_impact : float
        Impact per unit of (order size / available liquidity)
    """

    illiquid_price_impact: float = 0.05
    max_linear_impact: float = 0.02


# =============================================================================
# Master Configuration
# =============================================================================

@dataclass(frozen=True)
class Settings:
    """
    Master frozen configuration combining all sub-configs.

    Usage
    -----
    >>> from stockfake.config.settings import SETTINGS
    >>> SETTINGS.crash.bottom_cycles
    2
    """

    crash: CrashConfig = CrashConfig()
    crypto: CryptoConfig = CryptoConfig()
    liquidity: LiquidityConfig = LiquidityConfig()


# Singleton instance - import this
SETTINGS = Settings()
