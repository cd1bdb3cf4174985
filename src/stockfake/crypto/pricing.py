"""
Cryptocurrency Pricing Engine.

Deterministic simulated prices as a function of date:

    price(t) = anchor_path(t) × wobble(t) × halvings(t) × events(t) × winters(t)

- anchor_path: log-linear interpolation between the asset's calibration
  anchors, flat before the first and after the last
- wobble: 1 + σ·sin(day·ω + seed(symbol)), a reproducible daily swing
- halvings: step 1 + impact that fades linearly over a year
- events: protocol events and blockchain incidents, one-time shocks that
  fade over a month
- winters: crypto crash windows sliding linearly down to their floor

Every price is floored at ``SETTINGS.crypto.min_price``. No randomness
and no clock reads: the same (symbol, date) always gives the same price.
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional

import numpy as np
import pandas as pd

from stockfake.config.settings import SETTINGS
from stockfake.crypto.catalog import (
    BLOCKCHAIN_EVENTS,
    CryptoAsset,
    get_active_crypto_crashes,
    get_all_cryptos,
    get_crypto,
    is_crypto_available,
)
from stockfake.timeline.elapsed import DateLike, elapsed_months, to_datetime

logger = logging.getLogger(__name__)

_SECONDS_PER_DAY = 86400.0


def _day_number(moment: datetime) -> float:
    """Fractional proleptic ordinal day of ``moment``."""
    return moment.toordinal() + (
        moment.hour * 3600 + moment.minute * 60 + moment.second + moment.microsecond / 1e6
    ) / _SECONDS_PER_DAY


def _days_since(moment: datetime, when: DateLike) -> float:
    return (moment - to_datetime(when)).total_seconds() / _SECONDS_PER_DAY


def _symbol_seed(symbol: str) -> float:
    return float(sum(ord(ch) for ch in symbol))


def _fading_shock(impact: float, days: float, decay_days: float) -> float:
    """1 + impact fading linearly to 1 over ``decay_days``; 1 outside [0, decay)."""
    if 0.0 <= days < decay_days:
        return 1.0 + impact * (1.0 - days / decay_days)
    return 1.0


def _anchor_price(asset: CryptoAsset, moment: datetime) -> float:
    """Log-linear interpolation between calibration anchors."""
    xs = np.array([float(a.date.toordinal()) for a in asset.price_anchors])
    log_prices = np.log([a.price for a in asset.price_anchors])
    return float(np.exp(np.interp(_day_number(moment), xs, log_prices)))


def _simulated_price(asset: CryptoAsset, moment: datetime) -> float:
    config = SETTINGS.crypto

    price = _anchor_price(asset, moment)

    day = np.floor(_day_number(moment))
    price *= 1.0 + asset.base_volatility * np.sin(
        day * config.wobble_frequency + _symbol_seed(asset.symbol)
    )

    for halving in asset.halving_schedule:
        price *= _fading_shock(
            halving.impact, _days_since(moment, halving.date), config.halving_decay_days
        )

    for event in asset.major_events:
        price *= _fading_shock(
            event.impact, _days_since(moment, event.date), config.event_decay_days
        )

    for incident in BLOCKCHAIN_EVENTS:
        if asset.symbol in incident.affected:
            price *= _fading_shock(
                incident.impact, _days_since(moment, incident.date), config.event_decay_days
            )

    for crash in get_active_crypto_crashes(moment):
        if asset.symbol not in crash.affected:
            continue
        start = to_datetime(crash.start_date)
        duration = (to_datetime(crash.end_date) - start).total_seconds()
        progress = (moment - start).total_seconds() / duration
        floor = crash.floor_multiplier
        price *= floor + (1.0 - floor) * (1.0 - progress)

    return max(float(price), config.min_price)


# =============================================================================
# Public API
# =============================================================================

def get_crypto_price(symbol: str, when: DateLike) -> Optional[float]:
    """
    Simulated price of ``symbol`` at ``when``.

    Parameters
    ----------
    symbol : str
        Catalog symbol
    when : DateLike
        Query instant

    Returns
    -------
    Optional[float]
        Price in dollars, or None when the symbol is unknown or not yet
        launched

    Examples
    --------
    >>> get_crypto_price("ETH", "2015-01-01") is None
    True
    >>> get_crypto_price("BTC", "2021-11-10") > 50_000
    True
    """
    if not is_crypto_available(symbol, when):
        logger.debug(f"No price for {symbol} at {when}: not available")
        return None
    return _simulated_price(get_crypto(symbol), to_datetime(when))


def get_crypto_trading_fee(symbol: str, total_cost: float) -> float:
    """
    Trading fee on a trade of ``total_cost`` dollars.

    Examples
    --------
    >>> get_crypto_trading_fee("BTC", 10_000)
    10.0
    >>> get_crypto_trading_fee("NOPE", 10_000)
    0.0
    """
    asset = get_crypto(symbol)
    if asset is None:
        return 0.0
    return total_cost * asset.trading_fee


def calculate_staking_rewards(
    symbol: str,
    shares: float,
    as_of: DateLike,
    last_reward_date: Optional[DateLike] = None,
) -> float:
    """
    Staking rewards accrued since the last payout.

    Parameters
    ----------
    symbol : str
        Catalog symbol
    shares : float
        Units held
    as_of : DateLike
        Accrual end
    last_reward_date : Optional[DateLike]
        Previous payout; None or anything before the staking start counts
        from the staking start

    Returns
    -------
    float
        ``shares × annual_rate × elapsed_months / 12`` using exact calendar
        months; 0.0 for assets without staking, before staking starts, and
        when no time has passed since the effective last payout
    """
    asset = get_crypto(symbol)
    if asset is None or not asset.has_staking:
        return 0.0

    end = to_datetime(as_of)
    staking_start = to_datetime(asset.staking.start_date)
    if end < staking_start:
        return 0.0

    effective_last = staking_start
    if last_reward_date is not None:
        effective_last = max(to_datetime(last_reward_date), staking_start)
    if end <= effective_last:
        return 0.0

    months = elapsed_months(effective_last, end)
    return shares * asset.staking.annual_rate * months / 12.0


def is_crypto_trading_open() -> bool:
    """Crypto markets trade around the clock."""
    return True


@dataclass(frozen=True)
class CryptoQuote:
    """One asset's price at one instant, with display metadata."""

    symbol: str
    name: str
    price: float
    trading_fee: float
    has_staking: bool
    max_supply: Optional[float] = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-ready dictionary."""
        return {
            "symbol": self.symbol,
            "name": self.name,
            "price": self.price,
            "trading_fee": self.trading_fee,
            "has_staking": self.has_staking,
            "max_supply": self.max_supply,
        }


def get_all_crypto_prices(when: DateLike) -> list[CryptoQuote]:
    """
    Quotes for every asset launched by ``when``, in catalog order.

    Assets not yet launched are left out entirely.

    Examples
    --------
    >>> [q.symbol for q in get_all_crypto_prices("2010-01-01")]
    ['BTC']
    """
    quotes = []
    for asset in get_all_cryptos():
        price = get_crypto_price(asset.symbol, when)
        if price is None:
            continue
        quotes.append(
            CryptoQuote(
                symbol=asset.symbol,
                name=asset.name,
                price=price,
                trading_fee=asset.trading_fee,
                has_staking=asset.has_staking,
                max_supply=asset.max_supply,
            )
        )
    return quotes


def crypto_price_table(when: DateLike) -> pd.DataFrame:
    """
    Quotes at ``when`` as a DataFrame indexed by symbol.

    Columns: name, price, trading_fee, has_staking, max_supply.
    """
    columns = ["symbol", "name", "price", "trading_fee", "has_staking", "max_supply"]
    rows = [q.to_dict() for q in get_all_crypto_prices(when)]
    return pd.DataFrame(rows, columns=columns).set_index("symbol")
