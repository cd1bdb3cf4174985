"""
Cryptocurrency Catalog.

Static definitions for Bitcoin, Ethereum and major altcoins: launch dates,
halving schedules, protocol events, staking terms, fees and calibration
price anchors. Each asset becomes tradable on its launch date.

Also holds market-wide blockchain incidents (forks, exchange hacks,
regulatory bans) and crypto winter windows.

Anchor prices are rough historical highs/lows used to shape the simulated
price path; they are not a market data feed.
"""

from dataclasses import dataclass
from datetime import date
from typing import Optional

from stockfake.timeline.elapsed import DateLike, to_date, to_datetime


@dataclass(frozen=True)
class HalvingEvent:
    """
    Block reward halving.

    Attributes
    ----------
    date : date
        Halving date
    block_reward : float
        Block reward after the halving
    impact : float
        Price step at the halving (0.10 = +10%), fading afterwards
    """

    date: date
    block_reward: float
    impact: float


@dataclass(frozen=True)
class MajorEvent:
    """Asset-specific protocol event with a one-time price shock."""

    date: date
    label: str
    impact: float
    description: str = ""


@dataclass(frozen=True)
class StakingConfig:
    """
    Staking terms.

    Attributes
    ----------
    enabled : bool
        Whether holdings earn rewards
    annual_rate : float
        Annual reward rate (0.04 = 4% APR)
    start_date : date
        First date rewards accrue
    """

    enabled: bool
    annual_rate: float
    start_date: date

    def __post_init__(self) -> None:
        if self.annual_rate < 0:
            raise ValueError(f"annual_rate must be >= 0, got {self.annual_rate}")


@dataclass(frozen=True)
class PriceAnchor:
    """Calibration point of the simulated price path."""

    date: date
    price: float

    def __post_init__(self) -> None:
        if self.price <= 0:
            raise ValueError(f"Anchor price must be > 0, got {self.price}")


@dataclass(frozen=True)
class CryptoAsset:
    """
    Complete cryptocurrency definition.

    Attributes
    ----------
    symbol : str
        Ticker, unique catalog key
    name : str
        Display name
    launch_date : date
        First tradable date
    trading_fee : float
        Fee rate charged on trade value (0.001 = 0.1%)
    base_volatility : float
        Amplitude of the deterministic daily wobble
    price_anchors : Tuple[PriceAnchor, ...]
        Calibration points, ordered by date
    halving_schedule : Tuple[HalvingEvent, ...]
        Ordered halvings
    major_events : Tuple[MajorEvent, ...]
        Ordered protocol events
    staking : Optional[StakingConfig]
        Staking terms, if any
    max_supply : Optional[float]
        Supply cap; None when uncapped
    description : str
        Short description
    """

    symbol: str
    name: str
    launch_date: date
    trading_fee: float
    base_volatility: float
    price_anchors: tuple[PriceAnchor, ...]
    halving_schedule: tuple[HalvingEvent, ...] = ()
    major_events: tuple[MajorEvent, ...] = ()
    staking: Optional[StakingConfig] = None
    max_supply: Optional[float] = None
    description: str = ""

    def __post_init__(self) -> None:
        if not 0.0 <= self.trading_fee < 1.0:
            raise ValueError(f"trading_fee must be in [0, 1), got {self.trading_fee}")
        if not self.price_anchors:
            raise ValueError(f"{self.symbol} has no price anchors")
        anchor_dates = [a.date for a in self.price_anchors]
        if anchor_dates != sorted(anchor_dates):
            raise ValueError(f"{self.symbol} price anchors are not in date order")
        if anchor_dates[0] < self.launch_date:
            raise ValueError(f"{self.symbol} has a price anchor before launch")

    @property
    def has_staking(self) -> bool:
        """Whether the asset currently offers staking rewards."""
        return self.staking is not None and self.staking.enabled


@dataclass(frozen=True)
class BlockchainEvent:
    """Market-wide incident affecting one or more assets."""

    event_id: str
    date: date
    affected: frozenset[str]
    event_type: str
    impact: float
    description: str = ""


@dataclass(frozen=True)
class CryptoCrash:
    """
    Crypto winter window.

    Prices slide linearly from 100% to ``floor_multiplier`` of their
    simulated value between ``start_date`` and ``end_date``.
    """

    crash_id: str
    name: str
    start_date: date
    end_date: date
    affected: frozenset[str]
    severity: str
    floor_multiplier: float
    description: str = ""

    def __post_init__(self) -> None:
        if self.end_date <= self.start_date:
            raise ValueError(f"{self.crash_id}: end_date must follow start_date")
        if not 0.0 < self.floor_multiplier <= 1.0:
            raise ValueError(
                f"{self.crash_id}: floor_multiplier must be in (0, 1], got {self.floor_multiplier}"
            )


def _anchors(*points: tuple[str, float]) -> tuple[PriceAnchor, ...]:
    return tuple(PriceAnchor(date=date.fromisoformat(d), price=p) for d, p in points)


# =============================================================================
# Assets
# =============================================================================

BTC = CryptoAsset(
    symbol="BTC",
    name="Bitcoin",
    launch_date=date(2009, 1, 3),
    trading_fee=0.001,
    base_volatility=0.05,
    max_supply=21_000_000,
    description="The first decentralized cryptocurrency",
    halving_schedule=(
        HalvingEvent(date=date(2012, 11, 28), block_reward=25.0, impact=0.10),
        HalvingEvent(date=date(2016, 7, 9), block_reward=12.5, impact=0.15),
        HalvingEvent(date=date(2020, 5, 11), block_reward=6.25, impact=0.12),
        HalvingEvent(date=date(2024, 4, 19), block_reward=3.125, impact=0.10),
    ),
    price_anchors=_anchors(
        ("2009-01-03", 0.0008),
        ("2010-07-01", 0.08),
        ("2011-06-08", 31.50),
        ("2012-01-01", 5.27),
        ("2013-11-30", 1151.00),
        ("2014-01-01", 770.00),
        ("2015-01-14", 177.00),
        ("2017-12-17", 19783.00),
        ("2018-12-15", 3191.00),
        ("2020-03-13", 3858.00),
        ("2021-11-10", 68789.00),
        ("2022-11-21", 15760.00),
        ("2024-03-14", 73750.00),
    ),
)

ETH = CryptoAsset(
    symbol="ETH",
    name="Ethereum",
    launch_date=date(2015, 7, 30),
    trading_fee=0.001,
    base_volatility=0.06,
    description="Decentralized platform for smart contracts",
    major_events=(
        MajorEvent(
            date=date(2022, 9, 15),
            label="The Merge",
            impact=0.05,
            description="Transition from Proof of Work to Proof of Stake",
        ),
    ),
    staking=StakingConfig(enabled=True, annual_rate=0.04, start_date=date(2020, 12, 1)),
    price_anchors=_anchors(
        ("2015-07-30", 0.31),
        ("2016-03-01", 10.00),
        ("2017-06-12", 395.00),
        ("2018-01-13", 1396.00),
        ("2018-12-15", 83.00),
        ("2020-03-13", 109.00),
        ("2021-11-10", 4812.00),
        ("2022-06-18", 896.00),
        ("2024-03-14", 4092.00),
    ),
)

LTC = CryptoAsset(
    symbol="LTC",
    name="Litecoin",
    launch_date=date(2011, 10, 7),
    trading_fee=0.001,
    base_volatility=0.07,
    max_supply=84_000_000,
    description="Peer-to-peer cryptocurrency based on Bitcoin protocol",
    halving_schedule=(
        HalvingEvent(date=date(2015, 8, 25), block_reward=25.0, impact=0.08),
        HalvingEvent(date=date(2019, 8, 5), block_reward=12.5, impact=0.08),
        HalvingEvent(date=date(2023, 8, 2), block_reward=6.25, impact=0.08),
    ),
    price_anchors=_anchors(
        ("2011-10-07", 3.00),
        ("2013-11-28", 50.00),
        ("2017-12-12", 371.00),
        ("2018-12-15", 23.00),
        ("2021-05-10", 412.00),
        ("2022-11-21", 52.00),
        ("2024-03-14", 105.00),
    ),
)

XRP = CryptoAsset(
    symbol="XRP",
    name="Ripple",
    launch_date=date(2012, 6, 2),
    trading_fee=0.001,
    base_volatility=0.08,
    max_supply=100_000_000_000,
    description="Digital payment protocol and cryptocurrency",
    price_anchors=_anchors(
        ("2012-06-02", 0.0056),
        ("2017-05-15", 0.40),
        ("2018-01-07", 3.84),
        ("2020-03-13", 0.14),
        ("2021-04-14", 1.96),
        ("2022-11-21", 0.36),
        ("2024-03-14", 0.63),
    ),
)

BCH = CryptoAsset(
    symbol="BCH",
    name="Bitcoin Cash",
    launch_date=date(2017, 8, 1),
    trading_fee=0.001,
    base_volatility=0.09,
    max_supply=21_000_000,
    description="Fork of Bitcoin with increased block size",
    price_anchors=_anchors(
        ("2017-08-01", 555.00),
        ("2017-12-20", 4355.00),
        ("2018-12-15", 75.00),
        ("2021-05-12", 1638.00),
        ("2022-11-21", 103.00),
        ("2024-03-14", 491.00),
    ),
)

ADA = CryptoAsset(
    symbol="ADA",
    name="Cardano",
    launch_date=date(2017, 10, 1),
    trading_fee=0.001,
    base_volatility=0.08,
    max_supply=45_000_000_000,
    description="Proof-of-stake blockchain platform",
    staking=StakingConfig(enabled=True, annual_rate=0.05, start_date=date(2020, 7, 29)),
    price_anchors=_anchors(
        ("2017-10-01", 0.02),
        ("2018-01-04", 1.33),
        ("2020-03-13", 0.024),
        ("2021-09-02", 3.10),
        ("2022-11-21", 0.31),
        ("2024-03-14", 0.68),
    ),
)

DOGE = CryptoAsset(
    symbol="DOGE",
    name="Dogecoin",
    launch_date=date(2013, 12, 6),
    trading_fee=0.001,
    base_volatility=0.12,
    description='Cryptocurrency based on the "Doge" meme',
    price_anchors=_anchors(
        ("2013-12-06", 0.0002),
        ("2017-01-01", 0.0002),
        ("2021-05-08", 0.74),
        ("2022-11-21", 0.078),
        ("2024-03-14", 0.18),
    ),
)

DOT = CryptoAsset(
    symbol="DOT",
    name="Polkadot",
    launch_date=date(2020, 8, 18),
    trading_fee=0.001,
    base_volatility=0.09,
    description="Multi-chain protocol for blockchain interoperability",
    staking=StakingConfig(enabled=True, annual_rate=0.10, start_date=date(2020, 8, 18)),
    price_anchors=_anchors(
        ("2020-08-18", 2.93),
        ("2021-11-04", 55.09),
        ("2022-11-21", 5.36),
        ("2024-03-14", 10.39),
    ),
)

MATIC = CryptoAsset(
    symbol="MATIC",
    name="Polygon",
    launch_date=date(2019, 4, 26),
    trading_fee=0.001,
    base_volatility=0.10,
    max_supply=10_000_000_000,
    description="Ethereum scaling solution",
    staking=StakingConfig(enabled=True, annual_rate=0.08, start_date=date(2020, 5, 30)),
    price_anchors=_anchors(
        ("2019-04-26", 0.0033),
        ("2021-12-27", 2.92),
        ("2022-11-21", 0.83),
        ("2024-03-14", 1.14),
    ),
)

SOL = CryptoAsset(
    symbol="SOL",
    name="Solana",
    launch_date=date(2020, 3, 16),
    trading_fee=0.001,
    base_volatility=0.11,
    description="High-performance blockchain",
    staking=StakingConfig(enabled=True, annual_rate=0.07, start_date=date(2020, 3, 16)),
    price_anchors=_anchors(
        ("2020-03-16", 0.78),
        ("2021-11-06", 259.96),
        ("2022-11-21", 13.05),
        ("2024-03-14", 194.90),
    ),
)


# =============================================================================
# Market-wide Incidents
# =============================================================================

BLOCKCHAIN_EVENTS: tuple[BlockchainEvent, ...] = (
    BlockchainEvent(
        event_id="mtgox_hack",
        date=date(2014, 2, 24),
        affected=frozenset({"BTC"}),
        event_type="exchange_hack",
        impact=-0.20,
        description="Mt. Gox exchange hack - 850,000 BTC stolen",
    ),
    BlockchainEvent(
        event_id="bch_fork",
        date=date(2017, 8, 1),
        affected=frozenset({"BTC", "BCH"}),
        event_type="fork",
        impact=-0.05,
        description="Bitcoin Cash hard fork from Bitcoin",
    ),
    BlockchainEvent(
        event_id="china_ban_2021",
        date=date(2021, 9, 24),
        affected=frozenset({"BTC", "ETH"}),
        event_type="regulatory",
        impact=-0.15,
        description="China bans all cryptocurrency transactions",
    ),
    BlockchainEvent(
        event_id="ftx_collapse",
        date=date(2022, 11, 8),
        affected=frozenset({"BTC", "ETH", "SOL"}),
        event_type="exchange_collapse",
        impact=-0.25,
        description="FTX exchange collapse - Major liquidity crisis",
    ),
)

CRYPTO_CRASHES: tuple[CryptoCrash, ...] = (
    CryptoCrash(
        crash_id="crypto_winter_2018",
        name="2018 Crypto Winter",
        start_date=date(2018, 1, 1),
        end_date=date(2018, 12, 31),
        affected=frozenset({"BTC", "ETH", "LTC", "XRP", "BCH", "ADA"}),
        severity="severe",
        floor_multiplier=0.3,
        description="Prolonged bear market following 2017 bull run",
    ),
    CryptoCrash(
        crash_id="luna_terra_collapse",
        name="Luna/Terra Collapse",
        start_date=date(2022, 5, 9),
        end_date=date(2022, 5, 13),
        affected=frozenset({"BTC", "ETH", "ADA", "DOT", "MATIC", "SOL"}),
        severity="severe",
        floor_multiplier=0.6,
        description="Algorithmic stablecoin UST de-pegs, causing massive sell-off",
    ),
    CryptoCrash(
        crash_id="crypto_winter_2022",
        name="2022 Crypto Winter",
        start_date=date(2022, 6, 1),
        end_date=date(2023, 1, 1),
        affected=frozenset({"BTC", "ETH", "ADA", "DOT", "MATIC", "SOL", "DOGE"}),
        severity="moderate",
        floor_multiplier=0.5,
        description="Bear market following Terra collapse and FTX implosion",
    ),
)


# =============================================================================
# Collection and Utilities
# =============================================================================

ALL_CRYPTOS: tuple[CryptoAsset, ...] = (BTC, ETH, LTC, XRP, BCH, ADA, DOGE, DOT, MATIC, SOL)

_CRYPTO_BY_SYMBOL: dict[str, CryptoAsset] = {c.symbol: c for c in ALL_CRYPTOS}


def get_crypto(symbol: str) -> Optional[CryptoAsset]:
    """Asset definition for ``symbol``, or None when not listed."""
    return _CRYPTO_BY_SYMBOL.get(symbol)


def get_all_cryptos() -> tuple[CryptoAsset, ...]:
    """Every catalog asset, in catalog order."""
    return ALL_CRYPTOS


def is_crypto_available(symbol: str, when: DateLike) -> bool:
    """
    Whether ``symbol`` is tradable at ``when``.

    Examples
    --------
    >>> is_crypto_available("BTC", "2009-01-02")
    False
    >>> is_crypto_available("BTC", "2009-01-03")
    True
    >>> is_crypto_available("NOPE", "2020-01-01")
    False
    """
    asset = _CRYPTO_BY_SYMBOL.get(symbol)
    if asset is None:
        return False
    return to_datetime(when) >= to_datetime(asset.launch_date)


def get_available_cryptos(when: DateLike) -> list[str]:
    """Symbols tradable at ``when``, in catalog order."""
    return [c.symbol for c in ALL_CRYPTOS if is_crypto_available(c.symbol, when)]


def get_blockchain_events(start: DateLike, end: DateLike) -> list[BlockchainEvent]:
    """Market-wide incidents dated within [start, end]."""
    first, last = to_date(start), to_date(end)
    return [e for e in BLOCKCHAIN_EVENTS if first <= e.date <= last]


def get_active_crypto_crashes(when: DateLike) -> list[CryptoCrash]:
    """Crypto winter windows in force at ``when`` (bounds inclusive)."""
    moment = to_datetime(when)
    return [
        c
        for c in CRYPTO_CRASHES
        if to_datetime(c.start_date) <= moment <= to_datetime(c.end_date)
    ]
