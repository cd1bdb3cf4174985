"""
Cryptocurrency catalog and pricing.

Stateless: every function is a pure computation over the static catalog
and a caller-supplied date.
"""

from .catalog import (
    ALL_CRYPTOS,
    BLOCKCHAIN_EVENTS,
    CRYPTO_CRASHES,
    BlockchainEvent,
    CryptoAsset,
    CryptoCrash,
    HalvingEvent,
    MajorEvent,
    PriceAnchor,
    StakingConfig,
    get_active_crypto_crashes,
    get_all_cryptos,
    get_available_cryptos,
    get_blockchain_events,
    get_crypto,
    is_crypto_available,
)
from .pricing import (
    CryptoQuote,
    calculate_staking_rewards,
    crypto_price_table,
    get_all_crypto_prices,
    get_crypto_price,
    get_crypto_trading_fee,
    is_crypto_trading_open,
)

__all__ = [
    # Catalog
    "CryptoAsset",
    "HalvingEvent",
    "MajorEvent",
    "StakingConfig",
    "PriceAnchor",
    "BlockchainEvent",
    "CryptoCrash",
    "ALL_CRYPTOS",
    "BLOCKCHAIN_EVENTS",
    "CRYPTO_CRASHES",
    "get_crypto",
    "get_all_cryptos",
    "get_available_cryptos",
    "is_crypto_available",
    "get_blockchain_events",
    "get_active_crypto_crashes",
    # Pricing
    "CryptoQuote",
    "get_crypto_price",
    "get_crypto_trading_fee",
    "calculate_staking_rewards",
    "is_crypto_trading_open",
    "get_all_crypto_prices",
    "crypto_price_table",
]
