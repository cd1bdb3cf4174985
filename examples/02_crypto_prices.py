#!/usr/bin/env python3
"""
Crypto Market Demo - Listings, Prices and Staking Over Time.

This example walks the crypto market through the years: which coins are
listed, what they trade at, and what a staked position earns.

Key Concepts:
- Coins only list from their launch date
- Prices are deterministic: the same date always gives the same price
- Staking accrues by exact calendar months

Usage:
    python examples/02_crypto_prices.py
    python examples/02_crypto_prices.py --years 2013 2017 2021
"""

import argparse
import sys
from datetime import date

# Add src to path if running as script
sys.path.insert(0, "src")

from stockfake import calculate_staking_rewards, get_crypto_trading_fee
from stockfake.crypto.catalog import get_blockchain_events
from stockfake.crypto.pricing import crypto_price_table


def print_year(year: int) -> None:
    """Print the listing table on Jan 1 of ``year``."""
    as_of = date(year, 1, 1)
    table = crypto_price_table(as_of)
    print("\n" + "=" * 70)
    print(f"MARKET ON {as_of.isoformat()}  ({len(table)} listed)")
    print("=" * 70)
    print("\n  {:<8} {:<16} {:>14} {:>8}".format("Symbol", "Name", "Price", "Staking"))
    print("  " + "-" * 50)
    for symbol, row in table.iterrows():
        staking = "yes" if row["has_staking"] else "-"
        print(f"  {symbol:<8} {row['name']:<16} {row['price']:>14,.4f} {staking:>8}")

    events = get_blockchain_events(date(year - 1, 1, 1), date(year - 1, 12, 31))
    for event in events:
        print(f"\n  {event.date}: {event.description} ({event.impact:+.0%})")


def main() -> None:
    """Run crypto market demo."""
    parser = argparse.ArgumentParser(description="Crypto Market Demo")
    parser.add_argument(
        "--years",
        type=int,
        nargs="+",
        default=[2010, 2014, 2018, 2022, 2024],
        help="Years to show (Jan 1 of each)",
    )
    args = parser.parse_args()

    print("\n" + "=" * 60)
    print("CRYPTO MARKET DEMO")
    print("=" * 60)

    for year in args.years:
        print_year(year)

    print("\n" + "=" * 70)
    print("TRADING AND STAKING")
    print("=" * 70)
    print(f"\n  Fee on a $10,000 BTC trade:  ${get_crypto_trading_fee('BTC', 10_000):.2f}")
    rewards = calculate_staking_rewards("ETH", 10, date(2022, 1, 1), date(2021, 1, 1))
    print(f"  10 ETH staked through 2021:  {rewards:.4f} ETH")

    print("\n" + "=" * 60)
    print("DEMO COMPLETE")
    print("=" * 60)


if __name__ == "__main__":
    main()
