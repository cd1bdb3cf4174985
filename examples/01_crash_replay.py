#!/usr/bin/env python3
"""
Crash Replay Demo - Decade-Long Impact of Historical Crashes.

This example replays a historical crash against a small sector portfolio
and prints how each holding moves from the panic through the recovery.

Key Concepts:
- A crash is triggered on a SimulationContext owned by the caller
- Prices are the base price times a phase-based multiplier
- Sectors outside the event keep their base price exactly
- Every sector is back to its base price once the event's duration ends

Usage:
    python examples/01_crash_replay.py                          # 2008 replay
    python examples/01_crash_replay.py --event dot_com_crash_2000
    python examples/01_crash_replay.py --step 6 --save-csv
"""

import argparse
import sys
from dataclasses import dataclass

# Add src to path if running as script
sys.path.insert(0, "src")

from stockfake import SimulationContext, add_months, get_event_by_id, impact_path
from stockfake.crashes.events import CrashEvent


@dataclass
class Holding:
    """One position in the demo portfolio."""

    symbol: str
    sector: str
    base_price: float


def create_sample_portfolio() -> list[Holding]:
    """Five stocks across affected and unaffected sectors."""
    return [
        Holding(symbol="BAC", sector="Financial", base_price=45.0),
        Holding(symbol="CSCO", sector="Technology", base_price=80.0),
        Holding(symbol="XOM", sector="Energy", base_price=90.0),
        Holding(symbol="JNJ", sector="Healthcare", base_price=60.0),
        Holding(symbol="DUK", sector="Utilities", base_price=40.0),
    ]


def print_event_header(event: CrashEvent) -> None:
    """Print event definition."""
    timeline = event.timeline
    print("\n" + "=" * 70)
    print(f"EVENT: {event.name}")
    print("=" * 70)
    print(f"\n  Start:          {event.historical_start}")
    print(f"  Panic:          {timeline.panic_months:g} months to trough")
    print(f"  Bottom:         {timeline.bottom_months:g} months")
    print(f"  Full recovery:  {timeline.total_months:g} months")
    print(f"  Severity:       {event.severity.value}")
    print("\n  Sector depths:")
    for impact in sorted(event.sector_impacts, key=lambda s: -s.depth):
        print(f"    {impact.sector:<14} {-impact.depth:.0%}")


def print_replay(ctx: SimulationContext, event: CrashEvent, portfolio: list[Holding], step: int) -> None:
    """Print portfolio prices every ``step`` months."""
    start = event.historical_start
    header = "  {:<12} {:<10}".format("Date", "Phase") + "".join(
        f" {h.symbol:>8}" for h in portfolio
    )
    print("\n" + header)
    print("  " + "-" * (len(header) - 2))

    horizon = int(event.timeline.total_months) + step
    for month in range(0, horizon + 1, step):
        as_of = add_months(start, month)
        prices = [
            ctx.calculate_stock_price_impact(h.symbol, h.sector, h.base_price, as_of)
            for h in portfolio
        ]
        row = "  {:<12} {:<10}".format(as_of.date().isoformat(), ctx.current_phase(as_of).value)
        print(row + "".join(f" {p:>8.2f}" for p in prices))


def main() -> None:
    """Run crash replay demo."""
    parser = argparse.ArgumentParser(description="Crash Replay Demo")
    parser.add_argument("--event", default="financial_crisis_2008", help="Catalog event id")
    parser.add_argument("--step", type=int, default=12, help="Months between rows (default: 12)")
    parser.add_argument("--save-csv", action="store_true", help="Save the Technology path as CSV")
    args = parser.parse_args()

    event = get_event_by_id(args.event)
    if event.historical_start is None:
        parser.error(f"{args.event} is hypothetical and has no historical start date")

    print("\n" + "=" * 60)
    print("CRASH REPLAY DEMO")
    print("=" * 60)

    portfolio = create_sample_portfolio()
    print(f"\nPortfolio: {len(portfolio)} holdings")
    for h in portfolio:
        print(f"  - {h.symbol} ({h.sector}) @ ${h.base_price:.2f}")

    print_event_header(event)

    ctx = SimulationContext()
    ctx.trigger_crash_event(event, event.historical_start)
    print_replay(ctx, event, portfolio, args.step)

    if args.save_csv:
        path = impact_path(event, "Technology", event.historical_start)
        csv_path = f"examples/{event.event_id}_technology.csv"
        path.to_csv(csv_path, index=False)
        print(f"\nPath saved to: {csv_path}")

    print("\n" + "=" * 60)
    print("DEMO COMPLETE")
    print("=" * 60)


if __name__ == "__main__":
    main()
