"""
Integration tests: historical crash replays end to end.

Each scenario triggers a catalog event on its historical start date in a
fresh SimulationContext and walks a $100 stock through the crash using
calendar dates, as a game session would.
"""

from datetime import date

import numpy as np
import pytest

from stockfake.crashes.analytics import impact_path
from stockfake.crashes.curves import CrashPhase
from stockfake.crashes.engine import SimulationContext
from stockfake.crashes.events import DOT_COM_CRASH_2000, FINANCIAL_CRISIS_2008
from stockfake.timeline.elapsed import add_months


class TestFinancialCrisisReplay:
    """2008: Lehman to full recovery."""

    def test_trough_at_six_months(
        self, context: SimulationContext, lehman_date: date, tolerances
    ) -> None:
        context.trigger_crash_event("financial_crisis_2008", lehman_date)
        price = context.calculate_stock_price_impact(
            "BAC", "Financial", 100.0, add_months(lehman_date, 6)
        )
        assert price < 100.0 * (1 - tolerances.material_drop)

    def test_recovered_at_78_months(
        self, context: SimulationContext, lehman_date: date, tolerances
    ) -> None:
        context.trigger_crash_event("financial_crisis_2008", lehman_date)
        price = context.calculate_stock_price_impact(
            "BAC", "Financial", 100.0, add_months(lehman_date, 78)
        )
        assert price == pytest.approx(100.0, rel=tolerances.recovery)

    def test_monthly_walk(self, context: SimulationContext, lehman_date: date) -> None:
        context.trigger_crash_event("financial_crisis_2008", lehman_date)
        prices = [
            context.calculate_stock_price_impact(
                "BAC", "Financial", 100.0, add_months(lehman_date, m)
            )
            for m in range(0, 85)
        ]
        assert prices[0] == 100.0
        assert int(np.argmin(prices)) in range(6, 10)
        assert all(p > 0 for p in prices)
        assert prices[78:] == [100.0] * 7

    def test_phase_walk(self, context: SimulationContext, lehman_date: date) -> None:
        context.trigger_crash_event("financial_crisis_2008", lehman_date)
        phases = [context.current_phase(add_months(lehman_date, m)) for m in range(0, 80)]
        order = [CrashPhase.PANIC, CrashPhase.BOTTOM, CrashPhase.RECOVERY, CrashPhase.RECOVERED]
        ranks = [order.index(p) for p in phases]
        assert ranks == sorted(ranks)

    def test_unaffected_sector_untouched_throughout(
        self, context: SimulationContext, lehman_date: date
    ) -> None:
        context.trigger_crash_event("financial_crisis_2008", lehman_date)
        for m in range(0, 80, 3):
            as_of = add_months(lehman_date, m)
            assert context.calculate_stock_price_impact("DUK", "Utilities", 42.0, as_of) == 42.0

    def test_market_state_normalizes(self, context: SimulationContext, lehman_date: date) -> None:
        context.trigger_crash_event("financial_crisis_2008", lehman_date)
        trough = context.market_state(add_months(lehman_date, 7))
        healed = context.market_state(add_months(lehman_date, 78))
        assert trough.volatility > 5.0
        assert healed.volatility == 1.0
        assert healed.liquidity == 1.0

    def test_context_path_matches_analytics(self, lehman_date: date) -> None:
        ctx = SimulationContext()
        ctx.trigger_crash_event(FINANCIAL_CRISIS_2008, lehman_date)
        path = impact_path(FINANCIAL_CRISIS_2008, "Energy", lehman_date)
        for _, row in path.iterrows():
            assert ctx.calculate_stock_price_impact(
                "XOM", "Energy", 100.0, row["date"].to_pydatetime()
            ) == pytest.approx(row["price"])


class TestDotComReplay:
    """2000: NASDAQ peak to the 2015 recovery."""

    def test_recovered_after_fifteen_years(
        self, context: SimulationContext, nasdaq_peak_date: date, tolerances
    ) -> None:
        context.trigger_crash_event("dot_com_crash_2000", nasdaq_peak_date)
        price = context.calculate_stock_price_impact(
            "CSCO", "Technology", 100.0, add_months(nasdaq_peak_date, 180)
        )
        assert price == pytest.approx(100.0, rel=tolerances.recovery)

    def test_net_increase_from_year_two(
        self, context: SimulationContext, nasdaq_peak_date: date
    ) -> None:
        context.trigger_crash_event("dot_com_crash_2000", nasdaq_peak_date)
        yearly = [
            context.calculate_stock_price_impact(
                "CSCO", "Technology", 100.0, add_months(nasdaq_peak_date, 12 * y)
            )
            for y in range(2, 16)
        ]
        assert yearly[-1] > yearly[0]
        assert all(b > a for a, b in zip(yearly, yearly[1:]))

    def test_deep_tech_trough(self, context: SimulationContext, nasdaq_peak_date: date) -> None:
        context.trigger_crash_event("dot_com_crash_2000", nasdaq_peak_date)
        price = context.calculate_stock_price_impact(
            "CSCO", "Technology", 100.0, add_months(nasdaq_peak_date, 18)
        )
        assert price < 30.0

    def test_tech_hit_harder_than_energy(
        self, context: SimulationContext, nasdaq_peak_date: date
    ) -> None:
        context.trigger_crash_event("dot_com_crash_2000", nasdaq_peak_date)
        as_of = add_months(nasdaq_peak_date, 30)
        tech = context.calculate_stock_price_impact("CSCO", "Technology", 100.0, as_of)
        energy = context.calculate_stock_price_impact("XOM", "Energy", 100.0, as_of)
        assert tech < energy < 100.0

    def test_analytics_path_shape(self, nasdaq_peak_date: date) -> None:
        path = impact_path(DOT_COM_CRASH_2000, "Technology", nasdaq_peak_date, step_months=12.0)
        assert path["phase"].tolist()[:3] == ["panic", "bottom", "recovery"]
        assert path["price"].iloc[-1] == 100.0


class TestScenarioIsolation:
    """Independent scenarios do not interfere after reset."""

    def test_reset_between_scenarios(self, context: SimulationContext) -> None:
        context.trigger_crash_event("financial_crisis_2008", date(2008, 9, 15))
        context.reset_for_testing()
        context.trigger_crash_event("dot_com_crash_2000", date(2000, 3, 10))
        price = context.calculate_stock_price_impact("HEALTH", "Healthcare", 100.0, "2009-03-15")
        assert price == 100.0
        assert len(context.event_history()) == 1
