"""
Tests for configuration and the tolerance registry.
"""

from dataclasses import FrozenInstanceError

import pytest

from stockfake.config.settings import SETTINGS, CrashConfig, Settings
from stockfake.config.tolerances import (
    CONTINUITY_TOLERANCE,
    TOLERANCE_REGISTRY,
    get_tolerance,
)


class TestSettings:
    """Tests for the frozen settings singleton."""

    def test_defaults(self) -> None:
        assert SETTINGS.crash.bottom_cycles == 2
        assert SETTINGS.crypto.event_decay_days == 30.0
        assert SETTINGS.crypto.halving_decay_days == 365.0
        assert SETTINGS.liquidity.illiquid_price_impact == 0.05

    def test_bottom_cycles_whole_number(self) -> None:
        assert isinstance(SETTINGS.crash.bottom_cycles, int)

    def test_bottom_volatility_keeps_prices_positive(self) -> None:
        assert 0.0 <= SETTINGS.crash.bottom_volatility < 1.0

    def test_frozen(self) -> None:
        with pytest.raises(FrozenInstanceError):
            SETTINGS.crash = CrashConfig(bottom_cycles=3)

    def test_custom_settings(self) -> None:
        custom = Settings(crash=CrashConfig(history_limit=5))
        assert custom.crash.history_limit == 5
        assert custom.crypto == SETTINGS.crypto


class TestTolerances:
    """Tests for get_tolerance."""

    def test_lookup(self) -> None:
        assert get_tolerance("continuity") == CONTINUITY_TOLERANCE

    def test_unknown_lists_available(self) -> None:
        with pytest.raises(KeyError, match="calendar"):
            get_tolerance("nope")

    def test_tiers_ordered(self) -> None:
        assert (
            TOLERANCE_REGISTRY["calendar"]
            < TOLERANCE_REGISTRY["continuity"]
            < TOLERANCE_REGISTRY["recovery"]
        )
