"""
Centralized pytest fixtures for the stockfake test suite.

Fixture Categories:
1. Tolerances - Tiered tolerances shared by unit, integration and property tests
2. Simulation Context - Fresh caller-owned crash state per test
3. Scenario Dates - Historical start dates for replay scenarios
"""

from dataclasses import dataclass
from datetime import date

import pytest

from stockfake.config.tolerances import (
    ARITHMETIC_TOLERANCE,
    CALENDAR_TOLERANCE,
    CONTINUITY_TOLERANCE,
    MATERIAL_DROP,
    RECOVERY_TOLERANCE,
)
from stockfake.crashes.engine import SimulationContext


# =============================================================================
# TOLERANCE TIERS
# =============================================================================

@dataclass(frozen=True)
class ToleranceTiers:
    """Tiered tolerance framework for different test types."""

    calendar: float = CALENDAR_TOLERANCE
    arithmetic: float = ARITHMETIC_TOLERANCE
    continuity: float = CONTINUITY_TOLERANCE
    recovery: float = RECOVERY_TOLERANCE
    material_drop: float = MATERIAL_DROP


TOLERANCES = ToleranceTiers()


@pytest.fixture(scope="session")
def tolerances() -> ToleranceTiers:
    """Provide tiered tolerance settings for all tests."""
    return TOLERANCES


# =============================================================================
# SIMULATION CONTEXT
# =============================================================================

@pytest.fixture
def context():
    """
    Fresh simulation context, reset after the test.

    Each test owns its context, so triggering a crash in one test can
    never leak into another.
    """
    ctx = SimulationContext()
    yield ctx
    ctx.reset_for_testing()


# =============================================================================
# SCENARIO DATES
# =============================================================================

@pytest.fixture(scope="session")
def lehman_date() -> date:
    """Lehman Brothers bankruptcy, start of the 2008 replay."""
    return date(2008, 9, 15)


@pytest.fixture(scope="session")
def nasdaq_peak_date() -> date:
    """NASDAQ peak, start of the dot-com replay."""
    return date(2000, 3, 10)
