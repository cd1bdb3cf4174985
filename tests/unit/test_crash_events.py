"""
Tests for the crash event catalog.

Verifies catalog integrity, calibration parameters of the historical
events, dataclass validation and the lookup utilities.
"""

from dataclasses import replace

import pytest

from stockfake.crashes.events import (
    ALL_CRASH_EVENTS,
    BLACK_MONDAY_1987,
    COVID_CRASH_2020,
    DOT_COM_CRASH_2000,
    ENERGY_CRISIS,
    FINANCIAL_CRISIS_2008,
    FLASH_CRASH_2010,
    HISTORICAL_CRASHES,
    HYPOTHETICAL_SCENARIOS,
    TECH_BUBBLE_BURST,
    ConditionType,
    CrashEvent,
    CrashTimeline,
    CrashType,
    SectorImpact,
    SeverityLevel,
    TriggerCondition,
    TriggerType,
    UnknownEventError,
    classify_severity,
    create_custom_event,
    find_event,
    get_event_by_id,
    get_events_by_type,
)


class TestFinancialCrisis2008:
    """Tests for the 2008 financial crisis definition."""

    def test_financial_sector_depth(self) -> None:
        assert FINANCIAL_CRISIS_2008.sector_impact("Financial").depth == pytest.approx(0.83)

    def test_trough_at_six_months(self) -> None:
        assert FINANCIAL_CRISIS_2008.timeline.panic_months == 6.0

    def test_full_recovery_at_78_months(self) -> None:
        """6.5 years from Lehman to pre-crisis levels."""
        assert FINANCIAL_CRISIS_2008.timeline.total_months == 78.0

    def test_financial_is_deepest_sector(self) -> None:
        assert FINANCIAL_CRISIS_2008.max_depth == FINANCIAL_CRISIS_2008.sector_impact(
            "Financial"
        ).depth

    def test_historical_start(self) -> None:
        assert FINANCIAL_CRISIS_2008.historical_start.isoformat() == "2008-09-15"


class TestDotComCrash2000:
    """Tests for the dot-com crash definition."""

    def test_technology_depth(self) -> None:
        assert DOT_COM_CRASH_2000.sector_impact("Technology").depth == pytest.approx(0.78)

    def test_bottom_ends_at_two_years(self) -> None:
        assert DOT_COM_CRASH_2000.timeline.recovery_start == 24.0

    def test_fifteen_year_recovery(self) -> None:
        assert DOT_COM_CRASH_2000.timeline.total_months == 180.0

    def test_sector_crash_type(self) -> None:
        assert DOT_COM_CRASH_2000.crash_type == CrashType.SECTOR_CRASH

    def test_technology_shape_override(self) -> None:
        tech = DOT_COM_CRASH_2000.sector_impact("Technology")
        assert DOT_COM_CRASH_2000.shape_for(tech) == 1.5

    def test_other_sectors_use_event_shape(self) -> None:
        energy = DOT_COM_CRASH_2000.sector_impact("Energy")
        assert DOT_COM_CRASH_2000.shape_for(energy) == DOT_COM_CRASH_2000.recovery_shape


class TestCatalogIntegrity:
    """Cross-catalog invariants."""

    def test_ids_unique(self) -> None:
        ids = [e.event_id for e in ALL_CRASH_EVENTS]
        assert len(ids) == len(set(ids))

    def test_all_events_is_union(self) -> None:
        assert len(ALL_CRASH_EVENTS) == len(HISTORICAL_CRASHES) + len(HYPOTHETICAL_SCENARIOS)

    @pytest.mark.parametrize("event", ALL_CRASH_EVENTS, ids=lambda e: e.event_id)
    def test_depths_in_unit_interval(self, event: CrashEvent) -> None:
        assert all(0.0 < s.depth < 1.0 for s in event.sector_impacts)

    @pytest.mark.parametrize("event", HISTORICAL_CRASHES, ids=lambda e: e.event_id)
    def test_historical_events_have_start(self, event: CrashEvent) -> None:
        assert event.trigger == TriggerType.HISTORICAL
        assert event.historical_start is not None

    def test_flash_crash_heals_within_a_day(self) -> None:
        assert FLASH_CRASH_2010.timeline.total_months < 0.05

    def test_black_monday_linear_recovery(self) -> None:
        assert BLACK_MONDAY_1987.recovery_shape == 1.0

    @pytest.mark.parametrize(
        "event, expected",
        [
            (BLACK_MONDAY_1987, SeverityLevel.CATASTROPHIC),
            (COVID_CRASH_2020, SeverityLevel.SEVERE),
            (ENERGY_CRISIS, SeverityLevel.SEVERE),
            (FINANCIAL_CRISIS_2008, SeverityLevel.CATASTROPHIC),
            (FLASH_CRASH_2010, SeverityLevel.MODERATE),
        ],
        ids=lambda v: getattr(v, "event_id", None),
    )
    def test_catalog_keeps_historical_labels(self, event: CrashEvent, expected: SeverityLevel) -> None:
        """Catalog labels are editorial and may differ from the depth bands."""
        assert event.severity == expected

    def test_depth_bands_apply_to_rebuilt_events(self) -> None:
        """The same sector depths without a label fall into the depth bands."""
        for event in ALL_CRASH_EVENTS:
            depths = {s.sector: s.depth for s in event.sector_impacts}
            rebuilt = create_custom_event(sector_depths=depths)
            assert rebuilt.severity == classify_severity(event.max_depth)


class TestValidation:
    """Dataclass __post_init__ validation."""

    def test_depth_must_be_below_one(self) -> None:
        with pytest.raises(ValueError, match="depth"):
            SectorImpact(sector="Financial", depth=1.0)

    def test_depth_must_be_positive(self) -> None:
        with pytest.raises(ValueError, match="depth"):
            SectorImpact(sector="Financial", depth=0.0)

    def test_sector_shape_at_least_one(self) -> None:
        with pytest.raises(ValueError, match="recovery_shape"):
            SectorImpact(sector="Financial", depth=0.3, recovery_shape=0.5)

    def test_panic_must_be_positive(self) -> None:
        with pytest.raises(ValueError, match="panic_months"):
            CrashTimeline(panic_months=0.0, bottom_months=1.0, total_months=5.0)

    def test_bottom_not_negative(self) -> None:
        with pytest.raises(ValueError, match="bottom_months"):
            CrashTimeline(panic_months=1.0, bottom_months=-1.0, total_months=5.0)

    def test_total_exceeds_panic_plus_bottom(self) -> None:
        with pytest.raises(ValueError, match="total_months"):
            CrashTimeline(panic_months=2.0, bottom_months=3.0, total_months=5.0)

    def test_recovery_months(self) -> None:
        timeline = CrashTimeline(panic_months=6.0, bottom_months=3.0, total_months=78.0)
        assert timeline.recovery_months == 69.0

    def test_duplicate_sector_rejected(self) -> None:
        with pytest.raises(ValueError, match="twice"):
            replace(
                create_custom_event(),
                sector_impacts=(
                    SectorImpact("Financial", 0.2),
                    SectorImpact("Financial", 0.3),
                ),
            )

    def test_valuation_condition_needs_sector(self) -> None:
        with pytest.raises(ValueError, match="sector"):
            TriggerCondition(kind=ConditionType.SECTOR_VALUATION, threshold=50.0)


class TestClassifySeverity:
    """Tests for severity classification."""

    @pytest.mark.parametrize(
        "depth,expected",
        [
            (0.05, SeverityLevel.MINOR),
            (0.10, SeverityLevel.MODERATE),
            (0.19, SeverityLevel.MODERATE),
            (0.20, SeverityLevel.SEVERE),
            (0.40, SeverityLevel.SEVERE),
            (0.41, SeverityLevel.CATASTROPHIC),
        ],
    )
    def test_thresholds(self, depth: float, expected: SeverityLevel) -> None:
        assert classify_severity(depth) == expected


class TestLookup:
    """Tests for catalog lookup utilities."""

    def test_get_event_by_id(self) -> None:
        assert get_event_by_id("financial_crisis_2008") is FINANCIAL_CRISIS_2008

    def test_unknown_id_raises(self) -> None:
        with pytest.raises(UnknownEventError, match="Unknown crash event"):
            get_event_by_id("tulip_mania_1637")

    def test_unknown_id_lists_valid_ids(self) -> None:
        with pytest.raises(UnknownEventError, match="dot_com_crash_2000"):
            get_event_by_id("nope")

    def test_unknown_event_error_is_value_error(self) -> None:
        assert issubclass(UnknownEventError, ValueError)

    def test_find_event_none_when_absent(self) -> None:
        assert find_event("nope") is None

    def test_find_event(self) -> None:
        assert find_event("tech_bubble_burst") is TECH_BUBBLE_BURST

    def test_events_by_type(self) -> None:
        flash = get_events_by_type(CrashType.FLASH_CRASH)
        assert flash == (FLASH_CRASH_2010,)


class TestCreateCustomEvent:
    """Tests for custom scenario construction."""

    def test_defaults(self) -> None:
        event = create_custom_event()
        assert event.event_id == "custom"
        assert len(event.sector_impacts) == 5
        assert event.severity == SeverityLevel.MODERATE
        assert event.trigger == TriggerType.MANUAL

    def test_severity_classified_from_deepest_sector(self) -> None:
        event = create_custom_event(sector_depths={"Energy": 0.55, "Consumer": 0.1})
        assert event.severity == SeverityLevel.CATASTROPHIC

    def test_explicit_severity_kept(self) -> None:
        event = create_custom_event(severity=SeverityLevel.MINOR)
        assert event.severity == SeverityLevel.MINOR

    def test_condition_sets_trigger_type(self) -> None:
        condition = TriggerCondition(kind=ConditionType.MARKET_DECLINE, threshold=0.2)
        event = create_custom_event(trigger_condition=condition)
        assert event.trigger == TriggerType.CONDITION

    def test_empty_sectors_rejected(self) -> None:
        with pytest.raises(ValueError, match="no sectors"):
            create_custom_event(sector_depths={})

    def test_invalid_timeline_rejected(self) -> None:
        with pytest.raises(ValueError, match="total_months"):
            create_custom_event(panic_months=2.0, bottom_months=1.0, total_months=3.0)
