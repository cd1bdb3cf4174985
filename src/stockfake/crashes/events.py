"""
Crash Event Catalog.

Contains the historical and hypothetical crash scenarios the engine can
replay. Each event is an immutable definition: sector depths, phase
boundaries in calendar months and the recovery curve exponent. The start
instant is NOT part of the definition; it is supplied at trigger time.

Each event includes:
- Sector impacts (trough depth per sector, optional curve override)
- Timeline (panic, bottom and total recovery duration in months)
- Market-wide stress parameters (volatility, liquidity, sentiment)

Recovery durations follow the real-world time to regain the pre-crash
peak: 6.5 years for 2008, 15 years for technology after 2000.
"""

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Optional


class UnknownEventError(ValueError):
    """Raised when a crash event id is not in the catalog."""

    pass


class CrashType(Enum):
    """Crash archetype classification."""

    MARKET_CRASH = "market_crash"  # Broad market crash
    SECTOR_CRASH = "sector_crash"  # Sector-specific crash
    CORRECTION = "correction"  # 10-20% drop
    FLASH_CRASH = "flash_crash"  # Rapid, temporary crash
    BEAR_MARKET = "bear_market"  # Prolonged decline (20%+)
    LIQUIDITY_CRISIS = "liquidity_crisis"
    CONTAGION = "contagion"  # Cross-market contagion


class TriggerType(Enum):
    """How an event comes to be activated."""

    MANUAL = "manual"
    SCHEDULED = "scheduled"
    CONDITION = "condition"
    HISTORICAL = "historical"  # Historical replay


class SeverityLevel(Enum):
    """
    Headline severity of a crash.

    The depth bands below are what classify_severity applies to custom
    events. Catalog events keep their historical labels, which weigh
    speed and duration as well as depth (Black Monday is catastrophic at
    a 25% drop).
    """

    MINOR = "minor"  # < 10%
    MODERATE = "moderate"  # 10-20%
    SEVERE = "severe"  # 20-40%
    CATASTROPHIC = "catastrophic"  # > 40%


class ConditionType(Enum):
    """Market condition that can arm a hypothetical scenario."""

    SECTOR_VALUATION = "sector_valuation"  # Sector P/E above threshold
    MARKET_DECLINE = "market_decline"  # Market change below -threshold
    VOLATILITY_SPIKE = "volatility_spike"  # Volatility above threshold


@dataclass(frozen=True)
class TriggerCondition:
    """
    Condition under which a scenario would fire.

    Attributes
    ----------
    kind : ConditionType
        Which market observable is tested
    threshold : float
        P/E ratio, decline fraction (0.20 = 20%) or volatility multiple
    sector : Optional[str]
        Sector tested by SECTOR_VALUATION conditions
    """

    kind: ConditionType
    threshold: float
    sector: Optional[str] = None

    def __post_init__(self) -> None:
        if self.kind is ConditionType.SECTOR_VALUATION and not self.sector:
            raise ValueError("sector_valuation conditions need a sector")


@dataclass(frozen=True)
class SectorImpact:
    """
    Per-sector severity of a crash.

    Attributes
    ----------
    sector : str
        Sector tag (e.g., "Financial")
    depth : float
        Fraction of value lost at the trough (0.83 = -83%)
    recovery_shape : Optional[float]
        Overrides the event's recovery exponent for this sector. Lower
        values recover more slowly early on (1.0 = linear).
    """

    sector: str
    depth: float
    recovery_shape: Optional[float] = None

    def __post_init__(self) -> None:
        if not 0.0 < self.depth < 1.0:
            raise ValueError(f"depth must be in (0, 1), got {self.depth} for {self.sector}")
        if self.recovery_shape is not None and self.recovery_shape < 1.0:
            raise ValueError(f"recovery_shape must be >= 1, got {self.recovery_shape}")


@dataclass(frozen=True)
class CrashTimeline:
    """
    Phase boundaries in calendar months from the crash start.

    Attributes
    ----------
    panic_months : float
        End of the panic drop (trough reached)
    bottom_months : float
        Length of the trough plateau
    total_months : float
        Elapsed time at which every sector is fully healed
    """

    panic_months: float
    bottom_months: float
    total_months: float

    def __post_init__(self) -> None:
        if self.panic_months <= 0:
            raise ValueError(f"panic_months must be > 0, got {self.panic_months}")
        if self.bottom_months < 0:
            raise ValueError(f"bottom_months must be >= 0, got {self.bottom_months}")
        if self.recovery_start >= self.total_months:
            raise ValueError(
                f"total_months ({self.total_months}) must exceed panic + bottom "
                f"({self.recovery_start})"
            )

    @property
    def recovery_start(self) -> float:
        """Elapsed months at which the recovery phase begins."""
        return self.panic_months + self.bottom_months

    @property
    def recovery_months(self) -> float:
        """Length of the recovery phase."""
        return self.total_months - self.recovery_start


@dataclass(frozen=True)
class CrashEvent:
    """
    Complete crash event definition.

    Attributes
    ----------
    event_id : str
        Catalog key (e.g., "financial_crisis_2008")
    name : str
        Human-readable name
    crash_type : CrashType
        Archetype
    severity : SeverityLevel
        Headline severity (historical label for catalog events)
    trigger : TriggerType
        Activation mode
    description : str
        Context about the event
    sector_impacts : Tuple[SectorImpact, ...]
        Affected sectors; sectors not listed pass through untouched
    timeline : CrashTimeline
        Phase boundaries
    recovery_shape : float
        Exponent k of the recovery curve 1 - d(1 - p)^k (k >= 1)
    volatility_multiplier : float
        Peak market volatility multiple
    liquidity_reduction : float
        Peak fraction of normal liquidity withdrawn
    sentiment_shift : float
        Peak sentiment change (-1 = extreme fear)
    historical_start : Optional[date]
        Real-world start date, if the event happened
    trigger_condition : Optional[TriggerCondition]
        Condition that arms a hypothetical scenario
    """

    event_id: str
    name: str
    crash_type: CrashType
    severity: SeverityLevel
    trigger: TriggerType
    description: str
    sector_impacts: tuple[SectorImpact, ...]
    timeline: CrashTimeline
    recovery_shape: float = 2.0
    volatility_multiplier: float = 1.0
    liquidity_reduction: float = 0.0
    sentiment_shift: float = 0.0
    historical_start: Optional[date] = None
    trigger_condition: Optional[TriggerCondition] = None

    def __post_init__(self) -> None:
        if not self.sector_impacts:
            raise ValueError(f"Event '{self.event_id}' affects no sectors")
        sectors = [s.sector for s in self.sector_impacts]
        if len(set(sectors)) != len(sectors):
            raise ValueError(f"Event '{self.event_id}' lists a sector twice")
        if self.recovery_shape < 1.0:
            raise ValueError(f"recovery_shape must be >= 1, got {self.recovery_shape}")
        if self.volatility_multiplier < 1.0:
            raise ValueError(
                f"volatility_multiplier must be >= 1, got {self.volatility_multiplier}"
            )
        if not 0.0 <= self.liquidity_reduction < 1.0:
            raise ValueError(
                f"liquidity_reduction must be in [0, 1), got {self.liquidity_reduction}"
            )
        if not -1.0 <= self.sentiment_shift <= 1.0:
            raise ValueError(f"sentiment_shift must be in [-1, 1], got {self.sentiment_shift}")

    @property
    def affected_sectors(self) -> frozenset[str]:
        """Sector tags this event touches."""
        return frozenset(s.sector for s in self.sector_impacts)

    @property
    def max_depth(self) -> float:
        """Deepest sector drawdown."""
        return max(s.depth for s in self.sector_impacts)

    def sector_impact(self, sector: str) -> Optional[SectorImpact]:
        """Impact for ``sector``, or None when the sector is unaffected."""
        for impact in self.sector_impacts:
            if impact.sector == sector:
                return impact
        return None

    def shape_for(self, impact: SectorImpact) -> float:
        """Recovery exponent for a sector (override or event default)."""
        if impact.recovery_shape is not None:
            return impact.recovery_shape
        return self.recovery_shape


def _sectors(**depths: float) -> tuple[SectorImpact, ...]:
    return tuple(SectorImpact(sector=name, depth=depth) for name, depth in depths.items())


def classify_severity(depth: float) -> SeverityLevel:
    """
    Classify severity from the deepest sector drawdown.

    create_custom_event uses this when no severity is given.

    Examples
    --------
    >>> classify_severity(0.05)
    <SeverityLevel.MINOR: 'minor'>
    >>> classify_severity(0.83)
    <SeverityLevel.CATASTROPHIC: 'catastrophic'>
    """
    if depth < 0.10:
        return SeverityLevel.MINOR
    if depth < 0.20:
        return SeverityLevel.MODERATE
    if depth <= 0.40:
        return SeverityLevel.SEVERE
    return SeverityLevel.CATASTROPHIC


# =============================================================================
# Historical Crashes
# =============================================================================

# Black Monday: -22.6% in a single session, regained within ~3 months
BLACK_MONDAY_1987 = CrashEvent(
    event_id="black_monday_1987",
    name="Black Monday 1987",
    crash_type=CrashType.MARKET_CRASH,
    severity=SeverityLevel.CATASTROPHIC,
    trigger=TriggerType.HISTORICAL,
    description="The largest single-day percentage decline in stock market history",
    sector_impacts=_sectors(
        Financial=0.25,
        Technology=0.20,
        Industrials=0.23,
        Consumer=0.18,
        Energy=0.22,
    ),
    timeline=CrashTimeline(panic_months=0.05, bottom_months=0.5, total_months=3.0),
    recovery_shape=1.0,
    volatility_multiplier=5.0,
    liquidity_reduction=0.6,
    sentiment_shift=-0.8,
    historical_start=date(1987, 10, 19),
)

# Dot-com: NASDAQ peak Mar 2000, tech bottom ~2 years later,
# technology took ~15 years to regain the 2000 peak
DOT_COM_CRASH_2000 = CrashEvent(
    event_id="dot_com_crash_2000",
    name="Dot-Com Bubble Burst",
    crash_type=CrashType.SECTOR_CRASH,
    severity=SeverityLevel.CATASTROPHIC,
    trigger=TriggerType.HISTORICAL,
    description="Technology sector bubble collapse - decade-long impact",
    sector_impacts=(
        SectorImpact(sector="Technology", depth=0.78, recovery_shape=1.5),
        SectorImpact(sector="Financial", depth=0.15),
        SectorImpact(sector="Industrials", depth=0.12),
        SectorImpact(sector="Consumer", depth=0.10),
        SectorImpact(sector="Energy", depth=0.08),
    ),
    timeline=CrashTimeline(panic_months=12.0, bottom_months=12.0, total_months=180.0),
    recovery_shape=2.0,
    volatility_multiplier=4.0,
    liquidity_reduction=0.5,
    sentiment_shift=-0.8,
    historical_start=date(2000, 3, 10),
)

# 2008: Lehman (Sep 15) to the Mar 2009 bottom, 6.5 years to regain the peak.
# Financials fell hardest and recovered slowest.
FINANCIAL_CRISIS_2008 = CrashEvent(
    event_id="financial_crisis_2008",
    name="Financial Crisis of 2008",
    crash_type=CrashType.MARKET_CRASH,
    severity=SeverityLevel.CATASTROPHIC,
    trigger=TriggerType.HISTORICAL,
    description="Global financial crisis - 6.5 year recovery to pre-crisis levels",
    sector_impacts=(
        SectorImpact(sector="Financial", depth=0.83, recovery_shape=1.5),
        SectorImpact(sector="Technology", depth=0.42),
        SectorImpact(sector="Industrials", depth=0.54),
        SectorImpact(sector="Consumer", depth=0.48),
        SectorImpact(sector="Energy", depth=0.60),
        SectorImpact(sector="Healthcare", depth=0.35),
    ),
    timeline=CrashTimeline(panic_months=6.0, bottom_months=3.0, total_months=78.0),
    recovery_shape=2.5,
    volatility_multiplier=5.5,
    liquidity_reduction=0.75,
    sentiment_shift=-0.95,
    historical_start=date(2008, 9, 15),
)

# COVID: fastest bear market on record, V-shaped recovery in ~5 months
COVID_CRASH_2020 = CrashEvent(
    event_id="covid_crash_2020",
    name="COVID-19 Pandemic Crash",
    crash_type=CrashType.MARKET_CRASH,
    severity=SeverityLevel.SEVERE,
    trigger=TriggerType.HISTORICAL,
    description="Rapid market crash due to COVID-19 pandemic",
    sector_impacts=_sectors(
        Financial=0.40,
        Technology=0.25,
        Industrials=0.42,
        Consumer=0.45,
        Energy=0.55,
        Healthcare=0.20,
    ),
    timeline=CrashTimeline(panic_months=1.0, bottom_months=0.25, total_months=5.0),
    recovery_shape=3.0,
    volatility_multiplier=6.0,
    liquidity_reduction=0.5,
    sentiment_shift=-0.85,
    historical_start=date(2020, 2, 20),
)

# Flash crash: ~35 minutes down, recovered by the next session
FLASH_CRASH_2010 = CrashEvent(
    event_id="flash_crash_2010",
    name="Flash Crash of 2010",
    crash_type=CrashType.FLASH_CRASH,
    severity=SeverityLevel.MODERATE,
    trigger=TriggerType.HISTORICAL,
    description="Rapid algorithmic trading-induced crash and recovery",
    sector_impacts=_sectors(
        Financial=0.10,
        Technology=0.09,
        Industrials=0.08,
        Consumer=0.08,
        Energy=0.09,
    ),
    timeline=CrashTimeline(panic_months=0.0008, bottom_months=0.0, total_months=0.033),
    recovery_shape=4.0,
    volatility_multiplier=10.0,
    liquidity_reduction=0.9,
    sentiment_shift=-0.6,
    historical_start=date(2010, 5, 6),
)


# =============================================================================
# Hypothetical Stress Scenarios
# =============================================================================

TECH_BUBBLE_BURST = CrashEvent(
    event_id="tech_bubble_burst",
    name="Hypothetical Tech Bubble Burst",
    crash_type=CrashType.SECTOR_CRASH,
    severity=SeverityLevel.CATASTROPHIC,
    trigger=TriggerType.CONDITION,
    description="Simulated collapse of overvalued technology sector",
    sector_impacts=_sectors(
        Technology=0.60,
        Financial=0.15,
        Industrials=0.10,
        Consumer=0.08,
        Energy=0.05,
    ),
    timeline=CrashTimeline(panic_months=3.0, bottom_months=3.0, total_months=12.0),
    recovery_shape=1.0,
    volatility_multiplier=4.0,
    liquidity_reduction=0.5,
    sentiment_shift=-0.75,
    trigger_condition=TriggerCondition(
        kind=ConditionType.SECTOR_VALUATION,
        threshold=50.0,
        sector="Technology",
    ),
)

BANKING_CRISIS = CrashEvent(
    event_id="banking_crisis",
    name="Hypothetical Banking Crisis",
    crash_type=CrashType.CONTAGION,
    severity=SeverityLevel.CATASTROPHIC,
    trigger=TriggerType.MANUAL,
    description="Simulated systemic banking failure",
    sector_impacts=_sectors(
        Financial=0.70,
        Technology=0.35,
        Industrials=0.40,
        Consumer=0.42,
        Energy=0.38,
    ),
    timeline=CrashTimeline(panic_months=2.0, bottom_months=4.0, total_months=24.0),
    recovery_shape=1.5,
    volatility_multiplier=5.0,
    liquidity_reduction=0.8,
    sentiment_shift=-0.95,
)

ENERGY_CRISIS = CrashEvent(
    event_id="energy_crisis",
    name="Hypothetical Energy Crisis",
    crash_type=CrashType.SECTOR_CRASH,
    severity=SeverityLevel.SEVERE,
    trigger=TriggerType.MANUAL,
    description="Simulated oil/energy supply shock",
    sector_impacts=_sectors(
        Energy=0.50,
        Industrials=0.25,
        Consumer=0.20,
        Financial=0.12,
        Technology=0.08,
    ),
    timeline=CrashTimeline(panic_months=1.0, bottom_months=1.0, total_months=6.0),
    recovery_shape=1.0,
    volatility_multiplier=3.5,
    liquidity_reduction=0.4,
    sentiment_shift=-0.65,
)

GEOPOLITICAL_SHOCK = CrashEvent(
    event_id="geopolitical_shock",
    name="Hypothetical Geopolitical Shock",
    crash_type=CrashType.MARKET_CRASH,
    severity=SeverityLevel.SEVERE,
    trigger=TriggerType.MANUAL,
    description="Simulated major geopolitical crisis",
    sector_impacts=_sectors(
        Financial=0.32,
        Technology=0.22,
        Industrials=0.30,
        Consumer=0.25,
        Energy=0.35,
    ),
    timeline=CrashTimeline(panic_months=0.25, bottom_months=0.5, total_months=4.0),
    recovery_shape=1.0,
    volatility_multiplier=4.5,
    liquidity_reduction=0.55,
    sentiment_shift=-0.80,
)


# =============================================================================
# Collection and Utilities
# =============================================================================

HISTORICAL_CRASHES: tuple[CrashEvent, ...] = (
    BLACK_MONDAY_1987,
    DOT_COM_CRASH_2000,
    FINANCIAL_CRISIS_2008,
    COVID_CRASH_2020,
    FLASH_CRASH_2010,
)

HYPOTHETICAL_SCENARIOS: tuple[CrashEvent, ...] = (
    TECH_BUBBLE_BURST,
    BANKING_CRISIS,
    ENERGY_CRISIS,
    GEOPOLITICAL_SHOCK,
)

ALL_CRASH_EVENTS: tuple[CrashEvent, ...] = HISTORICAL_CRASHES + HYPOTHETICAL_SCENARIOS

_EVENT_BY_ID: dict[str, CrashEvent] = {e.event_id: e for e in ALL_CRASH_EVENTS}


def find_event(event_id: str) -> Optional[CrashEvent]:
    """Look up an event by id; None when absent."""
    return _EVENT_BY_ID.get(event_id)


def get_event_by_id(event_id: str) -> CrashEvent:
    """
    Retrieve a crash event definition by id.

    Parameters
    ----------
    event_id : str
        Event identifier (e.g., "financial_crisis_2008")

    Returns
    -------
    CrashEvent
        The event definition

    Raises
    ------
    UnknownEventError
        If the id is not in the catalog
    """
    event = _EVENT_BY_ID.get(event_id)
    if event is None:
        valid_ids = ", ".join(sorted(_EVENT_BY_ID.keys()))
        raise UnknownEventError(
            f"Unknown crash event: '{event_id}'. "
            f"Valid ids: {valid_ids}"
        )
    return event


def get_events_by_type(crash_type: CrashType) -> tuple[CrashEvent, ...]:
    """All catalog events of one archetype."""
    return tuple(e for e in ALL_CRASH_EVENTS if e.crash_type is crash_type)


def create_custom_event(
    event_id: str = "custom",
    name: str = "Custom Market Event",
    sector_depths: Optional[dict[str, float]] = None,
    panic_months: float = 0.25,
    bottom_months: float = 0.75,
    total_months: float = 3.0,
    recovery_shape: float = 1.0,
    crash_type: CrashType = CrashType.MARKET_CRASH,
    severity: Optional[SeverityLevel] = None,
    volatility_multiplier: float = 2.5,
    liquidity_reduction: float = 0.3,
    sentiment_shift: float = -0.5,
    trigger_condition: Optional[TriggerCondition] = None,
    description: str = "Custom market crash scenario",
) -> CrashEvent:
    """
    Build a user-defined crash event.

    Defaults describe a moderate, 3-month broad-market correction with a
    15% drawdown in the five core sectors. Severity is classified from the
    deepest sector when not given.

    Examples
    --------
    >>> event = create_custom_event(
    ...     event_id="rate_shock",
    ...     sector_depths={"Financial": 0.30, "Technology": 0.20},
    ...     total_months=12.0,
    ... )
    >>> event.severity
    <SeverityLevel.SEVERE: 'severe'>
    """
    if sector_depths is None:
        sector_depths = {
            "Financial": 0.15,
            "Technology": 0.15,
            "Industrials": 0.15,
            "Consumer": 0.15,
            "Energy": 0.15,
        }
    if not sector_depths:
        raise ValueError(f"Event '{event_id}' affects no sectors")
    impacts = tuple(SectorImpact(sector=s, depth=d) for s, d in sector_depths.items())
    if severity is None:
        severity = classify_severity(max(sector_depths.values()))

    return CrashEvent(
        event_id=event_id,
        name=name,
        crash_type=crash_type,
        severity=severity,
        trigger=TriggerType.CONDITION if trigger_condition else TriggerType.MANUAL,
        description=description,
        sector_impacts=impacts,
        timeline=CrashTimeline(
            panic_months=panic_months,
            bottom_months=bottom_months,
            total_months=total_months,
        ),
        recovery_shape=recovery_shape,
        volatility_multiplier=volatility_multiplier,
        liquidity_reduction=liquidity_reduction,
        sentiment_shift=sentiment_shift,
        trigger_condition=trigger_condition,
    )
