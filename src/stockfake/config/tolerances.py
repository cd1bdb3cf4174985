"""
Centralized tolerance framework for the simulation core.

Tolerance Tiers:
    Tier 1 (Exact): calendar arithmetic and pass-through pricing
    Tier 2 (Continuity): curve values on either side of a phase boundary
    Tier 3 (Calibration): "at or near" checks against historical targets
"""

from typing import Final

# =============================================================================
# Tier 1: Exact Tolerances
# =============================================================================

#: Elapsed-month arithmetic: add_months followed by elapsed_months
#: must round-trip to the integer month count.
CALENDAR_TOLERANCE: Final[float] = 1e-12

#: Fee and staking arithmetic on plain float products
ARITHMETIC_TOLERANCE: Final[float] = 1e-12


# =============================================================================
# Tier 2: Continuity Tolerances
# =============================================================================

#: Multiplier jump allowed across a phase boundary when probed one
#: second before and at the boundary instant.
CONTINUITY_TOLERANCE: Final[float] = 1e-4


# =============================================================================
# Tier 3: Calibration Tolerances
# =============================================================================

#: "Back at or near" base price after full recovery (relative)
RECOVERY_TOLERANCE: Final[float] = 0.05

#: Minimum trough depth counted as "materially below" the base price
MATERIAL_DROP: Final[float] = 0.20


# =============================================================================
# Tolerance Registry (For Dynamic Access)
# =============================================================================

TOLERANCE_REGISTRY: dict[str, float] = {
    "calendar": CALENDAR_TOLERANCE,
    "arithmetic": ARITHMETIC_TOLERANCE,
    "continuity": CONTINUITY_TOLERANCE,
    "recovery": RECOVERY_TOLERANCE,
    "material_drop": MATERIAL_DROP,
}


def get_tolerance(name: str) -> float:
    """
    Get tolerance by name from registry.

    Parameters
    ----------
    name : str
        Tolerance name (see TOLERANCE_REGISTRY keys)

    Returns
    -------
    float
        Tolerance value

    Raises
    ------
    KeyError
        If tolerance name not found
    """
    if name not in TOLERANCE_REGISTRY:
        available = ", ".join(sorted(TOLERANCE_REGISTRY.keys()))
        raise KeyError(f"Unknown tolerance '{name}'. Available: {available}")
    return TOLERANCE_REGISTRY[name]
