"""
Calendar-aware time utilities shared by the crash and crypto engines.
"""

from .elapsed import (
    DateLike,
    ElapsedTime,
    add_fractional_months,
    add_months,
    calendar_difference,
    days_between,
    elapsed_months,
    to_date,
    to_datetime,
)

__all__ = [
    "DateLike",
    "ElapsedTime",
    "add_fractional_months",
    "add_months",
    "calendar_difference",
    "days_between",
    "elapsed_months",
    "to_date",
    "to_datetime",
]
