"""
Calendar-aware elapsed time.

Both engines measure time in calendar months. Month lengths differ
(28-31 days), so "one month after Jan 31" and "how many months from
Jan 31 to Feb 29" must be answered by the same rule or the phase
boundaries drift. This module is that single rule:

- ``add_months`` steps whole calendar months, clamping the day of month
  to the target month's length and always counting from the original
  anchor (never chaining), so Jan 31 + 2 months is Mar 31, not Mar 29.
- ``elapsed_months`` inverts ``add_months`` exactly for whole months and
  interpolates linearly in time inside the month that is in progress.

All functions accept ``date``, ``datetime`` or ISO-8601 strings.
"""

import calendar
import math
from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Union

DateLike = Union[date, datetime, str]

SECONDS_PER_DAY = 86_400.0


@dataclass(frozen=True)
class ElapsedTime:
    """
    Exact calendar decomposition of an interval.

    Attributes
    ----------
    years : int
        Whole years
    months : int
        Whole months beyond ``years`` (0-11)
    days : int
        Whole days beyond the last whole month
    seconds : float
        Seconds beyond ``days``
    """

    years: int
    months: int
    days: int
    seconds: float = 0.0

    @property
    def total_months(self) -> int:
        """Whole calendar months in the interval."""
        return self.years * 12 + self.months


def to_datetime(value: DateLike) -> datetime:
    """
    Normalize a date-like value to a naive ``datetime``.

    Timezone-aware datetimes are converted to UTC and made naive; bare
    dates become midnight. ISO strings may end in "Z" for UTC.

    Raises
    ------
    TypeError
        If the value is not a date, datetime or string
    ValueError
        If a string is not valid ISO-8601
    """
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            return value.astimezone(timezone.utc).replace(tzinfo=None)
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if isinstance(value, str):
        if value.endswith(("Z", "z")):
            value = value[:-1] + "+00:00"
        return to_datetime(datetime.fromisoformat(value))
    raise TypeError(f"Expected date, datetime or ISO string, got {type(value).__name__}")


def to_date(value: DateLike) -> date:
    """Normalize a date-like value to a ``date`` (time of day dropped)."""
    return to_datetime(value).date()


def add_months(value: DateLike, months: int) -> datetime:
    """
    Add whole calendar months, clamping the day to the target month.

    Parameters
    ----------
    value : DateLike
        Anchor instant
    months : int
        Months to add (may be negative)

    Returns
    -------
    datetime
        Anchor shifted by ``months``; time of day is preserved

    Examples
    --------
    >>> add_months(date(2008, 1, 31), 1)
    datetime.datetime(2008, 2, 29, 0, 0)
    >>> add_months(date(2008, 1, 31), 2)
    datetime.datetime(2008, 3, 31, 0, 0)
    """
    if isinstance(months, float):
        if not months.is_integer():
            raise ValueError(f"add_months needs whole months, got {months}")
        months = int(months)

    anchor = to_datetime(value)
    total = anchor.year * 12 + (anchor.month - 1) + months
    year, month_index = divmod(total, 12)
    month = month_index + 1
    day = min(anchor.day, calendar.monthrange(year, month)[1])
    return anchor.replace(year=year, month=month, day=day)


def add_fractional_months(value: DateLike, months: float) -> datetime:
    """
    Add a possibly fractional number of calendar months.

    The whole part is added with ``add_months``; the fraction is placed
    linearly inside the following calendar month. This is the inverse of
    ``elapsed_months`` up to microsecond rounding.
    """
    anchor = to_datetime(value)
    whole = math.floor(months)
    frac = months - whole
    lower = add_months(anchor, whole)
    if frac == 0:
        return lower
    upper = add_months(anchor, whole + 1)
    return lower + (upper - lower) * frac


def _whole_months(start: datetime, end: datetime) -> int:
    """Largest n >= 0 with add_months(start, n) <= end (requires end >= start)."""
    n = (end.year - start.year) * 12 + (end.month - start.month)
    if add_months(start, n) > end:
        n -= 1
    return n


def elapsed_months(start: DateLike, end: DateLike) -> float:
    """
    Elapsed calendar months from ``start`` to ``end``.

    Parameters
    ----------
    start : DateLike
        Interval start
    end : DateLike
        Interval end

    Returns
    -------
    float
        Whole months plus the fraction of the month in progress. Negative
        when ``end`` precedes ``start``.

    Examples
    --------
    >>> elapsed_months("2008-09-15", "2009-03-15")
    6.0
    >>> elapsed_months("2008-01-31", "2008-02-29")
    1.0
    """
    s = to_datetime(start)
    e = to_datetime(end)
    if e < s:
        return -elapsed_months(e, s)

    n = _whole_months(s, e)
    lower = add_months(s, n)
    if e == lower:
        return float(n)
    upper = add_months(s, n + 1)
    return n + (e - lower) / (upper - lower)


def calendar_difference(start: DateLike, end: DateLike) -> ElapsedTime:
    """
    Decompose an interval into years, months, days and seconds.

    Raises
    ------
    ValueError
        If ``end`` precedes ``start``

    Examples
    --------
    >>> calendar_difference("2000-03-10", "2015-03-10")
    ElapsedTime(years=15, months=0, days=0, seconds=0.0)
    """
    s = to_datetime(start)
    e = to_datetime(end)
    if e < s:
        raise ValueError(f"End {e.isoformat()} precedes start {s.isoformat()}")

    n = _whole_months(s, e)
    remainder = e - add_months(s, n)
    years, months = divmod(n, 12)
    seconds = remainder.seconds + remainder.microseconds / 1e6
    return ElapsedTime(years=years, months=months, days=remainder.days, seconds=seconds)


def days_between(start: DateLike, end: DateLike) -> float:
    """Elapsed days (fractional, negative if ``end`` precedes ``start``)."""
    return (to_datetime(end) - to_datetime(start)).total_seconds() / SECONDS_PER_DAY
