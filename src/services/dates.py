"""
Calendar-day arithmetic.

Every value entering this module is normalized to a plain ``date`` before any
arithmetic. A ``datetime`` loses its time of day, so an LMP date and "today"
can never disagree about a day boundary because of a timezone offset or a
daylight-saving transition at midnight.

Typical usage:
    lmp = to_calendar_date("2024-01-01")
    due = add_days(lmp, 280)
    elapsed = days_between(lmp, today())
"""
from typing import Union
from datetime import date, datetime, timedelta

from src.services.exceptions import InvalidDateError

DateLike = Union[date, datetime, str]

def parse_iso_date(value: str) -> date:
    """
    Parse a ``YYYY-MM-DD`` string.

    Args:
        value: Date string as produced by a date input field

    Returns:
        Parsed calendar date

    Raises:
        InvalidDateError: If the string is not a real calendar date
    """
    try:
        return datetime.strptime(value.strip(), "%Y-%m-%d").date()
    except ValueError as e:
        raise InvalidDateError(f"Not a valid date: {value!r}") from e

def to_calendar_date(value: DateLike) -> date:
    """
    Normalize a date-like value to a calendar date with no time component.

    Args:
        value: ``date``, ``datetime`` (time of day is dropped) or ISO string

    Returns:
        Plain ``date``

    Raises:
        InvalidDateError: If the value is not date-like

    Example:
        >>> to_calendar_date(datetime(2024, 3, 10, 23, 30))
        datetime.date(2024, 3, 10)
    """
    # datetime subclasses date, so it has to be checked first
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        return parse_iso_date(value)
    raise InvalidDateError(f"Expected a date, got {type(value).__name__}")

def today() -> date:
    """Current local calendar date."""
    return date.today()

def add_days(value: DateLike, days: int) -> date:
    """
    Return a new date offset by a signed number of days.

    Args:
        value: Starting date
        days: Number of days to add, may be negative

    Returns:
        Offset date; month and year rollover are handled by ``timedelta``
    """
    if isinstance(days, bool) or not isinstance(days, int):
        raise InvalidDateError(f"Day offset must be an integer, got {days!r}")
    start = to_calendar_date(value)
    try:
        return start + timedelta(days=days)
    except OverflowError as e:
        raise InvalidDateError(f"Date out of range: {start.isoformat()} + {days} days") from e

def days_between(start: DateLike, end: DateLike) -> int:
    """
    Whole days from ``start`` to ``end``; negative if ``end`` is earlier.

    Example:
        >>> days_between(date(2024, 1, 1), date(2024, 1, 15))
        14
    """
    return (to_calendar_date(end) - to_calendar_date(start)).days
