"""
Input validation for the calculators.

Each validator returns a (value, error_message) pair; exactly one of the two
is None. Error messages are shown to the user as-is.
"""
from typing import Optional, Tuple
from datetime import date

from src.services.constants import (
    DEFAULT_CYCLE_LENGTH,
    DEFAULT_VARIABILITY,
    MAX_CYCLE_LENGTH,
    MAX_VARIABILITY,
    MESSAGE_CYCLE_LENGTH,
    MESSAGE_INVALID_DATE,
    MESSAGE_PAST_DATE,
    MESSAGE_SELECT_DATE,
    MESSAGE_VARIABILITY,
    MIN_CYCLE_LENGTH,
    MIN_VARIABILITY
)
from src.services.dates import DateLike, parse_iso_date, to_calendar_date, today as current_date
from src.services.exceptions import InvalidDateError

def validate_date(date_str: str) -> Optional[date]:
    """
    Validate and parse date string.

    Args:
        date_str: Date string in YYYY-MM-DD format

    Returns:
        Date if valid, None otherwise
    """
    try:
        return parse_iso_date(date_str)
    except (InvalidDateError, AttributeError):
        return None

def validate_lmp(value: Optional[DateLike], today: Optional[date] = None) -> Tuple[Optional[date], Optional[str]]:
    """
    Validate an LMP date field.

    Args:
        value: Raw field value, or a date already parsed by the caller
        today: Reference date, defaults to the current date

    Returns:
        Tuple of (lmp_date, error_message)
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        return None, MESSAGE_SELECT_DATE

    if isinstance(value, str):
        lmp = validate_date(value)
    elif isinstance(value, date):
        lmp = to_calendar_date(value)
    else:
        lmp = None
    if lmp is None:
        return None, MESSAGE_INVALID_DATE

    today = to_calendar_date(today) if today is not None else current_date()
    if lmp > today:
        return None, MESSAGE_PAST_DATE

    return lmp, None

def _parse_int(value) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip())
    except ValueError:
        return None

def validate_cycle_length(value) -> Tuple[Optional[int], Optional[str]]:
    """
    Validate cycle length; blank means the default 28 days.

    Returns:
        Tuple of (cycle_length, error_message)
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        return DEFAULT_CYCLE_LENGTH, None
    cycle_length = _parse_int(value)
    if cycle_length is None or not MIN_CYCLE_LENGTH <= cycle_length <= MAX_CYCLE_LENGTH:
        return None, MESSAGE_CYCLE_LENGTH
    return cycle_length, None

def validate_variability(value) -> Tuple[Optional[int], Optional[str]]:
    """
    Validate cycle variability; blank means the default 2 days.

    Returns:
        Tuple of (variability, error_message)
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        return DEFAULT_VARIABILITY, None
    variability = _parse_int(value)
    if variability is None or not MIN_VARIABILITY <= variability <= MAX_VARIABILITY:
        return None, MESSAGE_VARIABILITY
    return variability, None
