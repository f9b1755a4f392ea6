"""
Service module for fertility window estimation.

Ovulation is assumed to fall a fixed luteal phase (14 days) before the next
period. The fertile window spans the five days before ovulation plus the day
after, widened on both sides by the cycle variability and clamped to the
modeled cycle. Cycle days are 1-indexed with day 1 being the LMP.

Typical usage:
    window = estimate_fertility_window(lmp, cycle_length=28, variability=2)
    day_map = build_cycle_likelihood_map(window.cycle_length, window.variability_days)
"""
from typing import List, Tuple
from datetime import date

from aws_lambda_powertools import Logger

from src.models.fertility import (
    CycleDayLikelihood,
    FertilityLikelihood,
    FertilityWindow,
    LikelihoodSegments
)
from src.services.constants import (
    DAYS_AFTER_OVULATION,
    DAYS_BEFORE_OVULATION,
    DEFAULT_CYCLE_LENGTH,
    HIGHER_LIKELIHOOD_DAYS_BEFORE,
    LUTEAL_PHASE_DAYS,
    MAX_CYCLE_LENGTH,
    MAX_VARIABILITY,
    MIN_CYCLE_LENGTH,
    MIN_VARIABILITY
)
from src.services.dates import DateLike, add_days, to_calendar_date
from src.services.exceptions import CycleParameterError

logger = Logger()

def _check_int_range(name: str, value: int, low: int, high: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise CycleParameterError(f"{name} must be an integer, got {value!r}", field=name)
    if not low <= value <= high:
        raise CycleParameterError(f"{name} must be between {low} and {high}, got {value}", field=name)

def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(high, value))

def calculate_cycle_days(cycle_length: int, variability: int = 0) -> Tuple[int, int, int, int, int]:
    """
    Cycle-day numbers of the fertile window.

    Args:
        cycle_length: Cycle length in days (21-40)
        variability: Extra days of uncertainty either side (0-7)

    Returns:
        Tuple of (ovulation_day, fertile_start_day, fertile_end_day,
        higher_start_day, higher_end_day)

    Raises:
        CycleParameterError: If either argument is out of range

    Example:
        >>> calculate_cycle_days(28, 0)
        (14, 9, 15, 12, 15)
    """
    _check_int_range("cycle_length", cycle_length, MIN_CYCLE_LENGTH, MAX_CYCLE_LENGTH)
    _check_int_range("variability", variability, MIN_VARIABILITY, MAX_VARIABILITY)

    ovulation_day = cycle_length - LUTEAL_PHASE_DAYS
    fertile_start_day = _clamp(ovulation_day - DAYS_BEFORE_OVULATION - variability, 1, cycle_length)
    fertile_end_day = _clamp(ovulation_day + DAYS_AFTER_OVULATION + variability, 1, cycle_length)
    higher_start_day = max(fertile_start_day, ovulation_day - HIGHER_LIKELIHOOD_DAYS_BEFORE)
    higher_end_day = min(fertile_end_day, ovulation_day + DAYS_AFTER_OVULATION)

    return ovulation_day, fertile_start_day, fertile_end_day, higher_start_day, higher_end_day

def cycle_day_to_date(lmp: DateLike, day: int) -> date:
    """Date of 1-indexed cycle day ``day``."""
    return add_days(lmp, day - 1)

def estimate_fertility_window(lmp: DateLike, cycle_length: int, variability: int) -> FertilityWindow:
    """
    Estimate ovulation and the fertile window for the cycle starting at LMP.

    Args:
        lmp: First day of the last period
        cycle_length: Usual cycle length in days (21-40)
        variability: How many days the cycle usually varies (0-7)

    Returns:
        FertilityWindow with both dates and cycle-day numbers

    Raises:
        InvalidDateError: If lmp is not a date
        CycleParameterError: If cycle_length or variability is out of range
    """
    lmp = to_calendar_date(lmp)
    ovulation_day, start_day, end_day, higher_start, higher_end = calculate_cycle_days(
        cycle_length, variability
    )

    logger.debug("Fertility window calculated", extra={
        "cycle_length": cycle_length,
        "variability": variability,
        "fertile_days": end_day - start_day + 1
    })

    return FertilityWindow(
        ovulation_date=cycle_day_to_date(lmp, ovulation_day),
        fertile_start=cycle_day_to_date(lmp, start_day),
        fertile_end=cycle_day_to_date(lmp, end_day),
        higher_likelihood_start=cycle_day_to_date(lmp, higher_start),
        higher_likelihood_end=cycle_day_to_date(lmp, higher_end),
        cycle_length=cycle_length,
        variability_days=variability,
        ovulation_day=ovulation_day,
        fertile_start_day=start_day,
        fertile_end_day=end_day,
        higher_start_day=higher_start,
        higher_end_day=higher_end
    )

def build_cycle_likelihood_map(
    cycle_length: int = DEFAULT_CYCLE_LENGTH,
    variability: int = 0
) -> List[CycleDayLikelihood]:
    """
    Qualitative likelihood for every day of the cycle.

    Days in the fertile window are ``moderate``, the ovulation day alone is
    ``peak`` and everything else is ``low``. These levels drive a visual cycle
    bar and are not probabilities.

    Example:
        >>> [d.likelihood.value for d in build_cycle_likelihood_map(28)][8:15]
        ['moderate', 'moderate', 'moderate', 'moderate', 'moderate', 'peak', 'moderate']
    """
    ovulation_day, start_day, end_day, _, _ = calculate_cycle_days(cycle_length, variability)

    days = []
    for day in range(1, cycle_length + 1):
        if day == ovulation_day:
            likelihood = FertilityLikelihood.PEAK
        elif start_day <= day <= end_day:
            likelihood = FertilityLikelihood.MODERATE
        else:
            likelihood = FertilityLikelihood.LOW
        days.append(CycleDayLikelihood(day=day, likelihood=likelihood))
    return days

def lower_likelihood_ranges(window: FertilityWindow) -> List[Tuple[date, date]]:
    """
    Parts of the fertile window outside the higher-likelihood sub-window.

    Returns:
        Zero, one or two inclusive (start, end) date ranges, in order
    """
    ranges = []
    if window.fertile_start_day < window.higher_start_day:
        before_end = add_days(window.fertile_start, window.higher_start_day - window.fertile_start_day - 1)
        ranges.append((window.fertile_start, before_end))
    if window.higher_end_day < window.fertile_end_day:
        ranges.append((add_days(window.higher_likelihood_end, 1), window.fertile_end))
    return ranges

def likelihood_segment_ratios(window: FertilityWindow) -> LikelihoodSegments:
    """
    Share of the fertile window taken by each segment, for a proportional bar.
    """
    total = window.fertile_days
    before = window.higher_start_day - window.fertile_start_day
    higher = window.higher_end_day - window.higher_start_day + 1
    after = window.fertile_end_day - window.higher_end_day
    return LikelihoodSegments(
        lower_before=before / total,
        higher=higher / total,
        lower_after=after / total
    )
