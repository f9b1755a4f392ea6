"""
Service module for due-date and gestational-age estimation.

All functions are pure: the only time-dependent input is the explicit
``as_of`` date, which defaults to today when omitted.

Typical usage:
    estimate = estimate_pregnancy(lmp, as_of=today())
    print(estimate.due_date, estimate.gestational_weeks)
"""
from typing import Optional, Tuple
from datetime import date

from aws_lambda_powertools import Logger

from src.models.estimate import (
    DateRangeMilestone,
    GestationalAge,
    Milestone,
    PregnancyEstimate,
    WeekRangeMilestone
)
from src.services.constants import (
    CONFIDENCE_DAYS,
    DAYS_IN_GESTATION,
    DAYS_IN_WEEK,
    HEARTBEAT_WEEKS,
    IMPLANTATION_END_DAYS,
    IMPLANTATION_START_DAYS,
    MILESTONE_LABELS,
    ULTRASOUND_WEEKS
)
from src.services.dates import DateLike, add_days, days_between, to_calendar_date, today
from src.services.exceptions import EstimationError, FutureDateError

logger = Logger()

def estimate_due_date(lmp: DateLike) -> date:
    """
    Estimate the due date using the 280-day rule.

    Example:
        >>> estimate_due_date(date(2024, 1, 1))
        datetime.date(2024, 10, 7)
    """
    return add_days(lmp, DAYS_IN_GESTATION)

def estimate_gestational_age(lmp: DateLike, as_of: Optional[DateLike] = None) -> GestationalAge:
    """
    Gestational age in weeks and remainder days.

    Elapsed days are clamped at 0, so an LMP equal to (or after) ``as_of``
    yields 0 weeks 0 days.

    Args:
        lmp: First day of last menstrual period
        as_of: Reference date, defaults to today

    Returns:
        GestationalAge with ``days`` in [0, 6]
    """
    if as_of is None:
        as_of = today()
    elapsed = max(0, days_between(lmp, as_of))
    return GestationalAge(weeks=elapsed // DAYS_IN_WEEK, days=elapsed % DAYS_IN_WEEK)

def estimate_gestational_week(lmp: DateLike, as_of: Optional[DateLike] = None) -> int:
    """Whole gestational weeks only."""
    return estimate_gestational_age(lmp, as_of).weeks

def confidence_window(due_date: DateLike, spread_days: int = CONFIDENCE_DAYS) -> Tuple[date, date]:
    """
    Symmetric uncertainty band around the due date.

    Args:
        due_date: Estimated due date
        spread_days: Days either side, must be positive

    Returns:
        Tuple of (earliest, latest)

    Raises:
        EstimationError: If spread_days is not positive
    """
    if spread_days <= 0:
        raise EstimationError(f"Confidence spread must be positive, got {spread_days}")
    return add_days(due_date, -spread_days), add_days(due_date, spread_days)

def build_milestones(lmp: DateLike) -> Tuple[Milestone, ...]:
    """
    Early pregnancy milestones, in order.

    Only the implantation window is tied to dates here; heartbeat and
    ultrasound windows stay as week ranges for the caller to place.
    """
    heartbeat_start, heartbeat_end = HEARTBEAT_WEEKS
    ultrasound_start, ultrasound_end = ULTRASOUND_WEEKS
    return (
        DateRangeMilestone(
            key="implantation",
            start_date=add_days(lmp, IMPLANTATION_START_DAYS),
            end_date=add_days(lmp, IMPLANTATION_END_DAYS),
            label=MILESTONE_LABELS["implantation"]
        ),
        WeekRangeMilestone(
            key="heartbeat",
            week_start=heartbeat_start,
            week_end=heartbeat_end,
            label=MILESTONE_LABELS["heartbeat"]
        ),
        WeekRangeMilestone(
            key="ultrasound",
            week_start=ultrasound_start,
            week_end=ultrasound_end,
            label=MILESTONE_LABELS["ultrasound"]
        )
    )

def week_start_date(lmp: DateLike, week: int) -> date:
    """
    First day of gestational week ``week`` counted from LMP.

    Example:
        >>> week_start_date(date(2024, 1, 1), 7)
        datetime.date(2024, 2, 19)
    """
    return add_days(lmp, week * DAYS_IN_WEEK)

def estimate_pregnancy(lmp: DateLike, as_of: Optional[DateLike] = None) -> PregnancyEstimate:
    """
    Build the full estimate for an LMP date.

    Args:
        lmp: First day of last menstrual period
        as_of: Reference date ("today"), defaults to the current date

    Returns:
        PregnancyEstimate

    Raises:
        InvalidDateError: If lmp or as_of is not a date
        FutureDateError: If lmp is later than as_of
    """
    lmp = to_calendar_date(lmp)
    as_of = to_calendar_date(as_of) if as_of is not None else today()
    if lmp > as_of:
        raise FutureDateError("LMP date must not be later than the reference date")

    due_date = estimate_due_date(lmp)
    age = estimate_gestational_age(lmp, as_of)
    early, late = confidence_window(due_date)

    logger.debug("Pregnancy estimate calculated", extra={
        "gestational_weeks": age.weeks,
        "gestational_days": age.days
    })

    return PregnancyEstimate(
        due_date=due_date,
        gestational_weeks=age.weeks,
        gestational_days=age.days,
        confidence_early=early,
        confidence_late=late,
        milestones=build_milestones(lmp)
    )
