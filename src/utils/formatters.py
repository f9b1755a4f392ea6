"""
Text formatting for calculator results.
"""
from typing import List
from datetime import date

from src.models.estimate import DateRangeMilestone, Milestone, PregnancyEstimate
from src.models.fertility import FertilityWindow
from src.services.constants import MESSAGE_UNEXPECTED
from src.services.fertility import lower_likelihood_ranges
from src.services.pregnancy import week_start_date

MONTH_NAMES = [
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December"
]

RANGE_SEPARATOR = " – "

def format_error_message(error: Exception) -> str:
    """Format error message for user display."""
    return MESSAGE_UNEXPECTED

def format_date(value: date) -> str:
    """Long date, e.g. "January 1, 2024"."""
    return f"{MONTH_NAMES[value.month - 1]} {value.day}, {value.year}"

def format_date_short(value: date) -> str:
    """Month and day only, e.g. "January 1"."""
    return f"{MONTH_NAMES[value.month - 1]} {value.day}"

def format_range(start: date, end: date, short: bool = True) -> str:
    """Date range joined with an en dash; a single date when start == end."""
    fmt = format_date_short if short else format_date
    if start == end:
        return fmt(start)
    return fmt(start) + RANGE_SEPARATOR + fmt(end)

def format_gestational_age(weeks: int, days: int) -> str:
    """
    Plain-language gestational age. Never clinical shorthand like 6w3d.

    Example:
        >>> format_gestational_age(6, 3)
        'about 6 weeks and 3 days (approximate)'
    """
    if days > 0:
        return f"about {weeks} weeks and {days} days (approximate)"
    return f"about {weeks} weeks (approximate)"

def format_milestone(milestone: Milestone, lmp: date) -> str:
    """
    One milestone line; week ranges are placed on the calendar from LMP.
    """
    if isinstance(milestone, DateRangeMilestone):
        window = format_range(milestone.start_date, milestone.end_date, short=False)
        return f"Implantation window (approx 3–4 weeks from LMP): {window}\n{milestone.label}"

    if milestone.key == "heartbeat":
        heading = f"Weeks {milestone.week_start}–{milestone.week_end}: typical first heartbeat detection window"
        return f"{heading}\n{milestone.label}"

    window = format_range(
        week_start_date(lmp, milestone.week_start),
        week_start_date(lmp, milestone.week_end),
        short=False
    )
    heading = f"First ultrasound window (weeks {milestone.week_start}–{milestone.week_end}): {window}"
    return f"{heading}\n{milestone.label}"

def format_estimate_report(estimate: PregnancyEstimate, lmp: date) -> str:
    """Full due-date report."""
    lines: List[str] = [
        f"Estimated due date: {format_date(estimate.due_date)}",
        f"Current week: {format_gestational_age(estimate.gestational_weeks, estimate.gestational_days)}",
        f"Estimated due window: {format_range(estimate.confidence_early, estimate.confidence_late, short=False)}",
        "",
        "Milestones:"
    ]
    for milestone in estimate.milestones:
        lines.append(format_milestone(milestone, lmp))
    return "\n".join(lines)

def format_based_on(window: FertilityWindow) -> str:
    """
    Example:
        >>> format_based_on(window)  # 28-day cycle, variability 2
        '28-day cycle, ±2 days variability'
    """
    based = f"{window.cycle_length}-day cycle"
    if window.variability_days > 0:
        based += f", ±{window.variability_days} days variability"
    return based

def format_fertility_report(window: FertilityWindow) -> str:
    """Full fertility window report."""
    lower = lower_likelihood_ranges(window)
    lower_text = ", ".join(format_range(start, end) for start, end in lower) if lower else "—"
    return "\n".join([
        f"Estimated ovulation: {format_date(window.ovulation_date)}",
        f"Fertile window: {format_range(window.fertile_start, window.fertile_end, short=False)}",
        f"Higher likelihood: {format_range(window.higher_likelihood_start, window.higher_likelihood_end)}",
        f"Lower likelihood: {lower_text}",
        f"Based on: {format_based_on(window)}"
    ])
