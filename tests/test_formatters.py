"""Tests for result text formatting."""
from datetime import date

from src.utils.formatters import (
    format_based_on,
    format_date,
    format_date_short,
    format_estimate_report,
    format_fertility_report,
    format_gestational_age,
    format_milestone,
    format_range
)

def test_format_dates():
    """Test long and short date formats."""
    assert format_date(date(2024, 10, 7)) == "October 7, 2024"
    assert format_date_short(date(2024, 1, 9)) == "January 9"

def test_format_range():
    """Test en-dash ranges and collapsed single-day ranges."""
    assert format_range(date(2024, 1, 9), date(2024, 1, 11)) == "January 9 – January 11"
    assert format_range(date(2024, 1, 9), date(2024, 1, 9)) == "January 9"
    assert format_range(date(2024, 9, 25), date(2024, 10, 19), short=False) == (
        "September 25, 2024 – October 19, 2024"
    )

def test_format_gestational_age():
    """Test plain-language gestational age."""
    assert format_gestational_age(6, 3) == "about 6 weeks and 3 days (approximate)"
    assert format_gestational_age(2, 0) == "about 2 weeks (approximate)"

def test_format_milestones(sample_estimate, lmp):
    """Test each milestone variant renders its window."""
    implantation, heartbeat, ultrasound = [format_milestone(m, lmp) for m in sample_estimate.milestones]
    assert implantation.startswith("Implantation window (approx 3–4 weeks from LMP): January 22, 2024 – January 29, 2024")
    assert heartbeat.startswith("Weeks 5–6: typical first heartbeat detection window")
    assert "February 19, 2024 – March 4, 2024" in ultrasound

def test_format_estimate_report(sample_estimate, lmp):
    """Test the due-date report."""
    report = format_estimate_report(sample_estimate, lmp)
    assert "Estimated due date: October 7, 2024" in report
    assert "about 10 weeks and 4 days (approximate)" in report
    assert "September 25, 2024 – October 19, 2024" in report

def test_format_fertility_report(regular_window, variable_window):
    """Test the fertility report and the based-on summary."""
    assert format_based_on(regular_window) == "28-day cycle"
    assert format_based_on(variable_window) == "28-day cycle, ±2 days variability"

    report = format_fertility_report(variable_window)
    assert "Estimated ovulation: January 14, 2024" in report
    assert "Fertile window: January 7, 2024 – January 17, 2024" in report
    assert "Higher likelihood: January 12 – January 15" in report
    assert "Lower likelihood: January 7 – January 11, January 16 – January 17" in report
