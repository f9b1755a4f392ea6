"""
Tests for fertility window estimation.
"""
import pytest
from datetime import date

from src.models.fertility import FertilityLikelihood
from src.services.exceptions import CycleParameterError
from src.services.fertility import (
    build_cycle_likelihood_map,
    calculate_cycle_days,
    estimate_fertility_window,
    likelihood_segment_ratios,
    lower_likelihood_ranges
)

def test_regular_cycle_days():
    """Test 28-day cycle with no variability."""
    assert calculate_cycle_days(28, 0) == (14, 9, 15, 12, 15)

def test_regular_cycle_dates(regular_window):
    """Test cycle days are converted with lmp + (day - 1)."""
    assert regular_window.ovulation_date == date(2024, 1, 14)
    assert regular_window.fertile_start == date(2024, 1, 9)
    assert regular_window.fertile_end == date(2024, 1, 15)
    assert regular_window.higher_likelihood_start == date(2024, 1, 12)
    assert regular_window.higher_likelihood_end == date(2024, 1, 15)
    assert regular_window.cycle_length == 28
    assert regular_window.variability_days == 0
    assert regular_window.fertile_days == 7

def test_short_cycle_clamps_at_day_one():
    """Test lower-boundary clamping with a 21-day cycle and 7 days variability."""
    ovulation_day, start_day, end_day, higher_start, higher_end = calculate_cycle_days(21, 7)
    assert ovulation_day == 7
    assert start_day == 1
    assert end_day == 15
    assert higher_start == 5
    assert higher_end == 8

def test_long_cycle_with_variability(lmp):
    """Test a 40-day cycle widened by 7 days."""
    window = estimate_fertility_window(lmp, 40, 7)
    assert window.ovulation_day == 26
    assert (window.fertile_start_day, window.fertile_end_day) == (14, 34)
    assert (window.higher_start_day, window.higher_end_day) == (24, 27)
    assert window.fertile_start == date(2024, 1, 14)

@pytest.mark.parametrize("cycle_length", range(21, 41))
@pytest.mark.parametrize("variability", range(0, 8))
def test_window_nesting_for_all_inputs(cycle_length, variability):
    """Test fertile and higher-likelihood windows nest inside the cycle."""
    _, start_day, end_day, higher_start, higher_end = calculate_cycle_days(cycle_length, variability)
    assert 1 <= start_day <= higher_start <= higher_end <= end_day <= cycle_length

def test_window_is_idempotent(lmp):
    """Test identical inputs give identical windows."""
    assert estimate_fertility_window(lmp, 30, 3) == estimate_fertility_window(lmp, 30, 3)

@pytest.mark.parametrize("cycle_length,variability", [
    (20, 0),
    (41, 0),
    (28, -1),
    (28, 8),
    ("28", 0),
    (28.0, 0),
    (True, 0),
])
def test_out_of_range_parameters_rejected(lmp, cycle_length, variability):
    """Test invalid cycle parameters fail fast."""
    with pytest.raises(CycleParameterError):
        estimate_fertility_window(lmp, cycle_length, variability)

def test_likelihood_map_regular_cycle():
    """Test low / moderate / peak levels for a 28-day cycle."""
    day_map = build_cycle_likelihood_map(28)
    assert [d.day for d in day_map] == list(range(1, 29))

    levels = {d.day: d.likelihood for d in day_map}
    assert levels[14] == FertilityLikelihood.PEAK
    assert [day for day, level in levels.items() if level == FertilityLikelihood.PEAK] == [14]
    assert all(levels[day] == FertilityLikelihood.MODERATE for day in (9, 10, 11, 12, 13, 15))
    assert levels[8] == FertilityLikelihood.LOW
    assert levels[16] == FertilityLikelihood.LOW

def test_likelihood_map_follows_variability():
    """Test the moderate band widens with variability."""
    levels = {d.day: d.likelihood for d in build_cycle_likelihood_map(28, 2)}
    assert levels[7] == FertilityLikelihood.MODERATE
    assert levels[17] == FertilityLikelihood.MODERATE
    assert levels[6] == FertilityLikelihood.LOW
    assert levels[18] == FertilityLikelihood.LOW

def test_lower_likelihood_ranges(regular_window, variable_window):
    """Test the parts of the fertile window outside the higher window."""
    assert lower_likelihood_ranges(regular_window) == [
        (date(2024, 1, 9), date(2024, 1, 11))
    ]
    # 28 days, ±2: fertile 7..17, higher 12..15
    assert lower_likelihood_ranges(variable_window) == [
        (date(2024, 1, 7), date(2024, 1, 11)),
        (date(2024, 1, 16), date(2024, 1, 17))
    ]

def test_lower_likelihood_ranges_empty(lmp):
    """Test no lower ranges when the higher window fills the fertile window."""
    window = estimate_fertility_window(lmp, 28, 0)
    trimmed = window.model_copy(update={
        "fertile_start": window.higher_likelihood_start,
        "fertile_start_day": window.higher_start_day
    })
    assert lower_likelihood_ranges(trimmed) == []

def test_segment_ratios(variable_window):
    """Test proportional segments sum to one."""
    segments = likelihood_segment_ratios(variable_window)
    assert segments.lower_before == pytest.approx(5 / 11)
    assert segments.higher == pytest.approx(4 / 11)
    assert segments.lower_after == pytest.approx(2 / 11)
    assert segments.lower_before + segments.higher + segments.lower_after == pytest.approx(1.0)

def test_parameter_error_names_field(lmp):
    """Test CycleParameterError reports which parameter was rejected."""
    with pytest.raises(CycleParameterError) as exc_info:
        estimate_fertility_window(lmp, 45, 0)
    assert exc_info.value.field == "cycle_length"
    with pytest.raises(CycleParameterError) as exc_info:
        estimate_fertility_window(lmp, 28, 9)
    assert exc_info.value.field == "variability"
