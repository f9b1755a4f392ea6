"""
Pytest configuration and shared fixtures.
"""
import pytest
from datetime import date

from src.models.estimate import PregnancyEstimate
from src.models.fertility import FertilityWindow
from src.services.fertility import estimate_fertility_window
from src.services.pregnancy import estimate_pregnancy

@pytest.fixture
def lmp() -> date:
    """LMP used by most scenarios."""
    return date(2024, 1, 1)

@pytest.fixture
def reference_today() -> date:
    """Fixed "today" so results do not depend on the wall clock."""
    return date(2024, 3, 15)

@pytest.fixture
def sample_estimate(lmp, reference_today) -> PregnancyEstimate:
    """Estimate for LMP 2024-01-01 as of 2024-03-15."""
    return estimate_pregnancy(lmp, as_of=reference_today)

@pytest.fixture
def regular_window(lmp) -> FertilityWindow:
    """28-day cycle with no variability."""
    return estimate_fertility_window(lmp, 28, 0)

@pytest.fixture
def variable_window(lmp) -> FertilityWindow:
    """28-day cycle with 2 days variability."""
    return estimate_fertility_window(lmp, 28, 2)
