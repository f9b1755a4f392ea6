"""
Fertility window models.
"""
from enum import Enum
from datetime import date
from pydantic import BaseModel, ConfigDict, Field, model_validator

class FertilityLikelihood(str, Enum):
    """
    Qualitative likelihood level for a cycle day.

    Used only for visualization; these are not probabilities.
    """
    LOW = "low"
    MODERATE = "moderate"  # Within the fertile window
    PEAK = "peak"          # Estimated ovulation day

class FertilityWindow(BaseModel):
    """
    Estimated ovulation date and fertile window for one cycle.

    Day numbers are 1-indexed cycle days, day 1 being the LMP.
    """
    model_config = ConfigDict(frozen=True)

    ovulation_date: date
    fertile_start: date
    fertile_end: date
    higher_likelihood_start: date
    higher_likelihood_end: date
    cycle_length: int = Field(..., ge=1)
    variability_days: int = Field(..., ge=0)
    ovulation_day: int
    fertile_start_day: int = Field(..., ge=1)
    fertile_end_day: int = Field(..., ge=1)
    higher_start_day: int = Field(..., ge=1)
    higher_end_day: int = Field(..., ge=1)

    @model_validator(mode="after")
    def check_nesting(self) -> "FertilityWindow":
        if not (
            self.fertile_start_day
            <= self.higher_start_day
            <= self.higher_end_day
            <= self.fertile_end_day
            <= self.cycle_length
        ):
            raise ValueError("Higher-likelihood window must lie inside the fertile window")
        return self

    @property
    def fertile_days(self) -> int:
        """Number of days in the fertile window, inclusive."""
        return self.fertile_end_day - self.fertile_start_day + 1

class CycleDayLikelihood(BaseModel):
    """Likelihood level of a single cycle day."""
    model_config = ConfigDict(frozen=True)

    day: int = Field(..., ge=1)
    likelihood: FertilityLikelihood

class LikelihoodSegments(BaseModel):
    """
    Proportions of the fertile window before, inside and after the
    higher-likelihood sub-window. The three ratios sum to 1.
    """
    model_config = ConfigDict(frozen=True)

    lower_before: float = Field(..., ge=0, le=1)
    higher: float = Field(..., ge=0, le=1)
    lower_after: float = Field(..., ge=0, le=1)
