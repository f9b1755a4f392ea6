"""
Pregnancy estimate models: gestational age, milestones and the full estimate.
"""
from datetime import date
from typing import Annotated, Literal, Tuple, Union
from pydantic import BaseModel, ConfigDict, Field, model_validator

class GestationalAge(BaseModel):
    """
    Elapsed time since LMP in whole weeks and remainder days.
    """
    model_config = ConfigDict(frozen=True)

    weeks: int = Field(..., ge=0)
    days: int = Field(..., ge=0, le=6)

    @property
    def total_days(self) -> int:
        return self.weeks * 7 + self.days

class DateRangeMilestone(BaseModel):
    """
    Milestone tied to concrete dates (inclusive range).
    """
    model_config = ConfigDict(frozen=True)

    kind: Literal["date_range"] = "date_range"
    key: str
    start_date: date
    end_date: date
    label: str

    @model_validator(mode="after")
    def check_order(self) -> "DateRangeMilestone":
        if self.start_date > self.end_date:
            raise ValueError("Milestone start_date must not be after end_date")
        return self

class WeekRangeMilestone(BaseModel):
    """
    Milestone expressed as gestational weeks; callers map weeks to dates.
    """
    model_config = ConfigDict(frozen=True)

    kind: Literal["week_range"] = "week_range"
    key: str
    week_start: int = Field(..., ge=0)
    week_end: int = Field(..., ge=0)
    label: str

    @model_validator(mode="after")
    def check_order(self) -> "WeekRangeMilestone":
        if self.week_start > self.week_end:
            raise ValueError("Milestone week_start must not be after week_end")
        return self

Milestone = Annotated[
    Union[DateRangeMilestone, WeekRangeMilestone],
    Field(discriminator="kind")
]

class PregnancyEstimate(BaseModel):
    """
    Result of a due-date calculation.

    Built fresh for every calculation and replaced wholesale on the next one.
    """
    model_config = ConfigDict(frozen=True)

    due_date: date
    gestational_weeks: int = Field(..., ge=0)
    gestational_days: int = Field(..., ge=0, le=6)
    confidence_early: date
    confidence_late: date
    milestones: Tuple[Milestone, ...]

    @model_validator(mode="after")
    def check_confidence_window(self) -> "PregnancyEstimate":
        if not self.confidence_early < self.due_date < self.confidence_late:
            raise ValueError("Confidence window must surround the due date")
        return self

    @property
    def gestational_age(self) -> GestationalAge:
        return GestationalAge(weeks=self.gestational_weeks, days=self.gestational_days)
