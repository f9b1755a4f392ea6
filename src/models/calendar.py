"""
Calendar export models.
"""
from datetime import date, timedelta
from typing import Tuple
from pydantic import BaseModel, ConfigDict, Field, model_validator

class CalendarEvent(BaseModel):
    """
    An all-day calendar event. ``end_date`` is exclusive (start + 1 day).
    """
    model_config = ConfigDict(frozen=True)

    uid: str = Field(..., min_length=1)
    start_date: date
    end_date: date
    summary: str
    description: str

    @model_validator(mode="after")
    def check_all_day(self) -> "CalendarEvent":
        if self.end_date != self.start_date + timedelta(days=1):
            raise ValueError("All-day event must end exactly one day after it starts")
        return self

class CalendarDocument(BaseModel):
    """Ordered events plus the fixed document header fields."""
    model_config = ConfigDict(frozen=True)

    prodid: str
    dtstamp: str
    events: Tuple[CalendarEvent, ...]
