"""
iCalendar export of an estimate.

The document holds three all-day events: the due date and the start and end
of the early ultrasound window. UIDs and DTSTAMP are fixed constants since one
document is produced per calculation and documents are never merged; two
exports of the same estimate are byte-identical.

Typical usage:
    text = build_estimate_calendar(estimate, lmp)
    write_calendar_file(text, output_dir / ICS_FILENAME)
"""
from typing import List, Union
from datetime import date
from pathlib import Path

from aws_lambda_powertools import Logger

from src.models.calendar import CalendarDocument, CalendarEvent
from src.models.estimate import PregnancyEstimate
from src.services.constants import (
    CALENDAR_EVENTS,
    ICS_DESCRIPTION,
    ICS_DTSTAMP,
    ICS_LINE_ENDING,
    ICS_PRODID,
    ULTRASOUND_END_OFFSET_DAYS,
    ULTRASOUND_START_OFFSET_DAYS
)
from src.services.dates import DateLike, add_days, to_calendar_date
from src.services.exceptions import CalendarExportError

logger = Logger()

def format_ics_date(value: DateLike) -> str:
    """Format a date as ``YYYYMMDD``."""
    return to_calendar_date(value).strftime("%Y%m%d")

def _all_day_event(key: str, start: date) -> CalendarEvent:
    details = CALENDAR_EVENTS[key]
    return CalendarEvent(
        uid=details["uid"],
        start_date=start,
        end_date=add_days(start, 1),
        summary=details["summary"],
        description=ICS_DESCRIPTION
    )

def build_calendar_events(
    due_date: DateLike,
    ultrasound_window_start: DateLike,
    ultrasound_window_end: DateLike
) -> CalendarDocument:
    """
    Build the calendar document model.

    Args:
        due_date: Estimated due date
        ultrasound_window_start: First day of the early ultrasound window
        ultrasound_window_end: Last day of the early ultrasound window

    Returns:
        CalendarDocument with three events in fixed order
    """
    return CalendarDocument(
        prodid=ICS_PRODID,
        dtstamp=ICS_DTSTAMP,
        events=(
            _all_day_event("due_date", to_calendar_date(due_date)),
            _all_day_event("ultrasound_start", to_calendar_date(ultrasound_window_start)),
            _all_day_event("ultrasound_end", to_calendar_date(ultrasound_window_end))
        )
    )

def _escape_text(value: str) -> str:
    # RFC 5545 TEXT escaping
    return (
        value.replace("\\", "\\\\")
        .replace(";", "\\;")
        .replace(",", "\\,")
        .replace("\n", "\\n")
    )

def render_calendar(document: CalendarDocument) -> str:
    """
    Serialize a calendar document to iCalendar text with CRLF line endings.
    """
    lines: List[str] = [
        "BEGIN:VCALENDAR",
        "VERSION:2.0",
        f"PRODID:{document.prodid}"
    ]
    for event in document.events:
        lines.extend([
            "BEGIN:VEVENT",
            f"UID:{event.uid}",
            f"DTSTAMP:{document.dtstamp}",
            f"DTSTART;VALUE=DATE:{format_ics_date(event.start_date)}",
            f"DTEND;VALUE=DATE:{format_ics_date(event.end_date)}",
            f"SUMMARY:{_escape_text(event.summary)}",
            f"DESCRIPTION:{_escape_text(event.description)}",
            "END:VEVENT"
        ])
    lines.append("END:VCALENDAR")
    return ICS_LINE_ENDING.join(lines) + ICS_LINE_ENDING

def build_calendar_document(
    due_date: DateLike,
    ultrasound_window_start: DateLike,
    ultrasound_window_end: DateLike
) -> str:
    """
    iCalendar text for the due date and ultrasound window boundaries.

    Raises:
        InvalidDateError: If any argument is not a date
    """
    document = build_calendar_events(due_date, ultrasound_window_start, ultrasound_window_end)
    return render_calendar(document)

def build_estimate_calendar(estimate: PregnancyEstimate, lmp: DateLike) -> str:
    """
    iCalendar text for a computed estimate.

    The ultrasound window runs from LMP + 42 days to LMP + 56 days.
    """
    return build_calendar_document(
        estimate.due_date,
        add_days(lmp, ULTRASOUND_START_OFFSET_DAYS),
        add_days(lmp, ULTRASOUND_END_OFFSET_DAYS)
    )

def write_calendar_file(text: str, path: Union[str, Path]) -> Path:
    """
    Write calendar text to disk as UTF-8.

    Args:
        text: Rendered iCalendar document
        path: Destination file

    Returns:
        Path that was written

    Raises:
        CalendarExportError: If the file cannot be written
    """
    path = Path(path)
    try:
        # newline="" keeps the CRLF line endings untouched
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(text)
    except OSError as e:
        raise CalendarExportError(f"Could not write calendar file: {e}") from e
    logger.info("Calendar file written", extra={"calendar_file": path.name})
    return path
