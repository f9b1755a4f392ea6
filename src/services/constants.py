"""
Constants shared by the estimation and export services.
"""

# Due date / gestational age
DAYS_IN_GESTATION = 280
DAYS_IN_WEEK = 7
CONFIDENCE_DAYS = 12  # ±12 days, within the accepted ±10–14

# Milestones (days / weeks from LMP)
IMPLANTATION_START_DAYS = 21  # approx 3 weeks
IMPLANTATION_END_DAYS = 28    # approx 4 weeks
HEARTBEAT_WEEKS = (5, 6)
ULTRASOUND_WEEKS = (7, 9)

MILESTONE_LABELS = {
    "implantation": "Implantation often occurs in this window. Timing can vary significantly.",
    "heartbeat": (
        "Typical first heartbeat detection window. Many providers schedule a first "
        "appointment in this range. Heartbeat is often detectable around this time."
    ),
    "ultrasound": "Many providers offer a first ultrasound in this window. Timing can vary significantly.",
}

# Fertility window
LUTEAL_PHASE_DAYS = 14
DAYS_BEFORE_OVULATION = 5
DAYS_AFTER_OVULATION = 1
HIGHER_LIKELIHOOD_DAYS_BEFORE = 2
MIN_CYCLE_LENGTH = 21
MAX_CYCLE_LENGTH = 40
DEFAULT_CYCLE_LENGTH = 28
MIN_VARIABILITY = 0
MAX_VARIABILITY = 7
DEFAULT_VARIABILITY = 2

# Calendar export
ICS_PRODUCT = "QuietDue"
ICS_PRODID = f"-//{ICS_PRODUCT}//Calculator//EN"
ICS_DTSTAMP = "20200101T000000Z"
ICS_LINE_ENDING = "\r\n"
ICS_FILENAME = "quietdue-estimated-dates.ics"
ICS_DESCRIPTION = "QuietDue estimate. For informational purposes only."
ULTRASOUND_START_OFFSET_DAYS = 42
ULTRASOUND_END_OFFSET_DAYS = 56

CALENDAR_EVENTS = {
    "due_date": {
        "uid": "quietdue-due-date@local",
        "summary": "Estimated due date",
    },
    "ultrasound_start": {
        "uid": "quietdue-week7@local",
        "summary": "Estimated early ultrasound window start (week 7)",
    },
    "ultrasound_end": {
        "uid": "quietdue-week9@local",
        "summary": "Estimated early ultrasound window end (week 9)",
    },
}

# User-facing messages
MESSAGE_SELECT_DATE = "Please select a date."
MESSAGE_INVALID_DATE = "Please enter a valid date."
MESSAGE_PAST_DATE = "Please enter a past date."
MESSAGE_VALID_PAST_DATE = "Please enter a valid past date."
MESSAGE_CYCLE_LENGTH = "Please enter a realistic cycle length (21–40 days)."
MESSAGE_VARIABILITY = "Please enter a variability between 0 and 7 days."
MESSAGE_EXPORT_FAILED = "The calendar file could not be created. Please try again."
MESSAGE_UNEXPECTED = "Something went wrong while calculating. Please try again."
MESSAGE_NO_ESTIMATE = "Please calculate an estimate first."
