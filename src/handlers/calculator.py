"""
Due-date calculator handlers.

The caller keeps the estimate returned by ``handle_due_date_request`` and
passes it back explicitly to ``handle_calendar_export``; nothing is stored
between calls.
"""
from typing import Any, Dict, Optional, Union
from datetime import date
from pathlib import Path

from src.models.estimate import PregnancyEstimate
from src.services.calendar_export import build_estimate_calendar, write_calendar_file
from src.services.constants import (
    ICS_FILENAME,
    MESSAGE_EXPORT_FAILED,
    MESSAGE_NO_ESTIMATE,
    MESSAGE_VALID_PAST_DATE
)
from src.services.exceptions import CalendarExportError, EstimationError
from src.services.pregnancy import estimate_pregnancy
from src.utils.formatters import format_error_message, format_estimate_report
from src.utils.logging import logger, log_exception
from src.utils.validators import validate_lmp

def _error(error_code: int, description: str) -> Dict[str, Any]:
    return {
        "ok": False,
        "error_code": error_code,
        "description": description
    }

def handle_due_date_request(lmp_value: Optional[str], today: Optional[date] = None) -> Dict[str, Any]:
    """
    Validate an LMP field value and calculate the estimate.

    Args:
        lmp_value: Raw date field value (YYYY-MM-DD)
        today: Reference date, defaults to the current date

    Returns:
        Response dict. On success ``result`` holds ``lmp``, ``estimate`` and
        the rendered ``report``; on failure ``description`` holds the message
        to show the user.
    """
    lmp, error = validate_lmp(lmp_value, today)
    if error:
        logger.info("Rejected LMP input")
        return _error(400, MESSAGE_VALID_PAST_DATE)

    try:
        estimate = estimate_pregnancy(lmp, as_of=today)
    except EstimationError:
        logger.warning("Estimate rejected by engine")
        return _error(400, MESSAGE_VALID_PAST_DATE)
    except Exception as e:
        log_exception(logger, "Error calculating estimate")
        return _error(500, format_error_message(e))

    return {
        "ok": True,
        "result": {
            "lmp": lmp,
            "estimate": estimate,
            "report": format_estimate_report(estimate, lmp)
        }
    }

def handle_calendar_export(
    estimate: Optional[PregnancyEstimate],
    lmp: Optional[date],
    output_dir: Union[str, Path]
) -> Dict[str, Any]:
    """
    Write the estimate's calendar file into ``output_dir``.

    Export failures are reported in the response and never raised.

    Returns:
        Response dict with the written ``path`` on success
    """
    if estimate is None or lmp is None:
        return _error(409, MESSAGE_NO_ESTIMATE)

    try:
        text = build_estimate_calendar(estimate, lmp)
        path = write_calendar_file(text, Path(output_dir) / ICS_FILENAME)
    except (CalendarExportError, EstimationError, OSError):
        logger.exception("Error exporting calendar")
        return _error(500, MESSAGE_EXPORT_FAILED)
    except Exception:
        log_exception(logger, "Unexpected error exporting calendar")
        return _error(500, MESSAGE_EXPORT_FAILED)

    return {
        "ok": True,
        "result": {
            "path": path
        }
    }
