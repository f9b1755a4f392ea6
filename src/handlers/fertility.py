"""
Fertility window calculator handler.
"""
from typing import Any, Dict, Optional
from datetime import date

from src.services.constants import MESSAGE_CYCLE_LENGTH, MESSAGE_INVALID_DATE, MESSAGE_VARIABILITY
from src.services.exceptions import CycleParameterError, EstimationError
from src.services.fertility import (
    build_cycle_likelihood_map,
    estimate_fertility_window,
    likelihood_segment_ratios,
    lower_likelihood_ranges
)
from src.utils.formatters import format_error_message, format_fertility_report
from src.utils.logging import logger, log_exception
from src.utils.validators import validate_cycle_length, validate_lmp, validate_variability

FIELD_MESSAGES = {
    "lmp": MESSAGE_INVALID_DATE,
    "cycle_length": MESSAGE_CYCLE_LENGTH,
    "variability": MESSAGE_VARIABILITY
}

def _engine_error_field(error: EstimationError) -> str:
    if isinstance(error, CycleParameterError) and error.field in FIELD_MESSAGES:
        return error.field
    return "lmp"

def handle_fertility_request(
    lmp_value: Optional[str],
    cycle_value: Any = None,
    variability_value: Any = None,
    today: Optional[date] = None
) -> Dict[str, Any]:
    """
    Validate the fertility form fields and estimate the fertile window.

    All fields are validated before returning, so every invalid field gets
    its own message in ``errors``.

    Args:
        lmp_value: Raw LMP field (YYYY-MM-DD)
        cycle_value: Raw cycle length field, blank means 28
        variability_value: Raw variability field, blank means 2
        today: Reference date, defaults to the current date

    Returns:
        Response dict with ``result`` on success or ``errors`` keyed by field
    """
    lmp, lmp_error = validate_lmp(lmp_value, today)
    cycle_length, cycle_error = validate_cycle_length(cycle_value)
    variability, variability_error = validate_variability(variability_value)

    errors = {
        field: message
        for field, message in (
            ("lmp", lmp_error),
            ("cycle_length", cycle_error),
            ("variability", variability_error)
        )
        if message
    }
    if errors:
        logger.info("Rejected fertility input", extra={"fields": sorted(errors)})
        return {
            "ok": False,
            "error_code": 400,
            "errors": errors
        }

    try:
        window = estimate_fertility_window(lmp, cycle_length, variability)
        likelihood_map = build_cycle_likelihood_map(cycle_length, variability)
    except EstimationError as e:
        field = _engine_error_field(e)
        logger.warning("Fertility input rejected by engine", extra={"field": field})
        return {
            "ok": False,
            "error_code": 400,
            "errors": {field: FIELD_MESSAGES[field]}
        }
    except Exception as e:
        log_exception(logger, "Error calculating fertility window")
        return {
            "ok": False,
            "error_code": 500,
            "errors": {"form": format_error_message(e)}
        }

    return {
        "ok": True,
        "result": {
            "window": window,
            "likelihood_map": likelihood_map,
            "lower_likelihood": lower_likelihood_ranges(window),
            "segments": likelihood_segment_ratios(window),
            "report": format_fertility_report(window)
        }
    }
