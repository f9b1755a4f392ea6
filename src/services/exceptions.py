"""
Service-level exceptions.

This module contains exceptions that can be raised by the estimation and
calendar export services. Input errors subclass ValueError so that callers
which only know about ValueError still catch them.
"""

class EstimationError(ValueError):
    """Base exception for invalid estimation input."""
    pass

class InvalidDateError(EstimationError):
    """Raised when a value cannot be interpreted as a calendar date."""
    pass

class FutureDateError(EstimationError):
    """Raised when an LMP date falls after the reference date."""
    pass

class CycleParameterError(EstimationError):
    """Raised when cycle length or variability is outside the accepted range."""

    def __init__(self, message: str, field: str = None):
        super().__init__(message)
        self.field = field

class CalendarExportError(Exception):
    """Raised when a calendar document cannot be built or written."""
    pass
