"""
Calculator handlers: validation, estimation and export at the caller boundary.
"""
from .calculator import handle_due_date_request, handle_calendar_export
from .fertility import handle_fertility_request

__all__ = ["handle_due_date_request", "handle_calendar_export", "handle_fertility_request"]
