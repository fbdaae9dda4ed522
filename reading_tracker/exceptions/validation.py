"""Validation-related exceptions."""

from .base import ReadingTrackerException


class ValidationError(ReadingTrackerException):
    """Raised when user input is rejected before any state changes."""

    pass
