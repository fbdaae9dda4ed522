"""Base exception classes for Reading Tracker."""


class ReadingTrackerException(Exception):
    """Base exception for all Reading Tracker errors.

    All custom exceptions in the reading_tracker package should inherit
    from this base class for consistent error handling.
    """

    pass
