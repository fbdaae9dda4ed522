"""Custom exceptions for Reading Tracker."""

from .base import ReadingTrackerException
from .snapshot import MalformedSnapshotError
from .store import BookNotFoundError
from .validation import ValidationError

__all__ = [
    "ReadingTrackerException",
    "ValidationError",
    "BookNotFoundError",
    "MalformedSnapshotError",
]
