"""Snapshot import/export exceptions."""

from .base import ReadingTrackerException


class MalformedSnapshotError(ReadingTrackerException):
    """Raised when an imported document fails to parse or has the wrong shape."""

    pass
