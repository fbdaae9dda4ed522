"""Data models for the activity feed."""

from collections import deque
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum


class ActivityKind(str, Enum):
    """Kind of state change an activity event records."""

    ADDED = "added"
    PROGRESS = "progress"
    COMPLETED = "completed"
    REOPENED = "reopened"
    DELETED = "deleted"
    EDITED = "edited"
    CATEGORY = "category"
    ACHIEVEMENT = "achievement"
    IMPORT = "import"
    EXPORT = "export"
    GOAL = "goal"


@dataclass
class ActivityEvent:
    """A single entry in the activity feed."""

    kind: ActivityKind
    message: str
    book_name: str = ""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


class ActivityFeed:
    """Bounded feed of activity events, most recent first.

    Once the feed holds ``limit`` events, recording a new one evicts
    the oldest.
    """

    def __init__(self, limit: int = 50, events: list[ActivityEvent] | None = None):
        """Initialize the feed.

        Args:
            limit: Maximum number of events kept
            events: Optional initial events, most recent first
        """
        self._events: deque[ActivityEvent] = deque((events or [])[:limit], maxlen=limit)

    def record(
        self, kind: ActivityKind, message: str, book_name: str = ""
    ) -> ActivityEvent:
        """Record a new event at the head of the feed.

        Args:
            kind: Kind of state change
            message: Human-readable description
            book_name: Name of the book involved, if any

        Returns:
            The recorded ActivityEvent
        """
        event = ActivityEvent(kind=kind, message=message, book_name=book_name)
        self._events.appendleft(event)
        return event

    def replace(self, events: list[ActivityEvent]) -> None:
        """Replace all events, keeping at most ``limit`` of them."""
        self._events = deque(events[: self.limit], maxlen=self.limit)

    def get_all(self) -> list[ActivityEvent]:
        """Get all events, most recent first.

        Returns:
            Copy of the events list
        """
        return list(self._events)

    @property
    def limit(self) -> int:
        """Maximum number of events kept."""
        return self._events.maxlen or 0

    def __len__(self) -> int:
        return len(self._events)
