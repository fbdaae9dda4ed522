"""Data models for reading statistics."""

from dataclasses import dataclass, field


@dataclass
class LibraryStats:
    """Roll-up of reading statistics across all books."""

    total_books: int = 0
    completed_books: int = 0
    pages_read: int = 0
    audio_minutes: int = 0
    pages_today: int = 0
    daily_goal: int = 0
    books_by_category: dict[str, int] = field(default_factory=dict)

    @property
    def audio_hours(self) -> int:
        """Whole hours of audio listened."""
        return self.audio_minutes // 60

    @property
    def audio_remainder_minutes(self) -> int:
        """Minutes left over after whole hours."""
        return self.audio_minutes % 60

    @property
    def completion_rate(self) -> float:
        """Fraction of books completed."""
        if self.total_books == 0:
            return 0.0
        return self.completed_books / self.total_books

    @property
    def daily_goal_percentage(self) -> int:
        """Today's pages as a percentage of the daily goal, capped at 100."""
        if self.daily_goal <= 0:
            return 0
        return min(self.pages_today * 100 // self.daily_goal, 100)
