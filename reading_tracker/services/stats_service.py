"""Service for rolling up reading statistics."""

from collections.abc import Iterable
from datetime import date

from reading_tracker.config import TrackerConfig
from reading_tracker.models.book import Book, BookStatus, Medium
from reading_tracker.models.stats import LibraryStats
from reading_tracker.services.progress_engine import total_progress


class StatsService:
    """Compute library-wide statistics from the current book collection.

    Holds no state of its own; every call is a pure roll-up of the books
    it is given.
    """

    def __init__(self, config: TrackerConfig):
        self.config = config

    def get_library_stats(
        self, books: Iterable[Book], today: date, daily_goal: int = 0
    ) -> LibraryStats:
        """Aggregate totals across all books.

        Args:
            books: The current book collection
            today: Day used for the daily goal figures
            daily_goal: Pages per day the user aims for

        Returns:
            LibraryStats for the collection
        """
        stats = LibraryStats(
            daily_goal=daily_goal,
            books_by_category={category: 0 for category in self.config.categories},
        )

        for book in books:
            stats.total_books += 1
            if book.status == BookStatus.COMPLETED:
                stats.completed_books += 1
            stats.books_by_category[book.category] = (
                stats.books_by_category.get(book.category, 0) + 1
            )

            progress = total_progress(book)
            if book.medium == Medium.PAPER:
                stats.pages_read += progress
                stats.pages_today += sum(log.amount for log in book.logs if log.date == today)
            else:
                stats.audio_minutes += progress

        return stats
