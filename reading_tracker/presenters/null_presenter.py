"""Null presenter for testing (no output)."""

from reading_tracker.models import (
    AchievementDefinition,
    ActivityEvent,
    Book,
    LibraryStats,
    StreakState,
)


class NullPresenter:
    """Present output to nowhere (testing implementation)."""

    def show_info(self, message: str) -> None:
        """Display an informational message (no-op)."""
        pass

    def show_success(self, message: str) -> None:
        """Display a success message (no-op)."""
        pass

    def show_warning(self, message: str) -> None:
        """Display a warning message (no-op)."""
        pass

    def show_error(self, message: str) -> None:
        """Display an error message (no-op)."""
        pass

    def show_books(self, books: list[Book]) -> None:
        """Display a list of books (no-op)."""
        pass

    def show_book_detail(self, book: Book) -> None:
        """Display one book (no-op)."""
        pass

    def show_stats(self, stats: LibraryStats, streaks: StreakState) -> None:
        """Display statistics (no-op)."""
        pass

    def show_activity(self, events: list[ActivityEvent]) -> None:
        """Display the activity feed (no-op)."""
        pass

    def show_achievements(self, achievements: list[tuple[AchievementDefinition, bool]]) -> None:
        """Display achievements (no-op)."""
        pass
