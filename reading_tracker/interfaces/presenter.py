"""Presenter protocol for output abstraction."""

from typing import Protocol

from reading_tracker.models import (
    AchievementDefinition,
    ActivityEvent,
    Book,
    LibraryStats,
    StreakState,
)


class PresenterProtocol(Protocol):
    """Interface for presenting output to user (CLI, GUI, etc).

    This protocol abstracts all output operations, allowing the same
    record store to be driven from different presentation layers.
    """

    def show_info(self, message: str) -> None:
        """Display an informational message.

        Args:
            message: The informational message to display
        """
        ...

    def show_success(self, message: str) -> None:
        """Display a success message.

        Args:
            message: The success message to display
        """
        ...

    def show_warning(self, message: str) -> None:
        """Display a warning message.

        Args:
            message: The warning message to display
        """
        ...

    def show_error(self, message: str) -> None:
        """Display an error message.

        Args:
            message: The error message to display
        """
        ...

    def show_books(self, books: list[Book]) -> None:
        """Display a list of books with their progress.

        Args:
            books: Books to display, in display order
        """
        ...

    def show_book_detail(self, book: Book) -> None:
        """Display one book with its full log history.

        Args:
            book: The book to display
        """
        ...

    def show_stats(self, stats: LibraryStats, streaks: StreakState) -> None:
        """Display library statistics and streaks.

        Args:
            stats: Aggregated statistics
            streaks: Current and longest streak
        """
        ...

    def show_activity(self, events: list[ActivityEvent]) -> None:
        """Display the activity feed.

        Args:
            events: Events, most recent first
        """
        ...

    def show_achievements(self, achievements: list[tuple[AchievementDefinition, bool]]) -> None:
        """Display the achievement catalog with unlock state.

        Args:
            achievements: Catalog entries paired with whether they are unlocked
        """
        ...
