"""Console presenter for CLI output."""

from reading_tracker.models import (
    AchievementDefinition,
    ActivityEvent,
    Book,
    BookStatus,
    LibraryStats,
    Medium,
    StreakState,
)
from reading_tracker.services.progress_engine import (
    progress_percentage,
    remaining,
    total_progress,
)
from reading_tracker.utils.format_utils import (
    format_amount,
    format_duration,
    format_relative_time,
)

STATUS_LABELS = {
    BookStatus.PLANNED: "planned",
    BookStatus.IN_PROGRESS: "reading",
    BookStatus.COMPLETED: "done",
}


def _progress_bar(percentage: int, width: int = 20) -> str:
    filled = percentage * width // 100
    return "#" * filled + "-" * (width - filled)


class ConsolePresenter:
    """Present output to console (CLI implementation)."""

    def show_info(self, message: str) -> None:
        """Display an informational message."""
        print(message)

    def show_success(self, message: str) -> None:
        """Display a success message."""
        print(f"[OK] {message}")

    def show_warning(self, message: str) -> None:
        """Display a warning message."""
        print(f"[WARN] {message}")

    def show_error(self, message: str) -> None:
        """Display an error message."""
        print(f"[ERROR] {message}")

    def show_books(self, books: list[Book]) -> None:
        """Display a list of books with their progress."""
        if not books:
            print("No books yet. Add your first one with 'reading-tracker add'.")
            return

        for book in books:
            percentage = progress_percentage(book)
            kind = "paper" if book.medium == Medium.PAPER else "audio"
            print(f"{book.id}  {book.name} by {book.author} [{kind}, {book.category}]")
            print(
                f"    [{_progress_bar(percentage)}] {percentage:3d}%  "
                f"{format_amount(total_progress(book), book.medium)} of "
                f"{format_amount(book.target, book.medium)}, "
                f"{format_amount(remaining(book), book.medium)} left  "
                f"({STATUS_LABELS[book.status]})"
            )

    def show_book_detail(self, book: Book) -> None:
        """Display one book with its full log history."""
        print(f"\n{book.name}")
        print(f"  Author:   {book.author}")
        print(f"  Medium:   {book.medium.value}")
        print(f"  Category: {book.category}")
        if book.cover_reference:
            print(f"  Cover:    {book.cover_reference}")
        print(
            f"  Progress: {format_amount(total_progress(book), book.medium)} of "
            f"{format_amount(book.target, book.medium)} ({progress_percentage(book)}%)"
        )
        print(f"  Status:   {book.status.value}")

        print(f"\nProgress history ({len(book.logs)} entries):")
        if not book.logs:
            print("  No progress logged yet.")
        for log in book.logs:
            print(f"  {log.date.isoformat()}  {format_amount(log.amount, book.medium)}")

    def show_stats(self, stats: LibraryStats, streaks: StreakState) -> None:
        """Display library statistics and streaks."""
        print("\nStatistics:")
        print(f"  Books:           {stats.total_books}")
        print(f"  Completed:       {stats.completed_books}")
        print(f"  Pages read:      {stats.pages_read}")
        print(f"  Audio listened:  {format_duration(stats.audio_minutes)}")
        print(f"  Current streak:  {streaks.current} days")
        print(f"  Longest streak:  {streaks.longest} days")
        print(
            f"  Today's goal:    {stats.pages_today}/{stats.daily_goal} pages "
            f"({stats.daily_goal_percentage}%)"
        )
        if stats.books_by_category:
            print("\nBy category:")
            for category, count in stats.books_by_category.items():
                print(f"  {category:15s} {count}")

    def show_activity(self, events: list[ActivityEvent]) -> None:
        """Display the activity feed."""
        if not events:
            print("No activity yet.")
            return
        for event in events:
            when = format_relative_time(event.timestamp)
            print(f"  {when:>12s}  [{event.kind.value}] {event.message}")

    def show_achievements(self, achievements: list[tuple[AchievementDefinition, bool]]) -> None:
        """Display the achievement catalog with unlock state."""
        unlocked_count = sum(1 for _, unlocked in achievements if unlocked)
        print(f"\nAchievements ({unlocked_count}/{len(achievements)} unlocked):")
        for definition, unlocked in achievements:
            mark = "[x]" if unlocked else "[ ]"
            print(f"  {mark} {definition.icon} {definition.name} - {definition.description}")
