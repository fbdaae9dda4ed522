"""The record store: owner of all tracker state and its mutations."""

import logging
from collections.abc import Callable
from datetime import date, datetime, timezone
from pathlib import Path
from typing import Any

from reading_tracker.config import TrackerConfig
from reading_tracker.exceptions import BookNotFoundError, ValidationError
from reading_tracker.models import (
    Achievement,
    AchievementDefinition,
    ActivityEvent,
    ActivityFeed,
    ActivityKind,
    Book,
    HiddenSuggestions,
    LibraryStats,
    Medium,
    ReadingLog,
    StreakState,
    SuggestionKind,
    Theme,
)
from reading_tracker.models.records import (
    AchievementRecord,
    ActivityRecord,
    BookRecord,
    SnapshotDocument,
    StreakRecord,
)
from reading_tracker.services import book_query
from reading_tracker.services.achievement_service import AchievementService, build_context
from reading_tracker.services.progress_engine import recompute_status, remaining
from reading_tracker.services.snapshot_service import SnapshotService
from reading_tracker.services.state_repository import StateRepository
from reading_tracker.services.stats_service import StatsService
from reading_tracker.services.storage_service import LocalStorage
from reading_tracker.services.streak_calculator import calculate_streaks, collect_log_dates

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = frozenset({"name", "author", "medium", "target", "category", "cover_reference"})


class RecordStore:
    """Own the book collection and every piece of derived state.

    Each mutating operation validates its input before touching anything,
    then applies the change and records it in the activity feed before
    derived state is recomputed and everything is persisted. A rejected
    operation leaves state and storage exactly as they were.
    """

    def __init__(
        self,
        config: TrackerConfig,
        repository: StateRepository,
        achievement_service: AchievementService | None = None,
        stats_service: StatsService | None = None,
        today_provider: Callable[[], date] = date.today,
    ):
        """Initialize an empty store.

        Args:
            config: Configuration
            repository: Persistence for the state slices
            achievement_service: Achievement catalog evaluator
            stats_service: Statistics aggregator
            today_provider: Returns the current calendar day
        """
        self.config = config
        self.repository = repository
        self.achievement_service = achievement_service or AchievementService()
        self.stats_service = stats_service or StatsService(config)
        self.today_provider = today_provider

        self.books: list[Book] = []
        self.streaks = StreakState()
        self.activity = ActivityFeed(limit=config.activity_limit)
        self.achievements: list[Achievement] = self.achievement_service.initial_states()
        self.hidden_suggestions = HiddenSuggestions()
        self.theme = Theme.LIGHT
        self.daily_goal = config.default_daily_goal

    @classmethod
    def open(
        cls, config: TrackerConfig, today_provider: Callable[[], date] = date.today
    ) -> "RecordStore":
        """Create a store backed by the configured data directory and load it.

        Args:
            config: Configuration naming the data directory
            today_provider: Returns the current calendar day

        Returns:
            The loaded RecordStore
        """
        repository = StateRepository(LocalStorage(config.data_dir), config)
        store = cls(config, repository, today_provider=today_provider)
        store.load()
        return store

    def today(self) -> date:
        """The current calendar day."""
        return self.today_provider()

    # === Loading and persistence ===

    def load(self) -> None:
        """Read every persisted slice and bring derived state up to date."""
        self.books = self.repository.load_books()
        for book in self.books:
            recompute_status(book)
        self.streaks = self.repository.load_streaks()
        self.activity.replace(self.repository.load_activity())
        persisted = self.repository.load_achievements()
        self.achievements = (
            self.achievement_service.merge_states(persisted)
            if persisted is not None
            else self.achievement_service.initial_states()
        )
        self.hidden_suggestions = self.repository.load_hidden_suggestions()
        self.theme = self.repository.load_theme()
        self.daily_goal = self.repository.load_daily_goal()

        self._recompute_streaks()
        if self._evaluate_achievements():
            self.repository.save_achievements(self.achievements)
            self.repository.save_activity(self.activity.get_all())
        logger.info(
            f"Loaded store from {self.config.data_dir}: {len(self.books)} books, "
            f"streak {self.streaks.current}/{self.streaks.longest}"
        )

    def _persist(self) -> None:
        self.repository.save_books(self.books)
        self.repository.save_streaks(self.streaks)
        self.repository.save_activity(self.activity.get_all())
        self.repository.save_achievements(self.achievements)

    def _recompute_streaks(self) -> None:
        self.streaks = calculate_streaks(
            collect_log_dates(self.books), self.today(), previous_longest=self.streaks.longest
        )

    def _evaluate_achievements(self) -> list[AchievementDefinition]:
        context = build_context(self.books, self.streaks.current)
        unlocked = self.achievement_service.evaluate(self.achievements, context)
        for definition in unlocked:
            self.activity.record(ActivityKind.ACHIEVEMENT, f"Unlocked: {definition.name}")
        return unlocked

    def _commit(self, recompute_streaks: bool = True) -> None:
        if recompute_streaks:
            self._recompute_streaks()
        self._evaluate_achievements()
        self._persist()

    # === Validation ===

    def _validate_book_fields(
        self,
        name: Any,
        author: Any,
        medium: Any,
        target: Any,
        category: Any,
        cover_reference: Any,
    ) -> dict[str, Any]:
        """Check and normalize book fields, raising before any mutation."""
        name = name.strip() if isinstance(name, str) else ""
        author = author.strip() if isinstance(author, str) else ""
        if not name:
            raise ValidationError("Book name must not be empty")
        if not author:
            raise ValidationError("Author must not be empty")

        try:
            medium = Medium(medium)
        except ValueError:
            raise ValidationError(
                f"Unknown medium {medium!r}; expected one of: "
                + ", ".join(m.value for m in Medium)
            ) from None

        if isinstance(target, bool) or not isinstance(target, int) or target <= 0:
            raise ValidationError(f"Target must be a positive whole number, got {target!r}")

        category = self._validate_category(category)

        if cover_reference is not None:
            cover_reference = str(cover_reference).strip() or None

        return {
            "name": name,
            "author": author,
            "medium": medium,
            "target": target,
            "category": category,
            "cover_reference": cover_reference,
        }

    def _validate_category(self, category: str | None) -> str:
        if category is None:
            return self.config.default_category
        if category not in self.config.categories:
            raise ValidationError(
                f"Unknown category {category!r}; expected one of: "
                + ", ".join(self.config.categories)
            )
        return category

    # === Queries ===

    def find_book(self, book_id: str) -> Book | None:
        """Look up a book by id, or None if there is no such book."""
        for book in self.books:
            if book.id == book_id:
                return book
        return None

    def get_book(self, book_id: str) -> Book:
        """Look up a book by id.

        Raises:
            BookNotFoundError: If no book has the id
        """
        book = self.find_book(book_id)
        if book is None:
            raise BookNotFoundError(book_id)
        return book

    def get_stats(self) -> LibraryStats:
        """Statistics for the current collection."""
        return self.stats_service.get_library_stats(self.books, self.today(), self.daily_goal)

    def get_activity(self) -> list[ActivityEvent]:
        """Activity feed, most recent first."""
        return self.activity.get_all()

    def get_achievements(self) -> list[tuple[AchievementDefinition, bool]]:
        """Every catalog entry paired with its unlock state."""
        unlocked = {state.id for state in self.achievements if state.unlocked}
        return [
            (definition, definition.id in unlocked)
            for definition in self.achievement_service.catalog
        ]

    def suggest(self, kind: SuggestionKind, prefix: str = "") -> list[str]:
        """Previously used names or authors for autocompletion."""
        return book_query.suggestions(self.books, kind, prefix, self.hidden_suggestions)

    # === Book mutations ===

    def create_book(
        self,
        name: str,
        author: str,
        medium: Medium | str,
        target: int,
        category: str | None = None,
        cover_reference: str | None = None,
    ) -> Book:
        """Add a new book with no progress.

        Args:
            name: Book title
            author: Author name
            medium: paper or audio
            target: Total pages (paper) or minutes (audio)
            category: Category tag; the configured default when omitted
            cover_reference: Optional cover image URL

        Returns:
            The created Book

        Raises:
            ValidationError: If any field is rejected
        """
        fields = self._validate_book_fields(
            name, author, medium, target, category, cover_reference
        )
        book = Book(**fields)
        while self.find_book(book.id) is not None:
            book = Book(**fields)

        self.books.append(book)
        self.activity.record(ActivityKind.ADDED, f'Added book "{book.name}"', book.name)
        self._commit(recompute_streaks=False)
        logger.info(f"Created book {book.id}: {book}")
        return book

    def append_log(self, book_id: str, log_date: date, amount: int) -> ReadingLog:
        """Log progress on a book.

        Args:
            book_id: Id of the book read
            log_date: Day the reading happened
            amount: Pages read or minutes listened

        Returns:
            The appended ReadingLog

        Raises:
            ValidationError: If the amount is not a positive whole number
            BookNotFoundError: If no book has the id
        """
        if isinstance(amount, bool) or not isinstance(amount, int) or amount <= 0:
            raise ValidationError(f"Amount must be a positive whole number, got {amount!r}")
        if not isinstance(log_date, date):
            raise ValidationError(f"Log date must be a calendar date, got {log_date!r}")
        if isinstance(log_date, datetime):
            log_date = log_date.date()
        book = self.get_book(book_id)

        log = ReadingLog(date=log_date, amount=amount)
        book.add_log(log)
        recompute_status(book)
        self.activity.record(
            ActivityKind.PROGRESS, f'{amount} {book.unit} for "{book.name}"', book.name
        )
        self._commit()
        return log

    def toggle_completion(self, book_id: str) -> bool:
        """Flip a book's completion flag.

        Completing a book with progress still remaining logs the remainder
        as read today, so a completed book always reaches its target.
        Reopening clears the flag but keeps every log; a book whose logs
        already reach the target therefore stays completed.

        Returns:
            The book's completion flag afterwards

        Raises:
            BookNotFoundError: If no book has the id
        """
        book = self.get_book(book_id)

        if not book.completed_flag:
            rest = remaining(book)
            if rest > 0:
                book.add_log(ReadingLog(date=self.today(), amount=rest))
            book.completed_flag = True
            self.activity.record(ActivityKind.COMPLETED, f'Completed "{book.name}"', book.name)
        else:
            book.completed_flag = False

        recompute_status(book)
        if not book.completed_flag:
            self.activity.record(ActivityKind.REOPENED, f'Reopened "{book.name}"', book.name)
        else:
            logger.debug(f"Book {book.id} reaches its target and stays completed")
        self._commit()
        return book.completed_flag

    def change_category(self, book_id: str, category: str) -> Book:
        """Move a book to another category.

        Raises:
            ValidationError: If the category is not recognized
            BookNotFoundError: If no book has the id
        """
        category = self._validate_category(category)
        book = self.get_book(book_id)

        book.category = category
        self.activity.record(
            ActivityKind.CATEGORY, f'Moved "{book.name}" to {category}', book.name
        )
        self._commit(recompute_streaks=False)
        return book

    def edit_book(self, book_id: str, **changes: Any) -> Book:
        """Overwrite a book's descriptive fields.

        Logs are never touched, even when the medium changes; existing
        amounts are not converted between pages and minutes.

        Args:
            book_id: Id of the book to edit
            **changes: Any of name, author, medium, target, category,
                cover_reference; None leaves a field unchanged

        Returns:
            The edited Book

        Raises:
            ValidationError: If a field is unknown or rejected
            BookNotFoundError: If no book has the id
        """
        unknown = set(changes) - EDITABLE_FIELDS
        if unknown:
            raise ValidationError(f"Cannot edit fields: {', '.join(sorted(unknown))}")
        changes = {key: value for key, value in changes.items() if value is not None}
        book = self.get_book(book_id)

        current = {
            "name": book.name,
            "author": book.author,
            "medium": book.medium,
            "target": book.target,
            "category": book.category,
            "cover_reference": book.cover_reference,
        }
        current.update(changes)
        fields = self._validate_book_fields(**current)

        for key, value in fields.items():
            setattr(book, key, value)
        recompute_status(book)
        self.activity.record(ActivityKind.EDITED, f'Edited "{book.name}"', book.name)
        self._commit(recompute_streaks=False)
        return book

    def delete_book(self, book_id: str) -> Book:
        """Remove a book and its logs permanently.

        Asking the user to confirm is the caller's responsibility. The
        longest streak is kept even if the deleted logs produced it.

        Returns:
            The removed Book

        Raises:
            BookNotFoundError: If no book has the id
        """
        book = self.get_book(book_id)

        self.activity.record(ActivityKind.DELETED, f'Deleted "{book.name}"', book.name)
        self.books = [other for other in self.books if other.id != book_id]
        self._commit()
        logger.info(f"Deleted book {book.id}: {book}")
        return book

    # === Preferences ===

    def set_daily_goal(self, pages: int) -> None:
        """Set the number of pages per day to aim for.

        Raises:
            ValidationError: If the goal is not a positive whole number
        """
        if isinstance(pages, bool) or not isinstance(pages, int) or pages <= 0:
            raise ValidationError(f"Daily goal must be a positive whole number, got {pages!r}")
        self.daily_goal = pages
        self.activity.record(ActivityKind.GOAL, f"Daily goal set to {pages} pages")
        self.repository.save_daily_goal(pages)
        self.repository.save_activity(self.activity.get_all())

    def toggle_theme(self) -> Theme:
        """Switch between light and dark themes."""
        self.theme = self.theme.toggled()
        self.repository.save_theme(self.theme)
        return self.theme

    def hide_suggestion(self, kind: SuggestionKind, value: str) -> bool:
        """Stop suggesting a book name or author.

        Returns:
            False if the value was already hidden
        """
        value = value.strip()
        if not value:
            raise ValidationError("Suggestion to hide must not be empty")
        if not self.hidden_suggestions.hide(kind, value):
            return False
        self.repository.save_hidden_suggestions(self.hidden_suggestions)
        return True

    # === Snapshot import/export ===

    def export_snapshot(self) -> SnapshotDocument:
        """Capture the full state as a snapshot document.

        The export itself is recorded in the activity feed after the
        document is built.
        """
        document = SnapshotDocument(
            books=[BookRecord.from_book(book) for book in self.books],
            streaks=StreakRecord.from_state(self.streaks),
            activity_feed=[ActivityRecord.from_event(event) for event in self.activity.get_all()],
            achievements=[
                AchievementRecord.from_achievement(state) for state in self.achievements
            ],
            daily_goal=self.daily_goal,
            export_date=datetime.now(timezone.utc),
        )
        self.activity.record(ActivityKind.EXPORT, f"Exported {len(self.books)} books")
        self.repository.save_activity(self.activity.get_all())
        return document

    def export_to_file(self, output_path: Path) -> Path:
        """Export the full state to a JSON file."""
        return SnapshotService().write_file(self.export_snapshot(), output_path)

    def import_snapshot(self, document: SnapshotDocument) -> None:
        """Replace live state with a validated snapshot.

        Each slice present in the document replaces the live slice
        wholesale; absent slices are left untouched. Achievements already
        unlocked stay unlocked and the longest streak never shrinks. The current
        streak is recomputed from the imported books.

        Args:
            document: A snapshot already validated by SnapshotService.parse
        """
        books = None
        if document.books is not None:
            books = [
                record.to_book(self.config.categories, self.config.default_category)
                for record in document.books
            ]
            for book in books:
                recompute_status(book)
        events = (
            [record.to_event() for record in document.activity_feed]
            if document.activity_feed is not None
            else None
        )
        achievements = None
        if document.achievements is not None:
            imported = [record.to_achievement() for record in document.achievements]
            kept = [state for state in self.achievements if state.unlocked]
            achievements = self.achievement_service.merge_states(imported + kept)

        if books is not None:
            self.books = books
        if document.streaks is not None:
            imported_streaks = document.streaks.to_state()
            self.streaks = StreakState(
                current=imported_streaks.current,
                longest=max(imported_streaks.longest, self.streaks.longest),
            )
        if events is not None:
            self.activity.replace(events)
        if achievements is not None:
            self.achievements = achievements
        if document.daily_goal is not None:
            self.daily_goal = document.daily_goal

        self.activity.record(ActivityKind.IMPORT, f"Imported {len(self.books)} books")
        self._recompute_streaks()
        self._evaluate_achievements()
        self._persist()
        self.repository.save_daily_goal(self.daily_goal)
        logger.info(f"Imported snapshot: {len(self.books)} books")
