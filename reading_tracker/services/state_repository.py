"""Load and save tracker state slices through local storage."""

import logging
from typing import Any

from pydantic import TypeAdapter, ValidationError

from reading_tracker.config import TrackerConfig
from reading_tracker.models.achievement import Achievement
from reading_tracker.models.activity import ActivityEvent
from reading_tracker.models.book import Book
from reading_tracker.models.preferences import Theme
from reading_tracker.models.records import (
    AchievementRecord,
    ActivityRecord,
    BookRecord,
    HiddenSuggestionsRecord,
    StreakRecord,
)
from reading_tracker.models.streak import StreakState
from reading_tracker.models.suggestions import HiddenSuggestions
from reading_tracker.services.storage_service import LocalStorage

logger = logging.getLogger(__name__)

BOOKS_KEY = "books"
STREAKS_KEY = "streaks"
ACTIVITY_KEY = "activityFeed"
ACHIEVEMENTS_KEY = "achievements"
HIDDEN_SUGGESTIONS_KEY = "hiddenSuggestions"
THEME_KEY = "theme"
DAILY_GOAL_KEY = "dailyGoal"

_books_adapter = TypeAdapter(list[BookRecord])
_activity_adapter = TypeAdapter(list[ActivityRecord])
_achievements_adapter = TypeAdapter(list[AchievementRecord])


class StateRepository:
    """Typed access to each persisted slice of tracker state.

    Reading validates the stored JSON against the record schemas. A slice
    that is missing yields its default; a slice that fails validation is
    moved aside (so it is never silently overwritten) and also yields its
    default.
    """

    def __init__(self, storage: LocalStorage, config: TrackerConfig):
        self.storage = storage
        self.config = config

    # === Reading ===

    def _validate(self, key: str, adapter: TypeAdapter) -> Any | None:
        raw = self.storage.read(key)
        if raw is None:
            return None
        try:
            return adapter.validate_python(raw)
        except ValidationError as e:
            logger.warning(f"Stored {key} has an invalid shape, using defaults: {e}")
            self.storage.quarantine(key)
            return None

    def load_books(self) -> list[Book]:
        records = self._validate(BOOKS_KEY, _books_adapter) or []
        books = [
            record.to_book(self.config.categories, self.config.default_category)
            for record in records
        ]
        logger.info(f"Loaded {len(books)} books")
        return books

    def load_streaks(self) -> StreakState:
        record = self._validate(STREAKS_KEY, TypeAdapter(StreakRecord))
        return record.to_state() if record else StreakState()

    def load_activity(self) -> list[ActivityEvent]:
        records = self._validate(ACTIVITY_KEY, _activity_adapter) or []
        return [record.to_event() for record in records]

    def load_achievements(self) -> list[Achievement] | None:
        """Load the unlock table, or None if none has been saved yet."""
        records = self._validate(ACHIEVEMENTS_KEY, _achievements_adapter)
        if records is None:
            return None
        return [record.to_achievement() for record in records]

    def load_hidden_suggestions(self) -> HiddenSuggestions:
        record = self._validate(HIDDEN_SUGGESTIONS_KEY, TypeAdapter(HiddenSuggestionsRecord))
        return record.to_hidden() if record else HiddenSuggestions()

    def load_theme(self) -> Theme:
        theme = self._validate(THEME_KEY, TypeAdapter(Theme))
        return theme or Theme.LIGHT

    def load_daily_goal(self) -> int:
        goal = self._validate(DAILY_GOAL_KEY, TypeAdapter(int))
        if goal is None or goal <= 0:
            return self.config.default_daily_goal
        return goal

    # === Writing ===

    def save_books(self, books: list[Book]) -> None:
        self.storage.write(
            BOOKS_KEY,
            [BookRecord.from_book(book).model_dump(mode="json", by_alias=True) for book in books],
        )

    def save_streaks(self, streaks: StreakState) -> None:
        self.storage.write(
            STREAKS_KEY, StreakRecord.from_state(streaks).model_dump(mode="json", by_alias=True)
        )

    def save_activity(self, events: list[ActivityEvent]) -> None:
        self.storage.write(
            ACTIVITY_KEY,
            [
                ActivityRecord.from_event(event).model_dump(mode="json", by_alias=True)
                for event in events
            ],
        )

    def save_achievements(self, achievements: list[Achievement]) -> None:
        self.storage.write(
            ACHIEVEMENTS_KEY,
            [
                AchievementRecord.from_achievement(achievement).model_dump(mode="json")
                for achievement in achievements
            ],
        )

    def save_hidden_suggestions(self, hidden: HiddenSuggestions) -> None:
        self.storage.write(
            HIDDEN_SUGGESTIONS_KEY, HiddenSuggestionsRecord.from_hidden(hidden).model_dump()
        )

    def save_theme(self, theme: Theme) -> None:
        self.storage.write(THEME_KEY, theme.value)

    def save_daily_goal(self, daily_goal: int) -> None:
        self.storage.write(DAILY_GOAL_KEY, daily_goal)
