"""Serialized record schemas for persisted slices and snapshot documents.

Every document read from disk or imported from a file passes through these
models, so optional fields get their defaults and malformed shapes are
rejected in one place. Legacy key names written by the browser
version of the tracker (``type``, ``total``, ``completed``, ``bookName``,
``date``) are accepted on input; output always uses the current names.
"""

import datetime as dt

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator, model_validator

from reading_tracker.models.achievement import Achievement
from reading_tracker.models.activity import ActivityEvent, ActivityKind
from reading_tracker.models.book import Book, BookStatus, Medium, ReadingLog
from reading_tracker.models.streak import StreakState
from reading_tracker.models.suggestions import HiddenSuggestions

# Activity labels used by the browser version of the tracker
LEGACY_ACTIVITY_KINDS = {
    "Добавяне": ActivityKind.ADDED,
    "Прогрес": ActivityKind.PROGRESS,
    "Завършване": ActivityKind.COMPLETED,
    "Изтриване": ActivityKind.DELETED,
    "Постижение": ActivityKind.ACHIEVEMENT,
}


class _Record(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class LogRecord(_Record):
    """A serialized progress log entry."""

    date: dt.date
    amount: int = Field(gt=0)

    @classmethod
    def from_log(cls, log: ReadingLog) -> "LogRecord":
        return cls(date=log.date, amount=log.amount)

    def to_log(self) -> ReadingLog:
        return ReadingLog(date=self.date, amount=self.amount)


class BookRecord(_Record):
    """A serialized book with its logs."""

    id: str
    name: str
    author: str
    medium: Medium = Field(validation_alias=AliasChoices("medium", "type"))
    target: int = Field(gt=0, validation_alias=AliasChoices("target", "total"))
    category: str | None = None
    cover_reference: str | None = Field(
        default=None,
        alias="coverReference",
        validation_alias=AliasChoices("coverReference", "cover_reference", "cover"),
    )
    logs: list[LogRecord] = Field(default_factory=list)
    status: BookStatus | None = None
    completed_flag: bool = Field(
        default=False,
        alias="completedFlag",
        validation_alias=AliasChoices("completedFlag", "completed_flag", "completed"),
    )

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value):
        # Older exports used numeric millisecond timestamps as ids
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("name", "author")
    @classmethod
    def _require_text(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be empty")
        return value

    @classmethod
    def from_book(cls, book: Book) -> "BookRecord":
        return cls(
            id=book.id,
            name=book.name,
            author=book.author,
            medium=book.medium,
            target=book.target,
            category=book.category,
            cover_reference=book.cover_reference,
            logs=[LogRecord.from_log(log) for log in book.logs],
            status=book.status,
            completed_flag=book.completed_flag,
        )

    def to_book(self, categories: tuple[str, ...], default_category: str) -> Book:
        """Build a Book, mapping unknown or missing categories to the default.

        Args:
            categories: Recognized category tags
            default_category: Tag used when the record's tag is not recognized

        Returns:
            The Book, with logs sorted newest first
        """
        category = self.category if self.category in categories else default_category
        return Book(
            id=self.id,
            name=self.name,
            author=self.author,
            medium=self.medium,
            target=self.target,
            category=category,
            cover_reference=self.cover_reference or None,
            logs=sorted(
                (record.to_log() for record in self.logs),
                key=lambda log: log.date,
                reverse=True,
            ),
            status=self.status or BookStatus.PLANNED,
            completed_flag=self.completed_flag,
        )


class StreakRecord(_Record):
    """Serialized streak counters."""

    current: int = Field(
        default=0,
        ge=0,
        alias="currentStreak",
        validation_alias=AliasChoices("currentStreak", "current"),
    )
    longest: int = Field(
        default=0,
        ge=0,
        alias="longestStreak",
        validation_alias=AliasChoices("longestStreak", "longest"),
    )

    @classmethod
    def from_state(cls, state: StreakState) -> "StreakRecord":
        return cls(current=state.current, longest=state.longest)

    def to_state(self) -> StreakState:
        return StreakState(current=self.current, longest=self.longest)


class ActivityRecord(_Record):
    """A serialized activity feed entry."""

    kind: ActivityKind = Field(validation_alias=AliasChoices("kind", "type"))
    message: str = ""
    book_name: str = Field(
        default="",
        alias="relatedBookName",
        validation_alias=AliasChoices("relatedBookName", "bookName", "book_name"),
    )
    timestamp: dt.datetime = Field(validation_alias=AliasChoices("timestamp", "date"))

    @field_validator("kind", mode="before")
    @classmethod
    def _map_legacy_kind(cls, value):
        return LEGACY_ACTIVITY_KINDS.get(value, value)

    @classmethod
    def from_event(cls, event: ActivityEvent) -> "ActivityRecord":
        return cls(
            kind=event.kind,
            message=event.message,
            book_name=event.book_name,
            timestamp=event.timestamp,
        )

    def to_event(self) -> ActivityEvent:
        return ActivityEvent(
            kind=self.kind,
            message=self.message,
            book_name=self.book_name,
            timestamp=self.timestamp,
        )


class AchievementRecord(_Record):
    """Serialized unlock state of one achievement."""

    id: str
    unlocked: bool = False

    @classmethod
    def from_achievement(cls, achievement: Achievement) -> "AchievementRecord":
        return cls(id=achievement.id, unlocked=achievement.unlocked)

    def to_achievement(self) -> Achievement:
        return Achievement(id=self.id, unlocked=self.unlocked)


class HiddenSuggestionsRecord(_Record):
    """Serialized dismissed suggestions."""

    names: list[str] = Field(default_factory=list)
    authors: list[str] = Field(default_factory=list)

    @classmethod
    def from_hidden(cls, hidden: HiddenSuggestions) -> "HiddenSuggestionsRecord":
        return cls(names=list(hidden.names), authors=list(hidden.authors))

    def to_hidden(self) -> HiddenSuggestions:
        return HiddenSuggestions(names=list(self.names), authors=list(self.authors))


class SnapshotDocument(_Record):
    """The full exported state of the tracker.

    Every top-level slice is optional on input; a slice that is absent
    leaves the live value untouched when the snapshot is applied.
    """

    books: list[BookRecord] | None = None
    streaks: StreakRecord | None = None
    activity_feed: list[ActivityRecord] | None = Field(
        default=None,
        alias="activityFeed",
        validation_alias=AliasChoices("activityFeed", "activity_feed"),
    )
    achievements: list[AchievementRecord] | None = None
    daily_goal: int | None = Field(
        default=None,
        gt=0,
        alias="dailyGoal",
        validation_alias=AliasChoices("dailyGoal", "daily_goal"),
    )
    export_date: dt.datetime | None = Field(
        default=None,
        alias="exportDate",
        validation_alias=AliasChoices("exportDate", "export_date"),
    )

    @model_validator(mode="after")
    def _check_contents(self) -> "SnapshotDocument":
        slices = (self.books, self.streaks, self.activity_feed, self.achievements, self.daily_goal)
        if all(value is None for value in slices):
            raise ValueError("document contains no tracker data")
        if self.books is not None:
            ids = [book.id for book in self.books]
            if len(ids) != len(set(ids)):
                raise ValueError("duplicate book ids")
        return self
