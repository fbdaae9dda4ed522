"""Data models for Reading Tracker."""

from .achievement import Achievement, AchievementContext, AchievementDefinition
from .activity import ActivityEvent, ActivityFeed, ActivityKind
from .book import Book, BookStatus, Medium, ReadingLog
from .preferences import Theme
from .stats import LibraryStats
from .streak import StreakState
from .suggestions import HiddenSuggestions, SuggestionKind

__all__ = [
    "Book",
    "BookStatus",
    "Medium",
    "ReadingLog",
    "ActivityEvent",
    "ActivityFeed",
    "ActivityKind",
    "Achievement",
    "AchievementContext",
    "AchievementDefinition",
    "StreakState",
    "LibraryStats",
    "HiddenSuggestions",
    "SuggestionKind",
    "Theme",
]
