"""Data models for achievements."""

from collections.abc import Callable
from dataclasses import dataclass


@dataclass(frozen=True)
class AchievementContext:
    """Snapshot of the global state achievement rules are checked against."""

    book_count: int = 0
    completed_count: int = 0
    current_streak: int = 0


@dataclass(frozen=True)
class AchievementDefinition:
    """A rule in the fixed achievement catalog."""

    id: str
    name: str
    description: str
    icon: str
    predicate: Callable[[AchievementContext], bool]

    def is_met(self, context: AchievementContext) -> bool:
        """Check whether the rule holds for the given state."""
        return self.predicate(context)


@dataclass
class Achievement:
    """Unlock state of one catalog entry."""

    id: str
    unlocked: bool = False
