"""Achievement catalog and unlock evaluation."""

import logging
from collections.abc import Iterable

from reading_tracker.models.achievement import (
    Achievement,
    AchievementContext,
    AchievementDefinition,
)
from reading_tracker.models.book import Book, BookStatus

logger = logging.getLogger(__name__)

ACHIEVEMENTS: tuple[AchievementDefinition, ...] = (
    AchievementDefinition(
        id="first-book",
        name="First Book",
        description="Add your first book",
        icon="📚",
        predicate=lambda ctx: ctx.book_count >= 1,
    ),
    AchievementDefinition(
        id="five-books",
        name="5 Books",
        description="Add 5 books",
        icon="📖",
        predicate=lambda ctx: ctx.book_count >= 5,
    ),
    AchievementDefinition(
        id="first-complete",
        name="First Finish",
        description="Complete your first book",
        icon="✅",
        predicate=lambda ctx: ctx.completed_count >= 1,
    ),
    AchievementDefinition(
        id="five-complete",
        name="5 Completed",
        description="Complete 5 books",
        icon="🏆",
        predicate=lambda ctx: ctx.completed_count >= 5,
    ),
    AchievementDefinition(
        id="streak-7",
        name="7 Day Streak",
        description="Keep a 7 day reading streak",
        icon="🔥",
        predicate=lambda ctx: ctx.current_streak >= 7,
    ),
    AchievementDefinition(
        id="streak-30",
        name="30 Day Streak",
        description="Keep a 30 day reading streak",
        icon="⭐",
        predicate=lambda ctx: ctx.current_streak >= 30,
    ),
)


def build_context(books: Iterable[Book], current_streak: int) -> AchievementContext:
    """Snapshot the global state the achievement rules look at."""
    books = list(books)
    return AchievementContext(
        book_count=len(books),
        completed_count=sum(1 for book in books if book.status == BookStatus.COMPLETED),
        current_streak=current_streak,
    )


class AchievementService:
    """Evaluate the fixed achievement catalog against tracker state.

    Unlocks are monotonic: once an achievement is unlocked, no evaluation
    locks it again.
    """

    def __init__(self, catalog: tuple[AchievementDefinition, ...] = ACHIEVEMENTS):
        """Initialize the service.

        Args:
            catalog: Achievement definitions to evaluate
        """
        self.catalog = catalog

    def initial_states(self) -> list[Achievement]:
        """Unlock table with every catalog entry locked."""
        return [Achievement(id=definition.id) for definition in self.catalog]

    def merge_states(self, persisted: Iterable[Achievement]) -> list[Achievement]:
        """Align a persisted unlock table with the catalog.

        Entries missing from the persisted table start locked; entries the
        catalog no longer defines are dropped.

        Args:
            persisted: Unlock states read from storage or a snapshot

        Returns:
            One Achievement per catalog entry, in catalog order
        """
        unlocked = {state.id for state in persisted if state.unlocked}
        return [
            Achievement(id=definition.id, unlocked=definition.id in unlocked)
            for definition in self.catalog
        ]

    def evaluate(
        self, states: list[Achievement], context: AchievementContext
    ) -> list[AchievementDefinition]:
        """Unlock every locked achievement whose rule now holds.

        Args:
            states: Unlock table, updated in place
            context: Current global state

        Returns:
            Definitions of the achievements unlocked by this pass
        """
        by_id = {state.id: state for state in states}
        newly_unlocked: list[AchievementDefinition] = []

        for definition in self.catalog:
            state = by_id.get(definition.id)
            if state is None:
                state = Achievement(id=definition.id)
                states.append(state)
                by_id[definition.id] = state
            if state.unlocked or not definition.is_met(context):
                continue
            state.unlocked = True
            newly_unlocked.append(definition)
            logger.info(f"Achievement unlocked: {definition.id}")

        return newly_unlocked

    def get_definition(self, achievement_id: str) -> AchievementDefinition | None:
        """Look up a catalog entry by id."""
        for definition in self.catalog:
            if definition.id == achievement_id:
                return definition
        return None
