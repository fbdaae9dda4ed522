"""Configuration classes for Reading Tracker."""

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class TrackerConfig:
    """Immutable configuration for the reading tracker.

    All configuration is frozen (immutable) so a store and the services
    it drives always agree on limits, categories and storage location.
    """

    # Storage settings
    data_dir: Path = field(default_factory=lambda: Path.home() / ".reading_tracker")

    # Activity feed settings
    activity_limit: int = 50  # Most recent events kept

    # Goal settings
    default_daily_goal: int = 50  # Pages per day

    # Category settings
    categories: tuple[str, ...] = ("agreement-a", "agreement-b", "free-choice")
    default_category: str = "agreement-a"

    def __post_init__(self):
        """Convert string paths to Path objects and normalize categories."""
        if isinstance(self.data_dir, str):
            object.__setattr__(self, "data_dir", Path(self.data_dir).expanduser())
        if isinstance(self.categories, list):
            object.__setattr__(self, "categories", tuple(self.categories))
        if self.default_category not in self.categories:
            raise ValueError(
                f"default_category {self.default_category!r} is not one of {self.categories}"
            )
