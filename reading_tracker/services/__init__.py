"""Business logic services for Reading Tracker."""

from .achievement_service import ACHIEVEMENTS, AchievementService, build_context
from .snapshot_service import SnapshotService
from .state_repository import StateRepository
from .stats_service import StatsService
from .storage_service import LocalStorage
from .streak_calculator import calculate_streaks, collect_log_dates

__all__ = [
    "ACHIEVEMENTS",
    "AchievementService",
    "build_context",
    "SnapshotService",
    "StateRepository",
    "StatsService",
    "LocalStorage",
    "calculate_streaks",
    "collect_log_dates",
]
