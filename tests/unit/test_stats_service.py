"""Tests for the statistics service."""

from datetime import date

import pytest

from reading_tracker.models import BookStatus, LibraryStats, Medium
from reading_tracker.services.stats_service import StatsService

TODAY = date(2024, 1, 3)


@pytest.fixture
def service(test_config):
    return StatsService(test_config)


class TestGetLibraryStats:
    """Tests for StatsService.get_library_stats."""

    def test_empty_collection(self, service):
        stats = service.get_library_stats([], TODAY)

        assert stats.total_books == 0
        assert stats.completed_books == 0
        assert stats.pages_read == 0
        assert stats.audio_minutes == 0
        assert stats.books_by_category == {
            "agreement-a": 0,
            "agreement-b": 0,
            "free-choice": 0,
        }

    def test_rolls_up_paper_and_audio(self, service, make_book):
        paper = make_book(target=300, logs=[(date(2024, 1, 1), 100), (TODAY, 30)])
        finished = make_book(name="Emma", target=50, logs=[(date(2024, 1, 2), 50)])
        finished.status = BookStatus.COMPLETED
        audio = make_book(
            name="Hamlet",
            medium=Medium.AUDIO,
            target=600,
            category="free-choice",
            logs=[(TODAY, 125)],
        )

        stats = service.get_library_stats([paper, finished, audio], TODAY, daily_goal=40)

        assert stats.total_books == 3
        assert stats.completed_books == 1
        assert stats.pages_read == 180
        assert stats.pages_today == 30
        assert stats.audio_minutes == 125
        assert stats.audio_hours == 2
        assert stats.audio_remainder_minutes == 5
        assert stats.daily_goal == 40
        assert stats.daily_goal_percentage == 75
        assert stats.books_by_category["agreement-a"] == 2
        assert stats.books_by_category["free-choice"] == 1


class TestLibraryStats:
    """Tests for LibraryStats derived values."""

    def test_completion_rate(self):
        assert LibraryStats().completion_rate == 0.0
        assert LibraryStats(total_books=4, completed_books=1).completion_rate == 0.25

    def test_daily_goal_percentage_capped(self):
        assert LibraryStats(pages_today=120, daily_goal=50).daily_goal_percentage == 100

    def test_daily_goal_percentage_without_goal(self):
        assert LibraryStats(pages_today=10, daily_goal=0).daily_goal_percentage == 0
