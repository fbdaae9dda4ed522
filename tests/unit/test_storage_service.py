"""Tests for local JSON storage and the state repository."""

import json
from datetime import date

import pytest

from reading_tracker.models import (
    Achievement,
    ActivityFeed,
    ActivityKind,
    HiddenSuggestions,
    StreakState,
    Theme,
)
from reading_tracker.services import LocalStorage, StateRepository


@pytest.fixture
def storage(test_config):
    return LocalStorage(test_config.data_dir)


@pytest.fixture
def repository(storage, test_config):
    return StateRepository(storage, test_config)


class TestLocalStorage:
    """Tests for LocalStorage."""

    def test_read_missing_key(self, storage):
        assert storage.read("books") is None
        assert not storage.has("books")

    def test_write_then_read(self, storage):
        storage.write("theme", "dark")

        assert storage.has("theme")
        assert storage.read("theme") == "dark"
        assert storage.path_for("theme").name == "theme.json"

    def test_write_leaves_no_temp_file(self, storage):
        storage.write("books", [])
        assert [path.name for path in storage.data_dir.iterdir()] == ["books.json"]

    def test_unreadable_file_is_quarantined(self, storage):
        storage.data_dir.mkdir(parents=True)
        storage.path_for("books").write_text("{not json", encoding="utf-8")

        assert storage.read("books") is None
        assert not storage.has("books")
        assert (storage.data_dir / "books.json.bak").read_text(encoding="utf-8") == "{not json"

    def test_remove(self, storage):
        storage.write("dailyGoal", 10)

        assert storage.remove("dailyGoal") is True
        assert storage.remove("dailyGoal") is False

    def test_quarantine_missing_key(self, storage):
        assert storage.quarantine("streaks") is None


class TestStateRepository:
    """Tests for StateRepository."""

    def test_defaults_when_empty(self, repository, test_config):
        assert repository.load_books() == []
        assert repository.load_streaks() == StreakState()
        assert repository.load_activity() == []
        assert repository.load_achievements() is None
        assert repository.load_hidden_suggestions() == HiddenSuggestions()
        assert repository.load_theme() == Theme.LIGHT
        assert repository.load_daily_goal() == test_config.default_daily_goal

    def test_books_round_trip(self, repository, make_book):
        book = make_book(logs=[(date(2024, 1, 2), 20), (date(2024, 1, 1), 10)])
        repository.save_books([book])

        loaded = repository.load_books()

        assert loaded == [book]

    def test_books_file_uses_persisted_key_names(self, repository, storage, make_book):
        repository.save_books([make_book()])
        raw = json.loads(storage.path_for("books").read_text(encoding="utf-8"))

        assert set(raw[0]) >= {"id", "medium", "target", "coverReference", "completedFlag"}

    def test_other_slices_round_trip(self, repository):
        feed = ActivityFeed()
        feed.record(ActivityKind.ADDED, 'Added book "Dune"', "Dune")
        hidden = HiddenSuggestions(names=["Dune"], authors=[])

        repository.save_streaks(StreakState(current=2, longest=9))
        repository.save_activity(feed.get_all())
        repository.save_achievements([Achievement(id="first-book", unlocked=True)])
        repository.save_hidden_suggestions(hidden)
        repository.save_theme(Theme.DARK)
        repository.save_daily_goal(25)

        assert repository.load_streaks() == StreakState(current=2, longest=9)
        assert repository.load_activity() == feed.get_all()
        assert repository.load_achievements() == [Achievement(id="first-book", unlocked=True)]
        assert repository.load_hidden_suggestions() == hidden
        assert repository.load_theme() == Theme.DARK
        assert repository.load_daily_goal() == 25

    def test_invalid_slice_is_quarantined(self, repository, storage):
        storage.write("books", [{"id": "x", "name": ""}])

        assert repository.load_books() == []
        assert (storage.data_dir / "books.json.bak").exists()
        assert not storage.has("books")

    def test_invalid_theme_falls_back(self, repository, storage):
        storage.write("theme", "sepia")
        assert repository.load_theme() == Theme.LIGHT

    def test_non_positive_goal_falls_back(self, repository, storage, test_config):
        storage.write("dailyGoal", 0)
        assert repository.load_daily_goal() == test_config.default_daily_goal
