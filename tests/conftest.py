"""Pytest configuration and shared fixtures."""

from datetime import date, timedelta

import pytest

from reading_tracker.config import create_default_config
from reading_tracker.models import Book, Medium, ReadingLog
from reading_tracker.orchestration import RecordStore
from reading_tracker.services import LocalStorage, StateRepository

FIXED_TODAY = date(2024, 1, 3)


class FakeClock:
    """A controllable "today" for store tests."""

    def __init__(self, today: date = FIXED_TODAY):
        self.current = today

    def __call__(self) -> date:
        return self.current

    def advance(self, days: int = 1) -> None:
        self.current += timedelta(days=days)


@pytest.fixture
def temp_dir(tmp_path):
    """Provide a temporary directory for test files."""
    return tmp_path


@pytest.fixture
def test_config(temp_dir):
    """Provide a test configuration with a temporary data directory."""
    return create_default_config(data_dir=temp_dir / "data")


@pytest.fixture
def clock():
    """Provide a clock fixed at 2024-01-03."""
    return FakeClock()


@pytest.fixture
def make_store(test_config, clock):
    """Factory fixture for loading record stores over the test data directory."""

    def _make(config=None, today_provider=None):
        config = config or test_config
        repository = StateRepository(LocalStorage(config.data_dir), config)
        store = RecordStore(config, repository, today_provider=today_provider or clock)
        store.load()
        return store

    return _make


@pytest.fixture
def store(make_store):
    """Provide an empty, loaded record store."""
    return make_store()


@pytest.fixture
def make_book():
    """Factory fixture for creating Book instances with sensible defaults."""

    def _make(
        name="Dune",
        author="Frank Herbert",
        medium=Medium.PAPER,
        target=400,
        category="agreement-a",
        logs=None,
        **kwargs,
    ):
        return Book(
            name=name,
            author=author,
            medium=medium,
            target=target,
            category=category,
            logs=[ReadingLog(date=day, amount=amount) for day, amount in (logs or [])],
            **kwargs,
        )

    return _make
