"""Tests for the snapshot service."""

import json

import pytest

from reading_tracker.exceptions import MalformedSnapshotError
from reading_tracker.models.records import SnapshotDocument
from reading_tracker.services import SnapshotService


@pytest.fixture
def service():
    return SnapshotService()


VALID = {
    "books": [
        {
            "id": "b1",
            "name": "Dune",
            "author": "Frank Herbert",
            "medium": "paper",
            "target": 400,
            "category": "agreement-a",
            "logs": [{"date": "2024-01-01", "amount": 100}],
            "status": "in-progress",
            "completedFlag": False,
        }
    ],
    "streaks": {"currentStreak": 0, "longestStreak": 1},
    "activityFeed": [],
    "achievements": [{"id": "first-book", "unlocked": True}],
    "dailyGoal": 50,
    "exportDate": "2024-01-03T12:00:00+00:00",
}


class TestParse:
    """Tests for SnapshotService.parse."""

    def test_valid_document(self, service):
        document = service.parse(json.dumps(VALID))

        assert len(document.books) == 1
        assert document.streaks.longest == 1
        assert document.daily_goal == 50

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "{broken",
            "[1, 2, 3]",
            '"books"',
            "{}",
            json.dumps({"books": [{"id": "b1", "name": "Dune"}]}),
            json.dumps({"books": "many"}),
        ],
    )
    def test_malformed(self, service, text):
        with pytest.raises(MalformedSnapshotError):
            service.parse(text)

    def test_error_describes_shape_problem(self, service):
        data = dict(VALID, dailyGoal=-5)

        with pytest.raises(MalformedSnapshotError, match="invalid shape"):
            service.parse(json.dumps(data))


class TestFiles:
    """Tests for writing and reading snapshot files."""

    def test_write_then_read(self, service, temp_dir):
        document = SnapshotDocument.model_validate(VALID)
        path = service.write_file(document, temp_dir / "out" / "snapshot.json")

        assert service.read_file(path) == document

    def test_dumps_uses_export_key_names(self, service):
        data = json.loads(service.dumps(SnapshotDocument.model_validate(VALID)))

        assert set(data) == {
            "books",
            "streaks",
            "activityFeed",
            "achievements",
            "dailyGoal",
            "exportDate",
        }
        assert data["streaks"] == {"currentStreak": 0, "longestStreak": 1}

    def test_missing_file(self, service, temp_dir):
        with pytest.raises(MalformedSnapshotError, match="Cannot read"):
            service.read_file(temp_dir / "missing.json")
