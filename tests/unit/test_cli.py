"""Tests for the command-line interface."""

import json

import pytest

from reading_tracker.cli.commands.common import confirm
from reading_tracker.cli.main import build_parser, main
from reading_tracker.config import create_default_config
from reading_tracker.orchestration import RecordStore
from reading_tracker.presenters import NullPresenter


@pytest.fixture
def data_dir(temp_dir):
    return temp_dir / "data"


@pytest.fixture
def run(data_dir):
    """Run the CLI against the temporary data directory."""

    def _run(*argv):
        return main(["--data-dir", str(data_dir), *argv])

    return _run


def _load(data_dir):
    return RecordStore.open(create_default_config(data_dir=data_dir))


def _add_dune(run, data_dir):
    assert run("add", "Dune", "Frank Herbert", "--pages", "400") == 0
    return _load(data_dir).books[0].id


class TestParser:
    """Tests for build_parser."""

    def test_no_command_prints_help(self, run, capsys):
        assert run() == 1
        assert "usage:" in capsys.readouterr().out

    def test_unknown_medium_rejected(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["add", "Dune", "Herbert", "--medium", "vinyl"])


class TestBookCommands:
    """Tests for add, log, complete, edit, category and delete."""

    def test_add(self, run, data_dir, capsys):
        book_id = _add_dune(run, data_dir)

        out = capsys.readouterr().out
        assert f'[OK] Added "Dune" ({book_id})' in out

    def test_add_audio_combines_hours_and_minutes(self, run, data_dir):
        args = ("add", "Emma", "Austen", "--medium", "audio", "--hours", "2", "--minutes", "5")
        assert run(*args) == 0
        assert _load(data_dir).books[0].target == 125

    def test_add_without_target_fails(self, run, data_dir, capsys):
        assert run("add", "Dune", "Frank Herbert") == 1
        assert "[ERROR] Target must be a positive whole number" in capsys.readouterr().out
        assert _load(data_dir).books == []

    def test_log(self, run, data_dir, capsys):
        book_id = _add_dune(run, data_dir)

        assert run("log", book_id, "--pages", "100", "--date", "today") == 0

        out = capsys.readouterr().out
        assert 'Logged 100 pages for "Dune" (25%)' in out
        assert "Current streak: 1 days" in out

    def test_log_invalid_date(self, run, data_dir, capsys):
        book_id = _add_dune(run, data_dir)

        assert run("log", book_id, "--pages", "10", "--date", "soon") == 1
        assert "Invalid date" in capsys.readouterr().out

    def test_log_unknown_book(self, run, capsys):
        assert run("log", "nope", "--pages", "10") == 1
        assert "[ERROR] Book not found: nope" in capsys.readouterr().out

    def test_complete_toggle(self, run, data_dir, capsys):
        book_id = _add_dune(run, data_dir)

        assert run("complete", book_id) == 0

        assert '"Dune" is completed' in capsys.readouterr().out
        assert _load(data_dir).books[0].status.value == "completed"

    def test_edit(self, run, data_dir, capsys):
        book_id = _add_dune(run, data_dir)

        assert run("edit", book_id, "--name", "Dune Messiah", "--target", "350") == 0

        book = _load(data_dir).books[0]
        assert (book.name, book.target) == ("Dune Messiah", 350)

    def test_edit_nothing(self, run, data_dir, capsys):
        book_id = _add_dune(run, data_dir)
        assert run("edit", book_id) == 1
        assert "Nothing to change" in capsys.readouterr().out

    def test_category(self, run, data_dir):
        book_id = _add_dune(run, data_dir)

        assert run("category", book_id, "free-choice") == 0
        assert run("category", book_id, "poetry") == 1
        assert _load(data_dir).books[0].category == "free-choice"

    def test_delete_with_yes(self, run, data_dir):
        book_id = _add_dune(run, data_dir)

        assert run("delete", book_id, "--yes") == 0
        assert _load(data_dir).books == []

    def test_delete_declined(self, run, data_dir, monkeypatch):
        book_id = _add_dune(run, data_dir)
        monkeypatch.setattr("builtins.input", lambda prompt: "n")

        assert run("delete", book_id) == 1
        assert len(_load(data_dir).books) == 1


class TestReportCommands:
    """Tests for list, show, stats, activity and achievements."""

    def test_list_empty(self, run, capsys):
        assert run("list") == 0
        assert "No books yet" in capsys.readouterr().out

    def test_list_groups_by_medium(self, run, data_dir, capsys):
        _add_dune(run, data_dir)
        run("add", "Emma", "Austen", "--medium", "audio", "--hours", "3")
        capsys.readouterr()

        assert run("list") == 0

        out = capsys.readouterr().out
        assert "Paper books (1):" in out
        assert "Audiobooks (1):" in out
        assert out.index("Dune") < out.index("Emma")

    def test_list_search_without_match(self, run, data_dir, capsys):
        _add_dune(run, data_dir)
        assert run("list", "--search", "tolstoy") == 0
        assert 'No books found for "tolstoy"' in capsys.readouterr().out

    def test_show(self, run, data_dir, capsys):
        book_id = _add_dune(run, data_dir)
        run("log", book_id, "--pages", "40", "--date", "2024-01-01")
        capsys.readouterr()

        assert run("show", book_id) == 0

        out = capsys.readouterr().out
        assert "Author:   Frank Herbert" in out
        assert "2024-01-01  40 pages" in out

    def test_stats(self, run, data_dir, capsys):
        _add_dune(run, data_dir)
        capsys.readouterr()

        assert run("stats") == 0

        out = capsys.readouterr().out
        assert "Books:           1" in out
        assert "Current streak:  0 days" in out

    def test_activity(self, run, data_dir, capsys):
        _add_dune(run, data_dir)
        capsys.readouterr()

        assert run("activity", "--limit", "1") == 0

        out = capsys.readouterr().out
        assert "[achievement] Unlocked: First Book" in out
        assert "Added book" not in out

    def test_achievements(self, run, data_dir, capsys):
        _add_dune(run, data_dir)
        capsys.readouterr()

        assert run("achievements") == 0

        out = capsys.readouterr().out
        assert "(1/6 unlocked)" in out
        assert "[x]" in out


class TestSettingsCommands:
    """Tests for goal, theme and suggestion commands."""

    def test_goal(self, run, data_dir, capsys):
        assert run("goal", "30") == 0
        assert run("goal") == 0
        assert "Daily goal: 30 pages" in capsys.readouterr().out

    def test_goal_rejects_zero(self, run, capsys):
        assert run("goal", "0") == 1

    def test_theme(self, run, capsys):
        assert run("theme") == 0
        assert "Theme is now dark" in capsys.readouterr().out

    def test_suggest_and_hide(self, run, data_dir, capsys):
        _add_dune(run, data_dir)
        capsys.readouterr()

        assert run("suggest", "author", "fr") == 0
        assert "Frank Herbert" in capsys.readouterr().out

        assert run("hide-suggestion", "author", "Frank Herbert") == 0
        run("suggest", "author")
        assert "No suggestions" in capsys.readouterr().out


class TestSnapshotCommands:
    """Tests for export and import."""

    def test_export_then_import(self, run, data_dir, temp_dir, capsys):
        book_id = _add_dune(run, data_dir)
        output = temp_dir / "backup.json"

        assert run("export", "-o", str(output)) == 0
        assert json.loads(output.read_text(encoding="utf-8"))["books"][0]["id"] == book_id

        run("delete", book_id, "--yes")
        assert run("import", str(output), "--yes") == 0
        assert [book.id for book in _load(data_dir).books] == [book_id]

    def test_import_malformed_changes_nothing(self, run, data_dir, temp_dir, capsys):
        _add_dune(run, data_dir)
        bad = temp_dir / "bad.json"
        bad.write_text('{"books": [{"name": "no id"}]}', encoding="utf-8")

        assert run("import", str(bad), "--yes") == 1

        assert "[ERROR] Snapshot has an invalid shape" in capsys.readouterr().out
        assert len(_load(data_dir).books) == 1

    def test_import_cancelled_on_eof(self, run, data_dir, temp_dir, monkeypatch):
        book_id = _add_dune(run, data_dir)
        output = temp_dir / "backup.json"
        run("export", "-o", str(output))
        run("delete", book_id, "--yes")

        def _no_input(prompt):
            raise EOFError

        monkeypatch.setattr("builtins.input", _no_input)

        assert run("import", str(output)) == 1
        assert _load(data_dir).books == []


class TestConfirm:
    """Tests for the confirm helper."""

    def test_assume_yes_skips_prompt(self, monkeypatch):
        monkeypatch.setattr("builtins.input", lambda prompt: pytest.fail("prompted"))
        assert confirm(NullPresenter(), "Delete?", assume_yes=True) is True

    @pytest.mark.parametrize("answer, expected", [("y", True), (" YES ", True), ("", False)])
    def test_answers(self, monkeypatch, answer, expected):
        monkeypatch.setattr("builtins.input", lambda prompt: answer)
        assert confirm(NullPresenter(), "Delete?", assume_yes=False) is expected
