"""CLI commands for exporting and importing full snapshots."""

from datetime import date
from pathlib import Path

from reading_tracker.cli.commands.common import confirm, open_store
from reading_tracker.exceptions import ReadingTrackerException
from reading_tracker.presenters import ConsolePresenter
from reading_tracker.services import SnapshotService


def export_command(args) -> int:
    """Execute the export subcommand.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 = success, 1 = failure)
    """
    presenter = ConsolePresenter()
    output_path = Path(args.output or f"reading-tracker-{date.today().isoformat()}.json")
    try:
        store = open_store(args)
        store.export_to_file(output_path)
    except ReadingTrackerException as e:
        presenter.show_error(str(e))
        return 1
    except OSError as e:
        presenter.show_error(f"Could not write {output_path}: {e}")
        return 1

    presenter.show_success(f"Exported {len(store.books)} books to {output_path}")
    return 0


def import_command(args) -> int:
    """Execute the import subcommand.

    The file is validated completely before anything is replaced, and the
    user must confirm the replacement unless ``--yes`` is given.
    """
    presenter = ConsolePresenter()
    try:
        store = open_store(args)
        document = SnapshotService().read_file(Path(args.input))
    except ReadingTrackerException as e:
        presenter.show_error(str(e))
        return 1

    book_count = len(document.books) if document.books is not None else 0
    prompt = (
        f"Replace current data with {book_count} books from {args.input}?"
        if document.books is not None
        else f"Replace current data with the contents of {args.input}?"
    )
    if not confirm(presenter, prompt, args.yes):
        presenter.show_info("Import cancelled; nothing was changed")
        return 1

    store.import_snapshot(document)
    presenter.show_success(f"Imported data from {args.input}")
    return 0
