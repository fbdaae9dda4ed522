"""CLI commands that add, change and remove books."""

from reading_tracker.cli.commands.common import confirm, open_store
from reading_tracker.exceptions import ReadingTrackerException
from reading_tracker.presenters import ConsolePresenter


def _target_from_args(args) -> int:
    """Pages for paper books; hours and minutes combined for audio books."""
    if args.medium == "audio":
        return (args.hours or 0) * 60 + (args.minutes or 0)
    return args.pages or 0


def add_command(args) -> int:
    """Execute the add subcommand.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 = success, 1 = failure)
    """
    presenter = ConsolePresenter()
    try:
        store = open_store(args)
        book = store.create_book(
            name=args.name,
            author=args.author,
            medium=args.medium,
            target=_target_from_args(args),
            category=args.category,
            cover_reference=args.cover,
        )
    except ReadingTrackerException as e:
        presenter.show_error(str(e))
        return 1

    presenter.show_success(f'Added "{book.name}" ({book.id})')
    return 0


def edit_command(args) -> int:
    """Execute the edit subcommand."""
    presenter = ConsolePresenter()
    changes = {
        key: value
        for key, value in (
            ("name", args.name),
            ("author", args.author),
            ("medium", args.medium),
            ("target", args.target),
            ("category", args.category),
            ("cover_reference", args.cover),
        )
        if value is not None
    }
    if not changes:
        presenter.show_warning("Nothing to change")
        return 1

    try:
        store = open_store(args)
        book = store.edit_book(args.book_id, **changes)
    except ReadingTrackerException as e:
        presenter.show_error(str(e))
        return 1

    presenter.show_success(f'Updated "{book.name}"')
    return 0


def category_command(args) -> int:
    """Execute the category subcommand."""
    presenter = ConsolePresenter()
    try:
        store = open_store(args)
        book = store.change_category(args.book_id, args.category)
    except ReadingTrackerException as e:
        presenter.show_error(str(e))
        return 1

    presenter.show_success(f'Moved "{book.name}" to {book.category}')
    return 0


def complete_command(args) -> int:
    """Execute the complete subcommand (toggles completion)."""
    presenter = ConsolePresenter()
    try:
        store = open_store(args)
        completed = store.toggle_completion(args.book_id)
        book = store.get_book(args.book_id)
    except ReadingTrackerException as e:
        presenter.show_error(str(e))
        return 1

    if completed:
        presenter.show_success(f'"{book.name}" is completed')
    else:
        presenter.show_success(f'"{book.name}" is no longer marked completed')
    return 0


def delete_command(args) -> int:
    """Execute the delete subcommand."""
    presenter = ConsolePresenter()
    try:
        store = open_store(args)
        book = store.get_book(args.book_id)
        if not confirm(presenter, f'Delete "{book.name}" and all its progress?', args.yes):
            presenter.show_info("Cancelled")
            return 1
        store.delete_book(args.book_id)
    except ReadingTrackerException as e:
        presenter.show_error(str(e))
        return 1

    presenter.show_success(f'Deleted "{book.name}"')
    return 0
