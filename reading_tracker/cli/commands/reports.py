"""CLI commands that display books, statistics and history."""

from reading_tracker.cli.commands.common import open_store
from reading_tracker.exceptions import ReadingTrackerException
from reading_tracker.models import Medium
from reading_tracker.presenters import ConsolePresenter
from reading_tracker.services import book_query


def list_command(args) -> int:
    """Execute the list subcommand.

    Books are grouped into paper and audio sections, each sorted by name.
    """
    presenter = ConsolePresenter()
    try:
        store = open_store(args)
    except ReadingTrackerException as e:
        presenter.show_error(str(e))
        return 1

    books = book_query.filter_by_category(store.books, args.category)
    books = book_query.search_books(books, args.search or "")

    if args.completed:
        presenter.show_info(f"\nCompleted books ({len(book_query.completed_books(books))}):")
        presenter.show_books(book_query.completed_books(books))
        return 0

    if not books:
        if args.search:
            presenter.show_info(f'No books found for "{args.search}"')
        else:
            presenter.show_books([])
        return 0

    groups = book_query.group_by_medium(books)
    titles = {Medium.PAPER: "Paper books", Medium.AUDIO: "Audiobooks"}
    for medium, group in groups.items():
        if not group:
            continue
        presenter.show_info(f"\n{titles[medium]} ({len(group)}):")
        presenter.show_books(group)
    return 0


def show_command(args) -> int:
    """Execute the show subcommand."""
    presenter = ConsolePresenter()
    try:
        store = open_store(args)
        book = store.get_book(args.book_id)
    except ReadingTrackerException as e:
        presenter.show_error(str(e))
        return 1

    presenter.show_book_detail(book)
    return 0


def stats_command(args) -> int:
    """Execute the stats subcommand."""
    presenter = ConsolePresenter()
    try:
        store = open_store(args)
    except ReadingTrackerException as e:
        presenter.show_error(str(e))
        return 1

    presenter.show_stats(store.get_stats(), store.streaks)
    return 0


def activity_command(args) -> int:
    """Execute the activity subcommand."""
    presenter = ConsolePresenter()
    try:
        store = open_store(args)
    except ReadingTrackerException as e:
        presenter.show_error(str(e))
        return 1

    presenter.show_activity(store.get_activity()[: args.limit])
    return 0


def achievements_command(args) -> int:
    """Execute the achievements subcommand."""
    presenter = ConsolePresenter()
    try:
        store = open_store(args)
    except ReadingTrackerException as e:
        presenter.show_error(str(e))
        return 1

    presenter.show_achievements(store.get_achievements())
    return 0
