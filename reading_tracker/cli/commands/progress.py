"""CLI command for logging reading progress."""

from reading_tracker.cli.commands.common import open_store
from reading_tracker.exceptions import ReadingTrackerException
from reading_tracker.models import Medium
from reading_tracker.presenters import ConsolePresenter
from reading_tracker.services.progress_engine import progress_percentage
from reading_tracker.utils.date_utils import parse_date
from reading_tracker.utils.format_utils import format_amount


def log_command(args) -> int:
    """Execute the log subcommand.

    Paper books take ``--pages``; audio books take ``--hours`` and/or
    ``--minutes``.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 = success, 1 = failure)
    """
    presenter = ConsolePresenter()
    try:
        store = open_store(args)
        book = store.get_book(args.book_id)
        try:
            log_date = parse_date(args.date, today=store.today())
        except ValueError:
            presenter.show_error(f"Invalid date: {args.date} (expected YYYY-MM-DD)")
            return 1

        if book.medium == Medium.AUDIO:
            amount = (args.hours or 0) * 60 + (args.minutes or 0)
        else:
            amount = args.pages or 0

        store.append_log(book.id, log_date, amount)
    except ReadingTrackerException as e:
        presenter.show_error(str(e))
        return 1

    presenter.show_success(
        f'Logged {format_amount(amount, book.medium)} for "{book.name}" '
        f"({progress_percentage(book)}%)"
    )
    streaks = store.streaks
    presenter.show_info(f"Current streak: {streaks.current} days (best {streaks.longest})")
    return 0
