"""CLI commands for preferences and suggestions."""

from reading_tracker.cli.commands.common import open_store
from reading_tracker.exceptions import ReadingTrackerException
from reading_tracker.models import SuggestionKind
from reading_tracker.presenters import ConsolePresenter


def goal_command(args) -> int:
    """Execute the goal subcommand: show or set the daily page goal."""
    presenter = ConsolePresenter()
    try:
        store = open_store(args)
        if args.pages is None:
            presenter.show_info(f"Daily goal: {store.daily_goal} pages")
            return 0
        store.set_daily_goal(args.pages)
    except ReadingTrackerException as e:
        presenter.show_error(str(e))
        return 1

    presenter.show_success(f"Daily goal set to {store.daily_goal} pages")
    return 0


def theme_command(args) -> int:
    """Execute the theme subcommand: toggle between light and dark."""
    presenter = ConsolePresenter()
    try:
        store = open_store(args)
        theme = store.toggle_theme()
    except ReadingTrackerException as e:
        presenter.show_error(str(e))
        return 1

    presenter.show_success(f"Theme is now {theme.value}")
    return 0


def suggest_command(args) -> int:
    """Execute the suggest subcommand."""
    presenter = ConsolePresenter()
    try:
        store = open_store(args)
    except ReadingTrackerException as e:
        presenter.show_error(str(e))
        return 1

    values = store.suggest(SuggestionKind(args.kind), args.prefix or "")
    if not values:
        presenter.show_info("No suggestions")
    for value in values:
        presenter.show_info(value)
    return 0


def hide_suggestion_command(args) -> int:
    """Execute the hide-suggestion subcommand."""
    presenter = ConsolePresenter()
    try:
        store = open_store(args)
        hidden = store.hide_suggestion(SuggestionKind(args.kind), args.value)
    except ReadingTrackerException as e:
        presenter.show_error(str(e))
        return 1

    if hidden:
        presenter.show_success(f'"{args.value}" will no longer be suggested')
    else:
        presenter.show_info(f'"{args.value}" was already hidden')
    return 0
