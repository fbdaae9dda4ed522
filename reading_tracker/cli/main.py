"""Main CLI entry point for reading_tracker."""

import argparse
import sys

from reading_tracker import __version__
from reading_tracker.cli.commands import books, progress, reports, settings, snapshot
from reading_tracker.cli.commands.common import configure_logging


def _add_book_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("book_id", help="Id of the book (see 'reading-tracker list')")


def _add_amount_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--pages", type=int, help="Pages (paper books)")
    parser.add_argument("--hours", type=int, help="Hours (audiobooks)")
    parser.add_argument("--minutes", type=int, help="Minutes (audiobooks)")


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="reading-tracker",
        description="Track books, reading progress, streaks and achievements",
        epilog="Use 'reading-tracker <command> --help' for command-specific help",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--data-dir",
        help="Directory holding tracker data (default: ~/.reading_tracker)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Show debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # reading-tracker add <name> <author>
    add_parser = subparsers.add_parser("add", help="Add a book")
    add_parser.add_argument("name", help="Book title")
    add_parser.add_argument("author", help="Author name")
    add_parser.add_argument(
        "--medium", choices=["paper", "audio"], default="paper", help="Paper book or audiobook"
    )
    _add_amount_arguments(add_parser)
    add_parser.add_argument("--category", help="Category tag")
    add_parser.add_argument("--cover", help="Cover image URL")

    # reading-tracker log <book_id>
    log_parser = subparsers.add_parser("log", help="Log reading progress")
    _add_book_argument(log_parser)
    _add_amount_arguments(log_parser)
    log_parser.add_argument(
        "--date", default="today", help="Day of the reading: YYYY-MM-DD, today or yesterday"
    )

    # reading-tracker complete <book_id>
    complete_parser = subparsers.add_parser(
        "complete",
        help="Toggle a book's completion",
        description="Mark a book completed, or reopen a completed one",
    )
    _add_book_argument(complete_parser)

    # reading-tracker category <book_id> <category>
    category_parser = subparsers.add_parser("category", help="Change a book's category")
    _add_book_argument(category_parser)
    category_parser.add_argument("category", help="New category tag")

    # reading-tracker edit <book_id>
    edit_parser = subparsers.add_parser("edit", help="Edit a book's details")
    _add_book_argument(edit_parser)
    edit_parser.add_argument("--name", help="New title")
    edit_parser.add_argument("--author", help="New author")
    edit_parser.add_argument("--medium", choices=["paper", "audio"], help="New medium")
    edit_parser.add_argument("--target", type=int, help="New total pages or minutes")
    edit_parser.add_argument("--category", help="New category tag")
    edit_parser.add_argument("--cover", help="New cover image URL")

    # reading-tracker delete <book_id>
    delete_parser = subparsers.add_parser("delete", help="Delete a book and its progress")
    _add_book_argument(delete_parser)
    delete_parser.add_argument("-y", "--yes", action="store_true", help="Do not ask to confirm")

    # reading-tracker list
    list_parser = subparsers.add_parser("list", help="List books")
    list_parser.add_argument("--category", help="Only books in this category ('all' for every)")
    list_parser.add_argument("--search", help="Only books whose title or author contains this")
    list_parser.add_argument("--completed", action="store_true", help="Only completed books")

    # reading-tracker show <book_id>
    show_parser = subparsers.add_parser("show", help="Show a book and its progress history")
    _add_book_argument(show_parser)

    subparsers.add_parser("stats", help="Show reading statistics and streaks")

    activity_parser = subparsers.add_parser("activity", help="Show recent activity")
    activity_parser.add_argument("--limit", type=int, default=20, help="Number of entries")

    subparsers.add_parser("achievements", help="Show achievements")

    goal_parser = subparsers.add_parser("goal", help="Show or set the daily page goal")
    goal_parser.add_argument("pages", nargs="?", type=int, help="New daily goal in pages")

    subparsers.add_parser("theme", help="Toggle between light and dark theme")

    suggest_parser = subparsers.add_parser("suggest", help="Suggest previously used names/authors")
    suggest_parser.add_argument("kind", choices=["name", "author"])
    suggest_parser.add_argument("prefix", nargs="?", default="", help="Text the value starts with")

    hide_parser = subparsers.add_parser("hide-suggestion", help="Stop suggesting a name/author")
    hide_parser.add_argument("kind", choices=["name", "author"])
    hide_parser.add_argument("value", help="Name or author to hide")

    export_parser = subparsers.add_parser("export", help="Export all data to a JSON file")
    export_parser.add_argument("-o", "--output", help="Output file path")

    import_parser = subparsers.add_parser(
        "import",
        help="Replace all data with an exported JSON file",
        description="Validate an exported file, then replace current data with it",
    )
    import_parser.add_argument("input", help="Path to an exported JSON file")
    import_parser.add_argument("-y", "--yes", action="store_true", help="Do not ask to confirm")

    return parser


COMMANDS = {
    "add": books.add_command,
    "edit": books.edit_command,
    "category": books.category_command,
    "complete": books.complete_command,
    "delete": books.delete_command,
    "log": progress.log_command,
    "list": reports.list_command,
    "show": reports.show_command,
    "stats": reports.stats_command,
    "activity": reports.activity_command,
    "achievements": reports.achievements_command,
    "goal": settings.goal_command,
    "theme": settings.theme_command,
    "suggest": settings.suggest_command,
    "hide-suggestion": settings.hide_suggestion_command,
    "export": snapshot.export_command,
    "import": snapshot.import_command,
}


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point with subcommands."""
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    # Dispatch to appropriate command
    command = COMMANDS.get(args.command)
    if command is None:
        parser.print_help()
        return 1
    return command(args)


if __name__ == "__main__":
    sys.exit(main())
