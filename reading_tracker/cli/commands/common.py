"""Helpers shared by CLI commands."""

import logging
from argparse import Namespace

from reading_tracker.config import create_default_config
from reading_tracker.interfaces import PresenterProtocol
from reading_tracker.orchestration import RecordStore


def configure_logging(verbose: bool) -> None:
    """Send log records to stderr; debug detail only when verbose."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def open_store(args: Namespace) -> RecordStore:
    """Load the record store for the data directory chosen on the command line."""
    overrides = {}
    if getattr(args, "data_dir", None):
        overrides["data_dir"] = args.data_dir
    return RecordStore.open(create_default_config(**overrides))


def confirm(presenter: PresenterProtocol, prompt: str, assume_yes: bool) -> bool:
    """Ask the user to confirm a destructive action.

    Args:
        presenter: Presenter for the prompt
        prompt: Question to ask
        assume_yes: Skip the question and confirm

    Returns:
        True if the action should go ahead
    """
    if assume_yes:
        return True
    try:
        answer = input(f"{prompt} [y/N] ")
    except EOFError:
        presenter.show_info("")
        return False
    return answer.strip().lower() in ("y", "yes")
