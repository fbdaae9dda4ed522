"""Consecutive-day reading streak calculation."""

import logging
from collections.abc import Iterable
from datetime import date, timedelta

from reading_tracker.models.book import Book
from reading_tracker.models.streak import StreakState

logger = logging.getLogger(__name__)


def collect_log_dates(books: Iterable[Book]) -> set[date]:
    """Gather the distinct dates that carry at least one log, across all books."""
    return {log.date for book in books for log in book.logs}


def current_streak(sorted_dates: list[date], today: date) -> int:
    """Count the unbroken run of days ending today.

    Args:
        sorted_dates: Distinct log dates, newest first
        today: The reference day

    Returns:
        Number of consecutive days up to and including today; 0 when
        nothing was logged today
    """
    streak = 0
    for offset, log_date in enumerate(sorted_dates):
        if log_date != today - timedelta(days=offset):
            break
        streak += 1
    return streak


def longest_run(sorted_dates: list[date]) -> int:
    """Length of the longest run of consecutive days anywhere in the history."""
    if not sorted_dates:
        return 0
    run = 1
    best = 1
    for newer, older in zip(sorted_dates, sorted_dates[1:]):
        if (newer - older).days == 1:
            run += 1
            best = max(best, run)
        else:
            run = 1
    return best


def calculate_streaks(
    log_dates: Iterable[date], today: date, previous_longest: int = 0
) -> StreakState:
    """Compute current and longest streaks from log dates.

    The longest streak never drops below ``previous_longest``, so a best
    run survives even after the books that logged it are deleted.

    Args:
        log_dates: Dates of all logs; duplicates are collapsed
        today: The reference day for the current streak
        previous_longest: Longest streak recorded so far

    Returns:
        StreakState with the new counters
    """
    sorted_dates = sorted(set(log_dates), reverse=True)
    if not sorted_dates:
        return StreakState(current=0, longest=previous_longest)

    current = current_streak(sorted_dates, today)
    best = longest_run(sorted_dates)
    longest = max(previous_longest, best, current)
    logger.debug(
        f"Streaks over {len(sorted_dates)} days: current={current}, run={best}, longest={longest}"
    )
    return StreakState(current=current, longest=longest)
