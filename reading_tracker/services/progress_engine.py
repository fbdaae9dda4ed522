"""Per-book progress calculations.

All functions are pure given a Book, except ``recompute_status`` which
writes the derived status back onto the book.
"""

from reading_tracker.models.book import Book, BookStatus


def total_progress(book: Book) -> int:
    """Sum of all logged amounts for a book.

    Args:
        book: The book to measure

    Returns:
        Pages read or minutes listened so far
    """
    return sum(log.amount for log in book.logs)


def progress_percentage(book: Book) -> int:
    """Progress as a whole percentage, rounded half up and capped at 100.

    Only a book that has reached its target reports 100; anything short
    of it tops out at 99.

    Args:
        book: The book to measure

    Returns:
        Percentage in [0, 100]; 0 when the book has no target
    """
    if book.target <= 0:
        return 0
    progress = total_progress(book)
    if progress >= book.target:
        return 100
    # Integer half-up rounding of 100 * progress / target
    rounded = (200 * progress + book.target) // (2 * book.target)
    return min(rounded, 99)


def remaining(book: Book) -> int:
    """Amount still to read, never negative."""
    return max(book.target - total_progress(book), 0)


def is_finished(book: Book) -> bool:
    """Check whether logged progress has reached the target."""
    return total_progress(book) >= book.target


def recompute_status(book: Book) -> BookStatus:
    """Derive and store the book's status from its logs and completion flag.

    Reaching the target marks the book completed and sets its completion
    flag. A flag set by a manual completion keeps the book completed even
    if its target later grows past the logged total.

    Args:
        book: The book to update in place

    Returns:
        The new status
    """
    progress = total_progress(book)
    if progress >= book.target:
        book.status = BookStatus.COMPLETED
        book.completed_flag = True
    elif book.completed_flag:
        book.status = BookStatus.COMPLETED
    elif progress == 0:
        book.status = BookStatus.PLANNED
    else:
        book.status = BookStatus.IN_PROGRESS
    return book.status
