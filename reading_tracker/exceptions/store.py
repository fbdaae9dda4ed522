"""Record store exceptions."""

from .base import ReadingTrackerException


class BookNotFoundError(ReadingTrackerException):
    """Raised when an operation references an unknown book id."""

    def __init__(self, book_id: str):
        super().__init__(f"Book not found: {book_id}")
        self.book_id = book_id
