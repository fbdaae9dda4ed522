"""Search, filtering and suggestion helpers over a book collection."""

from collections.abc import Iterable

from reading_tracker.models.book import Book, BookStatus, Medium
from reading_tracker.models.suggestions import HiddenSuggestions, SuggestionKind
from reading_tracker.utils.sort_utils import title_sort_key


def search_books(books: Iterable[Book], term: str) -> list[Book]:
    """Books whose name or author contains the term, case-insensitively.

    An empty or blank term matches every book.
    """
    needle = term.strip().casefold()
    if not needle:
        return list(books)
    return [
        book
        for book in books
        if needle in book.name.casefold() or needle in book.author.casefold()
    ]


def filter_by_category(books: Iterable[Book], category: str | None) -> list[Book]:
    """Books in a category; ``None`` or ``"all"`` keeps every book."""
    if category is None or category == "all":
        return list(books)
    return [book for book in books if book.category == category]


def group_by_medium(books: Iterable[Book]) -> dict[Medium, list[Book]]:
    """Split books into paper and audio groups, each sorted by name."""
    groups: dict[Medium, list[Book]] = {medium: [] for medium in Medium}
    for book in books:
        groups[book.medium].append(book)
    for group in groups.values():
        group.sort(key=lambda book: title_sort_key(book.name))
    return groups


def completed_books(books: Iterable[Book]) -> list[Book]:
    """Completed books sorted by name."""
    return sorted(
        (book for book in books if book.status == BookStatus.COMPLETED),
        key=lambda book: title_sort_key(book.name),
    )


def suggestions(
    books: Iterable[Book],
    kind: SuggestionKind,
    prefix: str = "",
    hidden: HiddenSuggestions | None = None,
    limit: int = 10,
) -> list[str]:
    """Previously used names or authors that start with a prefix.

    Args:
        books: Collection to draw values from
        kind: Whether to suggest book names or authors
        prefix: Case-insensitive prefix to match; empty matches everything
        hidden: Values the user dismissed, never suggested
        limit: Maximum number of suggestions

    Returns:
        Distinct matching values in sorted order
    """
    needle = prefix.strip().casefold()
    values: set[str] = set()
    for book in books:
        value = book.name if kind is SuggestionKind.NAME else book.author
        if hidden is not None and hidden.is_hidden(kind, value):
            continue
        if value.casefold().startswith(needle):
            values.add(value)
    return sorted(values, key=title_sort_key)[:limit]
