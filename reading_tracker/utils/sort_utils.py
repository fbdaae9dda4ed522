"""Sorting utilities for book titles and author names."""

import re
from typing import Any


def title_sort_key(text: str) -> list[Any]:
    """Generate a natural, case-insensitive sort key for a title.

    Numbers sort numerically rather than alphabetically, so volume 2 of a
    series comes before volume 10.

    Args:
        text: Title or name to generate sort key for

    Returns:
        List of strings and integers for sorting

    Example:
        titles = ["Book 10", "book 2", "Book 1"]
        sorted(titles, key=title_sort_key)
        # Returns: ["Book 1", "book 2", "Book 10"]
    """

    def convert(text_segment):
        return int(text_segment) if text_segment.isdigit() else text_segment.casefold()

    return [convert(c) for c in re.split(r"(\d+)", str(text))]
