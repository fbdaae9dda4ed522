"""Utility functions for Reading Tracker."""

from .date_utils import parse_date
from .format_utils import format_amount, format_duration, format_relative_time
from .sort_utils import title_sort_key

__all__ = [
    "parse_date",
    "format_amount",
    "format_duration",
    "format_relative_time",
    "title_sort_key",
]
