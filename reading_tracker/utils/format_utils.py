"""Formatting helpers for progress amounts and timestamps."""

from datetime import datetime, timezone

from reading_tracker.models.book import Medium


def format_duration(minutes: int) -> str:
    """Format a minute count as hours and minutes.

    Example:
        format_duration(125)  # "2h 5m"
        format_duration(45)   # "45m"
    """
    hours, rest = divmod(max(minutes, 0), 60)
    if hours > 0:
        return f"{hours}h {rest}m"
    return f"{rest}m"


def format_amount(amount: int, medium: Medium) -> str:
    """Format a progress amount in the medium's unit."""
    if medium == Medium.AUDIO:
        return format_duration(amount)
    return f"{amount} pages"


def format_relative_time(timestamp: datetime, now: datetime | None = None) -> str:
    """Describe how long ago a timestamp was.

    Args:
        timestamp: The moment to describe; naive values are taken as UTC
        now: Reference moment (defaults to the current UTC time)

    Returns:
        A short phrase such as "just now" or "3 h ago"; timestamps a week
        or more old are shown as a date
    """
    if timestamp.tzinfo is None:
        timestamp = timestamp.replace(tzinfo=timezone.utc)
    if now is None:
        now = datetime.now(timezone.utc)

    minutes = int((now - timestamp).total_seconds() // 60)
    hours = minutes // 60
    days = hours // 24

    if minutes < 1:
        return "just now"
    if minutes < 60:
        return f"{minutes} min ago"
    if hours < 24:
        return f"{hours} h ago"
    if days < 7:
        return f"{days} days ago"
    return timestamp.date().isoformat()
