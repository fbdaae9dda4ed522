"""Calendar date parsing."""

from datetime import date, timedelta


def parse_date(text: str, today: date | None = None) -> date:
    """Parse an ISO calendar date, also accepting "today" and "yesterday".

    Args:
        text: Date text such as "2024-01-31"
        today: Reference day for the relative keywords

    Returns:
        The parsed date

    Raises:
        ValueError: If the text is not a recognized date
    """
    value = text.strip().lower()
    if today is None:
        today = date.today()
    if value == "today":
        return today
    if value == "yesterday":
        return today - timedelta(days=1)
    return date.fromisoformat(value)
