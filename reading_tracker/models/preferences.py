"""Data models for user preferences."""

from enum import Enum


class Theme(str, Enum):
    """Display theme preference."""

    LIGHT = "light"
    DARK = "dark"

    def toggled(self) -> "Theme":
        """Return the opposite theme."""
        return Theme.DARK if self is Theme.LIGHT else Theme.LIGHT
