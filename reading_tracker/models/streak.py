"""Data model for reading streaks."""

from dataclasses import dataclass


@dataclass
class StreakState:
    """Current and best-ever run of consecutive reading days."""

    current: int = 0
    longest: int = 0
