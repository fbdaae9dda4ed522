"""Data models for books and their progress logs."""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from uuid import uuid4


class Medium(str, Enum):
    """Unit system a book's progress is counted in."""

    PAPER = "paper"
    AUDIO = "audio"

    @property
    def unit(self) -> str:
        """Plural unit name for progress amounts."""
        return "pages" if self is Medium.PAPER else "minutes"


class BookStatus(str, Enum):
    """Derived reading status of a book."""

    PLANNED = "planned"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"


@dataclass
class ReadingLog:
    """A single progress entry: an amount read or listened on a day."""

    date: date
    amount: int  # Pages for paper, minutes for audio


@dataclass
class Book:
    """A tracked book and its progress history."""

    name: str
    author: str
    medium: Medium
    target: int  # Total pages or total minutes
    category: str
    id: str = field(default_factory=lambda: uuid4().hex)
    cover_reference: str | None = None
    logs: list[ReadingLog] = field(default_factory=list)
    status: BookStatus = BookStatus.PLANNED
    completed_flag: bool = False

    @property
    def unit(self) -> str:
        """Unit of this book's progress amounts."""
        return self.medium.unit

    def add_log(self, log: ReadingLog) -> None:
        """Append a log entry and keep logs sorted newest first."""
        self.logs.append(log)
        self.logs.sort(key=lambda entry: entry.date, reverse=True)

    def __str__(self) -> str:
        return f"{self.name} by {self.author}"
