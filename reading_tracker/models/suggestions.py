"""Data model for dismissed name/author suggestions."""

from dataclasses import dataclass, field
from enum import Enum


class SuggestionKind(str, Enum):
    """Which suggestion list an entry belongs to."""

    NAME = "name"
    AUTHOR = "author"


@dataclass
class HiddenSuggestions:
    """Book names and authors the user no longer wants suggested."""

    names: list[str] = field(default_factory=list)
    authors: list[str] = field(default_factory=list)

    def values_for(self, kind: SuggestionKind) -> list[str]:
        """Get the hidden list for a suggestion kind."""
        return self.names if kind is SuggestionKind.NAME else self.authors

    def hide(self, kind: SuggestionKind, value: str) -> bool:
        """Hide a value. Returns False if it was already hidden."""
        hidden = self.values_for(kind)
        if value in hidden:
            return False
        hidden.append(value)
        return True

    def is_hidden(self, kind: SuggestionKind, value: str) -> bool:
        """Check whether a value is hidden."""
        return value in self.values_for(kind)
