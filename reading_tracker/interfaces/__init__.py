"""Interface protocols for Reading Tracker."""

from .presenter import PresenterProtocol

__all__ = ["PresenterProtocol"]
