"""Configuration management for Reading Tracker."""

from .config import TrackerConfig
from .defaults import create_default_config

__all__ = ["TrackerConfig", "create_default_config"]
