"""Default configuration values for Reading Tracker."""

from .config import TrackerConfig


def create_default_config(**overrides) -> TrackerConfig:
    """Create a default configuration with optional overrides.

    Args:
        **overrides: Keyword arguments to override default values

    Returns:
        TrackerConfig with defaults and overrides applied

    Example:
        config = create_default_config(
            data_dir="~/books",
            activity_limit=100,
        )
    """
    return TrackerConfig(**overrides)
