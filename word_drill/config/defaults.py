"""Default configuration values for Word Drill."""

from .config import DrillConfig


def create_default_config(**overrides) -> DrillConfig:
    """Create a default configuration with optional overrides.

    Args:
        **overrides: Keyword arguments to override default values

    Returns:
        DrillConfig with defaults and overrides applied

    Example:
        config = create_default_config(
            words_per_page=50,
            history_limit=20
        )
    """
    return DrillConfig(**overrides)
