"""Configuration management for Word Drill."""

from .config import DrillConfig
from .config_manager import ConfigManager
from .defaults import create_default_config

__all__ = ["DrillConfig", "ConfigManager", "create_default_config"]
