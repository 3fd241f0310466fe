"""Configuration management."""

from shadlint.config.loader import ConfigError, load_config
from shadlint.config.settings import Settings

__all__ = ["ConfigError", "Settings", "load_config"]
