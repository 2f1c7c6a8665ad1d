"""Configuration management."""

from dbgc.config.loader import ConfigError, load_config
from dbgc.config.settings import Settings

__all__ = ["ConfigError", "Settings", "load_config"]
