"""Configuration for file location."""

from settings.config import CONFIG_FILENAME, ConfigError, LocatorConfig, load_config

__all__ = [
    "CONFIG_FILENAME",
    "ConfigError",
    "LocatorConfig",
    "load_config",
]
