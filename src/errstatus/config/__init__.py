"""Configuration management for errstatus."""

from errstatus.config.paths import PACKAGE_NAME, config_dir, config_file
from errstatus.config.settings import (
    Config,
    ConfigError,
    get_config,
    load_config,
    reload_config,
)

__all__ = [
    # paths
    "PACKAGE_NAME",
    "config_dir",
    "config_file",
    # settings
    "Config",
    "ConfigError",
    "get_config",
    "load_config",
    "reload_config",
]
