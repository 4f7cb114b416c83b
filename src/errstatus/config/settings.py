"""Configuration structures and loading for errstatus."""

import os
from pathlib import Path
from typing import Literal

import msgspec
import msgspec.toml

from errstatus.errors.messages import DEFAULT_LOCALE

LogLevel = Literal["debug", "info", "warning", "error", "critical"]

DEFAULT_LOG_LEVEL: LogLevel = "warning"


class ConfigError(Exception):
    """The config file exists but could not be parsed."""


# Main configuration
class Config(msgspec.Struct, omit_defaults=True):
    """Main configuration structure."""

    locale: str = DEFAULT_LOCALE
    log_level: LogLevel = DEFAULT_LOG_LEVEL
    # Per-key message overrides, e.g. "errStatus.404" = "Nothing here."
    messages: dict[str, str] = msgspec.field(default_factory=dict)


def _load_from_toml(path: Path) -> dict:
    """Load configuration from TOML file."""
    if not path.exists():
        return {}

    try:
        return msgspec.toml.decode(path.read_bytes())
    except msgspec.DecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e


def convert_config(data: dict) -> Config:
    """Convert raw dict to Config struct."""
    try:
        return msgspec.convert(data, type=Config)
    except msgspec.ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e


def _apply_env_overrides(config: Config) -> Config:
    """Apply environment variable overrides to config.

    ERRSTATUS_LOCALE: Message catalog locale
    ERRSTATUS_LOG_LEVEL: Diagnostics log level
    """
    if locale := os.environ.get("ERRSTATUS_LOCALE", "").strip():
        config = msgspec.structs.replace(config, locale=locale)

    if level := os.environ.get("ERRSTATUS_LOG_LEVEL", "").strip().lower():
        config = convert_config({**msgspec.to_builtins(config), "log_level": level})

    return config


# Config state storage
_config: Config | None = None


def get_config() -> Config:
    """Get the current configuration (singleton)."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reload_config() -> Config:
    """Reload configuration from disk."""
    global _config
    _config = load_config()
    return _config


def load_config(path: Path | None = None) -> Config:
    """Load configuration from file with defaults."""
    from .paths import config_file

    config_path = path or config_file()

    raw_data = _load_from_toml(config_path)
    if not raw_data:
        # Return default config
        config = Config()
    else:
        config = convert_config(raw_data)

    # Apply environment variable overrides
    config = _apply_env_overrides(config)

    return config
