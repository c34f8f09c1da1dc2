"""Application configuration loading and configuration errors."""

from .config import AppConfig, LoggingConfig, load_config
from .errors import (
    ConfigError,
    ConfigFileNotFoundError,
    ConfigParseError,
    UnsupportedConfigFormatError,
)

__all__ = [
    "AppConfig",
    "LoggingConfig",
    "load_config",
    "ConfigError",
    "ConfigFileNotFoundError",
    "ConfigParseError",
    "UnsupportedConfigFormatError",
]
