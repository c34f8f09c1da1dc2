"""Configuration-related exception classes for consoleapp."""


class ConfigError(Exception):
    """Base exception for configuration errors.

    All configuration-related exceptions inherit from this class,
    allowing for broad exception handling when needed.
    """


class ConfigFileNotFoundError(ConfigError):
    """Raised when config file cannot be found."""


class ConfigParseError(ConfigError):
    """Raised when config file cannot be parsed.

    This exception is raised when a configuration file exists but
    contains invalid syntax or cannot be parsed in the expected format
    (INI, JSON, YAML).
    """


class UnsupportedConfigFormatError(ConfigError):
    """Raised when the config file extension is not INI, JSON or YAML."""
