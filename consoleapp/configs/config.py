"""Configuration loading for consoleapp applications."""

import configparser
import json
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

import yaml

from consoleapp.configs.constants import (
    INI_EXTENSIONS,
    JSON_EXTENSIONS,
    LOGGING_SECTION,
    YAML_EXTENSIONS,
)
from consoleapp.configs.errors import (
    ConfigFileNotFoundError,
    ConfigParseError,
    UnsupportedConfigFormatError,
)


@dataclass
class LoggingConfig:
    """Logging options for a console application."""

    level: str = "INFO"
    console: bool = True
    log_file: str | None = None
    log_dir: str | None = None
    format_string: str | None = None

    @classmethod
    def from_dict(cls, section: Any) -> "LoggingConfig":
        """
        Build a logging section from raw data, ignoring unknown keys.

        :param section: Raw mapping read from the config file
        :type section: Any
        :return: Logging configuration
        :rtype: LoggingConfig
        :raises ConfigParseError: If the section is not a mapping
        """
        if section is None:
            return cls()
        if not isinstance(section, dict):
            raise ConfigParseError(
                f"'{LOGGING_SECTION}' must be a mapping, got {type(section).__name__}"
            )
        known = {config_field.name for config_field in fields(cls)}
        options = {key: value for key, value in section.items() if key in known}

        if "level" in options and not isinstance(options["level"], str):
            raise ConfigParseError(
                f"'{LOGGING_SECTION}.level' must be a string, "
                f"got {type(options['level']).__name__}"
            )
        if "console" in options and not isinstance(options["console"], bool):
            raise ConfigParseError(
                f"'{LOGGING_SECTION}.console' must be a boolean, "
                f"got {type(options['console']).__name__}"
            )
        return cls(**options)


@dataclass
class AppConfig:
    """Top-level configuration of a console application."""

    logging: LoggingConfig = field(default_factory=LoggingConfig)


def _load_ini(path: Path) -> dict[str, Any]:
    """Load INI configuration file."""
    # Log format strings contain %(...)s placeholders.
    parser = configparser.ConfigParser(interpolation=None)
    try:
        parser.read(path, encoding="utf-8")
    except configparser.Error as e:
        raise ConfigParseError(f"Failed to parse INI file {path}: {e}") from e

    result: dict[str, Any] = {}
    for section_name in parser.sections():
        section: dict[str, Any] = dict(parser[section_name].items())
        if "console" in section:
            try:
                section["console"] = parser.getboolean(section_name, "console")
            except ValueError as e:
                raise ConfigParseError(
                    f"Invalid boolean for '{section_name}.console' in {path}: {e}"
                ) from e
        result[section_name] = section
    return result


def _load_json(path: Path) -> Any:
    """Load JSON configuration file."""
    try:
        with open(path, encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigParseError(f"Failed to parse JSON file {path}: {e}") from e


def _load_yaml(path: Path) -> Any:
    """Load YAML configuration file."""
    try:
        with open(path, encoding="utf-8") as f:
            return yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigParseError(f"Failed to parse YAML file {path}: {e}") from e


def _create_config_object(raw_config: Any) -> AppConfig:
    """Create structured configuration object from raw config."""
    if raw_config is None:
        raw_config = {}
    if not isinstance(raw_config, dict):
        raise ConfigParseError(
            f"Configuration root must be a mapping, got {type(raw_config).__name__}"
        )
    return AppConfig(logging=LoggingConfig.from_dict(raw_config.get(LOGGING_SECTION)))


def load_config(path: str | Path) -> AppConfig:
    """
    Load an application configuration file.

    The format is chosen by file extension: ``.ini``, ``.json``, ``.yaml`` or
    ``.yml``. Logging options live in the ``logging_settings`` section (INI)
    or top-level key (JSON/YAML).

    :param path: Path to the configuration file
    :type path: str | Path
    :return: Parsed configuration
    :rtype: AppConfig
    :raises ConfigFileNotFoundError: If the file does not exist
    :raises UnsupportedConfigFormatError: If the extension is not recognized
    :raises ConfigParseError: If the file contents cannot be parsed
    """
    config_path = Path(path)
    if not config_path.is_file():
        raise ConfigFileNotFoundError(f"Configuration file not found: {config_path}")

    suffix = config_path.suffix.lower()
    if suffix in INI_EXTENSIONS:
        raw_config = _load_ini(config_path)
    elif suffix in JSON_EXTENSIONS:
        raw_config = _load_json(config_path)
    elif suffix in YAML_EXTENSIONS:
        raw_config = _load_yaml(config_path)
    else:
        raise UnsupportedConfigFormatError(
            f"Unsupported configuration file format: {config_path}"
        )

    return _create_config_object(raw_config)
