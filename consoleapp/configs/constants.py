"""Configuration constants for consoleapp."""

LOGGING_SECTION: str = "logging_settings"
"""Section (INI) or top-level key (JSON/YAML) holding logging options."""

INI_EXTENSIONS: tuple[str, ...] = (".ini",)
JSON_EXTENSIONS: tuple[str, ...] = (".json",)
YAML_EXTENSIONS: tuple[str, ...] = (".yaml", ".yml")
