"""CLI-specific constants for consoleapp command-line interfaces.

Provides the token markers used by the argument classifier along with the
exit codes and error display settings shared by console entry points.
"""

# Argument classification markers
ARG_MARKER: str = "-"
"""Character that marks a token as a switch or parameter (*nix convention)."""

PARAM_SEPARATOR: str = "="
"""Separator between name and value in a long-form parameter (``--name=value``)."""

INVALID_PARAMETER_MESSAGE: str = "Invalid parameter [{token}]"
"""Diagnostic template for a long-form parameter that cannot be split."""

# Standard CLI exit codes following Unix conventions
SUCCESS_EXIT_CODE: int = 0
"""Exit code indicating successful program completion."""

ERROR_EXIT_CODE: int = 1
"""Exit code indicating program failure or error condition."""

INTERRUPT_EXIT_CODE: int = 1
"""Exit code indicating program interruption by user (Ctrl+C)."""

# Debugging and display settings
DEFAULT_MAX_TRACEBACK_LINES: int = 3
"""Default number of traceback lines to display in error messages."""
