"""
consoleapp: command-line argument classification for console applications.

Raw console tokens are sorted into boolean switches, named parameters and
positional values, and exposed to a ``ConsoleApplication`` subclass that
runs once its inputs are set.
"""

from .cli import (
    ArgumentIndexError,
    ArgumentParseWarning,
    ArgumentState,
    ConsoleApplication,
    classify_args,
)

__version__ = "1.0.0"

__all__ = [
    "ArgumentIndexError",
    "ArgumentParseWarning",
    "ArgumentState",
    "ConsoleApplication",
    "classify_args",
]
