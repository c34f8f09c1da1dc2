"""
consoleapp.cli: Command-line argument classification and console applications.

Core Modules:
- classifier.py: Sorts raw tokens into switches, parameters and values
- arguments.py: Independent containers for the classified arguments
- application.py: ConsoleApplication base class tying parsing to ``run()``
- constants.py: Token markers, exit codes and display settings
- errors.py: Exceptions signalling contract violations by calling code

Entry Points:
- inspect_args.py: ``consoleapp-inspect``, prints its own classified command line
"""

from .application import ConsoleApplication
from .arguments import ArgumentState
from .classifier import ArgumentParseWarning, WarningSink, classify_args
from .constants import (
    ARG_MARKER,
    ERROR_EXIT_CODE,
    INTERRUPT_EXIT_CODE,
    PARAM_SEPARATOR,
    SUCCESS_EXIT_CODE,
)
from .errors import ArgumentIndexError, ConsoleAppError
from .utils import create_application_entry_point, create_main_wrapper

__all__ = [
    # Classification
    "classify_args",
    "ArgumentState",
    "ArgumentParseWarning",
    "WarningSink",
    # Application lifecycle
    "ConsoleApplication",
    "create_application_entry_point",
    "create_main_wrapper",
    # Errors
    "ConsoleAppError",
    "ArgumentIndexError",
    # CLI constants
    "ARG_MARKER",
    "PARAM_SEPARATOR",
    "SUCCESS_EXIT_CODE",
    "ERROR_EXIT_CODE",
    "INTERRUPT_EXIT_CODE",
]
