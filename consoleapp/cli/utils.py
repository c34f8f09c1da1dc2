"""Shared utilities for CLI entry points.

Provides the wrappers that turn exit-code returning main functions into
``console_scripts`` entry points.
"""

import sys
from collections.abc import Callable

from consoleapp.cli.application import ConsoleApplication


def create_main_wrapper(main_func: Callable[[], int]) -> Callable[[], None]:
    """Create a simple main wrapper that calls sys.exit.

    :param main_func: The main function that returns an exit code
    :type main_func: Callable[[], int]
    :return: Wrapper function that calls sys.exit
    :rtype: Callable[[], None]
    """

    def wrapper() -> None:
        sys.exit(main_func())

    return wrapper


def create_application_entry_point(
    app_class: type[ConsoleApplication],
) -> Callable[[], None]:
    """Create a console entry point for a console application class.

    The returned function parses ``sys.argv[1:]``, runs the application and
    exits with its exit code.

    :param app_class: Concrete console application class
    :type app_class: type[ConsoleApplication]
    :return: Zero-argument function suitable for ``console_scripts``
    :rtype: Callable[[], None]
    """

    def run_application() -> int:
        return app_class.main()

    return create_main_wrapper(run_application)
