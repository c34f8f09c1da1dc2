"""Base class for applications that run from a console command line.

A ``ConsoleApplication`` ties argument processing to execution: the entry
point instantiates the subclass, classifies the command line into switches,
parameters and values, then calls ``run()``.

    class MyApp(ConsoleApplication):
        def run(self) -> int | None:
            if self.get_switch("v"):
                ...

    if __name__ == "__main__":
        sys.exit(MyApp.main())

When used as a task by other code, the consumer may skip the command line
and set inputs directly with ``switch_on``, ``set_param`` and
``push_value``. In that case it must not call ``set_args`` or
``process_args`` afterwards, as doing so wipes the explicitly set state.
"""

import logging
import sys
import traceback
from abc import ABC, abstractmethod
from collections.abc import Iterable, Sequence
from typing import Optional

from consoleapp.cli.arguments import ArgumentState
from consoleapp.cli.classifier import ArgumentParseWarning, classify_args
from consoleapp.cli.constants import (
    DEFAULT_MAX_TRACEBACK_LINES,
    ERROR_EXIT_CODE,
    INTERRUPT_EXIT_CODE,
    SUCCESS_EXIT_CODE,
)
from consoleapp.cli.errors import ArgumentIndexError
from consoleapp.configs.config import AppConfig, load_config
from consoleapp.configs.errors import ConfigError
from consoleapp.utils.logging_config import configure_application_logging


class ConsoleApplication(ABC):
    """
    Runnable application whose inputs come from console arguments.

    :param args: Raw command-line tokens to store (not parsed until
        ``process_args`` is called)
    :type args: Sequence[str] | None
    :param logger: Logger to use instead of the lazily created default
    :type logger: logging.Logger | None
    :param config: Application configuration; defaults apply if None
    :type config: AppConfig | None
    """

    def __init__(
        self,
        args: Sequence[str] | None = None,
        logger: logging.Logger | None = None,
        config: AppConfig | None = None,
    ) -> None:
        self._args: tuple[str, ...] | None = None
        self._state = ArgumentState()
        self._logger = logger
        self.config = config if config is not None else AppConfig()
        if args is not None:
            self.set_args(args)

    def init(self) -> None:
        """
        Discard the raw arguments and empty all switches, parameters and values.

        Subclasses holding additional inputs should extend this.
        """
        self._args = None
        self._state.reset()

    @abstractmethod
    def run(self) -> int | None:
        """
        Execute the application after its inputs have been set.

        :return: Exit code, or None for success
        :rtype: int | None
        """

    @property
    def args(self) -> tuple[str, ...] | None:
        """Raw command-line tokens, or None if never set."""
        return self._args

    @property
    def state(self) -> ArgumentState:
        """Switches, parameters and values currently held by the application."""
        return self._state

    def set_args(self, args: Sequence[str]) -> None:
        """
        Replace the raw command-line tokens.

        Everything classified from earlier tokens is discarded. The new tokens
        are not parsed; call ``process_args`` for that.

        :param args: Tokens as they would appear on a console command line
        :type args: Sequence[str]
        """
        self._state.reset()
        self._args = tuple(args)

    def get_arg(self, index: int) -> str | None:
        """
        Access a raw command-line token by index.

        :param index: Zero-based index of the token
        :type index: int
        :return: The token, or None if no arguments were ever set
        :rtype: str | None
        :raises ArgumentIndexError: If arguments are set and index is out of range
        """
        if self._args is None:
            return None
        if index < 0 or index >= len(self._args):
            raise ArgumentIndexError("argument", index, len(self._args))
        return self._args[index]

    def process_args(
        self, args: Sequence[str] | None = None
    ) -> "ConsoleApplication":
        """
        Classify the raw tokens into switches, parameters and values.

        :param args: New tokens to store first; the stored tokens are used if None
        :type args: Sequence[str] | None
        :return: The application, so that ``app.process_args(argv).run()`` reads naturally
        :rtype: ConsoleApplication
        """
        if args is not None:
            self.set_args(args)
        classify_args(self._args, self._state, self.log_arg_parse_failure)
        return self

    def log_arg_parse_failure(self, warning: ArgumentParseWarning) -> None:
        """Write a parse warning for an unusable token to the application log."""
        self.logger.warning(warning.message)

    @property
    def logger(self) -> logging.Logger:
        """
        Application logger, named after the implementation class by default.

        Loggers are cached by name, so the logging section of the config only
        takes effect for the first instance of a class that creates one. Later
        instances of the same class share that logger; inject one through the
        constructor or this setter to use different settings.
        """
        if self._logger is None:
            cls = type(self)
            self._logger = configure_application_logging(
                f"{cls.__module__}.{cls.__qualname__}", self.config.logging
            )
        return self._logger

    @logger.setter
    def logger(self, logger: logging.Logger) -> None:
        self._logger = logger

    def switch_on(self, name: str) -> None:
        self._state.switch_on(name)

    def switch_off(self, name: str) -> None:
        self._state.switch_off(name)

    def get_switch(self, name: str) -> bool:
        return self._state.get_switch(name)

    def set_param(self, name: str, value: str) -> None:
        self._state.set_param(name, value)

    def get_param(self, name: str) -> str | None:
        return self._state.get_param(name)

    def clear_param(self, name: str) -> None:
        self._state.clear_param(name)

    def push_value(self, value: str) -> int:
        return self._state.push_value(value)

    def set_values(self, values: Iterable[str]) -> None:
        self._state.set_values(values)

    def get_value(self, index: int) -> str:
        return self._state.get_value(index)

    @classmethod
    def main(
        cls,
        argv: Optional[Sequence[str]] = None,
        config_path: Optional[str] = None,
    ) -> int:
        """
        Console entry point: configure, parse the command line and run.

        Index faults raised by the application are programmer errors and are
        not handled here.

        :param argv: Command-line tokens, defaults to ``sys.argv[1:]``
        :type argv: Optional[Sequence[str]]
        :param config_path: Optional INI, JSON or YAML configuration file
        :type config_path: Optional[str]
        :return: Exit code (0 for success, 1 for error or interruption)
        :rtype: int
        """
        try:
            config = load_config(config_path) if config_path is not None else AppConfig()
            application = cls(config=config)
            application.process_args(sys.argv[1:] if argv is None else argv)
            exit_code = application.run()

        except KeyboardInterrupt:
            print("\n🛑 Interrupted by user")
            return INTERRUPT_EXIT_CODE
        except ConfigError as e:
            print(f"❌ Configuration error: {e}")
            print("💡 Check the configuration file path and its syntax")
            return ERROR_EXIT_CODE
        except OSError as e:
            print(f"❌ File system error: {e}")
            print("💡 Check file permissions and available disk space")
            return ERROR_EXIT_CODE
        except (ValueError, TypeError) as e:
            print(f"❌ Invalid input: {e}")
            print("💡 Check your command line arguments")
            _display_detailed_error_info(e)
            return ERROR_EXIT_CODE
        except RuntimeError as e:
            print(f"❌ Runtime error: {e}")
            _display_detailed_error_info(e)
            return ERROR_EXIT_CODE

        return SUCCESS_EXIT_CODE if exit_code is None else exit_code


def _display_detailed_error_info(exception: Exception) -> None:
    """
    Display detailed error information for debugging purposes.

    Shows the exception chain, type information and the last few traceback
    lines.

    :param exception: The exception to analyze and display
    :type exception: Exception
    """
    if exception.__cause__ is not None:
        print(f"  ↳ Caused by: {exception.__cause__}")

    print(f"  Exception type: {type(exception).__name__}")

    print("  Last few calls:")
    traceback_lines = traceback.format_tb(exception.__traceback__)
    for line in traceback_lines[-DEFAULT_MAX_TRACEBACK_LINES:]:
        print(f"    {line.strip()}")
