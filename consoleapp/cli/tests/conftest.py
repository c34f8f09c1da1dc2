"""Shared fixtures and test utilities for CLI tests."""

import logging
from collections.abc import Iterator
from unittest.mock import MagicMock

import pytest

from consoleapp.cli.application import ConsoleApplication
from consoleapp.cli.classifier import ArgumentParseWarning
from consoleapp.utils import logging_config


class RecordingApplication(ConsoleApplication):
    """Concrete application that remembers the state it ran with."""

    ran_with: dict | None = None
    exit_code: int | None = None

    def run(self) -> int | None:
        self.ran_with = self.state.to_dict()
        return self.exit_code


@pytest.fixture
def warnings_sink() -> list[ArgumentParseWarning]:
    """Provide a list that collects parse warnings when used as a sink."""
    return []


@pytest.fixture
def mock_logger() -> MagicMock:
    """Provide a mock logger for injection into applications."""
    return MagicMock(spec=logging.Logger)


@pytest.fixture
def app(mock_logger: MagicMock) -> RecordingApplication:
    """Provide an application with an injected mock logger."""
    return RecordingApplication(logger=mock_logger)


@pytest.fixture(autouse=True)
def clear_logger_cache() -> Iterator[None]:
    """Clean up logger cache after each test."""
    yield
    logging_config._loggers.clear()


@pytest.fixture
def app_class() -> type[RecordingApplication]:
    """Provide the concrete application class for entry point tests."""
    return RecordingApplication
