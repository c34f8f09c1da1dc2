"""Shared utilities: logging setup and filesystem helpers."""

from .logging_config import (
    LoggerAdapter,
    configure_application_logging,
    get_logger,
    setup_logger,
)

__all__ = [
    "LoggerAdapter",
    "configure_application_logging",
    "get_logger",
    "setup_logger",
]
