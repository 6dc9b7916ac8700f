"""Core utilities for error handling and logging."""

from .exceptions import (
    ConfigurationError,
    InvalidConfigError,
    InvalidSensitivityError,
    InvalidSpanError,
    PromptGuardError,
    ScannerError,
)
from .logging_config import configure_scan_logging, get_scan_logger

__all__ = [
    # Logging
    "configure_scan_logging",
    "get_scan_logger",
    # Exceptions
    "PromptGuardError",
    "ScannerError",
    "InvalidSpanError",
    "ConfigurationError",
    "InvalidSensitivityError",
    "InvalidConfigError",
]
