"""
Logging configuration for scan events.

Scan events are emitted as JSON lines so hosts can collect them alongside
their own logs. Only pattern names, severities, offsets and scores are
logged; matched text never is.
"""

import json
import logging
from logging.handlers import TimedRotatingFileHandler
from typing import Any

ROOT_LOGGER_NAME = "promptguard"

# Extra attributes copied from a log record into the JSON entry
_EVENT_FIELDS = (
    "event",
    "sensitivity",
    "score",
    "total_issues",
    "action",
    "pattern",
    "category",
    "severity",
    "position",
    "length",
)


class ScanEventFormatter(logging.Formatter):
    """Formats log records as single-line JSON objects."""

    def format(self, record: logging.LogRecord) -> str:
        log_entry: dict[str, Any] = {
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for field in _EVENT_FIELDS:
            if hasattr(record, field):
                log_entry[field] = getattr(record, field)

        if record.exc_info:
            log_entry["error"] = self.formatException(record.exc_info)

        return json.dumps(log_entry)


def configure_scan_logging(
    log_file: str | None = None,
    log_level: str = "INFO",
    enable_console: bool = True,
) -> logging.Logger:
    """
    Configure logging for the promptguard logger tree.

    Args:
        log_file: Path to a JSON log file, rotated hourly (optional)
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        enable_console: Whether to also log to stderr

    Returns:
        The configured ``promptguard`` logger
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(getattr(logging, log_level.upper()))
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = ScanEventFormatter()

    if log_file:
        file_handler = TimedRotatingFileHandler(
            log_file,
            when="H",
            interval=1,
            backupCount=168,  # 7 days
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    if enable_console:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    return logger


def get_scan_logger() -> logging.Logger:
    """Get the logger that receives one event per completed scan."""
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.events")
