"""
Logging configuration for the ``sanitizer`` logger hierarchy.

The sanitizer is a library, so configuration is confined to the
``sanitizer`` logger; the root logger and other libraries' loggers are
never touched. Without any setup, records propagate to whatever the host
application configured.
"""

import logging
import logging.handlers
import os
import sys
from typing import Optional

from .formatters import ConsoleFormatter, JSONFormatter

LOGGER_NAME = "sanitizer"

_TRUE_VALUES = ("true", "1", "yes")

# Handlers installed by setup_logging, so repeated setup replaces only them
_installed: list = []


def _file_handler(log_file: str, max_bytes: int, backup_count: int) -> logging.Handler:
    log_dir = os.path.dirname(log_file)
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)

    return logging.handlers.RotatingFileHandler(
        filename=log_file,
        maxBytes=max_bytes,
        backupCount=backup_count,
        encoding="utf-8",
    )


def setup_logging(
    level: str = "INFO",
    log_file: Optional[str] = None,
    console_output: bool = True,
    json_format: bool = False,
    propagate: bool = False,
    max_bytes: int = 10 * 1024 * 1024,
    backup_count: int = 5,
) -> logging.Logger:
    """
    Attach handlers to the ``sanitizer`` logger.

    Args:
        level: Log level name; unknown names fall back to INFO
        log_file: Rotating log file path (disabled when None)
        console_output: Write to stderr
        json_format: Emit JSON lines instead of text
        propagate: Also pass records on to ancestor (root) handlers
        max_bytes: Size at which the log file rotates
        backup_count: Rotated files to keep

    Returns:
        The configured ``sanitizer`` logger
    """
    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    package_logger = logging.getLogger(LOGGER_NAME)
    _detach(package_logger)

    if json_format:
        formatter: logging.Formatter = JSONFormatter(include_timestamp=True, include_hostname=True)
    else:
        formatter = ConsoleFormatter(use_colors=log_file is None)

    handlers = []
    if console_output:
        handlers.append(logging.StreamHandler(sys.stderr))
    if log_file:
        handlers.append(_file_handler(log_file, max_bytes, backup_count))

    for handler in handlers:
        handler.setFormatter(formatter)
        package_logger.addHandler(handler)
        _installed.append(handler)

    package_logger.setLevel(numeric_level)
    # Without own handlers, records must still reach the host's handlers
    package_logger.propagate = propagate or not handlers

    package_logger.debug(
        f"Logging initialized: level={logging.getLevelName(numeric_level)}, "
        f"file={log_file or 'none'}, console={console_output}, json={json_format}"
    )

    return package_logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger; pass __name__ from inside the package."""
    return logging.getLogger(name)


def _detach(package_logger: logging.Logger) -> None:
    while _installed:
        handler = _installed.pop()
        package_logger.removeHandler(handler)
        handler.close()


def shutdown_logging() -> None:
    """
    Close handlers installed by setup_logging and restore defaults.

    Handlers added to the ``sanitizer`` logger by the host are left alone.
    """
    package_logger = logging.getLogger(LOGGER_NAME)
    _detach(package_logger)
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True


def configure_from_env() -> bool:
    """
    Configure the ``sanitizer`` logger from environment variables.

    Nothing is configured unless SANITIZER_LOG_LEVEL or SANITIZER_LOG_FILE
    is set.

    Environment variables:
        SANITIZER_LOG_LEVEL: Log level (default: INFO)
        SANITIZER_LOG_FILE: Rotating log file path (default: none)
        SANITIZER_LOG_JSON: JSON lines (default: false)
        SANITIZER_LOG_CONSOLE: Write to stderr (default: true)
        SANITIZER_LOG_PROPAGATE: Also pass records to root (default: false)

    Returns:
        True when logging was configured
    """
    level = os.getenv("SANITIZER_LOG_LEVEL")
    log_file = os.getenv("SANITIZER_LOG_FILE")
    if not level and not log_file:
        return False

    setup_logging(
        level=level or "INFO",
        log_file=log_file,
        console_output=os.getenv("SANITIZER_LOG_CONSOLE", "true").lower() in _TRUE_VALUES,
        json_format=os.getenv("SANITIZER_LOG_JSON", "false").lower() in _TRUE_VALUES,
        propagate=os.getenv("SANITIZER_LOG_PROPAGATE", "false").lower() in _TRUE_VALUES,
    )
    return True
