# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Logging for DataTools.

All package loggers are children of the 'genro_datatools' logger. As a
library, the package only installs a NullHandler there, so nothing is
printed unless the application configures logging or asks for console
output with enable_debug_logging().

Example:
    >>> from genro_datatools.logging import enable_debug_logging
    >>> enable_debug_logging()   # DEBUG records to stdout
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TextIO

from .config import LOG_LEVEL_ENV

ROOT_LOGGER_NAME = 'genro_datatools'
CONSOLE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_configured = False
_console_handler: logging.Handler | None = None


def _level_from_env(default: int) -> int:
    name = os.environ.get(LOG_LEVEL_ENV, '').strip().upper()
    if not name:
        return default
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else default


def _package_logger() -> logging.Logger:
    return logging.getLogger(ROOT_LOGGER_NAME)


def setup_root_logger(
    level: int | None = None,
    handler: logging.Handler | None = None,
) -> None:
    """Configure the package logger once.

    Args:
        level: Logging level. Defaults to the GENRO_DATATOOLS_LOG_LEVEL
            environment variable, or WARNING.
        handler: Handler to attach. Defaults to a NullHandler.
    """
    global _configured
    if _configured:
        return

    if level is None:
        level = _level_from_env(logging.WARNING)

    package_logger = _package_logger()
    package_logger.setLevel(level)
    package_logger.addHandler(handler if handler is not None else logging.NullHandler())
    package_logger.propagate = True
    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return a module logger under the package logger.

    Args:
        name: Logger name, typically __name__ of the calling module.
    """
    setup_root_logger()
    return logging.getLogger(name)


def set_global_log_level(level: int) -> None:
    """Set the level of the package logger and of its handlers."""
    setup_root_logger()
    package_logger = _package_logger()
    package_logger.setLevel(level)
    for handler in package_logger.handlers:
        handler.setLevel(level)


def enable_debug_logging(stream: TextIO | None = None) -> None:
    """Send DEBUG records to a console stream (stdout by default)."""
    global _console_handler
    setup_root_logger()
    if _console_handler is None:
        _console_handler = logging.StreamHandler(stream or sys.stdout)
        _console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        _package_logger().addHandler(_console_handler)
    set_global_log_level(logging.DEBUG)


def disable_debug_logging() -> None:
    """Remove the console handler and go back to WARNING."""
    global _console_handler
    if _console_handler is not None:
        _package_logger().removeHandler(_console_handler)
        _console_handler = None
    set_global_log_level(logging.WARNING)


def reset_logging() -> None:
    """Drop all package logging configuration (mainly for testing)."""
    global _configured, _console_handler
    _configured = False
    _console_handler = None
    package_logger = _package_logger()
    package_logger.handlers.clear()
    package_logger.setLevel(logging.NOTSET)
