"""
Logging configuration for Void Update Notifier.
"""

# SPDX-License-Identifier: GPL-3.0-or-later

from __future__ import annotations

import logging
import sys
import threading
from typing import Any, Dict, Optional


class ColoredFormatter(logging.Formatter):
    """Custom formatter with colors for terminal output."""

    COLORS = {
        'DEBUG': '\033[36m',    # Cyan
        'INFO': '\033[32m',     # Green
        'WARNING': '\033[33m',  # Yellow
        'ERROR': '\033[31m',    # Red
        'CRITICAL': '\033[35m',  # Magenta
        'RESET': '\033[0m'      # Reset
    }

    def format(self, record: logging.LogRecord) -> str:
        """Format log record, coloring the level name on a color terminal."""
        if not _colors_enabled():
            return super().format(record)

        log_color = self.COLORS.get(record.levelname, self.COLORS['RESET'])
        reset_color = self.COLORS['RESET']

        # Color a copy so other handlers see the plain level name
        record = logging.makeLogRecord(record.__dict__)
        record.levelname = f"{log_color}{record.levelname}{reset_color}"

        return super().format(record)


# Global configuration for logging with thread synchronization
_global_config: Optional[Dict[str, Any]] = None
_logger_instances: Dict[str, logging.Logger] = {}
_global_state_lock = threading.RLock()


def _level_from_config(config: Optional[Dict[str, Any]]) -> int:
    """Pick the log level for the current configuration."""
    if not config:
        return logging.WARNING
    if config.get('debug'):
        return logging.DEBUG
    if config.get('verbose'):
        return logging.INFO
    return logging.WARNING


def _colors_enabled() -> bool:
    """Whether log lines may carry ANSI colors."""
    if _global_config is not None and not _global_config.get('use_color', True):
        return False
    isatty = getattr(sys.stderr, 'isatty', None)
    return bool(isatty and isatty())


def set_global_config(config: Dict[str, Any]) -> None:
    """
    Set global configuration for logging with thread safety.

    Args:
        config: Configuration dictionary (``debug``, ``verbose`` and ``use_color`` keys)
    """
    global _global_config
    with _global_state_lock:
        _global_config = config
        _reconfigure_all_loggers()


def _reconfigure_all_loggers() -> None:
    """Apply the current level to every logger handed out so far."""
    level = _level_from_config(_global_config)
    for logger in _logger_instances.values():
        logger.setLevel(level)
        for handler in logger.handlers:
            handler.setLevel(level)


def get_logger(name: str) -> logging.Logger:
    """
    Get or create a logger instance with thread safety.

    Args:
        name: Logger name

    Returns:
        Logger instance
    """
    with _global_state_lock:
        if name in _logger_instances:
            return _logger_instances[name]

        level = _level_from_config(_global_config)

        logger = logging.getLogger(name)
        logger.setLevel(level)
        logger.handlers.clear()

        # Console handler (use stderr for logs, stdout carries the report)
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level)
        console_handler.setFormatter(ColoredFormatter(
            '%(levelname)s - %(name)s - %(message)s'
        ))
        logger.addHandler(console_handler)

        logger.propagate = False

        _logger_instances[name] = logger
        return logger
