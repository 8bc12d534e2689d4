"""
Logging helpers for the svg_scene package.

All package modules log through children of the ``svg_scene`` logger.
``setup_logger`` attaches console and rotating file output to that logger;
the other helpers trace timings and capture records for inspection.
"""

import os
import sys
import time
import logging
from typing import Any, Dict, List, Optional, Union
from logging.handlers import RotatingFileHandler
from functools import wraps

# Constants
PACKAGE_LOGGER = "svg_scene"
DEFAULT_LOG_LEVEL = logging.INFO
MAX_LOG_SIZE = 5 * 1024 * 1024  # 5MB
BACKUP_COUNT = 3
LOG_FORMAT = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'

# Handlers installed by setup_logger, removed again on reconfiguration
_installed_handlers: List[logging.Handler] = []


def _resolve_level(level: Union[int, str, None]) -> int:
    if level is None:
        return DEFAULT_LOG_LEVEL
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    return resolved if isinstance(resolved, int) else DEFAULT_LOG_LEVEL


def setup_logger(
    level: Union[int, str, None] = None,
    log_file: Optional[str] = None,
    console: bool = True,
    format_str: Optional[str] = None
) -> logging.Logger:
    """
    Configure output for the package logger.

    Calling this again replaces the handlers installed by the previous call;
    handlers added by the host application are left alone.

    Args:
        level: Level name ("DEBUG") or number
        log_file: Optional path of a rotating log file
        console: Whether to write to stderr
        format_str: Optional custom format string

    Returns:
        The configured package logger
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    level_value = _resolve_level(level)
    formatter = logging.Formatter(format_str or LOG_FORMAT)

    while _installed_handlers:
        handler = _installed_handlers.pop()
        package_logger.removeHandler(handler)
        handler.close()

    handlers: List[logging.Handler] = []
    if console:
        handlers.append(logging.StreamHandler(sys.stderr))
    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        handlers.append(RotatingFileHandler(log_file, maxBytes=MAX_LOG_SIZE, backupCount=BACKUP_COUNT))

    for handler in handlers:
        handler.setFormatter(formatter)
        package_logger.addHandler(handler)
        _installed_handlers.append(handler)

    package_logger.setLevel(level_value)
    return package_logger


def get_logger(name: str) -> logging.Logger:
    """Get the logger for a module of this package."""
    return logging.getLogger(name)


class LogCapture:
    """
    Context manager that collects records emitted on a logger.

    The logger is opened up to ``level`` for the duration of the block and
    restored afterwards.
    """

    class _Collector(logging.Handler):
        def __init__(self, records: List[logging.LogRecord]):
            super().__init__()
            self._records = records

        def emit(self, record):
            self._records.append(record)

    def __init__(self, logger_name: str = PACKAGE_LOGGER, level: int = logging.DEBUG):
        self.logger_name = logger_name
        self.level = level
        self.records: List[logging.LogRecord] = []
        self._collector = None
        self._saved_level = logging.NOTSET

    def messages(self, min_level: int = logging.NOTSET) -> List[str]:
        """Formatted messages of captured records at or above ``min_level``."""
        return [r.getMessage() for r in self.records if r.levelno >= min_level]

    def __enter__(self) -> 'LogCapture':
        target = logging.getLogger(self.logger_name)
        self._saved_level = target.level
        if target.getEffectiveLevel() > self.level:
            target.setLevel(self.level)

        self._collector = self._Collector(self.records)
        self._collector.setLevel(self.level)
        target.addHandler(self._collector)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        target = logging.getLogger(self.logger_name)
        target.removeHandler(self._collector)
        target.setLevel(self._saved_level)
        self._collector = None


def log_function_call(logger: Optional[logging.Logger] = None, level: int = logging.DEBUG):
    """
    Decorator that logs entry, exit and duration of a call.

    Args:
        logger: Logger to use (the function's module logger if None)
        level: Level for the entry and exit messages
    """
    def decorator(func):
        target = logger or logging.getLogger(func.__module__)

        @wraps(func)
        def wrapper(*args, **kwargs):
            target.log(level, f"CALL {func.__qualname__}")
            started = time.perf_counter()
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                target.warning(
                    f"FAIL {func.__qualname__} after {time.perf_counter() - started:.6f}s: "
                    f"{type(e).__name__}: {e}"
                )
                raise
            target.log(level, f"RETURN {func.__qualname__} in {time.perf_counter() - started:.6f}s")
            return result

        return wrapper
    return decorator


def log_exception(
    logger: logging.Logger,
    exc: BaseException,
    level: int = logging.ERROR,
    context: Optional[Dict[str, Any]] = None
) -> None:
    """
    Log an exception with its traceback and optional context values.

    Args:
        logger: Logger to use
        exc: Exception to log
        level: Log level
        context: Extra key/value pairs appended to the message
    """
    details = "".join(f" {key}={value!r}" for key, value in (context or {}).items())
    logger.log(level, f"{type(exc).__name__}: {exc}{details}", exc_info=exc)
