#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Logging configuration and utilities
"""

# Standard library imports
import io
import os
import sys
import time
from datetime import datetime
from pathlib import Path
from typing import Optional

# Third-party imports
import logging
import urllib3
from urllib3.exceptions import InsecureRequestWarning

# Local imports
from config import (
    LOG_FILE_PATTERN,
    LOG_FILE_PREFIX,
    LOG_MAX_AGE_S,
    LOG_MAX_FILE_SIZE_MB_DEFAULT,
    LOG_SEPARATOR_WIDTH,
    LOG_TIMESTAMP_FORMAT,
)

# Add custom TRACE logging level (below DEBUG)
TRACE = 5
logging.addLevelName(TRACE, "TRACE")


def trace(self, message, *args, **kwargs):
    """Log a trace message (ultra-detailed, below DEBUG)"""
    if self.isEnabledFor(TRACE):
        self._log(TRACE, message, args, **kwargs)


# Add trace() method to Logger class
logging.Logger.trace = trace

LOG_MODES = ("customer", "verbose", "debug")

# Global log mode (set by setup_logging)
_CURRENT_LOG_MODE = "customer"

_FORMATS = {
    "customer": "%(_when)s | %(message)s",
    "verbose": "%(_when)s | %(levelname)-7s | %(message)s",
    "debug": "%(_when)s | %(levelname)-7s | %(name)-15s | %(funcName)-20s | %(message)s",
}

_LEVELS = {
    "customer": logging.INFO,
    "verbose": logging.DEBUG,
    "debug": TRACE,
}

# Third-party loggers that are far too chatty at DEBUG
_NOISY_LOGGERS = (
    "urllib3",
    "urllib3.connectionpool",
    "requests",
    "websocket",
)


def get_log_mode() -> str:
    """Get the current logging mode"""
    return _CURRENT_LOG_MODE


class _Fmt(logging.Formatter):
    """Formatter adding a short wall-clock ``_when`` field"""

    when_format = "%H:%M:%S"

    def format(self, record):
        record._when = time.strftime(self.when_format, time.localtime(record.created))
        return super().format(record)


class _FileFmt(_Fmt):
    when_format = "%Y-%m-%d %H:%M:%S"


class SizeRotatingCompositeHandler(logging.Handler):
    """
    A handler that delegates to an inner file handler and rolls over
    to a new file when the current file size reaches a threshold.

    - Creates files as: base.ext, base.ext.1, base.ext.2, ...
    - Does not delete on rotation (retention handled by cleanup_logs)
    """
    def __init__(self, base_path: Path, max_bytes: int):
        super().__init__()
        self.base_path = Path(base_path)
        self.max_bytes = max_bytes
        self._index = 0
        self.current_path = self.base_path
        self.current_handler = logging.FileHandler(self.current_path, encoding="utf-8")

    def _compute_current_path(self) -> Path:
        if self._index == 0:
            return self.base_path
        return self.base_path.with_name(f"{self.base_path.name}.{self._index}")

    def _maybe_rotate(self):
        current_size = self.current_path.stat().st_size if self.current_path.exists() else 0
        if current_size < self.max_bytes:
            return
        self.current_handler.close()
        self._index += 1
        self.current_path = self._compute_current_path()
        self.current_handler = logging.FileHandler(self.current_path, encoding="utf-8")
        self.current_handler.setLevel(self.level)
        if self.formatter is not None:
            self.current_handler.setFormatter(self.formatter)

    def emit(self, record):
        try:
            self._maybe_rotate()
            self.current_handler.emit(record)
        except Exception:
            self.handleError(record)

    def setFormatter(self, fmt):
        super().setFormatter(fmt)
        self.current_handler.setFormatter(fmt)

    def setLevel(self, level):
        super().setLevel(level)
        self.current_handler.setLevel(level)

    def close(self):
        self.current_handler.close()
        super().close()


class SafeStreamHandler(logging.StreamHandler):
    """A stream handler that tolerates missing or broken streams (windowed apps)"""
    def __init__(self, stream=None):
        if stream is None:
            stream = io.StringIO()
        super().__init__(stream)

    def emit(self, record):
        try:
            msg = self.format(record)
            self.stream.write(msg + self.terminator)
            self.stream.flush()
        except (BlockingIOError, BrokenPipeError, OSError, ValueError):
            # Stream is blocking or broken - skip this message
            pass


def _console_stream():
    """Pick stdout unless it is missing or redirected to devnull"""
    if sys.stdout is not None and getattr(sys.stdout, "name", None) == os.devnull:
        return sys.stderr
    return sys.stdout if sys.stdout is not None else sys.stderr


def setup_logging(log_mode: str = "customer", *, write_logs: bool = True,
                  logs_dir: Optional[Path] = None, stream=None) -> Optional[Path]:
    """
    Setup logging configuration with three modes.

    Args:
        log_mode: 'customer' (clean logs), 'verbose' (developer), or 'debug' (ultra-detailed)
        write_logs: If False, skip creating log files.
        logs_dir: Override for the log directory (defaults to the user data dir).
        stream: Console stream (defaults to stdout, or stderr when stdout is devnull).

    Returns:
        Path of the session log file, or None when file logging is off.
    """
    global _CURRENT_LOG_MODE
    if log_mode not in LOG_MODES:
        raise ValueError(f"Unknown log mode {log_mode!r}, expected one of {LOG_MODES}")
    _CURRENT_LOG_MODE = log_mode

    console = SafeStreamHandler(stream if stream is not None else _console_stream())
    console.setFormatter(_Fmt(_FORMATS[log_mode]))
    console.setLevel(_LEVELS[log_mode])

    file_handler = None
    log_file = None
    if write_logs:
        try:
            if logs_dir is None:
                from .paths import get_logs_dir
                logs_dir = get_logs_dir()
            else:
                logs_dir = Path(logs_dir)
                logs_dir.mkdir(parents=True, exist_ok=True)

            timestamp = datetime.now().strftime(LOG_TIMESTAMP_FORMAT)
            log_file = logs_dir / f"{LOG_FILE_PREFIX}_{timestamp}.log"
            max_bytes = int(LOG_MAX_FILE_SIZE_MB_DEFAULT * 1024 * 1024)
            file_handler = SizeRotatingCompositeHandler(log_file, max_bytes)
            file_handler.setFormatter(_FileFmt(_FORMATS[log_mode]))
            file_handler.setLevel(_LEVELS[log_mode])
        except OSError as e:
            # If file logging fails, continue without it
            file_handler = None
            log_file = None
            print(f"Warning: Could not setup file logging: {e}", file=sys.stderr)

    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
    root.addHandler(console)
    if file_handler:
        root.addHandler(file_handler)

    # Root logger must be at TRACE to allow all handlers to receive all messages
    root.setLevel(TRACE)

    startup = logging.getLogger("startup")
    if log_mode == "customer":
        startup.debug(f"Logging ready (log: {log_file.name if log_file else 'disabled'})")
    else:
        startup.info("=" * LOG_SEPARATOR_WIDTH)
        startup.info(f"LCU Bridge - {log_mode} logging (log file: {log_file.name if log_file else 'disabled'})")
        startup.info("=" * LOG_SEPARATOR_WIDTH)

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    # The LCU and the game both serve self-signed certificates
    urllib3.disable_warnings(InsecureRequestWarning)

    return log_file


def get_logger(name: str = "lcu") -> logging.Logger:
    """Get a logger instance"""
    return logging.getLogger(name)


def cleanup_logs(logs_dir: Optional[Path] = None, max_age_s: float = LOG_MAX_AGE_S) -> int:
    """
    Delete log files older than ``max_age_s``.

    Returns:
        Number of files removed
    """
    if logs_dir is None:
        from .paths import get_user_data_dir
        logs_dir = get_user_data_dir() / "logs"
    logs_dir = Path(logs_dir)
    if not logs_dir.exists():
        return 0

    removed = 0
    now = time.time()
    for log_file in logs_dir.glob(LOG_FILE_PATTERN + "*"):
        try:
            if now - log_file.stat().st_mtime > max_age_s:
                log_file.unlink()
                removed += 1
        except OSError as e:
            # Don't log this error to avoid recursion
            print(f"Warning: Failed to remove old log {log_file.name}: {e}", file=sys.stderr)
    return removed


# ==================== Pretty Logging Helpers ====================

def log_section(logger: logging.Logger, title: str, icon: str = "📌", details: dict = None, mode: str = None):
    """
    Log a section with title and optional details

    Args:
        logger: Logger instance
        title: Main title text (uppercased in verbose/debug mode)
        icon: Emoji icon to use
        details: Optional dict of key-value pairs to display
        mode: 'customer', 'verbose' or 'debug'. If None, uses current global log mode.

    Example:
        log_section(log, "LCU Connected", "🔗", {"Port": 51234, "Source": "cmdline"})
    """
    if mode is None:
        mode = get_log_mode()

    if mode == "customer":
        if details:
            detail_str = ", ".join(f"{k}: {v}" for k, v in details.items())
            logger.info(f"{icon} {title} ({detail_str})")
        else:
            logger.info(f"{icon} {title}")
    else:
        logger.info("=" * LOG_SEPARATOR_WIDTH)
        logger.info(f"{icon} {title.upper()}")
        if details:
            for key, value in details.items():
                logger.info(f"   📋 {key}: {value}")
        logger.info("=" * LOG_SEPARATOR_WIDTH)


def log_event(logger: logging.Logger, event: str, icon: str = "✓", details: dict = None):
    """
    Log a single event with optional details

    Example:
        log_event(log, "Client process found", "🎮", {"PID": 12345})
    """
    logger.info(f"{icon} {event}")
    if details:
        for key, value in details.items():
            logger.info(f"   • {key}: {value}")


def log_action(logger: logging.Logger, action: str, icon: str = "⚡"):
    """Log an action being performed"""
    logger.info(f"{icon} {action}")


def log_success(logger: logging.Logger, message: str, icon: str = "✅"):
    """Log a success message"""
    logger.info(f"{icon} {message}")


def log_status(logger: logging.Logger, status: str, value, icon: str = "ℹ️"):
    """
    Log a status update

    Example:
        log_status(log, "Phase", "ChampSelect", "🎯")
    """
    logger.info(f"{icon} {status}: {value}")
