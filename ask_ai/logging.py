"""
Structured logging for the Ask AI action.

This module provides a small structured logging system. Entries are printed
to the terminal (coloured, or as JSON lines) and can be forwarded to a queue
so a host console can show them.

Usage:
    from ask_ai.logging import get_logger

    logger = get_logger("action")
    logger.info("Request sent", url="https://api.example.com/v1/chat/completions")
    logger.error("Chat completion failed", status=401)
"""

import json
import sys
import time
from enum import Enum
from typing import Any, Optional
from dataclasses import dataclass, asdict


class LogLevel(Enum):
    """Log severity levels."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARN = "WARN"
    ERROR = "ERROR"

    @classmethod
    def from_name(cls, name: str) -> "LogLevel":
        """
        Get a level by name, accepting the stdlib spellings.

        WARNING maps to WARN, CRITICAL and FATAL to ERROR. Unknown names
        fall back to INFO.
        """
        name = name.strip().upper()
        name = _LEVEL_ALIASES.get(name, name)
        try:
            return cls[name]
        except KeyError:
            return cls.INFO


_LEVEL_ALIASES = {
    "WARNING": "WARN",
    "CRITICAL": "ERROR",
    "FATAL": "ERROR",
}


@dataclass
class LogEntry:
    """Structured log entry."""
    ts: float           # Unix timestamp
    module: str         # Module name
    level: str          # Log level
    msg: str            # Message
    details: Optional[dict] = None  # Additional data

    def to_json(self) -> str:
        """Convert to JSON string, omitting None fields."""
        data = {k: v for k, v in asdict(self).items() if v is not None}
        return json.dumps(data, ensure_ascii=False, default=repr)

    def to_console(self) -> str:
        """Format for console output with colors."""
        colors = {
            "DEBUG": "\033[90m",    # Gray
            "INFO": "\033[97m",     # White
            "WARN": "\033[93m",     # Yellow
            "ERROR": "\033[91m",    # Red
        }
        reset = "\033[0m"

        color = colors.get(self.level, "")
        timestamp = time.strftime("%H:%M:%S", time.localtime(self.ts))
        line = f"{color}[{timestamp}] [{self.level}] [{self.module}] {self.msg}"
        if self.details:
            details_str = " ".join(f"{k}={v}" for k, v in self.details.items())
            line = f"{line} {details_str}"
        return f"{line}{reset}"


class StructuredLogger:
    """
    Structured logger with console or JSON output.

    Args:
        module: Module name for identification
        queue: Optional queue the host console reads from
        min_level: Minimum level to log (default: INFO)
        json_format: Print JSON lines instead of coloured text
    """

    _LEVEL_ORDER = {
        LogLevel.DEBUG: 0,
        LogLevel.INFO: 1,
        LogLevel.WARN: 2,
        LogLevel.ERROR: 3,
    }

    def __init__(
        self,
        module: str,
        queue: Optional[Any] = None,
        min_level: LogLevel = LogLevel.INFO,
        json_format: bool = False,
    ):
        self.module = module
        self.queue = queue
        self.min_level = min_level
        self.json_format = json_format

    def _should_log(self, level: LogLevel) -> bool:
        """Check if level meets minimum threshold."""
        return self._LEVEL_ORDER.get(level, 0) >= self._LEVEL_ORDER.get(self.min_level, 0)

    def log(self, level: LogLevel, msg: str, **extra) -> None:
        """
        Log a message with optional extra fields.

        Args:
            level: Log level
            msg: Log message
            **extra: Additional fields to include
        """
        if not self._should_log(level):
            return

        entry = LogEntry(
            ts=time.time(),
            module=self.module,
            level=level.value,
            msg=msg,
            details=extra if extra else None
        )

        if self.json_format:
            print(entry.to_json())
        else:
            try:
                print(entry.to_console())
            except UnicodeEncodeError:
                # Fallback if the terminal cannot encode the entry
                sys.__stdout__.write(entry.to_json() + "\n")
                sys.__stdout__.flush()

        if self.queue is not None:
            self.queue.put(entry.to_json())

    def debug(self, msg: str, **extra) -> None:
        """Log debug message."""
        self.log(LogLevel.DEBUG, msg, **extra)

    def info(self, msg: str, **extra) -> None:
        """Log info message."""
        self.log(LogLevel.INFO, msg, **extra)

    def warn(self, msg: str, **extra) -> None:
        """Log warning message."""
        self.log(LogLevel.WARN, msg, **extra)

    def error(self, msg: str, **extra) -> None:
        """Log error message."""
        self.log(LogLevel.ERROR, msg, **extra)


# ========== Logger Factory ==========

_loggers: dict[str, StructuredLogger] = {}
_global_queue: Optional[Any] = None


def set_global_queue(queue: Any) -> None:
    """Set the global queue for all loggers."""
    global _global_queue
    _global_queue = queue
    for logger in _loggers.values():
        logger.queue = queue


def get_logger(module: str, min_level: Optional[LogLevel] = None) -> StructuredLogger:
    """
    Get or create a logger for the given module.

    Level and output format default to the ``log`` section of the settings.

    Args:
        module: Module name
        min_level: Minimum log level

    Returns:
        StructuredLogger instance
    """
    if module not in _loggers:
        from ask_ai.config import settings

        if min_level is None:
            min_level = LogLevel.from_name(settings.log.level)
        _loggers[module] = StructuredLogger(
            module, _global_queue, min_level, json_format=settings.log.json_format
        )
    return _loggers[module]
