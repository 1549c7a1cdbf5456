"""
Logging system with colored output for ping sweep diagnostics.

This module provides a Logger class that supports colored console output
using colorama and different log levels with distinct colors. Sweep report
lines are not log messages; they are written by the ReportPrinter.
"""

import sys
import threading
from datetime import datetime
from enum import Enum
from typing import Optional
from colorama import Fore, Style, init

# Initialize colorama for cross-platform colored output
init(autoreset=True)

# Shared by every Logger so concurrent probe threads never split a line
_output_lock = threading.Lock()


class LogLevel(Enum):
    """Enumeration for different log levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


LEVEL_ORDER = {
    LogLevel.DEBUG: 0,
    LogLevel.INFO: 1,
    LogLevel.WARNING: 2,
    LogLevel.ERROR: 3,
}


class Logger:
    """
    Logger class with colored console output.

    Diagnostics go to stderr so they never mix into the sweep report on
    stdout. All instances share one minimum level, set with set_log_level().
    """

    # Color mapping for different log levels
    LEVEL_COLORS = {
        LogLevel.DEBUG: Fore.CYAN,
        LogLevel.INFO: Fore.GREEN,
        LogLevel.WARNING: Fore.YELLOW,
        LogLevel.ERROR: Fore.RED,
    }

    min_level = LogLevel.INFO

    def __init__(self, name: str = "PingSweep"):
        """
        Initialize the Logger.

        Args:
            name: Name of the logger, shown in debug output
        """
        self.name = name

    def _should_log(self, level: LogLevel) -> bool:
        """
        Check if a message should be logged based on minimum level.

        Args:
            level: Log level to check

        Returns:
            True if message should be logged, False otherwise
        """
        return LEVEL_ORDER[level] >= LEVEL_ORDER[Logger.min_level]

    def _format_timestamp(self) -> str:
        return datetime.now().strftime("%H:%M:%S")

    def _emit(self, text: str) -> None:
        with _output_lock:
            print(text, file=sys.stderr, flush=True)

    def _log(self, level: LogLevel, message: str, **kwargs) -> None:
        """
        Internal logging method that handles formatting and output.

        Args:
            level: Log level
            message: Message to log
            **kwargs: Additional context rendered as key=value pairs
        """
        if not self._should_log(level):
            return

        timestamp = self._format_timestamp()
        color = self.LEVEL_COLORS[level]

        formatted_message = (
            f"{Style.DIM}[{timestamp}]{Style.RESET_ALL} "
            f"{color}{level.value:<7}{Style.RESET_ALL} "
        )
        if level == LogLevel.DEBUG:
            formatted_message += f"{Style.DIM}{self.name}:{Style.RESET_ALL} "
        formatted_message += message

        if kwargs:
            details = " | ".join([f"{k}={v}" for k, v in kwargs.items()])
            formatted_message += f" {Style.DIM}({details}){Style.RESET_ALL}"

        self._emit(formatted_message)

    def debug(self, message: str, **kwargs) -> None:
        """Log a debug message."""
        self._log(LogLevel.DEBUG, message, **kwargs)

    def info(self, message: str, **kwargs) -> None:
        """Log an info message."""
        self._log(LogLevel.INFO, message, **kwargs)

    def warning(self, message: str, **kwargs) -> None:
        """Log a warning message."""
        self._log(LogLevel.WARNING, message, **kwargs)

    def error(
        self, message: str, exception: Optional[Exception] = None, **kwargs
    ) -> None:
        """
        Log an error message.

        Args:
            message: Error message
            exception: Optional exception object for additional context
            **kwargs: Additional context information
        """
        if exception:
            kwargs["exception"] = f"{type(exception).__name__}: {str(exception)}"
        self._log(LogLevel.ERROR, message, **kwargs)


# Global logger instance
logger = Logger()


def set_log_level(level: LogLevel) -> None:
    """
    Set the log level for every logger in the package.

    Args:
        level: Minimum log level to display
    """
    Logger.min_level = level


def get_logger(name: str = "PingSweep") -> Logger:
    """
    Get a logger instance with the specified name.

    Args:
        name: Logger name

    Returns:
        Logger instance
    """
    return Logger(name)
