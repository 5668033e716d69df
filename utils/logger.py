# utils/logger.py
# This file is part of Tabula - A Propositional Truth Table Engine
#
# Logging utility for truth table evaluation with configurable levels

import logging
import sys
from enum import Enum
from typing import Iterable, Optional


class LogLevel(Enum):
    """Log levels for truth table evaluation."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR


class TabulaLogger:
    """Centralized logger with structured output for tables and normal forms."""

    def __init__(self, name: str = "tabula", level: LogLevel = LogLevel.INFO):
        """Initialize the logger.

        Args:
            name: Logger name
            level: Default logging level
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level.value)

        # Remove existing handlers to avoid duplicates
        self.logger.handlers.clear()

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level.value)
        console_handler.setFormatter(TabulaFormatter())

        self.logger.addHandler(console_handler)

        # Prevent propagation to root logger
        self.logger.propagate = False

    def set_level(self, level: LogLevel):
        """Change the logging level."""
        self.logger.setLevel(level.value)
        for handler in self.logger.handlers:
            handler.setLevel(level.value)

    # Core logging methods
    def debug(self, message: str, **kwargs):
        """Log debug message (detailed internal state)."""
        self.logger.debug(message, **kwargs)

    def info(self, message: str, **kwargs):
        """Log info message (general progress)."""
        self.logger.info(message, **kwargs)

    def warning(self, message: str, **kwargs):
        """Log warning message (unexpected but recoverable)."""
        self.logger.warning(message, **kwargs)

    def error(self, message: str, **kwargs):
        """Log error message (serious problems)."""
        self.logger.error(message, **kwargs)

    # Specialized methods for truth table output
    def table_header(self, formula: str, columns: Iterable[str]):
        """Log the formula and the column header line."""
        self.info("=== Truth Table ===")
        self.info(f"Formula: {formula}")
        self.info(" | ".join(columns))

    def table_row(self, index: int, values: Iterable):
        """Log one truth table row."""
        self.info(f"{index:>3}: " + " | ".join(str(v) for v in values))

    def canonical_form(self, label: str, text: str):
        """Log one derived normal form."""
        self.info(f"{label}: {text if text else '(none)'}")

    def counts(self, positive: int, negative: int, total: int):
        """Log the row counts."""
        self.info(f"Rows: {total} (true: {positive}, false: {negative})")


class TabulaFormatter(logging.Formatter):
    """Custom formatter with clean output."""

    def format(self, record):
        # For INFO level and above, show message only (clean output)
        if record.levelno >= logging.INFO:
            return record.getMessage()

        if record.levelno == logging.DEBUG:
            return f"[DEBUG] {record.getMessage()}"

        return f"[{record.levelname}] {record.getMessage()}"


# Global logger instance
_global_logger: Optional[TabulaLogger] = None


def get_logger(name: str = "tabula") -> TabulaLogger:
    """Get or create the global logger instance.

    Args:
        name: Logger name (default: "tabula")

    Returns:
        TabulaLogger instance
    """
    global _global_logger
    if _global_logger is None:
        _global_logger = TabulaLogger(name)
    return _global_logger


def set_log_level(level: LogLevel):
    """Set the global log level.

    Args:
        level: New log level
    """
    get_logger().set_level(level)


def configure_logging(verbose: bool = False, debug: bool = False):
    """Configure logging based on command line flags.

    Args:
        verbose: Enable verbose (INFO) output
        debug: Enable debug output (overrides verbose)
    """
    if debug:
        set_log_level(LogLevel.DEBUG)
    elif verbose:
        set_log_level(LogLevel.INFO)
    else:
        set_log_level(LogLevel.WARNING)
