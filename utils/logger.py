# utils/logger.py
# This file is part of Tarski - A Propositional Logic Evaluation Engine
#
# Logging utility for the evaluation engine with configurable levels

import logging
import sys
from enum import Enum
from typing import Optional


class LogLevel(Enum):
    """Log levels for the evaluation engine."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR


class EngineLogger:
    """Centralized logger for the evaluation engine with structured output."""

    def __init__(self, name: str = "tarski", level: LogLevel = LogLevel.INFO):
        """Initialize the engine logger.

        Args:
            name: Logger name (typically module name)
            level: Default logging level
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level.value)

        # Remove existing handlers to avoid duplicates
        self.logger.handlers.clear()

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level.value)
        console_handler.setFormatter(EngineFormatter())

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

    # Specialized methods for engine events
    def formula_parsed(self, formula_text: str, variables: tuple):
        """Log a successful parse with its canonical variable order."""
        names = ", ".join(variables) if variables else "-"
        self.debug(f"Parsed '{formula_text}' over variables [{names}]")

    def table_enumerated(self, variable_count: int, row_count: int):
        """Log truth table enumeration size."""
        self.debug(f"Enumerated {row_count} rows over {variable_count} variables")

    def classification_result(self, formula_text: str, classification: str, checked: int):
        """Log classifier outcome and how many assignments were inspected."""
        self.debug(
            f"'{formula_text}' classified as {classification} "
            f"after {checked} assignment(s)"
        )

    def evaluation_result(self, formula_text: str, result: bool):
        """Log a single evaluation result."""
        self.debug(f"'{formula_text}' evaluated to {result}")


class EngineFormatter(logging.Formatter):
    """Custom formatter for engine logging with clean output."""

    def format(self, record):
        # For INFO level and above, show message only (clean output)
        if record.levelno >= logging.INFO:
            return record.getMessage()

        if record.levelno == logging.DEBUG:
            return f"[DEBUG] {record.getMessage()}"

        return f"[{record.levelname}] {record.getMessage()}"


# Global logger instance
_global_logger: Optional[EngineLogger] = None


def get_logger(name: str = "tarski") -> EngineLogger:
    """Get or create the global engine logger instance.

    Args:
        name: Logger name (default: "tarski")

    Returns:
        EngineLogger instance
    """
    global _global_logger
    if _global_logger is None:
        _global_logger = EngineLogger(name)
    return _global_logger


def set_log_level(level: LogLevel):
    """Set the global log level.

    Args:
        level: New log level
    """
    logger = get_logger()
    logger.set_level(level)


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
