# utils/logger.py
# This file is part of Arbor - A Modal Logic Formula Toolkit
#
# Logging utility for formula processing with configurable levels

import logging
import sys
from enum import Enum
from typing import Optional


class LogLevel(Enum):
    """Log levels for formula processing."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR


class FormulaLogger:
    """Centralized logger for the parsing, tree and generation pipeline."""

    def __init__(self, name: str = "arbor", level: LogLevel = LogLevel.WARNING):
        """Initialize the formula logger.

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
        console_handler.setFormatter(FormulaLogFormatter())

        self.logger.addHandler(console_handler)

        # Prevent propagation to root logger
        self.logger.propagate = False

    def set_level(self, level: LogLevel):
        """Change the logging level."""
        self.logger.setLevel(level.value)
        for handler in self.logger.handlers:
            handler.setLevel(level.value)

    @property
    def level(self) -> int:
        return self.logger.level

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

    # Specialized methods for pipeline stages
    def tokens_produced(self, expression: str, tokens: list):
        """Log the token sequence produced for an expression."""
        self.debug(f"Tokenized '{expression}' into {_join(tokens)}")

    def postfix_produced(self, postfix: list):
        """Log the postfix sequence produced by the converter."""
        self.debug(f"Postfix notation: {_join(postfix)}")

    def tree_built(self, rendered: str, size: int, height: int):
        """Log a freshly built formula tree."""
        self.debug(f"Built tree {rendered} (size={size}, height={height})")

    def normalized(self, before: str, after: str):
        """Log the effect of commutative normalization."""
        if before == after:
            self.debug(f"Normalization left {before} unchanged")
        else:
            self.debug(f"Normalized {before} → {after}")

    def formula_generated(self, rendered: str, height: int, modal_depth: int):
        """Log a randomly generated formula."""
        self.debug(
            f"Generated {rendered} (height={height}, modal_depth={modal_depth})"
        )


def _join(tokens) -> str:
    return "[" + ", ".join(str(tok) for tok in tokens) + "]"


class FormulaLogFormatter(logging.Formatter):
    """Custom formatter with clean output."""

    def format(self, record):
        # For INFO level and above, show message only (clean output)
        if record.levelno >= logging.INFO:
            return record.getMessage()

        # For DEBUG level, show with level indicator
        if record.levelno == logging.DEBUG:
            return f"[DEBUG] {record.getMessage()}"

        # Default formatting for other levels
        return f"[{record.levelname}] {record.getMessage()}"


# Global logger instance
_global_logger: Optional[FormulaLogger] = None


def get_logger(name: str = "arbor") -> FormulaLogger:
    """Get or create the global formula logger instance.

    Args:
        name: Logger name (default: "arbor")

    Returns:
        FormulaLogger instance
    """
    global _global_logger
    if _global_logger is None:
        _global_logger = FormulaLogger(name)
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
