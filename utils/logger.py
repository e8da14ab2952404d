# utils/logger.py
# This file is part of Sentential - A Propositional Logic Toolkit
#
# Logging utility with configurable levels

import logging
import sys
from enum import Enum
from typing import Optional


class LogLevel(Enum):
    """Log levels for the toolkit."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR


class LogicLogger:
    """Centralized logger with structured output for derivations."""

    def __init__(self, name: str = "sentential", level: LogLevel = LogLevel.INFO):
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
        console_handler.setFormatter(LogicFormatter())

        self.logger.addHandler(console_handler)

        # Prevent propagation to root logger
        self.logger.propagate = False

    def set_level(self, level: LogLevel):
        """Change the logging level."""
        self.logger.setLevel(level.value)
        for handler in self.logger.handlers:
            handler.setLevel(level.value)

    def is_debug_enabled(self) -> bool:
        """True when debug records would be emitted."""
        return self.logger.isEnabledFor(logging.DEBUG)

    # Core logging methods
    def debug(self, message: str, **kwargs):
        """Log debug message (detailed internal state)."""
        if self.is_debug_enabled():
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

    # Specialized methods for rewriting events.
    # They take expressions and only render them when debug output is on.
    def rule_applied(self, rule, before, after):
        """Log a single rule application."""
        if self.is_debug_enabled():
            self.debug(f"    🔁 {rule}: {before.pretty_print()} ⟶ {after.pretty_print()}")

    def rule_not_applicable(self, rule, expression):
        """Log a speculative rule application that left the input unchanged."""
        if self.is_debug_enabled():
            self.debug(f"    ⏭️  {rule} does not apply to {expression.pretty_print()}")

    def normal_form_result(self, form, before, after, steps: int):
        """Log the outcome of a normal form transformation."""
        if self.is_debug_enabled():
            self.debug(f"  {form}: {before.pretty_print()} ⟶ {after.pretty_print()} ({steps} steps)")

    def proof_result(self, first, second, steps: Optional[int]):
        """Log the outcome of an equivalence proof."""
        if not self.is_debug_enabled():
            return
        if steps is None:
            self.debug(f"  ❌ No derivation found between {first.pretty_print()} and {second.pretty_print()}")
        else:
            self.debug(f"  ✅ {first.pretty_print()} ≡ {second.pretty_print()} in {steps} steps")

    def truth_table(self, formula, variables: int, rows: int):
        """Log truth table enumeration."""
        if self.is_debug_enabled():
            self.debug(f"  Tabulated {formula.pretty_print()}: {variables} variables, {rows} rows")

    def derivation(self, text: str):
        """Log a rendered derivation."""
        self.info(text)


class LogicFormatter(logging.Formatter):
    """Formatter printing bare messages, with a marker on debug records."""

    def format(self, record):
        # For INFO level and above, show message only (clean output)
        if record.levelno >= logging.INFO:
            return record.getMessage()

        if record.levelno == logging.DEBUG:
            return f"[DEBUG] {record.getMessage()}"

        return f"[{record.levelname}] {record.getMessage()}"


# Global logger instance
_global_logger: Optional[LogicLogger] = None


def get_logger(name: str = "sentential") -> LogicLogger:
    """Get or create the global logger instance.

    Args:
        name: Logger name (default: "sentential")

    Returns:
        LogicLogger instance
    """
    global _global_logger
    if _global_logger is None:
        _global_logger = LogicLogger(name)
    return _global_logger


def set_log_level(level: LogLevel):
    """Set the global log level.

    Args:
        level: New log level
    """
    logger = get_logger()
    logger.set_level(level)


def configure_logging(debug: bool = False):
    """Configure logging based on command line flags.

    Results are reported at INFO, so INFO is the floor.

    Args:
        debug: Enable debug output
    """
    set_log_level(LogLevel.DEBUG if debug else LogLevel.INFO)
