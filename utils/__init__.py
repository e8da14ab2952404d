# utils/__init__.py
# This file is part of Sentential - A Propositional Logic Toolkit
#
# Utility module exports

from .logger import (
    LogLevel,
    LogicLogger,
    get_logger,
    set_log_level,
    configure_logging,
)

__all__ = [
    "LogLevel",
    "LogicLogger",
    "get_logger",
    "set_log_level",
    "configure_logging",
]
