"""
Logging setup for applications using the BOM normalizer.
"""

from .logger_config import (
    setup_logging, set_log_level, get_logging_stats, close_logging, build_formatter,
    LoggingManager, PACKAGE_LOGGER
)
from .log_formatter import StructuredFormatter, ContextFormatter, CONTEXT_FIELDS

__all__ = [
    "setup_logging",
    "set_log_level",
    "get_logging_stats",
    "close_logging",
    "build_formatter",
    "LoggingManager",
    "PACKAGE_LOGGER",
    "StructuredFormatter",
    "ContextFormatter",
    "CONTEXT_FIELDS"
]
