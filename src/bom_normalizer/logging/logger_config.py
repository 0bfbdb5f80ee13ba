"""
Optional logging setup for applications using the BOM normalizer.

Library modules only call ``logging.getLogger(__name__)``. Output is
configured here, on the ``bom_normalizer`` package logger, from the
``logging`` section of the application configuration.
"""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from ..config import LoggingConfig, get_config
from .log_formatter import ContextFormatter, StructuredFormatter

PACKAGE_LOGGER = "bom_normalizer"

logger = logging.getLogger(__name__)


def _level(name: str) -> int:
    level = logging.getLevelName(str(name).upper())
    return level if isinstance(level, int) else logging.INFO


def build_formatter(config: LoggingConfig) -> logging.Formatter:
    """Pick the formatter the configuration asks for."""
    if config.structured:
        return StructuredFormatter()
    return ContextFormatter(config.format)


class LoggingManager:
    """
    Owns the handlers attached to the package logger.

    Host applications keep control of the root logger; only the
    ``bom_normalizer`` hierarchy is touched.
    """

    def __init__(self):
        self._handlers: List[logging.Handler] = []
        self._config: Optional[LoggingConfig] = None

    @property
    def configured(self) -> bool:
        return self._config is not None

    def configure(self, config: Optional[LoggingConfig] = None, console: bool = True) -> None:
        """
        Attach handlers to the package logger. Does nothing if already configured.

        Args:
            config: Logging section; read from the application config if omitted
            console: Whether to log to stderr
        """
        if self.configured:
            return

        config = config or get_config().logging
        level = _level(config.level)
        formatter = build_formatter(config)

        handlers: List[logging.Handler] = []
        if console:
            handlers.append(logging.StreamHandler(sys.stderr))
        if config.file:
            Path(config.file).parent.mkdir(parents=True, exist_ok=True)
            handlers.append(logging.handlers.RotatingFileHandler(
                config.file,
                maxBytes=config.max_file_size * 1024 * 1024,
                backupCount=config.backup_count,
                encoding="utf-8"
            ))

        package_logger = logging.getLogger(PACKAGE_LOGGER)
        package_logger.setLevel(level)
        for handler in handlers:
            handler.setLevel(level)
            handler.setFormatter(formatter)
            package_logger.addHandler(handler)

        self._handlers = handlers
        self._config = config
        logger.debug(f"Logging configured at level {config.level} with {len(handlers)} handler(s)")

    def set_level(self, level: str) -> None:
        """Change the level of the package logger and of every attached handler."""
        value = _level(level)
        logging.getLogger(PACKAGE_LOGGER).setLevel(value)
        for handler in self._handlers:
            handler.setLevel(value)

    def stats(self) -> Dict[str, Any]:
        return {
            "configured": self.configured,
            "handlers": [type(handler).__name__ for handler in self._handlers],
            "level": logging.getLevelName(logging.getLogger(PACKAGE_LOGGER).level),
        }

    def close(self) -> None:
        """Detach and close every handler this manager attached."""
        package_logger = logging.getLogger(PACKAGE_LOGGER)
        for handler in self._handlers:
            package_logger.removeHandler(handler)
            handler.close()
        package_logger.setLevel(logging.NOTSET)
        self._handlers = []
        self._config = None


_logging_manager = LoggingManager()


def setup_logging(config: Optional[LoggingConfig] = None, console: bool = True) -> None:
    _logging_manager.configure(config, console)


def set_log_level(level: str) -> None:
    _logging_manager.set_level(level)


def get_logging_stats() -> Dict[str, Any]:
    return _logging_manager.stats()


def close_logging() -> None:
    _logging_manager.close()
