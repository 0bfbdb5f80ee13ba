"""
Configuration management for the BOM normalizer.
"""

from .config_manager import (
    ConfigManager, AppConfig, NormalizerConfig, LoggingConfig,
    get_config_manager, get_config, reset_config_manager
)

__all__ = [
    "ConfigManager",
    "AppConfig",
    "NormalizerConfig",
    "LoggingConfig",
    "get_config_manager",
    "get_config",
    "reset_config_manager"
]
