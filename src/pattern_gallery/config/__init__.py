"""Configuration package."""

from .manager import ConfigurationManager, get_config_manager
from .schemas import AppConfig, LogDestination, LoggingConfig, OutputConfig

__all__ = [
    "AppConfig",
    "ConfigurationManager",
    "LogDestination",
    "LoggingConfig",
    "OutputConfig",
    "get_config_manager",
]
