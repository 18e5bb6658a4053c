"""Configuration schemas."""

from .app_schema import OUTPUT_FORMATS, AppConfig, OutputConfig, validate_config
from .logging_schema import LogDestination, LoggingConfig, LogLevel

__all__ = [
    "OUTPUT_FORMATS",
    "AppConfig",
    "LogDestination",
    "LogLevel",
    "LoggingConfig",
    "OutputConfig",
    "validate_config",
]
