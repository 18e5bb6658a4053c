"""Configuration manager - loads, expands and validates application configuration."""

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import ValidationError as PydanticValidationError

from pattern_gallery.config.schemas import AppConfig
from pattern_gallery.config.utils import expand_config_env_vars
from pattern_gallery.domain.core.exceptions import ConfigurationError

ENV_LOG_LEVEL = "PATTERN_GALLERY_LOG_LEVEL"
ENV_OUTPUT_FORMAT = "PATTERN_GALLERY_OUTPUT_FORMAT"


class ConfigurationManager:
    """
    Configuration manager for the gallery.

    This class provides a unified interface for accessing configuration with:
    - JSON or YAML configuration files
    - Environment variable expansion inside values
    - Environment variable overrides for the common settings
    - Typed access through the pydantic AppConfig schema
    """

    def __init__(self, config_path: Optional[str] = None) -> None:
        """Initialize the instance."""
        self.config_path = config_path
        self._raw_config: Optional[Dict[str, Any]] = None
        self._app_config: Optional[AppConfig] = None

    @property
    def app_config(self) -> AppConfig:
        """Get the validated application configuration."""
        if self._app_config is None:
            self._app_config = self._load_app_config()
        return self._app_config

    def get_raw_config(self) -> Dict[str, Any]:
        """Get the configuration dictionary before validation."""
        if self._raw_config is None:
            self._raw_config = self._load_raw_config()
        return self._raw_config

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value by dotted key.

        Args:
            key: Dotted key, e.g. ``logging.level``
            default: Value returned when the key is absent

        Returns:
            Configuration value from the validated configuration
        """
        value: Any = self.app_config.model_dump(mode="json")
        for part in key.split("."):
            if not isinstance(value, dict) or part not in value:
                return default
            value = value[part]
        return value

    def reload(self) -> None:
        """Drop cached configuration so the next access reloads it."""
        self._raw_config = None
        self._app_config = None

    def _load_app_config(self) -> AppConfig:
        raw_config = self.get_raw_config()
        try:
            return AppConfig(**raw_config)
        except PydanticValidationError as e:
            missing = [
                ".".join(str(part) for part in error["loc"])
                for error in e.errors()
                if error.get("type") == "missing"
            ]
            raise ConfigurationError(f"Invalid configuration: {e}", missing) from e

    def _load_raw_config(self) -> Dict[str, Any]:
        config: Dict[str, Any] = {}
        if self.config_path:
            config = self._read_file(self.config_path)
        config = expand_config_env_vars(config)
        self._apply_env_overrides(config)
        return config

    def _read_file(self, config_path: str) -> Dict[str, Any]:
        path = Path(os.path.expanduser(config_path))
        if not path.is_file():
            raise ConfigurationError(f"Configuration file not found: {path}")

        try:
            with path.open("r", encoding="utf-8") as f:
                if path.suffix.lower() in (".yaml", ".yml"):
                    data = yaml.safe_load(f)
                else:
                    data = json.load(f)
        except (OSError, json.JSONDecodeError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Failed to read configuration file {path}: {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Configuration file {path} must contain a mapping at the top level"
            )
        return data

    @staticmethod
    def _apply_env_overrides(config: Dict[str, Any]) -> None:
        log_level = os.environ.get(ENV_LOG_LEVEL)
        if log_level:
            config.setdefault("logging", {})["level"] = log_level

        output_format = os.environ.get(ENV_OUTPUT_FORMAT)
        if output_format:
            config.setdefault("output", {})["format"] = output_format


def get_config_manager(config_path: Optional[str] = None) -> ConfigurationManager:
    """Create a configuration manager for the given file."""
    return ConfigurationManager(config_path)
