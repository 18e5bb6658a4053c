"""Application bootstrap - composition root for the gallery."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import ValidationError as PydanticValidationError

from pattern_gallery.application.catalog import DemoCatalog, DemoResult
from pattern_gallery.application.demos import build_default_catalog
from pattern_gallery.config import AppConfig, ConfigurationManager, LoggingConfig
from pattern_gallery.domain.core.exceptions import ConfigurationError
from pattern_gallery.infrastructure.logging.logger import get_logger, setup_logging
from pattern_gallery.infrastructure.patterns.instance_registry import InstanceRegistry


class Application:
    """Application context owning configuration, shared instances and the demo catalog."""

    def __init__(self, config_path: Optional[str] = None, log_level: Optional[str] = None) -> None:
        """Initialize the instance."""
        self.config_path = config_path
        self.log_level = log_level
        self._initialized = False

        # Defer heavy initialization until first use
        self._config_manager: Optional[ConfigurationManager] = None
        self._catalog: Optional[DemoCatalog] = None
        self.instance_registry = InstanceRegistry()

        # Only create logger immediately (lightweight)
        self.logger = get_logger(__name__)

    def _ensure_config_manager(self) -> ConfigurationManager:
        """Ensure config manager is created (lazy initialization)."""
        if self._config_manager is None:
            self._config_manager = ConfigurationManager(self.config_path)
        return self._config_manager

    @property
    def config(self) -> AppConfig:
        """
        Effective configuration, with the command-line log level applied.

        Raises:
            ConfigurationError: If the configuration or the log level override is invalid
        """
        app_config = self._ensure_config_manager().app_config
        if self.log_level:
            try:
                logging_config = LoggingConfig.model_validate(
                    {**app_config.logging.model_dump(), "level": self.log_level}
                )
            except PydanticValidationError as e:
                raise ConfigurationError(f"Invalid log level override: {self.log_level}") from e
            app_config = app_config.model_copy(update={"logging": logging_config})
        return app_config

    @property
    def catalog(self) -> DemoCatalog:
        if self._catalog is None:
            self._catalog = build_default_catalog()
        return self._catalog

    def initialize(self) -> bool:
        """
        Initialize logging and the demo catalog.

        Raises:
            ConfigurationError: If the configuration cannot be loaded
        """
        if self._initialized:
            return True

        setup_logging(self.config.logging)
        self.logger.info(
            "Initialized pattern gallery",
            config_path=self.config_path,
            demos=len(self.catalog),
        )
        self._initialized = True
        return True

    def run_demos(self, names: List[str]) -> List[DemoResult]:
        """Run the named demos in order."""
        self.initialize()
        return [self.catalog.run(name, self.instance_registry) for name in names]

    def get_status(self) -> Dict[str, Any]:
        """Summary of the application state."""
        return {
            "initialized": self._initialized,
            "config_path": self.config_path,
            "demos": len(self.catalog),
            "shared_instances": self.instance_registry.registered_classes(),
        }


def create_application(config_path: Optional[str] = None, log_level: Optional[str] = None) -> Application:
    """Create and initialize the application."""
    app = Application(config_path, log_level=log_level)
    app.initialize()
    return app
