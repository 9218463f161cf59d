"""Configuration loader for application settings."""

import json
import logging
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from ..errors import ConfigError
from .settings import AppConfig

logger = logging.getLogger(__name__)


class ConfigLoader:
    """Load and validate application configuration."""

    DEFAULT_CONFIG_PATHS = [
        Path("~/.mailsim/app_config.json"),
        Path("config/app_config.json"),
    ]

    def __init__(self, config_path: Optional[Path] = None):
        """
        Initialize configuration loader.

        Args:
            config_path: Optional custom config file path
        """
        self.config_path = config_path
        self._config: Optional[AppConfig] = None

    def load_app_config(self) -> AppConfig:
        """
        Load application configuration from file.

        Returns:
            AppConfig instance (defaults when no file is found)

        Raises:
            ConfigError: If an explicit config file is missing, or any
                config file holds invalid JSON or invalid settings
        """
        if self._config is not None:
            return self._config

        if self.config_path and not self.config_path.expanduser().exists():
            raise ConfigError(f"Config file not found: {self.config_path}")

        config_paths = [self.config_path] if self.config_path else self.DEFAULT_CONFIG_PATHS

        for config_path in config_paths:
            if config_path and config_path.expanduser().exists():
                try:
                    with open(config_path.expanduser(), "r", encoding="utf-8") as f:
                        config_data = json.load(f)
                    self._config = AppConfig(**config_data)
                except (json.JSONDecodeError, ValidationError, TypeError) as e:
                    raise ConfigError(f"Invalid config in {config_path}: {e}") from e
                logger.debug("Loaded config from %s", config_path)
                return self._config

        # Return default config if no file found
        self._config = AppConfig()
        return self._config

    def reload(self) -> AppConfig:
        """Reload configuration from file."""
        self._config = None
        return self.load_app_config()
