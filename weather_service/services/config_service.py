"""Configuration service for managing server settings."""
import logging
from pathlib import Path
from typing import Optional

import yaml

from weather_service.models import Settings

logger = logging.getLogger(__name__)


class ConfigService:
    """Service for managing server settings."""

    def __init__(self, config_path: Optional[str] = None):
        """Initialize configuration service.

        Args:
            config_path: Path to config file. If None, will search default locations.
        """
        self._settings: Optional[Settings] = None
        self._config_path = config_path
        self.load_config()

    def load_config(self) -> Settings:
        """Load settings from YAML file.

        An explicit path must exist. Without one, config.yml and
        config/config.yml are tried and built-in defaults apply when
        neither is present.

        Returns:
            Validated settings

        Raises:
            FileNotFoundError: If an explicit config path does not exist
        """
        if self._config_path:
            config_path = Path(self._config_path)
            if not config_path.exists():
                raise FileNotFoundError(f"config file not found: {config_path}")
        else:
            config_path = Path("config.yml")
            if not config_path.exists():
                config_path = Path("config/config.yml")

        if not config_path.exists():
            logger.info("No config.yml found, using default settings")
            self._settings = Settings()
            return self._settings

        with open(config_path, 'r', encoding='utf-8') as f:
            raw = yaml.safe_load(f) or {}

        self._settings = Settings.model_validate(raw)
        logger.info(f"Configuration loaded from {config_path}")

        return self._settings

    @property
    def settings(self) -> Settings:
        """Get current settings."""
        if self._settings is None:
            raise RuntimeError("Configuration not loaded")
        return self._settings

    def get_greeting(self) -> str:
        return self.settings.greeting

    def get_api_config_path(self) -> Path:
        return Path(self.settings.weather.api_config_path)

    def get_weather_url(self) -> str:
        return self.settings.weather.base_url

    def get_timeout(self) -> Optional[float]:
        return self.settings.weather.timeout
