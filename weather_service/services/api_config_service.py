"""Loader for the JSON file that holds the upstream API key."""
from pathlib import Path
from typing import Union

from weather_service.models import ApiConfig
from weather_service.utils.colored_logger import get_component_logger

logger = get_component_logger(__name__, "config")


class ApiConfigService:
    """Reads the API config file on every call; nothing is cached."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def load(self) -> ApiConfig:
        """Read and decode the API config file.

        Returns:
            Decoded API config

        Raises:
            OSError: If the file is missing or unreadable
            ValueError: If the content is not a valid config document
        """
        raw = self.path.read_bytes()
        config = ApiConfig.model_validate_json(raw)
        logger.debug("API config read from %s", self.path)
        return config
