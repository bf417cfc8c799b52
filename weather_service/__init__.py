"""Weather service application package."""
import logging
from typing import Optional

import httpx
from fastapi import FastAPI

from weather_service.controllers import GreetingController, WeatherController
from weather_service.router import create_router
from weather_service.services import ApiConfigService, ConfigService, WeatherService
from weather_service.utils.colored_logger import setup_colored_logging

__version__ = "0.1.0"

# Configure colored logging
setup_colored_logging(level=logging.INFO)
logger = logging.getLogger(__name__)


def create_app(
    config_path: Optional[str] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> FastAPI:
    """Create and configure FastAPI application.

    Args:
        config_path: Optional path to config file
        transport: Optional httpx transport for upstream calls

    Returns:
        Configured FastAPI application
    """
    logger.info("Initializing services...")

    config_service = ConfigService(config_path)
    api_config_service = ApiConfigService(config_service.get_api_config_path())
    weather_service = WeatherService(
        api_config_service=api_config_service,
        base_url=config_service.get_weather_url(),
        timeout=config_service.get_timeout(),
        transport=transport,
    )

    greeting_controller = GreetingController(greeting=config_service.get_greeting())
    weather_controller = WeatherController(weather_service=weather_service)

    # Docs routes are disabled so the greeting owns every unclaimed path
    app = FastAPI(
        title="Weather Service",
        version=__version__,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.config_service = config_service

    app.include_router(create_router(greeting_controller, weather_controller))

    logger.info("Application initialized successfully")
    logger.info(f"API config file: {api_config_service.path}")

    return app
