"""Services package."""
from weather_service.services.api_config_service import ApiConfigService
from weather_service.services.config_service import ConfigService
from weather_service.services.weather_service import WeatherService

__all__ = [
    "ApiConfigService",
    "ConfigService",
    "WeatherService",
]
