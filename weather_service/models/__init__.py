"""Models package."""
from weather_service.models.schemas import (
    ApiConfig,
    LoggingSettings,
    MainData,
    ServerSettings,
    Settings,
    WeatherData,
    WeatherSettings,
)

__all__ = [
    "ApiConfig",
    "LoggingSettings",
    "MainData",
    "ServerSettings",
    "Settings",
    "WeatherData",
    "WeatherSettings",
]
