"""Pydantic models and schemas for the application."""
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_serializer, model_validator


DEFAULT_GREETING = "hello from python!"
DEFAULT_WEATHER_URL = "http://api.openweathermap.org/data/2.5/weather"


def _drop_nulls(data: Any) -> Any:
    """A null document or a null field leaves the zero value in place."""
    if data is None:
        return {}
    if isinstance(data, dict):
        return {key: value for key, value in data.items() if value is not None}
    return data


class ApiConfig(BaseModel):
    """Credentials read from the API config file."""
    model_config = ConfigDict(populate_by_name=True)

    open_weather_map_api_key: str = Field(
        "", alias="openWeatherMapApiKey", strict=True, description="OpenWeatherMap API key"
    )

    @model_validator(mode="before")
    @classmethod
    def nulls_to_defaults(cls, data: Any) -> Any:
        return _drop_nulls(data)


class MainData(BaseModel):
    """Measurements block of the upstream response."""
    temp: float = Field(0.0, strict=True, allow_inf_nan=False, description="Temperature in Kelvin")

    @model_validator(mode="before")
    @classmethod
    def nulls_to_defaults(cls, data: Any) -> Any:
        return _drop_nulls(data)

    @field_serializer("temp")
    def serialize_temp(self, temp: float) -> Union[int, float]:
        # Integral values are written without a fraction: 280, not 280.0
        if temp.is_integer() and abs(temp) < 1e21:
            return int(temp)
        return temp


class WeatherData(BaseModel):
    """Weather record returned to clients.

    Missing or null upstream fields fall back to zero values; unknown fields
    are dropped. Fields of the wrong JSON type and non-finite numbers are
    decode errors.
    """
    name: str = Field("", strict=True, description="City name")
    main: MainData = Field(default_factory=MainData)

    @model_validator(mode="before")
    @classmethod
    def nulls_to_defaults(cls, data: Any) -> Any:
        return _drop_nulls(data)


class ServerSettings(BaseModel):
    host: str = "0.0.0.0"
    port: int = 8080


class WeatherSettings(BaseModel):
    api_config_path: str = Field(".apiConfig", description="Path of the JSON file holding the API key")
    base_url: str = Field(DEFAULT_WEATHER_URL, description="Upstream current weather endpoint")
    timeout: Optional[float] = Field(None, description="Upstream timeout in seconds; None waits forever")


class LoggingSettings(BaseModel):
    level: str = "INFO"


class Settings(BaseModel):
    """Server settings loaded from config.yml."""
    server: ServerSettings = Field(default_factory=ServerSettings)
    greeting: str = DEFAULT_GREETING
    weather: WeatherSettings = Field(default_factory=WeatherSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
