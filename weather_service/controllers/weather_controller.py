"""Weather controller for handling weather lookups."""
from fastapi.responses import JSONResponse, PlainTextResponse, Response

from weather_service.services import WeatherService
from weather_service.utils.colored_logger import get_component_logger

logger = get_component_logger(__name__, "http")

JSON_MEDIA_TYPE = "application/json; charset=utf-8"


class WeatherController:
    """Controller for weather operations."""

    def __init__(self, weather_service: WeatherService):
        """Initialize weather controller.

        Args:
            weather_service: Weather lookup service
        """
        self.weather_service = weather_service

    async def handle_weather(self, city: str) -> Response:
        """Look up a city and render the result.

        Every failure, from reading the API config through rendering the
        record, is answered with a plain-text 500 carrying the error message.

        Args:
            city: Raw city segment taken from the request path

        Returns:
            JSON weather record, or a plain-text 500 carrying the error message
        """
        try:
            data = await self.weather_service.query(city)
            return JSONResponse(content=data.model_dump(), media_type=JSON_MEDIA_TYPE)
        except Exception as e:
            logger.error(f"Weather lookup failed for city={city!r}: {e}")
            return PlainTextResponse(_error_text(e), status_code=500)


def _error_text(error: Exception) -> str:
    return str(error) or error.__class__.__name__
