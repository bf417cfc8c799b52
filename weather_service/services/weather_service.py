"""Weather lookup against the OpenWeatherMap current weather API."""
from typing import Optional

import httpx

from weather_service.models import WeatherData
from weather_service.services.api_config_service import ApiConfigService
from weather_service.utils.colored_logger import get_component_logger

logger = get_component_logger(__name__, "weather")

# Redirect hops followed before the lookup fails
MAX_REDIRECTS = 10


class WeatherService:
    """Fetches the current weather for a city, one upstream call per lookup."""

    def __init__(
        self,
        api_config_service: ApiConfigService,
        base_url: str,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize weather service.

        Args:
            api_config_service:  for the API key file
            base_url: Upstream endpoint, without query string
            timeout: Upstream timeout in seconds, None for no limit
            transport: Optional httpx transport (tests pass a MockTransport)
        """
        self.api_config_service = api_config_service
        self.base_url = base_url
        self.timeout = timeout
        self._transport = transport

    def build_url(self, api_key: str, city: str) -> str:
        """Build the upstream URL.

        Key and city are concatenated as-is, so reserved characters in the
        city (such as "&") end up as separate query parameters.
        """
        return f"{self.base_url}?APPID={api_key}&q={city}"

    async def query(self, city: str) -> WeatherData:
        """Look up the current weather for a city.

        Redirects are followed, up to MAX_REDIRECTS. The upstream status code
        is not checked: an error document is decoded like any other and yields
        zero-valued fields.

        Args:
            city: City name, passed through unvalidated

        Returns:
            Decoded weather record

        Raises:
            OSError: If the API config file cannot be read
            ValueError: If the API config or the upstream body cannot be decoded
            httpx.HTTPError: If the upstream request fails or redirects too often
            httpx.InvalidURL: If the city makes the URL unusable
        """
        api_config = self.api_config_service.load()
        url = self.build_url(api_config.open_weather_map_api_key, city)

        logger.info("Upstream request -> city=%r", city)
        async with httpx.AsyncClient(
            timeout=self.timeout,
            transport=self._transport,
            follow_redirects=True,
            max_redirects=MAX_REDIRECTS,
        ) as client:
            response = await client.get(url)

        logger.info("Upstream response <- HTTP %d, %d bytes", response.status_code, len(response.content))
        if not response.is_success:
            logger.warning(
                "Upstream returned HTTP %d for city=%r; decoding body anyway",
                response.status_code, city
            )

        return WeatherData.model_validate_json(response.content)
