"""API router with all endpoints."""
import logging

from fastapi import APIRouter, Request
from fastapi.responses import RedirectResponse
from starlette.convertors import Convertor, register_url_convertor

from weather_service.controllers import GreetingController, WeatherController

logger = logging.getLogger(__name__)


class AnyPathConvertor(Convertor):
    """Like the "path" convertor, but also matches newlines and other control characters."""

    regex = r"[\s\S]*"

    def convert(self, value: str) -> str:
        return value

    def to_string(self, value: str) -> str:
        return str(value)


register_url_convertor("anypath", AnyPathConvertor())


def create_router(greeting_controller: GreetingController, weather_controller: WeatherController) -> APIRouter:
    """Create API router with all endpoints.

    Routes are registered without a method list, so every HTTP method
    (including TRACE and nonstandard ones) reaches the handlers. The greeting
    route is registered last and catches every path the other routes leave
    unclaimed.

    Args:
        greeting_controller: Greeting controller instance
        weather_controller: Weather controller instance

    Returns:
        Configured APIRouter
    """
    router = APIRouter()

    async def weather(request: Request):
        """Current weather for the city named by the rest of the path."""
        return await weather_controller.handle_weather(request.path_params["city"])

    async def weather_redirect(request: Request):
        location = "/weather/"
        if request.url.query:
            location = f"{location}?{request.url.query}"
        return RedirectResponse(location, status_code=301)

    async def greet(request: Request):
        """Fixed greeting."""
        return greeting_controller.greet()

    router.add_route("/weather/{city:anypath}", weather, include_in_schema=False)
    router.add_route("/weather", weather_redirect, include_in_schema=False)
    router.add_route("/{path:anypath}", greet, include_in_schema=False)

    return router
