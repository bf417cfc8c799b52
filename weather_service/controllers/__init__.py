"""Controllers package."""
from weather_service.controllers.greeting_controller import GreetingController
from weather_service.controllers.weather_controller import WeatherController

__all__ = [
    "GreetingController",
    "WeatherController",
]
