"""Greeting controller."""
from fastapi.responses import PlainTextResponse


class GreetingController:
    """Answers with a fixed text body."""

    def __init__(self, greeting: str):
        self.greeting = greeting

    def greet(self) -> PlainTextResponse:
        return PlainTextResponse(self.greeting)
