"""Shared fixtures for the weather service tests."""

import json
from pathlib import Path
from typing import Callable, List

import httpx
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from weather_service import create_app

API_KEY = "test-key-123"
LONDON = {"name": "London", "main": {"temp": 280.32}}


@pytest.fixture
def api_config_file(tmp_path: Path) -> Path:
    """Write a valid API config file."""
    path = tmp_path / ".apiConfig"
    path.write_text(json.dumps({"openWeatherMapApiKey": API_KEY}), encoding="utf-8")
    return path


@pytest.fixture
def config_file(tmp_path: Path, api_config_file: Path) -> Path:
    """Write a config.yml pointing at the API config file."""
    path = tmp_path / "config.yml"
    path.write_text(
        "greeting: hello from python!\n"
        "weather:\n"
        f"  api_config_path: {api_config_file.as_posix()}\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def upstream_requests() -> List[httpx.Request]:
    """Requests seen by the mocked upstream."""
    return []


@pytest.fixture
def make_transport(upstream_requests: List[httpx.Request]) -> Callable[..., httpx.MockTransport]:
    """Build a mock upstream answering every request with a fixed response."""

    def factory(status_code: int = 200, content: bytes = json.dumps(LONDON).encode()) -> httpx.MockTransport:
        def handler(request: httpx.Request) -> httpx.Response:
            upstream_requests.append(request)
            return httpx.Response(status_code, content=content)

        return httpx.MockTransport(handler)

    return factory


@pytest.fixture
def make_client(config_file: Path) -> Callable[[httpx.MockTransport], TestClient]:
    """Build a test client for an app wired to the given upstream transport."""

    def factory(transport: httpx.MockTransport) -> TestClient:
        app: FastAPI = create_app(config_path=str(config_file), transport=transport)
        return TestClient(app)

    return factory


@pytest.fixture
def client(make_client, make_transport) -> TestClient:
    """Test client whose upstream answers with the London record."""
    return make_client(make_transport())
