"""Pytest configuration and fixtures."""
import logging
from typing import AsyncGenerator

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from hello_service.main import app as fastapi_app
from hello_service.metrics import REGISTRY


@pytest.fixture
def app() -> FastAPI:
    """FastAPI application instance."""
    return fastapi_app


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Async HTTP client talking to the app in-process."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def request_count():
    """Read the current value of http_requests_total for one label set."""
    def _count(method: str, route: str, status_code: int) -> float:
        value = REGISTRY.get_sample_value(
            "http_requests_total",
            {"method": method, "route": route, "status_code": str(status_code)},
        )
        return value or 0.0
    return _count


@pytest.fixture
def clean_env(monkeypatch):
    """Remove every setting variable so defaults apply."""
    for name in (
        "HOST",
        "PORT",
        "LOG_LEVEL",
        "UVICORN_LOG_LEVEL",
        "ACCESS_LOG",
        "METRICS_PORT",
        "CPU_SAMPLE_INTERVAL",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def reset_logging():
    """Detach handlers installed by server.main() once the test is done."""
    yield
    service_logger = logging.getLogger("hello_service")
    for handler in list(service_logger.handlers):
        service_logger.removeHandler(handler)
    service_logger.propagate = True
