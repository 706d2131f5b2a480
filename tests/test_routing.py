"""Tests for requests that match no route."""
import pytest
from httpx import AsyncClient


class TestUnmatchedRequests:
    """Every unmatched method/path pair answers 404."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("path", ["/nonexistent", "/health/", "/docs", "/redoc", "/openapi.json", "/metrics"])
    async def test_unknown_path(self, client: AsyncClient, path: str):
        response = await client.get(path)

        assert response.status_code == 404
        assert response.json() == {"detail": "Not Found"}

    @pytest.mark.asyncio
    @pytest.mark.parametrize("method", ["POST", "PUT", "DELETE", "PATCH"])
    @pytest.mark.parametrize("path", ["/", "/health"])
    async def test_unsupported_method_on_known_path(self, client: AsyncClient, method: str, path: str):
        response = await client.request(method, path)

        assert response.status_code == 404
        assert response.json() == {"detail": "Not Found"}
        assert "allow" not in response.headers
