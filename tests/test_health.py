"""Tests for the /health endpoint with MongoDB connectivity mocked."""

from unittest.mock import AsyncMock, patch

import pytest

from customer_service import __version__


class TestHealth:

    @pytest.mark.asyncio
    async def test_healthy_when_mongo_reachable(self, test_client):
        with patch(
            "customer_service.routes.health.ping_database",
            AsyncMock(return_value=True),
        ):
            response = await test_client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["database"] == "connected"
        assert body["version"] == __version__

    @pytest.mark.asyncio
    async def test_unhealthy_when_mongo_down(self, test_client):
        with patch(
            "customer_service.routes.health.ping_database",
            AsyncMock(return_value=False),
        ):
            response = await test_client.get("/health")

        body = response.json()
        assert body["status"] == "unhealthy"
        assert body["database"] == "disconnected"
