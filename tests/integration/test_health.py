"""Tests for the health check endpoint."""

import pytest
from httpx import ASGITransport, AsyncClient

from rent_inspector.main import create_app


@pytest.mark.asyncio
async def test_health_check_returns_200(client):
    """Health endpoint should return 200 with status, version, and environment."""
    response = await client.get("/api/v1/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["store"] == "available"
    assert "version" in data
    assert "environment" in data


@pytest.mark.asyncio
async def test_health_check_without_store_is_degraded():
    """Before the store is wired up the endpoint still answers."""
    transport = ASGITransport(app=create_app())
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.get("/api/v1/health")

    assert response.status_code == 200
    assert response.json()["status"] == "degraded"
    assert response.json()["store"] == "unavailable"
