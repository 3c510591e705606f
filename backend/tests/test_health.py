"""
RecordBook Backend — Health Check Tests
"""

import pytest
from unittest.mock import MagicMock, patch


class TestHealth:

    @pytest.mark.asyncio
    async def test_healthy_when_database_answers(self, test_client, db_engine):
        with patch("recordbook.database.engine", db_engine):
            response = await test_client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["database"] == "connected"
        assert "uptimeSeconds" in body

    @pytest.mark.asyncio
    async def test_unhealthy_when_database_unreachable(self, test_client):
        broken = MagicMock()
        broken.connect.side_effect = OSError("connection refused")
        with patch("recordbook.database.engine", broken):
            response = await test_client.get("/health")

        assert response.status_code == 503
        assert response.json()["database"] == "disconnected"
