import pytest
from fastapi.testclient import TestClient
from unittest.mock import AsyncMock

from tourbook.boundary.db import get_async_db
from tourbook.main import create_app


@pytest.fixture
def client():
    app = create_app()
    return TestClient(app)


def _db_override(db):
    async def _get_db():
        yield db
    return _get_db


def test_health_check(client):
    response = client.get("/api/v1/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "message": "Server Healthy"}


def test_health_check_db(client):
    db = AsyncMock()
    client.app.dependency_overrides[get_async_db] = _db_override(db)

    response = client.get("/api/v1/health/db")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "message": "Database connection OK"}
    db.execute.assert_awaited_once()


def test_health_check_db_unreachable(client):
    db = AsyncMock()
    db.execute.side_effect = ConnectionRefusedError("connection refused")
    client.app.dependency_overrides[get_async_db] = _db_override(db)

    response = client.get("/api/v1/health/db")

    assert response.status_code == 503
    assert response.json()["detail"] == "Database unreachable"


def test_correlation_id_echoed(client):
    response = client.get("/api/v1/health", headers={"X-Correlation-ID": "req-123"})
    assert response.headers["X-Correlation-ID"] == "req-123"
