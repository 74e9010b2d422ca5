"""
Admin update routes against the in-memory database.

Runs requests through the full app on the test's event loop so the
route, service and CRUD layers share the SQLite session.

System role: Verification of update error mapping end to end
"""

import pytest
from httpx import ASGITransport, AsyncClient

from tourbook.api.deps.dependencies import get_settings_dependency
from tourbook.application.services.experience_service import ExperienceService
from tourbook.boundary.db import get_async_db
from tourbook.configs.admin import AdminSettings
from tourbook.configs.settings import Settings
from tourbook.main import create_app
from tourbook.models.experience import CreateExperienceRequest


@pytest.fixture
async def api(db_session):
    app = create_app()

    async def _get_db():
        yield db_session

    app.dependency_overrides[get_async_db] = _get_db
    app.dependency_overrides[get_settings_dependency] = lambda: Settings(
        admin=AdminSettings(api_key=None)
    )
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client


@pytest.fixture
async def tour(db_session) -> dict:
    return await ExperienceService(db=db_session).create_experience(
        CreateExperienceRequest(title="Te Anau Glowworm Caves", price=120, featured=True).model_dump()
    )


@pytest.mark.parametrize("field", ["featured", "title", "price", "status", "languages"])
async def test_null_on_required_column_is_bad_request(api, tour, field) -> None:
    response = await api.put(f"/api/v1/admin/experiences/{tour['id']}", json={field: None})

    assert response.status_code == 400
    assert field in response.json()["detail"]


async def test_null_on_optional_column_clears_it(api, tour) -> None:
    response = await api.put(
        f"/api/v1/admin/experiences/{tour['id']}", json={"featured": False, "duration": None}
    )

    assert response.status_code == 200
    assert response.json()["featured"] is False
    assert response.json()["duration"] is None
