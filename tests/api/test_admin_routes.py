import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import IntegrityError
from unittest.mock import AsyncMock
from uuid import uuid4

from tourbook.api.deps.dependencies import (
    get_experience_service,
    get_faq_service,
    get_redirect_service,
    get_settings_dependency,
)
from tourbook.configs.admin import AdminSettings
from tourbook.configs.settings import Settings
from tourbook.core.exceptions import NotFoundError, SlugConflictError, ValidationError
from tourbook.main import create_app

from datetime import datetime


@pytest.fixture
def client():
    app = create_app()
    return TestClient(app)


@pytest.fixture
def mock_faq_service():
    return AsyncMock()


@pytest.fixture
def mock_redirect_service():
    return AsyncMock()


def _use_admin_key(client, key):
    settings = Settings(admin=AdminSettings(api_key=key))
    client.app.dependency_overrides[get_settings_dependency] = lambda: settings


def _faq(**extra):
    now = datetime.now()
    return {
        "id": str(uuid4()),
        "question": "Is lunch included?",
        "answer": "Yes, a packed lunch.",
        "sort_order": 0,
        "enabled": True,
        "created_at": now.isoformat(),
        "updated_at": now.isoformat(),
        **extra,
    }


def test_admin_open_without_configured_key(client, mock_faq_service):
    _use_admin_key(client, None)
    mock_faq_service.list_faqs.return_value = [_faq()]
    client.app.dependency_overrides[get_faq_service] = lambda: mock_faq_service

    response = client.get("/api/v1/admin/faqs")

    assert response.status_code == 200
    assert response.json()[0]["question"] == "Is lunch included?"


def test_admin_rejects_missing_key(client, mock_faq_service):
    _use_admin_key(client, "s3cret")
    client.app.dependency_overrides[get_faq_service] = lambda: mock_faq_service

    response = client.get("/api/v1/admin/faqs")

    assert response.status_code == 401
    mock_faq_service.list_faqs.assert_not_called()


def test_admin_rejects_wrong_key(client, mock_faq_service):
    _use_admin_key(client, "s3cret")
    client.app.dependency_overrides[get_faq_service] = lambda: mock_faq_service

    response = client.get("/api/v1/admin/faqs", headers={"X-Admin-Key": "guess"})

    assert response.status_code == 401


def test_admin_accepts_correct_key(client, mock_faq_service):
    _use_admin_key(client, "s3cret")
    mock_faq_service.list_faqs.return_value = []
    client.app.dependency_overrides[get_faq_service] = lambda: mock_faq_service

    response = client.get("/api/v1/admin/faqs", headers={"X-Admin-Key": "s3cret"})

    assert response.status_code == 200
    assert response.json() == []


def test_create_faq(client, mock_faq_service):
    _use_admin_key(client, None)
    mock_faq_service.create_faq.return_value = _faq(question="Can kids join?")
    client.app.dependency_overrides[get_faq_service] = lambda: mock_faq_service

    response = client.post(
        "/api/v1/admin/faqs",
        json={"question": "Can kids join?", "answer": "From age five."},
    )

    assert response.status_code == 201
    assert response.json()["question"] == "Can kids join?"
    sent = mock_faq_service.create_faq.call_args.args[0]
    assert sent["answer"] == "From age five."
    assert sent["enabled"] is True


def test_update_sends_only_given_fields(client, mock_faq_service):
    _use_admin_key(client, None)
    faq_id = uuid4()
    mock_faq_service.update_faq.return_value = _faq(enabled=False)
    client.app.dependency_overrides[get_faq_service] = lambda: mock_faq_service

    response = client.put(f"/api/v1/admin/faqs/{faq_id}", json={"enabled": False})

    assert response.status_code == 200
    mock_faq_service.update_faq.assert_called_once_with(faq_id, {"enabled": False})


def test_delete_faq(client, mock_faq_service):
    _use_admin_key(client, None)
    client.app.dependency_overrides[get_faq_service] = lambda: mock_faq_service

    response = client.delete(f"/api/v1/admin/faqs/{uuid4()}")

    assert response.status_code == 200
    assert response.json() == {"success": True, "message": "FAQ deleted"}


def test_request_validation(client, mock_faq_service):
    _use_admin_key(client, None)
    client.app.dependency_overrides[get_faq_service] = lambda: mock_faq_service

    response = client.post("/api/v1/admin/faqs", json={"question": ""})

    assert response.status_code == 422
    mock_faq_service.create_faq.assert_not_called()


def test_not_found_maps_to_404(client, mock_faq_service):
    _use_admin_key(client, None)
    faq_id = uuid4()
    mock_faq_service.get_faq.side_effect = NotFoundError("FAQ", faq_id)
    client.app.dependency_overrides[get_faq_service] = lambda: mock_faq_service

    response = client.get(f"/api/v1/admin/faqs/{faq_id}")

    assert response.status_code == 404
    assert response.json()["detail"] == f"FAQ not found: {faq_id}"


def test_slug_conflict_maps_to_409(client, mock_redirect_service):
    _use_admin_key(client, None)
    mock_redirect_service.create_redirect.side_effect = SlugConflictError("Redirect", "old")
    client.app.dependency_overrides[get_redirect_service] = lambda: mock_redirect_service

    response = client.post(
        "/api/v1/admin/redirects",
        json={"old_slug": "old", "new_slug": "new", "content_type": "experiences"},
    )

    assert response.status_code == 409


def test_validation_error_maps_to_400(client, mock_redirect_service):
    _use_admin_key(client, None)
    mock_redirect_service.create_redirect.side_effect = ValidationError(
        "A slug cannot redirect to itself", field="new_slug"
    )
    client.app.dependency_overrides[get_redirect_service] = lambda: mock_redirect_service

    response = client.post(
        "/api/v1/admin/redirects",
        json={"old_slug": "same", "new_slug": "same", "content_type": "experiences"},
    )

    assert response.status_code == 400
    assert response.json()["detail"] == "A slug cannot redirect to itself"


def test_integrity_error_maps_to_409(client):
    _use_admin_key(client, None)
    service = AsyncMock()
    service.delete_experience.side_effect = IntegrityError("DELETE", {}, Exception("fk"))
    client.app.dependency_overrides[get_experience_service] = lambda: service

    response = client.delete(f"/api/v1/admin/experiences/{uuid4()}")

    assert response.status_code == 409


def test_unexpected_error_maps_to_500(client, mock_faq_service):
    _use_admin_key(client, None)
    mock_faq_service.list_faqs.side_effect = RuntimeError("boom")
    client.app.dependency_overrides[get_faq_service] = lambda: mock_faq_service

    response = client.get("/api/v1/admin/faqs")

    assert response.status_code == 500
    assert response.json()["detail"] == "An internal error occurred"
