import pytest
from fastapi.testclient import TestClient
from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

from tourbook.api.deps.dependencies import (
    get_cart_service,
    get_redirect_service,
    get_site_files_service,
    get_storefront_service,
)
from tourbook.core.exceptions import NotFoundError, SlugMovedError, ValidationError
from tourbook.main import create_app


@pytest.fixture
def client():
    app = create_app()
    return TestClient(app)


@pytest.fixture
def mock_storefront_service():
    return AsyncMock()


@pytest.fixture
def mock_cart_service():
    return AsyncMock()


EMPTY_CART = {"items": [], "total_price": 0, "total_items": 0}


# Pages

def test_moved_tour_redirects_permanently(client, mock_storefront_service):
    mock_storefront_service.tour_detail.side_effect = SlugMovedError(
        "experiences", "old-cruise", "new-cruise", True
    )
    client.app.dependency_overrides[get_storefront_service] = lambda: mock_storefront_service

    response = client.get("/api/v1/pages/tour/old-cruise", follow_redirects=False)

    assert response.status_code == 308
    assert response.headers["location"] == "/api/v1/pages/tour/new-cruise"


def test_moved_post_redirects_temporarily(client, mock_storefront_service):
    mock_storefront_service.travel_guide_post.side_effect = SlugMovedError(
        "blog_posts", "old-post", "new-post", False
    )
    client.app.dependency_overrides[get_storefront_service] = lambda: mock_storefront_service

    response = client.get("/api/v1/pages/travel-guide/old-post", follow_redirects=False)

    assert response.status_code == 307
    assert response.headers["location"] == "/api/v1/pages/travel-guide/new-post"


def test_missing_category_is_404(client, mock_storefront_service):
    mock_storefront_service.category.side_effect = NotFoundError("Category", "nope")
    client.app.dependency_overrides[get_storefront_service] = lambda: mock_storefront_service

    response = client.get("/api/v1/pages/category/nope")

    assert response.status_code == 404
    assert response.json()["detail"] == "Category not found: nope"


# Search

def test_search_passes_type_alias(client, mock_storefront_service):
    mock_storefront_service.search.return_value = {
        "query": "milford",
        "type": "destination",
        "sort": "relevance",
        "total": 1,
        "counts": {"experience": 2, "category": 0, "destination": 1},
        "results": [
            {"type": "destination", "title": "Milford", "slug": "milford", "url": "/destinations/milford"},
        ],
    }
    client.app.dependency_overrides[get_storefront_service] = lambda: mock_storefront_service

    response = client.get("/api/v1/search", params={"q": "milford", "type": "destination"})

    assert response.status_code == 200
    assert response.json()["counts"]["experience"] == 2
    mock_storefront_service.search.assert_called_once_with(
        "milford", result_type="destination", price_range=None, sort="relevance"
    )


def test_search_rejects_unknown_sort(client, mock_storefront_service):
    mock_storefront_service.search.side_effect = ValidationError("Unknown sort order: abc", field="sort")
    client.app.dependency_overrides[get_storefront_service] = lambda: mock_storefront_service

    response = client.get("/api/v1/search", params={"q": "x", "sort": "abc"})

    assert response.status_code == 400


# Cart

def test_cart_requires_visitor_header(client, mock_cart_service):
    client.app.dependency_overrides[get_cart_service] = lambda: mock_cart_service

    response = client.get("/api/v1/cart")

    assert response.status_code == 401
    mock_cart_service.get_cart.assert_not_called()


def test_cart_rejects_blank_visitor(client, mock_cart_service):
    client.app.dependency_overrides[get_cart_service] = lambda: mock_cart_service

    response = client.get("/api/v1/cart", headers={"X-User-Id": "   "})

    assert response.status_code == 401


def test_get_cart(client, mock_cart_service):
    mock_cart_service.get_cart.return_value = EMPTY_CART
    client.app.dependency_overrides[get_cart_service] = lambda: mock_cart_service

    response = client.get("/api/v1/cart", headers={"X-User-Id": "visitor-1"})

    assert response.status_code == 200
    assert response.json() == EMPTY_CART
    mock_cart_service.get_cart.assert_called_once_with("visitor-1")


def test_add_cart_item(client, mock_cart_service):
    experience_id = uuid4()
    mock_cart_service.add_item.return_value = EMPTY_CART
    client.app.dependency_overrides[get_cart_service] = lambda: mock_cart_service

    response = client.post(
        "/api/v1/cart/items",
        json={"experience_id": str(experience_id), "quantity": 2},
        headers={"X-User-Id": "visitor-1"},
    )

    assert response.status_code == 201
    user_id, data = mock_cart_service.add_item.call_args.args
    assert user_id == "visitor-1"
    assert data["experience_id"] == experience_id
    assert data["quantity"] == 2


def test_cart_item_of_other_visitor_is_404(client, mock_cart_service):
    item_id = uuid4()
    mock_cart_service.remove_item.side_effect = NotFoundError("Cart item", item_id)
    client.app.dependency_overrides[get_cart_service] = lambda: mock_cart_service

    response = client.delete(f"/api/v1/cart/items/{item_id}", headers={"X-User-Id": "visitor-2"})

    assert response.status_code == 404


def test_clear_cart(client, mock_cart_service):
    mock_cart_service.clear.return_value = 3
    client.app.dependency_overrides[get_cart_service] = lambda: mock_cart_service

    response = client.delete("/api/v1/cart", headers={"X-User-Id": "visitor-1"})

    assert response.status_code == 200
    assert response.json()["message"] == "Removed 3 item(s) from cart"


# Redirects

def test_resolve_path(client):
    service = AsyncMock()
    service.resolve_path.return_value = {
        "path": "/blog/tips",
        "matched": True,
        "destination": "/travel-guide/tips",
        "permanent": True,
        "status_code": 308,
    }
    client.app.dependency_overrides[get_redirect_service] = lambda: service

    response = client.get("/api/v1/redirects/resolve", params={"path": "/blog/tips"})

    assert response.status_code == 200
    assert response.json()["destination"] == "/travel-guide/tips"


def test_resolve_requires_path(client):
    client.app.dependency_overrides[get_redirect_service] = lambda: AsyncMock()

    response = client.get("/api/v1/redirects/resolve")

    assert response.status_code == 422


# Site files

def test_robots_txt(client):
    service = MagicMock()
    service.robots_txt.return_value = "User-agent: *\nAllow: /\n"
    client.app.dependency_overrides[get_site_files_service] = lambda: service

    response = client.get("/robots.txt")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/plain")
    assert response.text.startswith("User-agent: *")


def test_sitemap_xml(client):
    service = MagicMock()
    service.sitemap_xml = AsyncMock(return_value="<?xml version='1.0' encoding='utf-8'?>\n<urlset />")
    client.app.dependency_overrides[get_site_files_service] = lambda: service

    response = client.get("/sitemap.xml")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("application/xml")
    assert "<urlset" in response.text
