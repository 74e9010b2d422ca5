"""
Integration tests for the visitor cart.

System role: Verification of cart merging, totals and ownership
"""

import uuid
from datetime import date

import pytest

from tourbook.application.services.cart_service import CartService
from tourbook.application.services.experience_service import ExperienceService
from tourbook.core.exceptions import NotFoundError, ValidationError
from tourbook.models.experience import CreateExperienceRequest


@pytest.fixture
def cart(db_session, site) -> CartService:
    return CartService(db=db_session, site=site)


@pytest.fixture
async def tour(db_session) -> dict:
    service = ExperienceService(db=db_session)
    return await service.create_experience(
        CreateExperienceRequest(title="Glow Worm Caves", price=49.99, duration="2 hours").model_dump()
    )


def _add(tour: dict, quantity: int = 1, selected_date: date | None = None) -> dict:
    return {"experience_id": tour["id"], "quantity": quantity, "selected_date": selected_date}


async def test_empty_cart(cart) -> None:
    assert await cart.get_cart("visitor-1") == {"items": [], "total_price": 0, "total_items": 0}


async def test_same_tour_and_date_merge(cart, tour) -> None:
    await cart.add_item("visitor-1", _add(tour, 2, date(2025, 1, 10)))
    result = await cart.add_item("visitor-1", _add(tour, 1, date(2025, 1, 10)))

    assert len(result["items"]) == 1
    line = result["items"][0]
    assert line["quantity"] == 3
    assert line["title"] == "Glow Worm Caves"
    assert line["image_url"] == "https://img.example.com/default.jpg"
    assert line["line_total"] == pytest.approx(149.97)
    assert result["total_items"] == 3
    assert result["total_price"] == pytest.approx(149.97)


async def test_different_dates_are_separate_lines(cart, tour) -> None:
    await cart.add_item("visitor-1", _add(tour, 1, date(2025, 1, 10)))
    result = await cart.add_item("visitor-1", _add(tour, 1, date(2025, 1, 11)))

    assert len(result["items"]) == 2


async def test_carts_are_per_visitor(cart, tour) -> None:
    added = await cart.add_item("visitor-1", _add(tour))
    item_id = added["items"][0]["id"]

    assert (await cart.get_cart("visitor-2"))["items"] == []
    with pytest.raises(NotFoundError):
        await cart.update_quantity("visitor-2", item_id, 5)
    with pytest.raises(NotFoundError):
        await cart.remove_item("visitor-2", item_id)


async def test_update_quantity(cart, tour) -> None:
    added = await cart.add_item("visitor-1", _add(tour))
    item_id = added["items"][0]["id"]

    result = await cart.update_quantity("visitor-1", item_id, 4)

    assert result["total_items"] == 4
    with pytest.raises(ValidationError):
        await cart.update_quantity("visitor-1", item_id, 0)


async def test_remove_and_clear(cart, tour) -> None:
    first = await cart.add_item("visitor-1", _add(tour, 1, date(2025, 1, 10)))
    await cart.add_item("visitor-1", _add(tour, 1, date(2025, 1, 11)))

    after_remove = await cart.remove_item("visitor-1", first["items"][0]["id"])
    removed = await cart.clear("visitor-1")

    assert len(after_remove["items"]) == 1
    assert removed == 1
    assert (await cart.get_cart("visitor-1"))["total_items"] == 0


async def test_unknown_or_inactive_tour_rejected(cart, db_session, tour) -> None:
    with pytest.raises(NotFoundError):
        await cart.add_item("visitor-1", {"experience_id": uuid.uuid4(), "quantity": 1})

    await ExperienceService(db=db_session).toggle_experience_status(tour["id"])
    with pytest.raises(NotFoundError):
        await cart.add_item("visitor-1", _add(tour))


async def test_deleting_tour_empties_its_lines(cart, db_session, tour) -> None:
    await cart.add_item("visitor-1", _add(tour))

    await ExperienceService(db=db_session).delete_experience(tour["id"])
    db_session.expire_all()

    assert (await cart.get_cart("visitor-1"))["items"] == []
