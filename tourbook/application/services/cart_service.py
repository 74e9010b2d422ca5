"""
Cart service orchestrator.

Keeps one visitor's cart: lines keyed by tour and date, quantities, and
the totals the cart page shows.

Dependencies: tourbook.boundary.db.CRUD
System role: Cart use case orchestration
"""

import logging
from typing import Any
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from tourbook.application.services.service_utils import name_of
from tourbook.boundary.db.CRUD.cart_crud import cart_item_crud
from tourbook.boundary.db.CRUD.experience_crud import experience_crud
from tourbook.configs.site import SiteSettings
from tourbook.core.exceptions import NotFoundError, TourbookException, ValidationError
from tourbook.core.toggles import ExperienceStatus

logger = logging.getLogger(__name__)


def _cart_line(row: Any, site: SiteSettings) -> dict[str, Any]:
    experience = row.experience
    price = float(experience.price or 0)
    return {
        "id": row.id,
        "experience_id": row.experience_id,
        "quantity": row.quantity,
        "selected_date": row.selected_date,
        "title": experience.title,
        "slug": experience.slug,
        "image_url": experience.main_image_url or site.default_tour_image,
        "price": price,
        "currency": experience.currency or "USD",
        "city_name": name_of(experience.city),
        "duration": experience.duration,
        "line_total": round(price * row.quantity, 2),
    }


class CartService:
    """Cart service orchestrator, scoped to one visitor per call."""

    def __init__(self, db: AsyncSession, site: SiteSettings) -> None:
        """
        Initialize cart service.

        Args:
            db: Async SQLAlchemy session
            site: Site settings (default tour image)
        """
        self.db = db
        self.site = site

    async def get_cart(self, user_id: str) -> dict:
        """
        Get a visitor's cart with totals.

        Args:
            user_id: Visitor identity

        Returns:
            dict: ``items``, ``total_price`` (sum of price x quantity) and
            ``total_items`` (sum of quantities)
        """
        try:
            rows = await cart_item_crud.get_by_user(self.db, user_id)
            items = [_cart_line(row, self.site) for row in rows]
            return {
                "items": items,
                "total_price": round(sum(item["line_total"] for item in items), 2),
                "total_items": sum(item["quantity"] for item in items),
            }
        except Exception as e:
            logger.error("Failed to load cart", extra={"error": str(e), "user_id": user_id})
            raise

    async def add_item(self, user_id: str, data: dict) -> dict:
        """
        Add a tour to the cart.

        A line for the same tour and date absorbs the new quantity instead of
        creating a second row.

        Args:
            user_id: Visitor identity
            data: experience_id, quantity, selected_date

        Returns:
            dict: The updated cart

        Raises:
            NotFoundError: If the tour does not exist or is not bookable
        """
        try:
            experience = await experience_crud.get_by_id(self.db, data["experience_id"])
            if experience is None or experience.status != ExperienceStatus.ACTIVE.value:
                raise NotFoundError("Experience", data["experience_id"])

            quantity = data.get("quantity") or 1
            line = await cart_item_crud.find_line(
                self.db, user_id, data["experience_id"], data.get("selected_date")
            )
            if line is None:
                await cart_item_crud.create(
                    self.db,
                    user_id=user_id,
                    experience_id=data["experience_id"],
                    quantity=quantity,
                    selected_date=data.get("selected_date"),
                )
            else:
                await cart_item_crud.update_by_id(
                    self.db, line.id, quantity=line.quantity + quantity
                )
            await self.db.commit()
            logger.info(
                "Cart item added",
                extra={
                    "user_id": user_id,
                    "experience_id": str(data["experience_id"]),
                    "merged": line is not None,
                },
            )
            return await self.get_cart(user_id)
        except TourbookException:
            raise
        except Exception as e:
            logger.error("Failed to add cart item", extra={"error": str(e), "user_id": user_id})
            raise

    async def update_quantity(self, user_id: str, item_id: UUID, quantity: int) -> dict:
        """
        Set a line's quantity.

        Raises:
            ValidationError: If quantity is below 1
            NotFoundError: If the line is missing or belongs to someone else
        """
        if quantity < 1:
            raise ValidationError("Quantity must be at least 1", field="quantity")
        line = await cart_item_crud.get_owned(self.db, item_id, user_id)
        if line is None:
            raise NotFoundError("Cart item", item_id)
        await cart_item_crud.update_by_id(self.db, item_id, quantity=quantity)
        await self.db.commit()
        return await self.get_cart(user_id)

    async def remove_item(self, user_id: str, item_id: UUID) -> dict:
        """
        Remove one line.

        Raises:
            NotFoundError: If the line is missing or belongs to someone else
        """
        line = await cart_item_crud.get_owned(self.db, item_id, user_id)
        if line is None:
            raise NotFoundError("Cart item", item_id)
        await cart_item_crud.delete_by_id(self.db, item_id)
        await self.db.commit()
        logger.info("Cart item removed", extra={"user_id": user_id, "item_id": str(item_id)})
        return await self.get_cart(user_id)

    async def clear(self, user_id: str) -> int:
        """Empty the cart; returns the number of lines removed."""
        removed = await cart_item_crud.delete_by_user(self.db, user_id)
        await self.db.commit()
        logger.info("Cart cleared", extra={"user_id": user_id, "removed": removed})
        return removed
