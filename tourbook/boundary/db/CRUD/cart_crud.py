"""
Cart CRUD operations.

Dependencies: sqlalchemy, tourbook.boundary.db.models
System role: Visitor cart persistence operations
"""

from datetime import date
from typing import Sequence
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from tourbook.boundary.db.CRUD.base_crud import BaseCRUD
from tourbook.boundary.db.models.cart_model import CartItemModel


class CartItemCRUD(BaseCRUD[CartItemModel]):
    """
    CRUD operations for CartItemModel.

    Every query is scoped to one visitor's ``user_id``.
    """

    default_order = (CartItemModel.created_at,)

    def __init__(self) -> None:
        """Initialize CartItemCRUD with CartItemModel."""
        super().__init__(CartItemModel)

    async def get_by_user(self, session: AsyncSession, user_id: str) -> Sequence[CartItemModel]:
        """
        Retrieve a visitor's cart.

        Args:
            session: Async database session
            user_id: Visitor identity

        Returns:
            Cart rows (with experience loaded), oldest first
        """
        stmt = (
            select(CartItemModel)
            .where(CartItemModel.user_id == user_id)
            .order_by(*self.default_order)
        )
        result = await session.execute(stmt)
        return result.scalars().all()

    async def get_owned(
        self,
        session: AsyncSession,
        id: UUID,
        user_id: str,
    ) -> CartItemModel | None:
        """Cart row by id, only if it belongs to ``user_id``."""
        stmt = select(CartItemModel).where(CartItemModel.id == id, CartItemModel.user_id == user_id)
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def find_line(
        self,
        session: AsyncSession,
        user_id: str,
        experience_id: UUID,
        selected_date: date | None,
    ) -> CartItemModel | None:
        """
        Find the row a new item should merge into.

        Args:
            session: Async database session
            user_id: Visitor identity
            experience_id: Tour UUID
            selected_date: Requested date (None matches rows without a date)

        Returns:
            Matching row, None if the item is new
        """
        stmt = select(CartItemModel).where(
            CartItemModel.user_id == user_id,
            CartItemModel.experience_id == experience_id,
        )
        if selected_date is None:
            stmt = stmt.where(CartItemModel.selected_date.is_(None))
        else:
            stmt = stmt.where(CartItemModel.selected_date == selected_date)
        result = await session.execute(stmt)
        return result.scalars().first()

    async def delete_by_user(self, session: AsyncSession, user_id: str) -> int:
        """Remove every row of a visitor's cart; returns the number removed."""
        stmt = delete(CartItemModel).where(CartItemModel.user_id == user_id)
        result = await session.execute(stmt)
        return result.rowcount


cart_item_crud = CartItemCRUD()
