"""
Category and subcategory CRUD operations.

Dependencies: sqlalchemy, tourbook.boundary.db.models
System role: Tour taxonomy persistence operations
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from tourbook.boundary.db.CRUD.base_crud import SlugCRUD
from tourbook.boundary.db.models.category_model import CategoryModel, SubcategoryModel


class CategoryCRUD(SlugCRUD[CategoryModel]):
    """CRUD operations for CategoryModel, listed by name."""

    default_order = (CategoryModel.name,)

    def __init__(self) -> None:
        """Initialize CategoryCRUD with CategoryModel."""
        super().__init__(CategoryModel)

    async def get_featured(self, session: AsyncSession) -> Sequence[CategoryModel]:
        """
        Retrieve homepage categories.

        Args:
            session: Async database session

        Returns:
            Featured categories by sort_order
        """
        stmt = (
            select(CategoryModel)
            .where(CategoryModel.featured.is_(True))
            .order_by(CategoryModel.sort_order, CategoryModel.name)
        )
        result = await session.execute(stmt)
        return result.scalars().all()

    async def search(self, session: AsyncSession, query: str) -> Sequence[CategoryModel]:
        """Categories whose name or description contains ``query`` (case-insensitive)."""
        pattern = f"%{query}%"
        stmt = (
            select(CategoryModel)
            .where(CategoryModel.name.ilike(pattern) | CategoryModel.description.ilike(pattern))
            .order_by(CategoryModel.sort_order, CategoryModel.name)
        )
        result = await session.execute(stmt)
        return result.scalars().all()


class SubcategoryCRUD(SlugCRUD[SubcategoryModel]):
    """CRUD operations for SubcategoryModel."""

    default_order = (SubcategoryModel.sort_order, SubcategoryModel.name)

    def __init__(self) -> None:
        """Initialize SubcategoryCRUD with SubcategoryModel."""
        super().__init__(SubcategoryModel)

    async def get_by_category(
        self,
        session: AsyncSession,
        category_id: UUID,
    ) -> Sequence[SubcategoryModel]:
        """
        Retrieve all subcategories of a category.

        Args:
            session: Async database session
            category_id: Parent category UUID

        Returns:
            Subcategories by sort_order, then name
        """
        stmt = (
            select(SubcategoryModel)
            .where(SubcategoryModel.category_id == category_id)
            .order_by(*self.default_order)
        )
        result = await session.execute(stmt)
        return result.scalars().all()


category_crud = CategoryCRUD()
subcategory_crud = SubcategoryCRUD()
