"""
Experience CRUD operations.

Provides Create, Read, Update, Delete operations for ExperienceModel
with the storefront listing queries (active tours only).

Dependencies: sqlalchemy, tourbook.boundary.db.models
System role: Tour catalog persistence operations
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from tourbook.boundary.db.CRUD.base_crud import SlugCRUD
from tourbook.boundary.db.models.city_model import CityModel
from tourbook.boundary.db.models.experience_model import ExperienceModel
from tourbook.core.toggles import ExperienceStatus

_ACTIVE = ExperienceModel.status == ExperienceStatus.ACTIVE.value


class ExperienceCRUD(SlugCRUD[ExperienceModel]):
    """
    CRUD operations for ExperienceModel.

    Admin listings see every status, newest first. Storefront queries
    only ever return active tours.
    """

    default_order = (ExperienceModel.created_at.desc(),)

    def __init__(self) -> None:
        """Initialize ExperienceCRUD with ExperienceModel."""
        super().__init__(ExperienceModel)

    async def get_active(self, session: AsyncSession) -> Sequence[ExperienceModel]:
        """
        Retrieve the tours listing.

        Args:
            session: Async database session

        Returns:
            Active tours, featured first, then highest rated
        """
        stmt = (
            select(ExperienceModel)
            .where(_ACTIVE)
            .order_by(
                ExperienceModel.featured.desc(),
                ExperienceModel.rating.desc().nulls_last(),
            )
        )
        result = await session.execute(stmt)
        return result.scalars().all()

    async def get_featured_active(
        self,
        session: AsyncSession,
        limit: int = 6,
    ) -> Sequence[ExperienceModel]:
        """
        Retrieve homepage tours.

        Args:
            session: Async database session
            limit: Maximum number of tours

        Returns:
            Featured active tours, newest first
        """
        stmt = (
            select(ExperienceModel)
            .where(_ACTIVE, ExperienceModel.featured.is_(True))
            .order_by(ExperienceModel.created_at.desc())
            .limit(limit)
        )
        result = await session.execute(stmt)
        return result.scalars().all()

    async def get_active_by_slug(self, session: AsyncSession, slug: str) -> ExperienceModel | None:
        """Active tour by slug, None when missing or not active."""
        stmt = select(ExperienceModel).where(ExperienceModel.slug == slug, _ACTIVE)
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_active_for(
        self,
        session: AsyncSession,
        *,
        category_id: UUID | None = None,
        subcategory_id: UUID | None = None,
        city_id: UUID | None = None,
    ) -> Sequence[ExperienceModel]:
        """
        Retrieve active tours of a category, subcategory or city.

        Args:
            session: Async database session
            category_id: Filter by category
            subcategory_id: Filter by subcategory
            city_id: Filter by city

        Returns:
            Matching active tours, featured first, then newest
        """
        stmt = select(ExperienceModel).where(_ACTIVE)
        if category_id is not None:
            stmt = stmt.where(ExperienceModel.category_id == category_id)
        if subcategory_id is not None:
            stmt = stmt.where(ExperienceModel.subcategory_id == subcategory_id)
        if city_id is not None:
            stmt = stmt.where(ExperienceModel.city_id == city_id)
        stmt = stmt.order_by(ExperienceModel.featured.desc(), ExperienceModel.created_at.desc())
        result = await session.execute(stmt)
        return result.scalars().all()

    async def search(self, session: AsyncSession, query: str) -> Sequence[ExperienceModel]:
        """
        Active tours matching ``query`` in title, city name or short description.

        Args:
            session: Async database session
            query: Free text, matched case-insensitively as a substring

        Returns:
            Matches, featured first, then highest rated
        """
        pattern = f"%{query}%"
        stmt = (
            select(ExperienceModel)
            .outerjoin(CityModel, ExperienceModel.city_id == CityModel.id)
            .where(
                _ACTIVE,
                or_(
                    ExperienceModel.title.ilike(pattern),
                    ExperienceModel.short_description.ilike(pattern),
                    CityModel.name.ilike(pattern),
                ),
            )
            .order_by(
                ExperienceModel.featured.desc(),
                ExperienceModel.rating.desc().nulls_last(),
            )
        )
        result = await session.execute(stmt)
        return result.scalars().all()


experience_crud = ExperienceCRUD()
