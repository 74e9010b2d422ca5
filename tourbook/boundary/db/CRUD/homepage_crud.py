"""
Homepage content CRUD operations.

Dependencies: sqlalchemy, tourbook.boundary.db.models
System role: Homepage settings, statistics and testimonials persistence
"""

from typing import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from tourbook.boundary.db.CRUD.base_crud import BaseCRUD
from tourbook.boundary.db.models.homepage_model import (
    HomepageSettingModel,
    HomepageStatModel,
    TestimonialModel,
)


class HomepageSettingCRUD(BaseCRUD[HomepageSettingModel]):
    """CRUD operations for HomepageSettingModel, keyed by section_name."""

    default_order = (HomepageSettingModel.section_name,)

    def __init__(self) -> None:
        """Initialize HomepageSettingCRUD with HomepageSettingModel."""
        super().__init__(HomepageSettingModel)

    async def get_by_section_name(
        self,
        session: AsyncSession,
        section_name: str,
    ) -> HomepageSettingModel | None:
        """
        Retrieve one block's settings.

        Args:
            session: Async database session
            section_name: Block identifier ("hero_section")

        Returns:
            HomepageSettingModel if stored, None otherwise
        """
        stmt = select(HomepageSettingModel).where(HomepageSettingModel.section_name == section_name)
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def upsert(
        self,
        session: AsyncSession,
        section_name: str,
        **kwargs,
    ) -> HomepageSettingModel:
        """
        Create or update the row for ``section_name``.

        Args:
            session: Async database session
            section_name: Block identifier
            **kwargs: Column values to write

        Returns:
            The stored row
        """
        existing = await self.get_by_section_name(session, section_name)
        if existing is None:
            return await self.create(session, section_name=section_name, **kwargs)
        return await self.update_by_id(session, existing.id, **kwargs)


class HomepageStatCRUD(BaseCRUD[HomepageStatModel]):
    """CRUD operations for HomepageStatModel, ordered by sort_order."""

    default_order = (HomepageStatModel.sort_order, HomepageStatModel.label)

    def __init__(self) -> None:
        """Initialize HomepageStatCRUD with HomepageStatModel."""
        super().__init__(HomepageStatModel)


class TestimonialCRUD(BaseCRUD[TestimonialModel]):
    """CRUD operations for TestimonialModel, ordered by sort_order."""

    default_order = (TestimonialModel.sort_order, TestimonialModel.created_at.desc())

    def __init__(self) -> None:
        """Initialize TestimonialCRUD with TestimonialModel."""
        super().__init__(TestimonialModel)

    async def get_featured(self, session: AsyncSession, limit: int = 6) -> Sequence[TestimonialModel]:
        """Featured testimonials by sort_order."""
        stmt = (
            select(TestimonialModel)
            .where(TestimonialModel.featured.is_(True))
            .order_by(*self.default_order)
            .limit(limit)
        )
        result = await session.execute(stmt)
        return result.scalars().all()


homepage_setting_crud = HomepageSettingCRUD()
homepage_stat_crud = HomepageStatCRUD()
testimonial_crud = TestimonialCRUD()
