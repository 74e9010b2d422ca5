"""
Internal link CRUD operations.

Dependencies: sqlalchemy, tourbook.boundary.db.models
System role: Internal linking persistence operations
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from tourbook.boundary.db.CRUD.base_crud import BaseCRUD
from tourbook.boundary.db.models.internal_link_model import (
    InternalLinkModel,
    InternalLinkSectionModel,
)


class InternalLinkSectionCRUD(BaseCRUD[InternalLinkSectionModel]):
    """
    CRUD operations for InternalLinkSectionModel.

    Sections are always fetched for one display context, with links loaded.
    """

    default_order = (InternalLinkSectionModel.sort_order,)

    def __init__(self) -> None:
        """Initialize InternalLinkSectionCRUD with InternalLinkSectionModel."""
        super().__init__(InternalLinkSectionModel)

    async def get_with_links(
        self,
        session: AsyncSession,
        id: UUID,
    ) -> InternalLinkSectionModel | None:
        """
        Retrieve a section with eagerly loaded links.

        Args:
            session: Async database session
            id: Section UUID

        Returns:
            InternalLinkSectionModel with links loaded, None if not found
        """
        stmt = (
            select(InternalLinkSectionModel)
            .where(InternalLinkSectionModel.id == id)
            .options(selectinload(InternalLinkSectionModel.links))
            .execution_options(populate_existing=True)
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_context(
        self,
        session: AsyncSession,
        context_type: str,
        context_id: UUID | None = None,
        enabled_only: bool = False,
    ) -> Sequence[InternalLinkSectionModel]:
        """
        Retrieve sections shown in one context, with their links.

        Args:
            session: Async database session
            context_type: homepage / experience / blog_post
            context_id: Tour or post UUID (None for the homepage)
            enabled_only: Skip disabled sections

        Returns:
            Sections by sort_order with ``links`` loaded (all links, any state)
        """
        stmt = select(InternalLinkSectionModel).where(
            InternalLinkSectionModel.context_type == context_type
        )
        if context_id is None:
            stmt = stmt.where(InternalLinkSectionModel.context_id.is_(None))
        else:
            stmt = stmt.where(InternalLinkSectionModel.context_id == context_id)
        if enabled_only:
            stmt = stmt.where(InternalLinkSectionModel.enabled.is_(True))
        stmt = (
            stmt.options(selectinload(InternalLinkSectionModel.links))
            .order_by(InternalLinkSectionModel.sort_order)
            .execution_options(populate_existing=True)
        )
        result = await session.execute(stmt)
        return result.scalars().all()


class InternalLinkCRUD(BaseCRUD[InternalLinkModel]):
    """CRUD operations for InternalLinkModel."""

    default_order = (InternalLinkModel.display_order,)

    def __init__(self) -> None:
        """Initialize InternalLinkCRUD with InternalLinkModel."""
        super().__init__(InternalLinkModel)

    async def get_by_section(
        self,
        session: AsyncSession,
        section_id: UUID,
    ) -> Sequence[InternalLinkModel]:
        """Links of a section by display_order."""
        stmt = (
            select(InternalLinkModel)
            .where(InternalLinkModel.section_id == section_id)
            .order_by(InternalLinkModel.display_order)
        )
        result = await session.execute(stmt)
        return result.scalars().all()


internal_link_section_crud = InternalLinkSectionCRUD()
internal_link_crud = InternalLinkCRUD()
