"""
Travel guide CRUD operations.

Provides CRUD for blog posts, blog categories, guide sections and guide
items, plus the published-only queries the storefront uses.

Dependencies: sqlalchemy, tourbook.boundary.db.models
System role: Travel guide persistence operations
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from tourbook.boundary.db.CRUD.base_crud import BaseCRUD, SlugCRUD
from tourbook.boundary.db.models.blog_model import (
    BlogCategoryModel,
    BlogPostModel,
    GuideItemModel,
    GuideSectionModel,
)

_NEWEST = (BlogPostModel.published_at.desc().nulls_last(), BlogPostModel.created_at.desc())


class BlogCategoryCRUD(SlugCRUD[BlogCategoryModel]):
    """CRUD operations for BlogCategoryModel, listed by name."""

    default_order = (BlogCategoryModel.name,)

    def __init__(self) -> None:
        """Initialize BlogCategoryCRUD with BlogCategoryModel."""
        super().__init__(BlogCategoryModel)


class BlogPostCRUD(SlugCRUD[BlogPostModel]):
    """
    CRUD operations for BlogPostModel.

    Extends SlugCRUD with published-only listings and eager loading of
    guide sections with their items.
    """

    default_order = (BlogPostModel.created_at.desc(),)

    def __init__(self) -> None:
        """Initialize BlogPostCRUD with BlogPostModel."""
        super().__init__(BlogPostModel)

    async def get_published(
        self,
        session: AsyncSession,
        category_id: UUID | None = None,
    ) -> Sequence[BlogPostModel]:
        """
        Retrieve the travel guide listing.

        Args:
            session: Async database session
            category_id: Optional blog category filter

        Returns:
            Published posts, newest first
        """
        stmt = select(BlogPostModel).where(BlogPostModel.published.is_(True))
        if category_id is not None:
            stmt = stmt.where(BlogPostModel.category_id == category_id)
        result = await session.execute(stmt.order_by(*_NEWEST))
        return result.scalars().all()

    async def get_published_by_slug(
        self,
        session: AsyncSession,
        slug: str,
    ) -> BlogPostModel | None:
        """
        Retrieve a published post with guide sections and items loaded.

        Args:
            session: Async database session
            slug: Post slug

        Returns:
            BlogPostModel with guide_sections loaded, None if missing or unpublished
        """
        stmt = (
            select(BlogPostModel)
            .where(BlogPostModel.slug == slug, BlogPostModel.published.is_(True))
            .options(selectinload(BlogPostModel.guide_sections).selectinload(GuideSectionModel.items))
            .execution_options(populate_existing=True)
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_related(
        self,
        session: AsyncSession,
        exclude_id: UUID,
        limit: int = 3,
    ) -> Sequence[BlogPostModel]:
        """Other published posts, newest first."""
        stmt = (
            select(BlogPostModel)
            .where(BlogPostModel.published.is_(True), BlogPostModel.id != exclude_id)
            .order_by(*_NEWEST)
            .limit(limit)
        )
        result = await session.execute(stmt)
        return result.scalars().all()


class GuideSectionCRUD(BaseCRUD[GuideSectionModel]):
    """CRUD operations for GuideSectionModel."""

    default_order = (GuideSectionModel.sort_order,)

    def __init__(self) -> None:
        """Initialize GuideSectionCRUD with GuideSectionModel."""
        super().__init__(GuideSectionModel)

    async def get_with_items(
        self,
        session: AsyncSession,
        id: UUID,
    ) -> GuideSectionModel | None:
        """
        Retrieve a section with eagerly loaded items.

        Args:
            session: Async database session
            id: Section UUID

        Returns:
            GuideSectionModel with items loaded, None if not found
        """
        stmt = (
            select(GuideSectionModel)
            .where(GuideSectionModel.id == id)
            .options(selectinload(GuideSectionModel.items))
            .execution_options(populate_existing=True)
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_post(
        self,
        session: AsyncSession,
        blog_post_id: UUID,
    ) -> Sequence[GuideSectionModel]:
        """
        Retrieve every section of a post (enabled or not) with items loaded.

        Args:
            session: Async database session
            blog_post_id: Post UUID

        Returns:
            Sections by sort_order
        """
        stmt = (
            select(GuideSectionModel)
            .where(GuideSectionModel.blog_post_id == blog_post_id)
            .options(selectinload(GuideSectionModel.items))
            .order_by(GuideSectionModel.sort_order)
            .execution_options(populate_existing=True)
        )
        result = await session.execute(stmt)
        return result.scalars().all()


class GuideItemCRUD(BaseCRUD[GuideItemModel]):
    """CRUD operations for GuideItemModel."""

    default_order = (GuideItemModel.sort_order,)

    def __init__(self) -> None:
        """Initialize GuideItemCRUD with GuideItemModel."""
        super().__init__(GuideItemModel)

    async def get_by_section(
        self,
        session: AsyncSession,
        section_id: UUID,
    ) -> Sequence[GuideItemModel]:
        """Items of a section in stored order."""
        stmt = (
            select(GuideItemModel)
            .where(GuideItemModel.section_id == section_id)
            .order_by(GuideItemModel.sort_order)
        )
        result = await session.execute(stmt)
        return result.scalars().all()


blog_category_crud = BlogCategoryCRUD()
blog_post_crud = BlogPostCRUD()
guide_section_crud = GuideSectionCRUD()
guide_item_crud = GuideItemCRUD()
