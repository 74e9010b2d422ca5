"""
Slug redirect CRUD operations.

Dependencies: sqlalchemy, tourbook.boundary.db.models
System role: Moved-content persistence operations
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from tourbook.boundary.db.CRUD.base_crud import BaseCRUD
from tourbook.boundary.db.models.redirect_model import SlugRedirectModel


class SlugRedirectCRUD(BaseCRUD[SlugRedirectModel]):
    """CRUD operations for SlugRedirectModel, newest first."""

    default_order = (SlugRedirectModel.created_at.desc(),)

    def __init__(self) -> None:
        """Initialize SlugRedirectCRUD with SlugRedirectModel."""
        super().__init__(SlugRedirectModel)

    async def get_by_old_slug(
        self,
        session: AsyncSession,
        content_type: str,
        old_slug: str,
    ) -> SlugRedirectModel | None:
        """
        Find where a retired slug now points.

        Args:
            session: Async database session
            content_type: experiences / categories / blog_posts
            old_slug: Slug that was looked up and missed

        Returns:
            SlugRedirectModel if stored, None otherwise
        """
        stmt = select(SlugRedirectModel).where(
            SlugRedirectModel.content_type == content_type,
            SlugRedirectModel.old_slug == old_slug,
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def record_move(
        self,
        session: AsyncSession,
        content_type: str,
        old_slug: str,
        new_slug: str,
    ) -> SlugRedirectModel:
        """
        Store ``old_slug -> new_slug``, replacing an existing rule for ``old_slug``.

        Existing rules that pointed at ``old_slug`` are re-pointed to
        ``new_slug`` so chains collapse to one hop, and a rule starting at
        ``new_slug`` is dropped because that slug is live again.
        """
        stmt = select(SlugRedirectModel).where(
            SlugRedirectModel.content_type == content_type,
            SlugRedirectModel.new_slug == old_slug,
        )
        for chained in (await session.execute(stmt)).scalars().all():
            chained.new_slug = new_slug

        revived = await self.get_by_old_slug(session, content_type, new_slug)
        if revived is not None:
            await session.delete(revived)

        existing = await self.get_by_old_slug(session, content_type, old_slug)
        if existing is not None:
            return await self.update_by_id(session, existing.id, new_slug=new_slug, permanent=True)
        return await self.create(
            session,
            content_type=content_type,
            old_slug=old_slug,
            new_slug=new_slug,
            permanent=True,
        )


slug_redirect_crud = SlugRedirectCRUD()
