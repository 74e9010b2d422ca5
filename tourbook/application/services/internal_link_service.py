"""
Internal link service orchestrator.

Coordinates admin edits of the curated link blocks shown on the homepage,
tour pages and travel guide posts.

Dependencies: tourbook.boundary.db.CRUD
System role: Internal linking use case orchestration
"""

import logging
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from tourbook.application.services.presenters import link_section_to_dict
from tourbook.application.services.service_utils import row_to_dict
from tourbook.boundary.db.CRUD.blog_crud import blog_post_crud
from tourbook.boundary.db.CRUD.experience_crud import experience_crud
from tourbook.boundary.db.CRUD.internal_link_crud import (
    internal_link_crud,
    internal_link_section_crud,
)
from tourbook.boundary.db.models.internal_link_model import LinkContextType
from tourbook.core.exceptions import NotFoundError, TourbookException, ValidationError

logger = logging.getLogger(__name__)


class InternalLinkService:
    """Internal link service orchestrator."""

    def __init__(self, db: AsyncSession) -> None:
        """
        Initialize internal link service with async database session.

        Args:
            db: Async SQLAlchemy session
        """
        self.db = db

    async def _check_context(self, context_type: str, context_id: UUID | None) -> None:
        """
        Validate a section's display context.

        Homepage sections carry no context id; tour and post sections must
        point at an existing row.
        """
        if context_type == LinkContextType.HOMEPAGE.value:
            if context_id is not None:
                raise ValidationError("Homepage sections take no context_id", field="context_id")
            return
        if context_id is None:
            raise ValidationError(
                f"context_id is required for {context_type} sections", field="context_id"
            )
        crud, resource = (
            (experience_crud, "Experience")
            if context_type == LinkContextType.EXPERIENCE.value
            else (blog_post_crud, "Blog post")
        )
        if not await crud.exists(self.db, context_id):
            raise NotFoundError(resource, context_id)

    async def _section_dict(self, section_id: UUID) -> dict:
        section = await internal_link_section_crud.get_with_links(self.db, section_id)
        if section is None:
            raise NotFoundError("Link section", section_id)
        return link_section_to_dict(section)

    async def list_sections(
        self,
        context_type: str = LinkContextType.HOMEPAGE.value,
        context_id: UUID | None = None,
    ) -> list[dict]:
        """
        Get every section of a context with all its links.

        Args:
            context_type: homepage / experience / blog_post
            context_id: Tour or post UUID

        Returns:
            list[dict]: Sections by sort_order
        """
        sections = await internal_link_section_crud.get_by_context(
            self.db, context_type, context_id
        )
        return [link_section_to_dict(section) for section in sections]

    async def get_section(self, section_id: UUID) -> dict:
        return await self._section_dict(section_id)

    async def create_section(self, data: dict) -> dict:
        """
        Create a link section.

        Raises:
            ValidationError: If the context id does not fit the context type
            NotFoundError: If the tour or post does not exist
        """
        try:
            await self._check_context(data["context_type"], data.get("context_id"))
            section = await internal_link_section_crud.create(self.db, **data)
            await self.db.commit()
            logger.info(
                "Link section created",
                extra={"section_id": str(section.id), "context_type": section.context_type},
            )
            return await self._section_dict(section.id)
        except TourbookException:
            raise
        except Exception as e:
            logger.error("Failed to create link section", extra={"error": str(e)})
            raise

    async def update_section(self, section_id: UUID, updates: dict) -> dict:
        updated = await internal_link_section_crud.update_by_id(self.db, section_id, **updates)
        if updated is None:
            raise NotFoundError("Link section", section_id)
        await self.db.commit()
        return await self._section_dict(section_id)

    async def toggle_section(self, section_id: UUID) -> dict:
        """Show or hide a section."""
        updated = await internal_link_section_crud.toggle_field(self.db, section_id, "enabled")
        if updated is None:
            raise NotFoundError("Link section", section_id)
        await self.db.commit()
        return await self._section_dict(section_id)

    async def delete_section(self, section_id: UUID) -> bool:
        """Delete a section (its links cascade)."""
        deleted = await internal_link_section_crud.delete_by_id(self.db, section_id)
        if not deleted:
            raise NotFoundError("Link section", section_id)
        await self.db.commit()
        logger.info("Link section deleted", extra={"section_id": str(section_id)})
        return True

    # Links

    async def create_link(self, section_id: UUID, data: dict) -> dict:
        """
        Add a link to a section.

        Raises:
            NotFoundError: If section not found
        """
        if not await internal_link_section_crud.exists(self.db, section_id):
            raise NotFoundError("Link section", section_id)
        link = await internal_link_crud.create(self.db, section_id=section_id, **data)
        await self.db.commit()
        return row_to_dict(link)

    async def update_link(self, link_id: UUID, updates: dict) -> dict:
        link = await internal_link_crud.update_by_id(self.db, link_id, **updates)
        if link is None:
            raise NotFoundError("Link", link_id)
        await self.db.commit()
        return row_to_dict(link)

    async def toggle_link(self, link_id: UUID) -> dict:
        link = await internal_link_crud.toggle_field(self.db, link_id, "enabled")
        if link is None:
            raise NotFoundError("Link", link_id)
        await self.db.commit()
        return row_to_dict(link)

    async def delete_link(self, link_id: UUID) -> bool:
        deleted = await internal_link_crud.delete_by_id(self.db, link_id)
        if not deleted:
            raise NotFoundError("Link", link_id)
        await self.db.commit()
        return True
