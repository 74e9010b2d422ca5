"""
Homepage content service orchestrator.

Coordinates admin edits of homepage block copy, trust statistics and
testimonials.

Dependencies: tourbook.boundary.db.CRUD
System role: Homepage content use case orchestration
"""

import logging
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from tourbook.application.services.service_utils import row_to_dict, rows_to_dicts
from tourbook.boundary.db.CRUD.homepage_crud import (
    homepage_setting_crud,
    homepage_stat_crud,
    testimonial_crud,
)
from tourbook.core.exceptions import NotFoundError, TourbookException, ValidationError

logger = logging.getLogger(__name__)


class HomepageService:
    """Homepage content service orchestrator."""

    def __init__(self, db: AsyncSession) -> None:
        """
        Initialize homepage service with async database session.

        Args:
            db: Async SQLAlchemy session
        """
        self.db = db

    # Block settings

    async def list_settings(self) -> list[dict]:
        """Get every stored homepage block."""
        return rows_to_dicts(await homepage_setting_crud.get_all(self.db))

    async def get_setting(self, section_name: str) -> dict:
        """
        Get one block's stored copy.

        Raises:
            NotFoundError: If nothing is stored for the block
        """
        row = await homepage_setting_crud.get_by_section_name(self.db, section_name)
        if row is None:
            raise NotFoundError("Homepage setting", section_name)
        return row_to_dict(row)

    async def upsert_setting(self, section_name: str, data: dict) -> dict:
        """
        Create or replace a block's copy.

        Args:
            section_name: Block identifier ("hero_section", "faq_section")
            data: Column values from UpsertHomepageSettingRequest

        Returns:
            dict: Stored row

        Raises:
            ValidationError: If section_name is blank
        """
        section_name = (section_name or "").strip()
        if not section_name:
            raise ValidationError("Section name is required", field="section_name")
        try:
            row = await homepage_setting_crud.upsert(self.db, section_name, **data)
            await self.db.commit()
            logger.info("Homepage setting saved", extra={"section_name": section_name})
            return row_to_dict(row)
        except Exception as e:
            logger.error(
                "Failed to save homepage setting",
                extra={"error": str(e), "section_name": section_name},
            )
            raise

    async def delete_setting(self, section_name: str) -> bool:
        """Drop a block's copy so the built-in defaults show again."""
        row = await homepage_setting_crud.get_by_section_name(self.db, section_name)
        if row is None:
            raise NotFoundError("Homepage setting", section_name)
        await homepage_setting_crud.delete_by_id(self.db, row.id)
        await self.db.commit()
        return True

    # Stats

    async def list_stats(self) -> list[dict]:
        return rows_to_dicts(await homepage_stat_crud.get_all(self.db))

    async def create_stat(self, data: dict) -> dict:
        """Create a trust statistic."""
        row = await homepage_stat_crud.create(self.db, **data)
        await self.db.commit()
        logger.info("Homepage stat created", extra={"stat_id": str(row.id), "label": row.label})
        return row_to_dict(row)

    async def update_stat(self, stat_id: UUID, updates: dict) -> dict:
        row = await homepage_stat_crud.update_by_id(self.db, stat_id, **updates)
        if row is None:
            raise NotFoundError("Homepage stat", stat_id)
        await self.db.commit()
        return row_to_dict(row)

    async def delete_stat(self, stat_id: UUID) -> bool:
        deleted = await homepage_stat_crud.delete_by_id(self.db, stat_id)
        if not deleted:
            raise NotFoundError("Homepage stat", stat_id)
        await self.db.commit()
        return True

    # Testimonials

    async def list_testimonials(self) -> list[dict]:
        """Get every testimonial by sort_order."""
        return rows_to_dicts(await testimonial_crud.get_all(self.db))

    async def get_testimonial(self, testimonial_id: UUID) -> dict:
        row = await testimonial_crud.get_by_id(self.db, testimonial_id)
        if row is None:
            raise NotFoundError("Testimonial", testimonial_id)
        return row_to_dict(row)

    async def create_testimonial(self, data: dict) -> dict:
        """Create a testimonial."""
        try:
            row = await testimonial_crud.create(self.db, **data)
            await self.db.commit()
            logger.info("Testimonial created", extra={"testimonial_id": str(row.id)})
            return row_to_dict(row)
        except Exception as e:
            logger.error(
                "Failed to create testimonial",
                extra={"error": str(e), "customer_name": data.get("customer_name")},
            )
            raise

    async def update_testimonial(self, testimonial_id: UUID, updates: dict) -> dict:
        """
        Update a testimonial.

        Raises:
            NotFoundError: If testimonial not found
        """
        try:
            row = await testimonial_crud.update_by_id(self.db, testimonial_id, **updates)
            if row is None:
                raise NotFoundError("Testimonial", testimonial_id)
            await self.db.commit()
            return row_to_dict(row)
        except TourbookException:
            raise
        except Exception as e:
            logger.error(
                "Failed to update testimonial",
                extra={"error": str(e), "testimonial_id": str(testimonial_id)},
            )
            raise

    async def delete_testimonial(self, testimonial_id: UUID) -> bool:
        deleted = await testimonial_crud.delete_by_id(self.db, testimonial_id)
        if not deleted:
            raise NotFoundError("Testimonial", testimonial_id)
        await self.db.commit()
        return True

    async def toggle_testimonial_featured(self, testimonial_id: UUID) -> dict:
        """Show or hide a testimonial on the homepage."""
        row = await testimonial_crud.toggle_field(self.db, testimonial_id, "featured")
        if row is None:
            raise NotFoundError("Testimonial", testimonial_id)
        await self.db.commit()
        return row_to_dict(row)
