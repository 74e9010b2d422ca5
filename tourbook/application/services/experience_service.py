"""
Experience service orchestrator.

Coordinates admin lifecycle operations on tours.

Dependencies: tourbook.boundary.db.CRUD, tourbook.core
System role: Tour catalog use case orchestration
"""

import logging
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from tourbook.application.services.presenters import experience_to_dict
from tourbook.application.services.service_utils import claim_slug, record_slug_change
from tourbook.boundary.db.CRUD.category_crud import category_crud, subcategory_crud
from tourbook.boundary.db.CRUD.city_crud import city_crud
from tourbook.boundary.db.CRUD.experience_crud import experience_crud
from tourbook.core.exceptions import NotFoundError, TourbookException
from tourbook.core.redirects import ContentType
from tourbook.core.toggles import toggle_status

logger = logging.getLogger(__name__)

_LINKS = (
    ("city_id", city_crud, "City"),
    ("category_id", category_crud, "Category"),
    ("subcategory_id", subcategory_crud, "Subcategory"),
)


class ExperienceService:
    """Experience service orchestrator."""

    def __init__(self, db: AsyncSession) -> None:
        """
        Initialize experience service with async database session.

        Args:
            db: Async SQLAlchemy session
        """
        self.db = db

    async def _check_links(self, data: dict) -> None:
        """Raise NotFoundError for a city/category/subcategory id that does not exist."""
        for field, crud, resource in _LINKS:
            value = data.get(field)
            if value is not None and not await crud.exists(self.db, value):
                raise NotFoundError(resource, value)

    async def list_experiences(
        self,
        limit: int | None = None,
        offset: int = 0,
    ) -> list[dict]:
        """
        Get all tours, any status, newest first.

        Args:
            limit: Maximum number of tours to return
            offset: Number of tours to skip

        Returns:
            list[dict]: Tour dicts with city/category names
        """
        try:
            rows = await experience_crud.get_all(self.db, limit=limit, offset=offset)
            return [experience_to_dict(row) for row in rows]
        except Exception as e:
            logger.error("Failed to list experiences", extra={"error": str(e)})
            raise

    async def get_experience(self, experience_id: UUID) -> dict:
        """
        Get tour by ID.

        Raises:
            NotFoundError: If tour not found
        """
        row = await experience_crud.get_by_id(self.db, experience_id)
        if row is None:
            raise NotFoundError("Experience", experience_id)
        return experience_to_dict(row)

    async def create_experience(self, data: dict) -> dict:
        """
        Create a tour.

        The slug is derived from the title when blank and ``seo_title``
        defaults to the title.

        Args:
            data: Column values from CreateExperienceRequest

        Returns:
            dict: Created tour

        Raises:
            SlugConflictError: If the slug is taken
            NotFoundError: If a linked city/category/subcategory does not exist
        """
        try:
            data = dict(data)
            await self._check_links(data)
            data["slug"] = await claim_slug(
                self.db, experience_crud, "Experience", data.get("slug"), data["title"]
            )
            if not data.get("seo_title"):
                data["seo_title"] = data["title"]

            row = await experience_crud.create(self.db, **data)
            await self.db.commit()
            logger.info(
                "Experience created",
                extra={"experience_id": str(row.id), "slug": row.slug},
            )
            return experience_to_dict(row)
        except TourbookException:
            raise
        except Exception as e:
            logger.error(
                "Failed to create experience",
                extra={"error": str(e), "title": data.get("title")},
            )
            raise

    async def update_experience(self, experience_id: UUID, updates: dict) -> dict:
        """
        Update a tour. A changed slug records a redirect from the old one.

        Args:
            experience_id: Tour UUID
            updates: Fields sent by the client

        Returns:
            dict: Updated tour

        Raises:
            NotFoundError: If tour (or a linked row) not found
            SlugConflictError: If the new slug is taken
        """
        try:
            row = await experience_crud.get_by_id(self.db, experience_id)
            if row is None:
                raise NotFoundError("Experience", experience_id)

            updates = dict(updates)
            await self._check_links(updates)
            old_slug = row.slug
            if "slug" in updates:
                updates["slug"] = await claim_slug(
                    self.db,
                    experience_crud,
                    "Experience",
                    updates["slug"],
                    updates.get("title") or row.title,
                    exclude_id=experience_id,
                )
                if updates["slug"] != old_slug:
                    await record_slug_change(
                        self.db, ContentType.EXPERIENCES.value, old_slug, updates["slug"]
                    )

            updated = await experience_crud.update_by_id(self.db, experience_id, **updates)
            await self.db.commit()
            logger.info(
                "Experience updated",
                extra={"experience_id": str(experience_id), "updates": list(updates.keys())},
            )
            return experience_to_dict(updated)
        except TourbookException:
            raise
        except Exception as e:
            logger.error(
                "Failed to update experience",
                extra={"error": str(e), "experience_id": str(experience_id)},
            )
            raise

    async def delete_experience(self, experience_id: UUID) -> bool:
        """
        Delete a tour (cart rows for it cascade).

        Raises:
            NotFoundError: If tour not found
        """
        try:
            deleted = await experience_crud.delete_by_id(self.db, experience_id)
            if not deleted:
                raise NotFoundError("Experience", experience_id)
            await self.db.commit()
            logger.info("Experience deleted", extra={"experience_id": str(experience_id)})
            return True
        except TourbookException:
            raise
        except Exception as e:
            logger.error(
                "Failed to delete experience",
                extra={"error": str(e), "experience_id": str(experience_id)},
            )
            raise

    async def toggle_experience_status(self, experience_id: UUID) -> dict:
        """
        Flip a tour between active and inactive (drafts become active).

        Raises:
            NotFoundError: If tour not found
        """
        row = await experience_crud.get_by_id(self.db, experience_id)
        if row is None:
            raise NotFoundError("Experience", experience_id)
        new_status = toggle_status(row.status)
        updated = await experience_crud.update_by_id(self.db, experience_id, status=new_status)
        await self.db.commit()
        logger.info(
            "Experience status toggled",
            extra={"experience_id": str(experience_id), "status": new_status},
        )
        return experience_to_dict(updated)

    async def toggle_experience_featured(self, experience_id: UUID) -> dict:
        """
        Flip a tour's featured flag.

        Raises:
            NotFoundError: If tour not found
        """
        row = await experience_crud.toggle_field(self.db, experience_id, "featured")
        if row is None:
            raise NotFoundError("Experience", experience_id)
        await self.db.commit()
        return experience_to_dict(row)
