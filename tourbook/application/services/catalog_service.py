"""
Catalog service orchestrator.

Coordinates admin operations on categories, subcategories and cities.

Dependencies: tourbook.boundary.db.CRUD, tourbook.core
System role: Tour taxonomy use case orchestration
"""

import logging
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from tourbook.application.services.service_utils import (
    claim_slug,
    record_slug_change,
    row_to_dict,
    rows_to_dicts,
)
from tourbook.boundary.db.CRUD.category_crud import category_crud, subcategory_crud
from tourbook.boundary.db.CRUD.city_crud import city_crud
from tourbook.core.exceptions import NotFoundError, TourbookException
from tourbook.core.redirects import ContentType

logger = logging.getLogger(__name__)


class CatalogService:
    """Category, subcategory and city service orchestrator."""

    def __init__(self, db: AsyncSession) -> None:
        """
        Initialize catalog service with async database session.

        Args:
            db: Async SQLAlchemy session
        """
        self.db = db

    # Categories

    async def list_categories(self) -> list[dict]:
        """
        Get all categories ordered by name.

        Returns:
            list[dict]: Category dicts
        """
        try:
            return rows_to_dicts(await category_crud.get_all(self.db))
        except Exception as e:
            logger.error("Failed to list categories", extra={"error": str(e)})
            raise

    async def get_category(self, category_id: UUID) -> dict:
        """
        Get category by ID.

        Raises:
            NotFoundError: If category not found
        """
        category = await category_crud.get_by_id(self.db, category_id)
        if category is None:
            raise NotFoundError("Category", category_id)
        return row_to_dict(category)

    async def create_category(self, data: dict) -> dict:
        """
        Create a category, deriving the slug from the name when blank.

        Args:
            data: Column values from CreateCategoryRequest

        Returns:
            dict: Created category

        Raises:
            SlugConflictError: If the slug is taken
        """
        try:
            data = dict(data)
            data["slug"] = await claim_slug(
                self.db, category_crud, "Category", data.get("slug"), data["name"]
            )
            category = await category_crud.create(self.db, **data)
            await self.db.commit()
            logger.info(
                "Category created",
                extra={"category_id": str(category.id), "slug": category.slug},
            )
            return row_to_dict(category)
        except TourbookException:
            raise
        except Exception as e:
            logger.error(
                "Failed to create category",
                extra={"error": str(e), "category_name": data.get("name")},
            )
            raise

    async def update_category(self, category_id: UUID, updates: dict) -> dict:
        """
        Update a category. A changed slug records a redirect from the old one.

        Args:
            category_id: Category UUID
            updates: Fields sent by the client

        Returns:
            dict: Updated category

        Raises:
            NotFoundError: If category not found
            SlugConflictError: If the new slug is taken
        """
        try:
            category = await category_crud.get_by_id(self.db, category_id)
            if category is None:
                raise NotFoundError("Category", category_id)

            updates = dict(updates)
            old_slug = category.slug
            if "slug" in updates:
                updates["slug"] = await claim_slug(
                    self.db,
                    category_crud,
                    "Category",
                    updates["slug"],
                    updates.get("name") or category.name,
                    exclude_id=category_id,
                )
            if updates.get("slug") and updates["slug"] != old_slug:
                await record_slug_change(
                    self.db, ContentType.CATEGORIES.value, old_slug, updates["slug"]
                )

            updated = await category_crud.update_by_id(self.db, category_id, **updates)
            await self.db.commit()
            logger.info(
                "Category updated",
                extra={"category_id": str(category_id), "updates": list(updates.keys())},
            )
            return row_to_dict(updated)
        except TourbookException:
            raise
        except Exception as e:
            logger.error(
                "Failed to update category",
                extra={"error": str(e), "category_id": str(category_id)},
            )
            raise

    async def delete_category(self, category_id: UUID) -> bool:
        """
        Delete category (subcategories cascade, tours keep a NULL category).

        Raises:
            NotFoundError: If category not found
        """
        try:
            deleted = await category_crud.delete_by_id(self.db, category_id)
            if not deleted:
                raise NotFoundError("Category", category_id)
            await self.db.commit()
            logger.info("Category deleted", extra={"category_id": str(category_id)})
            return True
        except TourbookException:
            raise
        except Exception as e:
            logger.error(
                "Failed to delete category",
                extra={"error": str(e), "category_id": str(category_id)},
            )
            raise

    async def toggle_category_featured(self, category_id: UUID) -> dict:
        """Flip a category's homepage flag."""
        category = await category_crud.toggle_field(self.db, category_id, "featured")
        if category is None:
            raise NotFoundError("Category", category_id)
        await self.db.commit()
        return row_to_dict(category)

    # Subcategories

    async def list_subcategories(self, category_id: UUID) -> list[dict]:
        """
        Get subcategories of a category.

        Raises:
            NotFoundError: If the category does not exist
        """
        if not await category_crud.exists(self.db, category_id):
            raise NotFoundError("Category", category_id)
        return rows_to_dicts(await subcategory_crud.get_by_category(self.db, category_id))

    async def get_subcategory(self, subcategory_id: UUID) -> dict:
        """Get subcategory by ID."""
        subcategory = await subcategory_crud.get_by_id(self.db, subcategory_id)
        if subcategory is None:
            raise NotFoundError("Subcategory", subcategory_id)
        return row_to_dict(subcategory)

    async def create_subcategory(self, category_id: UUID, data: dict) -> dict:
        """
        Create a subcategory under ``category_id``.

        Raises:
            NotFoundError: If the category does not exist
            SlugConflictError: If the slug is taken
        """
        try:
            if not await category_crud.exists(self.db, category_id):
                raise NotFoundError("Category", category_id)
            data = dict(data)
            data["slug"] = await claim_slug(
                self.db, subcategory_crud, "Subcategory", data.get("slug"), data["name"]
            )
            subcategory = await subcategory_crud.create(self.db, category_id=category_id, **data)
            await self.db.commit()
            logger.info(
                "Subcategory created",
                extra={"subcategory_id": str(subcategory.id), "category_id": str(category_id)},
            )
            return row_to_dict(subcategory)
        except TourbookException:
            raise
        except Exception as e:
            logger.error(
                "Failed to create subcategory",
                extra={"error": str(e), "category_id": str(category_id)},
            )
            raise

    async def update_subcategory(self, subcategory_id: UUID, updates: dict) -> dict:
        """Update a subcategory."""
        try:
            subcategory = await subcategory_crud.get_by_id(self.db, subcategory_id)
            if subcategory is None:
                raise NotFoundError("Subcategory", subcategory_id)
            updates = dict(updates)
            if "slug" in updates:
                updates["slug"] = await claim_slug(
                    self.db,
                    subcategory_crud,
                    "Subcategory",
                    updates["slug"],
                    updates.get("name") or subcategory.name,
                    exclude_id=subcategory_id,
                )
            if updates.get("category_id") is not None and not await category_crud.exists(
                self.db, updates["category_id"]
            ):
                raise NotFoundError("Category", updates["category_id"])
            if "category_id" in updates and updates["category_id"] is None:
                del updates["category_id"]
            updated = await subcategory_crud.update_by_id(self.db, subcategory_id, **updates)
            await self.db.commit()
            return row_to_dict(updated)
        except TourbookException:
            raise
        except Exception as e:
            logger.error(
                "Failed to update subcategory",
                extra={"error": str(e), "subcategory_id": str(subcategory_id)},
            )
            raise

    async def delete_subcategory(self, subcategory_id: UUID) -> bool:
        """Delete a subcategory (tours keep a NULL subcategory)."""
        deleted = await subcategory_crud.delete_by_id(self.db, subcategory_id)
        if not deleted:
            raise NotFoundError("Subcategory", subcategory_id)
        await self.db.commit()
        logger.info("Subcategory deleted", extra={"subcategory_id": str(subcategory_id)})
        return True

    # Cities

    async def list_cities(self) -> list[dict]:
        """Get all cities ordered by name."""
        try:
            return rows_to_dicts(await city_crud.get_all(self.db))
        except Exception as e:
            logger.error("Failed to list cities", extra={"error": str(e)})
            raise

    async def get_city(self, city_id: UUID) -> dict:
        """Get city by ID."""
        city = await city_crud.get_by_id(self.db, city_id)
        if city is None:
            raise NotFoundError("City", city_id)
        return row_to_dict(city)

    async def create_city(self, data: dict) -> dict:
        """
        Create a city, deriving the slug from the name when blank.

        Raises:
            SlugConflictError: If the slug is taken
        """
        try:
            data = dict(data)
            data["slug"] = await claim_slug(self.db, city_crud, "City", data.get("slug"), data["name"])
            city = await city_crud.create(self.db, **data)
            await self.db.commit()
            logger.info("City created", extra={"city_id": str(city.id), "slug": city.slug})
            return row_to_dict(city)
        except TourbookException:
            raise
        except Exception as e:
            logger.error(
                "Failed to create city",
                extra={"error": str(e), "city_name": data.get("name")},
            )
            raise

    async def update_city(self, city_id: UUID, updates: dict) -> dict:
        """Update a city."""
        try:
            city = await city_crud.get_by_id(self.db, city_id)
            if city is None:
                raise NotFoundError("City", city_id)
            updates = dict(updates)
            if "slug" in updates:
                updates["slug"] = await claim_slug(
                    self.db,
                    city_crud,
                    "City",
                    updates["slug"],
                    updates.get("name") or city.name,
                    exclude_id=city_id,
                )
            updated = await city_crud.update_by_id(self.db, city_id, **updates)
            await self.db.commit()
            logger.info(
                "City updated",
                extra={"city_id": str(city_id), "updates": list(updates.keys())},
            )
            return row_to_dict(updated)
        except TourbookException:
            raise
        except Exception as e:
            logger.error(
                "Failed to update city",
                extra={"error": str(e), "city_id": str(city_id)},
            )
            raise

    async def delete_city(self, city_id: UUID) -> bool:
        """Delete a city (tours keep a NULL city)."""
        deleted = await city_crud.delete_by_id(self.db, city_id)
        if not deleted:
            raise NotFoundError("City", city_id)
        await self.db.commit()
        logger.info("City deleted", extra={"city_id": str(city_id)})
        return True

    async def toggle_city_featured(self, city_id: UUID) -> dict:
        """Flip a city's featured flag."""
        city = await city_crud.toggle_field(self.db, city_id, "featured")
        if city is None:
            raise NotFoundError("City", city_id)
        await self.db.commit()
        return row_to_dict(city)
