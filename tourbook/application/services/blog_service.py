"""
Travel guide service orchestrator.

Coordinates admin operations on posts, blog categories and the nested
guide sections and items.

Dependencies: tourbook.boundary.db.CRUD, tourbook.core
System role: Travel guide use case orchestration
"""

import logging
from datetime import datetime, timezone
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from tourbook.application.services.presenters import blog_post_to_dict, guide_section_to_dict
from tourbook.application.services.service_utils import (
    claim_slug,
    record_slug_change,
    row_to_dict,
    rows_to_dicts,
)
from tourbook.boundary.db.CRUD.blog_crud import (
    blog_category_crud,
    blog_post_crud,
    guide_item_crud,
    guide_section_crud,
)
from tourbook.core.exceptions import NotFoundError, TourbookException
from tourbook.core.redirects import ContentType

logger = logging.getLogger(__name__)


def _apply_publication(updates: dict, currently_published_at: datetime | None) -> None:
    """
    Keep ``published_at`` in step with ``published``.

    Publishing stamps the time once; unpublishing clears it.
    """
    if "published" not in updates or updates["published"] is None:
        return
    if updates["published"]:
        if currently_published_at is None:
            updates["published_at"] = datetime.now(timezone.utc)
    else:
        updates["published_at"] = None


class BlogService:
    """Travel guide service orchestrator."""

    def __init__(self, db: AsyncSession) -> None:
        """
        Initialize blog service with async database session.

        Args:
            db: Async SQLAlchemy session
        """
        self.db = db

    # Posts

    async def list_posts(self, limit: int | None = None, offset: int = 0) -> list[dict]:
        """
        Get all posts, published or not, newest first.

        Returns:
            list[dict]: Post dicts with category names
        """
        try:
            rows = await blog_post_crud.get_all(self.db, limit=limit, offset=offset)
            return [blog_post_to_dict(row) for row in rows]
        except Exception as e:
            logger.error("Failed to list blog posts", extra={"error": str(e)})
            raise

    async def get_post(self, post_id: UUID) -> dict:
        """
        Get post by ID.

        Raises:
            NotFoundError: If post not found
        """
        row = await blog_post_crud.get_by_id(self.db, post_id)
        if row is None:
            raise NotFoundError("Blog post", post_id)
        return blog_post_to_dict(row)

    async def create_post(self, data: dict) -> dict:
        """
        Create a post.

        Args:
            data: Column values from CreateBlogPostRequest

        Returns:
            dict: Created post

        Raises:
            SlugConflictError: If the slug is taken
            NotFoundError: If the blog category does not exist
        """
        try:
            data = dict(data)
            if data.get("category_id") is not None and not await blog_category_crud.exists(
                self.db, data["category_id"]
            ):
                raise NotFoundError("Blog category", data["category_id"])
            data["slug"] = await claim_slug(
                self.db, blog_post_crud, "Blog post", data.get("slug"), data["title"]
            )
            _apply_publication(data, None)

            row = await blog_post_crud.create(self.db, **data)
            await self.db.commit()
            logger.info(
                "Blog post created",
                extra={"post_id": str(row.id), "slug": row.slug, "published": row.published},
            )
            return blog_post_to_dict(row)
        except TourbookException:
            raise
        except Exception as e:
            logger.error(
                "Failed to create blog post",
                extra={"error": str(e), "title": data.get("title")},
            )
            raise

    async def update_post(self, post_id: UUID, updates: dict) -> dict:
        """
        Update a post.

        A changed slug records a redirect from the old one; toggling
        ``published`` stamps or clears ``published_at``.

        Raises:
            NotFoundError: If post or blog category not found
            SlugConflictError: If the new slug is taken
        """
        try:
            row = await blog_post_crud.get_by_id(self.db, post_id)
            if row is None:
                raise NotFoundError("Blog post", post_id)

            updates = dict(updates)
            if updates.get("category_id") is not None and not await blog_category_crud.exists(
                self.db, updates["category_id"]
            ):
                raise NotFoundError("Blog category", updates["category_id"])
            old_slug = row.slug
            if "slug" in updates:
                updates["slug"] = await claim_slug(
                    self.db,
                    blog_post_crud,
                    "Blog post",
                    updates["slug"],
                    updates.get("title") or row.title,
                    exclude_id=post_id,
                )
                if updates["slug"] != old_slug:
                    await record_slug_change(
                        self.db, ContentType.BLOG_POSTS.value, old_slug, updates["slug"]
                    )
            _apply_publication(updates, row.published_at)

            updated = await blog_post_crud.update_by_id(self.db, post_id, **updates)
            await self.db.commit()
            logger.info(
                "Blog post updated",
                extra={"post_id": str(post_id), "updates": list(updates.keys())},
            )
            return blog_post_to_dict(updated)
        except TourbookException:
            raise
        except Exception as e:
            logger.error(
                "Failed to update blog post",
                extra={"error": str(e), "post_id": str(post_id)},
            )
            raise

    async def delete_post(self, post_id: UUID) -> bool:
        """
        Delete a post (guide sections and items cascade).

        Raises:
            NotFoundError: If post not found
        """
        try:
            deleted = await blog_post_crud.delete_by_id(self.db, post_id)
            if not deleted:
                raise NotFoundError("Blog post", post_id)
            await self.db.commit()
            logger.info("Blog post deleted", extra={"post_id": str(post_id)})
            return True
        except TourbookException:
            raise
        except Exception as e:
            logger.error(
                "Failed to delete blog post",
                extra={"error": str(e), "post_id": str(post_id)},
            )
            raise

    async def toggle_post_published(self, post_id: UUID) -> dict:
        """Publish or unpublish a post."""
        row = await blog_post_crud.get_by_id(self.db, post_id)
        if row is None:
            raise NotFoundError("Blog post", post_id)
        return await self.update_post(post_id, {"published": not row.published})

    async def toggle_post_featured(self, post_id: UUID) -> dict:
        """Flip a post's featured flag."""
        row = await blog_post_crud.toggle_field(self.db, post_id, "featured")
        if row is None:
            raise NotFoundError("Blog post", post_id)
        await self.db.commit()
        return blog_post_to_dict(row)

    # Blog categories

    async def list_blog_categories(self) -> list[dict]:
        """Get all blog categories ordered by name."""
        return rows_to_dicts(await blog_category_crud.get_all(self.db))

    async def get_blog_category(self, category_id: UUID) -> dict:
        """Get blog category by ID."""
        row = await blog_category_crud.get_by_id(self.db, category_id)
        if row is None:
            raise NotFoundError("Blog category", category_id)
        return row_to_dict(row)

    async def create_blog_category(self, data: dict) -> dict:
        """
        Create a blog category, deriving the slug from the name when blank.

        Raises:
            SlugConflictError: If the slug is taken
        """
        try:
            data = dict(data)
            data["slug"] = await claim_slug(
                self.db, blog_category_crud, "Blog category", data.get("slug"), data["name"]
            )
            row = await blog_category_crud.create(self.db, **data)
            await self.db.commit()
            logger.info("Blog category created", extra={"blog_category_id": str(row.id)})
            return row_to_dict(row)
        except TourbookException:
            raise
        except Exception as e:
            logger.error(
                "Failed to create blog category",
                extra={"error": str(e), "category_name": data.get("name")},
            )
            raise

    async def update_blog_category(self, category_id: UUID, updates: dict) -> dict:
        """Update a blog category."""
        row = await blog_category_crud.get_by_id(self.db, category_id)
        if row is None:
            raise NotFoundError("Blog category", category_id)
        updates = dict(updates)
        if "slug" in updates:
            updates["slug"] = await claim_slug(
                self.db,
                blog_category_crud,
                "Blog category",
                updates["slug"],
                updates.get("name") or row.name,
                exclude_id=category_id,
            )
        updated = await blog_category_crud.update_by_id(self.db, category_id, **updates)
        await self.db.commit()
        return row_to_dict(updated)

    async def delete_blog_category(self, category_id: UUID) -> bool:
        """Delete a blog category (its posts keep a NULL category)."""
        deleted = await blog_category_crud.delete_by_id(self.db, category_id)
        if not deleted:
            raise NotFoundError("Blog category", category_id)
        await self.db.commit()
        logger.info("Blog category deleted", extra={"blog_category_id": str(category_id)})
        return True

    # Guide sections

    async def list_guide_sections(self, post_id: UUID) -> list[dict]:
        """
        Get every guide section of a post with its items.

        Raises:
            NotFoundError: If post not found
        """
        if not await blog_post_crud.exists(self.db, post_id):
            raise NotFoundError("Blog post", post_id)
        sections = await guide_section_crud.get_by_post(self.db, post_id)
        return [guide_section_to_dict(section) for section in sections]

    async def _section_dict(self, section_id: UUID) -> dict:
        section = await guide_section_crud.get_with_items(self.db, section_id)
        if section is None:
            raise NotFoundError("Guide section", section_id)
        return guide_section_to_dict(section)

    async def get_guide_section(self, section_id: UUID) -> dict:
        """Get a guide section with its items."""
        return await self._section_dict(section_id)

    async def create_guide_section(self, post_id: UUID, data: dict) -> dict:
        """
        Add a guide section to a post.

        Raises:
            NotFoundError: If post not found
        """
        try:
            if not await blog_post_crud.exists(self.db, post_id):
                raise NotFoundError("Blog post", post_id)
            section = await guide_section_crud.create(self.db, blog_post_id=post_id, **data)
            await self.db.commit()
            logger.info(
                "Guide section created",
                extra={"section_id": str(section.id), "post_id": str(post_id)},
            )
            return await self._section_dict(section.id)
        except TourbookException:
            raise
        except Exception as e:
            logger.error(
                "Failed to create guide section",
                extra={"error": str(e), "post_id": str(post_id)},
            )
            raise

    async def update_guide_section(self, section_id: UUID, updates: dict) -> dict:
        """Update a guide section."""
        updated = await guide_section_crud.update_by_id(self.db, section_id, **updates)
        if updated is None:
            raise NotFoundError("Guide section", section_id)
        await self.db.commit()
        return await self._section_dict(section_id)

    async def toggle_guide_section(self, section_id: UUID) -> dict:
        """Show or hide a guide section."""
        updated = await guide_section_crud.toggle_field(self.db, section_id, "enabled")
        if updated is None:
            raise NotFoundError("Guide section", section_id)
        await self.db.commit()
        return await self._section_dict(section_id)

    async def delete_guide_section(self, section_id: UUID) -> bool:
        """Delete a guide section (its items cascade)."""
        deleted = await guide_section_crud.delete_by_id(self.db, section_id)
        if not deleted:
            raise NotFoundError("Guide section", section_id)
        await self.db.commit()
        logger.info("Guide section deleted", extra={"section_id": str(section_id)})
        return True

    # Guide items

    async def create_guide_item(self, section_id: UUID, data: dict) -> dict:
        """
        Add an item to a guide section.

        Raises:
            NotFoundError: If section not found
        """
        if not await guide_section_crud.exists(self.db, section_id):
            raise NotFoundError("Guide section", section_id)
        item = await guide_item_crud.create(self.db, section_id=section_id, **data)
        await self.db.commit()
        return row_to_dict(item)

    async def update_guide_item(self, item_id: UUID, updates: dict) -> dict:
        """Update a guide item."""
        item = await guide_item_crud.update_by_id(self.db, item_id, **updates)
        if item is None:
            raise NotFoundError("Guide item", item_id)
        await self.db.commit()
        return row_to_dict(item)

    async def delete_guide_item(self, item_id: UUID) -> bool:
        """Delete a guide item."""
        deleted = await guide_item_crud.delete_by_id(self.db, item_id)
        if not deleted:
            raise NotFoundError("Guide item", item_id)
        await self.db.commit()
        return True
