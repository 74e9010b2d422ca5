"""
Slug redirect service orchestrator.

Manages stored redirects and answers "where did this path go?" for the
storefront routing layer.

Dependencies: tourbook.boundary.db.CRUD, tourbook.core.redirects
System role: Moved-content use case orchestration
"""

import logging
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from tourbook.application.services.service_utils import row_to_dict, rows_to_dicts
from tourbook.boundary.db.CRUD.redirect_crud import slug_redirect_crud
from tourbook.core.exceptions import (
    NotFoundError,
    SlugConflictError,
    TourbookException,
    ValidationError,
)
from tourbook.core.redirects import RedirectRule, build_rules, resolve
from tourbook.core.slugs import generate_slug

logger = logging.getLogger(__name__)


def _rule_to_dict(rule: RedirectRule) -> dict:
    return {
        "source": rule.source,
        "destination": rule.destination,
        "permanent": rule.permanent,
        "status_code": rule.status_code,
    }


class RedirectService:
    """Slug redirect service orchestrator."""

    def __init__(self, db: AsyncSession) -> None:
        """
        Initialize redirect service with async database session.

        Args:
            db: Async SQLAlchemy session
        """
        self.db = db

    def _normalize(self, data: dict) -> dict:
        data = dict(data)
        for field in ("old_slug", "new_slug"):
            if data.get(field) is not None:
                data[field] = generate_slug(data[field])
        if data.get("old_slug") and data.get("old_slug") == data.get("new_slug"):
            raise ValidationError("A slug cannot redirect to itself", field="new_slug")
        return data

    async def list_redirects(self) -> list[dict]:
        """Get every stored redirect, newest first."""
        return rows_to_dicts(await slug_redirect_crud.get_all(self.db))

    async def get_redirect(self, redirect_id: UUID) -> dict:
        row = await slug_redirect_crud.get_by_id(self.db, redirect_id)
        if row is None:
            raise NotFoundError("Redirect", redirect_id)
        return row_to_dict(row)

    async def create_redirect(self, data: dict) -> dict:
        """
        Store a redirect by hand.

        Raises:
            ValidationError: If the slugs are blank or equal
            SlugConflictError: If the old slug already redirects within the content type
        """
        try:
            data = self._normalize(data)
            if await slug_redirect_crud.get_by_old_slug(self.db, data["content_type"], data["old_slug"]):
                raise SlugConflictError("Redirect", data["old_slug"])
            row = await slug_redirect_crud.create(self.db, **data)
            await self.db.commit()
            logger.info(
                "Redirect created",
                extra={
                    "content_type": row.content_type,
                    "old_slug": row.old_slug,
                    "new_slug": row.new_slug,
                },
            )
            return row_to_dict(row)
        except TourbookException:
            raise
        except Exception as e:
            logger.error("Failed to create redirect", extra={"error": str(e)})
            raise

    async def update_redirect(self, redirect_id: UUID, updates: dict) -> dict:
        """
        Update a redirect.

        Raises:
            NotFoundError: If redirect not found
            ValidationError: If the result would point a slug at itself
        """
        try:
            row = await slug_redirect_crud.get_by_id(self.db, redirect_id)
            if row is None:
                raise NotFoundError("Redirect", redirect_id)
            updates = self._normalize(updates)
            old_slug = updates.get("old_slug") or row.old_slug
            new_slug = updates.get("new_slug") or row.new_slug
            if old_slug == new_slug:
                raise ValidationError("A slug cannot redirect to itself", field="new_slug")
            content_type = updates.get("content_type") or row.content_type
            clash = await slug_redirect_crud.get_by_old_slug(self.db, content_type, old_slug)
            if clash is not None and clash.id != redirect_id:
                raise SlugConflictError("Redirect", old_slug)

            updated = await slug_redirect_crud.update_by_id(self.db, redirect_id, **updates)
            await self.db.commit()
            return row_to_dict(updated)
        except TourbookException:
            raise
        except Exception as e:
            logger.error(
                "Failed to update redirect",
                extra={"error": str(e), "redirect_id": str(redirect_id)},
            )
            raise

    async def delete_redirect(self, redirect_id: UUID) -> bool:
        deleted = await slug_redirect_crud.delete_by_id(self.db, redirect_id)
        if not deleted:
            raise NotFoundError("Redirect", redirect_id)
        await self.db.commit()
        logger.info("Redirect deleted", extra={"redirect_id": str(redirect_id)})
        return True

    async def get_rules(self) -> list[dict]:
        """Built-in rules followed by one path rule per stored redirect."""
        rows = await slug_redirect_crud.get_all(self.db)
        return [_rule_to_dict(rule) for rule in build_rules(rows)]

    async def resolve_path(self, path: str) -> dict:
        """
        Resolve a storefront path against the current rules.

        Args:
            path: Request path, e.g. ``/tour/old-slug``

        Returns:
            dict: ResolveResponse fields; ``matched`` is False when the path stays put
        """
        rows = await slug_redirect_crud.get_all(self.db)
        rule = resolve(path, build_rules(rows))
        if rule is None:
            return {"path": path, "matched": False}
        return {
            "path": path,
            "matched": True,
            "destination": rule.destination,
            "permanent": rule.permanent,
            "status_code": rule.status_code,
        }
