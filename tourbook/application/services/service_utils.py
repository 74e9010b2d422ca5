"""
Shared helpers for service orchestrators.

Row serialization into the plain dicts services return, slug ownership
checks and the automatic redirect written when a slug changes.

Dependencies: sqlalchemy, tourbook.boundary.db.CRUD, tourbook.core
System role: Common service plumbing
"""

import logging
from typing import Any
from uuid import UUID

from sqlalchemy import inspect
from sqlalchemy.ext.asyncio import AsyncSession

from tourbook.boundary.db.CRUD.base_crud import SlugCRUD
from tourbook.boundary.db.CRUD.redirect_crud import slug_redirect_crud
from tourbook.core.exceptions import SlugConflictError
from tourbook.core.slugs import resolve_slug

logger = logging.getLogger(__name__)


def row_to_dict(row: Any) -> dict[str, Any]:
    """
    Copy every mapped column of an ORM row into a dict.

    Relationships are not followed; callers add the related names they need.
    """
    return {attr.key: getattr(row, attr.key) for attr in inspect(row).mapper.column_attrs}


def rows_to_dicts(rows) -> list[dict[str, Any]]:
    return [row_to_dict(row) for row in rows]


def name_of(related: Any, attr: str = "name") -> str | None:
    """Attribute of an optional related row (None when the link is empty)."""
    return getattr(related, attr) if related is not None else None


async def claim_slug(
    db: AsyncSession,
    crud: SlugCRUD,
    resource: str,
    slug: str | None,
    source: str,
    exclude_id: UUID | None = None,
) -> str:
    """
    Normalize a requested slug and make sure no other row owns it.

    Args:
        db: Async database session
        crud: CRUD for the table the slug lives in
        resource: Human resource name for the error message
        slug: Slug from the request (blank means derive from ``source``)
        source: Name or title to derive the slug from
        exclude_id: Row being edited

    Returns:
        str: The slug to store

    Raises:
        SlugConflictError: If another row already uses the slug
        ValidationError: If no slug can be derived
    """
    final = resolve_slug(slug, source)
    if await crud.slug_taken(db, final, exclude_id=exclude_id):
        raise SlugConflictError(resource, final)
    return final


async def record_slug_change(
    db: AsyncSession,
    content_type: str,
    old_slug: str,
    new_slug: str,
) -> None:
    """Remember that ``old_slug`` moved so old links keep working."""
    if old_slug == new_slug:
        return
    await slug_redirect_crud.record_move(db, content_type, old_slug, new_slug)
    logger.info(
        "Slug redirect recorded",
        extra={"content_type": content_type, "old_slug": old_slug, "new_slug": new_slug},
    )
