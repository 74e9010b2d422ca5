"""
FAQ service orchestrator.

Dependencies: tourbook.boundary.db.CRUD
System role: FAQ use case orchestration
"""

import logging
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from tourbook.application.services.service_utils import row_to_dict, rows_to_dicts
from tourbook.boundary.db.CRUD.faq_crud import faq_crud
from tourbook.core.exceptions import NotFoundError, TourbookException

logger = logging.getLogger(__name__)


class FAQService:
    """FAQ service orchestrator."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def list_faqs(self) -> list[dict]:
        """Get every FAQ by sort_order, enabled or not."""
        return rows_to_dicts(await faq_crud.get_all(self.db))

    async def get_faq(self, faq_id: UUID) -> dict:
        """
        Get FAQ by ID.

        Raises:
            NotFoundError: If FAQ not found
        """
        row = await faq_crud.get_by_id(self.db, faq_id)
        if row is None:
            raise NotFoundError("FAQ", faq_id)
        return row_to_dict(row)

    async def create_faq(self, data: dict) -> dict:
        """Create a FAQ."""
        try:
            row = await faq_crud.create(self.db, **data)
            await self.db.commit()
            logger.info("FAQ created", extra={"faq_id": str(row.id)})
            return row_to_dict(row)
        except Exception as e:
            logger.error("Failed to create FAQ", extra={"error": str(e)})
            raise

    async def update_faq(self, faq_id: UUID, updates: dict) -> dict:
        """
        Update a FAQ.

        Raises:
            NotFoundError: If FAQ not found
        """
        try:
            row = await faq_crud.update_by_id(self.db, faq_id, **updates)
            if row is None:
                raise NotFoundError("FAQ", faq_id)
            await self.db.commit()
            return row_to_dict(row)
        except TourbookException:
            raise
        except Exception as e:
            logger.error("Failed to update FAQ", extra={"error": str(e), "faq_id": str(faq_id)})
            raise

    async def delete_faq(self, faq_id: UUID) -> bool:
        deleted = await faq_crud.delete_by_id(self.db, faq_id)
        if not deleted:
            raise NotFoundError("FAQ", faq_id)
        await self.db.commit()
        logger.info("FAQ deleted", extra={"faq_id": str(faq_id)})
        return True

    async def toggle_faq(self, faq_id: UUID) -> dict:
        """Show or hide a FAQ on the homepage."""
        row = await faq_crud.toggle_field(self.db, faq_id, "enabled")
        if row is None:
            raise NotFoundError("FAQ", faq_id)
        await self.db.commit()
        return row_to_dict(row)
