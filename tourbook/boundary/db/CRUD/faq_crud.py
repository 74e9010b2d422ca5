"""
FAQ CRUD operations.

Dependencies: sqlalchemy, tourbook.boundary.db.models
System role: FAQ persistence operations
"""

from typing import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from tourbook.boundary.db.CRUD.base_crud import BaseCRUD
from tourbook.boundary.db.models.faq_model import FAQModel


class FAQCRUD(BaseCRUD[FAQModel]):
    """CRUD operations for FAQModel, ordered by sort_order."""

    default_order = (FAQModel.sort_order, FAQModel.created_at)

    def __init__(self) -> None:
        """Initialize FAQCRUD with FAQModel."""
        super().__init__(FAQModel)

    async def get_enabled(self, session: AsyncSession) -> Sequence[FAQModel]:
        """Enabled FAQs by sort_order."""
        stmt = select(FAQModel).where(FAQModel.enabled.is_(True)).order_by(*self.default_order)
        result = await session.execute(stmt)
        return result.scalars().all()


faq_crud = FAQCRUD()
