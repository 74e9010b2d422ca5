"""
City CRUD operations.

Dependencies: sqlalchemy, tourbook.boundary.db.models
System role: Destination persistence operations
"""

from typing import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from tourbook.boundary.db.CRUD.base_crud import SlugCRUD
from tourbook.boundary.db.models.city_model import CityModel


class CityCRUD(SlugCRUD[CityModel]):
    """CRUD operations for CityModel, listed by name."""

    default_order = (CityModel.name,)

    def __init__(self) -> None:
        """Initialize CityCRUD with CityModel."""
        super().__init__(CityModel)

    async def get_destinations(self, session: AsyncSession) -> Sequence[CityModel]:
        """All cities, featured first, then alphabetical."""
        stmt = select(CityModel).order_by(CityModel.featured.desc(), CityModel.name)
        result = await session.execute(stmt)
        return result.scalars().all()

    async def search(self, session: AsyncSession, query: str) -> Sequence[CityModel]:
        """Cities whose name or country contains ``query`` (case-insensitive)."""
        pattern = f"%{query}%"
        stmt = (
            select(CityModel)
            .where(CityModel.name.ilike(pattern) | CityModel.country.ilike(pattern))
            .order_by(CityModel.featured.desc(), CityModel.name)
        )
        result = await session.execute(stmt)
        return result.scalars().all()


city_crud = CityCRUD()
