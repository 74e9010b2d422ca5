"""
City ORM model.

Dependencies: sqlalchemy, tourbook.boundary.db.base
System role: Destination persistence
"""

from sqlalchemy import Boolean, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from tourbook.boundary.db.base import Base, UUIDMixin, TimestampMixin


class CityModel(Base, UUIDMixin, TimestampMixin):
    """
    Destination a tour departs from or visits.

    Attributes:
        name: City name
        slug: URL slug, unique across cities
        country: Country name shown beside the city
        description: Destination page intro
        image_url: Card image
        featured: Listed first on the destinations page
    """

    __tablename__ = "cities"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    slug: Mapped[str] = mapped_column(String(255), nullable=False, unique=True, index=True)
    country: Mapped[str | None] = mapped_column(String(255), nullable=True, default=None)
    description: Mapped[str | None] = mapped_column(Text, nullable=True, default=None)
    image_url: Mapped[str | None] = mapped_column(String(1024), nullable=True, default=None)
    featured: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
