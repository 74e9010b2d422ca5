"""
Cart item ORM model.

Dependencies: sqlalchemy, tourbook.boundary.db.base
System role: Visitor cart persistence
"""

from datetime import date
from uuid import UUID

from sqlalchemy import Date, ForeignKey, Integer, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from tourbook.boundary.db.base import Base, UUIDMixin, TimestampMixin


class CartItemModel(Base, UUIDMixin, TimestampMixin):
    """
    Tour placed in a visitor's cart.

    Attributes:
        user_id: Visitor identity from the external auth provider
        experience_id: Tour (ON DELETE CASCADE)
        quantity: Number of tickets, at least 1
        selected_date: Requested tour date

    Relationships:
        experience: Many-to-one ExperienceModel, loaded with the row
    """

    __tablename__ = "cart_items"

    user_id: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    experience_id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("experiences.id", ondelete="CASCADE"),
        nullable=False,
    )
    quantity: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    selected_date: Mapped[date | None] = mapped_column(Date, nullable=True, default=None)

    # Relationships
    experience = relationship("ExperienceModel", lazy="selectin")
