"""
FAQ ORM model.

Dependencies: sqlalchemy, tourbook.boundary.db.base
System role: Homepage FAQ persistence
"""

from sqlalchemy import Boolean, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from tourbook.boundary.db.base import Base, UUIDMixin, TimestampMixin


class FAQModel(Base, UUIDMixin, TimestampMixin):
    """Question/answer pair shown in the homepage FAQ block, by ``sort_order``."""

    __tablename__ = "faqs"

    question: Mapped[str] = mapped_column(Text, nullable=False)
    answer: Mapped[str] = mapped_column(Text, nullable=False)
    sort_order: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    enabled: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
