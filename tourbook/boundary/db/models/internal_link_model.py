"""
Internal link ORM models.

Curated link blocks ("Popular tours", "Plan your trip") shown on the
homepage or on a specific tour or guide post.

Dependencies: sqlalchemy, tourbook.boundary.db.base
System role: Internal linking persistence
"""

import enum
from uuid import UUID

from sqlalchemy import Boolean, ForeignKey, Integer, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from tourbook.boundary.db.base import Base, UUIDMixin, TimestampMixin


class LinkContextType(str, enum.Enum):
    """
    Where a link section is displayed.

    HOMEPAGE: Homepage footer block (no context_id)
    EXPERIENCE: A single tour page (context_id = experience id)
    BLOG_POST: A single guide post (context_id = post id)
    """

    HOMEPAGE = "homepage"
    EXPERIENCE = "experience"
    BLOG_POST = "blog_post"


class InternalLinkSectionModel(Base, UUIDMixin, TimestampMixin):
    """
    Titled group of internal links.

    ``context_id`` is not a foreign key: it points at an experience or a
    blog post depending on ``context_type``.
    """

    __tablename__ = "internal_links_sections"

    section_title: Mapped[str] = mapped_column(String(255), nullable=False)
    section_type: Mapped[str] = mapped_column(String(50), nullable=False, default="general")
    sort_order: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    enabled: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    context_type: Mapped[str] = mapped_column(
        String(50), nullable=False, default=LinkContextType.HOMEPAGE.value, index=True
    )
    context_id: Mapped[UUID | None] = mapped_column(Uuid(as_uuid=True), nullable=True, index=True)

    # Relationships
    links = relationship(
        "InternalLinkModel",
        back_populates="section",
        passive_deletes=True,
        order_by="InternalLinkModel.display_order",
    )


class InternalLinkModel(Base, UUIDMixin, TimestampMixin):
    """Single link inside a section (ON DELETE CASCADE with the section)."""

    __tablename__ = "internal_links"

    section_id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("internal_links_sections.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    url: Mapped[str] = mapped_column(String(1024), nullable=False)
    display_order: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    enabled: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    # Relationships
    section = relationship("InternalLinkSectionModel", back_populates="links")
