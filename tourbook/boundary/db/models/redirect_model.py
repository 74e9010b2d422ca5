"""
Slug redirect ORM model.

Dependencies: sqlalchemy, tourbook.boundary.db.base
System role: Moved-content URL persistence
"""

from sqlalchemy import Boolean, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from tourbook.boundary.db.base import Base, UUIDMixin, TimestampMixin


class SlugRedirectModel(Base, UUIDMixin, TimestampMixin):
    """
    Old slug -> new slug within one content type.

    Attributes:
        old_slug: Slug that no longer resolves
        new_slug: Slug to send visitors to
        content_type: experiences / categories / blog_posts
        permanent: 308 when true, 307 otherwise

    Constraints:
        (content_type, old_slug) is unique
    """

    __tablename__ = "slug_redirects"
    __table_args__ = (
        UniqueConstraint("content_type", "old_slug", name="uq_slug_redirects_type_old_slug"),
    )

    old_slug: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    new_slug: Mapped[str] = mapped_column(String(255), nullable=False)
    content_type: Mapped[str] = mapped_column(String(50), nullable=False)
    permanent: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
