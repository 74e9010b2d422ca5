"""
SQLAlchemy declarative base and common mixins.

Provides base class for all ORM models and reusable mixins
for common fields (timestamps, UUIDs, SEO columns).

Dependencies: sqlalchemy
System role: Foundation for all database models
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import Boolean, DateTime, String, Text, Uuid
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """
    SQLAlchemy declarative base for ORM model registration.

    All database models inherit from this class to ensure they're
    registered with the metadata and included in table creation.
    """

    pass


class UUIDMixin:
    """
    Mixin providing UUID primary key to all models.

    Generates UUID v4 automatically on row creation. PostgreSQL stores
    as native UUID type; other backends fall back to CHAR(32).

    Attributes:
        id: UUID v4 primary key, auto-generated on insert
    """

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
        nullable=False,
    )


class TimestampMixin:
    """
    Mixin providing automatic timestamp tracking to all models.

    created_at is set once on row creation and never changes.
    updated_at is refreshed on every update via onupdate hook.
    Both use UTC timezone for consistency across deployments.

    Attributes:
        created_at: Row creation timestamp (UTC, immutable)
        updated_at: Last modification timestamp (UTC, auto-updated)
    """

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
        nullable=False,
    )


class SeoMixin:
    """
    Editable search/social metadata for pages with their own URL.

    Every column is optional. NULL means "derive from the content",
    see tourbook.core.seo for the fallback chains.
    """

    seo_title: Mapped[str | None] = mapped_column(String(255), nullable=True)
    seo_description: Mapped[str | None] = mapped_column(String(500), nullable=True)
    seo_keywords: Mapped[str | None] = mapped_column(String(500), nullable=True)
    canonical_url: Mapped[str | None] = mapped_column(String(1024), nullable=True)
    robots_index: Mapped[bool | None] = mapped_column(Boolean, nullable=True)
    robots_follow: Mapped[bool | None] = mapped_column(Boolean, nullable=True)
    robots_nosnippet: Mapped[bool | None] = mapped_column(Boolean, nullable=True)
    og_title: Mapped[str | None] = mapped_column(String(255), nullable=True)
    og_description: Mapped[str | None] = mapped_column(String(500), nullable=True)
    og_image: Mapped[str | None] = mapped_column(String(1024), nullable=True)
    og_image_alt: Mapped[str | None] = mapped_column(String(255), nullable=True)
    twitter_title: Mapped[str | None] = mapped_column(String(255), nullable=True)
    twitter_description: Mapped[str | None] = mapped_column(String(500), nullable=True)
    twitter_image: Mapped[str | None] = mapped_column(String(1024), nullable=True)
    twitter_image_alt: Mapped[str | None] = mapped_column(String(255), nullable=True)
    structured_data_type: Mapped[str | None] = mapped_column(String(64), nullable=True)
    focus_keyword: Mapped[str | None] = mapped_column(String(255), nullable=True)
    custom_json_ld: Mapped[str | None] = mapped_column(Text, nullable=True)
