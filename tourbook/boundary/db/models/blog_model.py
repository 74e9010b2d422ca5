"""
Travel guide (blog) ORM models.

Posts belong to an optional blog category and carry nested guide sections,
each holding recommendation items. Sections and items go away with their
post.

Dependencies: sqlalchemy, tourbook.boundary.db.base
System role: Travel guide content persistence
"""

from datetime import datetime
from uuid import UUID

from sqlalchemy import JSON, Boolean, DateTime, ForeignKey, Integer, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from tourbook.boundary.db.base import Base, SeoMixin, TimestampMixin, UUIDMixin
from tourbook.core.guides import SectionType


class BlogCategoryModel(Base, UUIDMixin, TimestampMixin):
    """Grouping for guide posts ("Planning", "Wildlife")."""

    __tablename__ = "blog_categories"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    slug: Mapped[str] = mapped_column(String(255), nullable=False, unique=True, index=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True, default=None)


class BlogPostModel(Base, UUIDMixin, TimestampMixin, SeoMixin):
    """
    Travel guide article.

    Attributes:
        title: Headline
        slug: URL slug, unique across posts
        excerpt: Listing summary
        content: Body text, paragraphs separated by blank lines
        featured_image: Hero image URL
        category_id: Blog category (ON DELETE SET NULL)
        featured: Pinned above the regular listing
        published: Visible on the storefront
        published_at: Set when the post first goes live
        read_time_minutes: Estimated reading time
        code_snippets: JSON list of {language, code, title}

    Relationships:
        category: Many-to-one BlogCategoryModel, loaded with the row
        guide_sections: One-to-many GuideSectionModel (ON DELETE CASCADE),
            load explicitly with selectinload
    """

    __tablename__ = "blog_posts"

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    slug: Mapped[str] = mapped_column(String(255), nullable=False, unique=True, index=True)
    excerpt: Mapped[str | None] = mapped_column(Text, nullable=True, default=None)
    content: Mapped[str | None] = mapped_column(Text, nullable=True, default=None)
    featured_image: Mapped[str | None] = mapped_column(String(1024), nullable=True, default=None)
    category_id: Mapped[UUID | None] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("blog_categories.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    featured: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    published: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False, index=True)
    published_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True, default=None
    )
    read_time_minutes: Mapped[int] = mapped_column(Integer, nullable=False, default=5)
    code_snippets: Mapped[list] = mapped_column(JSON, nullable=False, default=list)

    # Relationships
    category = relationship("BlogCategoryModel", lazy="selectin")
    guide_sections = relationship(
        "GuideSectionModel",
        back_populates="blog_post",
        passive_deletes=True,
        order_by="GuideSectionModel.sort_order",
    )


class GuideSectionModel(Base, UUIDMixin, TimestampMixin):
    """
    Guide section attached to a post ("What to Do", "What to Carry").

    Attributes:
        blog_post_id: Owning post (ON DELETE CASCADE)
        section_title: Heading
        section_type: what_to_do / what_not_to_do / what_to_carry / custom
        content: Optional intro text
        enabled: Hidden from the storefront when false
        sort_order: Position within the post
    """

    __tablename__ = "blog_guide_sections"

    blog_post_id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("blog_posts.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    section_title: Mapped[str] = mapped_column(String(255), nullable=False)
    section_type: Mapped[str] = mapped_column(
        String(50), nullable=False, default=SectionType.CUSTOM.value
    )
    content: Mapped[str | None] = mapped_column(Text, nullable=True, default=None)
    enabled: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    sort_order: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    # Relationships
    blog_post = relationship("BlogPostModel", back_populates="guide_sections")
    items = relationship(
        "GuideItemModel",
        back_populates="section",
        passive_deletes=True,
        order_by="GuideItemModel.sort_order",
    )


class GuideItemModel(Base, UUIDMixin, TimestampMixin):
    """
    Single recommendation inside a guide section.

    Attributes:
        section_id: Owning section (ON DELETE CASCADE)
        title: Item heading
        description: Detail text
        icon: Icon name for the storefront
        importance: essential / recommended / optional
        category: Free-form grouping label
        sort_order: Stored position (ties within an importance level)
    """

    __tablename__ = "blog_guide_items"

    section_id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("blog_guide_sections.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True, default=None)
    icon: Mapped[str | None] = mapped_column(String(100), nullable=True, default=None)
    importance: Mapped[str | None] = mapped_column(String(20), nullable=True, default=None)
    category: Mapped[str | None] = mapped_column(String(100), nullable=True, default=None)
    sort_order: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    # Relationships
    section = relationship("GuideSectionModel", back_populates="items")
