"""
Category and subcategory ORM models.

Categories group tours on the storefront ("Cruises", "Scenic Flights").
Subcategories refine a category and are deleted with it.

Dependencies: sqlalchemy, tourbook.boundary.db.base
System role: Tour taxonomy persistence
"""

from uuid import UUID

from sqlalchemy import Boolean, ForeignKey, Integer, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from tourbook.boundary.db.base import Base, UUIDMixin, TimestampMixin


class CategoryModel(Base, UUIDMixin, TimestampMixin):
    """
    Top-level tour category.

    Attributes:
        id: UUID primary key (auto-generated)
        name: Display name
        slug: URL slug, unique across categories
        description: Optional intro text for the category page
        image_url: Card image
        featured: Shown on the homepage when true
        sort_order: Position in homepage and navigation lists
        experience_count: Denormalized tour count shown on cards
        created_at: Row creation timestamp (UTC)
        updated_at: Last modification timestamp (UTC)

    Relationships:
        subcategories: One-to-many with SubcategoryModel (ON DELETE CASCADE)
    """

    __tablename__ = "categories"

    name: Mapped[str] = mapped_column(String(255), nullable=False, doc="Category name")
    slug: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
        index=True,
        doc="URL slug",
    )
    description: Mapped[str | None] = mapped_column(Text, nullable=True, default=None)
    image_url: Mapped[str | None] = mapped_column(String(1024), nullable=True, default=None)
    featured: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    sort_order: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    experience_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    # Relationships
    subcategories = relationship(
        "SubcategoryModel",
        back_populates="category",
        passive_deletes=True,
        order_by="SubcategoryModel.sort_order",
    )


class SubcategoryModel(Base, UUIDMixin, TimestampMixin):
    """
    Subcategory nested under a category.

    Attributes:
        category_id: Parent category (ON DELETE CASCADE)
        name: Display name
        slug: URL slug, unique across subcategories
        description: Optional intro text
        image_url: Card image
        sort_order: Position within the parent category
    """

    __tablename__ = "subcategories"

    category_id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("categories.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        doc="Parent category",
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    slug: Mapped[str] = mapped_column(String(255), nullable=False, unique=True, index=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True, default=None)
    image_url: Mapped[str | None] = mapped_column(String(1024), nullable=True, default=None)
    sort_order: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    # Relationships
    category = relationship("CategoryModel", back_populates="subcategories", lazy="selectin")
