"""
Experience (tour) ORM model.

A bookable product row: copy, pricing, logistics, media, listing flags and
the editable SEO columns.

Dependencies: sqlalchemy, tourbook.boundary.db.base
System role: Tour catalog persistence
"""

from uuid import UUID

from sqlalchemy import JSON, Boolean, Float, ForeignKey, Integer, Numeric, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from tourbook.boundary.db.base import Base, SeoMixin, TimestampMixin, UUIDMixin
from tourbook.core.toggles import ExperienceStatus


class ExperienceModel(Base, UUIDMixin, TimestampMixin, SeoMixin):
    """
    Tour listed on the storefront.

    Only rows with status ``active`` are shown to visitors. City, category
    and subcategory links are nulled out when the referenced row is deleted.

    Attributes:
        title: Display title
        slug: URL slug, unique across tours
        description: Long description (paragraphs separated by blank lines)
        short_description: Card/summary text
        price: Current price
        original_price: Struck-through price when discounted
        currency: ISO currency code
        city_id: Destination (ON DELETE SET NULL)
        category_id: Category (ON DELETE SET NULL)
        subcategory_id: Subcategory (ON DELETE SET NULL)
        duration: Human duration ("4 hours")
        duration_hours: Numeric duration for filtering
        max_group_size: Group cap
        min_age: Minimum participant age
        meeting_point: Where the tour starts
        cancellation_policy: Free-text policy
        languages: JSON list of guide languages
        highlights: JSON list of selling points
        main_image_url: Hero image
        gallery_images: JSON list of image URLs
        featured: Promoted on the homepage
        bestseller: Badge flag
        status: active / inactive / draft
        rating: Average rating out of 5
        review_count: Number of reviews behind ``rating``
        booking_count: Number of bookings
        sort_order: Manual ordering hint
        availability_url: External booking widget URL

    Relationships:
        city, category, subcategory: Many-to-one, loaded with the row
    """

    __tablename__ = "experiences"

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    slug: Mapped[str] = mapped_column(String(255), nullable=False, unique=True, index=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True, default=None)
    short_description: Mapped[str | None] = mapped_column(Text, nullable=True, default=None)

    price: Mapped[float] = mapped_column(Numeric(10, 2, asdecimal=False), nullable=False, default=0)
    original_price: Mapped[float | None] = mapped_column(
        Numeric(10, 2, asdecimal=False), nullable=True, default=None
    )
    currency: Mapped[str] = mapped_column(String(3), nullable=False, default="USD")

    city_id: Mapped[UUID | None] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("cities.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    category_id: Mapped[UUID | None] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("categories.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    subcategory_id: Mapped[UUID | None] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("subcategories.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )

    duration: Mapped[str | None] = mapped_column(String(100), nullable=True, default=None)
    duration_hours: Mapped[float | None] = mapped_column(Float, nullable=True, default=None)
    max_group_size: Mapped[int | None] = mapped_column(Integer, nullable=True, default=None)
    min_age: Mapped[int | None] = mapped_column(Integer, nullable=True, default=None)
    meeting_point: Mapped[str | None] = mapped_column(Text, nullable=True, default=None)
    cancellation_policy: Mapped[str | None] = mapped_column(Text, nullable=True, default=None)
    languages: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    highlights: Mapped[list] = mapped_column(JSON, nullable=False, default=list)

    main_image_url: Mapped[str | None] = mapped_column(String(1024), nullable=True, default=None)
    gallery_images: Mapped[list] = mapped_column(JSON, nullable=False, default=list)

    featured: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    bestseller: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    status: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default=ExperienceStatus.ACTIVE.value,
        index=True,
    )
    rating: Mapped[float | None] = mapped_column(Float, nullable=True, default=None)
    review_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    booking_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    sort_order: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    availability_url: Mapped[str | None] = mapped_column(String(1024), nullable=True, default=None)

    # Relationships
    city = relationship("CityModel", lazy="selectin")
    category = relationship("CategoryModel", lazy="selectin")
    subcategory = relationship("SubcategoryModel", lazy="selectin")
