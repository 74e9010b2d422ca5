"""
Homepage content ORM models.

Dependencies: sqlalchemy, tourbook.boundary.db.base
System role: Homepage settings, trust statistics and testimonials persistence
"""

from sqlalchemy import Boolean, Float, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from tourbook.boundary.db.base import Base, UUIDMixin, TimestampMixin


class HomepageSettingModel(Base, UUIDMixin, TimestampMixin):
    """
    Editable copy for one homepage block.

    Rows are keyed by ``section_name`` (``hero_section``, ``faq_section``).

    Attributes:
        section_name: Block identifier, unique
        title: Heading
        subtitle: Secondary heading
        description: Body text
        button_text: Call-to-action label
        button_link: Call-to-action target path
        background_image: Background image URL
        enabled: Falls back to the built-in copy when false
    """

    __tablename__ = "homepage_settings"

    section_name: Mapped[str] = mapped_column(String(100), nullable=False, unique=True, index=True)
    title: Mapped[str | None] = mapped_column(String(255), nullable=True, default=None)
    subtitle: Mapped[str | None] = mapped_column(String(255), nullable=True, default=None)
    description: Mapped[str | None] = mapped_column(Text, nullable=True, default=None)
    button_text: Mapped[str | None] = mapped_column(String(100), nullable=True, default=None)
    button_link: Mapped[str | None] = mapped_column(String(1024), nullable=True, default=None)
    background_image: Mapped[str | None] = mapped_column(String(1024), nullable=True, default=None)
    enabled: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)


class HomepageStatModel(Base, UUIDMixin, TimestampMixin):
    """Trust statistic ("Happy Customers", 15000)."""

    __tablename__ = "homepage_stats"

    label: Mapped[str] = mapped_column(String(255), nullable=False)
    value: Mapped[float] = mapped_column(Float, nullable=False, default=0)
    sort_order: Mapped[int] = mapped_column(Integer, nullable=False, default=0)


class TestimonialModel(Base, UUIDMixin, TimestampMixin):
    """
    Customer quote for the homepage.

    Attributes:
        customer_name: Quoted customer
        customer_location: Where they are from
        customer_avatar: Avatar URL
        rating: Stars out of 5
        review_text: Quote
        experience_name: Tour the quote refers to
        featured: Shown on the homepage
        sort_order: Position
    """

    __tablename__ = "testimonials"

    customer_name: Mapped[str] = mapped_column(String(255), nullable=False)
    customer_location: Mapped[str | None] = mapped_column(String(255), nullable=True, default=None)
    customer_avatar: Mapped[str | None] = mapped_column(String(1024), nullable=True, default=None)
    rating: Mapped[int] = mapped_column(Integer, nullable=False, default=5)
    review_text: Mapped[str] = mapped_column(Text, nullable=False)
    experience_name: Mapped[str | None] = mapped_column(String(255), nullable=True, default=None)
    featured: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    sort_order: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
