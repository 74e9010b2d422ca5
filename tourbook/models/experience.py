"""
Experience (tour) schemas.

Request/response schemas for the admin tour editor and the storefront
tour cards.

Dependencies: pydantic, tourbook.core.slugs
System role: Tour API contracts
"""

import uuid
from typing import Literal

from pydantic import BaseModel, Field, field_validator

from tourbook.core.slugs import split_languages
from tourbook.models.common import RowResponse
from tourbook.models.seo import SeoFieldsMixin

ExperienceStatusLiteral = Literal["active", "inactive", "draft"]


class _LanguagesMixin(BaseModel):
    @field_validator("languages", mode="before", check_fields=False)
    @classmethod
    def _split_languages(cls, value):
        """Accept ``"English, German"`` as well as a list."""
        if value is None:
            return value
        return split_languages(value)


class CreateExperienceRequest(SeoFieldsMixin, _LanguagesMixin):
    """
    Request schema for creating a tour.

    A blank slug is derived from the title and a blank ``seo_title``
    defaults to the title.
    """

    title: str = Field(..., min_length=1, max_length=255, description="Tour title")
    slug: str | None = Field(None, max_length=255)
    description: str | None = None
    short_description: str | None = None
    price: float = Field(0, ge=0)
    original_price: float | None = Field(None, ge=0)
    currency: str = Field("USD", min_length=3, max_length=3)
    city_id: uuid.UUID | None = None
    category_id: uuid.UUID | None = None
    subcategory_id: uuid.UUID | None = None
    duration: str | None = Field(None, max_length=100)
    duration_hours: float | None = Field(None, ge=0)
    max_group_size: int | None = Field(None, ge=1)
    min_age: int | None = Field(None, ge=0)
    meeting_point: str | None = None
    cancellation_policy: str | None = None
    languages: list[str] = Field(default_factory=list, description="List or comma-separated text")
    highlights: list[str] = Field(default_factory=list)
    main_image_url: str | None = Field(None, max_length=1024)
    gallery_images: list[str] = Field(default_factory=list)
    featured: bool = False
    bestseller: bool = False
    status: ExperienceStatusLiteral = "active"
    rating: float | None = Field(None, ge=0, le=5)
    review_count: int = Field(0, ge=0)
    booking_count: int = Field(0, ge=0)
    sort_order: int = 0
    availability_url: str | None = Field(None, max_length=1024)


class UpdateExperienceRequest(SeoFieldsMixin, _LanguagesMixin):
    """Request schema for updating a tour. Only sent fields are written."""

    title: str | None = Field(None, min_length=1, max_length=255)
    slug: str | None = Field(None, max_length=255)
    description: str | None = None
    short_description: str | None = None
    price: float | None = Field(None, ge=0)
    original_price: float | None = Field(None, ge=0)
    currency: str | None = Field(None, min_length=3, max_length=3)
    city_id: uuid.UUID | None = None
    category_id: uuid.UUID | None = None
    subcategory_id: uuid.UUID | None = None
    duration: str | None = Field(None, max_length=100)
    duration_hours: float | None = Field(None, ge=0)
    max_group_size: int | None = Field(None, ge=1)
    min_age: int | None = Field(None, ge=0)
    meeting_point: str | None = None
    cancellation_policy: str | None = None
    languages: list[str] | None = None
    highlights: list[str] | None = None
    main_image_url: str | None = Field(None, max_length=1024)
    gallery_images: list[str] | None = None
    featured: bool | None = None
    bestseller: bool | None = None
    status: ExperienceStatusLiteral | None = None
    rating: float | None = Field(None, ge=0, le=5)
    review_count: int | None = Field(None, ge=0)
    booking_count: int | None = Field(None, ge=0)
    sort_order: int | None = None
    availability_url: str | None = Field(None, max_length=1024)


class ExperienceResponse(RowResponse, SeoFieldsMixin):
    """Full tour row plus the names of its city, category and subcategory."""

    title: str
    slug: str
    description: str | None = None
    short_description: str | None = None
    price: float
    original_price: float | None = None
    currency: str
    city_id: uuid.UUID | None = None
    category_id: uuid.UUID | None = None
    subcategory_id: uuid.UUID | None = None
    city_name: str | None = None
    category_name: str | None = None
    subcategory_name: str | None = None
    duration: str | None = None
    duration_hours: float | None = None
    max_group_size: int | None = None
    min_age: int | None = None
    meeting_point: str | None = None
    cancellation_policy: str | None = None
    languages: list[str] = Field(default_factory=list)
    highlights: list[str] = Field(default_factory=list)
    main_image_url: str | None = None
    gallery_images: list[str] = Field(default_factory=list)
    featured: bool
    bestseller: bool
    status: str
    rating: float | None = None
    review_count: int
    booking_count: int
    sort_order: int
    availability_url: str | None = None


class ExperienceCard(BaseModel):
    """Tour as shown in listings and carousels, with display fallbacks applied."""

    id: uuid.UUID
    title: str
    slug: str
    url: str
    short_description: str
    price: float
    original_price: float | None = None
    currency: str = "USD"
    image_url: str
    rating: float | None = None
    review_count: int = 0
    duration: str | None = None
    city_name: str | None = None
    category_name: str | None = None
    featured: bool = False
    bestseller: bool = False
