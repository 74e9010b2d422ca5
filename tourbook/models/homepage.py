"""
Homepage content schemas.

Request/response schemas for homepage settings, trust statistics and
testimonials, plus the resolved blocks the homepage renders.

Dependencies: pydantic
System role: Homepage API contracts
"""

from pydantic import BaseModel, Field

from tourbook.models.common import RowResponse


class UpsertHomepageSettingRequest(BaseModel):
    """Request schema for writing one homepage block (section name comes from the path)."""

    title: str | None = Field(None, max_length=255)
    subtitle: str | None = Field(None, max_length=255)
    description: str | None = None
    button_text: str | None = Field(None, max_length=100)
    button_link: str | None = Field(None, max_length=1024)
    background_image: str | None = Field(None, max_length=1024)
    enabled: bool = True


class HomepageSettingResponse(RowResponse):
    """Response schema for homepage settings."""

    section_name: str
    title: str | None = None
    subtitle: str | None = None
    description: str | None = None
    button_text: str | None = None
    button_link: str | None = None
    background_image: str | None = None
    enabled: bool


class CreateHomepageStatRequest(BaseModel):
    """Request schema for creating a statistic."""

    label: str = Field(..., min_length=1, max_length=255)
    value: float = Field(..., ge=0)
    sort_order: int = 0


class UpdateHomepageStatRequest(BaseModel):
    """Request schema for updating a statistic."""

    label: str | None = Field(None, min_length=1, max_length=255)
    value: float | None = Field(None, ge=0)
    sort_order: int | None = None


class HomepageStatResponse(RowResponse):
    """Response schema for statistic operations."""

    label: str
    value: float
    sort_order: int


class CreateTestimonialRequest(BaseModel):
    """Request schema for creating a testimonial."""

    customer_name: str = Field(..., min_length=1, max_length=255)
    customer_location: str | None = Field(None, max_length=255)
    customer_avatar: str | None = Field(None, max_length=1024)
    rating: int = Field(5, ge=1, le=5)
    review_text: str = Field(..., min_length=1)
    experience_name: str | None = Field(None, max_length=255)
    featured: bool = False
    sort_order: int = 0


class UpdateTestimonialRequest(BaseModel):
    """Request schema for updating a testimonial."""

    customer_name: str | None = Field(None, min_length=1, max_length=255)
    customer_location: str | None = Field(None, max_length=255)
    customer_avatar: str | None = Field(None, max_length=1024)
    rating: int | None = Field(None, ge=1, le=5)
    review_text: str | None = Field(None, min_length=1)
    experience_name: str | None = Field(None, max_length=255)
    featured: bool | None = None
    sort_order: int | None = None


class TestimonialResponse(RowResponse):
    """Response schema for testimonial operations."""

    customer_name: str
    customer_location: str | None = None
    customer_avatar: str | None = None
    rating: int
    review_text: str
    experience_name: str | None = None
    featured: bool
    sort_order: int


class HeroContent(BaseModel):
    """Hero block with stored copy or the built-in defaults."""

    title: str
    subtitle: str
    description: str
    button_text: str
    button_link: str
    background_image: str | None = None


class FAQSectionContent(BaseModel):
    """Heading of the FAQ block."""

    title: str
    subtitle: str


class StatView(BaseModel):
    """Statistic with its display value ("15K+", "4.8/5")."""

    label: str
    value: float
    display_value: str
