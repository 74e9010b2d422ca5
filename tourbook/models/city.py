"""
City schemas.

Dependencies: pydantic
System role: Destination API contracts
"""

from pydantic import BaseModel, Field

from tourbook.models.common import RowResponse


class CreateCityRequest(BaseModel):
    """Request schema for creating a city. A blank slug is derived from the name."""

    name: str = Field(..., min_length=1, max_length=255)
    slug: str | None = Field(None, max_length=255)
    country: str | None = Field(None, max_length=255)
    description: str | None = None
    image_url: str | None = Field(None, max_length=1024)
    featured: bool = False


class UpdateCityRequest(BaseModel):
    """Request schema for updating a city."""

    name: str | None = Field(None, min_length=1, max_length=255)
    slug: str | None = Field(None, max_length=255)
    country: str | None = Field(None, max_length=255)
    description: str | None = None
    image_url: str | None = Field(None, max_length=1024)
    featured: bool | None = None


class CityResponse(RowResponse):
    """Response schema for city operations."""

    name: str
    slug: str
    country: str | None = None
    description: str | None = None
    image_url: str | None = None
    featured: bool
