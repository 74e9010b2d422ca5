"""
Category and subcategory schemas.

Request/response schemas for the tour taxonomy.

Dependencies: pydantic
System role: Category API contracts
"""

import uuid

from pydantic import BaseModel, Field

from tourbook.models.common import RowResponse


class CreateCategoryRequest(BaseModel):
    """Request schema for creating a category. A blank slug is derived from the name."""

    name: str = Field(..., min_length=1, max_length=255, description="Category name")
    slug: str | None = Field(None, max_length=255, description="URL slug")
    description: str | None = None
    image_url: str | None = Field(None, max_length=1024)
    featured: bool = False
    sort_order: int = 0
    experience_count: int = Field(0, ge=0)


class UpdateCategoryRequest(BaseModel):
    """Request schema for updating a category. Only sent fields are written."""

    name: str | None = Field(None, min_length=1, max_length=255)
    slug: str | None = Field(None, max_length=255)
    description: str | None = None
    image_url: str | None = Field(None, max_length=1024)
    featured: bool | None = None
    sort_order: int | None = None
    experience_count: int | None = Field(None, ge=0)


class CategoryResponse(RowResponse):
    """Response schema for category operations."""

    name: str
    slug: str
    description: str | None = None
    image_url: str | None = None
    featured: bool
    sort_order: int
    experience_count: int


class CreateSubcategoryRequest(BaseModel):
    """Request schema for creating a subcategory under the category in the path."""

    name: str = Field(..., min_length=1, max_length=255)
    slug: str | None = Field(None, max_length=255)
    description: str | None = None
    image_url: str | None = Field(None, max_length=1024)
    sort_order: int = 0


class UpdateSubcategoryRequest(BaseModel):
    """Request schema for updating a subcategory."""

    name: str | None = Field(None, min_length=1, max_length=255)
    slug: str | None = Field(None, max_length=255)
    description: str | None = None
    image_url: str | None = Field(None, max_length=1024)
    sort_order: int | None = None
    category_id: uuid.UUID | None = Field(None, description="Move under another category")


class SubcategoryResponse(RowResponse):
    """Response schema for subcategory operations."""

    category_id: uuid.UUID
    name: str
    slug: str
    description: str | None = None
    image_url: str | None = None
    sort_order: int
