"""
Travel guide (blog) schemas.

Request/response schemas for posts and blog categories.

Dependencies: pydantic
System role: Travel guide API contracts
"""

import uuid
from datetime import datetime

from pydantic import BaseModel, Field

from tourbook.models.common import RowResponse
from tourbook.models.seo import SeoFieldsMixin


class CodeSnippet(BaseModel):
    """Code block embedded in a post."""

    language: str = "text"
    code: str
    title: str | None = None


class CreateBlogCategoryRequest(BaseModel):
    """Request schema for creating a blog category."""

    name: str = Field(..., min_length=1, max_length=255)
    slug: str | None = Field(None, max_length=255)
    description: str | None = None


class UpdateBlogCategoryRequest(BaseModel):
    """Request schema for updating a blog category."""

    name: str | None = Field(None, min_length=1, max_length=255)
    slug: str | None = Field(None, max_length=255)
    description: str | None = None


class BlogCategoryResponse(RowResponse):
    """Response schema for blog category operations."""

    name: str
    slug: str
    description: str | None = None


class CreateBlogPostRequest(SeoFieldsMixin):
    """Request schema for creating a post. A blank slug is derived from the title."""

    title: str = Field(..., min_length=1, max_length=255)
    slug: str | None = Field(None, max_length=255)
    excerpt: str | None = None
    content: str | None = None
    featured_image: str | None = Field(None, max_length=1024)
    category_id: uuid.UUID | None = None
    featured: bool = False
    published: bool = False
    read_time_minutes: int = Field(5, ge=1)
    code_snippets: list[CodeSnippet] = Field(default_factory=list)


class UpdateBlogPostRequest(SeoFieldsMixin):
    """Request schema for updating a post. Only sent fields are written."""

    title: str | None = Field(None, min_length=1, max_length=255)
    slug: str | None = Field(None, max_length=255)
    excerpt: str | None = None
    content: str | None = None
    featured_image: str | None = Field(None, max_length=1024)
    category_id: uuid.UUID | None = None
    featured: bool | None = None
    published: bool | None = None
    read_time_minutes: int | None = Field(None, ge=1)
    code_snippets: list[CodeSnippet] | None = None


class BlogPostResponse(RowResponse, SeoFieldsMixin):
    """Full post row plus its category name."""

    title: str
    slug: str
    excerpt: str | None = None
    content: str | None = None
    featured_image: str | None = None
    category_id: uuid.UUID | None = None
    category_name: str | None = None
    featured: bool
    published: bool
    published_at: datetime | None = None
    read_time_minutes: int
    code_snippets: list[CodeSnippet] = Field(default_factory=list)


class BlogPostCard(BaseModel):
    """Post as shown in the travel guide listing and related posts."""

    id: uuid.UUID
    title: str
    slug: str
    url: str
    excerpt: str
    featured_image: str | None = None
    category_name: str | None = None
    category_slug: str | None = None
    featured: bool = False
    published_at: datetime | None = None
    read_time_minutes: int = 5
