"""
Slug redirect schemas.

Dependencies: pydantic
System role: Redirect API contracts
"""

from typing import Literal

from pydantic import BaseModel, Field

from tourbook.models.common import RowResponse

ContentTypeLiteral = Literal["experiences", "categories", "blog_posts"]


class CreateRedirectRequest(BaseModel):
    """Request schema for creating a redirect."""

    old_slug: str = Field(..., min_length=1, max_length=255)
    new_slug: str = Field(..., min_length=1, max_length=255)
    content_type: ContentTypeLiteral
    permanent: bool = True


class UpdateRedirectRequest(BaseModel):
    """Request schema for updating a redirect."""

    old_slug: str | None = Field(None, min_length=1, max_length=255)
    new_slug: str | None = Field(None, min_length=1, max_length=255)
    content_type: ContentTypeLiteral | None = None
    permanent: bool | None = None


class RedirectResponse(RowResponse):
    """Response schema for redirect operations."""

    old_slug: str
    new_slug: str
    content_type: str
    permanent: bool


class RedirectRuleResponse(BaseModel):
    """Path-level rule derived from a stored redirect or a built-in rule."""

    source: str
    destination: str
    permanent: bool
    status_code: int


class ResolveResponse(BaseModel):
    """Outcome of resolving a storefront path."""

    path: str
    matched: bool
    destination: str | None = None
    permanent: bool | None = None
    status_code: int | None = None
