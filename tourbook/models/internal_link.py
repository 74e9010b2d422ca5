"""
Internal link schemas.

Dependencies: pydantic
System role: Internal linking API contracts
"""

import uuid
from typing import Literal

from pydantic import BaseModel, Field

from tourbook.models.common import RowResponse

ContextTypeLiteral = Literal["homepage", "experience", "blog_post"]


class CreateLinkSectionRequest(BaseModel):
    """Request schema for creating a link section."""

    section_title: str = Field(..., min_length=1, max_length=255)
    section_type: str = Field("general", max_length=50)
    sort_order: int = 0
    enabled: bool = True
    context_type: ContextTypeLiteral = "homepage"
    context_id: uuid.UUID | None = Field(None, description="Tour or post id for non-homepage sections")


class UpdateLinkSectionRequest(BaseModel):
    """Request schema for updating a link section."""

    section_title: str | None = Field(None, min_length=1, max_length=255)
    section_type: str | None = Field(None, max_length=50)
    sort_order: int | None = None
    enabled: bool | None = None


class CreateLinkRequest(BaseModel):
    """Request schema for adding a link to the section in the path."""

    title: str = Field(..., min_length=1, max_length=255)
    url: str = Field(..., min_length=1, max_length=1024)
    display_order: int = 0
    enabled: bool = True


class UpdateLinkRequest(BaseModel):
    """Request schema for updating a link."""

    title: str | None = Field(None, min_length=1, max_length=255)
    url: str | None = Field(None, min_length=1, max_length=1024)
    display_order: int | None = None
    enabled: bool | None = None


class LinkResponse(RowResponse):
    """Response schema for link operations."""

    section_id: uuid.UUID
    title: str
    url: str
    display_order: int
    enabled: bool


class LinkSectionResponse(RowResponse):
    """Response schema for section operations, with its links."""

    section_title: str
    section_type: str
    sort_order: int
    enabled: bool
    context_type: str
    context_id: uuid.UUID | None = None
    links: list[LinkResponse] = Field(default_factory=list)
