"""
Guide section and item schemas.

Dependencies: pydantic
System role: Travel guide section API contracts
"""

import uuid
from typing import Literal

from pydantic import BaseModel, Field

from tourbook.models.common import RowResponse

SectionTypeLiteral = Literal["what_to_do", "what_not_to_do", "what_to_carry", "custom"]
ImportanceLiteral = Literal["essential", "recommended", "optional"]


class CreateGuideSectionRequest(BaseModel):
    """Request schema for adding a section to the post in the path."""

    section_title: str = Field(..., min_length=1, max_length=255)
    section_type: SectionTypeLiteral = "custom"
    content: str | None = None
    enabled: bool = True
    sort_order: int = 0


class UpdateGuideSectionRequest(BaseModel):
    """Request schema for updating a section."""

    section_title: str | None = Field(None, min_length=1, max_length=255)
    section_type: SectionTypeLiteral | None = None
    content: str | None = None
    enabled: bool | None = None
    sort_order: int | None = None


class CreateGuideItemRequest(BaseModel):
    """Request schema for adding an item to the section in the path."""

    title: str = Field(..., min_length=1, max_length=255)
    description: str | None = None
    icon: str | None = Field(None, max_length=100)
    importance: ImportanceLiteral | None = None
    category: str | None = Field(None, max_length=100)
    sort_order: int = 0


class UpdateGuideItemRequest(BaseModel):
    """Request schema for updating an item."""

    title: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = None
    icon: str | None = Field(None, max_length=100)
    importance: ImportanceLiteral | None = None
    category: str | None = Field(None, max_length=100)
    sort_order: int | None = None


class GuideItemResponse(RowResponse):
    """Response schema for guide item operations."""

    section_id: uuid.UUID
    title: str
    description: str | None = None
    icon: str | None = None
    importance: str | None = None
    category: str | None = None
    sort_order: int


class GuideSectionResponse(RowResponse):
    """Response schema for guide section operations, items in stored order."""

    blog_post_id: uuid.UUID
    section_title: str
    section_type: str
    content: str | None = None
    enabled: bool
    sort_order: int
    items: list[GuideItemResponse] = Field(default_factory=list)


class GuideSectionView(BaseModel):
    """Section as rendered on a post: paragraphs split, items by importance."""

    id: uuid.UUID
    section_title: str
    section_type: str
    paragraphs: list[str] = Field(default_factory=list)
    items: list[GuideItemResponse] = Field(default_factory=list)
