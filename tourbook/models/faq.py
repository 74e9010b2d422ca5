"""
FAQ schemas.

Dependencies: pydantic
System role: FAQ API contracts
"""

from pydantic import BaseModel, Field

from tourbook.models.common import RowResponse


class CreateFAQRequest(BaseModel):
    """Request schema for creating a FAQ."""

    question: str = Field(..., min_length=1)
    answer: str = Field(..., min_length=1)
    sort_order: int = 0
    enabled: bool = True


class UpdateFAQRequest(BaseModel):
    """Request schema for updating a FAQ."""

    question: str | None = Field(None, min_length=1)
    answer: str | None = Field(None, min_length=1)
    sort_order: int | None = None
    enabled: bool | None = None


class FAQResponse(RowResponse):
    """Response schema for FAQ operations."""

    question: str
    answer: str
    sort_order: int
    enabled: bool
