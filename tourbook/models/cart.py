"""
Cart schemas.

Dependencies: pydantic
System role: Cart API contracts
"""

import uuid
from datetime import date

from pydantic import BaseModel, Field


class AddCartItemRequest(BaseModel):
    """Request schema for adding a tour to the cart."""

    experience_id: uuid.UUID
    quantity: int = Field(1, ge=1, le=100)
    selected_date: date | None = None


class UpdateCartItemRequest(BaseModel):
    """Request schema for changing a line's quantity."""

    quantity: int = Field(..., ge=1, le=100)


class CartLine(BaseModel):
    """Cart row with the tour details the cart page shows."""

    id: uuid.UUID
    experience_id: uuid.UUID
    quantity: int
    selected_date: date | None = None
    title: str
    slug: str
    image_url: str | None = None
    price: float
    currency: str = "USD"
    city_name: str | None = None
    duration: str | None = None
    line_total: float


class CartResponse(BaseModel):
    """Whole cart with totals."""

    items: list[CartLine] = Field(default_factory=list)
    total_price: float = 0
    total_items: int = 0
