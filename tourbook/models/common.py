"""
Common response models and utilities.

Generic response wrappers shared by the routers.

Dependencies: pydantic
System role: Common API response structures
"""

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict


class RowResponse(BaseModel):
    """Fields every stored row carries."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    created_at: datetime
    updated_at: datetime


class MessageResponse(BaseModel):
    """Acknowledgement for deletes and toggles."""

    success: bool = True
    message: str


class Breadcrumb(BaseModel):
    """One step of a page's breadcrumb trail."""

    name: str
    url: str
