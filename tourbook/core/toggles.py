"""
Publication flag helpers.

Dependencies: None
System role: Status toggling for admin list actions
"""

from enum import Enum


class ExperienceStatus(str, Enum):
    """Listing states of a tour. Only active tours are shown on the storefront."""

    ACTIVE = "active"
    INACTIVE = "inactive"
    DRAFT = "draft"


def toggle_status(current: str | None) -> str:
    """``active`` becomes ``inactive``; any other state becomes ``active``."""
    if current == ExperienceStatus.ACTIVE.value:
        return ExperienceStatus.INACTIVE.value
    return ExperienceStatus.ACTIVE.value
