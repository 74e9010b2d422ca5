"""
Travel guide section composition.

Guide posts carry nested sections ("What to Do", "What to Carry", ...)
each holding recommendation items. These helpers decide what is shown and
in which order.

Dependencies: None
System role: Guide-section ordering rules
"""

from enum import Enum
from typing import Iterable, TypeVar

T = TypeVar("T")


class SectionType(str, Enum):
    """Kinds of guide sections."""

    WHAT_TO_DO = "what_to_do"
    WHAT_NOT_TO_DO = "what_not_to_do"
    WHAT_TO_CARRY = "what_to_carry"
    CUSTOM = "custom"


class Importance(str, Enum):
    """How strongly a guide item is recommended."""

    ESSENTIAL = "essential"
    RECOMMENDED = "recommended"
    OPTIONAL = "optional"


_IMPORTANCE_RANK = {
    Importance.ESSENTIAL.value: 0,
    Importance.RECOMMENDED.value: 1,
    Importance.OPTIONAL.value: 2,
}


def importance_rank(importance: str | None) -> int:
    """Sort key for an item's importance; unknown values go last."""
    return _IMPORTANCE_RANK.get(importance or "", len(_IMPORTANCE_RANK))


def order_guide_items(items: Iterable[T]) -> list[T]:
    """Essential items first, then recommended, then optional; stored order breaks ties."""
    ordered = sorted(items, key=lambda item: getattr(item, "sort_order", 0) or 0)
    return sorted(ordered, key=lambda item: importance_rank(getattr(item, "importance", None)))


def visible_sections(sections: Iterable[T]) -> list[T]:
    """Enabled sections by ``sort_order``."""
    enabled = [s for s in sections if getattr(s, "enabled", False)]
    return sorted(enabled, key=lambda s: getattr(s, "sort_order", 0) or 0)
