"""
Filtering and sorting of already-fetched listings.

Search results and blog listings are fetched once and then narrowed
in memory, so these helpers are pure functions over plain records.

Dependencies: dataclasses (stdlib)
System role: Listing filter/sort rules for search and blog pages
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable, Sequence, TypeVar

from tourbook.core.exceptions import ValidationError

T = TypeVar("T")


class ResultType(str, Enum):
    """Kinds of rows search can return."""

    EXPERIENCE = "experience"
    CATEGORY = "category"
    DESTINATION = "destination"


class SortOrder(str, Enum):
    """Search sort options."""

    RELEVANCE = "relevance"
    PRICE_LOW = "price-low"
    PRICE_HIGH = "price-high"
    RATING = "rating"
    POPULAR = "popular"


# (lower exclusive, upper inclusive); None means unbounded
PRICE_BANDS: dict[str, tuple[float | None, float | None]] = {
    "0-25": (None, 25),
    "25-50": (25, 50),
    "50-100": (50, 100),
    "100+": (100, None),
}


@dataclass
class SearchResult:
    """One search hit, independent of the table it came from."""

    type: ResultType
    title: str
    slug: str
    url: str
    subtitle: str | None = None
    image_url: str | None = None
    price: float | None = None
    rating: float | None = None
    review_count: int | None = None
    featured: bool = False
    extra: dict[str, Any] = field(default_factory=dict)


def in_price_band(price: float | None, band: str) -> bool:
    """
    Check a price against one of the named bands.

    Rows without a price (or priced at 0) never match a band.

    Raises:
        ValidationError: If the band name is unknown
    """
    if band not in PRICE_BANDS:
        raise ValidationError(f"Unknown price range: {band}", field="price_range")
    if not price:
        return False
    lower, upper = PRICE_BANDS[band]
    if lower is not None and price <= lower:
        return False
    if upper is not None and price > upper:
        return False
    return True


def filter_results(
    results: Iterable[SearchResult],
    result_type: str = "all",
    price_range: str | None = None,
) -> list[SearchResult]:
    """
    Narrow search results by type and price band.

    Args:
        results: Results in relevance order
        result_type: ``all`` or one of :class:`ResultType`
        price_range: Optional band key from :data:`PRICE_BANDS` (``all`` ignored)

    Returns:
        list[SearchResult]: Matching results, input order preserved
    """
    filtered = list(results)
    if result_type and result_type != "all":
        try:
            wanted = ResultType(result_type)
        except ValueError:
            raise ValidationError(f"Unknown result type: {result_type}", field="type") from None
        filtered = [r for r in filtered if r.type == wanted]
    if price_range and price_range != "all":
        if price_range not in PRICE_BANDS:
            raise ValidationError(f"Unknown price range: {price_range}", field="price_range")
        filtered = [r for r in filtered if in_price_band(r.price, price_range)]
    return filtered


def sort_results(results: Sequence[SearchResult], sort: str = SortOrder.RELEVANCE) -> list[SearchResult]:
    """
    Order search results. All sorts are stable; missing numbers count as 0.

    Args:
        results: Results to order
        sort: One of :class:`SortOrder` values

    Returns:
        list[SearchResult]: New ordered list
    """
    try:
        order = SortOrder(sort)
    except ValueError:
        raise ValidationError(f"Unknown sort order: {sort}", field="sort") from None
    if order is SortOrder.PRICE_LOW:
        return sorted(results, key=lambda r: r.price or 0)
    if order is SortOrder.PRICE_HIGH:
        return sorted(results, key=lambda r: r.price or 0, reverse=True)
    if order is SortOrder.RATING:
        return sorted(results, key=lambda r: r.rating or 0, reverse=True)
    if order is SortOrder.POPULAR:
        return sorted(results, key=lambda r: not r.featured)
    return list(results)


def split_featured(items: Iterable[T]) -> tuple[list[T], list[T]]:
    """Partition rows with a truthy ``featured`` flag from the rest."""
    featured: list[T] = []
    regular: list[T] = []
    for item in items:
        (featured if getattr(item, "featured", False) else regular).append(item)
    return featured, regular
