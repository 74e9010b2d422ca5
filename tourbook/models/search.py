"""
Search schemas.

Dependencies: pydantic
System role: Search API contracts
"""

from pydantic import BaseModel, ConfigDict, Field


class SearchResultResponse(BaseModel):
    """One search hit."""

    model_config = ConfigDict(from_attributes=True)

    type: str
    title: str
    slug: str
    url: str
    subtitle: str | None = None
    image_url: str | None = None
    price: float | None = None
    rating: float | None = None
    review_count: int | None = None
    featured: bool = False


class SearchPage(BaseModel):
    """Search results with the applied filters echoed back."""

    query: str
    type: str = "all"
    price_range: str | None = None
    sort: str = "relevance"
    total: int = 0
    counts: dict[str, int] = Field(default_factory=dict, description="Unfiltered hits per type")
    results: list[SearchResultResponse] = Field(default_factory=list)
