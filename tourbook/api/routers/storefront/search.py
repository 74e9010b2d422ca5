"""
Search endpoint.

Routes: GET /search?q=&type=&price_range=&sort=

Dependencies: tourbook.application.services, tourbook.models
System role: Storefront search HTTP API
"""

import logging

from fastapi import APIRouter, Depends, Query

from tourbook.api.deps.dependencies import get_storefront_service
from tourbook.api.routers.router_utils import handle_service_errors, map_one
from tourbook.application.services.storefront_service import StorefrontService
from tourbook.models.search import SearchPage

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/search", tags=["storefront"])


@router.get("", response_model=SearchPage)
@handle_service_errors
async def search(
    q: str = Query("", max_length=200, description="Free-text query"),
    result_type: str = Query("all", alias="type", description="all, experience, category or destination"),
    price_range: str | None = Query(None, description="0-25, 25-50, 50-100 or 100+"),
    sort: str = Query("relevance", description="relevance, price-low, price-high, rating or popular"),
    service: StorefrontService = Depends(get_storefront_service),
) -> SearchPage:
    """
    Search tours, categories and destinations.

    Args:
        q: Query text; blank returns no results
        result_type: Result type filter (query parameter ``type``)
        price_range: Price band filter (tours only)
        sort: Result ordering
        service: Injected StorefrontService

    Returns:
        SearchPage: Filtered results plus unfiltered counts per type

    Raises:
        HTTPException(400): Unknown type, price band or sort
    """
    data = await service.search(q, result_type=result_type, price_range=price_range, sort=sort)
    return map_one(SearchPage, data)
