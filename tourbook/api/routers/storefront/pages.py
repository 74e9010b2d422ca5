"""
Storefront page endpoints.

Each route returns everything one storefront page renders, including its
head metadata and structured data. A renamed slug answers with a redirect
to the current page.

Routes:
- GET /pages/home
- GET /pages/tours, GET /pages/tour/{slug}
- GET /pages/category/{slug}, GET /pages/subcategory/{slug}
- GET /pages/destinations, GET /pages/destinations/{slug}
- GET /pages/travel-guide?category=, GET /pages/travel-guide/{slug}

Dependencies: tourbook.application.services, tourbook.models
System role: Storefront page HTTP API
"""

from fastapi import APIRouter, Depends, Query

from tourbook.api.deps.dependencies import get_storefront_service
from tourbook.api.routers.router_utils import handle_service_errors, map_one
from tourbook.application.services.storefront_service import StorefrontService
from tourbook.models.pages import (
    CategoryPage,
    DestinationPage,
    DestinationsPage,
    HomePage,
    SubcategoryPage,
    ToursPage,
    TourDetailPage,
    TravelGuidePage,
    TravelGuidePostPage,
)

router = APIRouter(prefix="/pages", tags=["storefront"])


@router.get("/home", response_model=HomePage)
@handle_service_errors
async def home_page(
    service: StorefrontService = Depends(get_storefront_service),
) -> HomePage:
    """Homepage: hero, featured categories and tours, FAQs, testimonials, stats."""
    return map_one(HomePage, await service.home())


@router.get("/tours", response_model=ToursPage)
@handle_service_errors
async def tours_page(
    service: StorefrontService = Depends(get_storefront_service),
) -> ToursPage:
    return map_one(ToursPage, await service.tours())


@router.get("/tour/{slug}", response_model=TourDetailPage)
@handle_service_errors
async def tour_page(
    slug: str,
    service: StorefrontService = Depends(get_storefront_service),
) -> TourDetailPage:
    """
    Single active tour.

    Raises:
        HTTPException(404): No active tour and no redirect for the slug
    """
    return map_one(TourDetailPage, await service.tour_detail(slug))


@router.get("/category/{slug}", response_model=CategoryPage)
@handle_service_errors
async def category_page(
    slug: str,
    service: StorefrontService = Depends(get_storefront_service),
) -> CategoryPage:
    return map_one(CategoryPage, await service.category(slug))


@router.get("/subcategory/{slug}", response_model=SubcategoryPage)
@handle_service_errors
async def subcategory_page(
    slug: str,
    service: StorefrontService = Depends(get_storefront_service),
) -> SubcategoryPage:
    return map_one(SubcategoryPage, await service.subcategory(slug))


@router.get("/destinations", response_model=DestinationsPage)
@handle_service_errors
async def destinations_page(
    service: StorefrontService = Depends(get_storefront_service),
) -> DestinationsPage:
    return map_one(DestinationsPage, await service.destinations())


@router.get("/destinations/{slug}", response_model=DestinationPage)
@handle_service_errors
async def destination_page(
    slug: str,
    service: StorefrontService = Depends(get_storefront_service),
) -> DestinationPage:
    return map_one(DestinationPage, await service.destination(slug))


@router.get("/travel-guide", response_model=TravelGuidePage)
@handle_service_errors
async def travel_guide_page(
    category: str | None = Query(None, description="Blog category slug filter"),
    service: StorefrontService = Depends(get_storefront_service),
) -> TravelGuidePage:
    """Published posts, featured ones split out, optionally narrowed to one category."""
    return map_one(TravelGuidePage, await service.travel_guide(category))


@router.get("/travel-guide/{slug}", response_model=TravelGuidePostPage)
@handle_service_errors
async def travel_guide_post_page(
    slug: str,
    service: StorefrontService = Depends(get_storefront_service),
) -> TravelGuidePostPage:
    """
    Single published post with its guide sections and related posts.

    Raises:
        HTTPException(404): No published post and no redirect for the slug
    """
    return map_one(TravelGuidePostPage, await service.travel_guide_post(slug))
