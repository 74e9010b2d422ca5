"""
Catalog admin endpoints.

Routes:
- GET/POST /categories, GET/PUT/DELETE /categories/{id}
- POST /categories/{id}/toggle-featured
- GET/POST /categories/{id}/subcategories
- GET/PUT/DELETE /subcategories/{id}
- GET/POST /cities, GET/PUT/DELETE /cities/{id}
- POST /cities/{id}/toggle-featured

Dependencies: tourbook.application.services, tourbook.models
System role: Category, subcategory and destination management HTTP API
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends

from tourbook.api.deps.dependencies import get_catalog_service
from tourbook.api.routers.router_utils import handle_service_errors, map_many, map_one
from tourbook.application.services.catalog_service import CatalogService
from tourbook.models.category import (
    CategoryResponse,
    CreateCategoryRequest,
    CreateSubcategoryRequest,
    SubcategoryResponse,
    UpdateCategoryRequest,
    UpdateSubcategoryRequest,
)
from tourbook.models.city import CityResponse, CreateCityRequest, UpdateCityRequest
from tourbook.models.common import MessageResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["admin: catalog"])


# Categories

@router.get("/categories", response_model=list[CategoryResponse])
@handle_service_errors
async def list_categories(
    service: CatalogService = Depends(get_catalog_service),
) -> list[CategoryResponse]:
    """List every category by name."""
    return map_many(CategoryResponse, await service.list_categories())


@router.post("/categories", response_model=CategoryResponse, status_code=201)
@handle_service_errors
async def create_category(
    request: CreateCategoryRequest,
    service: CatalogService = Depends(get_catalog_service),
) -> CategoryResponse:
    """
    Create a category.

    Raises:
        HTTPException(409): Slug already in use
    """
    logger.info("Creating category", extra={"category_name": request.name})
    return map_one(CategoryResponse, await service.create_category(request.model_dump()))


@router.get("/categories/{category_id}", response_model=CategoryResponse)
@handle_service_errors
async def get_category(
    category_id: UUID,
    service: CatalogService = Depends(get_catalog_service),
) -> CategoryResponse:
    return map_one(CategoryResponse, await service.get_category(category_id))


@router.put("/categories/{category_id}", response_model=CategoryResponse)
@handle_service_errors
async def update_category(
    category_id: UUID,
    request: UpdateCategoryRequest,
    service: CatalogService = Depends(get_catalog_service),
) -> CategoryResponse:
    """
    Update a category. Only the fields sent are changed.

    Raises:
        HTTPException(404): Category not found
        HTTPException(409): New slug already in use
    """
    updates = request.model_dump(exclude_unset=True)
    return map_one(CategoryResponse, await service.update_category(category_id, updates))


@router.delete("/categories/{category_id}", response_model=MessageResponse)
@handle_service_errors
async def delete_category(
    category_id: UUID,
    service: CatalogService = Depends(get_catalog_service),
) -> MessageResponse:
    """Delete a category with its subcategories; its tours keep no category."""
    await service.delete_category(category_id)
    return MessageResponse(success=True, message="Category deleted")


@router.post("/categories/{category_id}/toggle-featured", response_model=CategoryResponse)
@handle_service_errors
async def toggle_category_featured(
    category_id: UUID,
    service: CatalogService = Depends(get_catalog_service),
) -> CategoryResponse:
    return map_one(CategoryResponse, await service.toggle_category_featured(category_id))


# Subcategories

@router.get("/categories/{category_id}/subcategories", response_model=list[SubcategoryResponse])
@handle_service_errors
async def list_subcategories(
    category_id: UUID,
    service: CatalogService = Depends(get_catalog_service),
) -> list[SubcategoryResponse]:
    """List a category's subcategories by sort_order."""
    return map_many(SubcategoryResponse, await service.list_subcategories(category_id))


@router.post(
    "/categories/{category_id}/subcategories",
    response_model=SubcategoryResponse,
    status_code=201,
)
@handle_service_errors
async def create_subcategory(
    category_id: UUID,
    request: CreateSubcategoryRequest,
    service: CatalogService = Depends(get_catalog_service),
) -> SubcategoryResponse:
    """
    Create a subcategory under a category.

    Raises:
        HTTPException(404): Category not found
        HTTPException(409): Slug already in use
    """
    data = await service.create_subcategory(category_id, request.model_dump())
    return map_one(SubcategoryResponse, data)


@router.get("/subcategories/{subcategory_id}", response_model=SubcategoryResponse)
@handle_service_errors
async def get_subcategory(
    subcategory_id: UUID,
    service: CatalogService = Depends(get_catalog_service),
) -> SubcategoryResponse:
    return map_one(SubcategoryResponse, await service.get_subcategory(subcategory_id))


@router.put("/subcategories/{subcategory_id}", response_model=SubcategoryResponse)
@handle_service_errors
async def update_subcategory(
    subcategory_id: UUID,
    request: UpdateSubcategoryRequest,
    service: CatalogService = Depends(get_catalog_service),
) -> SubcategoryResponse:
    updates = request.model_dump(exclude_unset=True)
    return map_one(SubcategoryResponse, await service.update_subcategory(subcategory_id, updates))


@router.delete("/subcategories/{subcategory_id}", response_model=MessageResponse)
@handle_service_errors
async def delete_subcategory(
    subcategory_id: UUID,
    service: CatalogService = Depends(get_catalog_service),
) -> MessageResponse:
    await service.delete_subcategory(subcategory_id)
    return MessageResponse(success=True, message="Subcategory deleted")


# Cities

@router.get("/cities", response_model=list[CityResponse])
@handle_service_errors
async def list_cities(
    service: CatalogService = Depends(get_catalog_service),
) -> list[CityResponse]:
    return map_many(CityResponse, await service.list_cities())


@router.post("/cities", response_model=CityResponse, status_code=201)
@handle_service_errors
async def create_city(
    request: CreateCityRequest,
    service: CatalogService = Depends(get_catalog_service),
) -> CityResponse:
    """
    Create a destination city.

    Raises:
        HTTPException(409): Slug already in use
    """
    logger.info("Creating city", extra={"city_name": request.name})
    return map_one(CityResponse, await service.create_city(request.model_dump()))


@router.get("/cities/{city_id}", response_model=CityResponse)
@handle_service_errors
async def get_city(
    city_id: UUID,
    service: CatalogService = Depends(get_catalog_service),
) -> CityResponse:
    return map_one(CityResponse, await service.get_city(city_id))


@router.put("/cities/{city_id}", response_model=CityResponse)
@handle_service_errors
async def update_city(
    city_id: UUID,
    request: UpdateCityRequest,
    service: CatalogService = Depends(get_catalog_service),
) -> CityResponse:
    updates = request.model_dump(exclude_unset=True)
    return map_one(CityResponse, await service.update_city(city_id, updates))


@router.delete("/cities/{city_id}", response_model=MessageResponse)
@handle_service_errors
async def delete_city(
    city_id: UUID,
    service: CatalogService = Depends(get_catalog_service),
) -> MessageResponse:
    """Delete a city; its tours keep no city."""
    await service.delete_city(city_id)
    return MessageResponse(success=True, message="City deleted")


@router.post("/cities/{city_id}/toggle-featured", response_model=CityResponse)
@handle_service_errors
async def toggle_city_featured(
    city_id: UUID,
    service: CatalogService = Depends(get_catalog_service),
) -> CityResponse:
    return map_one(CityResponse, await service.toggle_city_featured(city_id))
