"""
Tour admin endpoints.

Routes:
- GET /experiences - List tours (any status)
- POST /experiences - Create tour
- GET /experiences/{id} - Get tour
- PUT /experiences/{id} - Update tour
- DELETE /experiences/{id} - Delete tour
- POST /experiences/{id}/toggle-status - Activate / deactivate
- POST /experiences/{id}/toggle-featured - Feature / unfeature

Dependencies: tourbook.application.services, tourbook.models
System role: Tour management HTTP API
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Query

from tourbook.api.deps.dependencies import get_experience_service
from tourbook.api.routers.router_utils import handle_service_errors, map_many, map_one
from tourbook.application.services.experience_service import ExperienceService
from tourbook.models.common import MessageResponse
from tourbook.models.experience import (
    CreateExperienceRequest,
    ExperienceResponse,
    UpdateExperienceRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/experiences", tags=["admin: experiences"])


@router.get("", response_model=list[ExperienceResponse])
@handle_service_errors
async def list_experiences(
    limit: int = Query(100, ge=1, le=500),
    offset: int = Query(0, ge=0),
    service: ExperienceService = Depends(get_experience_service),
) -> list[ExperienceResponse]:
    """
    List tours with pagination, newest first.

    Args:
        limit: Maximum number of tours (default 100)
        offset: Number to skip (default 0)
        service: Injected ExperienceService

    Returns:
        list[ExperienceResponse]: Tours of any status
    """
    logger.info("Listing experiences", extra={"limit": limit, "offset": offset})
    rows = await service.list_experiences(limit=limit, offset=offset)
    return map_many(ExperienceResponse, rows)


@router.post("", response_model=ExperienceResponse, status_code=201)
@handle_service_errors
async def create_experience(
    request: CreateExperienceRequest,
    service: ExperienceService = Depends(get_experience_service),
) -> ExperienceResponse:
    """
    Create a tour.

    Args:
        request: CreateExperienceRequest
        service: Injected ExperienceService

    Returns:
        ExperienceResponse: Created tour

    Raises:
        HTTPException(404): Linked city/category/subcategory not found
        HTTPException(409): Slug already in use
    """
    logger.info("Creating experience", extra={"title": request.title})
    data = await service.create_experience(request.model_dump())
    logger.info(
        "Experience created successfully",
        extra={"experience_id": str(data["id"]), "slug": data["slug"]},
    )
    return map_one(ExperienceResponse, data)


@router.get("/{experience_id}", response_model=ExperienceResponse)
@handle_service_errors
async def get_experience(
    experience_id: UUID,
    service: ExperienceService = Depends(get_experience_service),
) -> ExperienceResponse:
    """Get a tour by ID."""
    return map_one(ExperienceResponse, await service.get_experience(experience_id))


@router.put("/{experience_id}", response_model=ExperienceResponse)
@handle_service_errors
async def update_experience(
    experience_id: UUID,
    request: UpdateExperienceRequest,
    service: ExperienceService = Depends(get_experience_service),
) -> ExperienceResponse:
    """
    Update a tour. A new slug leaves a redirect behind for the old one.

    Raises:
        HTTPException(400): Required field sent as null
        HTTPException(404): Tour not found
        HTTPException(409): New slug already in use
    """
    updates = request.model_dump(exclude_unset=True)
    logger.info(
        "Updating experience",
        extra={"experience_id": str(experience_id), "fields": list(updates.keys())},
    )
    return map_one(ExperienceResponse, await service.update_experience(experience_id, updates))


@router.delete("/{experience_id}", response_model=MessageResponse)
@handle_service_errors
async def delete_experience(
    experience_id: UUID,
    service: ExperienceService = Depends(get_experience_service),
) -> MessageResponse:
    """Delete a tour."""
    await service.delete_experience(experience_id)
    return MessageResponse(success=True, message="Experience deleted")


@router.post("/{experience_id}/toggle-status", response_model=ExperienceResponse)
@handle_service_errors
async def toggle_experience_status(
    experience_id: UUID,
    service: ExperienceService = Depends(get_experience_service),
) -> ExperienceResponse:
    """Switch a tour between active and inactive."""
    return map_one(ExperienceResponse, await service.toggle_experience_status(experience_id))


@router.post("/{experience_id}/toggle-featured", response_model=ExperienceResponse)
@handle_service_errors
async def toggle_experience_featured(
    experience_id: UUID,
    service: ExperienceService = Depends(get_experience_service),
) -> ExperienceResponse:
    return map_one(ExperienceResponse, await service.toggle_experience_featured(experience_id))
