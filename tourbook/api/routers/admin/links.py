"""
Internal link and redirect admin endpoints.

Routes:
- GET /link-sections?context_type=&context_id= - Sections of one context
- POST /link-sections, GET/PUT/DELETE /link-sections/{id}
- POST /link-sections/{id}/toggle
- POST /link-sections/{id}/links, PUT/DELETE /links/{id}, POST /links/{id}/toggle
- GET/POST /redirects, GET/PUT/DELETE /redirects/{id}

Dependencies: tourbook.application.services, tourbook.models
System role: Internal linking and moved-content management HTTP API
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends

from tourbook.api.deps.dependencies import get_internal_link_service, get_redirect_service
from tourbook.api.routers.router_utils import handle_service_errors, map_many, map_one
from tourbook.application.services.internal_link_service import InternalLinkService
from tourbook.application.services.redirect_service import RedirectService
from tourbook.models.common import MessageResponse
from tourbook.models.internal_link import (
    ContextTypeLiteral,
    CreateLinkRequest,
    CreateLinkSectionRequest,
    LinkResponse,
    LinkSectionResponse,
    UpdateLinkRequest,
    UpdateLinkSectionRequest,
)
from tourbook.models.redirect import (
    CreateRedirectRequest,
    RedirectResponse,
    UpdateRedirectRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["admin: links"])


# Link sections

@router.get("/link-sections", response_model=list[LinkSectionResponse])
@handle_service_errors
async def list_link_sections(
    context_type: ContextTypeLiteral = "homepage",
    context_id: UUID | None = None,
    service: InternalLinkService = Depends(get_internal_link_service),
) -> list[LinkSectionResponse]:
    """List the sections shown in one context (homepage, a tour or a post)."""
    return map_many(LinkSectionResponse, await service.list_sections(context_type, context_id))


@router.post("/link-sections", response_model=LinkSectionResponse, status_code=201)
@handle_service_errors
async def create_link_section(
    request: CreateLinkSectionRequest,
    service: InternalLinkService = Depends(get_internal_link_service),
) -> LinkSectionResponse:
    """
    Create a link section.

    Raises:
        HTTPException(400): context_id missing for a tour/post section, or set for the homepage
        HTTPException(404): Tour or post not found
    """
    logger.info(
        "Creating link section",
        extra={"context_type": request.context_type, "section_title": request.section_title},
    )
    return map_one(LinkSectionResponse, await service.create_section(request.model_dump()))


@router.get("/link-sections/{section_id}", response_model=LinkSectionResponse)
@handle_service_errors
async def get_link_section(
    section_id: UUID,
    service: InternalLinkService = Depends(get_internal_link_service),
) -> LinkSectionResponse:
    return map_one(LinkSectionResponse, await service.get_section(section_id))


@router.put("/link-sections/{section_id}", response_model=LinkSectionResponse)
@handle_service_errors
async def update_link_section(
    section_id: UUID,
    request: UpdateLinkSectionRequest,
    service: InternalLinkService = Depends(get_internal_link_service),
) -> LinkSectionResponse:
    updates = request.model_dump(exclude_unset=True)
    return map_one(LinkSectionResponse, await service.update_section(section_id, updates))


@router.post("/link-sections/{section_id}/toggle", response_model=LinkSectionResponse)
@handle_service_errors
async def toggle_link_section(
    section_id: UUID,
    service: InternalLinkService = Depends(get_internal_link_service),
) -> LinkSectionResponse:
    return map_one(LinkSectionResponse, await service.toggle_section(section_id))


@router.delete("/link-sections/{section_id}", response_model=MessageResponse)
@handle_service_errors
async def delete_link_section(
    section_id: UUID,
    service: InternalLinkService = Depends(get_internal_link_service),
) -> MessageResponse:
    await service.delete_section(section_id)
    return MessageResponse(success=True, message="Link section deleted")


# Links

@router.post("/link-sections/{section_id}/links", response_model=LinkResponse, status_code=201)
@handle_service_errors
async def create_link(
    section_id: UUID,
    request: CreateLinkRequest,
    service: InternalLinkService = Depends(get_internal_link_service),
) -> LinkResponse:
    return map_one(LinkResponse, await service.create_link(section_id, request.model_dump()))


@router.put("/links/{link_id}", response_model=LinkResponse)
@handle_service_errors
async def update_link(
    link_id: UUID,
    request: UpdateLinkRequest,
    service: InternalLinkService = Depends(get_internal_link_service),
) -> LinkResponse:
    updates = request.model_dump(exclude_unset=True)
    return map_one(LinkResponse, await service.update_link(link_id, updates))


@router.post("/links/{link_id}/toggle", response_model=LinkResponse)
@handle_service_errors
async def toggle_link(
    link_id: UUID,
    service: InternalLinkService = Depends(get_internal_link_service),
) -> LinkResponse:
    return map_one(LinkResponse, await service.toggle_link(link_id))


@router.delete("/links/{link_id}", response_model=MessageResponse)
@handle_service_errors
async def delete_link(
    link_id: UUID,
    service: InternalLinkService = Depends(get_internal_link_service),
) -> MessageResponse:
    await service.delete_link(link_id)
    return MessageResponse(success=True, message="Link deleted")


# Redirects

@router.get("/redirects", response_model=list[RedirectResponse])
@handle_service_errors
async def list_redirects(
    service: RedirectService = Depends(get_redirect_service),
) -> list[RedirectResponse]:
    return map_many(RedirectResponse, await service.list_redirects())


@router.post("/redirects", response_model=RedirectResponse, status_code=201)
@handle_service_errors
async def create_redirect(
    request: CreateRedirectRequest,
    service: RedirectService = Depends(get_redirect_service),
) -> RedirectResponse:
    """
    Store a redirect by hand.

    Raises:
        HTTPException(400): Blank slugs or a slug pointing at itself
        HTTPException(409): The old slug already redirects
    """
    return map_one(RedirectResponse, await service.create_redirect(request.model_dump()))


@router.get("/redirects/{redirect_id}", response_model=RedirectResponse)
@handle_service_errors
async def get_redirect(
    redirect_id: UUID,
    service: RedirectService = Depends(get_redirect_service),
) -> RedirectResponse:
    return map_one(RedirectResponse, await service.get_redirect(redirect_id))


@router.put("/redirects/{redirect_id}", response_model=RedirectResponse)
@handle_service_errors
async def update_redirect(
    redirect_id: UUID,
    request: UpdateRedirectRequest,
    service: RedirectService = Depends(get_redirect_service),
) -> RedirectResponse:
    updates = request.model_dump(exclude_unset=True)
    return map_one(RedirectResponse, await service.update_redirect(redirect_id, updates))


@router.delete("/redirects/{redirect_id}", response_model=MessageResponse)
@handle_service_errors
async def delete_redirect(
    redirect_id: UUID,
    service: RedirectService = Depends(get_redirect_service),
) -> MessageResponse:
    await service.delete_redirect(redirect_id)
    return MessageResponse(success=True, message="Redirect deleted")
