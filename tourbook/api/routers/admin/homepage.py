"""
Homepage content admin endpoints.

Routes:
- GET /homepage/settings, GET/PUT/DELETE /homepage/settings/{section_name}
- GET/POST /homepage/stats, PUT/DELETE /homepage/stats/{id}
- GET/POST /homepage/testimonials, GET/PUT/DELETE /homepage/testimonials/{id}
- POST /homepage/testimonials/{id}/toggle-featured
- GET/POST /faqs, GET/PUT/DELETE /faqs/{id}, POST /faqs/{id}/toggle

Dependencies: tourbook.application.services, tourbook.models
System role: Homepage content management HTTP API
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends

from tourbook.api.deps.dependencies import get_faq_service, get_homepage_service
from tourbook.api.routers.router_utils import handle_service_errors, map_many, map_one
from tourbook.application.services.faq_service import FAQService
from tourbook.application.services.homepage_service import HomepageService
from tourbook.models.common import MessageResponse
from tourbook.models.faq import CreateFAQRequest, FAQResponse, UpdateFAQRequest
from tourbook.models.homepage import (
    CreateHomepageStatRequest,
    CreateTestimonialRequest,
    HomepageSettingResponse,
    HomepageStatResponse,
    TestimonialResponse,
    UpdateHomepageStatRequest,
    UpdateTestimonialRequest,
    UpsertHomepageSettingRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["admin: homepage"])


# Block settings

@router.get("/homepage/settings", response_model=list[HomepageSettingResponse])
@handle_service_errors
async def list_homepage_settings(
    service: HomepageService = Depends(get_homepage_service),
) -> list[HomepageSettingResponse]:
    return map_many(HomepageSettingResponse, await service.list_settings())


@router.get("/homepage/settings/{section_name}", response_model=HomepageSettingResponse)
@handle_service_errors
async def get_homepage_setting(
    section_name: str,
    service: HomepageService = Depends(get_homepage_service),
) -> HomepageSettingResponse:
    """
    Get the stored copy of one block.

    Raises:
        HTTPException(404): Nothing stored (the built-in copy is in use)
    """
    return map_one(HomepageSettingResponse, await service.get_setting(section_name))


@router.put("/homepage/settings/{section_name}", response_model=HomepageSettingResponse)
@handle_service_errors
async def upsert_homepage_setting(
    section_name: str,
    request: UpsertHomepageSettingRequest,
    service: HomepageService = Depends(get_homepage_service),
) -> HomepageSettingResponse:
    """Create or replace the copy of one block ("hero_section", "faq_section")."""
    logger.info("Saving homepage block", extra={"section_name": section_name})
    data = await service.upsert_setting(section_name, request.model_dump())
    return map_one(HomepageSettingResponse, data)


@router.delete("/homepage/settings/{section_name}", response_model=MessageResponse)
@handle_service_errors
async def delete_homepage_setting(
    section_name: str,
    service: HomepageService = Depends(get_homepage_service),
) -> MessageResponse:
    await service.delete_setting(section_name)
    return MessageResponse(success=True, message="Homepage setting deleted")


# Stats

@router.get("/homepage/stats", response_model=list[HomepageStatResponse])
@handle_service_errors
async def list_stats(
    service: HomepageService = Depends(get_homepage_service),
) -> list[HomepageStatResponse]:
    return map_many(HomepageStatResponse, await service.list_stats())


@router.post("/homepage/stats", response_model=HomepageStatResponse, status_code=201)
@handle_service_errors
async def create_stat(
    request: CreateHomepageStatRequest,
    service: HomepageService = Depends(get_homepage_service),
) -> HomepageStatResponse:
    return map_one(HomepageStatResponse, await service.create_stat(request.model_dump()))


@router.put("/homepage/stats/{stat_id}", response_model=HomepageStatResponse)
@handle_service_errors
async def update_stat(
    stat_id: UUID,
    request: UpdateHomepageStatRequest,
    service: HomepageService = Depends(get_homepage_service),
) -> HomepageStatResponse:
    updates = request.model_dump(exclude_unset=True)
    return map_one(HomepageStatResponse, await service.update_stat(stat_id, updates))


@router.delete("/homepage/stats/{stat_id}", response_model=MessageResponse)
@handle_service_errors
async def delete_stat(
    stat_id: UUID,
    service: HomepageService = Depends(get_homepage_service),
) -> MessageResponse:
    await service.delete_stat(stat_id)
    return MessageResponse(success=True, message="Homepage stat deleted")


# Testimonials

@router.get("/homepage/testimonials", response_model=list[TestimonialResponse])
@handle_service_errors
async def list_testimonials(
    service: HomepageService = Depends(get_homepage_service),
) -> list[TestimonialResponse]:
    return map_many(TestimonialResponse, await service.list_testimonials())


@router.post("/homepage/testimonials", response_model=TestimonialResponse, status_code=201)
@handle_service_errors
async def create_testimonial(
    request: CreateTestimonialRequest,
    service: HomepageService = Depends(get_homepage_service),
) -> TestimonialResponse:
    return map_one(TestimonialResponse, await service.create_testimonial(request.model_dump()))


@router.get("/homepage/testimonials/{testimonial_id}", response_model=TestimonialResponse)
@handle_service_errors
async def get_testimonial(
    testimonial_id: UUID,
    service: HomepageService = Depends(get_homepage_service),
) -> TestimonialResponse:
    return map_one(TestimonialResponse, await service.get_testimonial(testimonial_id))


@router.put("/homepage/testimonials/{testimonial_id}", response_model=TestimonialResponse)
@handle_service_errors
async def update_testimonial(
    testimonial_id: UUID,
    request: UpdateTestimonialRequest,
    service: HomepageService = Depends(get_homepage_service),
) -> TestimonialResponse:
    updates = request.model_dump(exclude_unset=True)
    return map_one(TestimonialResponse, await service.update_testimonial(testimonial_id, updates))


@router.delete("/homepage/testimonials/{testimonial_id}", response_model=MessageResponse)
@handle_service_errors
async def delete_testimonial(
    testimonial_id: UUID,
    service: HomepageService = Depends(get_homepage_service),
) -> MessageResponse:
    await service.delete_testimonial(testimonial_id)
    return MessageResponse(success=True, message="Testimonial deleted")


@router.post(
    "/homepage/testimonials/{testimonial_id}/toggle-featured",
    response_model=TestimonialResponse,
)
@handle_service_errors
async def toggle_testimonial_featured(
    testimonial_id: UUID,
    service: HomepageService = Depends(get_homepage_service),
) -> TestimonialResponse:
    return map_one(TestimonialResponse, await service.toggle_testimonial_featured(testimonial_id))


# FAQs

@router.get("/faqs", response_model=list[FAQResponse])
@handle_service_errors
async def list_faqs(
    service: FAQService = Depends(get_faq_service),
) -> list[FAQResponse]:
    """List every FAQ by sort_order, hidden ones included."""
    return map_many(FAQResponse, await service.list_faqs())


@router.post("/faqs", response_model=FAQResponse, status_code=201)
@handle_service_errors
async def create_faq(
    request: CreateFAQRequest,
    service: FAQService = Depends(get_faq_service),
) -> FAQResponse:
    return map_one(FAQResponse, await service.create_faq(request.model_dump()))


@router.get("/faqs/{faq_id}", response_model=FAQResponse)
@handle_service_errors
async def get_faq(
    faq_id: UUID,
    service: FAQService = Depends(get_faq_service),
) -> FAQResponse:
    return map_one(FAQResponse, await service.get_faq(faq_id))


@router.put("/faqs/{faq_id}", response_model=FAQResponse)
@handle_service_errors
async def update_faq(
    faq_id: UUID,
    request: UpdateFAQRequest,
    service: FAQService = Depends(get_faq_service),
) -> FAQResponse:
    updates = request.model_dump(exclude_unset=True)
    return map_one(FAQResponse, await service.update_faq(faq_id, updates))


@router.delete("/faqs/{faq_id}", response_model=MessageResponse)
@handle_service_errors
async def delete_faq(
    faq_id: UUID,
    service: FAQService = Depends(get_faq_service),
) -> MessageResponse:
    await service.delete_faq(faq_id)
    return MessageResponse(success=True, message="FAQ deleted")


@router.post("/faqs/{faq_id}/toggle", response_model=FAQResponse)
@handle_service_errors
async def toggle_faq(
    faq_id: UUID,
    service: FAQService = Depends(get_faq_service),
) -> FAQResponse:
    return map_one(FAQResponse, await service.toggle_faq(faq_id))
