"""
Travel guide admin endpoints.

Routes:
- GET/POST /blog/posts, GET/PUT/DELETE /blog/posts/{id}
- POST /blog/posts/{id}/toggle-published, /blog/posts/{id}/toggle-featured
- GET/POST /blog/categories, GET/PUT/DELETE /blog/categories/{id}
- GET/POST /blog/posts/{id}/sections
- GET/PUT/DELETE /blog/sections/{id}, POST /blog/sections/{id}/toggle
- POST /blog/sections/{id}/items, PUT/DELETE /blog/items/{id}

Dependencies: tourbook.application.services, tourbook.models
System role: Travel guide management HTTP API
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Query

from tourbook.api.deps.dependencies import get_blog_service
from tourbook.api.routers.router_utils import handle_service_errors, map_many, map_one
from tourbook.application.services.blog_service import BlogService
from tourbook.models.blog import (
    BlogCategoryResponse,
    BlogPostResponse,
    CreateBlogCategoryRequest,
    CreateBlogPostRequest,
    UpdateBlogCategoryRequest,
    UpdateBlogPostRequest,
)
from tourbook.models.common import MessageResponse
from tourbook.models.guide import (
    CreateGuideItemRequest,
    CreateGuideSectionRequest,
    GuideItemResponse,
    GuideSectionResponse,
    UpdateGuideItemRequest,
    UpdateGuideSectionRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/blog", tags=["admin: travel guide"])


# Posts

@router.get("/posts", response_model=list[BlogPostResponse])
@handle_service_errors
async def list_posts(
    limit: int = Query(100, ge=1, le=500),
    offset: int = Query(0, ge=0),
    service: BlogService = Depends(get_blog_service),
) -> list[BlogPostResponse]:
    """List posts, drafts included, newest first."""
    return map_many(BlogPostResponse, await service.list_posts(limit=limit, offset=offset))


@router.post("/posts", response_model=BlogPostResponse, status_code=201)
@handle_service_errors
async def create_post(
    request: CreateBlogPostRequest,
    service: BlogService = Depends(get_blog_service),
) -> BlogPostResponse:
    """
    Create a post.

    Raises:
        HTTPException(404): Blog category not found
        HTTPException(409): Slug already in use
    """
    logger.info("Creating blog post", extra={"title": request.title, "published": request.published})
    return map_one(BlogPostResponse, await service.create_post(request.model_dump()))


@router.get("/posts/{post_id}", response_model=BlogPostResponse)
@handle_service_errors
async def get_post(
    post_id: UUID,
    service: BlogService = Depends(get_blog_service),
) -> BlogPostResponse:
    return map_one(BlogPostResponse, await service.get_post(post_id))


@router.put("/posts/{post_id}", response_model=BlogPostResponse)
@handle_service_errors
async def update_post(
    post_id: UUID,
    request: UpdateBlogPostRequest,
    service: BlogService = Depends(get_blog_service),
) -> BlogPostResponse:
    """
    Update a post. Only the fields sent are changed.

    Raises:
        HTTPException(404): Post not found
        HTTPException(409): New slug already in use
    """
    updates = request.model_dump(exclude_unset=True)
    return map_one(BlogPostResponse, await service.update_post(post_id, updates))


@router.delete("/posts/{post_id}", response_model=MessageResponse)
@handle_service_errors
async def delete_post(
    post_id: UUID,
    service: BlogService = Depends(get_blog_service),
) -> MessageResponse:
    await service.delete_post(post_id)
    return MessageResponse(success=True, message="Blog post deleted")


@router.post("/posts/{post_id}/toggle-published", response_model=BlogPostResponse)
@handle_service_errors
async def toggle_post_published(
    post_id: UUID,
    service: BlogService = Depends(get_blog_service),
) -> BlogPostResponse:
    return map_one(BlogPostResponse, await service.toggle_post_published(post_id))


@router.post("/posts/{post_id}/toggle-featured", response_model=BlogPostResponse)
@handle_service_errors
async def toggle_post_featured(
    post_id: UUID,
    service: BlogService = Depends(get_blog_service),
) -> BlogPostResponse:
    return map_one(BlogPostResponse, await service.toggle_post_featured(post_id))


# Blog categories

@router.get("/categories", response_model=list[BlogCategoryResponse])
@handle_service_errors
async def list_blog_categories(
    service: BlogService = Depends(get_blog_service),
) -> list[BlogCategoryResponse]:
    return map_many(BlogCategoryResponse, await service.list_blog_categories())


@router.post("/categories", response_model=BlogCategoryResponse, status_code=201)
@handle_service_errors
async def create_blog_category(
    request: CreateBlogCategoryRequest,
    service: BlogService = Depends(get_blog_service),
) -> BlogCategoryResponse:
    return map_one(BlogCategoryResponse, await service.create_blog_category(request.model_dump()))


@router.get("/categories/{category_id}", response_model=BlogCategoryResponse)
@handle_service_errors
async def get_blog_category(
    category_id: UUID,
    service: BlogService = Depends(get_blog_service),
) -> BlogCategoryResponse:
    return map_one(BlogCategoryResponse, await service.get_blog_category(category_id))


@router.put("/categories/{category_id}", response_model=BlogCategoryResponse)
@handle_service_errors
async def update_blog_category(
    category_id: UUID,
    request: UpdateBlogCategoryRequest,
    service: BlogService = Depends(get_blog_service),
) -> BlogCategoryResponse:
    updates = request.model_dump(exclude_unset=True)
    return map_one(BlogCategoryResponse, await service.update_blog_category(category_id, updates))


@router.delete("/categories/{category_id}", response_model=MessageResponse)
@handle_service_errors
async def delete_blog_category(
    category_id: UUID,
    service: BlogService = Depends(get_blog_service),
) -> MessageResponse:
    await service.delete_blog_category(category_id)
    return MessageResponse(success=True, message="Blog category deleted")


# Guide sections

@router.get("/posts/{post_id}/sections", response_model=list[GuideSectionResponse])
@handle_service_errors
async def list_guide_sections(
    post_id: UUID,
    service: BlogService = Depends(get_blog_service),
) -> list[GuideSectionResponse]:
    """List a post's guide sections (hidden ones included) with their items."""
    return map_many(GuideSectionResponse, await service.list_guide_sections(post_id))


@router.post(
    "/posts/{post_id}/sections",
    response_model=GuideSectionResponse,
    status_code=201,
)
@handle_service_errors
async def create_guide_section(
    post_id: UUID,
    request: CreateGuideSectionRequest,
    service: BlogService = Depends(get_blog_service),
) -> GuideSectionResponse:
    """
    Add a guide section to a post.

    Raises:
        HTTPException(404): Post not found
    """
    data = await service.create_guide_section(post_id, request.model_dump())
    return map_one(GuideSectionResponse, data)


@router.get("/sections/{section_id}", response_model=GuideSectionResponse)
@handle_service_errors
async def get_guide_section(
    section_id: UUID,
    service: BlogService = Depends(get_blog_service),
) -> GuideSectionResponse:
    return map_one(GuideSectionResponse, await service.get_guide_section(section_id))


@router.put("/sections/{section_id}", response_model=GuideSectionResponse)
@handle_service_errors
async def update_guide_section(
    section_id: UUID,
    request: UpdateGuideSectionRequest,
    service: BlogService = Depends(get_blog_service),
) -> GuideSectionResponse:
    updates = request.model_dump(exclude_unset=True)
    return map_one(GuideSectionResponse, await service.update_guide_section(section_id, updates))


@router.post("/sections/{section_id}/toggle", response_model=GuideSectionResponse)
@handle_service_errors
async def toggle_guide_section(
    section_id: UUID,
    service: BlogService = Depends(get_blog_service),
) -> GuideSectionResponse:
    return map_one(GuideSectionResponse, await service.toggle_guide_section(section_id))


@router.delete("/sections/{section_id}", response_model=MessageResponse)
@handle_service_errors
async def delete_guide_section(
    section_id: UUID,
    service: BlogService = Depends(get_blog_service),
) -> MessageResponse:
    await service.delete_guide_section(section_id)
    return MessageResponse(success=True, message="Guide section deleted")


# Guide items

@router.post(
    "/sections/{section_id}/items",
    response_model=GuideItemResponse,
    status_code=201,
)
@handle_service_errors
async def create_guide_item(
    section_id: UUID,
    request: CreateGuideItemRequest,
    service: BlogService = Depends(get_blog_service),
) -> GuideItemResponse:
    return map_one(GuideItemResponse, await service.create_guide_item(section_id, request.model_dump()))


@router.put("/items/{item_id}", response_model=GuideItemResponse)
@handle_service_errors
async def update_guide_item(
    item_id: UUID,
    request: UpdateGuideItemRequest,
    service: BlogService = Depends(get_blog_service),
) -> GuideItemResponse:
    updates = request.model_dump(exclude_unset=True)
    return map_one(GuideItemResponse, await service.update_guide_item(item_id, updates))


@router.delete("/items/{item_id}", response_model=MessageResponse)
@handle_service_errors
async def delete_guide_item(
    item_id: UUID,
    service: BlogService = Depends(get_blog_service),
) -> MessageResponse:
    await service.delete_guide_item(item_id)
    return MessageResponse(success=True, message="Guide item deleted")
