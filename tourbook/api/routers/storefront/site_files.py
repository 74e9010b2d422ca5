"""
Crawler files served at the site root.

Routes: GET /robots.txt, GET /sitemap.xml

Dependencies: tourbook.application.services
System role: Search-engine crawl surface
"""

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse, Response

from tourbook.api.deps.dependencies import get_site_files_service
from tourbook.api.routers.router_utils import handle_service_errors
from tourbook.application.services.site_files_service import SiteFilesService

router = APIRouter(tags=["site files"])


@router.get("/robots.txt", response_class=PlainTextResponse)
async def robots_txt(
    service: SiteFilesService = Depends(get_site_files_service),
) -> PlainTextResponse:
    return PlainTextResponse(service.robots_txt())


@router.get("/sitemap.xml")
@handle_service_errors
async def sitemap_xml(
    service: SiteFilesService = Depends(get_site_files_service),
) -> Response:
    """Sitemap of static pages plus every indexable tour, category, city and post."""
    return Response(content=await service.sitemap_xml(), media_type="application/xml")
