"""
Public redirect rules.

Routes:
- GET /redirects/rules - Built-in and stored rules, in match order
- GET /redirects/resolve?path= - Where a storefront path should go

Dependencies: tourbook.application.services, tourbook.models
System role: Redirect lookup for the storefront edge
"""

from fastapi import APIRouter, Depends, Query

from tourbook.api.deps.dependencies import get_redirect_service
from tourbook.api.routers.router_utils import handle_service_errors, map_many, map_one
from tourbook.application.services.redirect_service import RedirectService
from tourbook.models.redirect import RedirectRuleResponse, ResolveResponse

router = APIRouter(prefix="/redirects", tags=["storefront"])


@router.get("/rules", response_model=list[RedirectRuleResponse])
@handle_service_errors
async def redirect_rules(
    service: RedirectService = Depends(get_redirect_service),
) -> list[RedirectRuleResponse]:
    return map_many(RedirectRuleResponse, await service.get_rules())


@router.get("/resolve", response_model=ResolveResponse)
@handle_service_errors
async def resolve_redirect(
    path: str = Query(..., min_length=1, description="Storefront path, e.g. /tour/old-slug"),
    service: RedirectService = Depends(get_redirect_service),
) -> ResolveResponse:
    """Resolve a path; ``matched`` is False when no rule applies."""
    return map_one(ResolveResponse, await service.resolve_path(path))
