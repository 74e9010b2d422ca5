"""
Admin router package.

Every admin route sits under ``/admin`` behind the ``X-Admin-Key`` check.
"""

from fastapi import APIRouter, Depends

from tourbook.api.deps.dependencies import require_admin

from .blog import router as blog_router
from .catalog import router as catalog_router
from .experiences import router as experiences_router
from .homepage import router as homepage_router
from .links import router as links_router

router = APIRouter(prefix="/admin", dependencies=[Depends(require_admin)])
router.include_router(catalog_router)
router.include_router(experiences_router)
router.include_router(blog_router)
router.include_router(homepage_router)
router.include_router(links_router)

__all__ = ["router"]
