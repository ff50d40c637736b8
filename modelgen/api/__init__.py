"""
API routers for modelgen.
"""
from fastapi import APIRouter

from ..core.config import settings
from . import routes

# Create the main API router
router = APIRouter(prefix=settings.API_PREFIX, tags=["api"])
router.include_router(routes.router)

__all__ = ["router"]
