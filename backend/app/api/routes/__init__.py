"""Resource routers."""

from fastapi import APIRouter

from . import health, owners

router = APIRouter()
router.include_router(health.router, prefix="/health", tags=["health"])
router.include_router(owners.router, prefix="/owners", tags=["owners"])

__all__ = ["router"]
