"""API v1 router aggregating all endpoint routers.

All endpoints are mounted under /api/v1/ via the v1_prefix configuration.
"""

from __future__ import annotations

from fastapi import APIRouter

from app.api.v1.endpoints import conversion, health, info, root


router = APIRouter()

router.include_router(root.router)
router.include_router(conversion.router)
router.include_router(health.router)
router.include_router(info.router)
