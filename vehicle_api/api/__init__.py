"""API routes."""

from fastapi import APIRouter

from vehicle_api.api import auth, data_rest, health, userinfo
from vehicle_api.api.v1 import router as v1_router

router = APIRouter()
router.include_router(health.router, prefix="/health", tags=["health"])
router.include_router(auth.router, prefix="/auth", tags=["auth"])
router.include_router(userinfo.router, prefix="/me", tags=["auth"])
router.include_router(v1_router, prefix="/v1")
router.include_router(data_rest.router, prefix="/vehicles", tags=["vehicle-entity"])
