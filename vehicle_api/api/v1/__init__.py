"""API v1 routes."""

from fastapi import APIRouter

from vehicle_api.api.v1 import vehicles

router = APIRouter()
router.include_router(vehicles.router, prefix="/vehicles", tags=["vehicles"])
