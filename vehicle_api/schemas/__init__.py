"""Pydantic request/response schemas."""

from vehicle_api.schemas.auth import (
    AuthenticationRequest,
    AuthenticationResponse,
    CurrentUser,
    UserInfoResponse,
)
from vehicle_api.schemas.hal import HalLink, HalPage, HalVehicle, HalVehicleCollection
from vehicle_api.schemas.health import HealthResponse
from vehicle_api.schemas.vehicle import VehicleForm, VehiclePatch, VehicleRead

__all__ = [
    "AuthenticationRequest",
    "AuthenticationResponse",
    "CurrentUser",
    "HalLink",
    "HalPage",
    "HalVehicle",
    "HalVehicleCollection",
    "HealthResponse",
    "UserInfoResponse",
    "VehicleForm",
    "VehiclePatch",
    "VehicleRead",
]
