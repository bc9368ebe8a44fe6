"""Domain exceptions and the REST exception handlers that map them to responses."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class VehicleNotFoundException(Exception):
    """Raised when a vehicle id does not exist."""

    def __init__(self, vehicle_id: int | None = None) -> None:
        self.vehicle_id = vehicle_id
        super().__init__(f"Vehicle {vehicle_id} not found" if vehicle_id is not None else "Vehicle not found")


class InvalidJwtAuthenticationException(Exception):
    """Raised when a bearer token is expired, malformed or badly signed."""

    def __init__(self, message: str = "Expired or invalid JWT token") -> None:
        self.message = message
        super().__init__(message)


def unauthorized_response(detail: str) -> JSONResponse:
    """401 with the bearer challenge header."""
    return JSONResponse(
        status_code=status.HTTP_401_UNAUTHORIZED,
        content={"detail": detail},
        headers={"WWW-Authenticate": "Bearer"},
    )


async def vehicle_not_found_handler(request: Request, exc: VehicleNotFoundException) -> JSONResponse:
    logger.debug("handling VehicleNotFoundException (id=%s)", exc.vehicle_id)
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"detail": "Vehicle not found"},
    )


async def invalid_jwt_handler(request: Request, exc: InvalidJwtAuthenticationException) -> JSONResponse:
    logger.debug("handling InvalidJwtAuthenticationException: %s", exc.message)
    return unauthorized_response(exc.message)


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the domain exception handlers to the application."""
    app.add_exception_handler(VehicleNotFoundException, vehicle_not_found_handler)
    app.add_exception_handler(InvalidJwtAuthenticationException, invalid_jwt_handler)
