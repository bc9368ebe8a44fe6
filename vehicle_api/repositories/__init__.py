"""Repositories: thin persistence interfaces over the SQLAlchemy session."""

from vehicle_api.repositories.user_repository import UserRepository
from vehicle_api.repositories.vehicle_repository import VehicleRepository

__all__ = ["UserRepository", "VehicleRepository"]
