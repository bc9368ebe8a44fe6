"""SQLAlchemy ORM models."""

from vehicle_api.models.base import Base
from vehicle_api.models.user import User, UserRole
from vehicle_api.models.vehicle import Vehicle

__all__ = ["Base", "User", "UserRole", "Vehicle"]
