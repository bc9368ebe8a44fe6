"""Core app configuration and database."""

from vehicle_api.core.config import get_settings, settings
from vehicle_api.core.database import get_db

__all__ = ["get_settings", "settings", "get_db"]
