"""Seed demo vehicles and users so the API can be exercised right after startup."""

import logging

from sqlalchemy.orm import Session

from vehicle_api.models import Vehicle
from vehicle_api.repositories import UserRepository, VehicleRepository

logger = logging.getLogger(__name__)

DEFAULT_VEHICLES = ("moto", "car")
# username -> (password, roles)
DEFAULT_USERS: dict[str, tuple[str, list[str]]] = {
    "user": ("password", ["ROLE_USER"]),
    "admin": ("password", ["ROLE_USER", "ROLE_ADMIN"]),
}


def seed_data(session: Session) -> tuple[int, int]:
    """
    Insert default vehicles (only into an empty table) and missing default users.

    Returns (vehicles_created, users_created). Idempotent: safe to run on every startup.
    """
    vehicles = VehicleRepository(session)
    users = UserRepository(session)

    vehicles_created = 0
    if vehicles.count() == 0:
        logger.debug("initializing vehicles data...")
        for name in DEFAULT_VEHICLES:
            vehicles.save(Vehicle(name=name))
            vehicles_created += 1

    users_created = 0
    for username, (password, roles) in DEFAULT_USERS.items():
        if users.exists_by_username(username):
            continue
        logger.debug("initializing user %s with roles %s", username, roles)
        users.create(username, password, roles)
        users_created += 1

    logger.debug("printing all vehicles...")
    for vehicle in vehicles.find_all():
        logger.debug(" Vehicle: %r", vehicle)

    if vehicles_created or users_created:
        logger.info(
            "Seeded data: vehicles_created=%s, users_created=%s",
            vehicles_created,
            users_created,
        )
    return vehicles_created, users_created
