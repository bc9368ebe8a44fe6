"""CRUD and paging access to vehicles."""

from sqlalchemy import func, select, text
from sqlalchemy.orm import Session

from vehicle_api.core.exceptions import VehicleNotFoundException
from vehicle_api.models import Vehicle

# Largest OFFSET the databases accept (signed 64-bit).
MAX_OFFSET = 2**63 - 1

SORTABLE_PROPERTIES = {"id": Vehicle.id, "name": Vehicle.name}


def parse_sort(sort: list[str] | None) -> list:
    """
    Turn ["name,desc", "id"] into ORDER BY clauses.
    Raises ValueError for unknown properties or directions.
    """
    clauses = []
    for entry in sort or []:
        parts = [p.strip() for p in entry.split(",") if p.strip()]
        if not parts:
            continue
        prop, direction = parts[0], (parts[1].lower() if len(parts) > 1 else "asc")
        column = SORTABLE_PROPERTIES.get(prop)
        if column is None:
            raise ValueError(f"Unknown sort property: {prop}")
        if direction not in ("asc", "desc"):
            raise ValueError(f"Unknown sort direction: {direction}")
        clauses.append(column.desc() if direction == "desc" else column.asc())
    if not clauses:
        clauses.append(Vehicle.id.asc())
    return clauses


class VehicleRepository:
    """Persistence operations for Vehicle; every write commits."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def find_all(self) -> list[Vehicle]:
        return list(self.session.scalars(select(Vehicle).order_by(Vehicle.id)))

    def find_by_id(self, vehicle_id: int) -> Vehicle | None:
        return self.session.get(Vehicle, vehicle_id)

    def get(self, vehicle_id: int) -> Vehicle:
        vehicle = self.find_by_id(vehicle_id)
        if vehicle is None:
            raise VehicleNotFoundException(vehicle_id)
        return vehicle

    def save(self, vehicle: Vehicle) -> Vehicle:
        self.session.add(vehicle)
        self.session.commit()
        self.session.refresh(vehicle)
        return vehicle

    def save_with_id(self, vehicle: Vehicle) -> Vehicle:
        """Insert a vehicle whose id was chosen by the caller, keeping id generation ahead of it."""
        saved = self.save(vehicle)
        self.sync_id_sequence()
        return saved

    def sync_id_sequence(self) -> None:
        """
        Move the PostgreSQL id sequence past max(id). Explicit ids do not advance it;
        SQLite derives the next rowid from max(id) and needs nothing.
        """
        if self.session.get_bind().dialect.name != "postgresql":
            return
        self.session.execute(
            text(
                "SELECT setval(pg_get_serial_sequence('vehicles', 'id'), "
                "(SELECT COALESCE(MAX(id), 1) FROM vehicles))"
            )
        )
        self.session.commit()

    def delete(self, vehicle: Vehicle) -> None:
        self.session.delete(vehicle)
        self.session.commit()

    def count(self) -> int:
        return self.session.scalar(select(func.count()).select_from(Vehicle)) or 0

    def find_page(
        self, page: int, size: int, sort: list[str] | None = None
    ) -> tuple[list[Vehicle], int]:
        """
        Return (vehicles on the zero-based page, total vehicle count).
        Raises ValueError when page * size does not fit a 64-bit OFFSET.
        """
        if page < 0 or size < 1:
            raise ValueError("page must be >= 0 and size >= 1")
        if page * size > MAX_OFFSET:
            raise ValueError(f"page {page} is out of range for size {size}")
        order_by = parse_sort(sort)
        stmt = select(Vehicle).order_by(*order_by).offset(page * size).limit(size)
        return list(self.session.scalars(stmt)), self.count()
