"""ORM model for vehicles, the resource exposed by the API."""

from sqlalchemy import Column, Integer, String

from vehicle_api.models.base import Base


class Vehicle(Base):
    """A vehicle with a surrogate id and a free-text name."""

    __tablename__ = "vehicles"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=True)

    def __repr__(self) -> str:
        return f"Vehicle(id={self.id!r}, name={self.name!r})"
