"""Schemas for the vehicle resource."""

from pydantic import BaseModel, Field


class VehicleForm(BaseModel):
    """Body for creating or replacing a vehicle."""

    name: str = Field(..., max_length=255, description="Vehicle name")


class VehiclePatch(BaseModel):
    """Body for a partial update; omitted fields are left unchanged."""

    name: str | None = Field(default=None, max_length=255)


class VehicleRead(BaseModel):
    id: int
    name: str | None

    class Config:
        from_attributes = True
