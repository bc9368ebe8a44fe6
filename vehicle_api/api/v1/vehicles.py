"""Vehicle CRUD controller: a direct pass-through over VehicleRepository."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request, Response, status
from sqlalchemy.orm import Session

from vehicle_api.api.auth import get_current_user
from vehicle_api.core.database import get_db
from vehicle_api.models import Vehicle
from vehicle_api.repositories import VehicleRepository
from vehicle_api.schemas.auth import CurrentUser
from vehicle_api.schemas.vehicle import VehicleForm, VehicleRead

router = APIRouter()


def get_vehicle_repository(db: Annotated[Session, Depends(get_db)]) -> VehicleRepository:
    return VehicleRepository(db)


Vehicles = Annotated[VehicleRepository, Depends(get_vehicle_repository)]


@router.get("", response_model=list[VehicleRead])
def all_vehicles(vehicles: Vehicles) -> list[Vehicle]:
    return vehicles.find_all()


@router.post("", status_code=status.HTTP_201_CREATED, response_class=Response)
def save_vehicle(
    body: VehicleForm,
    request: Request,
    vehicles: Vehicles,
    _user: Annotated[CurrentUser, Depends(get_current_user)],
) -> Response:
    """Create a vehicle; the new resource URI is returned in the Location header."""
    saved = vehicles.save(Vehicle(name=body.name))
    location = str(request.url_for("get_vehicle", vehicle_id=saved.id))
    return Response(status_code=status.HTTP_201_CREATED, headers={"Location": location})


@router.get("/{vehicle_id}", response_model=VehicleRead)
def get_vehicle(vehicle_id: int, vehicles: Vehicles) -> Vehicle:
    return vehicles.get(vehicle_id)


@router.put("/{vehicle_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def update_vehicle(
    vehicle_id: int,
    body: VehicleForm,
    vehicles: Vehicles,
    _user: Annotated[CurrentUser, Depends(get_current_user)],
) -> Response:
    existed = vehicles.get(vehicle_id)
    existed.name = body.name
    vehicles.save(existed)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{vehicle_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def delete_vehicle(
    vehicle_id: int,
    vehicles: Vehicles,
    _user: Annotated[CurrentUser, Depends(get_current_user)],
) -> Response:
    existed = vehicles.get(vehicle_id)
    vehicles.delete(existed)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
