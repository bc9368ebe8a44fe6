"""
Repository REST exposure of vehicles in HAL format, with paging and sorting.

GET is public, DELETE needs ROLE_ADMIN, other writes need any authenticated user.
"""

import math
from typing import Annotated
from urllib.parse import urlencode

from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response, status
from fastapi.responses import JSONResponse

from vehicle_api.api.auth import get_current_user, require_role
from vehicle_api.api.v1.vehicles import Vehicles
from vehicle_api.models import Vehicle
from vehicle_api.repositories.vehicle_repository import MAX_OFFSET
from vehicle_api.schemas.auth import CurrentUser
from vehicle_api.schemas.hal import HalVehicle, HalVehicleCollection
from vehicle_api.schemas.vehicle import VehicleForm, VehiclePatch

router = APIRouter()

DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 1000
# Keeps page * size within the 64-bit OFFSET range for any allowed size.
MAX_PAGE = MAX_OFFSET // MAX_PAGE_SIZE
COLLECTION_REL = "vehicles"
ITEM_REL = "vehicle"


def _collection_url(request: Request) -> str:
    return str(request.url_for("list_vehicle_entities"))


def _item_url(request: Request, vehicle_id: int) -> str:
    return str(request.url_for("get_vehicle_entity", vehicle_id=vehicle_id))


def to_hal(request: Request, vehicle: Vehicle) -> dict:
    """HAL representation of one vehicle: its fields plus self/vehicle links."""
    href = _item_url(request, vehicle.id)
    return {
        "name": vehicle.name,
        "_links": {"self": {"href": href}, ITEM_REL: {"href": href}},
    }


def _page_href(base: str, page: int, size: int, sort: list[str]) -> str:
    params: list[tuple[str, str | int]] = [("page", page), ("size", size)]
    params.extend(("sort", s) for s in sort)
    return f"{base}?{urlencode(params)}"


def page_links(base: str, page: int, size: int, total_pages: int, sort: list[str]) -> dict:
    """self and, where they exist, first/prev/next/last page links."""
    links = {"self": {"href": _page_href(base, page, size, sort)}}
    if total_pages > 1:
        links["first"] = {"href": _page_href(base, 0, size, sort)}
        links["last"] = {"href": _page_href(base, total_pages - 1, size, sort)}
    if page > 0:
        links["prev"] = {"href": _page_href(base, page - 1, size, sort)}
    if page + 1 < total_pages:
        links["next"] = {"href": _page_href(base, page + 1, size, sort)}
    return links


@router.get("", response_model=HalVehicleCollection, response_model_by_alias=True)
def list_vehicle_entities(
    request: Request,
    vehicles: Vehicles,
    page: Annotated[int, Query(ge=0, le=MAX_PAGE)] = 0,
    size: Annotated[int, Query(ge=1, le=MAX_PAGE_SIZE)] = DEFAULT_PAGE_SIZE,
    sort: Annotated[list[str] | None, Query()] = None,
) -> dict:
    """Page through vehicles. sort takes 'property[,asc|desc]' and may be repeated."""
    sort = sort or []
    try:
        items, total = vehicles.find_page(page, size, sort)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    total_pages = math.ceil(total / size) if total else 0
    return {
        "_embedded": {COLLECTION_REL: [to_hal(request, v) for v in items]},
        "_links": page_links(_collection_url(request), page, size, total_pages, sort),
        "page": {
            "size": size,
            "totalElements": total,
            "totalPages": total_pages,
            "number": page,
        },
    }


@router.get("/{vehicle_id}", response_model=HalVehicle, response_model_by_alias=True)
def get_vehicle_entity(vehicle_id: int, request: Request, vehicles: Vehicles) -> dict:
    return to_hal(request, vehicles.get(vehicle_id))


@router.post("", status_code=status.HTTP_201_CREATED, response_model=HalVehicle)
def create_vehicle_entity(
    body: VehicleForm,
    request: Request,
    vehicles: Vehicles,
    _user: Annotated[CurrentUser, Depends(get_current_user)],
) -> JSONResponse:
    saved = vehicles.save(Vehicle(name=body.name))
    return JSONResponse(
        status_code=status.HTTP_201_CREATED,
        content=to_hal(request, saved),
        headers={"Location": _item_url(request, saved.id)},
    )


@router.put("/{vehicle_id}", response_model=HalVehicle)
def replace_vehicle_entity(
    vehicle_id: int,
    body: VehicleForm,
    request: Request,
    vehicles: Vehicles,
    _user: Annotated[CurrentUser, Depends(get_current_user)],
) -> JSONResponse:
    """Replace the vehicle; creates it under the given id when it does not exist yet."""
    existing = vehicles.find_by_id(vehicle_id)
    if existing is None:
        saved = vehicles.save_with_id(Vehicle(id=vehicle_id, name=body.name))
        return JSONResponse(
            status_code=status.HTTP_201_CREATED,
            content=to_hal(request, saved),
            headers={"Location": _item_url(request, saved.id)},
        )
    existing.name = body.name
    saved = vehicles.save(existing)
    return JSONResponse(status_code=status.HTTP_200_OK, content=to_hal(request, saved))


@router.patch("/{vehicle_id}", response_model=HalVehicle, response_model_by_alias=True)
def patch_vehicle_entity(
    vehicle_id: int,
    body: VehiclePatch,
    request: Request,
    vehicles: Vehicles,
    _user: Annotated[CurrentUser, Depends(get_current_user)],
) -> dict:
    existing = vehicles.get(vehicle_id)
    for field, value in body.model_dump(exclude_unset=True).items():
        setattr(existing, field, value)
    return to_hal(request, vehicles.save(existing))


@router.delete("/{vehicle_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def delete_vehicle_entity(
    vehicle_id: int,
    vehicles: Vehicles,
    _admin: Annotated[CurrentUser, Depends(require_role("ADMIN"))],
) -> Response:
    vehicles.delete(vehicles.get(vehicle_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
