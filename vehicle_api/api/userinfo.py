"""Information about the authenticated principal."""

from typing import Annotated

from fastapi import APIRouter, Depends

from vehicle_api.api.auth import get_current_user
from vehicle_api.schemas.auth import CurrentUser, UserInfoResponse

router = APIRouter()


@router.get("", response_model=UserInfoResponse)
def me(current_user: Annotated[CurrentUser, Depends(get_current_user)]) -> UserInfoResponse:
    """Return the username and roles carried by the current bearer token's user."""
    return UserInfoResponse(username=current_user.username, roles=current_user.roles)
