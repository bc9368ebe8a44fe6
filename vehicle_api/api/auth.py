"""Sign-in endpoint and the auth dependencies (get_current_user, require_role)."""

import logging
from collections.abc import Callable
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from vehicle_api.core.database import get_db
from vehicle_api.core.security import create_access_token, verify_password
from vehicle_api.repositories import UserRepository
from vehicle_api.schemas.auth import (
    AuthenticationRequest,
    AuthenticationResponse,
    CurrentUser,
)

logger = logging.getLogger(__name__)

router = APIRouter()
# Declares the bearer scheme in OpenAPI; the token itself is checked by JwtTokenFilter.
bearer_scheme = HTTPBearer(auto_error=False)


@router.post("/signin", response_model=AuthenticationResponse)
def signin(
    body: AuthenticationRequest,
    db: Annotated[Session, Depends(get_db)],
) -> AuthenticationResponse:
    """
    Authenticate with username and password; returns a JWT.
    Include the token in the Authorization header as: Bearer <token>
    """
    user = UserRepository(db).find_by_username(body.username)
    if user is None or not verify_password(body.password, user.password_hash):
        logger.info("Failed sign-in for username=%s", body.username)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid username/password supplied",
        )
    token = create_access_token(user.username, user.roles)
    logger.debug("Issued token for %s", user.username)
    return AuthenticationResponse(username=user.username, token=token)


def get_current_user(
    request: Request,
    _credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
) -> CurrentUser:
    """Dependency: return the principal established by the JWT filter. Raises 401 when anonymous."""
    principal = getattr(request.state, "principal", None)
    if principal is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return principal


def require_role(role: str) -> Callable[..., CurrentUser]:
    """Dependency factory: require an authenticated user holding ROLE_<role>. Raises 403 otherwise."""

    def dependency(
        current_user: Annotated[CurrentUser, Depends(get_current_user)],
    ) -> CurrentUser:
        if not current_user.has_role(role):
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Access is denied",
            )
        return current_user

    return dependency
