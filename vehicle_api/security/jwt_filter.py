"""Authentication filter: turns a bearer JWT into the request principal."""

import logging

from starlette.concurrency import run_in_threadpool
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from vehicle_api.core import database
from vehicle_api.core.exceptions import InvalidJwtAuthenticationException, unauthorized_response
from vehicle_api.core.security import get_username, resolve_token, validate_token
from vehicle_api.repositories import UserRepository
from vehicle_api.schemas.auth import CurrentUser

logger = logging.getLogger(__name__)


def load_principal(username: str) -> CurrentUser | None:
    """Load the user named in the token; roles come from the database, not the claim."""
    db = database.SessionLocal()
    try:
        user = UserRepository(db).find_by_username(username)
        if user is None:
            return None
        return CurrentUser(username=user.username, roles=user.roles)
    finally:
        db.close()


class JwtTokenFilter(BaseHTTPMiddleware):
    """
    Resolve 'Authorization: Bearer <jwt>', validate it and store the principal on
    request.state.principal. Requests without a token continue anonymously; an
    invalid token or unknown user is rejected with 401 before reaching the app.
    """

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request.state.principal = None
        token = resolve_token(request.headers.get("Authorization"))
        if token is not None:
            try:
                payload = validate_token(token)
            except InvalidJwtAuthenticationException as e:
                return unauthorized_response(e.message)
            username = get_username(payload)
            principal = await run_in_threadpool(load_principal, username)
            if principal is None:
                logger.info("Token subject no longer exists: %s", username)
                return unauthorized_response("User not found")
            logger.debug("Authenticated %s %s as %s", request.method, request.url.path, username)
            request.state.principal = principal
        return await call_next(request)
