"""Ordered URL access rules (first match wins) and the filter that enforces them."""

import logging
import re
from dataclasses import dataclass, field
from enum import Enum

from fastapi import status
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, Response
from starlette.types import ASGIApp

from vehicle_api.core.exceptions import unauthorized_response
from vehicle_api.schemas.auth import CurrentUser

logger = logging.getLogger(__name__)


class Access(str, Enum):
    PERMIT_ALL = "permit_all"
    AUTHENTICATED = "authenticated"
    HAS_ROLE = "has_role"


def ant_pattern_to_regex(pattern: str) -> re.Pattern[str]:
    """
    Compile an ant-style path pattern.
    '/**' matches the prefix itself and anything below it; '*' matches one path segment.
    """
    out = []
    i = 0
    while i < len(pattern):
        if pattern.startswith("/**", i):
            out.append("(?:/.*)?")
            i += 3
        elif pattern.startswith("**", i):
            out.append(".*")
            i += 2
        elif pattern[i] == "*":
            out.append("[^/]*")
            i += 1
        else:
            out.append(re.escape(pattern[i]))
            i += 1
    return re.compile("^" + "".join(out) + "/?$")


@dataclass
class AccessRule:
    """Access decision for requests matching method (None = any) and an ant path pattern."""

    pattern: str
    access: Access
    method: str | None = None
    role: str | None = None
    _regex: re.Pattern[str] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.access is Access.HAS_ROLE and not self.role:
            raise ValueError("HAS_ROLE rules need a role")
        self._regex = ant_pattern_to_regex(self.pattern)

    def matches(self, method: str, path: str) -> bool:
        if self.method is not None and self.method.upper() != method.upper():
            return False
        return self._regex.match(path) is not None


def permit_all(pattern: str, method: str | None = None) -> AccessRule:
    return AccessRule(pattern, Access.PERMIT_ALL, method)


def authenticated(pattern: str, method: str | None = None) -> AccessRule:
    return AccessRule(pattern, Access.AUTHENTICATED, method)


def has_role(pattern: str, role: str, method: str | None = None) -> AccessRule:
    return AccessRule(pattern, Access.HAS_ROLE, method, role)


ACCESS_RULES: list[AccessRule] = [
    permit_all("/auth/signin"),
    permit_all("/"),
    permit_all("/health/**"),
    permit_all("/docs/**"),
    permit_all("/redoc/**"),
    permit_all("/openapi.json"),
    permit_all("/vehicles/**", method="GET"),
    has_role("/vehicles/**", "ADMIN", method="DELETE"),
    permit_all("/v1/vehicles/**", method="GET"),
    authenticated("/**"),
]


def find_rule(rules: list[AccessRule], method: str, path: str) -> AccessRule | None:
    for rule in rules:
        if rule.matches(method, path):
            return rule
    return None


def decide(rule: AccessRule | None, principal: CurrentUser | None) -> int | None:
    """Return None to allow, else the HTTP status to reject with (401 or 403)."""
    if rule is None or rule.access is Access.AUTHENTICATED:
        return None if principal is not None else status.HTTP_401_UNAUTHORIZED
    if rule.access is Access.PERMIT_ALL:
        return None
    if principal is None:
        return status.HTTP_401_UNAUTHORIZED
    return None if principal.has_role(rule.role) else status.HTTP_403_FORBIDDEN


class AuthorizationFilter(BaseHTTPMiddleware):
    """Apply the first matching rule to the principal set by JwtTokenFilter."""

    def __init__(self, app: ASGIApp, rules: list[AccessRule]) -> None:
        super().__init__(app)
        self.rules = rules

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        principal = getattr(request.state, "principal", None)
        rule = find_rule(self.rules, request.method, request.url.path)
        rejection = decide(rule, principal)
        if rejection == status.HTTP_401_UNAUTHORIZED:
            logger.debug("Unauthenticated %s %s", request.method, request.url.path)
            return unauthorized_response("Not authenticated")
        if rejection == status.HTTP_403_FORBIDDEN:
            logger.info(
                "Access denied for %s on %s %s", principal.username, request.method, request.url.path
            )
            return JSONResponse(
                status_code=status.HTTP_403_FORBIDDEN,
                content={"detail": "Access is denied"},
            )
        return await call_next(request)
