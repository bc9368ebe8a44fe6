"""Security filter chain: JWT authentication filter followed by access rules."""

from fastapi import FastAPI

from vehicle_api.security.access_rules import ACCESS_RULES, AccessRule, AuthorizationFilter
from vehicle_api.security.jwt_filter import JwtTokenFilter

__all__ = [
    "ACCESS_RULES",
    "AccessRule",
    "AuthorizationFilter",
    "JwtTokenFilter",
    "install_security_filters",
]


def install_security_filters(app: FastAPI, rules: list[AccessRule] | None = None) -> None:
    """
    Insert the chain into the middleware stack.

    Starlette runs the last added middleware first, so the token filter is added
    after the authorization filter to establish the principal before rules run.
    """
    app.add_middleware(AuthorizationFilter, rules=rules if rules is not None else ACCESS_RULES)
    app.add_middleware(JwtTokenFilter)
