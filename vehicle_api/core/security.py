"""Password hashing and JWT creation/verification for authentication."""

import logging
from datetime import UTC, datetime, timedelta
from typing import Any

import bcrypt
import jwt

from vehicle_api.core.config import settings
from vehicle_api.core.exceptions import InvalidJwtAuthenticationException

logger = logging.getLogger(__name__)

# Min/max lengths for username and password validation.
USERNAME_MIN_LEN = 1
USERNAME_MAX_LEN = 255
PASSWORD_MIN_LEN = 1
PASSWORD_MAX_LEN = 128

ROLE_PREFIX = "ROLE_"
ROLES_CLAIM = "roles"
BEARER_PREFIX = "bearer "


def hash_password(plain_password: str) -> str:
    """Hash a plain-text password for storage. Do not store plain passwords."""
    # bcrypt has a 72-byte limit; truncate to avoid errors (validation already limits length).
    pw_bytes = plain_password.encode("utf-8")[:72]
    return bcrypt.hashpw(pw_bytes, bcrypt.gensalt(rounds=settings.BCRYPT_ROUNDS)).decode("utf-8")


def verify_password(plain_password: str, hashed: str) -> bool:
    """Verify a plain password against a stored hash."""
    pw_bytes = plain_password.encode("utf-8")[:72]
    try:
        return bcrypt.checkpw(pw_bytes, hashed.encode("utf-8"))
    except (ValueError, TypeError):
        return False


def normalize_role(role: str) -> str:
    """'admin' -> 'ROLE_ADMIN'; already-prefixed roles are only upper-cased."""
    role = role.strip().upper()
    return role if role.startswith(ROLE_PREFIX) else ROLE_PREFIX + role


def create_access_token(username: str, roles: list[str]) -> str:
    """Create a JWT access token with sub (username), roles, iat and exp."""
    now = datetime.now(UTC)
    expire = now + timedelta(minutes=settings.JWT_EXPIRE_MINUTES)
    payload: dict[str, Any] = {
        "sub": username,
        ROLES_CLAIM: list(roles),
        "iat": now,
        "exp": expire,
    }
    secret = settings.JWT_SECRET.get_secret_value()
    return jwt.encode(
        payload,
        secret,
        algorithm=settings.JWT_ALGORITHM,
    )


def decode_access_token(token: str) -> dict[str, Any]:
    """
    Decode and validate JWT; return payload (sub, roles, exp, iat).
    Raises jwt.PyJWTError on invalid or expired token.
    """
    secret = settings.JWT_SECRET.get_secret_value()
    return jwt.decode(
        token,
        secret,
        algorithms=[settings.JWT_ALGORITHM],
        options={"require": ["sub", "exp"]},
    )


def resolve_token(authorization: str | None) -> str | None:
    """Extract the token from an 'Authorization: Bearer <token>' header value."""
    if not authorization:
        return None
    if authorization[: len(BEARER_PREFIX)].lower() != BEARER_PREFIX:
        return None
    token = authorization[len(BEARER_PREFIX) :].strip()
    return token or None


def validate_token(token: str) -> dict[str, Any]:
    """Return the payload of a valid token or raise InvalidJwtAuthenticationException."""
    try:
        payload = decode_access_token(token)
    except jwt.PyJWTError as e:
        logger.debug("Rejected JWT: %s", e)
        raise InvalidJwtAuthenticationException() from e
    if not get_username(payload):
        raise InvalidJwtAuthenticationException()
    return payload


def get_username(payload: dict[str, Any]) -> str | None:
    sub = payload.get("sub")
    return sub if isinstance(sub, str) and sub else None


def get_roles(payload: dict[str, Any]) -> list[str]:
    roles = payload.get(ROLES_CLAIM) or []
    if not isinstance(roles, list):
        return []
    return [r for r in roles if isinstance(r, str)]
