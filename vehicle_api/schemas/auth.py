"""Request/response schemas for auth endpoints."""

from pydantic import BaseModel, Field

from vehicle_api.core.security import normalize_role


class AuthenticationRequest(BaseModel):
    """Credentials for sign-in."""

    username: str = Field(..., min_length=1, max_length=255, description="Username")
    password: str = Field(..., min_length=1, max_length=128, description="Password")


class AuthenticationResponse(BaseModel):
    """JWT returned after successful sign-in. Send it as 'Authorization: Bearer <token>'."""

    username: str = Field(..., description="Authenticated username")
    token: str = Field(..., description="JWT access token")


class CurrentUser(BaseModel):
    """Authenticated principal (username and granted roles) established by the JWT filter."""

    username: str
    roles: list[str] = Field(default_factory=list)

    def has_role(self, role: str) -> bool:
        """True if the principal holds the role; "ADMIN", "admin" and "ROLE_ADMIN" are equivalent."""
        return normalize_role(role) in self.roles


class UserInfoResponse(BaseModel):
    """Response for GET /me."""

    username: str
    roles: list[str]
