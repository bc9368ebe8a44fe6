"""HTTP tests for sign-in, /me and the JWT token filter."""

import unittest
from datetime import UTC, datetime, timedelta

import jwt

from vehicle_api.core.config import settings
from vehicle_api.core.database import SessionLocal
from vehicle_api.core.security import create_access_token, decode_access_token
from vehicle_api.repositories import UserRepository

from tests.api_case import ApiTestCase


class TestSignin(ApiTestCase):
    def test_returns_username_and_token(self) -> None:
        response = self.client.post(
            "/auth/signin", json={"username": "admin", "password": "password"}
        )
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["username"], "admin")
        payload = decode_access_token(body["token"])
        self.assertEqual(payload["sub"], "admin")
        self.assertEqual(payload["roles"], ["ROLE_ADMIN", "ROLE_USER"])

    def test_wrong_password(self) -> None:
        response = self.client.post(
            "/auth/signin", json={"username": "user", "password": "wrong"}
        )
        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.json()["detail"], "Invalid username/password supplied")

    def test_unknown_user(self) -> None:
        response = self.client.post(
            "/auth/signin", json={"username": "ghost", "password": "password"}
        )
        self.assertEqual(response.status_code, 401)

    def test_missing_fields(self) -> None:
        response = self.client.post("/auth/signin", json={"username": "user"})
        self.assertEqual(response.status_code, 422)


class TestMe(ApiTestCase):
    def test_returns_principal(self) -> None:
        response = self.client.get("/me", headers=self.auth_headers("admin"))
        self.assertEqual(response.status_code, 200)
        self.assertEqual(
            response.json(), {"username": "admin", "roles": ["ROLE_ADMIN", "ROLE_USER"]}
        )

    def test_anonymous_is_unauthorized(self) -> None:
        response = self.client.get("/me")
        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.headers["www-authenticate"], "Bearer")
        self.assertEqual(response.json()["detail"], "Not authenticated")


class TestJwtTokenFilter(ApiTestCase):
    """Invalid tokens are rejected before reaching any route, public ones included."""

    def test_invalid_token(self) -> None:
        response = self.client.get("/me", headers={"Authorization": "Bearer garbage"})
        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.json()["detail"], "Expired or invalid JWT token")
        self.assertEqual(response.headers["www-authenticate"], "Bearer")

    def test_invalid_token_on_public_route(self) -> None:
        response = self.client.get("/v1/vehicles", headers={"Authorization": "Bearer garbage"})
        self.assertEqual(response.status_code, 401)

    def test_expired_token(self) -> None:
        past = datetime.now(UTC) - timedelta(hours=3)
        token = jwt.encode(
            {"sub": "user", "roles": ["ROLE_USER"], "iat": past, "exp": past + timedelta(hours=1)},
            settings.JWT_SECRET.get_secret_value(),
            algorithm=settings.JWT_ALGORITHM,
        )
        response = self.client.get("/me", headers={"Authorization": f"Bearer {token}"})
        self.assertEqual(response.status_code, 401)

    def test_deleted_user(self) -> None:
        headers = self.auth_headers("user")
        db = SessionLocal()
        try:
            users = UserRepository(db)
            db.delete(users.find_by_username("user"))
            db.commit()
        finally:
            db.close()
        response = self.client.get("/me", headers=headers)
        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.json()["detail"], "User not found")

    def test_roles_come_from_database_not_claim(self) -> None:
        token = create_access_token("user", ["ROLE_USER", "ROLE_ADMIN"])
        response = self.client.get("/me", headers={"Authorization": f"Bearer {token}"})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["roles"], ["ROLE_USER"])

    def test_non_bearer_scheme_is_anonymous(self) -> None:
        response = self.client.get("/me", headers={"Authorization": "Basic dXNlcjpwYXNz"})
        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.json()["detail"], "Not authenticated")


if __name__ == "__main__":
    unittest.main()
