"""Unit tests for vehicle_api.core.security: bcrypt hashing, token issuance and validation."""

import unittest
from datetime import UTC, datetime, timedelta

import jwt

from vehicle_api.core.config import settings
from vehicle_api.core.exceptions import InvalidJwtAuthenticationException
from vehicle_api.core.security import (
    create_access_token,
    decode_access_token,
    get_roles,
    get_username,
    hash_password,
    normalize_role,
    resolve_token,
    validate_token,
    verify_password,
)


def _encode(payload: dict, secret: str | None = None) -> str:
    return jwt.encode(
        payload,
        secret or settings.JWT_SECRET.get_secret_value(),
        algorithm=settings.JWT_ALGORITHM,
    )


class TestPasswordHashing(unittest.TestCase):
    def test_hash_is_not_plain_and_verifies(self) -> None:
        hashed = hash_password("password")
        self.assertNotEqual(hashed, "password")
        self.assertTrue(verify_password("password", hashed))

    def test_wrong_password_fails(self) -> None:
        self.assertFalse(verify_password("nope", hash_password("password")))

    def test_malformed_hash_returns_false(self) -> None:
        self.assertFalse(verify_password("password", "not-a-bcrypt-hash"))


class TestCreateAccessToken(unittest.TestCase):
    """Tokens carry sub, roles, iat and exp, signed with HS256."""

    def test_claims(self) -> None:
        token = create_access_token("admin", ["ROLE_USER", "ROLE_ADMIN"])
        payload = decode_access_token(token)
        self.assertEqual(payload["sub"], "admin")
        self.assertEqual(payload["roles"], ["ROLE_USER", "ROLE_ADMIN"])
        self.assertIn("iat", payload)
        self.assertEqual(
            payload["exp"] - payload["iat"], settings.JWT_EXPIRE_MINUTES * 60
        )

    def test_header_algorithm(self) -> None:
        header = jwt.get_unverified_header(create_access_token("user", ["ROLE_USER"]))
        self.assertEqual(header["alg"], "HS256")


class TestValidateToken(unittest.TestCase):
    def test_valid_token_returns_payload(self) -> None:
        payload = validate_token(create_access_token("user", ["ROLE_USER"]))
        self.assertEqual(get_username(payload), "user")
        self.assertEqual(get_roles(payload), ["ROLE_USER"])

    def test_expired_token_rejected(self) -> None:
        past = datetime.now(UTC) - timedelta(hours=2)
        token = _encode({"sub": "user", "roles": [], "iat": past, "exp": past + timedelta(minutes=1)})
        with self.assertRaises(InvalidJwtAuthenticationException) as ctx:
            validate_token(token)
        self.assertEqual(ctx.exception.message, "Expired or invalid JWT token")

    def test_wrong_signature_rejected(self) -> None:
        exp = datetime.now(UTC) + timedelta(minutes=5)
        token = _encode({"sub": "user", "exp": exp}, secret="another-secret-of-sufficient-length!")
        with self.assertRaises(InvalidJwtAuthenticationException):
            validate_token(token)

    def test_garbage_rejected(self) -> None:
        with self.assertRaises(InvalidJwtAuthenticationException):
            validate_token("not.a.jwt")

    def test_missing_subject_rejected(self) -> None:
        token = _encode({"roles": [], "exp": datetime.now(UTC) + timedelta(minutes=5)})
        with self.assertRaises(InvalidJwtAuthenticationException):
            validate_token(token)

    def test_missing_expiry_rejected(self) -> None:
        with self.assertRaises(InvalidJwtAuthenticationException):
            validate_token(_encode({"sub": "user"}))


class TestResolveToken(unittest.TestCase):
    def test_bearer_header(self) -> None:
        self.assertEqual(resolve_token("Bearer abc.def.ghi"), "abc.def.ghi")

    def test_scheme_is_case_insensitive(self) -> None:
        self.assertEqual(resolve_token("bearer abc"), "abc")

    def test_missing_or_other_scheme(self) -> None:
        self.assertIsNone(resolve_token(None))
        self.assertIsNone(resolve_token(""))
        self.assertIsNone(resolve_token("Basic dXNlcjpwYXNz"))
        self.assertIsNone(resolve_token("Bearer "))


class TestClaimAccessors(unittest.TestCase):
    def test_roles_not_a_list(self) -> None:
        self.assertEqual(get_roles({"roles": "ROLE_ADMIN"}), [])

    def test_roles_filters_non_strings(self) -> None:
        self.assertEqual(get_roles({"roles": ["ROLE_USER", 3]}), ["ROLE_USER"])

    def test_username_must_be_string(self) -> None:
        self.assertIsNone(get_username({"sub": 42}))
        self.assertIsNone(get_username({}))


class TestNormalizeRole(unittest.TestCase):
    def test_prefixes_bare_names(self) -> None:
        self.assertEqual(normalize_role("admin"), "ROLE_ADMIN")

    def test_keeps_prefixed_roles(self) -> None:
        self.assertEqual(normalize_role("role_user"), "ROLE_USER")
        self.assertEqual(normalize_role(" ROLE_ADMIN "), "ROLE_ADMIN")


if __name__ == "__main__":
    unittest.main()
