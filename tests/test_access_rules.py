"""Unit tests for vehicle_api.security.access_rules: ant matching, rule order and decisions."""

import unittest

from vehicle_api.schemas.auth import CurrentUser
from vehicle_api.security.access_rules import (
    ACCESS_RULES,
    Access,
    AccessRule,
    ant_pattern_to_regex,
    decide,
    find_rule,
    has_role,
)

USER = CurrentUser(username="user", roles=["ROLE_USER"])
ADMIN = CurrentUser(username="admin", roles=["ROLE_ADMIN", "ROLE_USER"])


class TestAntPattern(unittest.TestCase):
    def test_double_star_matches_prefix_and_below(self) -> None:
        regex = ant_pattern_to_regex("/vehicles/**")
        for path in ("/vehicles", "/vehicles/", "/vehicles/1", "/vehicles/1/owner"):
            self.assertIsNotNone(regex.match(path), path)
        self.assertIsNone(regex.match("/v1/vehicles/1"))
        self.assertIsNone(regex.match("/vehiclesx"))

    def test_single_star_matches_one_segment(self) -> None:
        regex = ant_pattern_to_regex("/v1/*/items")
        self.assertIsNotNone(regex.match("/v1/abc/items"))
        self.assertIsNone(regex.match("/v1/a/b/items"))

    def test_literal_dot_is_escaped(self) -> None:
        regex = ant_pattern_to_regex("/openapi.json")
        self.assertIsNotNone(regex.match("/openapi.json"))
        self.assertIsNone(regex.match("/openapixjson"))


class TestRuleOrder(unittest.TestCase):
    """First matching rule wins."""

    def test_signin_is_public(self) -> None:
        self.assertIs(find_rule(ACCESS_RULES, "POST", "/auth/signin").access, Access.PERMIT_ALL)

    def test_get_vehicles_is_public(self) -> None:
        self.assertIs(find_rule(ACCESS_RULES, "GET", "/vehicles/1").access, Access.PERMIT_ALL)
        self.assertIs(find_rule(ACCESS_RULES, "GET", "/v1/vehicles").access, Access.PERMIT_ALL)

    def test_delete_vehicle_entity_needs_admin(self) -> None:
        rule = find_rule(ACCESS_RULES, "DELETE", "/vehicles/1")
        self.assertIs(rule.access, Access.HAS_ROLE)
        self.assertEqual(rule.role, "ADMIN")

    def test_delete_v1_vehicle_only_authenticated(self) -> None:
        self.assertIs(find_rule(ACCESS_RULES, "DELETE", "/v1/vehicles/1").access, Access.AUTHENTICATED)

    def test_everything_else_authenticated(self) -> None:
        self.assertIs(find_rule(ACCESS_RULES, "GET", "/me").access, Access.AUTHENTICATED)
        self.assertIs(find_rule(ACCESS_RULES, "POST", "/vehicles").access, Access.AUTHENTICATED)

    def test_method_match_is_case_insensitive(self) -> None:
        rule = AccessRule("/x", Access.PERMIT_ALL, method="get")
        self.assertTrue(rule.matches("GET", "/x"))
        self.assertFalse(rule.matches("POST", "/x"))


class TestDecide(unittest.TestCase):
    def test_permit_all_allows_anonymous(self) -> None:
        self.assertIsNone(decide(AccessRule("/**", Access.PERMIT_ALL), None))

    def test_authenticated_rejects_anonymous_with_401(self) -> None:
        self.assertEqual(decide(AccessRule("/**", Access.AUTHENTICATED), None), 401)
        self.assertIsNone(decide(AccessRule("/**", Access.AUTHENTICATED), USER))

    def test_no_rule_requires_authentication(self) -> None:
        self.assertEqual(decide(None, None), 401)
        self.assertIsNone(decide(None, USER))

    def test_role_rule(self) -> None:
        rule = has_role("/vehicles/**", "ADMIN")
        self.assertEqual(decide(rule, None), 401)
        self.assertEqual(decide(rule, USER), 403)
        self.assertIsNone(decide(rule, ADMIN))

    def test_role_rule_requires_role(self) -> None:
        with self.assertRaises(ValueError):
            AccessRule("/x", Access.HAS_ROLE)


class TestCurrentUserHasRole(unittest.TestCase):
    def test_bare_lower_and_prefixed_names_are_equivalent(self) -> None:
        for role in ("ADMIN", "admin", "ROLE_ADMIN", " role_admin "):
            self.assertTrue(ADMIN.has_role(role), role)

    def test_missing_role(self) -> None:
        self.assertFalse(USER.has_role("ADMIN"))
        self.assertFalse(USER.has_role("ROLE_ADMIN"))


if __name__ == "__main__":
    unittest.main()
