"""
Create a user (e.g. an extra admin). Run from project root:
  python -m vehicle_api.scripts.create_user USERNAME PASSWORD [ROLE ...]
Example:
  python -m vehicle_api.scripts.create_user alice your-secure-password USER ADMIN
"""
import argparse
import sys

from vehicle_api.core.database import SessionLocal, create_tables
from vehicle_api.core.security import (
    PASSWORD_MAX_LEN,
    PASSWORD_MIN_LEN,
    USERNAME_MAX_LEN,
    normalize_role,
)
from vehicle_api.repositories import UserRepository


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a Vehicle API user (no registration endpoint).")
    parser.add_argument("username", help=f"Username (1-{USERNAME_MAX_LEN} chars)")
    parser.add_argument("password", help=f"Password ({PASSWORD_MIN_LEN}-{PASSWORD_MAX_LEN} chars)")
    parser.add_argument("roles", nargs="*", default=["USER"], help="Roles, e.g. USER ADMIN (default: USER)")
    args = parser.parse_args(argv)

    username = args.username.strip()
    if not username or len(username) > USERNAME_MAX_LEN:
        print("Invalid username length.", file=sys.stderr)
        return 1
    if not (PASSWORD_MIN_LEN <= len(args.password) <= PASSWORD_MAX_LEN):
        print(f"Password must be {PASSWORD_MIN_LEN}-{PASSWORD_MAX_LEN} characters.", file=sys.stderr)
        return 1
    roles = sorted({normalize_role(r) for r in args.roles if r.strip()})
    if not roles:
        print("At least one role is required.", file=sys.stderr)
        return 1

    create_tables()
    db = SessionLocal()
    try:
        users = UserRepository(db)
        if users.exists_by_username(username):
            print(f"User '{username}' already exists.", file=sys.stderr)
            return 1
        users.create(username, args.password, roles)
        print(f"Created user '{username}' with roles {', '.join(roles)}.")
        return 0
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
