"""Lookup and creation of users."""

from sqlalchemy import select
from sqlalchemy.orm import Session

from vehicle_api.core.security import hash_password, normalize_role
from vehicle_api.models import User, UserRole


class UserRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def find_by_username(self, username: str) -> User | None:
        return self.session.scalar(select(User).where(User.username == username))

    def exists_by_username(self, username: str) -> bool:
        return self.find_by_username(username) is not None

    def create(self, username: str, password: str, roles: list[str]) -> User:
        """Persist a user with a bcrypt-hashed password and the given roles."""
        user = User(
            username=username,
            password_hash=hash_password(password),
            role_entries=[UserRole(role=r) for r in sorted({normalize_role(r) for r in roles})],
        )
        self.session.add(user)
        self.session.commit()
        self.session.refresh(user)
        return user
