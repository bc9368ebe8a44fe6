"""ORM models for application users and their granted roles."""

from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from vehicle_api.models.base import Base


class User(Base):
    """
    User account used as the authentication principal.

    Roles are stored one row per role in user_roles, e.g. ROLE_USER, ROLE_ADMIN.
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)

    role_entries = relationship(
        "UserRole",
        back_populates="user",
        cascade="all, delete-orphan",
        lazy="selectin",
    )

    @property
    def roles(self) -> list[str]:
        return sorted(entry.role for entry in self.role_entries)


class UserRole(Base):
    """One granted role of a user."""

    __tablename__ = "user_roles"

    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), primary_key=True)
    role = Column(String(64), primary_key=True)

    user = relationship("User", back_populates="role_entries")
