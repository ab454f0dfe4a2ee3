"""ORM model for application users (auth and RBAC)."""

from sqlalchemy import Boolean, Column, Integer, String

from parksys.models.base import Base, TimestampMixin

ROLES = (
    "super_admin",
    "admin",
    "director",
    "manager",
    "editor",
    "instructor",
    "volunteer",
    "user",
)
ADMIN_ROLES = frozenset({"admin", "super_admin"})


class User(TimestampMixin, Base):
    """
    User account for JWT authentication and role-based access control.

    Never hard-deleted; is_active=False hides the account and blocks login.
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(255), nullable=False, unique=True, index=True)
    email = Column(String(255), nullable=True, unique=True, index=True)
    full_name = Column(String(255), nullable=True)
    role = Column(String(32), nullable=False, default="user")
    municipality_id = Column(Integer, nullable=True)
    password_hash = Column(String(255), nullable=False)
    is_active = Column(Boolean, nullable=False, default=True)
