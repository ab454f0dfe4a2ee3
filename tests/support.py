"""Shared builders for tests: in-memory database, settings and seeded rows."""

from datetime import UTC, datetime

from pydantic import SecretStr
from sqlalchemy.pool import StaticPool

from parksys.core.config import Settings
from parksys.core.database import Database
from parksys.core.security import create_access_token
from parksys.models import Base, Park, User, Volunteer
from parksys.repositories import UserRepository


def make_settings(**overrides: object) -> Settings:
    values: dict[str, object] = {
        "APP_ENV": "dev",
        "JWT_SECRET": SecretStr("test-secret"),
        "LOG_LEVEL": "WARNING",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


def make_database() -> Database:
    """SQLite in memory, one shared connection so every session sees the same data."""
    database = Database(
        "sqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    Base.metadata.create_all(database.engine)
    return database


def seed_user(session, username: str = "Luis", password: str = "temp123", role: str = "admin", **fields) -> User:
    is_active = fields.pop("is_active", True)
    repo = UserRepository(session)
    user = repo.create_user(username=username, password=password, role=role, **fields)
    if not is_active:
        user = repo.update_fields(user.id, is_active=False)
    return user


def seed_park(session, name: str = "Parque Agua Azul", **fields) -> Park:
    park = Park(name=name, address=fields.pop("address", "Calz. Independencia Sur"), **fields)
    session.add(park)
    session.commit()
    return park


def seed_volunteer(session, **fields) -> Volunteer:
    fields.setdefault("full_name", "María López")
    fields.setdefault("skills", "Jardinería")
    volunteer = Volunteer(**fields)
    session.add(volunteer)
    session.commit()
    return volunteer


def auth_header(user: User, settings: Settings) -> dict[str, str]:
    token = create_access_token(sub=user.id, role=user.role, settings=settings)
    return {"Authorization": f"Bearer {token}"}


def aware(value: datetime) -> datetime:
    return value if value.tzinfo else value.replace(tzinfo=UTC)
