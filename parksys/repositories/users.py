"""Data access for user accounts."""

from __future__ import annotations

from sqlalchemy import func, or_

from parksys.core.security import hash_password
from parksys.models import User
from parksys.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    model = User
    label = "User"

    def get_by_username(self, username: str) -> User | None:
        return self.session.query(User).filter(User.username == username).first()

    def get_by_login(self, identifier: str) -> User | None:
        """Match on username, or on email case-insensitively."""
        return (
            self.session.query(User)
            .filter(
                or_(
                    User.username == identifier,
                    func.lower(User.email) == identifier.lower(),
                )
            )
            .order_by(User.id)
            .first()
        )

    def create_user(
        self,
        username: str,
        password: str,
        role: str = "user",
        email: str | None = None,
        full_name: str | None = None,
        municipality_id: int | None = None,
    ) -> User:
        return self.create(
            username=username,
            email=email,
            full_name=full_name,
            role=role,
            municipality_id=municipality_id,
            password_hash=hash_password(password),
            is_active=True,
        )
