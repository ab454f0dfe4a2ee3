"""Data access for volunteers, including the one path that writes a volunteer's skills."""

from __future__ import annotations

from parksys.core.errors import ValidationFailedError
from parksys.models import User, Volunteer
from parksys.models.volunteer import VOLUNTEER_STATUSES
from parksys.repositories.base import BaseRepository


class VolunteerRepository(BaseRepository[Volunteer]):
    model = Volunteer
    label = "Volunteer"

    def list_active(self, offset: int = 0, limit: int = 100) -> list[Volunteer]:
        return (
            self.session.query(Volunteer)
            .filter(Volunteer.status == "active")
            .order_by(Volunteer.id.desc())
            .offset(offset)
            .limit(limit)
            .all()
        )

    def get_by_user_id(self, user_id: int) -> Volunteer | None:
        return self.session.query(Volunteer).filter(Volunteer.user_id == user_id).first()

    def update_skills(self, volunteer_id: int, skills: str) -> Volunteer:
        """Replace the free-text skills of one volunteer."""
        return self.update_fields(volunteer_id, skills=skills.strip())

    def create_volunteer(self, **fields) -> Volunteer:
        _check_status(fields.get("status", "active"))
        self._check_references(fields)
        return self.create(**fields)

    def update_profile(self, volunteer_id: int, **fields) -> Volunteer:
        if "status" in fields:
            _check_status(fields["status"])
        self.get_or_404(volunteer_id)
        self._check_references(fields)
        return self.update_fields(volunteer_id, **fields)

    def set_status(self, volunteer_id: int, status: str) -> Volunteer:
        _check_status(status)
        return self.update_fields(volunteer_id, status=status)

    def soft_delete(self, volunteer_id: int) -> Volunteer:
        return self.update_fields(volunteer_id, status="inactive")

    def _check_references(self, fields) -> None:
        self._require_row(User, fields.get("user_id"), "User")
        self._require_park(fields.get("preferred_park_id"))


def _check_status(status: str) -> None:
    if status not in VOLUNTEER_STATUSES:
        raise ValidationFailedError(
            f"Invalid status {status!r}; must be one of {', '.join(VOLUNTEER_STATUSES)}"
        )
