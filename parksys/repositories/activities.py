"""Data access for park activities."""

from __future__ import annotations

from datetime import UTC
from typing import Any

from parksys.core.errors import ValidationFailedError
from parksys.models import Activity, User
from parksys.repositories.base import BaseRepository


class ActivityRepository(BaseRepository[Activity]):
    model = Activity
    label = "Activity"

    def search(
        self,
        park_id: int | None = None,
        category: str | None = None,
        offset: int = 0,
        limit: int = 100,
    ) -> list[Activity]:
        query = self.session.query(Activity)
        if park_id is not None:
            query = query.filter(Activity.park_id == park_id)
        if category:
            query = query.filter(Activity.category == category)
        return query.order_by(Activity.start_date.desc()).offset(offset).limit(limit).all()

    def create_activity(self, **fields: Any) -> Activity:
        self._check_references(fields)
        self._check_dates(fields.get("start_date"), fields.get("end_date"))
        return self.create(**fields)

    def update_activity(self, activity_id: int, **fields: Any) -> Activity:
        current = self.get_or_404(activity_id)
        self._check_references(fields)
        self._check_dates(
            fields.get("start_date", current.start_date),
            fields.get("end_date", current.end_date),
        )
        return self.update_fields(activity_id, **fields)

    def _check_references(self, fields: dict[str, Any]) -> None:
        self._require_park(fields.get("park_id"))
        self._require_row(User, fields.get("instructor_id"), "Instructor")

    @staticmethod
    def _check_dates(start, end) -> None:
        if start is not None and end is not None and _naive(end) < _naive(start):
            raise ValidationFailedError("end_date must not be before start_date")


def _naive(value):
    # SQLite hands back naive datetimes; compare on a common footing.
    return value.astimezone(UTC).replace(tzinfo=None) if value.tzinfo else value
