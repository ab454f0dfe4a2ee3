"""Data access for advertisements."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import or_

from parksys.core.errors import ValidationFailedError
from parksys.models import Advertisement
from parksys.models.advertisement import AD_STATUSES
from parksys.models.base import utcnow
from parksys.repositories.base import BaseRepository


class AdvertisementRepository(BaseRepository[Advertisement]):
    model = Advertisement
    label = "Advertisement"

    def search(self, status: str | None = None, offset: int = 0, limit: int = 100) -> list[Advertisement]:
        query = self.session.query(Advertisement)
        if status:
            if status not in AD_STATUSES:
                raise ValidationFailedError(f"Unknown advertisement status {status!r}")
            query = query.filter(Advertisement.status == status)
        return query.order_by(Advertisement.id.desc()).offset(offset).limit(limit).all()

    def list_active(self, now: datetime | None = None) -> list[Advertisement]:
        """Active ads whose date window (open-ended on either side) contains ``now``."""
        now = now or utcnow()
        return (
            self.session.query(Advertisement)
            .filter(
                Advertisement.status == "active",
                or_(Advertisement.start_date.is_(None), Advertisement.start_date <= now),
                or_(Advertisement.end_date.is_(None), Advertisement.end_date >= now),
            )
            .order_by(Advertisement.id)
            .all()
        )
