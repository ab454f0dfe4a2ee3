"""Data access for parks, the amenity catalog and park amenities."""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import func, or_, select

from parksys.core.errors import NotFoundError, ValidationFailedError
from parksys.models import Activity, Amenity, Park, ParkAmenity
from parksys.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class ParkRepository(BaseRepository[Park]):
    model = Park
    label = "Park"

    def get_or_404(self, id_: int) -> Park:
        park = self.get(id_)
        if park is None or park.is_deleted:
            raise NotFoundError(f"Park {id_} not found")
        return park

    def search(
        self,
        municipality_id: int | None = None,
        park_type: str | None = None,
        postal_code: str | None = None,
        search: str | None = None,
        offset: int = 0,
        limit: int = 100,
    ) -> list[Park]:
        """Filter non-deleted parks; ``search`` matches name, description or address."""
        query = self.session.query(Park).filter(Park.is_deleted.is_(False))
        if municipality_id is not None:
            query = query.filter(Park.municipality_id == municipality_id)
        if park_type:
            query = query.filter(Park.park_type == park_type)
        if postal_code:
            query = query.filter(Park.postal_code == postal_code)
        if search:
            pattern = f"%{search.strip()}%"
            query = query.filter(
                or_(
                    Park.name.ilike(pattern),
                    func.coalesce(Park.description, "").ilike(pattern),
                    Park.address.ilike(pattern),
                )
            )
        return query.order_by(Park.name).offset(offset).limit(limit).all()

    def update_park(self, park_id: int, **fields: Any) -> Park:
        self.get_or_404(park_id)
        return self.update_fields(park_id, **fields)

    def soft_delete(self, park_id: int) -> Park:
        self.get_or_404(park_id)
        return self.update_fields(park_id, is_deleted=True)

    def amenities(self, park_id: int) -> list[tuple[ParkAmenity, Amenity]]:
        self.get_or_404(park_id)
        return (
            self.session.query(ParkAmenity, Amenity)
            .join(Amenity, Amenity.id == ParkAmenity.amenity_id)
            .filter(ParkAmenity.park_id == park_id)
            .order_by(Amenity.name)
            .all()
        )

    def add_amenity(self, park_id: int, amenity_id: int, **fields: Any) -> ParkAmenity:
        self.get_or_404(park_id)
        if self.session.get(Amenity, amenity_id) is None:
            raise NotFoundError(f"Amenity {amenity_id} not found")
        row = ParkAmenity(park_id=park_id, amenity_id=amenity_id, **fields)
        self.session.add(row)
        self.session.commit()
        self.session.refresh(row)
        return row

    def remove_amenity(self, park_id: int, park_amenity_id: int) -> None:
        deleted = (
            self.session.query(ParkAmenity)
            .filter(ParkAmenity.id == park_amenity_id, ParkAmenity.park_id == park_id)
            .delete(synchronize_session=False)
        )
        if deleted != 1:
            self.session.rollback()
            raise NotFoundError(f"Amenity {park_amenity_id} not found in park {park_id}")
        self.session.commit()

    def activities(self, park_id: int) -> list[Activity]:
        self.get_or_404(park_id)
        return (
            self.session.query(Activity)
            .filter(Activity.park_id == park_id)
            .order_by(Activity.start_date)
            .all()
        )


class AmenityRepository(BaseRepository[Amenity]):
    model = Amenity
    label = "Amenity"

    def list_all(self) -> list[Amenity]:
        return self.session.query(Amenity).order_by(Amenity.name).all()

    def usage_count(self, amenity_id: int) -> int:
        return (
            self.session.query(func.count(ParkAmenity.id))
            .filter(ParkAmenity.amenity_id == amenity_id)
            .scalar()
        )

    def delete(self, id_: int) -> None:
        """Delete a catalog entry; refused while any park still uses it."""
        in_use = self.usage_count(id_)
        if in_use:
            raise ValidationFailedError(
                "Amenity cannot be deleted because it is used by one or more parks"
            )
        super().delete(id_)

    def dashboard(self) -> dict[str, Any]:
        """Per-amenity park counts and overall utilization figures, over parks not deleted."""
        installed = (
            select(ParkAmenity.id, ParkAmenity.park_id, ParkAmenity.amenity_id)
            .join(Park, Park.id == ParkAmenity.park_id)
            .where(Park.is_deleted.is_(False))
            .subquery()
        )
        rows = (
            self.session.query(
                Amenity,
                func.count(func.distinct(installed.c.park_id)),
                func.count(installed.c.id),
            )
            .outerjoin(installed, installed.c.amenity_id == Amenity.id)
            .group_by(Amenity.id)
            .all()
        )
        total_parks = (
            self.session.query(func.count(Park.id)).filter(Park.is_deleted.is_(False)).scalar()
        )
        parks_with_amenities = (
            self.session.query(func.count(func.distinct(installed.c.park_id)))
            .select_from(installed)
            .scalar()
        )

        stats = []
        total_assignments = 0
        for amenity, parks_count, modules in rows:
            total_assignments += modules
            stats.append(
                {
                    "id": amenity.id,
                    "name": amenity.name,
                    "category": amenity.category,
                    "parks_count": parks_count,
                    "total_modules": modules,
                    "utilization_rate": round(parks_count * 100 / total_parks) if total_parks else 0,
                }
            )
        stats.sort(key=lambda s: (-s["parks_count"], s["name"]))

        return {
            "total_amenities": len(stats),
            "total_parks": total_parks,
            "parks_with_amenities": parks_with_amenities,
            "total_assignments": total_assignments,
            "average_amenities_per_park": (
                round(total_assignments / total_parks, 2) if total_parks else 0.0
            ),
            "most_popular": stats[:5],
            "amenities": stats,
        }
