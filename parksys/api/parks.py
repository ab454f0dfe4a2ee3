"""Park endpoints: CRUD, installed amenities and scheduled activities."""

from fastapi import APIRouter, Response, status

from parksys.api.deps import AdminUser, DbSession, Limit, Offset
from parksys.models import Amenity, ParkAmenity
from parksys.repositories import ParkRepository
from parksys.schemas.activity import ActivityOut
from parksys.schemas.common import ApiResponse
from parksys.schemas.park import (
    ParkAmenityCreate,
    ParkAmenityOut,
    ParkCreate,
    ParkOut,
    ParkUpdate,
)

router = APIRouter()


def _park_amenity_out(row: ParkAmenity, amenity: Amenity) -> ParkAmenityOut:
    return ParkAmenityOut(
        id=row.id,
        park_id=row.park_id,
        amenity_id=row.amenity_id,
        amenity_name=amenity.name,
        amenity_icon=amenity.icon,
        module_name=row.module_name,
        surface_area=row.surface_area,
        status=row.status,
        description=row.description,
    )


@router.get("", response_model=list[ParkOut])
def list_parks(
    db: DbSession,
    municipality_id: int | None = None,
    park_type: str | None = None,
    postal_code: str | None = None,
    search: str | None = None,
    offset: Offset = 0,
    limit: Limit = 100,
) -> list[ParkOut]:
    parks = ParkRepository(db).search(
        municipality_id=municipality_id,
        park_type=park_type,
        postal_code=postal_code,
        search=search,
        offset=offset,
        limit=limit,
    )
    return [ParkOut.model_validate(p) for p in parks]


@router.get("/{park_id}", response_model=ParkOut)
def get_park(park_id: int, db: DbSession) -> ParkOut:
    return ParkOut.model_validate(ParkRepository(db).get_or_404(park_id))


@router.post("", response_model=ParkOut, status_code=status.HTTP_201_CREATED)
def create_park(body: ParkCreate, _admin: AdminUser, db: DbSession) -> ParkOut:
    park = ParkRepository(db).create(**body.model_dump(exclude_none=True))
    return ParkOut.model_validate(park)


@router.put("/{park_id}", response_model=ApiResponse[ParkOut])
def update_park(park_id: int, body: ParkUpdate, _admin: AdminUser, db: DbSession) -> ApiResponse[ParkOut]:
    park = ParkRepository(db).update_park(park_id, **body.model_dump(exclude_unset=True))
    return ApiResponse(message="Park updated", data=ParkOut.model_validate(park))


@router.delete("/{park_id}", response_model=ApiResponse[ParkOut])
def delete_park(park_id: int, _admin: AdminUser, db: DbSession) -> ApiResponse[ParkOut]:
    park = ParkRepository(db).soft_delete(park_id)
    return ApiResponse(message="Park deleted", data=ParkOut.model_validate(park))


@router.get("/{park_id}/amenities", response_model=list[ParkAmenityOut])
def list_park_amenities(park_id: int, db: DbSession) -> list[ParkAmenityOut]:
    return [_park_amenity_out(row, amenity) for row, amenity in ParkRepository(db).amenities(park_id)]


@router.post(
    "/{park_id}/amenities",
    response_model=ParkAmenityOut,
    status_code=status.HTTP_201_CREATED,
)
def add_park_amenity(
    park_id: int,
    body: ParkAmenityCreate,
    _admin: AdminUser,
    db: DbSession,
) -> ParkAmenityOut:
    fields = body.model_dump()
    amenity_id = fields.pop("amenity_id")
    row = ParkRepository(db).add_amenity(park_id, amenity_id, **fields)
    return _park_amenity_out(row, db.get(Amenity, amenity_id))


@router.delete("/{park_id}/amenities/{park_amenity_id}", status_code=status.HTTP_204_NO_CONTENT)
def remove_park_amenity(park_id: int, park_amenity_id: int, _admin: AdminUser, db: DbSession) -> Response:
    ParkRepository(db).remove_amenity(park_id, park_amenity_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{park_id}/activities", response_model=list[ActivityOut])
def list_park_activities(park_id: int, db: DbSession) -> list[ActivityOut]:
    return [ActivityOut.model_validate(a) for a in ParkRepository(db).activities(park_id)]
