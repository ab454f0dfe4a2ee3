"""Amenity catalog endpoints."""

from fastapi import APIRouter, Response, status

from parksys.api.deps import AdminUser, DbSession
from parksys.repositories import AmenityRepository
from parksys.schemas.common import ApiResponse
from parksys.schemas.park import AmenityDashboard, AmenityIn, AmenityOut

router = APIRouter()
# The admin UI posts to /amenities without the API prefix.
legacy_router = APIRouter()


@router.get("", response_model=list[AmenityOut])
def list_amenities(db: DbSession) -> list[AmenityOut]:
    return [AmenityOut.model_validate(a) for a in AmenityRepository(db).list_all()]


@router.get("/dashboard", response_model=AmenityDashboard)
def amenities_dashboard(db: DbSession) -> AmenityDashboard:
    return AmenityDashboard.model_validate(AmenityRepository(db).dashboard())


@legacy_router.post("/amenities", response_model=AmenityOut, status_code=status.HTTP_201_CREATED)
@router.post("", response_model=AmenityOut, status_code=status.HTTP_201_CREATED)
def create_amenity(body: AmenityIn, _admin: AdminUser, db: DbSession) -> AmenityOut:
    """Duplicate names are rejected with 409."""
    amenity = AmenityRepository(db).create(**body.model_dump())
    return AmenityOut.model_validate(amenity)


@legacy_router.put("/amenities/{amenity_id}", response_model=ApiResponse[AmenityOut])
@router.put("/{amenity_id}", response_model=ApiResponse[AmenityOut])
def update_amenity(
    amenity_id: int,
    body: AmenityIn,
    _admin: AdminUser,
    db: DbSession,
) -> ApiResponse[AmenityOut]:
    amenity = AmenityRepository(db).update_fields(amenity_id, **body.model_dump())
    return ApiResponse(message="Amenity updated", data=AmenityOut.model_validate(amenity))


@router.delete("/{amenity_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_amenity(amenity_id: int, _admin: AdminUser, db: DbSession) -> Response:
    AmenityRepository(db).delete(amenity_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
