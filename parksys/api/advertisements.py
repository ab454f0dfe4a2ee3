"""Advertising endpoints: admin management plus the public feed of running ads."""

from fastapi import APIRouter, Response, status

from parksys.api.deps import AdminUser, AuthUser, DbSession, Limit, Offset
from parksys.repositories import AdvertisementRepository
from parksys.schemas.advertisement import (
    AdvertisementCreate,
    AdvertisementOut,
    AdvertisementUpdate,
)
from parksys.schemas.common import ApiResponse

router = APIRouter()
public_router = APIRouter()


@public_router.get("/ads", response_model=list[AdvertisementOut])
def public_ads(db: DbSession) -> list[AdvertisementOut]:
    """Ads currently running; no authentication."""
    return [AdvertisementOut.model_validate(a) for a in AdvertisementRepository(db).list_active()]


@router.get("", response_model=list[AdvertisementOut])
def list_advertisements(
    _user: AuthUser,
    db: DbSession,
    status: str | None = None,
    offset: Offset = 0,
    limit: Limit = 100,
) -> list[AdvertisementOut]:
    rows = AdvertisementRepository(db).search(status=status, offset=offset, limit=limit)
    return [AdvertisementOut.model_validate(a) for a in rows]


@router.get("/{ad_id}", response_model=AdvertisementOut)
def get_advertisement(ad_id: int, _user: AuthUser, db: DbSession) -> AdvertisementOut:
    return AdvertisementOut.model_validate(AdvertisementRepository(db).get_or_404(ad_id))


@router.post("", response_model=AdvertisementOut, status_code=status.HTTP_201_CREATED)
def create_advertisement(body: AdvertisementCreate, admin: AdminUser, db: DbSession) -> AdvertisementOut:
    ad = AdvertisementRepository(db).create(created_by=admin.id, **body.model_dump(exclude_none=True))
    return AdvertisementOut.model_validate(ad)


@router.put("/{ad_id}", response_model=ApiResponse[AdvertisementOut])
def update_advertisement(
    ad_id: int,
    body: AdvertisementUpdate,
    _admin: AdminUser,
    db: DbSession,
) -> ApiResponse[AdvertisementOut]:
    ad = AdvertisementRepository(db).update_fields(ad_id, **body.model_dump(exclude_unset=True))
    return ApiResponse(message="Advertisement updated", data=AdvertisementOut.model_validate(ad))


@router.delete("/{ad_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_advertisement(ad_id: int, _admin: AdminUser, db: DbSession) -> Response:
    AdvertisementRepository(db).delete(ad_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
