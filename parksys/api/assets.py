"""Asset inventory and asset category endpoints."""

from fastapi import APIRouter, Response, status

from parksys.api.deps import AdminUser, AuthUser, DbSession, Limit, Offset
from parksys.repositories import AssetCategoryRepository, AssetRepository
from parksys.schemas.asset import (
    AssetCategoryIn,
    AssetCategoryOut,
    AssetCreate,
    AssetOut,
    AssetUpdate,
)
from parksys.schemas.common import ApiResponse

router = APIRouter()
categories_router = APIRouter()


@categories_router.get("", response_model=list[AssetCategoryOut])
def list_asset_categories(_user: AuthUser, db: DbSession) -> list[AssetCategoryOut]:
    return [AssetCategoryOut.model_validate(c) for c in AssetCategoryRepository(db).list_all()]


@categories_router.post("", response_model=AssetCategoryOut, status_code=status.HTTP_201_CREATED)
def create_asset_category(body: AssetCategoryIn, _admin: AdminUser, db: DbSession) -> AssetCategoryOut:
    return AssetCategoryOut.model_validate(AssetCategoryRepository(db).create(**body.model_dump()))


@router.get("", response_model=list[AssetOut])
def list_assets(
    _user: AuthUser,
    db: DbSession,
    park_id: int | None = None,
    category_id: int | None = None,
    status: str | None = None,
    offset: Offset = 0,
    limit: Limit = 100,
) -> list[AssetOut]:
    rows = AssetRepository(db).search(
        park_id=park_id,
        category_id=category_id,
        status=status,
        offset=offset,
        limit=limit,
    )
    return [AssetOut.model_validate(a) for a in rows]


@router.get("/{asset_id}", response_model=AssetOut)
def get_asset(asset_id: int, _user: AuthUser, db: DbSession) -> AssetOut:
    return AssetOut.model_validate(AssetRepository(db).get_or_404(asset_id))


@router.post("", response_model=AssetOut, status_code=201)
def create_asset(body: AssetCreate, _user: AuthUser, db: DbSession) -> AssetOut:
    asset = AssetRepository(db).create_asset(**body.model_dump(exclude_none=True))
    return AssetOut.model_validate(asset)


@router.put("/{asset_id}", response_model=ApiResponse[AssetOut])
def update_asset(asset_id: int, body: AssetUpdate, _user: AuthUser, db: DbSession) -> ApiResponse[AssetOut]:
    asset = AssetRepository(db).update_asset(asset_id, **body.model_dump(exclude_unset=True))
    return ApiResponse(message="Asset updated", data=AssetOut.model_validate(asset))


@router.delete("/{asset_id}", status_code=204)
def delete_asset(asset_id: int, _user: AuthUser, db: DbSession) -> Response:
    AssetRepository(db).delete(asset_id)
    return Response(status_code=204)
