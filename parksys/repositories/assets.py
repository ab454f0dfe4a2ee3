"""Data access for assets and asset categories."""

from __future__ import annotations

from typing import Any

from parksys.core.errors import ValidationFailedError
from parksys.models import Asset, AssetCategory, User
from parksys.models.asset import ASSET_STATUSES
from parksys.repositories.base import BaseRepository


class AssetCategoryRepository(BaseRepository[AssetCategory]):
    model = AssetCategory
    label = "Asset category"

    def list_all(self) -> list[AssetCategory]:
        return self.session.query(AssetCategory).order_by(AssetCategory.name).all()


class AssetRepository(BaseRepository[Asset]):
    model = Asset
    label = "Asset"

    def search(
        self,
        park_id: int | None = None,
        category_id: int | None = None,
        status: str | None = None,
        offset: int = 0,
        limit: int = 100,
    ) -> list[Asset]:
        query = self.session.query(Asset)
        if park_id is not None:
            query = query.filter(Asset.park_id == park_id)
        if category_id is not None:
            query = query.filter(Asset.category_id == category_id)
        if status:
            if status not in ASSET_STATUSES:
                raise ValidationFailedError(f"Unknown asset status {status!r}")
            query = query.filter(Asset.status == status)
        return query.order_by(Asset.id).offset(offset).limit(limit).all()

    def create_asset(self, **fields: Any) -> Asset:
        self._check_references(fields)
        return self.create(**fields)

    def update_asset(self, asset_id: int, **fields: Any) -> Asset:
        self.get_or_404(asset_id)
        self._check_references(fields)
        return self.update_fields(asset_id, **fields)

    def _check_references(self, fields: dict[str, Any]) -> None:
        self._require_row(AssetCategory, fields.get("category_id"), "Asset category")
        self._require_park(fields.get("park_id"))
        self._require_row(User, fields.get("responsible_id"), "User")
