"""Request/response schemas for assets and asset categories."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field

AssetStatus = Literal["active", "maintenance", "retired", "lost"]


class AssetCategoryIn(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    description: str | None = None


class AssetCategoryOut(BaseModel):
    model_config = {"from_attributes": True}

    id: int
    name: str
    description: str | None = None


class AssetCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    serial_number: str | None = Field(default=None, max_length=255)
    category_id: int
    park_id: int
    status: AssetStatus = "active"
    condition: str | None = Field(default=None, max_length=32)
    location_description: str | None = Field(default=None, max_length=512)
    acquisition_cost: float | None = Field(default=None, ge=0)
    responsible_id: int | None = None
    notes: str | None = None


class AssetUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=255)
    serial_number: str | None = Field(default=None, max_length=255)
    category_id: int | None = None
    park_id: int | None = None
    status: AssetStatus | None = None
    condition: str | None = Field(default=None, max_length=32)
    location_description: str | None = Field(default=None, max_length=512)
    acquisition_cost: float | None = Field(default=None, ge=0)
    responsible_id: int | None = None
    notes: str | None = None


class AssetOut(BaseModel):
    model_config = {"from_attributes": True}

    id: int
    name: str
    serial_number: str | None = None
    category_id: int
    park_id: int
    status: str
    condition: str | None = None
    location_description: str | None = None
    acquisition_cost: float | None = None
    responsible_id: int | None = None
    notes: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
