"""Request/response schemas for advertisements."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field, model_validator

AdStatus = Literal["draft", "active", "paused", "expired"]


class AdvertisementCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)
    description: str | None = None
    image_url: str | None = Field(default=None, max_length=1024)
    target_url: str | None = Field(default=None, max_length=1024)
    campaign_name: str | None = Field(default=None, max_length=255)
    status: AdStatus = "draft"
    start_date: datetime | None = None
    end_date: datetime | None = None

    @model_validator(mode="after")
    def check_window(self) -> "AdvertisementCreate":
        if self.start_date and self.end_date and self.end_date.timestamp() < self.start_date.timestamp():
            raise ValueError("end_date must not be before start_date")
        return self


class AdvertisementUpdate(BaseModel):
    title: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = None
    image_url: str | None = Field(default=None, max_length=1024)
    target_url: str | None = Field(default=None, max_length=1024)
    campaign_name: str | None = Field(default=None, max_length=255)
    status: AdStatus | None = None
    start_date: datetime | None = None
    end_date: datetime | None = None


class AdvertisementOut(BaseModel):
    model_config = {"from_attributes": True}

    id: int
    title: str
    description: str | None = None
    image_url: str | None = None
    target_url: str | None = None
    campaign_name: str | None = None
    status: str
    start_date: datetime | None = None
    end_date: datetime | None = None
    created_by: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
