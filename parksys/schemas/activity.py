"""Request/response schemas for activities."""

from datetime import datetime

from pydantic import BaseModel, Field


class ActivityCreate(BaseModel):
    park_id: int
    title: str = Field(..., min_length=1, max_length=255)
    description: str | None = None
    category: str | None = Field(default=None, max_length=64)
    start_date: datetime
    end_date: datetime | None = None
    location: str | None = Field(default=None, max_length=255)
    capacity: int | None = Field(default=None, ge=0)
    instructor_id: int | None = None


class ActivityUpdate(BaseModel):
    park_id: int | None = None
    title: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = None
    category: str | None = Field(default=None, max_length=64)
    start_date: datetime | None = None
    end_date: datetime | None = None
    location: str | None = Field(default=None, max_length=255)
    capacity: int | None = Field(default=None, ge=0)
    instructor_id: int | None = None


class ActivityOut(BaseModel):
    model_config = {"from_attributes": True}

    id: int
    park_id: int
    title: str
    description: str | None = None
    category: str | None = None
    start_date: datetime
    end_date: datetime | None = None
    location: str | None = None
    capacity: int | None = None
    instructor_id: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
