"""Request/response schemas for volunteers."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field, field_validator

VolunteerStatus = Literal["active", "inactive", "pending", "suspended"]


def _clean_interest_areas(value: list[str] | None) -> list[str] | None:
    if value is None:
        return None
    seen: list[str] = []
    for item in value:
        item = item.strip()
        if item and item not in seen:
            seen.append(item)
    return seen


class VolunteerBase(BaseModel):
    full_name: str | None = Field(default=None, max_length=255)
    email: str | None = Field(default=None, max_length=255)
    phone: str | None = Field(default=None, max_length=50)
    address: str | None = None
    emergency_contact: str | None = Field(default=None, max_length=255)
    emergency_phone: str | None = Field(default=None, max_length=50)
    gender: str | None = Field(default=None, max_length=32)
    previous_experience: str | None = None
    skills: str | None = None
    availability: str | None = Field(default=None, max_length=255)
    interest_areas: list[str] | None = Field(
        default=None, description="Areas of interest, e.g. ['nature', 'events']"
    )
    preferred_park_id: int | None = None
    legal_consent: bool | None = None

    @field_validator("interest_areas")
    @classmethod
    def clean_interest_areas(cls, v: list[str] | None) -> list[str] | None:
        return _clean_interest_areas(v)


class VolunteerCreate(VolunteerBase):
    full_name: str = Field(..., min_length=1, max_length=255)
    user_id: int | None = None
    status: VolunteerStatus = "active"


class VolunteerUpdate(VolunteerBase):
    """Partial update: only fields present in the request body are written."""

    status: VolunteerStatus | None = None


class VolunteerSkillsUpdate(BaseModel):
    skills: str = Field(..., min_length=1, max_length=2000, description="Free-text skills")

    @field_validator("skills")
    @classmethod
    def skills_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("skills must not be blank")
        return v.strip()


class VolunteerStatusUpdate(BaseModel):
    status: VolunteerStatus


class VolunteerOut(BaseModel):
    model_config = {"from_attributes": True}

    id: int
    user_id: int | None = None
    full_name: str
    email: str | None = None
    phone: str | None = None
    address: str | None = None
    emergency_contact: str | None = None
    emergency_phone: str | None = None
    gender: str | None = None
    previous_experience: str | None = None
    skills: str | None = None
    availability: str | None = None
    interest_areas: list[str] | None = None
    preferred_park_id: int | None = None
    legal_consent: bool = False
    status: str
    total_hours: int = 0
    created_at: datetime | None = None
    updated_at: datetime | None = None
