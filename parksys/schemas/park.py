"""Request/response schemas for parks and amenities."""

from datetime import datetime

from pydantic import BaseModel, Field


class ParkFields(BaseModel):
    municipality_id: int | None = None
    park_type: str | None = Field(default=None, max_length=64)
    description: str | None = None
    postal_code: str | None = Field(default=None, max_length=16)
    latitude: str | None = Field(default=None, max_length=32)
    longitude: str | None = Field(default=None, max_length=32)
    area: float | None = Field(default=None, ge=0)
    opening_hours: str | None = Field(default=None, max_length=255)
    contact_email: str | None = Field(default=None, max_length=255)
    contact_phone: str | None = Field(default=None, max_length=50)


class ParkCreate(ParkFields):
    name: str = Field(..., min_length=1, max_length=255)
    address: str = Field(default="", max_length=512)


class ParkUpdate(ParkFields):
    name: str | None = Field(default=None, min_length=1, max_length=255)
    address: str | None = Field(default=None, max_length=512)


class ParkOut(BaseModel):
    model_config = {"from_attributes": True}

    id: int
    name: str
    municipality_id: int | None = None
    park_type: str | None = None
    description: str | None = None
    address: str
    postal_code: str | None = None
    latitude: str | None = None
    longitude: str | None = None
    area: float | None = None
    opening_hours: str | None = None
    contact_email: str | None = None
    contact_phone: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class AmenityIn(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    icon: str | None = Field(default=None, max_length=255)
    category: str | None = Field(default=None, max_length=64)
    icon_type: str = Field(default="system", max_length=32)
    custom_icon_url: str | None = Field(default=None, max_length=1024)


class AmenityOut(BaseModel):
    model_config = {"from_attributes": True}

    id: int
    name: str
    icon: str | None = None
    category: str | None = None
    icon_type: str
    custom_icon_url: str | None = None


class ParkAmenityCreate(BaseModel):
    amenity_id: int
    module_name: str | None = Field(default=None, max_length=255)
    surface_area: float | None = Field(default=None, ge=0)
    status: str = Field(default="active", max_length=32)
    description: str | None = None


class ParkAmenityOut(BaseModel):
    id: int
    park_id: int
    amenity_id: int
    amenity_name: str
    amenity_icon: str | None = None
    module_name: str | None = None
    surface_area: float | None = None
    status: str
    description: str | None = None


class AmenityUsage(BaseModel):
    id: int
    name: str
    category: str | None = None
    parks_count: int
    total_modules: int
    utilization_rate: int


class AmenityDashboard(BaseModel):
    total_amenities: int
    total_parks: int
    parks_with_amenities: int
    total_assignments: int
    average_amenities_per_park: float
    most_popular: list[AmenityUsage]
    amenities: list[AmenityUsage]
