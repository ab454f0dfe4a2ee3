"""Pydantic request/response schemas."""

from parksys.schemas.auth import CurrentUser, LoginRequest, LoginResponse, UserOut
from parksys.schemas.common import ApiResponse
from parksys.schemas.health import HealthResponse
from parksys.schemas.volunteer import (
    VolunteerCreate,
    VolunteerOut,
    VolunteerSkillsUpdate,
    VolunteerStatusUpdate,
    VolunteerUpdate,
)

__all__ = [
    "ApiResponse",
    "CurrentUser",
    "HealthResponse",
    "LoginRequest",
    "LoginResponse",
    "UserOut",
    "VolunteerCreate",
    "VolunteerOut",
    "VolunteerSkillsUpdate",
    "VolunteerStatusUpdate",
    "VolunteerUpdate",
]
