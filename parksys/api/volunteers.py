"""Volunteer endpoints, including the single skills-update handler."""

from fastapi import APIRouter, status

from parksys.api.deps import AuthUser, DbSession, Limit, Offset
from parksys.repositories import VolunteerRepository
from parksys.schemas.common import ApiResponse
from parksys.schemas.volunteer import (
    VolunteerCreate,
    VolunteerOut,
    VolunteerSkillsUpdate,
    VolunteerStatusUpdate,
    VolunteerUpdate,
)

router = APIRouter()
# Routes served outside the API prefix for older clients.
legacy_router = APIRouter()


@router.get("", response_model=list[VolunteerOut])
def list_volunteers(_user: AuthUser, db: DbSession, offset: Offset = 0, limit: Limit = 100) -> list[VolunteerOut]:
    """Active volunteers, newest first."""
    rows = VolunteerRepository(db).list_active(offset=offset, limit=limit)
    return [VolunteerOut.model_validate(v) for v in rows]


@router.get("/{volunteer_id}", response_model=VolunteerOut)
def get_volunteer(volunteer_id: int, _user: AuthUser, db: DbSession) -> VolunteerOut:
    return VolunteerOut.model_validate(VolunteerRepository(db).get_or_404(volunteer_id))


@router.post("", response_model=VolunteerOut, status_code=status.HTTP_201_CREATED)
def create_volunteer(body: VolunteerCreate, _user: AuthUser, db: DbSession) -> VolunteerOut:
    fields = body.model_dump(exclude_none=True)
    volunteer = VolunteerRepository(db).create_volunteer(**fields)
    return VolunteerOut.model_validate(volunteer)


@router.put("/{volunteer_id}", response_model=ApiResponse[VolunteerOut])
def update_volunteer(
    volunteer_id: int,
    body: VolunteerUpdate,
    _user: AuthUser,
    db: DbSession,
) -> ApiResponse[VolunteerOut]:
    """Write only the fields present in the body."""
    volunteer = VolunteerRepository(db).update_profile(
        volunteer_id, **body.model_dump(exclude_unset=True)
    )
    return ApiResponse(
        message="Volunteer updated",
        data=VolunteerOut.model_validate(volunteer),
    )


@legacy_router.post("/update-skills/{volunteer_id}", response_model=ApiResponse[VolunteerOut])
@router.post("/{volunteer_id}/skills", response_model=ApiResponse[VolunteerOut])
def update_volunteer_skills(
    volunteer_id: int,
    body: VolunteerSkillsUpdate,
    _user: AuthUser,
    db: DbSession,
) -> ApiResponse[VolunteerOut]:
    volunteer = VolunteerRepository(db).update_skills(volunteer_id, body.skills)
    return ApiResponse(
        message="Skills updated",
        data=VolunteerOut.model_validate(volunteer),
    )


@router.patch("/{volunteer_id}/status", response_model=ApiResponse[VolunteerOut])
def update_volunteer_status(
    volunteer_id: int,
    body: VolunteerStatusUpdate,
    _user: AuthUser,
    db: DbSession,
) -> ApiResponse[VolunteerOut]:
    volunteer = VolunteerRepository(db).set_status(volunteer_id, body.status)
    return ApiResponse(
        message=f"Volunteer status set to {body.status}",
        data=VolunteerOut.model_validate(volunteer),
    )


@router.delete("/{volunteer_id}", response_model=ApiResponse[VolunteerOut])
def delete_volunteer(volunteer_id: int, _user: AuthUser, db: DbSession) -> ApiResponse[VolunteerOut]:
    """Soft delete: the volunteer is marked inactive, never removed."""
    volunteer = VolunteerRepository(db).soft_delete(volunteer_id)
    return ApiResponse(
        message="Volunteer deactivated",
        data=VolunteerOut.model_validate(volunteer),
    )
