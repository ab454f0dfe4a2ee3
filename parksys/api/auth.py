"""Login, current-user and admin user-management endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from parksys.api.deps import AdminUser, AuthUser, DbSession, get_app_settings
from parksys.core.config import Settings
from parksys.repositories import UserRepository
from parksys.schemas.auth import (
    LoginRequest,
    LoginResponse,
    UserCreate,
    UserOut,
    UsersListResponse,
)
from parksys.services.auth import authenticate

router = APIRouter()


@router.post("/login", response_model=LoginResponse)
def login(
    body: LoginRequest,
    db: DbSession,
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> LoginResponse:
    """
    Authenticate with username (or email) and password; returns the user and a JWT.
    Include the token in the Authorization header as: Bearer <access_token>
    """
    result = authenticate(db, body.username, body.password, settings)
    return LoginResponse(
        user=UserOut.model_validate(result.user),
        access_token=result.access_token,
        token_type="bearer",
    )


@router.get("/me", response_model=UserOut)
def me(current_user: AuthUser, db: DbSession) -> UserOut:
    return UserOut.model_validate(UserRepository(db).get_or_404(current_user.id))


@router.get("/users", response_model=UsersListResponse)
def list_users(_admin: AdminUser, db: DbSession) -> UsersListResponse:
    """List all users (admin only)."""
    users = UserRepository(db).list(limit=1000)
    return UsersListResponse(users=[UserOut.model_validate(u) for u in users])


@router.post("/users", response_model=UserOut, status_code=status.HTTP_201_CREATED)
def create_user(body: UserCreate, _admin: AdminUser, db: DbSession) -> UserOut:
    user = UserRepository(db).create_user(
        username=body.username.strip(),
        password=body.password,
        role=body.role,
        email=body.email,
        full_name=body.full_name,
        municipality_id=body.municipality_id,
    )
    return UserOut.model_validate(user)
