"""Request/response schemas for auth and user endpoints."""

from typing import Literal

from pydantic import BaseModel, Field

from parksys.core.security import PASSWORD_MAX_LEN, PASSWORD_MIN_LEN

Role = Literal[
    "super_admin",
    "admin",
    "director",
    "manager",
    "editor",
    "instructor",
    "volunteer",
    "user",
]


class LoginRequest(BaseModel):
    """Credentials for login. ``username`` may also be the account's email."""

    username: str = Field(..., description="Username or email")
    password: str = Field(..., description="Password")


class UserOut(BaseModel):
    """User as returned to clients; never includes the password hash."""

    model_config = {"from_attributes": True}

    id: int
    username: str
    email: str | None = None
    full_name: str | None = None
    role: str
    municipality_id: int | None = None
    is_active: bool = True


class LoginResponse(BaseModel):
    """Authenticated user plus JWT access token."""

    user: UserOut
    access_token: str = Field(..., description="JWT access token")
    token_type: str = Field(default="bearer", description="Token type")


class CurrentUser(BaseModel):
    """Authenticated user (id, username, role) for dependency injection."""

    model_config = {"from_attributes": True}

    id: int
    username: str
    role: str


class UserCreate(BaseModel):
    username: str = Field(..., min_length=1, max_length=255)
    password: str = Field(..., min_length=PASSWORD_MIN_LEN, max_length=PASSWORD_MAX_LEN)
    role: Role = "user"
    email: str | None = Field(default=None, max_length=255)
    full_name: str | None = Field(default=None, max_length=255)
    municipality_id: int | None = None


class UsersListResponse(BaseModel):
    """Response for GET /users (admin only)."""

    users: list[UserOut]
