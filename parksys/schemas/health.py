"""Health check payload."""

from typing import Literal

from pydantic import BaseModel, Field

DatabaseState = Literal["connected", "disconnected"]


class HealthResponse(BaseModel):
    status: Literal["ok", "degraded"] = Field(
        description="'degraded' when the API is up but the database is unreachable"
    )
    service: str = "parksys"
    version: str
    environment: str = Field(description="APP_ENV (dev or prod)")
    database: DatabaseState
