"""Response envelope shared by mutation endpoints."""

from typing import Generic, TypeVar

from pydantic import BaseModel, Field

DataT = TypeVar("DataT")


class ApiResponse(BaseModel, Generic[DataT]):
    """``{"success": ..., "message": ..., "data": ...}``"""

    success: bool = Field(default=True, description="Whether the operation succeeded")
    message: str = Field(default="", description="Human-readable outcome")
    data: DataT | None = Field(default=None, description="Affected record, when any")
