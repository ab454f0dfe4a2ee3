"""Error taxonomy and the FastAPI handlers that turn it into JSON responses.

Every failure a request can hit ends up as ``{"success": false, "message": ...}``
with one of the statuses below; nothing escapes to crash the worker.

    ValidationFailedError    400
    InvalidCredentialsError  401
    ForbiddenError           403
    NotFoundError            404
    ConflictError            409
    anything else            500
"""

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

GENERIC_SERVER_ERROR = "Internal server error"


class ParkSysError(Exception):
    """Base class for errors that map to a specific HTTP status."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(message)


class ValidationFailedError(ParkSysError):
    """Missing or malformed input."""

    status_code = status.HTTP_400_BAD_REQUEST


class InvalidCredentialsError(ParkSysError):
    """Login failed. Deliberately carries no detail about which part was wrong."""

    status_code = status.HTTP_401_UNAUTHORIZED

    def __init__(self, message: str = "Invalid credentials") -> None:
        super().__init__(message)


class ForbiddenError(ParkSysError):
    """Authenticated, but the role does not allow the operation."""

    status_code = status.HTTP_403_FORBIDDEN


class NotFoundError(ParkSysError):
    """No row matches the requested id."""

    status_code = status.HTTP_404_NOT_FOUND


class ConflictError(ParkSysError):
    """A unique constraint would be violated."""

    status_code = status.HTTP_409_CONFLICT


def error_body(message: str, **extra: Any) -> dict[str, Any]:
    body: dict[str, Any] = {"success": False, "message": message}
    body.update(extra)
    return body


def register_error_handlers(app: FastAPI) -> None:
    """Register global exception handlers."""

    @app.exception_handler(ParkSysError)
    async def parksys_error_handler(request: Request, exc: ParkSysError) -> JSONResponse:
        if exc.status_code >= 500:
            logger.error(
                "Request failed",
                extra={"path": request.url.path, "method": request.method},
            )
        return JSONResponse(status_code=exc.status_code, content=error_body(exc.message))

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(_request: Request, exc: StarletteHTTPException) -> JSONResponse:
        message = exc.detail if isinstance(exc.detail, str) else "Request failed"
        return JSONResponse(
            status_code=exc.status_code,
            content=error_body(message),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(_request: Request, exc: RequestValidationError) -> JSONResponse:
        errors = [
            {"loc": list(err.get("loc", ())), "msg": err.get("msg", ""), "type": err.get("type", "")}
            for err in exc.errors()
        ]
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=error_body("Validation error", errors=errors),
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception(
            "Unhandled exception on %s %s",
            request.method,
            request.url.path,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error_body(GENERIC_SERVER_ERROR),
        )
