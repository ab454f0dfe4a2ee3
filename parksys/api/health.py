"""Liveness plus a database round trip through the request's pooled session."""

from typing import Annotated

from fastapi import APIRouter, Depends

from parksys import __version__
from parksys.api.deps import DbSession, get_app_settings
from parksys.core.config import Settings
from parksys.core.database import check_db_connected
from parksys.schemas.health import HealthResponse

router = APIRouter()


@router.get("", response_model=HealthResponse)
def get_health(
    db: DbSession,
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> HealthResponse:
    """Always 200 so load balancers can tell a live process from a dead one."""
    connected = check_db_connected(db)
    return HealthResponse(
        status="ok" if connected else "degraded",
        version=__version__,
        environment=settings.APP_ENV,
        database="connected" if connected else "disconnected",
    )
