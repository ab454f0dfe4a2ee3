"""Activity endpoints."""

from fastapi import APIRouter, Response, status

from parksys.api.deps import AuthUser, DbSession, Limit, Offset
from parksys.repositories import ActivityRepository
from parksys.schemas.activity import ActivityCreate, ActivityOut, ActivityUpdate
from parksys.schemas.common import ApiResponse

router = APIRouter()


@router.get("", response_model=list[ActivityOut])
def list_activities(
    db: DbSession,
    park_id: int | None = None,
    category: str | None = None,
    offset: Offset = 0,
    limit: Limit = 100,
) -> list[ActivityOut]:
    rows = ActivityRepository(db).search(
        park_id=park_id, category=category, offset=offset, limit=limit
    )
    return [ActivityOut.model_validate(a) for a in rows]


@router.get("/{activity_id}", response_model=ActivityOut)
def get_activity(activity_id: int, db: DbSession) -> ActivityOut:
    return ActivityOut.model_validate(ActivityRepository(db).get_or_404(activity_id))


@router.post("", response_model=ActivityOut, status_code=status.HTTP_201_CREATED)
def create_activity(body: ActivityCreate, _user: AuthUser, db: DbSession) -> ActivityOut:
    activity = ActivityRepository(db).create_activity(**body.model_dump(exclude_none=True))
    return ActivityOut.model_validate(activity)


@router.put("/{activity_id}", response_model=ApiResponse[ActivityOut])
def update_activity(
    activity_id: int,
    body: ActivityUpdate,
    _user: AuthUser,
    db: DbSession,
) -> ApiResponse[ActivityOut]:
    activity = ActivityRepository(db).update_activity(activity_id, **body.model_dump(exclude_unset=True))
    return ApiResponse(message="Activity updated", data=ActivityOut.model_validate(activity))


@router.delete("/{activity_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_activity(activity_id: int, _user: AuthUser, db: DbSession) -> Response:
    ActivityRepository(db).delete(activity_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
