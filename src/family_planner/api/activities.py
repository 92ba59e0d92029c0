"""Family calendar endpoints."""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING

from fastapi import APIRouter, HTTPException, Query, Request, Response, status

from family_planner.api.schemas import (
    ActivityCreate,
    ActivityDetailOut,
    ActivityOut,
    ActivityUpdate,
)
from family_planner.domain.activities import Activity, ActivityDetail

if TYPE_CHECKING:
    from family_planner.containers import AppContainer

router = APIRouter(prefix="/api/activities", tags=["activities"])


@router.get("", response_model=list[ActivityDetailOut])
async def list_activities(
    request: Request,
    user_id: int | None = Query(default=None, alias="userId"),
    day: date | None = Query(default=None, alias="date"),
) -> list[ActivityDetail]:
    """Return activities with their assigned and creating users."""
    container: AppContainer = request.app.state.container
    return container.activity_service.list_activities(user_id=user_id, day=day)


@router.post("", response_model=ActivityOut, status_code=status.HTTP_201_CREATED)
async def create_activity(payload: ActivityCreate, request: Request) -> Activity:
    """Schedule an activity."""
    container: AppContainer = request.app.state.container
    return container.activity_service.create(
        payload.model_dump(exclude={"created_by"}), created_by=payload.created_by
    )


@router.put("/{activity_id}", response_model=ActivityOut)
async def update_activity(
    activity_id: int, payload: ActivityUpdate, request: Request
) -> Activity:
    """Apply a partial update to an activity."""
    container: AppContainer = request.app.state.container
    activity = container.activity_service.update(
        activity_id, payload.model_dump(exclude_unset=True)
    )
    if activity is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Activity not found"
        )
    return activity


@router.delete("/{activity_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_activity(activity_id: int, request: Request) -> Response:
    """Remove an activity."""
    container: AppContainer = request.app.state.container
    if not container.activity_service.delete(activity_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Activity not found"
        )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
