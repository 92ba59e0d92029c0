"""Family member endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, HTTPException, Request, status

from family_planner.api.schemas import Preferences, UserCreate, UserOut
from family_planner.domain.models import UserRecord

if TYPE_CHECKING:
    from family_planner.containers import AppContainer

router = APIRouter(prefix="/api/users", tags=["users"])


@router.get("", response_model=list[UserOut])
async def list_users(request: Request) -> list[UserRecord]:
    """Return every family member."""
    container: AppContainer = request.app.state.container
    return container.user_service.list_users()


@router.get("/{user_id}", response_model=UserOut)
async def get_user(user_id: int, request: Request) -> UserRecord:
    """Return one family member."""
    container: AppContainer = request.app.state.container
    user = container.user_service.get_user(user_id)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="User not found"
        )
    return user


@router.post("", response_model=UserOut, status_code=status.HTTP_201_CREATED)
async def create_user(payload: UserCreate, request: Request) -> UserRecord:
    """Register a family member."""
    container: AppContainer = request.app.state.container
    try:
        return container.user_service.register(payload.model_dump())
    except ValueError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)
        ) from exc


@router.put("/{user_id}/preferences", response_model=UserOut)
async def update_preferences(
    user_id: int, payload: Preferences, request: Request
) -> UserRecord:
    """Replace a member's cuisine and dietary preferences."""
    container: AppContainer = request.app.state.container
    user = container.user_service.update_preferences(user_id, payload.model_dump())
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="User not found"
        )
    return user
