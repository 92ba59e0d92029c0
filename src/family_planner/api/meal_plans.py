"""Meal planning endpoints."""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING

from fastapi import APIRouter, HTTPException, Query, Request, Response, status

from family_planner.api.schemas import (
    MealPlanCreate,
    MealPlanDetailOut,
    MealPlanOut,
    MealPlanUpdate,
)
from family_planner.domain.models import MealPlanDetail, MealPlanEntry

if TYPE_CHECKING:
    from family_planner.containers import AppContainer

router = APIRouter(prefix="/api/meal-plans", tags=["meal-plans"])


@router.get("", response_model=list[MealPlanDetailOut])
async def list_meal_plans(
    request: Request,
    user_id: int | None = Query(default=None, alias="userId"),
    planned_date: date | None = Query(default=None, alias="date"),
) -> list[MealPlanDetail]:
    """Return entries by user, by date, or for the coming week."""
    container: AppContainer = request.app.state.container
    service = container.meal_plan_service
    if user_id is not None:
        return service.list_for_user(user_id)
    if planned_date is not None:
        return service.list_for_date(planned_date)
    return service.list_upcoming(date.today(), days=7)


@router.post("", response_model=MealPlanOut, status_code=status.HTTP_201_CREATED)
async def create_meal_plan(payload: MealPlanCreate, request: Request) -> MealPlanEntry:
    """Schedule a meal."""
    container: AppContainer = request.app.state.container
    return container.meal_plan_service.create(payload.model_dump())


@router.put("/{plan_id}", response_model=MealPlanOut)
async def update_meal_plan(
    plan_id: int, payload: MealPlanUpdate, request: Request
) -> MealPlanEntry:
    """Apply a partial update to an entry."""
    container: AppContainer = request.app.state.container
    plan = container.meal_plan_service.update(
        plan_id, payload.model_dump(exclude_unset=True)
    )
    if plan is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Meal plan not found"
        )
    return plan


@router.delete("/{plan_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_meal_plan(plan_id: int, request: Request) -> Response:
    """Remove an entry."""
    container: AppContainer = request.app.state.container
    if not container.meal_plan_service.delete(plan_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Meal plan not found"
        )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
