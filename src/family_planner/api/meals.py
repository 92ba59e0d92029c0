"""Meal catalogue and suggestion endpoints."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi import APIRouter, HTTPException, Query, Request, status

from family_planner.api.schemas import MealCreate, MealOut, SuggestionRequest
from family_planner.domain.models import Meal
from family_planner.domain.suggestions import MealSuggestion

if TYPE_CHECKING:
    from family_planner.containers import AppContainer

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/meals", tags=["meals"])


@router.get("", response_model=list[MealOut])
async def list_meals(
    request: Request, created_by: int | None = Query(default=None, alias="createdBy")
) -> list[Meal]:
    """Return all meals, or the meals one member created."""
    container: AppContainer = request.app.state.container
    return container.meal_service.list_meals(created_by)


@router.post("", response_model=MealOut, status_code=status.HTTP_201_CREATED)
async def create_meal(payload: MealCreate, request: Request) -> Meal:
    """Create a meal from manual entry or an accepted suggestion."""
    container: AppContainer = request.app.state.container
    return container.meal_service.create_meal(
        payload.model_dump(exclude={"created_by"}), created_by=payload.created_by
    )


@router.post("/suggestions", response_model=list[MealSuggestion])
async def suggest_meals(
    payload: SuggestionRequest, request: Request
) -> list[MealSuggestion]:
    """Ask the language model for meal ideas."""
    container: AppContainer = request.app.state.container
    try:
        return await container.suggestion_service.suggest(
            cuisines=payload.cuisines,
            dietary=payload.dietary,
            meal_type=payload.meal_type,
        )
    except Exception as exc:
        logger.exception("AI meal suggestion failed")
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Failed to generate meal suggestions",
        ) from exc


@router.get("/{meal_id}", response_model=MealOut)
async def get_meal(meal_id: int, request: Request) -> Meal:
    """Return one meal."""
    container: AppContainer = request.app.state.container
    meal = container.meal_service.get_meal(meal_id)
    if meal is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Meal not found"
        )
    return meal
