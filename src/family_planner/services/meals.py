"""Meal catalogue service."""

from dataclasses import dataclass
from typing import Protocol

from family_planner.domain.models import Meal


class MealRepository(Protocol):
    """Persistence interface for meals."""

    def get_meal(self, meal_id: int) -> Meal | None:
        """Return a meal by id, if present."""

    def list_meals(self) -> list[Meal]:
        """Return all meals."""

    def list_meals_by_creator(self, user_id: int) -> list[Meal]:
        """Return meals created by a user."""

    def create_meal(self, payload: dict[str, object], created_by: int) -> Meal:
        """Create a meal and return it."""


@dataclass
class MealService:
    """Application service for meals."""

    repository: MealRepository

    def get_meal(self, meal_id: int) -> Meal | None:
        """Return a meal by id."""
        return self.repository.get_meal(meal_id)

    def list_meals(self, created_by: int | None = None) -> list[Meal]:
        """List meals, optionally only those created by one user."""
        if created_by is not None:
            return self.repository.list_meals_by_creator(created_by)
        return self.repository.list_meals()

    def create_meal(self, payload: dict[str, object], created_by: int) -> Meal:
        """Create a meal from manual entry or an accepted suggestion."""
        return self.repository.create_meal(payload, created_by)
