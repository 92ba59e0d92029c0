"""Meal planning service and the date-range reader."""

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Protocol

from family_planner.domain.errors import InvalidRangeError, RetrievalError
from family_planner.domain.models import MealPlanDetail, MealPlanEntry
from family_planner.services.meals import MealRepository

logger = logging.getLogger(__name__)


class MealPlanRepository(Protocol):
    """Persistence interface for meal plan entries."""

    def get_meal_plan(self, plan_id: int) -> MealPlanEntry | None:
        """Return a meal plan entry by id, if present."""

    def list_meal_plans_by_user(self, user_id: int) -> list[MealPlanEntry]:
        """Return entries assigned to a user."""

    def list_meal_plans_by_date(self, planned_date: date) -> list[MealPlanEntry]:
        """Return entries planned exactly on a date."""

    def create_meal_plan(self, payload: dict[str, object]) -> MealPlanEntry:
        """Create an entry and return it."""

    def update_meal_plan(
        self, plan_id: int, updates: dict[str, object]
    ) -> MealPlanEntry | None:
        """Apply a partial update and return the entry."""

    def delete_meal_plan(self, plan_id: int) -> bool:
        """Delete an entry, returning False when it did not exist."""


def collect_plans_in_range(
    repository: MealPlanRepository, start_date: date, end_date: date
) -> list[MealPlanEntry]:
    """Return every entry planned from start_date through end_date inclusive.

    Days are read one at a time and concatenated in date order. A failure on
    any day aborts the whole read.
    """
    if start_date > end_date:
        raise InvalidRangeError(start_date, end_date)
    entries: list[MealPlanEntry] = []
    for day in _iter_days(start_date, end_date):
        try:
            entries.extend(repository.list_meal_plans_by_date(day))
        except Exception as exc:
            raise RetrievalError(
                f"Failed to read meal plans for {day.isoformat()}"
            ) from exc
    return entries


@dataclass
class MealPlanService:
    """Application service for scheduling meals."""

    repository: MealPlanRepository
    meal_repository: MealRepository

    def list_for_user(self, user_id: int) -> list[MealPlanDetail]:
        """Return a user's entries with their meals."""
        return self._with_meals(self.repository.list_meal_plans_by_user(user_id))

    def list_for_date(self, planned_date: date) -> list[MealPlanDetail]:
        """Return one day's entries with their meals."""
        return self._with_meals(self.repository.list_meal_plans_by_date(planned_date))

    def list_upcoming(self, start_date: date, days: int = 7) -> list[MealPlanDetail]:
        """Return entries for the given number of days starting at start_date."""
        end_date = start_date + timedelta(days=max(days, 1) - 1)
        entries = collect_plans_in_range(self.repository, start_date, end_date)
        return self._with_meals(entries)

    def create(self, payload: dict[str, object]) -> MealPlanEntry:
        """Schedule a meal."""
        return self.repository.create_meal_plan(payload)

    def update(self, plan_id: int, updates: dict[str, object]) -> MealPlanEntry | None:
        """Toggle completion or reassign an entry."""
        return self.repository.update_meal_plan(plan_id, updates)

    def delete(self, plan_id: int) -> bool:
        """Remove an entry."""
        return self.repository.delete_meal_plan(plan_id)

    def _with_meals(self, entries: list[MealPlanEntry]) -> list[MealPlanDetail]:
        details = []
        for entry in entries:
            meal = self.meal_repository.get_meal(entry.meal_id)
            if meal is None:
                logger.warning(
                    "Meal plan references a missing meal",
                    extra={"plan_id": entry.id, "meal_id": entry.meal_id},
                )
            details.append(
                MealPlanDetail(
                    id=entry.id,
                    meal_id=entry.meal_id,
                    planned_date=entry.planned_date,
                    meal_type=entry.meal_type,
                    user_id=entry.user_id,
                    completed=entry.completed,
                    meal=meal,
                )
            )
        return details


def _iter_days(start_date: date, end_date: date) -> Iterator[date]:
    day = start_date
    while day <= end_date:
        yield day
        day += timedelta(days=1)
